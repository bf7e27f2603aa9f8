import logging

import pytest

import fast_rsqrt

device = fast_rsqrt.device

OP_MARKERS = {
    "q_rsqrt": "scalar fast inverse square root",
    "bitcast": "binary32 <-> int32 reinterpretation",
    "rsqrt": "elementwise tensor rsqrt",
    "rsqrt_": "in-place elementwise tensor rsqrt",
    "inplace": "in-place operators",
    "runtime": "device, tune config and registration",
}


def pytest_addoption(parser):
    parser.addoption(
        "--ref",
        action="store",
        default=device,
        required=False,
        choices=sorted({device, "cpu"}),
        help="device to run reference tests on",
    )
    parser.addoption(
        "--mode",
        action="store",
        default="normal",
        required=False,
        choices=["normal", "quick"],
        help="run tests on normal or quick mode",
    )
    parser.addoption(
        "--record",
        action="store",
        default="none",
        required=False,
        choices=["none", "log"],
        help="tests function param recorded in log files or not",
    )


def pytest_configure(config):
    for name, description in OP_MARKERS.items():
        config.addinivalue_line("markers", f"{name}: {description}")

    global TO_CPU
    TO_CPU = config.getoption("--ref") == "cpu"

    global QUICK_MODE
    QUICK_MODE = config.getoption("--mode") == "quick"

    global RECORD_LOG
    RECORD_LOG = config.getoption("--record") == "log"
    if RECORD_LOG:
        cmd_args = [
            arg.replace(".py", "").replace("=", "_").replace("/", "_")
            for arg in config.invocation_params.args
        ]
        logging.basicConfig(
            filename="result_{}.log".format("_".join(cmd_args)).replace("_-", "-"),
            filemode="w",
            level=logging.INFO,
            format="[%(levelname)s] %(message)s",
        )


def pytest_runtest_teardown(item, nextitem):
    if not RECORD_LOG:
        return
    if hasattr(item, "callspec"):
        op_marks = [
            mark.name for mark in item.iter_markers() if mark.name in OP_MARKERS
        ]
        if op_marks:
            logging.info(
                "%s %s %s", item.function.__name__, op_marks, item.callspec.params
            )
        else:
            logging.warning("There is no mark at {}".format(item.function.__name__))
