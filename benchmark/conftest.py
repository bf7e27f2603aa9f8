import json
import logging

import torch

import fast_rsqrt
from benchmark.attri_util import (
    DEFAULT_ITER_COUNT,
    DEFAULT_WARMUP_COUNT,
    FLOAT_DTYPES,
    BenchMode,
)

device = fast_rsqrt.device


class BenchConfig:
    def __init__(self):
        self.mode = BenchMode.KERNEL if device == "cuda" else BenchMode.OPERATOR
        self.warm_up = DEFAULT_WARMUP_COUNT
        self.repetition = DEFAULT_ITER_COUNT
        self.record_log = False
        self.user_desired_dtypes = None


Config = BenchConfig()


def pytest_addoption(parser):
    parser.addoption(
        "--mode",
        action="store",
        default=Config.mode.value,
        required=False,
        choices=[mode.value for mode in BenchMode],
        help=(
            "Specify how to measure latency, 'kernel' for device kernel "
            "or 'operator' for end2end operator."
        ),
    )
    parser.addoption(
        "--warmup",
        default=DEFAULT_WARMUP_COUNT,
        type=int,
        help="Number of warmup runs before benchmark run.",
    )
    parser.addoption(
        "--iter",
        default=DEFAULT_ITER_COUNT,
        type=int,
        help="Number of reps for each benchmark run.",
    )
    parser.addoption(
        "--dtypes",
        default=[],
        nargs="+",
        choices=[str(dtype).split(".")[-1] for dtype in FLOAT_DTYPES],
        help="List of dtypes to benchmark, e.g. --dtypes float16 float32",
    )
    parser.addoption(
        "--record",
        action="store",
        default="none",
        required=False,
        choices=["none", "log"],
        help="Benchmark info recorded in log files or not",
    )


def pytest_configure(config):
    config.addinivalue_line("markers", "rsqrt: elementwise tensor rsqrt")

    mode_value = config.getoption("--mode")
    Config.mode = BenchMode(mode_value)
    if Config.mode == BenchMode.KERNEL and device != "cuda":
        raise ValueError("Kernel mode needs a CUDA device, use --mode operator")

    Config.warm_up = config.getoption("--warmup")
    Config.repetition = config.getoption("--iter")
    Config.user_desired_dtypes = [
        getattr(torch, dtype) for dtype in config.getoption("--dtypes")
    ] or None

    Config.record_log = config.getoption("--record") == "log"
    if Config.record_log:
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


def record_result(result):
    if Config.record_log:
        logging.info(json.dumps(result.to_dict()))
