import logging

import torch

from . import testing  # noqa: F401
from . import runtime
from .logging_utils import setup_fast_rsqrt_logging, teardown_fast_rsqrt_logging
from .ops import *  # noqa: F403
from .runtime.register import Register

__version__ = "0.1"
device = runtime.device.name
aten_lib = torch.library.Library("aten", "IMPL")
registrar = Register
current_work_registrar = None

logger = logging.getLogger(__name__)


def enable(
    lib=aten_lib,
    unused=None,
    registrar=registrar,
    record=False,
    once=False,
    path=None,
):
    global current_work_registrar
    current_work_registrar = registrar(
        (
            ("rsqrt", rsqrt),  # noqa: F405
            ("rsqrt_", rsqrt_),  # noqa: F405
        ),
        user_unused_ops_list=[] if unused is None else unused,
        lib=lib,
    )
    setup_fast_rsqrt_logging(path=path, record=record, once=once)
    logger.debug("enabled %s on %s", all_ops(), device)


class use_fast_rsqrt:
    """Route ``torch.rsqrt`` and ``Tensor.rsqrt_`` through the approximation.

    Examples
    --------
    >>> with fast_rsqrt.use_fast_rsqrt():
    ...     y = torch.rsqrt(x)
    """

    def __init__(self, unused=None, record=False, once=False, path=None):
        self.lib = torch.library.Library("aten", "IMPL")
        self.unused = [] if unused is None else unused
        self.registrar = Register
        self.record = record
        self.once = once
        self.path = path

    def __enter__(self):
        enable(
            lib=self.lib,
            unused=self.unused,
            registrar=self.registrar,
            record=self.record,
            once=self.once,
            path=self.path,
        )
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        global current_work_registrar
        current_work_registrar = None
        # dropping the last reference to the library deregisters its kernels
        del self.lib
        del self.registrar
        if self.record:
            teardown_fast_rsqrt_logging()


def all_ops():
    if current_work_registrar is None:
        return []
    return current_work_registrar.get_all_ops()


__all__ = [
    "enable",
    "use_fast_rsqrt",
    "all_ops",
    "q_rsqrt",
    "rsqrt",
    "rsqrt_",
]
