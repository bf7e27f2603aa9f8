import logging

from . import error
from .device import DeviceDetector

logger = logging.getLogger(__name__)


class Register:
    """Install ``(aten_name, fn)`` pairs on a ``torch.library.Library``.

    Kernels go to the dispatch key of the detected device, so only tensors
    on that device are served by fast_rsqrt.
    """

    def __init__(self, config, user_unused_ops_list=None, lib=None):
        self.device = DeviceDetector()
        self.lib = lib
        self.reg_key = self.device.dispatch_key

        self.all_ops = []
        self.unused_ops = list(user_unused_ops_list or [])
        self.config = config
        self.config_filter()
        self.for_each()

    def config_filter(self):
        self.config = [
            item
            for item in self.config
            if item[0] not in self.unused_ops and item[1].__name__ not in self.unused_ops
        ]

    def register_impl(self, key, fn):
        logger.debug("register %s for %s", key, self.reg_key)
        self.all_ops.append(key)
        self.lib.impl(key, fn, self.reg_key)

    def for_each(self):
        try:
            for key, func in self.config:
                self.register_impl(key, func)
        except Exception as e:
            error.register_error(e)

    def get_all_ops(self):
        return self.all_ops

    def get_unused_ops(self):
        return self.unused_ops

    def get_current_device(self):
        return self.device.name
