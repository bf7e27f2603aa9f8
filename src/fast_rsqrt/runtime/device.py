import logging
import os

import torch

from . import error

logger = logging.getLogger(__name__)

SUPPORTED_DEVICES = ("cuda", "cpu")


# A singleton class to manage device context.
class DeviceDetector(object):
    _instance = None

    def __new__(cls, *args, **kargs):
        if cls._instance is None:
            cls._instance = super(DeviceDetector, cls).__new__(cls)
        return cls._instance

    def __init__(self, device_name=None):
        if not hasattr(self, "initialized"):
            self.initialized = True
            # name is like 'cuda' or 'cpu'
            self.name = self.get_device(device_name)
            # dispatch_key is like 'CUDA', used when registering into aten
            self.dispatch_key = self.name.upper()
            self.support_triton = self.name == "cuda"
            self.device_count = (
                torch.cuda.device_count() if self.name == "cuda" else 1
            )
            logger.debug("fast_rsqrt running on %s", self.name)

    def get_device(self, device_name=None):
        device_name = device_name or self._get_device_from_env()
        if device_name is not None:
            if device_name not in SUPPORTED_DEVICES:
                error.device_not_supported(device_name, SUPPORTED_DEVICES)
            return device_name
        return "cuda" if torch.cuda.is_available() else "cpu"

    def _get_device_from_env(self):
        device_from_env = os.environ.get("FAST_RSQRT_DEVICE")
        return device_from_env or None
