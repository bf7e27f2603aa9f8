from . import error
from .configloader import ConfigLoader
from .device import DeviceDetector

device = DeviceDetector()
config_loader = ConfigLoader()


def get_tuned_config(op_name):
    return config_loader.get_tuned_config(op_name)


