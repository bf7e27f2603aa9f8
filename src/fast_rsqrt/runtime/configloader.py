import logging
import os

import triton
import yaml

from . import error

logger = logging.getLogger(__name__)

DEFAULT_TUNE_CONFIG = os.path.join(
    os.path.dirname(os.path.abspath(__file__)), "tune_configs.yaml"
)


def load_tune_config(file_path=None, file_mode="r"):
    file_path = file_path or os.environ.get(
        "FAST_RSQRT_TUNE_CONFIG", DEFAULT_TUNE_CONFIG
    )
    try:
        with open(file_path, file_mode) as file:
            config = yaml.safe_load(file)
    except FileNotFoundError:
        raise FileNotFoundError(f"Configuration file not found: {file_path}")
    except yaml.YAMLError as e:
        raise ValueError(f"Failed to parse YAML file: {e}")
    logger.debug("loaded tune config from %s", file_path)
    return config or {}


class ConfigLoader(object):
    _instance = None

    def __new__(cls, *args, **kargs):
        if cls._instance is None:
            cls._instance = super(ConfigLoader, cls).__new__(cls)
        return cls._instance

    def __init__(self, file_path=None):
        if not hasattr(self, "initialized"):
            self.initialized = True
            # primitive_yaml_config is simply the dictionary returned by yaml
            self.primitive_yaml_config = load_tune_config(file_path)
            # loaded_triton_config is wrapped in triton.Config according to primitive_yaml_config
            self.loaded_triton_config = {}
            self.triton_config_default = {
                "num_stages": 2,
                "num_warps": 4,
            }
            self.load_all()

    def load_all(self):
        for key in self.primitive_yaml_config:
            self.loaded_triton_config[key] = self.get_tuned_config(key)

    def get_tuned_config(self, op_name):
        if op_name in self.loaded_triton_config:
            return self.loaded_triton_config[op_name]

        if op_name not in self.primitive_yaml_config:
            error.tune_config_not_found(op_name)

        configs = []
        for single_config in self.primitive_yaml_config[op_name]:
            current_config = dict(self.triton_config_default)
            for default_param in current_config:
                if default_param in single_config:
                    current_config[default_param] = single_config[default_param]
            configs.append(
                triton.Config(
                    single_config["META"],
                    num_warps=current_config["num_warps"],
                    num_stages=current_config["num_stages"],
                )
            )
        return configs
