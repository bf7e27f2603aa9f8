def device_not_supported(device_name, supported):
    raise RuntimeError(
        f"The {device_name} device is not supported currently. "
        f"Choose one of {list(supported)}."
    )


def register_error(e):
    raise RuntimeError(
        e, "An error was encountered while registering the fast_rsqrt operator."
    )


def tune_config_not_found(op_name):
    raise RuntimeError(f"No tune config found for {op_name}")
