from fast_rsqrt.utils.bitcast import (
    as_float32,
    as_int32,
    bits_to_float,
    float_to_bits,
)

__all__ = [
    "as_float32",
    "as_int32",
    "bits_to_float",
    "float_to_bits",
]
