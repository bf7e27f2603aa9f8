from fast_rsqrt.ops.q_rsqrt import MAGIC, q_rsqrt
from fast_rsqrt.ops.rsqrt import rsqrt, rsqrt_

__all__ = [
    "MAGIC",
    "q_rsqrt",
    "rsqrt",
    "rsqrt_",
]
