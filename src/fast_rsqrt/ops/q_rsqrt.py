import logging

import numpy as np

from fast_rsqrt.utils.bitcast import as_float32, as_int32

logger = logging.getLogger(__name__)

MAGIC = 0x5F3759DF
THREEHALFS = np.float32(1.5)
HALF = np.float32(0.5)


def q_rsqrt(n: float) -> float:
    """Approximate ``1 / sqrt(n)`` for a binary32 ``n``.

    The bits of ``n`` are read as a signed int32 ``i``; ``MAGIC - (i >> 1)``
    reinterpreted as a float is a first guess at the result, roughly halving
    and negating ``log2(n)``. One Newton-Raphson step on ``f(y) = 1/y**2 - n``
    then refines it. All arithmetic stays in binary32 and int32.

    Parameters
    ----------
    n : float
        A positive, finite, normal value. It is rounded to binary32.

    Returns
    -------
    float
        A binary32-representable approximation with relative error below
        about 0.18%.

    Notes
    -----
    Nothing is validated. Zero, negative, subnormal, NaN and infinite inputs
    return whatever the bit arithmetic produces, with no exception and no
    floating point warning.

    Examples
    --------
    >>> round(q_rsqrt(4.0), 3)
    0.499
    """
    logger.debug("FAST_RSQRT Q_RSQRT")
    # one-element arrays: int32 overflow wraps silently, as in C
    with np.errstate(all="ignore"):
        x = np.asarray([n], dtype=np.float32)
        x2 = x * HALF
        i = as_int32(x)
        i = np.int32(MAGIC) - (i >> 1)
        y = as_float32(i)
        y = y * (THREEHALFS - (x2 * y * y))
    return float(y[0])
