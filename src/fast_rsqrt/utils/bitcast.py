"""Exact reinterpretation between IEEE754 binary32 values and int32 bits.

These helpers copy bits through numpy dtype views. No numeric conversion
happens between the two sides, so ``bits_to_float(float_to_bits(x))`` is
bit-identical to ``x`` rounded to binary32, NaN payloads included.
"""
import numpy as np

INT32_MASK = 0xFFFFFFFF


def float_to_bits(value) -> int:
    """Return the binary32 encoding of ``value`` as a signed 32-bit integer.

    Python floats are rounded to binary32 first.

    Examples
    --------
    >>> float_to_bits(1.0)
    1065353216
    >>> hex(float_to_bits(-2.0) & INT32_MASK)
    '0xc0000000'
    """
    return int(np.asarray([value], dtype=np.float32).view(np.int32)[0])


def bits_to_float(bits: int) -> float:
    """Return the binary32 value whose encoding is ``bits``.

    ``bits`` may be given signed or unsigned; only the low 32 bits are used.
    """
    raw = np.asarray([bits & INT32_MASK], dtype=np.uint32)
    return float(raw.view(np.float32)[0])


def as_int32(values: np.ndarray) -> np.ndarray:
    """View a float32 array as int32 without copying."""
    return np.ascontiguousarray(values, dtype=np.float32).view(np.int32)


def as_float32(bits: np.ndarray) -> np.ndarray:
    """View an int32 array as float32 without copying."""
    return np.ascontiguousarray(bits, dtype=np.int32).view(np.float32)
