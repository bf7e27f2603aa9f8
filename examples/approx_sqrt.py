#!/usr/bin/env python3
"""
Approximate square root through the fast inverse square root.

Prints ``1 / q_rsqrt(3.4)`` with six decimals: 1.843921.
"""
import sys

from fast_rsqrt import q_rsqrt


def main():
    print("%f" % (1.0 / q_rsqrt(3.4)))
    return 0


if __name__ == "__main__":
    sys.exit(main())
