"""Unsigned views of fixed-width words.

A negative word is read as its two's-complement bit pattern, so ``-1`` at
int32 is ``4294967295``. Quotients and remainders are returned as signed
words again, matching how the bits would be stored.
"""

from __future__ import annotations

import math

from int_kernel.core.errors import ZeroModulusError
from int_kernel.core.widths import INT64, IntWidth, resolve_width


def _fixed(width: IntWidth | str) -> IntWidth:
    width = resolve_width(width)
    if not width.is_fixed:
        raise ValueError(f"Unsigned operations need a fixed width, got {width.name}")
    return width


def to_unsigned(v: int, *, width: IntWidth | str = INT64) -> int:
    """Return the unsigned value of the word v as a Python int."""
    width = _fixed(width)
    return width.require(v, "v") & width.mask


def divide_unsigned(dividend: int, divisor: int, *, width: IntWidth | str = INT64) -> int:
    """Unsigned quotient of two words.

    Raises:
        ZeroModulusError: If divisor is 0.
    """
    width = _fixed(width)
    dividend = width.require(dividend, "dividend") & width.mask
    divisor = width.require(divisor, "divisor") & width.mask
    if divisor == 0:
        raise ZeroModulusError("divide_unsigned")
    return width.wrap(dividend // divisor)


def remainder_unsigned(dividend: int, divisor: int, *, width: IntWidth | str = INT64) -> int:
    """Unsigned remainder of two words.

    Raises:
        ZeroModulusError: If divisor is 0.
    """
    width = _fixed(width)
    dividend = width.require(dividend, "dividend") & width.mask
    divisor = width.require(divisor, "divisor") & width.mask
    if divisor == 0:
        raise ZeroModulusError("remainder_unsigned")
    return width.wrap(dividend % divisor)


def uisqrt(n: int, *, width: IntWidth | str = INT64) -> int:
    """Integer square root of the word n read as unsigned."""
    width = _fixed(width)
    return math.isqrt(width.require(n, "n") & width.mask)
