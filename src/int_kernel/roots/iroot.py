"""Integer roots truncated toward zero.

Fixed widths seed the root with a floating-point estimate and correct it by
one step in either direction, comparing exact powers against ``n``. Powers
of at least ``bits - 1`` have only the roots -2, -1, 0 and 1 and are decided
directly. Arbitrary-precision values outside the 64-bit range use integer
Newton iteration instead.
"""

from __future__ import annotations

import math

from int_kernel.arithmetic.powers import int_pow, int_pow_exact
from int_kernel.core.errors import ArithmeticDomainError, IntegerOverflowError
from int_kernel.core.widths import BIG, INT64, IntWidth, resolve_width
from int_kernel.roots.tables import MAX_ROOTS, MIN_VALUE_ROOTS


def isqrt(n: int, *, width: IntWidth | str = INT64) -> int:
    """Integer square root.

    Computed exactly by ``math.isqrt`` at every width, so unlike ``iroot``
    there is no floating-point estimate to correct.

    Args:
        n: Non-negative radicand.
        width: Integer width of n.

    Returns:
        The largest r with ``r*r <= n``.

    Raises:
        ArithmeticDomainError: If n is negative.
    """
    width = resolve_width(width)
    n = width.require(n, "n")
    if n < 0:
        raise ArithmeticDomainError("Square root of negative number is undefined")
    return math.isqrt(n)


def icbrt(n: int, *, width: IntWidth | str = INT64) -> int:
    """Integer cube root, truncated toward zero for negative n."""
    return iroot(n, 3, width=width)


def floor_root(n: int, power: int) -> int:
    """Floor of the power-th root of a non-negative integer.

    Integer Newton iteration started above the root, so it descends
    monotonically and stops at the floor.

    Args:
        n: Non-negative radicand of any size.
        power: Degree of the root, at least 2.

    Returns:
        The largest r with ``r**power <= n``.
    """
    if n < 2:
        return n
    x = 1 << -(-n.bit_length() // power)
    while True:
        y = ((power - 1) * x + n // x ** (power - 1)) // power
        if y >= x:
            return x
        x = y


def _small_power_root(n: int, power: int) -> int:
    if power < 0:
        if n in (-1, 1):
            return n
        if n == 0:
            raise ArithmeticDomainError("Negative root of zero is infinity")
        return 0
    if power == 0:
        if n == 0:
            return 0
        if n == 1:
            raise ArithmeticDomainError("Zero root of one is undefined")
        raise ArithmeticDomainError("Zero root of positive number is infinity")
    if power == 1:
        return n
    return math.isqrt(n)


def _fixed_root(n: int, power: int, width: IntWidth) -> int:
    top = width.bits - 1
    if power >= top:
        if power == top and n == width.min_value:
            return -2
        return -1 if n < 0 else (0 if n == 0 else 1)
    if n == width.min_value:
        return MIN_VALUE_ROOTS[width.name].get(power, -2)

    root = int(math.pow(abs(n), 1.0 / power) + 0.5)
    root = min(root, MAX_ROOTS[width.name][power])
    if n < 0:
        root = -root
    power_of_root = int_pow(root, power, width=width)
    if power_of_root == n:
        return root

    if n >= 0:
        if power_of_root < 0 or power_of_root > n:
            return root - 1
        try:
            following = int_pow_exact(root + 1, power, width=width)
        except IntegerOverflowError:
            return root
        return root + 1 if 0 < following <= n else root

    if power_of_root >= 0 or power_of_root < n:
        return root + 1
    try:
        following = int_pow_exact(root - 1, power, width=width)
    except IntegerOverflowError:
        return root
    return root - 1 if n <= following < 0 else root


def iroot(n: int, power: int, *, width: IntWidth | str = INT64) -> int:
    """Integer root of any degree, truncated toward zero.

    Args:
        n: Radicand.
        power: Degree of the root. Negative degrees give 0 except for
            ``n in (-1, 1)``.
        width: Integer width of n.

    Returns:
        The integer part of the real power-th root of n.

    Raises:
        ArithmeticDomainError: If the root is undefined: an even root of a
            negative number, a zero root, or a negative root of zero.
    """
    width = resolve_width(width)
    n = width.require(n, "n")
    power = BIG.require(power, "power")
    if n < 0 and power % 2 == 0:
        raise ArithmeticDomainError("Even root of negative number is undefined")
    if power <= 2:
        return _small_power_root(n, power)
    if INT64.fits(n):
        return _fixed_root(n, power, width if width.is_fixed else INT64)
    root = floor_root(abs(n), power)
    return -root if n < 0 else root
