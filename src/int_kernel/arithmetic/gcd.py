"""Greatest common divisor, Bezout coefficients and least common multiple.

At fixed widths the minimum value has no representable absolute value.
It is a power of two, so its gcd with ``b`` is the lowest set bit of ``b``,
and ``gcd(0, MIN)`` is ``MIN`` itself.
"""

from __future__ import annotations

import math

from int_kernel.core.errors import IntegerOverflowError
from int_kernel.core.widths import INT64, IntWidth, resolve_width, tdiv


def _gcd(a: int, b: int, width: IntWidth) -> int:
    if not width.is_fixed:
        return math.gcd(a, b)
    if a == 0:
        return width.wrapping_abs(b)
    if b == 0:
        return width.wrapping_abs(a)
    if a == width.min_value:
        return width.wrap(b & -b)
    if b == width.min_value:
        return width.wrap(a & -a)
    return math.gcd(a, b)


def gcd(a: int, b: int, *, width: IntWidth | str = INT64) -> int:
    """Greatest common divisor.

    Args:
        a: First operand.
        b: Second operand.
        width: Integer width of the operands.

    Returns:
        The non-negative gcd, except that a fixed width's minimum value is
        returned when it is the only correct divisor (``gcd(0, MIN)``,
        ``gcd(MIN, MIN)``).
    """
    width = resolve_width(width)
    return _gcd(width.require(a, "a"), width.require(b, "b"), width)


def _egcd(a: int, b: int, width: IntWidth) -> tuple[int, int, int]:
    x, y, u, v = 0, 1, 1, 0
    while a:
        q = tdiv(b, a)
        a, b, x, y, u, v = b - q * a, a, u, v, x - u * q, y - v * q
    if b < 0 and (not width.is_fixed or b > width.min_value):
        b, x, y = -b, -x, -y
    return width.wrap(b), width.wrap(x), width.wrap(y)


def egcd(a: int, b: int, *, width: IntWidth | str = INT64) -> tuple[int, int, int]:
    """Extended Euclidean algorithm.

    Args:
        a: First operand.
        b: Second operand.
        width: Integer width of the operands.

    Returns:
        Tuple ``(g, x, y)`` with ``a*x + b*y == g`` (modulo the word size
        at fixed widths). ``g`` is non-negative unless it is the width's
        minimum value.
    """
    width = resolve_width(width)
    return _egcd(width.require(a, "a"), width.require(b, "b"), width)


def lcm(a: int, b: int, *, width: IntWidth | str = INT64) -> int:
    """Least common multiple with two's-complement wraparound.

    Returns 0 when either operand is 0. At fixed widths a result that
    overflows wraps, so ``lcm(MIN, 1) == MIN``; use ``lcm_exact`` to detect
    that case.
    """
    width = resolve_width(width)
    a = width.require(a, "a")
    b = width.require(b, "b")
    if a == 0 or b == 0:
        return 0
    return width.wrapping_abs(width.wrap(tdiv(a, _gcd(a, b, width)) * b))


def lcm_exact(a: int, b: int, *, width: IntWidth | str = INT64) -> int:
    """Least common multiple, failing instead of wrapping.

    Raises:
        IntegerOverflowError: If the lcm does not fit the width.
    """
    width = resolve_width(width)
    a = width.require(a, "a")
    b = width.require(b, "b")
    if a == 0 or b == 0:
        return 0
    product = width.checked_mul(tdiv(a, _gcd(a, b, width)), b)
    if product < 0:
        if width.is_fixed and product == width.min_value:
            raise IntegerOverflowError(width.name, -product)
        return -product
    return product


def is_relatively_prime(a: int, b: int, *, width: IntWidth | str = INT64) -> bool:
    """Check whether a and b share no factor other than 1."""
    return gcd(a, b, width=width) == 1
