"""Integer exponentiation with wraparound or overflow detection."""

from __future__ import annotations

from int_kernel.core.errors import ArithmeticDomainError, IntegerOverflowError
from int_kernel.core.widths import INT64, IntWidth, resolve_width


def _negative_power(x: int, y: int) -> int:
    if x == 0:
        raise ArithmeticDomainError("Negative power of zero is infinity")
    if x == 1:
        return 1
    if x == -1:
        return 1 if y % 2 == 0 else -1
    return 0


def int_pow(x: int, y: int, *, width: IntWidth | str = INT64) -> int:
    """Raise x to the power y, wrapping around on overflow.

    Negative exponents truncate toward zero: the result is 1 for x == 1,
    +-1 for x == -1 and 0 otherwise.

    Args:
        x: Base.
        y: Exponent.
        width: Integer width of the base and of the result.

    Returns:
        ``x ** y`` reduced to the width with two's-complement wraparound.

    Raises:
        ArithmeticDomainError: If x is 0 and y is negative.
    """
    width = resolve_width(width)
    x = width.require(x, "x")
    y = width.require(y, "y")
    if y < 0:
        return _negative_power(x, y)
    if not width.is_fixed:
        return x ** y
    return width.wrap(pow(x, y, 1 << width.bits))


def int_pow_exact(x: int, y: int, *, width: IntWidth | str = INT64) -> int:
    """Raise x to the power y, failing when the result does not fit.

    Raises:
        ArithmeticDomainError: If x is 0 and y is negative.
        IntegerOverflowError: If the power does not fit the width.
    """
    width = resolve_width(width)
    x = width.require(x, "x")
    y = width.require(y, "y")
    if y < 0:
        return _negative_power(x, y)
    if width.is_fixed and abs(x) > 1 and y >= width.bits:
        raise IntegerOverflowError(width.name)
    return width.checked(x ** y)
