"""Trial division by 2, 3 and numbers of the form 6k +/- 1."""

from __future__ import annotations

import math

from int_kernel.core.widths import INT64, IntWidth, resolve_width


def passes_trial_division(n: int, *, width: IntWidth | str = INT64) -> bool:
    """Deterministic primality test by trial division.

    Exponential in the bit length of n; serves small inputs and acts as the
    reference the faster tests are checked against.

    Args:
        n: Number to check. Negative n is prime when -n is.
        width: Integer width of n.

    Returns:
        True if the absolute value of n is prime.
    """
    width = resolve_width(width)
    n = abs(width.require(n, "n"))
    if n < 2:
        return False
    if n < 4:
        return True
    if n % 2 == 0 or n % 3 == 0:
        return False

    limit = math.isqrt(n) + 1
    for i in range(6, limit + 1, 6):
        if n % (i - 1) == 0 or n % (i + 1) == 0:
            return False

    return True
