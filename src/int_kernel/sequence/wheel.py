"""Next-prime search over a mod-30 wheel.

Only the eight residues coprime to 30 can hold a prime above 5, so the
search visits 8 of every 30 integers.
"""

from __future__ import annotations

from bisect import bisect_left

from int_kernel.core.widths import BIG, INT32, INT64, IntWidth, resolve_width
from int_kernel.primality.prime_test import is_prime

WHEEL_INDICES = (1, 7, 11, 13, 17, 19, 23, 29)
WHEEL_CYCLE = 30

LAST_INT32_PRIME = 2147483647
LAST_INT64_PRIME = 9223372036854775783

_SMALL_NEXT = (2, 2, 2, 3, 5, 5)


def _wheel_search(n: int, width: IntWidth) -> int:
    k0, residue = divmod(n, WHEEL_CYCLE)
    index = bisect_left(WHEEL_INDICES, residue)
    candidate = k0 * WHEEL_CYCLE + WHEEL_INDICES[index]
    while not is_prime(candidate, width=width):
        index += 1
        if index == len(WHEEL_INDICES):
            k0 += 1
            index = 0
        candidate = k0 * WHEEL_CYCLE + WHEEL_INDICES[index]
    return candidate


def next_prime(n: int, *, width: IntWidth | str = INT64) -> int:
    """Smallest prime ``p >= n``; ``-next_prime(-n)`` for negative n.

    Examples: ``next_prime(7) == 7``, ``next_prime(9) == 11``.

    Fixed widths never leave their range. The 32-bit maximum is itself
    prime; its minimum, which cannot be negated, maps to that maximum. At
    64 bits, inputs above the largest prime wrap around to its negation,
    and the minimum maps to the largest prime.

    Args:
        n: Lower inclusive bound of the search.
        width: Integer width of n.

    Returns:
        The prime found, with the sign rules above.
    """
    width = resolve_width(width)
    n = width.require(n, "n")
    if n < 6:
        if n >= 0:
            return _SMALL_NEXT[n]
        if n == INT32.min_value and width is INT32:
            return LAST_INT32_PRIME
        if n == INT64.min_value and width is INT64:
            return LAST_INT64_PRIME
        return -next_prime(-n, width=width)

    if width is INT64 and n > LAST_INT64_PRIME:
        return -LAST_INT64_PRIME
    if width is BIG and n <= LAST_INT64_PRIME:
        return _wheel_search(n, INT64)
    return _wheel_search(n, width)
