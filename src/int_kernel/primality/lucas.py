"""Lucas probable prime test and the Jacobi symbol."""

from __future__ import annotations

from int_kernel.core.widths import BIG, INT64, IntWidth, resolve_width
from int_kernel.roots.perfect_power import is_perfect_square


def jacobi_symbol(p: int, n: int) -> int:
    """Jacobi symbol (p/n).

    Reciprocity-law reduction: factors of 4 are dropped, a factor of 2
    flips the sign when n is 3 or 5 mod 8, and swapping p and n flips it
    when both are 3 mod 4.

    Args:
        p: Numerator, any integer.
        n: Denominator, an odd positive integer.

    Returns:
        -1, 0 or 1.

    Raises:
        ValueError: If n is not odd and positive.
    """
    if n <= 0 or n % 2 == 0:
        raise ValueError(f"n must be an odd positive integer, got {n}")
    if n == 1:
        return 1
    if p == 0:
        return 0

    j = 1
    u = n
    if p < 0:
        p = -p
        if u & 7 in (3, 7):
            j = -j
    while p & 3 == 0:
        p >>= 2
    if p & 1 == 0:
        p >>= 1
        if (u ^ (u >> 1)) & 2:
            j = -j
    if p == 1:
        return j

    if p & u & 2:
        j = -j
    u = n % p
    while u != 0:
        while u & 3 == 0:
            u >>= 2
        if u & 1 == 0:
            u >>= 1
            if (p ^ (p >> 1)) & 2:
                j = -j
        if u == 1:
            return j
        u, p = p, u
        if u & p & 2:
            j = -j
        u %= p
    return 0


def _selfridge_discriminant(n: int) -> int:
    """First D in 5, -7, 9, -11, ... with (D/n) == -1."""
    d = 5
    while jacobi_symbol(d, n) != -1:
        d = 2 - d if d < 0 else -(d + 2)
    return d


def passes_lucas(n: int, *, width: IntWidth | str = INT64) -> bool:
    """Lucas probable prime test with Selfridge's parameters.

    Evaluates ``U(n+1)`` of the Lucas sequence with ``P = 1``,
    ``Q = (1 - D) / 4`` by binary doubling over the bits of ``n + 1``.

    Args:
        n: Number to check. Negative n is prime when -n is.
        width: Integer width of n.

    Returns:
        False if n is composite, True if it is a Lucas probable prime.
        Perfect squares and even numbers other than 2 are rejected up front
        since no discriminant exists for squares.
    """
    width = resolve_width(width)
    n = abs(width.require(n, "n"))
    if n < 2:
        return False
    if n % 2 == 0:
        return n == 2
    if is_perfect_square(n, width=BIG):
        return False

    d = _selfridge_discriminant(n)
    u = v = 1
    k = n + 1
    for i in range(k.bit_length() - 2, -1, -1):
        u, v = u * v % n, (v * v + d * u * u) % n
        if v & 1:
            v -= n
        v >>= 1
        if (k >> i) & 1:
            u2 = (u + v) % n
            if u2 & 1:
                u2 -= n
            v2 = (v + d * u) % n
            if v2 & 1:
                v2 -= n
            u, v = u2 >> 1, v2 >> 1
    return u % n == 0
