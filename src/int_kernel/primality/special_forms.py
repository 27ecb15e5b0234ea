"""Mersenne and Fermat numbers, and the Lucas-Lehmer test."""

from __future__ import annotations

from int_kernel.core.widths import INT64, IntWidth, resolve_width
from int_kernel.primality.miller_rabin import passes_miller

# Only these Fermat numbers are known to be prime; F5 through F32 are proven composite.
FERMAT_PRIMES = frozenset({3, 5, 17, 257, 65537})


def _is_mersenne(n: int) -> bool:
    return n > 0 and n & (n + 1) == 0


def _lucas_lehmer(n: int, p: int) -> bool:
    if p <= 1:
        return False
    if p <= 3:
        return True
    # M(p) can only be prime for prime p.
    if not passes_miller(p):
        return False
    # For p = 3 mod 4, 2p + 1 prime divides M(p).
    if p & 3 == 3 and passes_miller(2 * p + 1):
        return False
    x = 4
    for _ in range(p - 2):
        x = (x * x - 2) % n
    return x == 0


def is_mersenne_number(n: int, *, width: IntWidth | str = INT64) -> bool:
    """Check whether n is ``2**p - 1`` for some p >= 1."""
    width = resolve_width(width)
    return _is_mersenne(width.require(n, "n"))


def passes_lucas_lehmer(n: int, *, width: IntWidth | str = INT64) -> bool:
    """Lucas-Lehmer test for Mersenne numbers.

    Starting from 4, squares and subtracts 2 modulo ``n = 2**p - 1``
    exactly ``p - 2`` times; n is prime iff the result is 0.

    Args:
        n: Number to check.
        width: Integer width of n.

    Returns:
        True if n is a Mersenne prime; False for composites and for any n
        that is not a Mersenne number.
    """
    width = resolve_width(width)
    n = width.require(n, "n")
    if not _is_mersenne(n):
        return False
    return _lucas_lehmer(n, n.bit_length())


def is_mersenne_prime(n: int, *, width: IntWidth | str = INT64) -> bool:
    """Check whether n is a prime of the form ``2**p - 1``."""
    return passes_lucas_lehmer(n, width=width)


def is_fermat_number(n: int, *, width: IntWidth | str = INT64) -> bool:
    """Check whether n is ``2**(2**k) + 1`` for some k >= 0."""
    width = resolve_width(width)
    n = width.require(n, "n")
    if n <= 2:
        return False
    m = n - 1
    if m & (m - 1):
        return False
    e = m.bit_length() - 1
    return e & (e - 1) == 0


def is_fermat_prime(n: int, *, width: IntWidth | str = INT64) -> bool:
    """Check whether n is one of the five known Fermat primes."""
    width = resolve_width(width)
    return width.require(n, "n") in FERMAT_PRIMES
