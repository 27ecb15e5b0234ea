"""Miller-Rabin strong probable prime tests.

``passes_miller`` is deterministic for every 64-bit input: below each bound
of OEIS A006945 a fixed number of the smallest primes are proven to be
sufficient witnesses. Larger inputs are tested against every prime up to
``2 * bits**2``, which is a proof under the generalized Riemann hypothesis.
"""

from __future__ import annotations

import logging

from int_kernel.config import DEFAULT_CONFIG, PrimalityConfig
from int_kernel.core.widths import BIG, INT64, IntWidth, resolve_width, trailing_zeros

logger = logging.getLogger(__name__)

# (bound, witnesses): odd n below bound needs the first `witnesses` primes.
WITNESS_THRESHOLDS = (
    (2047, 1),
    (1373653, 2),
    (25326001, 3),
    (3215031751, 4),
    (2152302898747, 5),
    (3474749660383, 6),
    (341550071728321, 7),
    (3825123056546413051, 9),
)
MAX_WITNESSES = 12


def _decompose(n: int) -> tuple[int, int]:
    """Write ``n - 1 = d * 2**s`` with d odd."""
    s = trailing_zeros(n - 1)
    return (n - 1) >> s, s


def _strong_probable_prime(n: int, base: int, d: int, s: int) -> bool:
    n_minus_one = n - 1
    j = 0
    z = pow(base, d, n)
    while (j != 0 or z != 1) and z != n_minus_one:
        if j > 0 and z == 1:
            return False
        j += 1
        if j == s:
            return False
        z = z * z % n
    return True


def passes_miller_rabin(n: int, base: int, *, width: IntWidth | str = INT64) -> bool:
    """Strong pseudoprimality test to a single base.

    Args:
        n: Number to check; values below 2 fail and even values pass only
            when n is 2.
        base: Witness. A base divisible by n makes every n fail.
        width: Integer width of n and base.

    Returns:
        True if n is prime or a strong pseudoprime to base.
    """
    width = resolve_width(width)
    n = width.require(n, "n")
    base = width.require(base, "base")
    if n < 2:
        return False
    if n % 2 == 0:
        return n == 2
    d, s = _decompose(n)
    return _strong_probable_prime(n, base, d, s)


def _passes_miller_grh(n: int) -> bool:
    from int_kernel.sequence.primes import PrimeSequence

    bits = n.bit_length()
    limit = 2 * bits * bits
    logger.debug("passes_miller: %d-bit input, witnesses up to %d", bits, limit)
    d, s = _decompose(n)
    for witness in PrimeSequence.up_to(limit, width=BIG):
        if not _strong_probable_prime(n, witness, d, s):
            return False
    return True


def passes_miller(n: int, *, width: IntWidth | str = INT64) -> bool:
    """Deterministic Miller test.

    Exact for every 64-bit value; beyond that range the result relies on
    the generalized Riemann hypothesis.

    Args:
        n: Number to check. Negative n is prime when -n is.
        width: Integer width of n.

    Returns:
        True if the absolute value of n is prime.
    """
    from int_kernel.sequence.cache import first_primes

    width = resolve_width(width)
    n = abs(width.require(n, "n"))
    if n % 2 == 0:
        return n == 2
    if n < 9:
        return n > 1
    if n.bit_length() >= 64:
        return _passes_miller_grh(n)

    count = next((q for bound, q in WITNESS_THRESHOLDS if n < bound), MAX_WITNESSES)
    d, s = _decompose(n)
    return all(_strong_probable_prime(n, w, d, s) for w in first_primes(count))


def is_probable_prime(
    n: int,
    *,
    config: PrimalityConfig | None = None,
    width: IntWidth | str = INT64,
) -> bool:
    """Probabilistic Miller-Rabin test with random witnesses.

    Args:
        n: Number to check. Negative n is prime when -n is.
        config: Round count and seed; DEFAULT_CONFIG when omitted.
        width: Integer width of n.

    Returns:
        False if n is definitely composite, True if it is probably prime.
    """
    config = config or DEFAULT_CONFIG
    width = resolve_width(width)
    n = abs(width.require(n, "n"))
    if n < 2:
        return False
    if n < 4:
        return True
    if n % 2 == 0:
        return False

    rng = config.make_rng()
    d, s = _decompose(n)
    for _ in range(config.probable_prime_rounds):
        if not _strong_probable_prime(n, rng.randrange(2, n - 1), d, s):
            return False
    return True
