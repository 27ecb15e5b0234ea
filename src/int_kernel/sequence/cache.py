"""Process-wide cache of the smallest primes.

The cache is built once, on first use, by running the prime generator in
first-N mode, and is never modified afterwards. The build itself tests
primality with the Miller test, which draws its witnesses from this cache;
those nested lookups are served by uncached generation instead.
"""

from __future__ import annotations

import logging
import threading

from int_kernel.core.widths import INT32, INT64

logger = logging.getLogger(__name__)

PRIME_CACHE_SIZE = 512

_cache: tuple[int, ...] | None = None
_building = False
_lock = threading.RLock()


def _generate(count: int) -> tuple[int, ...]:
    from int_kernel.sequence.primes import PrimeSequence

    return tuple(PrimeSequence.first(count, width=INT32, use_cache=False))


def prime_cache() -> tuple[int, ...]:
    """Return the first ``PRIME_CACHE_SIZE`` primes, building them if needed.

    Concurrent first callers block until the single build finishes; every
    caller observes the complete tuple.
    """
    global _cache, _building

    if _cache is not None:
        return _cache
    with _lock:
        if _cache is None:
            _building = True
            try:
                primes = _generate(PRIME_CACHE_SIZE)
            finally:
                _building = False
            logger.debug("Built prime cache: %d primes up to %d", len(primes), primes[-1])
            _cache = primes
    return _cache


def first_primes(count: int) -> tuple[int, ...]:
    """The first count primes.

    Args:
        count: Number of primes wanted.

    Returns:
        Tuple of the smallest count primes in increasing order.
    """
    if count <= 0:
        return ()
    if _cache is None:
        with _lock:
            if _building:
                return _generate(count)
    cache = prime_cache()
    if count <= len(cache):
        return cache[:count]
    from int_kernel.sequence.primes import PrimeSequence

    return tuple(PrimeSequence.first(count, width=INT64))
