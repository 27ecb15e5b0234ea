"""Prime sequences: next-prime search, the prime cache and generators."""

from int_kernel.sequence.cache import PRIME_CACHE_SIZE, first_primes, prime_cache
from int_kernel.sequence.primes import PrimeSequence
from int_kernel.sequence.wheel import LAST_INT32_PRIME, LAST_INT64_PRIME, next_prime

__all__ = [
    "PrimeSequence",
    "next_prime",
    "prime_cache",
    "first_primes",
    "PRIME_CACHE_SIZE",
    "LAST_INT32_PRIME",
    "LAST_INT64_PRIME",
]
