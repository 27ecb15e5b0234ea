"""Sieve of Eratosthenes over numpy boolean arrays.

Supplies the prime exponents tried by perfect-power detection on large
integers and serves as an independent oracle for the primality engine.
"""

from __future__ import annotations

import numpy as np


def prime_sieve_mask(limit: int) -> np.ndarray:
    """Generate a boolean mask where mask[i] is True if i is prime.

    Args:
        limit: Size of the mask (0 to limit-1).

    Returns:
        Boolean array of length max(limit, 0).
    """
    mask = np.ones(max(limit, 0), dtype=bool)
    mask[:2] = False

    for i in range(2, int(np.sqrt(max(limit - 1, 0))) + 1):
        if mask[i]:
            mask[i*i::i] = False

    return mask


def sieve_primes(limit: int) -> np.ndarray:
    """Generate all prime numbers up to and including limit.

    Args:
        limit: Upper bound for prime generation (inclusive).

    Returns:
        Array of prime numbers up to limit, empty when limit < 2.
    """
    if limit < 2:
        return np.array([], dtype=np.int64)

    return np.nonzero(prime_sieve_mask(limit + 1))[0].astype(np.int64)
