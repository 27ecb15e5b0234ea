"""Tests for next-prime search, the prime cache and prime sequences."""

import threading

import numpy as np
import pytest

from int_kernel.core.sieve import sieve_primes
from int_kernel.core.widths import BIG, INT32, INT64
from int_kernel.sequence import (
    LAST_INT32_PRIME,
    LAST_INT64_PRIME,
    PRIME_CACHE_SIZE,
    PrimeSequence,
    first_primes,
    next_prime,
    prime_cache,
)


class TestNextPrime:
    """Tests for next_prime function."""

    def test_small_values(self):
        """Test the smallest inputs."""
        expected = {0: 2, 1: 2, 2: 2, 3: 3, 4: 5, 5: 5, 6: 7, 7: 7, 8: 11, 9: 11, 10: 11}
        for n, p in expected.items():
            assert next_prime(n) == p, f"next_prime({n})"
            assert next_prime(n, width=BIG) == p

    def test_negative_values(self):
        """Test that negative inputs mirror positive ones."""
        assert next_prime(-1) == -2
        assert next_prime(-2) == -2
        assert next_prime(-4) == -5
        assert next_prime(-9, width=INT32) == -11
        assert next_prime(-(10**30), width=BIG) == -next_prime(10**30, width=BIG)

    def test_against_sieve(self):
        """Test every input below 5000 against the sieve."""
        primes = sieve_primes(5100).tolist()
        index = 0
        for n in range(5000):
            while primes[index] < n:
                index += 1
            assert next_prime(n) == primes[index], f"next_prime({n})"

    def test_int32_extremes(self):
        """Test 32-bit limits."""
        assert next_prime(LAST_INT32_PRIME, width=INT32) == LAST_INT32_PRIME
        assert next_prime(LAST_INT32_PRIME - 1, width=INT32) == LAST_INT32_PRIME
        assert next_prime(INT32.min_value, width=INT32) == LAST_INT32_PRIME
        assert next_prime(-LAST_INT32_PRIME, width=INT32) == -LAST_INT32_PRIME

    def test_int64_extremes(self):
        """Test 64-bit limits and wraparound."""
        assert next_prime(LAST_INT64_PRIME - 1) == LAST_INT64_PRIME
        assert next_prime(LAST_INT64_PRIME) == LAST_INT64_PRIME
        assert next_prime(LAST_INT64_PRIME + 1) == -LAST_INT64_PRIME
        assert next_prime(INT64.max_value) == -LAST_INT64_PRIME
        assert next_prime(-INT64.max_value) == LAST_INT64_PRIME
        assert next_prime(INT64.min_value) == LAST_INT64_PRIME

    def test_big(self):
        """Test searches past the 64-bit range."""
        assert next_prime(9223372036854775782, width=BIG) == LAST_INT64_PRIME
        assert next_prime(9223372036854775784, width=BIG) == 9223372036854775837
        assert next_prime(9223372036854775838, width=BIG) == 9223372036854775907
        assert next_prime(2**64 - 100, width=BIG) == 2**64 - 95
        assert next_prime(-(2**64 - 100), width=BIG) == -(2**64 - 95)
        assert next_prime(2**64 - 94, width=BIG) == 2**64 - 83
        assert next_prime(2**64 - 82, width=BIG) == 2**64 - 59
        assert next_prime(2**64 - 58, width=BIG) == 2**64 + 13


class TestPrimeCache:
    """Tests for the process-wide prime cache."""

    def test_contents(self):
        """Test that the cache holds the smallest primes."""
        cache = prime_cache()
        assert len(cache) == PRIME_CACHE_SIZE
        assert list(cache) == sieve_primes(3671).tolist()
        assert prime_cache() is cache

    def test_first_primes(self):
        """Test slices of the cache."""
        assert first_primes(0) == ()
        assert first_primes(5) == (2, 3, 5, 7, 11)
        assert len(first_primes(PRIME_CACHE_SIZE + 10)) == PRIME_CACHE_SIZE + 10
        assert first_primes(PRIME_CACHE_SIZE + 1)[-1] == 3673

    def test_concurrent_access(self):
        """Test that concurrent callers see the same cache."""
        results = []

        def worker():
            results.append(prime_cache())

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(results) == 8
        assert all(result is results[0] for result in results)


class TestPrimeSequence:
    """Tests for PrimeSequence class."""

    def test_first_five(self):
        """Test the first five primes."""
        assert list(PrimeSequence.first(5)) == [2, 3, 5, 7, 11]

    def test_up_to(self):
        """Test bounded sequences."""
        assert list(PrimeSequence.up_to(5)) == [2, 3, 5]
        assert list(PrimeSequence.up_to(2)) == [2]
        assert list(PrimeSequence.up_to(1)) == []
        assert list(PrimeSequence.up_to(-10)) == []

    def test_empty_quantity(self):
        """Test that a non-positive quantity gives no primes."""
        assert list(PrimeSequence.first(0)) == []
        assert list(PrimeSequence.first(-3)) == []

    def test_matches_sieve(self):
        """Test long sequences against the sieve."""
        assert list(PrimeSequence.first(1000)) == sieve_primes(7919).tolist()
        assert list(PrimeSequence.up_to(10000)) == sieve_primes(10000).tolist()

    def test_uncached_matches_cached(self):
        """Test that generation without the cache gives the same primes."""
        cached = list(PrimeSequence.first(600))
        uncached = list(PrimeSequence.first(600, use_cache=False))
        assert cached == uncached

    @pytest.mark.parametrize("width", [INT32, INT64, BIG])
    def test_widths(self, width):
        """Test that every width yields the same small primes."""
        assert list(PrimeSequence.first(20, width=width)) == sieve_primes(71).tolist()

    def test_restartable(self):
        """Test that each iteration starts again from 2."""
        sequence = PrimeSequence.first(10)
        assert list(sequence) == list(sequence)
        iterator = iter(sequence)
        next(iterator)
        assert next(iter(sequence)) == 2

    def test_both_bounds(self):
        """Test that the first bound reached ends the sequence."""
        assert list(PrimeSequence(quantity=100, maximum=20)) == [2, 3, 5, 7, 11, 13, 17, 19]
        assert list(PrimeSequence(quantity=3, maximum=1000)) == [2, 3, 5]

    def test_missing_bound(self):
        """Test that a missing bound raises error."""
        with pytest.raises(ValueError):
            PrimeSequence()
        with pytest.raises(ValueError):
            PrimeSequence.first(None)
        with pytest.raises(ValueError):
            PrimeSequence.up_to(None)

    def test_bound_out_of_range(self):
        """Test that a bound outside the width raises error."""
        with pytest.raises(ValueError):
            PrimeSequence.up_to(2**40, width=INT32)
        with pytest.raises(TypeError):
            PrimeSequence.first(2.5)

    def test_to_array(self):
        """Test conversion to numpy arrays."""
        array = PrimeSequence.first(10, width=INT32).to_array()
        assert array.dtype == np.int32
        np.testing.assert_array_equal(array, sieve_primes(29))
        assert PrimeSequence.first(3).to_array().dtype == np.int64
        assert PrimeSequence.first(3, width=BIG).to_array().dtype == object
        assert len(PrimeSequence.up_to(1).to_array()) == 0

    def test_repr(self):
        """Test string representation."""
        assert repr(PrimeSequence.first(5)) == "PrimeSequence(quantity=5, maximum=None, width=int64)"
