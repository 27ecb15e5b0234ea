"""Lazy, restartable sequences of primes."""

from __future__ import annotations

from typing import Iterator

import numpy as np

from int_kernel.core.widths import INT64, IntWidth, resolve_width
from int_kernel.sequence.wheel import next_prime


class PrimeSequence:
    """Iterable over the first N primes, or all primes up to a maximum.

    Each call to ``iter()`` starts a fresh pass from 2. The smallest primes
    come from the process-wide cache and later ones from the wheel search.
    At fixed widths iteration stops after the largest prime of the width.

    Args:
        quantity: Number of primes to produce.
        maximum: Inclusive upper bound on the primes produced.
        width: Integer width of the primes and of the bounds.
        use_cache: Serve the first primes from the cache. The cache build
            itself runs with this off.

    Raises:
        ValueError: If neither quantity nor maximum is given.
    """

    def __init__(
        self,
        quantity: int | None = None,
        maximum: int | None = None,
        *,
        width: IntWidth | str = INT64,
        use_cache: bool = True,
    ):
        if quantity is None and maximum is None:
            raise ValueError("Either quantity or maximum must be given")
        self.width = resolve_width(width)
        self.quantity = None if quantity is None else self.width.require(quantity, "quantity")
        self.maximum = None if maximum is None else self.width.require(maximum, "maximum")
        self.use_cache = use_cache

    @classmethod
    def first(cls, quantity: int, *, width: IntWidth | str = INT64, use_cache: bool = True) -> PrimeSequence:
        """Sequence of the first quantity primes."""
        if quantity is None:
            raise ValueError("quantity must not be None")
        return cls(quantity=quantity, width=width, use_cache=use_cache)

    @classmethod
    def up_to(cls, maximum: int, *, width: IntWidth | str = INT64) -> PrimeSequence:
        """Sequence of all primes ``<= maximum``."""
        if maximum is None:
            raise ValueError("maximum must not be None")
        return cls(maximum=maximum, width=width)

    def __iter__(self) -> Iterator[int]:
        if self.quantity is not None and self.quantity <= 0:
            return
        if self.maximum is not None and self.maximum < 2:
            return

        if self.use_cache:
            from int_kernel.sequence.cache import prime_cache

            cache = prime_cache()
        else:
            cache = ()

        width = self.width
        position = 0
        candidate = 2
        while True:
            if self.maximum is not None and candidate > self.maximum:
                return
            yield candidate
            position += 1
            if self.quantity is not None and position >= self.quantity:
                return

            if position < len(cache):
                following = cache[position]
            else:
                if width.is_fixed and candidate >= width.max_value:
                    return
                following = next_prime(candidate + 1, width=width)
                # Fixed-width searches past the last prime wrap to a negative value.
                if following < candidate:
                    return
            candidate = following

    def __repr__(self) -> str:
        return (
            f"PrimeSequence(quantity={self.quantity}, maximum={self.maximum}, "
            f"width={self.width.name})"
        )

    def to_array(self) -> np.ndarray:
        """Materialize the sequence as a numpy array of the width's dtype."""
        return np.array(list(self), dtype=self.width.numpy_dtype)
