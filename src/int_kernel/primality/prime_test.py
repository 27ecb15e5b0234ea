"""General-purpose primality testing.

``is_prime`` escalates through the cheaper tests before reaching the
Baillie-PSW gate:

1. Values below 2**63 use the deterministic Miller test.
2. Mersenne numbers go to the Lucas-Lehmer test and Fermat numbers beyond
   65537 are rejected.
3. Miller-Rabin to base 2, then random-base rounds.
4. Baillie-PSW decides whatever is left.
"""

from __future__ import annotations

import logging
from typing import Iterable

import numpy as np

from int_kernel.config import PrimalityConfig
from int_kernel.core.widths import BIG, INT64, IntWidth, resolve_width
from int_kernel.primality.lucas import passes_lucas
from int_kernel.primality.miller_rabin import is_probable_prime, passes_miller, passes_miller_rabin
from int_kernel.primality.special_forms import is_fermat_number, is_mersenne_number, passes_lucas_lehmer
from int_kernel.roots.perfect_power import is_perfect_square

logger = logging.getLogger(__name__)


def passes_baillie_psw(n: int, *, width: IntWidth | str = INT64) -> bool:
    """Baillie-PSW test: Miller-Rabin to base 2 followed by the Lucas test.

    No composite passing both halves is known.

    Args:
        n: Number to check. Negative n is prime when -n is.
        width: Integer width of n.

    Returns:
        False if n is composite, True if it is almost certainly prime.
    """
    width = resolve_width(width)
    n = abs(width.require(n, "n"))
    if n <= 1:
        return False
    if n <= 3:
        return True
    if n % 2 == 0:
        return False
    if is_perfect_square(n, width=BIG):
        return False
    if not passes_miller_rabin(n, 2, width=BIG):
        return False
    return passes_lucas(n, width=BIG)


def is_prime(
    n: int,
    *,
    width: IntWidth | str = INT64,
    config: PrimalityConfig | None = None,
) -> bool:
    """Check whether the absolute value of n is prime.

    Exact for every value below 2**63. Larger values are accepted only if
    they pass Baillie-PSW, which has no known counterexample.

    Args:
        n: Number to check.
        width: Integer width of n.
        config: Random-round settings for the probabilistic stage.

    Returns:
        True if ``abs(n)`` is prime.
    """
    width = resolve_width(width)
    n = abs(width.require(n, "n"))
    if n.bit_length() < 64:
        return passes_miller(n, width=BIG)
    if n % 2 == 0:
        return False
    if is_mersenne_number(n, width=BIG):
        logger.debug("is_prime: %d-bit Mersenne number, using Lucas-Lehmer", n.bit_length())
        return passes_lucas_lehmer(n, width=BIG)
    # Every Fermat prime is below 2**64.
    if is_fermat_number(n, width=BIG):
        logger.debug("is_prime: %d-bit Fermat number is composite", n.bit_length())
        return False
    if not passes_miller_rabin(n, 2, width=BIG):
        return False
    if not is_probable_prime(n, config=config, width=BIG):
        return False
    return passes_baillie_psw(n, width=BIG)


def is_gaussian_prime(
    real: int,
    imaginary: int,
    *,
    width: IntWidth | str = INT64,
    config: PrimalityConfig | None = None,
) -> bool:
    """Check whether ``real + imaginary*i`` is a Gaussian prime.

    A Gaussian integer on an axis is prime when the other coordinate is, in
    absolute value, a rational prime congruent to 3 mod 4. Off the axes it
    is prime when its norm ``real**2 + imaginary**2`` is prime. The norm is
    evaluated exactly even at fixed widths.

    Args:
        real: Real part.
        imaginary: Imaginary part.
        width: Integer width of both parts.
        config: Passed on to ``is_prime`` for norms of 64 bits or more.

    Returns:
        True if the Gaussian integer is prime.
    """
    width = resolve_width(width)
    real = width.require(real, "real")
    imaginary = width.require(imaginary, "imaginary")
    if real == 0:
        return abs(imaginary) % 4 == 3 and is_prime(imaginary, width=BIG, config=config)
    if imaginary == 0:
        return abs(real) % 4 == 3 and is_prime(real, width=BIG, config=config)
    return is_prime(real * real + imaginary * imaginary, width=BIG, config=config)


def is_prime_array(numbers: Iterable[int] | np.ndarray, *, width: IntWidth | str = INT64) -> np.ndarray:
    """Check primality for each element of an array.

    Args:
        numbers: Array-like of integers.
        width: Integer width of the elements.

    Returns:
        Boolean array with the shape of numbers.
    """
    width = resolve_width(width)
    values = np.asarray(numbers, dtype=None if width.is_fixed else object)
    result = np.zeros(values.shape, dtype=bool)
    for index, value in np.ndenumerate(values):
        result[index] = is_prime(int(value), width=width)
    return result
