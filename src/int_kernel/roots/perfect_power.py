"""Perfect square, cube and power detection.

Each detector runs a cascade of cheap rejections (residue masks, the parity
of the power of two, Bloom filters over small moduli) and only then computes
a candidate root, which is verified exactly. The cascade changes speed, not
results: every answer is confirmed by raising the candidate to the power.

Values that fit in 63 bits use word-sized routines whose root estimates
come from floating point; larger values fall back to integer Newton roots.
"""

from __future__ import annotations

import math
from typing import Iterable, NamedTuple

import numpy as np

from int_kernel.core.sieve import sieve_primes
from int_kernel.core.widths import INT64, BIG, IntWidth, resolve_width, trailing_zeros
from int_kernel.roots.iroot import floor_root
from int_kernel.roots.tables import (
    CUBE_RESIDUES_MOD_63,
    FAST_SQRT_LIMIT,
    FAST_SQRT_MAGIC,
    HIGH_POWER_BASES,
    INT64_MIN_PERFECT_POWER_BASES,
    PERFECT_POWER_ALLOWED_RESIDUES,
    PERFECT_POWER_MODS,
    SMALL_PRIME_EXPONENTS,
    SQUARE_RESIDUES_MOD_64,
    SQUARE_RESIDUES_MOD_255,
    residue_allowed,
)

# Product of 63, 25, 31, 23, 19, 17 and 11: one reduction feeds every filter.
_SQUARE_FILTER_MODULUS = 3989930175


class PerfectPower(NamedTuple):
    """Certificate ``base ** exponent == n`` with the largest exponent.

    Attributes:
        base: Smallest base in absolute value.
        exponent: Largest exponent, always at least 2.
    """

    base: int
    exponent: int


def _fast_sqrt(n: int) -> int:
    """Square root of a perfect square below ``FAST_SQRT_LIMIT``.

    Two Newton steps on the float32 inverse square root seeded from the
    bit pattern of n.
    """
    y = np.float32(n)
    half = y * np.float32(0.5)
    bits = int(np.array([y], dtype=np.float32).view(np.int32)[0])
    bits = FAST_SQRT_MAGIC - (bits >> 1)
    y = np.array([bits], dtype=np.int32).view(np.float32)[0]
    y = y * (np.float32(1.5) - half * y * y)
    y = y * (np.float32(1.5) - half * y * y)
    return int(np.float32(1.0) / y + np.float32(0.5))


def _square_base_word(n: int) -> int | None:
    """Square root of ``0 < n < 2**63`` if n is a perfect square."""
    if not residue_allowed(SQUARE_RESIDUES_MOD_64, n & 63):
        return None

    # Fold n into a small number congruent to it modulo 255.
    folded = (n & 0xFFFFFFFF) + (n >> 32)
    folded = (folded & 0xFFFF) + (folded >> 16)
    folded = (folded & 0xFF) + ((folded >> 8) & 0xFF) + (folded >> 16)
    if not (SQUARE_RESIDUES_MOD_255[folded >> 5] >> (31 - (folded & 31))) & 1:
        return None

    b = trailing_zeros(n)
    if b:
        if b & 1:
            return None
        n >>= b
        # Odd squares are 1 mod 8.
        if n & 7 != 1:
            return None

    root = _fast_sqrt(n) if n < FAST_SQRT_LIMIT else math.isqrt(n)
    return root << (b >> 1) if root * root == n else None


def _square_base_big(n: int) -> int | None:
    """Square root of ``n >= 2**63`` if n is a perfect square."""
    m = n & 127
    if (m * 0x8BC40D7D) & (m * 0xA1E2F5D1) & 0x14020A:
        return None
    if trailing_zeros(n) & 1:
        return None

    # Bloom filter over squares modulo the factors of _SQUARE_FILTER_MODULUS.
    lm = n % _SQUARE_FILTER_MODULUS
    m = lm % 63
    if (m * 0x3D491DF7) & (m * 0xC824A9F9) & 0x10F14008:
        return None
    m = lm % 25
    if (m * 0x1929FC1B) & (m * 0x4C9EA3B2) & 0x51001005:
        return None
    m = 0xD10D829A * (lm % 31)
    if m & (m + 0x672A5354) & 0x21025115:
        return None
    m = lm % 23
    if (m * 0x7BD28629) & (m * 0xE7180889) & 0xF8300:
        return None
    m = lm % 19
    if (m * 0x1B8BEAD3) & (m * 0x4D75A124) & 0x4280082B:
        return None
    m = lm % 17
    if (m * 0x6736F323) & (m * 0x9B1D499) & 0xC0000300:
        return None
    m = lm % 11
    if (m * 0xABF1A3A7) & (m * 0x2612BF93) & 0x45854000:
        return None

    root = math.isqrt(n)
    return root if root * root == n else None


def _square_base(n: int) -> int | None:
    if n < 0:
        return None
    if n == 0:
        return 0
    if n.bit_length() <= 63:
        return _square_base_word(n)
    return _square_base_big(n)


def _cube_base(n: int) -> int | None:
    if n <= 0:
        if n == 0:
            return 0
        if n == INT64.min_value:
            return INT64_MIN_PERFECT_POWER_BASES[3]
        base = _cube_base(-n)
        return None if base is None else -base

    if not residue_allowed(CUBE_RESIDUES_MOD_63, n % 63):
        return None
    b = trailing_zeros(n)
    if b % 3:
        return None
    n >>= b

    if n.bit_length() <= 63:
        root = round(n ** (1.0 / 3))
    else:
        root = floor_root(n, 3)
    return root << (b // 3) if root * root * root == n else None


def _power_base_word(n: int, power: int) -> int | None:
    """Base of ``1 < n < 2**63`` for a power of at least 4."""
    if power >= 16:
        # Few 64-bit values are such powers; they are enumerated.
        return HIGH_POWER_BASES[power].get(n) if power <= 62 else None

    if not residue_allowed(PERFECT_POWER_ALLOWED_RESIDUES[power], n % PERFECT_POWER_MODS[power]):
        return None
    b = trailing_zeros(n)
    if b % power:
        return None
    n >>= b
    # Every root is at least 2 here, so n must reach 2**power.
    if power > b and n >> (power - b) == 0:
        return None

    root = int(math.pow(n, 1.0 / power) + 0.5)
    return root << (b // power) if root ** power == n else None


def _power_base_big(n: int, power: int) -> int | None:
    """Base of ``n >= 2**63`` for a power of at least 4."""
    if power < len(PERFECT_POWER_MODS) and not residue_allowed(
        PERFECT_POWER_ALLOWED_RESIDUES[power], n % PERFECT_POWER_MODS[power]
    ):
        return None
    b = trailing_zeros(n)
    if b % power:
        return None
    n >>= b
    if power > b and n >> (power - b) == 0:
        return None

    root = floor_root(n, power)
    return root << (b // power) if root ** power == n else None


def _power_base(n: int, power: int) -> int | None:
    if power < 4:
        if power == 2:
            return _square_base(n)
        if power == 3:
            return _cube_base(n)
        return None

    if n <= 1:
        if n >= 0:
            return n
        if power % 2 == 0:
            return None
        if n == INT64.min_value:
            return INT64_MIN_PERFECT_POWER_BASES.get(power)
        base = _power_base(-n, power)
        return None if base is None else -base

    if n.bit_length() <= 63:
        return _power_base_word(n, power)
    return _power_base_big(n, power)


def _prime_exponents(limit: int) -> Iterable[int]:
    """Prime exponents up to limit, in increasing order."""
    if limit <= SMALL_PRIME_EXPONENTS[-1]:
        return (e for e in SMALL_PRIME_EXPONENTS if e <= limit)
    return (int(e) for e in sieve_primes(limit))


def _perfect_power(n: int) -> PerfectPower | None:
    if n <= 1:
        # 0 = 0^2, 1 = 1^2, -1 = (-1)^3.
        if n >= -1:
            return PerfectPower(n, 3 if n < 0 else 2)
        if n == INT64.min_value:
            return PerfectPower(-2, 63)
        found = _perfect_power(-n)
        if found is None:
            return None
        even = trailing_zeros(found.exponent)
        odd_exponent = found.exponent >> even
        # Only odd powers can be negative.
        if odd_exponent == 1:
            return None
        return PerfectPower(-(found.base ** (1 << even)), odd_exponent)

    if n & (n - 1) == 0:
        return None if n == 2 else PerfectPower(2, trailing_zeros(n))

    e2 = trailing_zeros(n)
    odd = n >> e2
    e3 = 0
    while odd % 3 == 0:
        odd //= 3
        e3 += 1
    g = math.gcd(e2, e3)
    if g == 1:
        return None
    if odd == 1:
        return PerfectPower((1 << (e2 // g)) * 3 ** (e3 // g), g)

    # The smallest remaining factor is 5, so no exponent exceeds log4(odd).
    ek = 1
    base = 0
    while True:
        limit = max(2, (odd.bit_length() + 1) // 2)
        for e in _prime_exponents(limit):
            root = _power_base(odd, e)
            if root is not None:
                break
        else:
            break
        ek *= e
        base = odd = root

    if ek == 1:
        return None
    g = math.gcd(g, ek)
    if g == 1:
        return None
    return PerfectPower((1 << (e2 // g)) * 3 ** (e3 // g) * base ** (ek // g), g)


def get_base_of_perfect_square(n: int, *, width: IntWidth | str = INT64) -> int | None:
    """Find s >= 0 with ``s*s == n``.

    Args:
        n: Candidate square.
        width: Integer width of n.

    Returns:
        The non-negative square root, or None if n is not a perfect square.
    """
    width = resolve_width(width)
    return _square_base(width.require(n, "n"))


def is_perfect_square(n: int, *, width: IntWidth | str = INT64) -> bool:
    return get_base_of_perfect_square(n, width=width) is not None


def get_base_of_perfect_cube(n: int, *, width: IntWidth | str = INT64) -> int | None:
    """Find c with ``c**3 == n``; negative n gives a negative c.

    Returns:
        The cube root, or None if n is not a perfect cube.
    """
    width = resolve_width(width)
    return _cube_base(width.require(n, "n"))


def is_perfect_cube(n: int, *, width: IntWidth | str = INT64) -> bool:
    return get_base_of_perfect_cube(n, width=width) is not None


def get_base_of_perfect_power(n: int, power: int, *, width: IntWidth | str = INT64) -> int | None:
    """Find b with ``b**power == n``.

    Powers below 2 never qualify. For ``n`` in ``(0, 1)`` the base is n
    itself; a negative n has a base only for odd powers.

    Args:
        n: Candidate power.
        power: Required exponent.
        width: Integer width of n.

    Returns:
        The base (non-negative for even powers), or None when n is not a
        power-th power.
    """
    width = resolve_width(width)
    n = width.require(n, "n")
    return _power_base(n, BIG.require(power, "power"))


def get_perfect_power(n: int, *, width: IntWidth | str = INT64) -> PerfectPower | None:
    """Decompose n as ``base ** exponent`` with the largest exponent.

    Examples: 64 gives (2, 6), -64 gives (-4, 3), -16 gives None because
    only even exponents fit it.

    Args:
        n: Candidate perfect power.
        width: Integer width of n.

    Returns:
        The certificate, or None if n is not a perfect power.
    """
    width = resolve_width(width)
    return _perfect_power(width.require(n, "n"))


def is_perfect_power(n: int, power: int | None = None, *, width: IntWidth | str = INT64) -> bool:
    """Check whether n is a perfect power, of a given exponent if one is passed."""
    if power is None:
        return get_perfect_power(n, width=width) is not None
    return get_base_of_perfect_power(n, power, width=width) is not None
