"""Static lookup data for root extraction and perfect-power detection.

Residue masks are 64-bit words read from the most significant bit: residue
``r`` is allowed when bit ``63 - r`` is set.
"""

from __future__ import annotations

# MAX_ROOTS_INT32[k] is the largest r with r**k <= 2**31 - 1.
MAX_ROOTS_INT32 = (
    2147483647, 2147483647, 46340, 1290, 215, 73, 35, 21, 14, 10, 8, 7, 5, 5, 4, 4,
    3, 3, 3, 3, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 1,
)

# MAX_ROOTS_INT64[k] is the largest r with r**k <= 2**63 - 1.
MAX_ROOTS_INT64 = (
    9223372036854775807, 9223372036854775807, 3037000499, 2097151, 55108, 6208, 1448, 511,
    234, 127, 78, 52, 38, 28, 22, 18, 15, 13, 11, 9, 8, 7, 7, 6, 6, 5, 5, 5, 4, 4, 4, 4,
    3, 3, 3, 3, 3, 3, 3, 3, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2,
    2, 2, 2, 1,
)

MAX_ROOTS = {"int32": MAX_ROOTS_INT32, "int64": MAX_ROOTS_INT64}

# Truncated odd roots of the minimum value; powers not listed give -2.
MIN_VALUE_ROOTS = {
    "int32": {3: -1290, 5: -73, 7: -21, 9: -10, 11: -7, 13: -5, 15: -4, 17: -3, 19: -3},
    "int64": {
        3: -2097152, 5: -6208, 7: -512, 9: -128, 11: -52, 13: -28, 15: -18, 17: -13,
        19: -9, 21: -8, 23: -6, 25: -5, 27: -5, 29: -4, 31: -4, 33: -3, 35: -3, 37: -3,
        39: -3,
    },
}

# Exact odd roots of -2**63.
INT64_MIN_PERFECT_POWER_BASES = {3: -2097152, 7: -512, 9: -128, 21: -8, 63: -2}

SMALL_PRIME_EXPONENTS = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31)

SQUARE_RESIDUES_MOD_64 = 0xC840C04048404040
CUBE_RESIDUES_MOD_63 = 0xC080001818000102

# Bit (31 - i % 32) of word i // 32 is set when i can be a square mod 255.
SQUARE_RESIDUES_MOD_255 = (
    0xC8419442, 0x28005108, 0xA6084C02, 0x082110C0, 0x0180C120, 0x02520024, 0x180C0018, 0x44208201,
    0x90832884, 0x5000A211, 0x4C109804, 0x10422180, 0x03018240, 0x04A40048, 0x30180030, 0x88410403,
)

# Below this bound two float32 Newton steps from the magic seed give an exact
# square root for every perfect square.
FAST_SQRT_LIMIT = 15966596881
FAST_SQRT_MAGIC = 1597463205

# Per power, the modulus in [2, 64] with the fewest distinct k-th power residues.
PERFECT_POWER_MODS = (
    64, 64, 48, 63, 48, 50, 63, 49,
    64, 54, 44, 46, 63, 53, 49, 61,
    64, 64, 63, 64, 61, 49, 46, 47,
    64, 50, 53, 54, 58, 59, 61, 64,
    64, 46, 48, 49, 37, 64, 48, 53,
    64, 64, 49, 64, 64, 61, 47, 64,
    64, 49, 44, 63, 53, 64, 63, 46,
    64, 63, 59, 64, 61, 64, 48, 49,
)

# Residues of k-th powers modulo PERFECT_POWER_MODS[k].
PERFECT_POWER_ALLOWED_RESIDUES = (
    0x4000000000000000, 0xFFFFFFFFFFFFFFFF, 0xC840804048000000, 0xC080001818000102,
    0xC000800040000000, 0xC10020E080104000, 0xC000000808000000, 0xC000300300008000,
    0xC000000040000000, 0xC000003800000400, 0xC008000040000000, 0xC000038000040000,
    0xC000000808000000, 0xC000010200000800, 0xC000200200000000, 0xC010000000002008,
    0xC000000000000000, 0xD555555555555555, 0xC000000808000000, 0xD555555555555555,
    0xC004000000010000, 0xC000000000008000, 0xC000018000000000, 0xC000000000020000,
    0xC000000040000000, 0xC10020E080104000, 0xC000000000000800, 0xC000003800000400,
    0xC000000600000000, 0xC000000000000020, 0xC000000000000008, 0xD555555555555555,
    0xC000000000000000, 0xC000038000040000, 0xC040804040000000, 0xC000300300008000,
    0xC000000000000000, 0xD555555555555555, 0xC040804040000000, 0xC000010200000800,
    0xC000000040000000, 0xD555555555555555, 0xC000000000000000, 0xD555555555555555,
    0xC000400040004000, 0xC010000000002008, 0xC000000000000000, 0xD555555555555555,
    0xC000000000000000, 0xC000300300008000, 0xC008000040000000, 0xC080001818000102,
    0xC000000000000000, 0xD555555555555555, 0xC000000808000000, 0xC000038000040000,
    0xC000000040000000, 0xC080001818000102, 0xC000000000000000, 0xD555555555555555,
    0xC000000000000000, 0xD555555555555555, 0xC040804040000000, 0xC000000000008000,
)

# Every 64-bit k-th power for 16 <= k <= 62 with base >= 2, mapped to its base.
HIGH_POWER_BASES = {
    power: {base ** power: base for base in range(2, MAX_ROOTS_INT64[power] + 1)}
    for power in range(16, 63)
}


def residue_allowed(mask: int, residue: int) -> bool:
    """Check the bit of a residue mask for ``0 <= residue < 64``."""
    return (mask >> (63 - residue)) & 1 == 1
