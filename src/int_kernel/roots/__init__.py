"""Integer roots and perfect-power detection."""

from int_kernel.roots.iroot import floor_root, icbrt, iroot, isqrt
from int_kernel.roots.perfect_power import (
    PerfectPower,
    get_base_of_perfect_cube,
    get_base_of_perfect_power,
    get_base_of_perfect_square,
    get_perfect_power,
    is_perfect_cube,
    is_perfect_power,
    is_perfect_square,
)

__all__ = [
    "isqrt",
    "icbrt",
    "iroot",
    "floor_root",
    "PerfectPower",
    "get_base_of_perfect_square",
    "is_perfect_square",
    "get_base_of_perfect_cube",
    "is_perfect_cube",
    "get_base_of_perfect_power",
    "is_perfect_power",
    "get_perfect_power",
]
