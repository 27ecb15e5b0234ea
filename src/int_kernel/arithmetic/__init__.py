"""Arithmetic kernel: gcd family, powers and modular arithmetic."""

from int_kernel.arithmetic.gcd import egcd, gcd, is_relatively_prime, lcm, lcm_exact
from int_kernel.arithmetic.modular import (
    ModDivision,
    mod,
    mod_add,
    mod_divide,
    mod_inverse,
    mod_multiply,
    mod_pow,
    mod_subtract,
    mods,
)
from int_kernel.arithmetic.powers import int_pow, int_pow_exact
from int_kernel.arithmetic.unsigned import (
    divide_unsigned,
    remainder_unsigned,
    to_unsigned,
    uisqrt,
)

__all__ = [
    "gcd",
    "egcd",
    "lcm",
    "lcm_exact",
    "is_relatively_prime",
    "int_pow",
    "int_pow_exact",
    "mod",
    "mods",
    "mod_add",
    "mod_subtract",
    "mod_multiply",
    "mod_pow",
    "mod_inverse",
    "mod_divide",
    "ModDivision",
    "to_unsigned",
    "divide_unsigned",
    "remainder_unsigned",
    "uisqrt",
]
