"""int_kernel - exact integer arithmetic, roots and primality at three widths."""

__version__ = "0.1.0"

from int_kernel.arithmetic import (
    ModDivision,
    egcd,
    gcd,
    int_pow,
    int_pow_exact,
    is_relatively_prime,
    lcm,
    lcm_exact,
    mod,
    mod_add,
    mod_divide,
    mod_inverse,
    mod_multiply,
    mod_pow,
    mod_subtract,
    mods,
)
from int_kernel.config import DEFAULT_CONFIG, PrimalityConfig
from int_kernel.core import (
    BIG,
    INT32,
    INT64,
    ArithmeticDomainError,
    IntegerOverflowError,
    IntWidth,
    KernelError,
    ZeroModulusError,
)
from int_kernel.primality import (
    is_gaussian_prime,
    is_prime,
    is_prime_array,
    is_probable_prime,
    passes_baillie_psw,
    passes_lucas,
    passes_lucas_lehmer,
    passes_miller,
    passes_miller_rabin,
    passes_trial_division,
)
from int_kernel.roots import (
    PerfectPower,
    get_base_of_perfect_cube,
    get_base_of_perfect_power,
    get_base_of_perfect_square,
    get_perfect_power,
    icbrt,
    iroot,
    isqrt,
)
from int_kernel.sequence import PrimeSequence, next_prime

__all__ = [
    # Widths and errors
    "IntWidth",
    "INT32",
    "INT64",
    "BIG",
    "KernelError",
    "ArithmeticDomainError",
    "ZeroModulusError",
    "IntegerOverflowError",
    "PrimalityConfig",
    "DEFAULT_CONFIG",
    # Arithmetic
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
    # Roots
    "isqrt",
    "icbrt",
    "iroot",
    "PerfectPower",
    "get_base_of_perfect_square",
    "get_base_of_perfect_cube",
    "get_base_of_perfect_power",
    "get_perfect_power",
    # Primality
    "is_prime",
    "is_prime_array",
    "is_probable_prime",
    "is_gaussian_prime",
    "passes_trial_division",
    "passes_miller_rabin",
    "passes_miller",
    "passes_lucas",
    "passes_lucas_lehmer",
    "passes_baillie_psw",
    # Sequences
    "PrimeSequence",
    "next_prime",
]
