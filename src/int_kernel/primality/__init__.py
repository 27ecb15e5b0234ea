"""Primality tests from trial division up to Baillie-PSW."""

from int_kernel.primality.lucas import jacobi_symbol, passes_lucas
from int_kernel.primality.miller_rabin import is_probable_prime, passes_miller, passes_miller_rabin
from int_kernel.primality.prime_test import is_gaussian_prime, is_prime, is_prime_array, passes_baillie_psw
from int_kernel.primality.special_forms import (
    is_fermat_number,
    is_fermat_prime,
    is_mersenne_number,
    is_mersenne_prime,
    passes_lucas_lehmer,
)
from int_kernel.primality.trial import passes_trial_division

__all__ = [
    "is_fermat_number",
    "is_fermat_prime",
    "is_gaussian_prime",
    "is_mersenne_number",
    "is_mersenne_prime",
    "is_prime",
    "is_prime_array",
    "is_probable_prime",
    "jacobi_symbol",
    "passes_baillie_psw",
    "passes_lucas",
    "passes_lucas_lehmer",
    "passes_miller",
    "passes_miller_rabin",
    "passes_trial_division",
]
