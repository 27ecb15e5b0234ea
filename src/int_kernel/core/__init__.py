"""Integer widths, kernel exceptions and the numpy sieve."""

from int_kernel.core.errors import (
    ArithmeticDomainError,
    IntegerOverflowError,
    KernelError,
    ZeroModulusError,
)
from int_kernel.core.sieve import prime_sieve_mask, sieve_primes
from int_kernel.core.widths import BIG, INT32, INT64, WIDTHS, IntWidth, resolve_width

__all__ = [
    "IntWidth",
    "INT32",
    "INT64",
    "BIG",
    "WIDTHS",
    "resolve_width",
    "KernelError",
    "ArithmeticDomainError",
    "ZeroModulusError",
    "IntegerOverflowError",
    "sieve_primes",
    "prime_sieve_mask",
]
