"""Exception types raised by the integer kernel.

Undefined results raise; questions without an answer (no inverse, not a
perfect power) return ``None`` instead.
"""

from __future__ import annotations


class KernelError(Exception):
    """Base class for all kernel exceptions."""


class ArithmeticDomainError(KernelError, ArithmeticError):
    """Raised when a result is mathematically undefined."""


class ZeroModulusError(ArithmeticDomainError, ZeroDivisionError):
    """Raised when a modulus or divisor is zero."""

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(f"{operation}: modulus must be non-zero")


class IntegerOverflowError(KernelError, OverflowError):
    """Raised when an exact result does not fit the requested width."""

    def __init__(self, width_name: str, value: int | None = None) -> None:
        self.width_name = width_name
        self.value = value
        super().__init__(f"{width_name} overflow")
