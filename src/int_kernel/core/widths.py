"""Integer widths shared by every kernel routine.

A width describes the integers an operation works on: 32-bit or 64-bit
two's-complement words, or unbounded Python integers. Every public function
takes a ``width`` keyword and runs the same algorithm body at each width, so
the width object carries the checked-integer capabilities the algorithms
need: limits, validation, wraparound and overflow-checked arithmetic.

Fixed widths take their limits from numpy so that values line up with
``np.int32`` and ``np.int64`` arrays.
"""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from int_kernel.core.errors import IntegerOverflowError


@dataclass(frozen=True)
class IntWidth:
    """Signed integer width.

    Attributes:
        name: Short name used in messages ("int32", "int64", "big").
        dtype: numpy integer type for fixed widths, None when unbounded.
        bits: Word size in bits, 0 when unbounded.
        min_value: Smallest representable value, None when unbounded.
        max_value: Largest representable value, None when unbounded.
    """

    name: str
    dtype: type[np.integer] | None = None
    bits: int = field(init=False)
    min_value: int | None = field(init=False)
    max_value: int | None = field(init=False)

    def __post_init__(self) -> None:
        if self.dtype is None:
            bits, low, high = 0, None, None
        else:
            info = np.iinfo(self.dtype)
            bits, low, high = info.bits, int(info.min), int(info.max)
        object.__setattr__(self, "bits", bits)
        object.__setattr__(self, "min_value", low)
        object.__setattr__(self, "max_value", high)

    @property
    def is_fixed(self) -> bool:
        """True for 32-bit and 64-bit words."""
        return self.dtype is not None

    @property
    def mask(self) -> int:
        """All-ones mask of the word size (fixed widths only)."""
        return (1 << self.bits) - 1

    @property
    def numpy_dtype(self) -> type:
        """Element type for numpy arrays holding values of this width."""
        return self.dtype if self.dtype is not None else object

    def fits(self, value: int) -> bool:
        """Check whether value is representable in this width."""
        if self.dtype is None:
            return True
        return self.min_value <= value <= self.max_value

    def require(self, value: object, name: str = "value") -> int:
        """Validate an argument and return it as a Python int.

        Args:
            value: Candidate argument. Python and numpy integers are
                accepted, booleans are not.
            name: Argument name used in error messages.

        Returns:
            The value as a Python int.

        Raises:
            TypeError: If value is not an integer.
            ValueError: If value does not fit a fixed width.
        """
        if isinstance(value, (bool, np.bool_)) or not isinstance(value, (int, np.integer)):
            raise TypeError(f"{name} must be an integer, got {type(value).__name__}")
        value = int(value)
        if not self.fits(value):
            raise ValueError(f"{name}={value} does not fit {self.name}")
        return value

    def wrap(self, value: int) -> int:
        """Reduce value to the width with two's-complement wraparound."""
        if self.dtype is None:
            return value
        value &= self.mask
        if value > self.max_value:
            value -= 1 << self.bits
        return value

    def checked(self, value: int) -> int:
        """Return value unchanged, raising if it does not fit the width.

        Raises:
            IntegerOverflowError: If value is out of range.
        """
        if not self.fits(value):
            raise IntegerOverflowError(self.name, value)
        return value

    def checked_add(self, a: int, b: int) -> int:
        return self.checked(a + b)

    def checked_mul(self, a: int, b: int) -> int:
        return self.checked(a * b)

    def wrapping_abs(self, value: int) -> int:
        """Absolute value; the minimum value of a fixed width maps to itself."""
        return self.wrap(abs(value))

    def widen(self) -> IntWidth:
        """Return the next wider width (BIG widens to itself)."""
        return _WIDER[self.name]


INT32 = IntWidth("int32", np.int32)
INT64 = IntWidth("int64", np.int64)
BIG = IntWidth("big")

WIDTHS = (INT32, INT64, BIG)

_BY_NAME = {width.name: width for width in WIDTHS}
_WIDER = {"int32": INT64, "int64": BIG, "big": BIG}


def resolve_width(width: IntWidth | str) -> IntWidth:
    """Look up a width by object or name.

    Args:
        width: An ``IntWidth`` or one of "int32", "int64", "big".

    Returns:
        The matching width.

    Raises:
        ValueError: If the name is unknown.
    """
    if isinstance(width, IntWidth):
        return width
    try:
        return _BY_NAME[width]
    except KeyError:
        raise ValueError(
            f"Unknown width: {width}. Available: {list(_BY_NAME.keys())}"
        ) from None


def tdiv(a: int, b: int) -> int:
    """Integer division truncating toward zero, as machine words divide."""
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def tmod(a: int, b: int) -> int:
    """Remainder of ``tdiv``; carries the sign of the dividend."""
    return a - b * tdiv(a, b)


def trailing_zeros(value: int) -> int:
    """Number of trailing zero bits of a non-zero integer."""
    return (value & -value).bit_length() - 1
