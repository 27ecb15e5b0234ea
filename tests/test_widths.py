"""Tests for integer widths and the kernel exception hierarchy."""

import numpy as np
import pytest

from int_kernel.core.errors import (
    ArithmeticDomainError,
    IntegerOverflowError,
    KernelError,
    ZeroModulusError,
)
from int_kernel.core.widths import (
    BIG,
    INT32,
    INT64,
    WIDTHS,
    resolve_width,
    tdiv,
    tmod,
    trailing_zeros,
)


class TestLimits:
    """Tests for width limits."""

    def test_int32_limits(self):
        """Test 32-bit limits match numpy."""
        assert INT32.bits == 32
        assert INT32.min_value == -2**31
        assert INT32.max_value == 2**31 - 1

    def test_int64_limits(self):
        """Test 64-bit limits match numpy."""
        assert INT64.bits == 64
        assert INT64.min_value == -2**63
        assert INT64.max_value == 2**63 - 1

    def test_big_unbounded(self):
        """Test that BIG has no limits."""
        assert not BIG.is_fixed
        assert BIG.min_value is None
        assert BIG.fits(10**100)
        assert BIG.fits(-10**100)

    def test_numpy_dtype(self):
        """Test array dtypes for each width."""
        assert INT32.numpy_dtype is np.int32
        assert INT64.numpy_dtype is np.int64
        assert BIG.numpy_dtype is object


class TestRequire:
    """Tests for argument validation."""

    def test_accepts_python_and_numpy_ints(self):
        """Test accepted integer types."""
        assert INT64.require(5) == 5
        value = INT64.require(np.int64(-7))
        assert value == -7
        assert type(value) is int

    def test_rejects_non_integers(self):
        """Test that floats, strings and booleans raise TypeError."""
        for bad in (1.5, "3", None, True, np.bool_(False)):
            with pytest.raises(TypeError):
                INT64.require(bad)

    def test_rejects_out_of_range(self):
        """Test that values outside a fixed width raise ValueError."""
        with pytest.raises(ValueError):
            INT32.require(2**31)
        with pytest.raises(ValueError):
            INT64.require(-2**63 - 1)
        assert BIG.require(2**200) == 2**200

    def test_error_names_argument(self):
        """Test that the message mentions the argument."""
        with pytest.raises(ValueError, match="modulus"):
            INT32.require(2**40, "modulus")


class TestWrapAndCheck:
    """Tests for wraparound and checked arithmetic."""

    def test_wrap(self):
        """Test two's-complement wraparound."""
        assert INT32.wrap(2**31) == -2**31
        assert INT32.wrap(2**32 + 5) == 5
        assert INT64.wrap(-2**63 - 1) == 2**63 - 1
        assert INT64.wrap(-1) == -1
        assert BIG.wrap(2**70) == 2**70

    def test_wrapping_abs(self):
        """Test that abs of the minimum value is itself."""
        assert INT64.wrapping_abs(INT64.min_value) == INT64.min_value
        assert INT32.wrapping_abs(-5) == 5

    def test_checked_overflow(self):
        """Test that checked operations raise on overflow."""
        with pytest.raises(IntegerOverflowError):
            INT64.checked_add(INT64.max_value, 1)
        with pytest.raises(IntegerOverflowError):
            INT32.checked_mul(2**16, 2**15)
        with pytest.raises(IntegerOverflowError):
            INT64.checked(-INT64.min_value)
        assert INT64.checked_add(0, -INT64.max_value) == -INT64.max_value
        assert BIG.checked_mul(2**63, 2**63) == 2**126

    def test_widen(self):
        """Test the widening chain."""
        assert INT32.widen() is INT64
        assert INT64.widen() is BIG
        assert BIG.widen() is BIG


class TestResolveWidth:
    """Tests for resolve_width function."""

    def test_by_name(self):
        """Test lookup by name."""
        for width in WIDTHS:
            assert resolve_width(width.name) is width
            assert resolve_width(width) is width

    def test_unknown_name(self):
        """Test that unknown names raise ValueError."""
        with pytest.raises(ValueError):
            resolve_width("int128")


class TestHelpers:
    """Tests for truncated division and bit helpers."""

    def test_truncated_division(self):
        """Test that division truncates toward zero."""
        assert tdiv(7, 2) == 3
        assert tdiv(-7, 2) == -3
        assert tdiv(7, -2) == -3
        assert tdiv(-7, -2) == 3
        assert tmod(-7, 2) == -1
        assert tmod(7, -2) == 1

    def test_trailing_zeros(self):
        """Test trailing zero count."""
        assert trailing_zeros(1) == 0
        assert trailing_zeros(8) == 3
        assert trailing_zeros(-8) == 3
        assert trailing_zeros(INT64.min_value) == 63


class TestErrors:
    """Tests for the exception hierarchy."""

    def test_hierarchy(self):
        """Test that kernel errors are also built-in arithmetic errors."""
        assert issubclass(ArithmeticDomainError, KernelError)
        assert issubclass(ArithmeticDomainError, ArithmeticError)
        assert issubclass(ZeroModulusError, ZeroDivisionError)
        assert issubclass(ZeroModulusError, ArithmeticDomainError)
        assert issubclass(IntegerOverflowError, OverflowError)

    def test_messages(self):
        """Test error messages and attributes."""
        error = ZeroModulusError("mod_pow")
        assert "mod_pow" in str(error)
        overflow = IntegerOverflowError("int32", 2**31)
        assert overflow.width_name == "int32"
        assert overflow.value == 2**31
