"""Modular arithmetic whose intermediates never leave the operand width.

Residues returned by ``mod``, ``mod_add``, ``mod_subtract``, ``mod_multiply``
and ``mod_pow`` lie in ``[0, |m|)``; ``mods`` returns the centred residue in
``(-|m|/2, |m|/2]``. A zero modulus raises ``ZeroModulusError``. A modular
question without an answer (no inverse, no quotient) returns ``None``.

At fixed widths a modulus equal to the width's minimum value cannot be
negated. The routines treat it with two's-complement wraparound, which is
exact because ``2**(bits-1)`` divides the word size.

The 64-bit product ``a*b mod m`` is formed without a double-width
intermediate: when the operands are too large to multiply directly,
Schrage's method splits ``m = a*q + r`` and, when ``r >= q``, bitwise
doubling finishes the job.
"""

from __future__ import annotations

from typing import Iterator, NamedTuple

from int_kernel.core.errors import ZeroModulusError
from int_kernel.core.widths import INT32, INT64, IntWidth, resolve_width, tdiv, tmod

# Largest modulus whose reduced operands multiply within a signed 64-bit word.
_NARROW_MODULUS = INT32.max_value


class ModDivision(NamedTuple):
    """All solutions of ``b*x == a (mod m)``.

    The solutions are ``x0 + k*increment`` for ``0 <= k < count``, where
    ``count == gcd(b, m)`` and ``increment == |m| / count``.

    Attributes:
        x0: Smallest non-negative solution.
        increment: Distance between consecutive solutions.
        count: Number of solutions modulo ``m``.
    """

    x0: int
    increment: int
    count: int

    def solutions(self) -> Iterator[int]:
        """Yield every solution in increasing order."""
        for k in range(self.count):
            yield self.x0 + k * self.increment


def _require_modulus(m: int, operation: str) -> None:
    if m == 0:
        raise ZeroModulusError(operation)


def _is_min_modulus(m: int, width: IntWidth) -> bool:
    return width.is_fixed and m == width.min_value


def mod(v: int, m: int, *, width: IntWidth | str = INT64) -> int:
    """Non-negative residue of v modulo m.

    Args:
        v: Value to reduce.
        m: Modulus; its sign is ignored.
        width: Integer width of the operands.

    Returns:
        The residue in ``[0, |m|)``.

    Raises:
        ZeroModulusError: If m is 0.
    """
    width = resolve_width(width)
    v = width.require(v, "v")
    m = width.require(m, "m")
    _require_modulus(m, "mod")
    return v % abs(m)


def mods(v: int, m: int, *, width: IntWidth | str = INT64) -> int:
    """Signed (centred) residue of v modulo m.

    Args:
        v: Value to reduce.
        m: Modulus; its sign is ignored.
        width: Integer width of the operands.

    Returns:
        The residue in ``(-|m|/2, |m|/2]``.

    Raises:
        ZeroModulusError: If m is 0.
    """
    width = resolve_width(width)
    v = width.require(v, "v")
    m = width.require(m, "m")
    _require_modulus(m, "mods")
    if _is_min_modulus(m, width):
        quarter = 1 << (width.bits - 2)
        if v < 1 - quarter or v > quarter:
            v = width.wrap(v + m)
        return v
    m = abs(m)
    v = tmod(v, m)
    if v > m >> 1:
        v -= m
    elif v < -((m - 1) >> 1):
        v += m
    return v


def _wrapped_residue(value: int, m: int, width: IntWidth) -> int:
    # m is the width's minimum value; value is an exact sum or product.
    value = width.wrap(value)
    return width.wrap(value + m) if value < 0 else value


def mod_add(a: int, b: int, m: int, *, width: IntWidth | str = INT64) -> int:
    """Compute ``(a + b) mod m`` without overflow.

    Raises:
        ZeroModulusError: If m is 0.
    """
    width = resolve_width(width)
    a = width.require(a, "a")
    b = width.require(b, "b")
    m = width.require(m, "m")
    _require_modulus(m, "mod_add")
    if _is_min_modulus(m, width):
        return _wrapped_residue(a + b, m, width)
    m = abs(m)
    a %= m
    b %= m
    left_till_overflow = m - b
    return a + b if left_till_overflow > a else a - left_till_overflow


def mod_subtract(a: int, b: int, m: int, *, width: IntWidth | str = INT64) -> int:
    """Compute ``(a - b) mod m`` without overflow.

    Raises:
        ZeroModulusError: If m is 0.
    """
    width = resolve_width(width)
    a = width.require(a, "a")
    b = width.require(b, "b")
    m = width.require(m, "m")
    _require_modulus(m, "mod_subtract")
    if _is_min_modulus(m, width):
        return _wrapped_residue(a - b, m, width)
    m = abs(m)
    a %= m
    b %= m
    return a - b if a >= b else a + (m - b)


def _schrage_multiply(a: int, b: int, m: int) -> int:
    """Product of reduced operands ``0 <= a, b < m < 2**63`` modulo m."""
    if a > b:
        a, b = b, a
    if a < 2:
        return a * b
    if b == m - 1:
        return m - a
    if a.bit_length() + b.bit_length() < 64:
        return a * b % m
    quot, rem = divmod(m, a)
    if rem < quot:
        number = b // quot
        number = a * (b - quot * number) - rem * number
        return number + m if number < 0 else number
    number = 0
    while a > 0:
        if a & 1:
            left_till_overflow = m - number
            number = number + b if left_till_overflow > b else b - left_till_overflow
        a >>= 1
        left_till_overflow = m - b
        b = b << 1 if left_till_overflow > b else b - left_till_overflow
    return number


def _mod_multiply(a: int, b: int, m: int, width: IntWidth) -> int:
    if _is_min_modulus(m, width):
        return _wrapped_residue(a * b, m, width)
    m = abs(m)
    a %= m
    b %= m
    if not width.is_fixed or m <= _NARROW_MODULUS:
        return a * b % m
    return _schrage_multiply(a, b, m)


def mod_multiply(a: int, b: int, m: int, *, width: IntWidth | str = INT64) -> int:
    """Compute ``(a * b) mod m`` without a double-width intermediate.

    Moduli up to ``2**31 - 1`` multiply the reduced operands directly.
    Larger 64-bit moduli use Schrage's method, falling back to bitwise
    doubling when the remainder of ``m / a`` exceeds the quotient.

    Raises:
        ZeroModulusError: If m is 0.
    """
    width = resolve_width(width)
    a = width.require(a, "a")
    b = width.require(b, "b")
    m = width.require(m, "m")
    _require_modulus(m, "mod_multiply")
    return _mod_multiply(a, b, m, width)


def _bezout(b: int, m: int, width: IntWidth) -> tuple[int, int]:
    """Return ``(g, x)`` with ``b*x == g (mod m)`` and ``g = gcd(b, m)``."""
    x, u, g = 0, 1, m
    while b:
        q = tdiv(g, b)
        g, b, x, u = b, g - q * b, u, x - u * q
    if g < 0 and not _is_min_modulus(g, width):
        g, x = -g, -x
    return g, x


def _mod_inverse(a: int, m: int, width: IntWidth) -> int | None:
    if m in (1, -1):
        return 0
    g, x = _bezout(a, m, width)
    if g != 1:
        return None
    if x < 0:
        x += abs(m)
    return x


def mod_inverse(a: int, m: int, *, width: IntWidth | str = INT64) -> int | None:
    """Multiplicative inverse of a modulo m.

    Args:
        a: Value to invert.
        m: Modulus; its sign is ignored.
        width: Integer width of the operands.

    Returns:
        The inverse in ``[0, |m|)``, 0 when ``|m| == 1``, or None when
        ``gcd(a, m) != 1``.

    Raises:
        ZeroModulusError: If m is 0.
    """
    width = resolve_width(width)
    a = width.require(a, "a")
    m = width.require(m, "m")
    _require_modulus(m, "mod_inverse")
    return _mod_inverse(a, m, width)


def mod_pow(base: int, exponent: int, m: int, *, width: IntWidth | str = INT64) -> int | None:
    """Compute ``base ** exponent mod m`` by square-and-multiply.

    A negative exponent inverts the base first.

    Args:
        base: Base.
        exponent: Exponent, possibly negative.
        m: Modulus; its sign is ignored.
        width: Integer width of the operands.

    Returns:
        The power in ``[0, |m|)``, or None for a negative exponent when the
        base has no inverse modulo m.

    Raises:
        ZeroModulusError: If m is 0.
    """
    width = resolve_width(width)
    base = width.require(base, "base")
    exponent = width.require(exponent, "exponent")
    m = width.require(m, "m")
    _require_modulus(m, "mod_pow")
    m = abs(m)
    if m == 1:
        return 0
    if exponent < 0:
        base = _mod_inverse(base, m, width.widen())
        if base is None:
            return None
        exponent = -exponent
    return pow(base, exponent, m)


def mod_divide(a: int, b: int, m: int, *, width: IntWidth | str = INT64) -> ModDivision | None:
    """Solve ``b*x == a (mod m)``.

    Args:
        a: Right-hand side.
        b: Coefficient of x.
        m: Modulus.
        width: Integer width of the operands.

    Returns:
        The solution set, or None when ``gcd(b, m)`` does not divide a.
        When the gcd is the width's minimum value (``b`` and ``m`` both
        multiples of it) the count is reported as that minimum value.

    Raises:
        ZeroModulusError: If m is 0.
    """
    width = resolve_width(width)
    a = width.require(a, "a")
    b = width.require(b, "b")
    m = width.require(m, "m")
    _require_modulus(m, "mod_divide")
    a = tmod(a, m)
    g, x = _bezout(b, m, width)
    u = tdiv(a, g)
    if u * g != a:
        return None
    m = tdiv(m, g)
    x = _mod_multiply(u, x, m, width)
    return ModDivision(x, width.wrapping_abs(m), g)
