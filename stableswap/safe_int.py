"""Checked unsigned integer arithmetic for pool math.

The well function is specified against uint256 semantics: a subtraction
that goes below zero or a division by zero reverts instead of producing a
value. SafeInt reproduces that contract in Python, where ints neither wrap
nor overflow but happily go negative.

Usage pattern:
    from stableswap.safe_int import S

    def step(d: int, s: int, dp: int) -> int:
        sd, ss, sdp = S(d), S(s), S(dp)
        return ((ss + sdp) * sd // (sd - sdp)).value  # raises instead of going negative
"""

from __future__ import annotations

UINT256_MAX = 2**256 - 1


class SafeIntError(ArithmeticError):
    """Base class for checked arithmetic faults."""

    pass


class DivisionByZero(SafeIntError):
    """Division by zero."""

    pass


class Underflow(SafeIntError):
    """Subtraction would produce a negative result."""

    pass


class Uint256Overflow(SafeIntError):
    """Value does not fit in a uint256."""

    pass


class SafeInt:
    """Non-negative integer whose operators fail loudly.

    Addition and multiplication are unchecked (Python ints are unbounded and
    every intermediate in the pool math fits comfortably in uint256).
    Subtraction raises Underflow and division raises DivisionByZero.
    Call to_uint256() at a boundary to check the final range.
    """

    __slots__ = ("_value",)
    _value: int

    def __init__(self, value: int | SafeInt) -> None:
        if isinstance(value, SafeInt):
            self._value = value._value
        elif isinstance(value, int):
            self._value = value
        else:
            raise TypeError(f"SafeInt requires int, got {type(value).__name__}")

    @property
    def value(self) -> int:
        return self._value

    def __repr__(self) -> str:
        return f"SafeInt({self._value})"

    def __str__(self) -> str:
        return str(self._value)

    def __hash__(self) -> int:
        return hash(self._value)

    def __add__(self, other: SafeInt | int) -> SafeInt:
        return SafeInt(self._value + _raw(other))

    __radd__ = __add__

    def __sub__(self, other: SafeInt | int) -> SafeInt:
        """Raises Underflow when other > self."""
        return _checked_sub(self._value, _raw(other))

    def __rsub__(self, other: int) -> SafeInt:
        return _checked_sub(other, self._value)

    def __mul__(self, other: SafeInt | int) -> SafeInt:
        return SafeInt(self._value * _raw(other))

    __rmul__ = __mul__

    def __floordiv__(self, other: SafeInt | int) -> SafeInt:
        """Truncating division. Raises DivisionByZero."""
        return _checked_div(self._value, _raw(other))

    def __rfloordiv__(self, other: int) -> SafeInt:
        return _checked_div(other, self._value)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, (SafeInt, int)):
            return self._value == _raw(other)
        return NotImplemented

    def __lt__(self, other: SafeInt | int) -> bool:
        return self._value < _raw(other)

    def __le__(self, other: SafeInt | int) -> bool:
        return self._value <= _raw(other)

    def __gt__(self, other: SafeInt | int) -> bool:
        return self._value > _raw(other)

    def __ge__(self, other: SafeInt | int) -> bool:
        return self._value >= _raw(other)

    def __int__(self) -> int:
        return self._value

    def __index__(self) -> int:
        return self._value

    def __bool__(self) -> bool:
        return self._value != 0

    def abs_diff(self, other: SafeInt | int) -> SafeInt:
        """|self - other|, never raises."""
        return SafeInt(abs(self._value - _raw(other)))

    def within(self, other: SafeInt | int, tolerance: int) -> bool:
        """True when |self - other| <= tolerance."""
        return self.abs_diff(other) <= tolerance

    def mul_div(self, numerator: SafeInt | int, denominator: SafeInt | int) -> SafeInt:
        """self * numerator // denominator with a single truncation."""
        return _checked_div(self._value * _raw(numerator), _raw(denominator))

    def to_uint256(self) -> int:
        """Unwrap, checking the uint256 range.

        Raises:
            Uint256Overflow: If the value is negative or above 2^256-1
        """
        if not 0 <= self._value <= UINT256_MAX:
            raise Uint256Overflow(f"Value outside uint256 range: {self._value}")
        return self._value


def _raw(x: SafeInt | int) -> int:
    if isinstance(x, SafeInt):
        return x._value
    return x


def _checked_sub(a: int, b: int) -> SafeInt:
    if b > a:
        raise Underflow(f"Underflow: {a} - {b}")
    return SafeInt(a - b)


def _checked_div(a: int, b: int) -> SafeInt:
    if b == 0:
        raise DivisionByZero(f"Division by zero: {a} // 0")
    return SafeInt(a // b)


# Short alias used throughout the math modules
S = SafeInt
