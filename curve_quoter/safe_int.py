"""Checked unsigned integer wrapper for token amounts.

This module provides SafeInt, a lightweight wrapper that makes arithmetic on
token amounts safe by default:
- Division by zero raises DivisionByZero
- Subtraction below zero raises Underflow
- Values outside u64/u128 are caught on conversion

Usage pattern:
    from curve_quoter.safe_int import S

    def remaining(amount: int, consumed: int) -> int:
        # Wrap at entry
        left = S(amount) - consumed  # Raises if consumed > amount

        # Unwrap at exit
        return left.to_u64()
"""

from __future__ import annotations

from curve_quoter.constants import U64_MAX, U128_MAX
from curve_quoter.errors import DivisionByZero, MathOverflow, Underflow


class SafeInt:
    """Non-negative integer with checked arithmetic.

    Arithmetic never wraps: Python integers are unbounded, so intermediate
    products are exact and range checks happen only when a value is cast
    back to the program's u64/u128 domain.

    Attributes:
        value: The underlying integer value (read-only)
    """

    __slots__ = ("_value",)
    _value: int

    def __init__(self, value: int | SafeInt) -> None:
        if isinstance(value, SafeInt):
            self._value = value._value
        elif isinstance(value, int) and not isinstance(value, bool):
            self._value = value
        else:
            raise TypeError(f"SafeInt requires int, got {type(value).__name__}")

    @property
    def value(self) -> int:
        """The underlying integer value."""
        return self._value

    def __repr__(self) -> str:
        return f"SafeInt({self._value})"

    def __str__(self) -> str:
        return str(self._value)

    def __hash__(self) -> int:
        return hash(self._value)

    # --- Arithmetic operations ---

    def __sub__(self, other: SafeInt | int) -> SafeInt:
        """Subtract other from self.

        Raises:
            Underflow: If result would be negative
        """
        other_val = _extract_value(other)
        result = self._value - other_val
        if result < 0:
            raise Underflow(f"Underflow: {self._value} - {other_val} = {result}")
        return SafeInt(result)

    def __mul__(self, other: SafeInt | int) -> SafeInt:
        return SafeInt(self._value * _extract_value(other))

    def __floordiv__(self, other: SafeInt | int) -> SafeInt:
        """Floor division.

        Raises:
            DivisionByZero: If other is zero
        """
        other_val = _extract_value(other)
        if other_val == 0:
            raise DivisionByZero(f"Division by zero: {self._value} // 0")
        return SafeInt(self._value // other_val)

    def __lshift__(self, bits: int) -> SafeInt:
        return SafeInt(self._value << bits)

    # --- Comparison operations ---

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SafeInt):
            return self._value == other._value
        if isinstance(other, int):
            return self._value == other
        return NotImplemented

    def __lt__(self, other: SafeInt | int) -> bool:
        return self._value < _extract_value(other)

    def __le__(self, other: SafeInt | int) -> bool:
        return self._value <= _extract_value(other)

    def __gt__(self, other: SafeInt | int) -> bool:
        return self._value > _extract_value(other)

    def __ge__(self, other: SafeInt | int) -> bool:
        return self._value >= _extract_value(other)

    # --- Conversion ---

    def __int__(self) -> int:
        return self._value

    def __bool__(self) -> bool:
        return self._value != 0

    def __index__(self) -> int:
        return self._value

    # --- Named operations ---

    def to_u64(self) -> int:
        """Convert to int, validating u64 bounds.

        Raises:
            MathOverflow: If value is negative or exceeds 2^64-1
        """
        return _checked_cast(self._value, U64_MAX, "u64")

    def to_u128(self) -> int:
        """Convert to int, validating u128 bounds.

        Raises:
            MathOverflow: If value is negative or exceeds 2^128-1
        """
        return _checked_cast(self._value, U128_MAX, "u128")

    @classmethod
    def zero(cls) -> SafeInt:
        return cls(0)


def _checked_cast(value: int, max_value: int, type_name: str) -> int:
    if value < 0:
        raise MathOverflow(f"Negative value cannot be {type_name}: {value}")
    if value > max_value:
        raise MathOverflow(f"Value exceeds {type_name} max: {value}")
    return value


def _extract_value(x: SafeInt | int) -> int:
    """Extract integer value from SafeInt or int."""
    if isinstance(x, SafeInt):
        return x._value
    return x


# Convenience alias for concise code
S = SafeInt

__all__ = ["SafeInt", "S"]
