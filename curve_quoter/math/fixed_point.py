"""Fixed-point arithmetic primitives for curve and fee math.

The on-chain program multiplies u128 operands into a u256 intermediate before
dividing. Python integers are arbitrary precision, so every operation here is
computed exactly and rounded once at the end. There is a single code path for
all operand sizes: no decimal fallback, no size-dependent branching.

Rounding direction is chosen per call site so the pool is never under-charged:
amounts the trader pays round up, amounts the trader receives round down.
"""

from __future__ import annotations

from enum import Enum

from curve_quoter.errors import DivisionByZero
from curve_quoter.safe_int import S

__all__ = [
    # Types
    "Rounding",
    # Functions
    "div_rounding",
    "mul_div",
    "mul_div_u64",
    "mul_shr",
    "shl_div",
    "to_u64",
    "to_u128",
]


class Rounding(Enum):
    """Rounding direction applied after an exact rational computation."""

    UP = "up"
    DOWN = "down"


# =============================================================================
# Core primitives
# =============================================================================


def div_rounding(numerator: int, denominator: int, rounding: Rounding) -> int:
    """Divide two non-negative integers with explicit rounding.

    Args:
        numerator: Dividend (non-negative)
        denominator: Divisor (must be non-zero)
        rounding: UP for ceiling division, DOWN for floor division

    Returns:
        numerator / denominator rounded per `rounding`

    Raises:
        DivisionByZero: If denominator is zero
    """
    if denominator == 0:
        raise DivisionByZero(f"Division by zero: {numerator} / 0")
    if rounding is Rounding.UP:
        # Ceiling via negated floor division, exact for any operand size
        return -(-numerator // denominator)
    return numerator // denominator


def mul_div(x: int, y: int, denominator: int, rounding: Rounding) -> int:
    """Compute x * y / denominator with explicit rounding.

    Args:
        x: First factor
        y: Second factor
        denominator: Divisor (must be non-zero)
        rounding: Rounding direction

    Returns:
        Exact x * y / denominator rounded per `rounding`

    Raises:
        DivisionByZero: If denominator is zero
    """
    if denominator == 0:
        raise DivisionByZero(f"MulDiv: division by zero ({x} * {y} / 0)")
    if x == 0 or y == 0:
        return 0
    return div_rounding(x * y, denominator, rounding)


def mul_shr(x: int, y: int, offset: int) -> int:
    """Compute (x * y) >> offset (floor)."""
    if x == 0 or y == 0:
        return 0
    return (x * y) >> offset


def shl_div(x: int, y: int, offset: int, rounding: Rounding) -> int:
    """Compute (x << offset) / y with explicit rounding.

    Raises:
        DivisionByZero: If y is zero
    """
    if y == 0:
        raise DivisionByZero(f"ShlDiv: division by zero ({x} << {offset} / 0)")
    if x == 0:
        return 0
    return div_rounding(x << offset, y, rounding)


# =============================================================================
# Casting helpers
# =============================================================================


def to_u64(value: int) -> int:
    """Validate that value fits the program's u64 amount domain.

    Raises:
        MathOverflow: If value is negative or exceeds 2^64-1
    """
    return S(value).to_u64()


def to_u128(value: int) -> int:
    """Validate that value fits the program's u128 price/liquidity domain.

    Raises:
        MathOverflow: If value is negative or exceeds 2^128-1
    """
    return S(value).to_u128()


def mul_div_u64(x: int, y: int, denominator: int, rounding: Rounding) -> int:
    """mul_div followed by a checked cast to u64."""
    return to_u64(mul_div(x, y, denominator, rounding))
