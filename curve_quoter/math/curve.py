"""Curve math over a single constant-liquidity price segment.

Prices are sqrt prices in Q64.64 fixed-point. Within one segment:

    base delta:  Δa = L * (√P_upper - √P_lower) / (√P_upper * √P_lower)
    quote delta: Δb = L * (√P_upper - √P_lower) / 2^(2 * RESOLUTION)
"""

from __future__ import annotations

from curve_quoter.config import DEFAULT_PROGRAM_CONSTANTS, ProgramConstants
from curve_quoter.errors import InvalidRange, InvalidState
from curve_quoter.math.fixed_point import Rounding, div_rounding, mul_div, shl_div
from curve_quoter.safe_int import S


def get_delta_amount_base_unsigned(
    lower_sqrt_price: int,
    upper_sqrt_price: int,
    liquidity: int,
    rounding: Rounding,
) -> int:
    """Amount of base token spanned by a price range.

    Args:
        lower_sqrt_price: Lower bound of the range
        upper_sqrt_price: Upper bound of the range
        liquidity: Liquidity active across the range
        rounding: UP when the trader pays the amount, DOWN when they receive it

    Returns:
        liquidity * (upper - lower) / (lower * upper), rounded

    Raises:
        InvalidRange: If the range is inverted or either bound is zero
    """
    if liquidity == 0:
        return 0
    _check_range(lower_sqrt_price, upper_sqrt_price)

    denominator = lower_sqrt_price * upper_sqrt_price
    if denominator == 0:
        raise InvalidRange(
            f"Zero sqrt price in range [{lower_sqrt_price}, {upper_sqrt_price}]"
        )
    numerator = upper_sqrt_price - lower_sqrt_price
    return mul_div(liquidity, numerator, denominator, rounding)


def get_delta_amount_quote_unsigned(
    lower_sqrt_price: int,
    upper_sqrt_price: int,
    liquidity: int,
    rounding: Rounding,
    *,
    constants: ProgramConstants = DEFAULT_PROGRAM_CONSTANTS,
) -> int:
    """Amount of quote token spanned by a price range.

    Returns:
        liquidity * (upper - lower) / 2^(2 * RESOLUTION), rounded

    Raises:
        InvalidRange: If the range is inverted
    """
    if liquidity == 0:
        return 0
    _check_range(lower_sqrt_price, upper_sqrt_price)

    delta_sqrt_price = upper_sqrt_price - lower_sqrt_price
    return div_rounding(liquidity * delta_sqrt_price, 1 << constants.scale_offset, rounding)


def get_next_sqrt_price_from_input(
    sqrt_price: int,
    liquidity: int,
    amount_in: int,
    base_for_quote: bool,
    *,
    constants: ProgramConstants = DEFAULT_PROGRAM_CONSTANTS,
) -> int:
    """Sqrt price after adding `amount_in` of input token to the segment.

    Rounds so the resulting price never passes the target: up when base token
    is sold into the pool (price falls), down when quote token is paid in
    (price rises).

    Args:
        sqrt_price: Current sqrt price
        liquidity: Liquidity active at the current price
        amount_in: Input amount (after any input fee)
        base_for_quote: True if the input token is the base token

    Raises:
        InvalidState: If sqrt_price or liquidity is zero
    """
    if sqrt_price == 0 or liquidity == 0:
        raise InvalidState(
            f"Price or liquidity cannot be zero (sqrt_price={sqrt_price}, liquidity={liquidity})"
        )

    if base_for_quote:
        return get_next_sqrt_price_from_amount_base_rounding_up(sqrt_price, liquidity, amount_in)
    return get_next_sqrt_price_from_amount_quote_rounding_down(
        sqrt_price, liquidity, amount_in, constants=constants
    )


def get_next_sqrt_price_from_amount_base_rounding_up(
    sqrt_price: int,
    liquidity: int,
    amount: int,
) -> int:
    """√P' = √P * L / (L + Δx * √P), rounded up."""
    if amount == 0:
        return sqrt_price
    denominator = liquidity + amount * sqrt_price
    return mul_div(sqrt_price, liquidity, denominator, Rounding.UP)


def get_next_sqrt_price_from_amount_quote_rounding_down(
    sqrt_price: int,
    liquidity: int,
    amount: int,
    *,
    constants: ProgramConstants = DEFAULT_PROGRAM_CONSTANTS,
) -> int:
    """√P' = √P + Δy / L, rounded down."""
    if amount == 0:
        return sqrt_price
    return sqrt_price + shl_div(amount, liquidity, constants.scale_offset, Rounding.DOWN)


def get_initial_liquidity_from_delta_quote(
    quote_amount: int,
    sqrt_min_price: int,
    sqrt_price: int,
    *,
    constants: ProgramConstants = DEFAULT_PROGRAM_CONSTANTS,
) -> int:
    """Seed liquidity so that `quote_amount` spans [sqrt_min_price, sqrt_price].

    L = Δb * 2^(2 * RESOLUTION) / (√P - √P_min), rounded down so the pool
    never claims more liquidity than the quote deposit supports.

    Raises:
        InvalidRange: If sqrt_price is below sqrt_min_price
        DivisionByZero: If the two prices are equal
    """
    if sqrt_price < sqrt_min_price:
        raise InvalidRange(f"sqrt_price {sqrt_price} below sqrt_min_price {sqrt_min_price}")
    price_delta = S(sqrt_price) - sqrt_min_price
    return ((S(quote_amount) << constants.scale_offset) // price_delta).value


def get_initialize_amounts(
    sqrt_min_price: int,
    sqrt_max_price: int,
    sqrt_price: int,
    liquidity: int,
    *,
    constants: ProgramConstants = DEFAULT_PROGRAM_CONSTANTS,
) -> tuple[int, int]:
    """Base and quote amounts needed to seed a curve at `sqrt_price`.

    Both amounts are rounded up: the depositor covers the full range.

    Returns:
        Tuple of (base amount over [sqrt_price, sqrt_max_price],
        quote amount over [sqrt_min_price, sqrt_price])
    """
    amount_base = get_delta_amount_base_unsigned(
        sqrt_price, sqrt_max_price, liquidity, Rounding.UP
    )
    amount_quote = get_delta_amount_quote_unsigned(
        sqrt_min_price, sqrt_price, liquidity, Rounding.UP, constants=constants
    )
    return amount_base, amount_quote


def _check_range(lower_sqrt_price: int, upper_sqrt_price: int) -> None:
    if upper_sqrt_price < lower_sqrt_price:
        raise InvalidRange(
            f"Inverted price range: lower {lower_sqrt_price} > upper {upper_sqrt_price}"
        )


__all__ = [
    "get_delta_amount_base_unsigned",
    "get_delta_amount_quote_unsigned",
    "get_next_sqrt_price_from_input",
    "get_next_sqrt_price_from_amount_base_rounding_up",
    "get_next_sqrt_price_from_amount_quote_rounding_down",
    "get_initial_liquidity_from_delta_quote",
    "get_initialize_amounts",
]
