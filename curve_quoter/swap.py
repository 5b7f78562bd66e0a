"""Swap amount walker over a multi-segment bonding curve.

The curve is a list of (sqrt_price, liquidity) breakpoints ordered by price.
Segment i carries curve[i].liquidity between curve[i-1].sqrt_price and
curve[i].sqrt_price. A swap consumes input segment by segment from the pool's
current price until the input is exhausted:

- Base→Quote (selling base) moves the price down. Below the lowest
  breakpoint the walk keeps using curve[0].liquidity with no floor.
- Quote→Base (buying base) moves the price up. The last breakpoint is a hard
  ceiling, so input left over after it raises InsufficientLiquidity.

Each segment contributes an exactly computed integer output. Rounding happens
per segment (output down, capacity up), and the sum is cast back to u64 once.
"""

from __future__ import annotations

from dataclasses import dataclass

from curve_quoter.config import DEFAULT_PROGRAM_CONSTANTS, ProgramConstants
from curve_quoter.errors import InsufficientLiquidity, InvalidConfig
from curve_quoter.fees.calculator import get_fee_on_amount
from curve_quoter.fees.result import FeeMode, FeeOnAmountResult
from curve_quoter.math.curve import (
    get_delta_amount_base_unsigned,
    get_delta_amount_quote_unsigned,
    get_next_sqrt_price_from_input,
)
from curve_quoter.math.fixed_point import Rounding, to_u64
from curve_quoter.pools.types import ConfigSnapshot, PoolSnapshot, TradeDirection
from curve_quoter.safe_int import S


@dataclass(frozen=True)
class SwapAmount:
    """Output of one directional curve walk."""

    output_amount: int
    next_sqrt_price: int


@dataclass(frozen=True)
class SwapResult:
    """Complete result of one quotation.

    Attributes:
        actual_input_amount: Input that reaches the curve (after any input fee)
        output_amount: Amount the trader receives (after any output fee)
        next_sqrt_price: Pool sqrt price after the swap
        trading_fee: Fee retained by the pool
        protocol_fee: Fee retained by the protocol
        referral_fee: Fee paid to the referrer
    """

    actual_input_amount: int
    output_amount: int
    next_sqrt_price: int
    trading_fee: int
    protocol_fee: int
    referral_fee: int

    @property
    def total_fee(self) -> int:
        """Gross trading fee charged on the fee-bearing leg."""
        return self.trading_fee + self.protocol_fee + self.referral_fee


def get_swap_result(
    pool: PoolSnapshot,
    config: ConfigSnapshot,
    amount_in: int,
    fee_mode: FeeMode,
    trade_direction: TradeDirection,
    current_point: int,
    *,
    constants: ProgramConstants = DEFAULT_PROGRAM_CONSTANTS,
) -> SwapResult:
    """Quote a swap: fees, curve walk, and fee breakdown.

    Exactly one fee application happens per call: on the input before the
    walk when `fee_mode.fees_on_input`, otherwise on the walk's output.

    Args:
        pool: Pool snapshot (current price, fees, activation point)
        config: Config snapshot (curve)
        amount_in: Gross input amount
        fee_mode: Fee placement from get_fee_mode
        trade_direction: Base→Quote or Quote→Base
        current_point: Current slot or timestamp, same unit as activation_point

    Returns:
        SwapResult with the net output and fee parts

    Raises:
        MathOverflow: If amount_in or any result does not fit u64
        InsufficientLiquidity: If a Quote→Base swap exceeds the curve capacity
        InvalidConfig: If the trade direction or fee scheduler mode is not
            recognized
    """
    trade_direction = TradeDirection.parse(trade_direction)
    amount_in = to_u64(amount_in)

    if fee_mode.fees_on_input:
        input_fee = get_fee_on_amount(
            amount_in,
            pool.pool_fees,
            fee_mode.has_referral,
            current_point,
            pool.activation_point,
            constants=constants,
        )
        actual_amount_in = input_fee.amount
    else:
        input_fee = FeeOnAmountResult.no_fee(amount_in)
        actual_amount_in = amount_in

    if trade_direction is TradeDirection.BASE_TO_QUOTE:
        swap_amount = get_swap_amount_from_base_to_quote(
            config, pool.sqrt_price, actual_amount_in, constants=constants
        )
    else:
        swap_amount = get_swap_amount_from_quote_to_base(
            config, pool.sqrt_price, actual_amount_in, constants=constants
        )

    if fee_mode.fees_on_input:
        applied_fee = input_fee
        actual_amount_out = swap_amount.output_amount
    else:
        applied_fee = get_fee_on_amount(
            swap_amount.output_amount,
            pool.pool_fees,
            fee_mode.has_referral,
            current_point,
            pool.activation_point,
            constants=constants,
        )
        actual_amount_out = applied_fee.amount

    return SwapResult(
        actual_input_amount=actual_amount_in,
        output_amount=actual_amount_out,
        next_sqrt_price=swap_amount.next_sqrt_price,
        trading_fee=applied_fee.trading_fee,
        protocol_fee=applied_fee.protocol_fee,
        referral_fee=applied_fee.referral_fee,
    )


def get_swap_amount_from_base_to_quote(
    config: ConfigSnapshot,
    current_sqrt_price: int,
    amount_in: int,
    *,
    constants: ProgramConstants = DEFAULT_PROGRAM_CONSTANTS,
) -> SwapAmount:
    """Walk the curve downward selling `amount_in` of base token.

    Returns:
        SwapAmount with the quote output and the resulting sqrt price
    """
    if amount_in == 0:
        return SwapAmount(output_amount=0, next_sqrt_price=current_sqrt_price)

    curve = _bounded_curve(config, constants)
    total_output_amount = 0
    sqrt_price = current_sqrt_price
    amount_left = S(amount_in)

    for i in range(len(curve) - 1, -1, -1):
        lower_sqrt_price = curve[i].sqrt_price
        if lower_sqrt_price >= sqrt_price:
            continue

        # Liquidity between curve[i] and the current price belongs to the segment above
        liquidity = curve[i + 1].liquidity if i + 1 < len(curve) else curve[i].liquidity
        if liquidity == 0:
            continue

        max_amount_in = get_delta_amount_base_unsigned(
            lower_sqrt_price, sqrt_price, liquidity, Rounding.UP
        )
        if amount_left < max_amount_in:
            next_sqrt_price = get_next_sqrt_price_from_input(
                sqrt_price, liquidity, amount_left.value, True, constants=constants
            )
            total_output_amount += get_delta_amount_quote_unsigned(
                next_sqrt_price, sqrt_price, liquidity, Rounding.DOWN, constants=constants
            )
            sqrt_price = next_sqrt_price
            amount_left = S.zero()
            break

        total_output_amount += get_delta_amount_quote_unsigned(
            lower_sqrt_price, sqrt_price, liquidity, Rounding.DOWN, constants=constants
        )
        sqrt_price = lower_sqrt_price
        amount_left = amount_left - max_amount_in

    # Below the lowest breakpoint the first segment's liquidity extends without a floor
    if amount_left and curve[0].liquidity != 0:
        next_sqrt_price = get_next_sqrt_price_from_input(
            sqrt_price, curve[0].liquidity, amount_left.value, True, constants=constants
        )
        total_output_amount += get_delta_amount_quote_unsigned(
            next_sqrt_price, sqrt_price, curve[0].liquidity, Rounding.DOWN, constants=constants
        )
        sqrt_price = next_sqrt_price

    return SwapAmount(output_amount=to_u64(total_output_amount), next_sqrt_price=sqrt_price)


def get_swap_amount_from_quote_to_base(
    config: ConfigSnapshot,
    current_sqrt_price: int,
    amount_in: int,
    *,
    constants: ProgramConstants = DEFAULT_PROGRAM_CONSTANTS,
) -> SwapAmount:
    """Walk the curve upward paying `amount_in` of quote token.

    Returns:
        SwapAmount with the base output and the resulting sqrt price

    Raises:
        InsufficientLiquidity: If the curve cannot absorb the whole input
    """
    if amount_in == 0:
        return SwapAmount(output_amount=0, next_sqrt_price=current_sqrt_price)

    curve = _bounded_curve(config, constants)
    total_output_amount = 0
    sqrt_price = current_sqrt_price
    amount_left = S(amount_in)

    for segment in curve:
        if segment.liquidity == 0:
            continue
        upper_sqrt_price = segment.sqrt_price
        if upper_sqrt_price <= sqrt_price:
            continue

        max_amount_in = get_delta_amount_quote_unsigned(
            sqrt_price, upper_sqrt_price, segment.liquidity, Rounding.UP, constants=constants
        )
        if amount_left < max_amount_in:
            next_sqrt_price = get_next_sqrt_price_from_input(
                sqrt_price, segment.liquidity, amount_left.value, False, constants=constants
            )
            total_output_amount += get_delta_amount_base_unsigned(
                sqrt_price, next_sqrt_price, segment.liquidity, Rounding.DOWN
            )
            sqrt_price = next_sqrt_price
            amount_left = S.zero()
            break

        total_output_amount += get_delta_amount_base_unsigned(
            sqrt_price, upper_sqrt_price, segment.liquidity, Rounding.DOWN
        )
        sqrt_price = upper_sqrt_price
        amount_left = amount_left - max_amount_in

    if amount_left:
        raise InsufficientLiquidity(
            f"Not enough liquidity to process the entire amount: "
            f"{amount_left.value} of {amount_in} left at sqrt price {sqrt_price}"
        )

    return SwapAmount(output_amount=to_u64(total_output_amount), next_sqrt_price=sqrt_price)


def _bounded_curve(config: ConfigSnapshot, constants: ProgramConstants) -> tuple:
    if not config.curve:
        raise InvalidConfig("Curve has no segments")
    # The program iterates at most MAX_CURVE_POINT breakpoints
    return config.curve[: constants.max_curve_point]


__all__ = [
    "SwapAmount",
    "SwapResult",
    "get_swap_result",
    "get_swap_amount_from_base_to_quote",
    "get_swap_amount_from_quote_to_base",
]
