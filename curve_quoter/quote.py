"""Swap quotation service.

Ties the engine together for one request: derives the trade direction and
fee placement, runs the swap math, and computes a slippage-protected minimum
output. The current point is always an explicit argument; reading the clock
is the caller's job.
"""

from __future__ import annotations

from dataclasses import dataclass

import structlog

from curve_quoter.config import DEFAULT_PROGRAM_CONSTANTS, ProgramConstants
from curve_quoter.constants import BASIS_POINT_MAX, DEFAULT_SLIPPAGE_BPS
from curve_quoter.fees.calculator import get_fee_mode
from curve_quoter.fees.result import FeeMode
from curve_quoter.math.fixed_point import Rounding, mul_div
from curve_quoter.pools.types import ConfigSnapshot, PoolSnapshot, TradeDirection
from curve_quoter.pools.validation import validate_snapshots
from curve_quoter.swap import SwapResult, get_swap_result

logger = structlog.get_logger()


@dataclass(frozen=True)
class SwapQuote:
    """Quote for one swap.

    Attributes:
        swap_result: Output amount, next price and fee breakdown
        trade_direction: Direction derived from the input token
        fee_mode: Where the fee was charged
        min_output_amount: Output bound after slippage tolerance
        slippage_bps: Slippage tolerance used, in basis points
    """

    swap_result: SwapResult
    trade_direction: TradeDirection
    fee_mode: FeeMode
    min_output_amount: int
    slippage_bps: int

    @property
    def output_amount(self) -> int:
        return self.swap_result.output_amount


def get_trade_direction(
    pool: PoolSnapshot,
    *,
    input_is_base: bool | None = None,
    input_mint: str | None = None,
) -> TradeDirection:
    """Trade direction from the input token.

    Exactly one of `input_is_base` and `input_mint` must be given. An input
    mint is compared with the pool's base mint; anything else is the quote
    token.

    Raises:
        ValueError: If neither or both are given, or the pool has no base mint
    """
    if (input_is_base is None) == (input_mint is None):
        raise ValueError("Pass exactly one of input_is_base or input_mint")
    if input_mint is not None:
        if pool.base_mint is None:
            raise ValueError("Pool snapshot has no base mint to compare input_mint with")
        input_is_base = input_mint == pool.base_mint
    return TradeDirection.BASE_TO_QUOTE if input_is_base else TradeDirection.QUOTE_TO_BASE


def get_min_output_amount(output_amount: int, slippage_bps: int) -> int:
    """Apply slippage tolerance: floor(output * (10_000 - bps) / 10_000).

    Raises:
        ValueError: If slippage_bps is outside [0, 10_000]
    """
    if not 0 <= slippage_bps <= BASIS_POINT_MAX:
        raise ValueError(f"slippage_bps must be in [0, {BASIS_POINT_MAX}], got {slippage_bps}")
    return mul_div(output_amount, BASIS_POINT_MAX - slippage_bps, BASIS_POINT_MAX, Rounding.DOWN)


def swap_quote(
    pool: PoolSnapshot,
    config: ConfigSnapshot,
    amount_in: int,
    *,
    current_point: int,
    input_is_base: bool | None = None,
    input_mint: str | None = None,
    has_referral: bool = False,
    slippage_bps: int = DEFAULT_SLIPPAGE_BPS,
    validate: bool = True,
    constants: ProgramConstants = DEFAULT_PROGRAM_CONSTANTS,
) -> SwapQuote:
    """Quote the output of swapping `amount_in` against a pool.

    Args:
        pool: Pool snapshot
        config: Config snapshot of the pool
        amount_in: Gross input amount
        current_point: Current slot or timestamp, per config.activation_type
        input_is_base: True when selling the base token
        input_mint: Input token mint (alternative to input_is_base)
        has_referral: Whether a referral account is attached to the swap
        slippage_bps: Tolerance for the minimum output bound
        validate: Check snapshot consistency before quoting

    Returns:
        SwapQuote with the unslipped output, fee breakdown and minimum output

    Raises:
        CurveMathError: Any engine error (see curve_quoter.errors)
        ValueError: On inconsistent direction arguments or slippage
    """
    if validate:
        validate_snapshots(pool, config, constants=constants)

    trade_direction = get_trade_direction(pool, input_is_base=input_is_base, input_mint=input_mint)
    fee_mode = get_fee_mode(config.collect_fee_mode, trade_direction, has_referral)

    swap_result = get_swap_result(
        pool,
        config,
        amount_in,
        fee_mode,
        trade_direction,
        current_point,
        constants=constants,
    )
    min_output_amount = get_min_output_amount(swap_result.output_amount, slippage_bps)

    logger.debug(
        "swap_quote_computed",
        trade_direction=trade_direction.name,
        amount_in=amount_in,
        output_amount=swap_result.output_amount,
        min_output_amount=min_output_amount,
        next_sqrt_price=swap_result.next_sqrt_price,
        trading_fee=swap_result.trading_fee,
        protocol_fee=swap_result.protocol_fee,
        referral_fee=swap_result.referral_fee,
        fees_on_input=fee_mode.fees_on_input,
    )

    return SwapQuote(
        swap_result=swap_result,
        trade_direction=trade_direction,
        fee_mode=fee_mode,
        min_output_amount=min_output_amount,
        slippage_bps=slippage_bps,
    )


__all__ = [
    "SwapQuote",
    "get_trade_direction",
    "get_min_output_amount",
    "swap_quote",
]
