"""Trading fee application and fee placement policy.

Uses SafeInt for the fee splits so that a split can never exceed the amount
it is taken from, and casts every result back to u64 before returning.

All roundings favor the pool and protocol over the trader:
- trading fee rounds up
- protocol and referral shares round down (the remainder stays with the
  party above them in the split)
"""

from __future__ import annotations

from curve_quoter.config import DEFAULT_PROGRAM_CONSTANTS, ProgramConstants
from curve_quoter.constants import PERCENT_DENOMINATOR
from curve_quoter.errors import InvalidConfig
from curve_quoter.fees.dynamic import get_variable_fee
from curve_quoter.fees.result import FeeMode, FeeOnAmountResult
from curve_quoter.fees.scheduler import get_current_base_fee_numerator
from curve_quoter.math.fixed_point import Rounding, mul_div_u64
from curve_quoter.pools.types import CollectFeeMode, PoolFees, TradeDirection
from curve_quoter.safe_int import S


def get_total_fee_numerator(
    pool_fees: PoolFees,
    current_point: int,
    activation_point: int,
    *,
    constants: ProgramConstants = DEFAULT_PROGRAM_CONSTANTS,
) -> int:
    """Base plus variable fee numerator, capped at MAX_FEE_NUMERATOR."""
    base_fee_numerator = get_current_base_fee_numerator(
        pool_fees.base_fee, current_point, activation_point, constants=constants
    )
    variable_fee_numerator = get_variable_fee(pool_fees.dynamic_fee, constants=constants)
    return min(base_fee_numerator + variable_fee_numerator, constants.max_fee_numerator)


def get_fee_on_amount(
    amount: int,
    pool_fees: PoolFees,
    has_referral: bool,
    current_point: int,
    activation_point: int,
    *,
    constants: ProgramConstants = DEFAULT_PROGRAM_CONSTANTS,
) -> FeeOnAmountResult:
    """Deduct the trading fee from `amount` and split it between the parties.

    Split (matching the on-chain program):
        trading_fee  = ceil(amount * total_fee_numerator / FEE_DENOMINATOR)
        protocol_fee = floor(trading_fee * protocol_fee_percent / 100)
        referral_fee = floor(protocol_fee * referral_fee_percent / 100) if referral
        pool keeps trading_fee - protocol_fee,
        protocol keeps protocol_fee - referral_fee

    Args:
        amount: Gross amount on the fee-bearing leg
        pool_fees: Fee configuration of the pool
        has_referral: Whether a referral account takes part of the protocol fee
        current_point: Current slot or timestamp
        activation_point: Point at which base fee decay starts

    Returns:
        FeeOnAmountResult with the net amount and retained fee parts

    Raises:
        InvalidConfig: If the scheduler mode is not recognized or a fee
            split percent is outside [0, 100]
        MathOverflow: If amount does not fit u64
    """
    for name, percent in (
        ("protocol_fee_percent", pool_fees.protocol_fee_percent),
        ("referral_fee_percent", pool_fees.referral_fee_percent),
    ):
        if not 0 <= percent <= PERCENT_DENOMINATOR:
            raise InvalidConfig(f"{name} {percent} outside [0, {PERCENT_DENOMINATOR}]")

    total_fee_numerator = get_total_fee_numerator(
        pool_fees, current_point, activation_point, constants=constants
    )

    trading_fee = mul_div_u64(
        amount, total_fee_numerator, constants.fee_denominator, Rounding.UP
    )
    amount_after_fee = S(amount) - trading_fee

    protocol_fee = mul_div_u64(
        trading_fee, pool_fees.protocol_fee_percent, PERCENT_DENOMINATOR, Rounding.DOWN
    )
    trading_fee_after_protocol = S(trading_fee) - protocol_fee

    referral_fee = 0
    if has_referral:
        referral_fee = mul_div_u64(
            protocol_fee, pool_fees.referral_fee_percent, PERCENT_DENOMINATOR, Rounding.DOWN
        )
    protocol_fee_after_referral = S(protocol_fee) - referral_fee

    return FeeOnAmountResult(
        amount=amount_after_fee.to_u64(),
        trading_fee=trading_fee_after_protocol.to_u64(),
        protocol_fee=protocol_fee_after_referral.to_u64(),
        referral_fee=referral_fee,
    )


def get_fee_mode(
    collect_fee_mode: int,
    trade_direction: TradeDirection,
    has_referral: bool,
) -> FeeMode:
    """Decide which leg of a swap bears the trading fee.

    - QUOTE_TOKEN: fee on the quote leg, i.e. on the input when buying base
      (Quote→Base) and on the output when selling base (Base→Quote).
    - OUTPUT_TOKEN: fee always on the output; the output is the base token
      when buying base.

    Raises:
        InvalidConfig: If collect_fee_mode or trade_direction is not recognized
    """
    mode = CollectFeeMode.parse(collect_fee_mode)
    buying_base = TradeDirection.parse(trade_direction) is TradeDirection.QUOTE_TO_BASE

    if mode is CollectFeeMode.QUOTE_TOKEN:
        fees_on_input = buying_base
        fees_on_base_token = False
    else:
        fees_on_input = False
        fees_on_base_token = buying_base

    return FeeMode(
        fees_on_input=fees_on_input,
        fees_on_base_token=fees_on_base_token,
        has_referral=has_referral,
    )


__all__ = ["get_total_fee_numerator", "get_fee_on_amount", "get_fee_mode"]
