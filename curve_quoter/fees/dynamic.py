"""Volatility-driven dynamic fee surcharge.

The on-chain program tracks a volatility accumulator that grows as the price
crosses bins and decays over time. This module only reads that state: the
surcharge is a pure function of the snapshot the caller supplies.
"""

from __future__ import annotations

from curve_quoter.config import DEFAULT_PROGRAM_CONSTANTS, ProgramConstants
from curve_quoter.errors import DivisionByZero
from curve_quoter.math.fixed_point import Rounding, div_rounding, shl_div
from curve_quoter.pools.types import DynamicFeeParameters
from curve_quoter.safe_int import S


def get_variable_fee(
    dynamic_fee: DynamicFeeParameters | None,
    *,
    constants: ProgramConstants = DEFAULT_PROGRAM_CONSTANTS,
) -> int:
    """Variable fee numerator from the pool's volatility state.

    variable_fee = ceil((volatility_accumulator * bin_step)^2
                        * variable_fee_control / 1e11)

    Returns:
        Fee numerator over FEE_DENOMINATOR; 0 when the dynamic fee is absent,
        not initialized, or the accumulator is zero
    """
    if dynamic_fee is None or not dynamic_fee.initialized:
        return 0
    if dynamic_fee.volatility_accumulator == 0:
        return 0

    square_vfa_bin = (dynamic_fee.volatility_accumulator * dynamic_fee.bin_step) ** 2
    v_fee = square_vfa_bin * dynamic_fee.variable_fee_control
    return div_rounding(v_fee, constants.dynamic_fee_scale, Rounding.UP)


def get_delta_bin_id(
    bin_step_u128: int,
    sqrt_price_a: int,
    sqrt_price_b: int,
    *,
    constants: ProgramConstants = DEFAULT_PROGRAM_CONSTANTS,
) -> int:
    """Number of bins between two sqrt prices, as used for volatility updates.

    delta = 2 * ((upper << RESOLUTION) / lower - 2^RESOLUTION) / bin_step_u128

    The factor 2 converts the sqrt price ratio into a price-space distance.

    Raises:
        DivisionByZero: If bin_step_u128 or the lower price is zero
    """
    upper, lower = (
        (sqrt_price_a, sqrt_price_b) if sqrt_price_a > sqrt_price_b else (sqrt_price_b, sqrt_price_a)
    )
    if bin_step_u128 == 0:
        raise DivisionByZero("bin_step_u128 is zero")

    price_ratio = shl_div(upper, lower, constants.resolution, Rounding.DOWN)
    delta_bin_id = (S(price_ratio) - constants.one) // bin_step_u128
    return (delta_bin_id * 2).value


__all__ = ["get_variable_fee", "get_delta_bin_id"]
