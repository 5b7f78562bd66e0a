"""Base fee scheduler.

The base fee starts at a cliff numerator when the pool activates and decays
over discrete periods, either linearly or exponentially. A point before
activation is treated as fully decayed, so a quote requested early shows the
minimum fee rather than the cliff fee.
"""

from __future__ import annotations

import structlog

from curve_quoter.config import DEFAULT_PROGRAM_CONSTANTS, ProgramConstants
from curve_quoter.constants import U16_MAX
from curve_quoter.errors import InvalidConfig
from curve_quoter.math.fixed_point import Rounding, mul_div
from curve_quoter.pools.types import BaseFeeParameters, FeeSchedulerMode

logger = structlog.get_logger()


def get_passed_period(
    base_fee: BaseFeeParameters,
    current_point: int,
    activation_point: int,
) -> int:
    """Number of decay periods elapsed at `current_point`.

    Capped at `number_of_period`. Before activation the maximum is returned.
    Callers handle period_frequency == 0 (no decay) before calling.
    """
    if current_point < activation_point:
        return base_fee.number_of_period
    period = (current_point - activation_point) // base_fee.period_frequency
    return min(period, base_fee.number_of_period)


def get_fee_in_period(
    cliff_fee_numerator: int,
    reduction_factor: int,
    period: int,
    *,
    constants: ProgramConstants = DEFAULT_PROGRAM_CONSTANTS,
) -> int:
    """Exponentially decayed fee numerator after `period` periods.

    fee = cliff_fee_numerator * (1 - reduction_factor / BASIS_POINT_MAX) ^ period,
    rounded down. The power is evaluated as an exact rational, so no error
    accumulates however many periods have passed. The period count is a u16
    on chain, which also bounds the size of the power.

    Raises:
        InvalidConfig: If reduction_factor exceeds BASIS_POINT_MAX or period
            does not fit u16
    """
    if not 0 <= period <= U16_MAX:
        raise InvalidConfig(f"Fee period {period} outside [0, {U16_MAX}]")
    if period == 0:
        return cliff_fee_numerator

    basis_point_max = constants.basis_point_max
    if reduction_factor > basis_point_max:
        raise InvalidConfig(
            f"Exponential reduction factor {reduction_factor} exceeds {basis_point_max}"
        )
    retained = basis_point_max - reduction_factor

    if retained == 0 or cliff_fee_numerator == 0:
        return 0
    if period == 1:
        return mul_div(cliff_fee_numerator, retained, basis_point_max, Rounding.DOWN)

    return mul_div(
        cliff_fee_numerator,
        retained**period,
        basis_point_max**period,
        Rounding.DOWN,
    )


def get_current_base_fee_numerator(
    base_fee: BaseFeeParameters,
    current_point: int,
    activation_point: int,
    *,
    constants: ProgramConstants = DEFAULT_PROGRAM_CONSTANTS,
) -> int:
    """Base fee numerator in effect at `current_point`.

    Args:
        base_fee: Fee schedule of the pool
        current_point: Current slot or timestamp (same unit as activation_point)
        activation_point: Point at which decay starts

    Returns:
        Fee numerator over FEE_DENOMINATOR, in [0, cliff_fee_numerator]

    Raises:
        InvalidConfig: If the scheduler mode is not recognized
    """
    if base_fee.period_frequency == 0:
        return base_fee.cliff_fee_numerator

    mode = FeeSchedulerMode.parse(base_fee.fee_scheduler_mode)
    period = get_passed_period(base_fee, current_point, activation_point)

    if mode is FeeSchedulerMode.LINEAR:
        fee_numerator = base_fee.cliff_fee_numerator - period * base_fee.reduction_factor
        if fee_numerator < 0:
            # Valid configs never reach this; validate_base_fee rejects them
            logger.warning(
                "fee_scheduler_negative_fee",
                cliff_fee_numerator=base_fee.cliff_fee_numerator,
                reduction_factor=base_fee.reduction_factor,
                period=period,
            )
            return 0
        return fee_numerator

    return get_fee_in_period(
        base_fee.cliff_fee_numerator,
        base_fee.reduction_factor,
        period,
        constants=constants,
    )


__all__ = [
    "get_passed_period",
    "get_fee_in_period",
    "get_current_base_fee_numerator",
]
