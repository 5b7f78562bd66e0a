"""Consistency checks for pool and config snapshots.

The on-chain program validates these invariants when a config is created;
checking them again before quoting catches snapshots that were decoded with
the wrong layout or hand-built incorrectly.
"""

from __future__ import annotations

import structlog

from curve_quoter.config import DEFAULT_PROGRAM_CONSTANTS, ProgramConstants
from curve_quoter.constants import PERCENT_DENOMINATOR, U16_MAX, U128_MAX
from curve_quoter.errors import InvalidConfig, InvalidState
from curve_quoter.pools.types import (
    ActivationType,
    BaseFeeParameters,
    CollectFeeMode,
    ConfigSnapshot,
    FeeSchedulerMode,
    PoolFees,
    PoolSnapshot,
)

logger = structlog.get_logger()


def validate_curve(
    config: ConfigSnapshot,
    *,
    constants: ProgramConstants = DEFAULT_PROGRAM_CONSTANTS,
) -> None:
    """Check the bonding curve breakpoints.

    Raises:
        InvalidConfig: If the curve is empty or too long, prices are not
            strictly ascending, out of range, or the last price is not the
            maximum sqrt price
    """
    curve = config.curve
    if not curve:
        raise InvalidConfig("Curve has no segments")
    if len(curve) > constants.max_curve_point:
        raise InvalidConfig(
            f"Curve has {len(curve)} segments, maximum is {constants.max_curve_point}"
        )

    previous = config.sqrt_start_price
    for index, segment in enumerate(curve):
        if not constants.min_sqrt_price <= segment.sqrt_price <= constants.max_sqrt_price:
            raise InvalidConfig(f"Curve point {index} sqrt price {segment.sqrt_price} out of range")
        if not 0 <= segment.liquidity <= U128_MAX:
            raise InvalidConfig(f"Curve point {index} liquidity {segment.liquidity} is not u128")
        if previous is not None and segment.sqrt_price <= previous:
            raise InvalidConfig(
                f"Curve point {index} sqrt price {segment.sqrt_price} not above {previous}"
            )
        previous = segment.sqrt_price

    if curve[-1].sqrt_price != constants.max_sqrt_price:
        raise InvalidConfig(
            f"Last curve point must be the max sqrt price, got {curve[-1].sqrt_price}"
        )

    CollectFeeMode.parse(config.collect_fee_mode)
    ActivationType.parse(config.activation_type)


def validate_base_fee(
    base_fee: BaseFeeParameters,
    *,
    constants: ProgramConstants = DEFAULT_PROGRAM_CONSTANTS,
) -> None:
    """Check that the base fee schedule stays within [0, MAX_FEE_NUMERATOR].

    Raises:
        InvalidConfig: On an unknown scheduler mode, a cliff fee above the
            maximum, a period count that does not fit u16, or a schedule
            that would decay below zero
    """
    mode = FeeSchedulerMode.parse(base_fee.fee_scheduler_mode)

    if not 0 <= base_fee.cliff_fee_numerator <= constants.max_fee_numerator:
        raise InvalidConfig(
            f"Cliff fee numerator {base_fee.cliff_fee_numerator} exceeds "
            f"{constants.max_fee_numerator}"
        )
    if base_fee.number_of_period < 0 or base_fee.period_frequency < 0:
        raise InvalidConfig("Fee period settings cannot be negative")
    if base_fee.number_of_period > U16_MAX:
        raise InvalidConfig(
            f"Number of periods {base_fee.number_of_period} exceeds {U16_MAX}"
        )

    if mode is FeeSchedulerMode.LINEAR:
        min_fee = base_fee.cliff_fee_numerator - base_fee.number_of_period * base_fee.reduction_factor
        if min_fee < 0:
            raise InvalidConfig(
                f"Linear fee schedule decays below zero (min fee numerator {min_fee})"
            )
    elif base_fee.reduction_factor > constants.basis_point_max:
        raise InvalidConfig(
            f"Exponential reduction factor {base_fee.reduction_factor} exceeds "
            f"{constants.basis_point_max}"
        )


def validate_pool_fees(
    pool_fees: PoolFees,
    *,
    constants: ProgramConstants = DEFAULT_PROGRAM_CONSTANTS,
) -> None:
    """Check base fee schedule and fee split percentages.

    Raises:
        InvalidConfig: If any fee setting is out of range
    """
    validate_base_fee(pool_fees.base_fee, constants=constants)

    for name in ("protocol_fee_percent", "referral_fee_percent"):
        percent = getattr(pool_fees, name)
        if not 0 <= percent <= PERCENT_DENOMINATOR:
            raise InvalidConfig(f"{name} {percent} outside [0, {PERCENT_DENOMINATOR}]")


def validate_snapshots(
    pool: PoolSnapshot,
    config: ConfigSnapshot,
    *,
    constants: ProgramConstants = DEFAULT_PROGRAM_CONSTANTS,
) -> None:
    """Validate a pool/config pair before quoting.

    Raises:
        InvalidState: If the pool price is zero
        InvalidConfig: If the curve or fee settings are inconsistent
    """
    if pool.sqrt_price == 0:
        raise InvalidState("Pool sqrt price is zero")
    if pool.sqrt_price > U128_MAX:
        raise InvalidConfig(f"Pool sqrt price {pool.sqrt_price} is not u128")

    try:
        validate_curve(config, constants=constants)
        validate_pool_fees(pool.pool_fees, constants=constants)
    except InvalidConfig as err:
        logger.debug("snapshot_validation_failed", reason=str(err))
        raise


__all__ = ["validate_curve", "validate_base_fee", "validate_pool_fees", "validate_snapshots"]
