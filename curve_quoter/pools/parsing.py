"""Conversion of decoded account models into engine snapshots."""

from __future__ import annotations

import structlog

from curve_quoter.models.snapshot import (
    BaseFeeModel,
    ConfigStateModel,
    DynamicFeeModel,
    PoolFeesModel,
    PoolStateModel,
)

from .types import (
    BaseFeeParameters,
    ConfigSnapshot,
    CurveSegment,
    DynamicFeeParameters,
    PoolFees,
    PoolSnapshot,
)

logger = structlog.get_logger()


def parse_pool_state(model: PoolStateModel) -> PoolSnapshot:
    """Build a PoolSnapshot from a decoded virtual pool account."""
    return PoolSnapshot(
        sqrt_price=model.sqrt_price,
        activation_point=model.activation_point,
        pool_fees=parse_pool_fees(model.pool_fees),
        base_mint=model.base_mint,
    )


def parse_config_state(model: ConfigStateModel) -> ConfigSnapshot:
    """Build a ConfigSnapshot from a decoded pool config account."""
    curve = tuple(
        CurveSegment(sqrt_price=point.sqrt_price, liquidity=point.liquidity)
        for point in model.curve
    )
    return ConfigSnapshot(
        curve=curve,
        collect_fee_mode=model.collect_fee_mode,
        activation_type=model.activation_type,
        sqrt_start_price=model.sqrt_start_price,
    )


def parse_pool_fees(model: PoolFeesModel) -> PoolFees:
    return PoolFees(
        base_fee=_parse_base_fee(model.base_fee),
        dynamic_fee=_parse_dynamic_fee(model.dynamic_fee),
        protocol_fee_percent=model.protocol_fee_percent,
        referral_fee_percent=model.referral_fee_percent,
    )


def _parse_base_fee(model: BaseFeeModel) -> BaseFeeParameters:
    return BaseFeeParameters(
        cliff_fee_numerator=model.cliff_fee_numerator,
        number_of_period=model.number_of_period,
        period_frequency=model.period_frequency,
        reduction_factor=model.reduction_factor,
        fee_scheduler_mode=model.fee_scheduler_mode,
    )


def _parse_dynamic_fee(model: DynamicFeeModel | None) -> DynamicFeeParameters | None:
    """Map an uninitialized dynamic fee block to None.

    Accounts always carry the dynamic fee struct; a zero `initialized` flag
    means the pool has no surcharge.
    """
    if model is None or model.initialized == 0:
        return None

    if model.bin_step == 0:
        logger.debug("dynamic_fee_zero_bin_step", volatility=model.volatility_accumulator)

    return DynamicFeeParameters(
        initialized=True,
        bin_step=model.bin_step,
        bin_step_u128=model.bin_step_u128,
        filter_period=model.filter_period,
        decay_period=model.decay_period,
        reduction_factor=model.reduction_factor,
        max_volatility_accumulator=model.max_volatility_accumulator,
        variable_fee_control=model.variable_fee_control,
        last_update_timestamp=model.last_update_timestamp,
        sqrt_price_reference=model.sqrt_price_reference,
        volatility_accumulator=model.volatility_accumulator,
        volatility_reference=model.volatility_reference,
    )


__all__ = ["parse_pool_state", "parse_config_state", "parse_pool_fees"]
