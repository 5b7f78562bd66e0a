"""Pydantic models for decoded virtual pool and pool config accounts.

Field names follow the program's IDL (camelCase); snake_case names are
accepted too. Account fields the engine does not use (vaults, reserves,
metrics, LP percentages) are ignored.
"""

from pydantic import BaseModel, Field

from curve_quoter.constants import U16_MAX
from curve_quoter.models.types import Percent, PublicKeyStr, Uint64, Uint128


class BaseFeeModel(BaseModel):
    """Base fee schedule as stored on chain."""

    model_config = {"populate_by_name": True}

    cliff_fee_numerator: Uint64 = Field(alias="cliffFeeNumerator")
    number_of_period: int = Field(default=0, ge=0, le=U16_MAX, alias="numberOfPeriod")
    period_frequency: Uint64 = Field(default=0, alias="periodFrequency")
    reduction_factor: Uint64 = Field(default=0, alias="reductionFactor")
    fee_scheduler_mode: int = Field(default=0, alias="feeSchedulerMode")


class DynamicFeeModel(BaseModel):
    """Dynamic fee parameters and volatility state.

    The config account holds only the parameters; the pool account adds the
    running volatility state, hence the defaults.
    """

    model_config = {"populate_by_name": True}

    initialized: int = 0
    max_volatility_accumulator: int = Field(default=0, ge=0, alias="maxVolatilityAccumulator")
    variable_fee_control: int = Field(default=0, ge=0, alias="variableFeeControl")
    bin_step: int = Field(default=0, ge=0, alias="binStep")
    filter_period: int = Field(default=0, ge=0, alias="filterPeriod")
    decay_period: int = Field(default=0, ge=0, alias="decayPeriod")
    reduction_factor: int = Field(default=0, ge=0, alias="reductionFactor")
    last_update_timestamp: Uint64 = Field(default=0, alias="lastUpdateTimestamp")
    bin_step_u128: Uint128 = Field(default=0, alias="binStepU128")
    sqrt_price_reference: Uint128 = Field(default=0, alias="sqrtPriceReference")
    volatility_accumulator: Uint128 = Field(default=0, alias="volatilityAccumulator")
    volatility_reference: Uint128 = Field(default=0, alias="volatilityReference")


class PoolFeesModel(BaseModel):
    """Fee configuration of a pool."""

    model_config = {"populate_by_name": True}

    base_fee: BaseFeeModel = Field(alias="baseFee")
    dynamic_fee: DynamicFeeModel | None = Field(default=None, alias="dynamicFee")
    protocol_fee_percent: Percent = Field(default=0, alias="protocolFeePercent")
    referral_fee_percent: Percent = Field(default=0, alias="referralFeePercent")


class PoolStateModel(BaseModel):
    """Decoded virtual pool account (fields used for quoting)."""

    model_config = {"populate_by_name": True}

    pool_fees: PoolFeesModel = Field(alias="poolFees")
    sqrt_price: Uint128 = Field(alias="sqrtPrice")
    activation_point: Uint64 = Field(default=0, alias="activationPoint")
    base_mint: PublicKeyStr | None = Field(default=None, alias="baseMint")


class CurvePointModel(BaseModel):
    """One liquidity distribution breakpoint."""

    model_config = {"populate_by_name": True}

    sqrt_price: Uint128 = Field(alias="sqrtPrice")
    liquidity: Uint128


class ConfigStateModel(BaseModel):
    """Decoded pool config account (fields used for quoting)."""

    model_config = {"populate_by_name": True}

    curve: list[CurvePointModel] = Field(min_length=1)
    collect_fee_mode: int = Field(default=0, alias="collectFeeMode")
    activation_type: int = Field(default=0, alias="activationType")
    sqrt_start_price: Uint128 | None = Field(default=None, alias="sqrtStartPrice")
