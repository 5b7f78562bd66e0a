"""Snapshot types consumed by the quotation engine.

Pool and config snapshots are decoded from the program's accounts by a
collaborator (see curve_quoter.pools.parsing) and are immutable for the
duration of one quote. Mode fields keep the raw wire integer so that an
unrecognized value surfaces as InvalidConfig at the point it is used.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from curve_quoter.errors import InvalidConfig


class _WireEnum(IntEnum):
    """IntEnum whose parse() maps unknown wire values to InvalidConfig."""

    @classmethod
    def parse(cls, value: int) -> _WireEnum:
        try:
            return cls(value)
        except ValueError as err:
            raise InvalidConfig(f"Invalid {cls.__name__} value: {value!r}") from err


class FeeSchedulerMode(_WireEnum):
    """How the base fee decays after activation."""

    # fee = cliff_fee_numerator - passed_period * reduction_factor
    LINEAR = 0
    # fee = cliff_fee_numerator * (1 - reduction_factor / 10_000) ^ passed_period
    EXPONENTIAL = 1


class CollectFeeMode(_WireEnum):
    """Which token leg bears the trading fee."""

    QUOTE_TOKEN = 0
    OUTPUT_TOKEN = 1


class ActivationType(_WireEnum):
    """Clock unit of activation_point and current_point."""

    SLOT = 0
    TIMESTAMP = 1


class TradeDirection(_WireEnum):
    """Direction of a swap relative to the pool's base token."""

    BASE_TO_QUOTE = 0
    QUOTE_TO_BASE = 1


@dataclass(frozen=True)
class CurveSegment:
    """One (sqrt_price, liquidity) breakpoint of the bonding curve.

    `liquidity` is active between the previous breakpoint's sqrt price (or the
    curve start price for the first breakpoint) and this `sqrt_price`. Zero
    liquidity marks an inactive stub.
    """

    sqrt_price: int
    liquidity: int


@dataclass(frozen=True)
class BaseFeeParameters:
    """Time-decayed base fee schedule.

    Attributes:
        cliff_fee_numerator: Fee numerator at activation (over FEE_DENOMINATOR)
        number_of_period: Maximum number of decay periods
        period_frequency: Clock units per period (0 disables decay)
        reduction_factor: Per-period decrement (linear) or basis-point rate
            (exponential)
        fee_scheduler_mode: Raw FeeSchedulerMode value
    """

    cliff_fee_numerator: int
    number_of_period: int = 0
    period_frequency: int = 0
    reduction_factor: int = 0
    fee_scheduler_mode: int = FeeSchedulerMode.LINEAR


@dataclass(frozen=True)
class DynamicFeeParameters:
    """Volatility surcharge parameters and the pool's running volatility state.

    The running fields (last_update_timestamp, sqrt_price_reference,
    volatility_accumulator, volatility_reference) are owned by the on-chain
    program and read-only here.
    """

    initialized: bool
    bin_step: int
    bin_step_u128: int
    filter_period: int
    decay_period: int
    reduction_factor: int
    max_volatility_accumulator: int
    variable_fee_control: int
    last_update_timestamp: int = 0
    sqrt_price_reference: int = 0
    volatility_accumulator: int = 0
    volatility_reference: int = 0


@dataclass(frozen=True)
class PoolFees:
    """Fee configuration of a pool.

    Attributes:
        base_fee: Time-decayed base fee schedule
        dynamic_fee: Volatility surcharge, None when the pool has none
        protocol_fee_percent: Share of the trading fee taken by the protocol (0-100)
        referral_fee_percent: Share of the protocol fee paid to a referrer (0-100)
    """

    base_fee: BaseFeeParameters
    dynamic_fee: DynamicFeeParameters | None = None
    protocol_fee_percent: int = 0
    referral_fee_percent: int = 0


@dataclass(frozen=True)
class PoolSnapshot:
    """State of a virtual pool at quote time."""

    sqrt_price: int
    activation_point: int
    pool_fees: PoolFees
    base_mint: str | None = None


@dataclass(frozen=True)
class ConfigSnapshot:
    """Pool config: the bonding curve and fee collection policy."""

    curve: tuple[CurveSegment, ...]
    collect_fee_mode: int = CollectFeeMode.QUOTE_TOKEN
    activation_type: int = ActivationType.SLOT
    sqrt_start_price: int | None = None

    def __post_init__(self) -> None:
        # Accept any sequence but store a tuple so the snapshot stays immutable
        if not isinstance(self.curve, tuple):
            object.__setattr__(self, "curve", tuple(self.curve))


__all__ = [
    "FeeSchedulerMode",
    "CollectFeeMode",
    "ActivationType",
    "TradeDirection",
    "CurveSegment",
    "BaseFeeParameters",
    "DynamicFeeParameters",
    "PoolFees",
    "PoolSnapshot",
    "ConfigSnapshot",
]
