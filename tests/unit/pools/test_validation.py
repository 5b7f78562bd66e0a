"""Tests for snapshot validation."""

import pytest

from curve_quoter.constants import MAX_FEE_NUMERATOR, MIN_SQRT_PRICE, U128_MAX
from curve_quoter.errors import InvalidConfig, InvalidState
from curve_quoter.pools.types import FeeSchedulerMode
from curve_quoter.pools.validation import (
    validate_base_fee,
    validate_curve,
    validate_pool_fees,
    validate_snapshots,
)
from tests.helpers import (
    MAX_SQRT_PRICE,
    ONE,
    TWO,
    UNIT_LIQUIDITY,
    make_base_fee,
    make_config,
    make_pool,
    make_pool_fees,
)


class TestValidateCurve:
    """Tests for validate_curve."""

    def test_valid_multi_segment(self):
        """An ascending curve ending at the max price passes."""
        validate_curve(make_config(curve=[(ONE, 0), (TWO, UNIT_LIQUIDITY), (MAX_SQRT_PRICE, 1)]))

    def test_empty_curve(self):
        """At least one segment is required."""
        with pytest.raises(InvalidConfig):
            validate_curve(make_config(curve=[]))

    def test_too_many_segments(self):
        """At most MAX_CURVE_POINT segments are allowed."""
        curve = [(ONE + i, UNIT_LIQUIDITY) for i in range(20)] + [(MAX_SQRT_PRICE, 0)]
        with pytest.raises(InvalidConfig, match="maximum is 20"):
            validate_curve(make_config(curve=curve))

    def test_twenty_segments_allowed(self):
        """Exactly MAX_CURVE_POINT segments pass."""
        curve = [(ONE + i, UNIT_LIQUIDITY) for i in range(19)] + [(MAX_SQRT_PRICE, 0)]
        validate_curve(make_config(curve=curve))

    def test_price_below_min(self):
        """Breakpoints below MIN_SQRT_PRICE are rejected."""
        curve = [(MIN_SQRT_PRICE - 1, UNIT_LIQUIDITY), (MAX_SQRT_PRICE, 0)]
        with pytest.raises(InvalidConfig, match="out of range"):
            validate_curve(make_config(curve=curve))

    def test_not_strictly_ascending(self):
        """Repeated breakpoints are rejected."""
        curve = [(TWO, UNIT_LIQUIDITY), (TWO, UNIT_LIQUIDITY), (MAX_SQRT_PRICE, 0)]
        with pytest.raises(InvalidConfig, match="not above"):
            validate_curve(make_config(curve=curve))

    def test_start_price_below_first_breakpoint(self):
        """The first breakpoint must lie above the start price."""
        config = make_config(curve=[(TWO, UNIT_LIQUIDITY), (MAX_SQRT_PRICE, 0)], sqrt_start_price=TWO)
        with pytest.raises(InvalidConfig):
            validate_curve(config)

    def test_last_point_must_be_max(self):
        """The curve must end at MAX_SQRT_PRICE."""
        with pytest.raises(InvalidConfig, match="max sqrt price"):
            validate_curve(make_config(curve=[(TWO, UNIT_LIQUIDITY)]))

    def test_liquidity_above_u128(self):
        """Liquidity must fit u128."""
        with pytest.raises(InvalidConfig, match="u128"):
            validate_curve(make_config(curve=[(MAX_SQRT_PRICE, U128_MAX + 1)]))

    def test_unknown_collect_fee_mode(self):
        """Collect fee mode must be a known value."""
        with pytest.raises(InvalidConfig):
            validate_curve(make_config(collect_fee_mode=2))

    def test_unknown_activation_type(self):
        """Activation type must be a known value."""
        with pytest.raises(InvalidConfig):
            validate_curve(make_config(activation_type=2))


class TestValidateFees:
    """Tests for validate_base_fee and validate_pool_fees."""

    def test_valid_defaults(self):
        """The default fee setup passes."""
        validate_pool_fees(make_pool_fees())

    def test_cliff_above_max(self):
        """Cliff fee numerator is capped."""
        with pytest.raises(InvalidConfig):
            validate_base_fee(make_base_fee(cliff_fee_numerator=MAX_FEE_NUMERATOR + 1))

    def test_linear_schedule_below_zero(self):
        """A linear schedule may not decay past zero."""
        base_fee = make_base_fee(
            cliff_fee_numerator=10_000_000, number_of_period=11, period_frequency=1, reduction_factor=1_000_000
        )
        with pytest.raises(InvalidConfig, match="below zero"):
            validate_base_fee(base_fee)

    def test_linear_schedule_to_zero(self):
        """A linear schedule may end at exactly zero."""
        base_fee = make_base_fee(
            cliff_fee_numerator=10_000_000, number_of_period=10, period_frequency=1, reduction_factor=1_000_000
        )
        validate_base_fee(base_fee)

    def test_exponential_reduction_above_max(self):
        """Exponential reduction is at most 10_000 bps."""
        base_fee = make_base_fee(reduction_factor=10_001, mode=FeeSchedulerMode.EXPONENTIAL)
        with pytest.raises(InvalidConfig):
            validate_base_fee(base_fee)

    def test_period_count_at_u16_max(self):
        """65_535 periods is the largest count the program can store."""
        base_fee = make_base_fee(
            number_of_period=65_535, period_frequency=1, reduction_factor=1, mode=FeeSchedulerMode.EXPONENTIAL
        )
        validate_base_fee(base_fee)

    @pytest.mark.parametrize("mode", [FeeSchedulerMode.LINEAR, FeeSchedulerMode.EXPONENTIAL])
    def test_period_count_above_u16_max(self, mode):
        """Period counts beyond u16 are rejected in either mode."""
        base_fee = make_base_fee(cliff_fee_numerator=0, number_of_period=65_536, period_frequency=1, mode=mode)
        with pytest.raises(InvalidConfig, match="Number of periods"):
            validate_base_fee(base_fee)

    def test_unknown_scheduler_mode(self):
        """Scheduler mode must be a known value."""
        with pytest.raises(InvalidConfig):
            validate_base_fee(make_base_fee(mode=7))

    @pytest.mark.parametrize("field", ["protocol_fee_percent", "referral_fee_percent"])
    def test_percent_out_of_range(self, field):
        """Fee split percentages are within [0, 100]."""
        with pytest.raises(InvalidConfig, match=field):
            validate_pool_fees(make_pool_fees(**{field: 101}))


class TestValidateSnapshots:
    """Tests for validate_snapshots."""

    def test_valid_pair(self):
        """Default snapshots pass."""
        validate_snapshots(make_pool(), make_config())

    def test_zero_price(self):
        """A zero pool price is an invalid state."""
        with pytest.raises(InvalidState):
            validate_snapshots(make_pool(sqrt_price=0), make_config())

    def test_price_above_u128(self):
        """The pool price must fit u128."""
        with pytest.raises(InvalidConfig):
            validate_snapshots(make_pool(sqrt_price=U128_MAX + 1), make_config())

    def test_fee_errors_propagate(self):
        """Fee misconfiguration surfaces through the combined check."""
        pool = make_pool(pool_fees=make_pool_fees(protocol_fee_percent=150))
        with pytest.raises(InvalidConfig):
            validate_snapshots(pool, make_config())
