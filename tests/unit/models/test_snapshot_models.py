"""Tests for pydantic snapshot and quote models."""

import pytest
from pydantic import ValidationError

from curve_quoter.constants import U64_MAX, U128_MAX
from curve_quoter.models.quote import QuoteRequest, QuoteResponse
from curve_quoter.models.snapshot import ConfigStateModel, CurvePointModel, PoolStateModel
from curve_quoter.models.types import validate_uint64, validate_uint128
from tests.helpers import BASE_MINT, QUOTE_MINT


class TestUintValidators:
    """Tests for the u64/u128 before-validators."""

    def test_accepts_int_and_string(self):
        """Both JSON representations are accepted."""
        assert validate_uint64(42) == 42
        assert validate_uint64("42") == 42

    def test_bounds(self):
        """Type maximums pass, one more fails."""
        assert validate_uint64(U64_MAX) == U64_MAX
        assert validate_uint128(str(U128_MAX)) == U128_MAX
        with pytest.raises(ValueError, match="overflow"):
            validate_uint64(U64_MAX + 1)
        with pytest.raises(ValueError, match="overflow"):
            validate_uint128(U128_MAX + 1)

    def test_rejects_negative(self):
        """Negative values are rejected."""
        with pytest.raises(ValueError, match="negative"):
            validate_uint64("-1")

    def test_rejects_non_numeric(self):
        """Non-decimal strings, floats and bools are rejected."""
        with pytest.raises(ValueError):
            validate_uint64("0x10")
        with pytest.raises(ValueError):
            validate_uint64(1.5)
        with pytest.raises(ValueError):
            validate_uint64(True)


class TestSnapshotModels:
    """Tests for account snapshot models."""

    def test_pool_state_from_fixture(self, launch_snapshot_json):
        """The fixture decodes with camelCase aliases."""
        model = PoolStateModel.model_validate(launch_snapshot_json["pool"])
        assert model.sqrt_price == 97_539_491_880_527_374
        assert model.pool_fees.base_fee.cliff_fee_numerator == 2_500_000

    def test_curve_point_overflow(self):
        """Curve liquidity must fit u128."""
        with pytest.raises(ValidationError):
            CurvePointModel.model_validate({"sqrtPrice": "1", "liquidity": str(U128_MAX + 1)})

    def test_empty_curve_rejected(self):
        """A config needs at least one curve point."""
        with pytest.raises(ValidationError):
            ConfigStateModel.model_validate({"curve": []})

    def test_percent_range(self):
        """Fee split percentages above 100 are rejected at decode time."""
        data = {
            "poolFees": {"baseFee": {"cliffFeeNumerator": 1}, "protocolFeePercent": 101},
            "sqrtPrice": "1",
        }
        with pytest.raises(ValidationError):
            PoolStateModel.model_validate(data)

    @pytest.mark.parametrize("number_of_period,valid", [(65_535, True), (65_536, False), (10**12, False)])
    def test_number_of_period_fits_u16(self, number_of_period, valid):
        """numberOfPeriod is a u16 on chain."""
        data = {
            "poolFees": {"baseFee": {"cliffFeeNumerator": 1, "numberOfPeriod": number_of_period}},
            "sqrtPrice": "1",
        }
        if valid:
            model = PoolStateModel.model_validate(data)
            assert model.pool_fees.base_fee.number_of_period == number_of_period
        else:
            with pytest.raises(ValidationError):
                PoolStateModel.model_validate(data)

    def test_invalid_mint(self):
        """Base mints must look like base58 public keys."""
        data = {
            "poolFees": {"baseFee": {"cliffFeeNumerator": 1}},
            "sqrtPrice": "1",
            "baseMint": "0xC02aaA39b223FE8D0A0e5C4F27eAD9083C756Cc2",
        }
        with pytest.raises(ValidationError):
            PoolStateModel.model_validate(data)


class TestQuoteRequest:
    """Tests for QuoteRequest."""

    def _request(self, launch_snapshot_json, **extra) -> dict:
        return {
            "pool": launch_snapshot_json["pool"],
            "config": launch_snapshot_json["config"],
            "amountIn": "1000000000",
            **extra,
        }

    def test_input_mint(self, launch_snapshot_json):
        """inputMint alone determines the direction."""
        request = QuoteRequest.model_validate(
            self._request(launch_snapshot_json, inputMint=QUOTE_MINT)
        )
        assert request.input_mint == QUOTE_MINT
        assert request.swap_base_for_quote is None
        assert request.slippage_bps == 100
        assert request.has_referral is False

    def test_explicit_direction(self, launch_snapshot_json):
        """swapBaseForQuote alone determines the direction."""
        request = QuoteRequest.model_validate(
            self._request(launch_snapshot_json, swapBaseForQuote=True, currentPoint=10)
        )
        assert request.swap_base_for_quote is True
        assert request.current_point == 10

    def test_direction_required(self, launch_snapshot_json):
        """Without either direction field the request is invalid."""
        with pytest.raises(ValidationError, match="inputMint or swapBaseForQuote"):
            QuoteRequest.model_validate(self._request(launch_snapshot_json))

    def test_input_mint_needs_base_mint(self, launch_snapshot_json):
        """inputMint cannot be resolved without the pool's base mint."""
        data = self._request(launch_snapshot_json, inputMint=BASE_MINT)
        data["pool"] = {k: v for k, v in data["pool"].items() if k != "baseMint"}
        with pytest.raises(ValidationError, match="baseMint"):
            QuoteRequest.model_validate(data)

    @pytest.mark.parametrize("slippage", [-1, 10_001])
    def test_slippage_range(self, launch_snapshot_json, slippage):
        """Slippage is bounded to [0, 10_000] bps."""
        with pytest.raises(ValidationError):
            QuoteRequest.model_validate(
                self._request(launch_snapshot_json, swapBaseForQuote=False, slippageBps=slippage)
            )


class TestQuoteResponse:
    """Tests for QuoteResponse serialization."""

    def test_serializes_with_aliases(self):
        """Responses use camelCase keys."""
        response = QuoteResponse(
            trade_direction="QUOTE_TO_BASE",
            swap_out_amount="1",
            min_swap_out_amount="0",
            actual_input_amount="2",
            next_sqrt_price="3",
            trading_fee="4",
            protocol_fee="5",
            referral_fee="0",
            current_point="6",
        )
        data = response.model_dump(by_alias=True)
        assert data["swapOutAmount"] == "1"
        assert data["minSwapOutAmount"] == "0"
        assert data["nextSqrtPrice"] == "3"
