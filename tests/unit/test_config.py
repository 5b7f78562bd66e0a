"""Tests for program constant configuration."""

import pytest

from curve_quoter.config import DEFAULT_PROGRAM_CONSTANTS, ProgramConstants, load_program_constants
from curve_quoter.constants import FEE_DENOMINATOR, MAX_FEE_NUMERATOR, MAX_SQRT_PRICE, RESOLUTION


class TestProgramConstants:
    """Tests for ProgramConstants."""

    def test_defaults_match_published_values(self):
        """Defaults are the on-chain program's constants."""
        assert DEFAULT_PROGRAM_CONSTANTS.resolution == RESOLUTION == 64
        assert DEFAULT_PROGRAM_CONSTANTS.fee_denominator == FEE_DENOMINATOR == 1_000_000_000
        assert DEFAULT_PROGRAM_CONSTANTS.max_fee_numerator == MAX_FEE_NUMERATOR == 500_000_000
        assert DEFAULT_PROGRAM_CONSTANTS.max_sqrt_price == MAX_SQRT_PRICE

    def test_derived_values(self):
        """scale_offset and one follow the resolution."""
        assert DEFAULT_PROGRAM_CONSTANTS.scale_offset == 128
        assert DEFAULT_PROGRAM_CONSTANTS.one == 1 << 64

    def test_frozen(self):
        """Constants cannot be mutated."""
        with pytest.raises(AttributeError):
            DEFAULT_PROGRAM_CONSTANTS.resolution = 32  # type: ignore[misc]

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"resolution": 0},
            {"fee_denominator": 0},
            {"max_fee_numerator": FEE_DENOMINATOR + 1},
        ],
    )
    def test_invalid_values_raise(self, kwargs):
        """Nonsensical constants are rejected."""
        with pytest.raises(ValueError):
            ProgramConstants(**kwargs)


class TestLoadProgramConstants:
    """Tests for environment overrides."""

    def test_defaults_without_env(self, monkeypatch):
        """No overrides gives the defaults."""
        for name in (
            "CURVE_QUOTER_RESOLUTION",
            "CURVE_QUOTER_FEE_DENOMINATOR",
            "CURVE_QUOTER_MAX_FEE_NUMERATOR",
        ):
            monkeypatch.delenv(name, raising=False)
        assert load_program_constants() == DEFAULT_PROGRAM_CONSTANTS

    def test_env_override(self, monkeypatch):
        """Environment variables override individual constants."""
        monkeypatch.setenv("CURVE_QUOTER_MAX_FEE_NUMERATOR", "990000000")
        constants = load_program_constants()
        assert constants.max_fee_numerator == 990_000_000
        assert constants.resolution == RESOLUTION
