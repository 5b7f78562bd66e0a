"""Program constant configuration for the quotation engine."""

import os
from dataclasses import dataclass

from curve_quoter.constants import (
    BASIS_POINT_MAX,
    DYNAMIC_FEE_SCALE,
    FEE_DENOMINATOR,
    MAX_CURVE_POINT,
    MAX_FEE_NUMERATOR,
    MAX_SQRT_PRICE,
    MIN_SQRT_PRICE,
    RESOLUTION,
)


@dataclass(frozen=True)
class ProgramConstants:
    """Wire-format constants of the on-chain program.

    The scaling constants are owned by the external program, so they are
    treated as configuration and threaded through every engine call instead
    of being read from module globals.

    Attributes:
        resolution: Fractional bits of the sqrt price fixed-point format.
            Quote deltas scale by 2^(2 * resolution).
        fee_denominator: Denominator of every fee numerator.
        max_fee_numerator: Cap on base + variable fee numerator.
        basis_point_max: Denominator of the exponential reduction factor.
        dynamic_fee_scale: Divisor applied to the squared volatility term.
        max_curve_point: Maximum number of curve segments.
        min_sqrt_price: Lowest sqrt price a curve may reference.
        max_sqrt_price: Highest sqrt price; the last segment must end here.
    """

    resolution: int = RESOLUTION
    fee_denominator: int = FEE_DENOMINATOR
    max_fee_numerator: int = MAX_FEE_NUMERATOR
    basis_point_max: int = BASIS_POINT_MAX
    dynamic_fee_scale: int = DYNAMIC_FEE_SCALE
    max_curve_point: int = MAX_CURVE_POINT
    min_sqrt_price: int = MIN_SQRT_PRICE
    max_sqrt_price: int = MAX_SQRT_PRICE

    def __post_init__(self) -> None:
        if self.resolution <= 0:
            raise ValueError(f"resolution must be positive, got {self.resolution}")
        if self.fee_denominator <= 0:
            raise ValueError(f"fee_denominator must be positive, got {self.fee_denominator}")
        if not 0 <= self.max_fee_numerator <= self.fee_denominator:
            raise ValueError(
                f"max_fee_numerator {self.max_fee_numerator} outside [0, {self.fee_denominator}]"
            )

    @property
    def scale_offset(self) -> int:
        """Bit offset of a quote amount relative to liquidity * sqrt price."""
        return self.resolution * 2

    @property
    def one(self) -> int:
        """1.0 in sqrt price fixed-point."""
        return 1 << self.resolution


DEFAULT_PROGRAM_CONSTANTS = ProgramConstants()


def load_program_constants() -> ProgramConstants:
    """Build ProgramConstants from environment overrides.

    Environment variables (all optional, defaults are the published values):
    - CURVE_QUOTER_RESOLUTION
    - CURVE_QUOTER_FEE_DENOMINATOR
    - CURVE_QUOTER_MAX_FEE_NUMERATOR
    """
    return ProgramConstants(
        resolution=int(os.environ.get("CURVE_QUOTER_RESOLUTION", RESOLUTION)),
        fee_denominator=int(os.environ.get("CURVE_QUOTER_FEE_DENOMINATOR", FEE_DENOMINATOR)),
        max_fee_numerator=int(os.environ.get("CURVE_QUOTER_MAX_FEE_NUMERATOR", MAX_FEE_NUMERATOR)),
    )


__all__ = ["ProgramConstants", "DEFAULT_PROGRAM_CONSTANTS", "load_program_constants"]
