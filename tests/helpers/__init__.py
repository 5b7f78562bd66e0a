"""Test helpers module for shared test utilities.

- constants: mints, exact Q64.64 sqrt prices, the published launch config
- factories: snapshot factory functions
"""

from tests.helpers.constants import (
    BASE_MINT,
    FOUR,
    LAUNCH_CLIFF_FEE_NUMERATOR,
    LAUNCH_LIQUIDITY,
    LAUNCH_SQRT_START_PRICE,
    MAX_SQRT_PRICE,
    ONE,
    QUOTE_MINT,
    THREE_HALVES,
    TWO,
    UNIT_LIQUIDITY,
)
from tests.helpers.factories import (
    make_base_fee,
    make_config,
    make_dynamic_fee,
    make_pool,
    make_pool_fees,
)

__all__ = [
    # Constants
    "BASE_MINT",
    "QUOTE_MINT",
    "ONE",
    "TWO",
    "THREE_HALVES",
    "FOUR",
    "UNIT_LIQUIDITY",
    "MAX_SQRT_PRICE",
    "LAUNCH_SQRT_START_PRICE",
    "LAUNCH_LIQUIDITY",
    "LAUNCH_CLIFF_FEE_NUMERATOR",
    # Factories
    "make_base_fee",
    "make_dynamic_fee",
    "make_pool_fees",
    "make_pool",
    "make_config",
]
