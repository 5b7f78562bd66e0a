"""Mathematical primitives for the quotation engine.

This package provides:
- fixed_point: exact mul/div/shift primitives with explicit rounding
- curve: per-segment price/liquidity/amount conversions
"""

from curve_quoter.math.curve import (
    get_delta_amount_base_unsigned,
    get_delta_amount_quote_unsigned,
    get_initial_liquidity_from_delta_quote,
    get_initialize_amounts,
    get_next_sqrt_price_from_input,
)
from curve_quoter.math.fixed_point import Rounding, mul_div, mul_shr, shl_div

__all__ = [
    "Rounding",
    "mul_div",
    "mul_shr",
    "shl_div",
    "get_delta_amount_base_unsigned",
    "get_delta_amount_quote_unsigned",
    "get_next_sqrt_price_from_input",
    "get_initial_liquidity_from_delta_quote",
    "get_initialize_amounts",
]
