"""Swap quotation engine for piecewise bonding-curve pools.

Main entry points:
    from curve_quoter import swap_quote, get_swap_result

    quote = swap_quote(pool, config, amount_in, current_point=now, input_is_base=False)
    quote.output_amount, quote.min_output_amount
"""

from curve_quoter.config import DEFAULT_PROGRAM_CONSTANTS, ProgramConstants
from curve_quoter.errors import (
    CurveMathError,
    DivisionByZero,
    InsufficientLiquidity,
    InvalidConfig,
    InvalidRange,
    InvalidState,
    MathOverflow,
    Underflow,
)
from curve_quoter.fees import FeeMode, get_fee_mode
from curve_quoter.pools import (
    ActivationType,
    BaseFeeParameters,
    CollectFeeMode,
    ConfigSnapshot,
    CurveSegment,
    DynamicFeeParameters,
    FeeSchedulerMode,
    PoolFees,
    PoolSnapshot,
    TradeDirection,
)
from curve_quoter.quote import SwapQuote, swap_quote
from curve_quoter.swap import SwapResult, get_swap_result

__version__ = "0.1.0"

__all__ = [
    "ProgramConstants",
    "DEFAULT_PROGRAM_CONSTANTS",
    "CurveMathError",
    "DivisionByZero",
    "InsufficientLiquidity",
    "InvalidConfig",
    "InvalidRange",
    "InvalidState",
    "MathOverflow",
    "Underflow",
    "FeeMode",
    "get_fee_mode",
    "ActivationType",
    "BaseFeeParameters",
    "CollectFeeMode",
    "ConfigSnapshot",
    "CurveSegment",
    "DynamicFeeParameters",
    "FeeSchedulerMode",
    "PoolFees",
    "PoolSnapshot",
    "TradeDirection",
    "SwapQuote",
    "swap_quote",
    "SwapResult",
    "get_swap_result",
]
