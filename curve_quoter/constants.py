"""Constants published by the virtual curve program.

These mirror the program's wire format and must stay in sync with it. Engine
functions read them through ProgramConstants (see curve_quoter.config) so a
deployment with different values can override them without code changes.
"""

# Fixed-point fractional bits of sqrt prices (Q64.64)
RESOLUTION = 64

# Fee numerators are expressed over this denominator (1e9 = 100%)
FEE_DENOMINATOR = 1_000_000_000
MAX_FEE_NUMERATOR = 500_000_000  # 50%

BASIS_POINT_MAX = 10_000

# Maximum number of (sqrt_price, liquidity) breakpoints in a curve
MAX_CURVE_POINT = 20

MIN_SQRT_PRICE = 4_295_048_016
MAX_SQRT_PRICE = 79_226_673_521_066_979_257_578_248_091

# Fee period counts are stored as u16 on chain
U16_MAX = 2**16 - 1
U64_MAX = 2**64 - 1
U128_MAX = 2**128 - 1

# Variable fee is scaled down by 1e11 after squaring (volatility * bin_step)
DYNAMIC_FEE_SCALE = 100_000_000_000

# Fee percents are whole percentages
PERCENT_DENOMINATOR = 100

# Minimum-output bound applied by the quote service (1%)
DEFAULT_SLIPPAGE_BPS = 100

__all__ = [
    "RESOLUTION",
    "FEE_DENOMINATOR",
    "MAX_FEE_NUMERATOR",
    "BASIS_POINT_MAX",
    "MAX_CURVE_POINT",
    "MIN_SQRT_PRICE",
    "MAX_SQRT_PRICE",
    "U16_MAX",
    "U64_MAX",
    "U128_MAX",
    "DYNAMIC_FEE_SCALE",
    "PERCENT_DENOMINATOR",
    "DEFAULT_SLIPPAGE_BPS",
]
