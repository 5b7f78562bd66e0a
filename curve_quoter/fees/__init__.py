"""Fee scheduling and application.

Modules:
- scheduler: time-decayed base fee (linear or exponential)
- dynamic: volatility surcharge
- calculator: fee totals, fee splits, fee placement policy
- result: FeeMode and FeeOnAmountResult value types
"""

from curve_quoter.fees.calculator import get_fee_mode, get_fee_on_amount, get_total_fee_numerator
from curve_quoter.fees.dynamic import get_delta_bin_id, get_variable_fee
from curve_quoter.fees.result import FeeMode, FeeOnAmountResult
from curve_quoter.fees.scheduler import get_current_base_fee_numerator, get_fee_in_period

__all__ = [
    "FeeMode",
    "FeeOnAmountResult",
    "get_current_base_fee_numerator",
    "get_fee_in_period",
    "get_variable_fee",
    "get_delta_bin_id",
    "get_total_fee_numerator",
    "get_fee_on_amount",
    "get_fee_mode",
]
