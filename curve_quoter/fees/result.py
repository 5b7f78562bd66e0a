"""Fee calculation result types."""

from dataclasses import dataclass


@dataclass(frozen=True)
class FeeMode:
    """Where the trading fee is charged for one quote.

    Derived once per quote from the config's collect fee mode and the trade
    direction; never stored.

    Attributes:
        fees_on_input: Fee is deducted from the input before the curve walk.
            Otherwise it is deducted from the curve output.
        fees_on_base_token: The fee-bearing leg is the base token.
        has_referral: A referral account receives part of the protocol fee.
    """

    fees_on_input: bool
    fees_on_base_token: bool
    has_referral: bool


@dataclass(frozen=True)
class FeeOnAmountResult:
    """Result of applying the trading fee to a gross amount.

    The three fee parts are what each party retains, so together they add up
    to the gross fee deducted from the amount.

    Attributes:
        amount: Amount left after the fee
        trading_fee: Part of the fee retained by the pool
        protocol_fee: Part of the fee retained by the protocol
        referral_fee: Part of the protocol fee paid to the referrer

    Examples:
        result = get_fee_on_amount(1_000_000, pool_fees, False, now, activation)
        assert result.amount + result.total_fee == 1_000_000
    """

    amount: int
    trading_fee: int
    protocol_fee: int
    referral_fee: int

    @property
    def total_fee(self) -> int:
        """Gross fee deducted from the original amount."""
        return self.trading_fee + self.protocol_fee + self.referral_fee

    @classmethod
    def no_fee(cls, amount: int) -> "FeeOnAmountResult":
        """Result for an amount that carries no fee."""
        return cls(amount=amount, trading_fee=0, protocol_fee=0, referral_fee=0)
