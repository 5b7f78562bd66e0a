"""Pydantic models for the quote API."""

from pydantic import BaseModel, Field, model_validator

from curve_quoter.constants import BASIS_POINT_MAX, DEFAULT_SLIPPAGE_BPS
from curve_quoter.models.snapshot import ConfigStateModel, PoolStateModel
from curve_quoter.models.types import PublicKeyStr, Uint64


class QuoteRequest(BaseModel):
    """Request to quote a swap against one pool.

    The trade direction is given either by `inputMint` (compared with the
    pool's base mint) or explicitly by `swapBaseForQuote`.
    """

    model_config = {"populate_by_name": True}

    pool: PoolStateModel
    config: ConfigStateModel
    amount_in: Uint64 = Field(alias="amountIn")
    input_mint: PublicKeyStr | None = Field(default=None, alias="inputMint")
    swap_base_for_quote: bool | None = Field(default=None, alias="swapBaseForQuote")
    current_point: Uint64 | None = Field(default=None, alias="currentPoint")
    has_referral: bool = Field(default=False, alias="hasReferral")
    slippage_bps: int = Field(
        default=DEFAULT_SLIPPAGE_BPS, ge=0, le=BASIS_POINT_MAX, alias="slippageBps"
    )

    @model_validator(mode="after")
    def _check_direction(self) -> "QuoteRequest":
        if self.swap_base_for_quote is None:
            if self.input_mint is None:
                raise ValueError("Either inputMint or swapBaseForQuote is required")
            if self.pool.base_mint is None:
                raise ValueError("inputMint requires pool.baseMint")
        return self


class QuoteResponse(BaseModel):
    """Swap quote with fee breakdown. Amounts are decimal strings."""

    model_config = {"populate_by_name": True}

    trade_direction: str = Field(alias="tradeDirection")
    swap_out_amount: str = Field(alias="swapOutAmount")
    min_swap_out_amount: str = Field(alias="minSwapOutAmount")
    actual_input_amount: str = Field(alias="actualInputAmount")
    next_sqrt_price: str = Field(alias="nextSqrtPrice")
    trading_fee: str = Field(alias="tradingFee")
    protocol_fee: str = Field(alias="protocolFee")
    referral_fee: str = Field(alias="referralFee")
    current_point: str = Field(alias="currentPoint")
