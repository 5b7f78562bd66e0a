"""Pydantic models for snapshot decoding and the quote API."""

from curve_quoter.models.quote import QuoteRequest, QuoteResponse
from curve_quoter.models.snapshot import (
    BaseFeeModel,
    ConfigStateModel,
    CurvePointModel,
    DynamicFeeModel,
    PoolFeesModel,
    PoolStateModel,
)

__all__ = [
    "BaseFeeModel",
    "DynamicFeeModel",
    "PoolFeesModel",
    "PoolStateModel",
    "CurvePointModel",
    "ConfigStateModel",
    "QuoteRequest",
    "QuoteResponse",
]
