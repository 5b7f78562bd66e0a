"""Pool and config snapshots.

This package provides:
- types: immutable snapshot dataclasses and wire enums
- validation: consistency checks run before quoting
- parsing: conversion from decoded account models
"""

from curve_quoter.pools.parsing import parse_config_state, parse_pool_state
from curve_quoter.pools.types import (
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
from curve_quoter.pools.validation import validate_snapshots

__all__ = [
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
    "parse_config_state",
    "parse_pool_state",
    "validate_snapshots",
]
