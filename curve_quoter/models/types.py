"""Shared pydantic types for decoded account snapshots.

Decoded accounts carry u64/u128 values; JSON producers emit them either as
decimal strings (to survive JavaScript number limits) or as plain integers.
"""

from typing import Annotated, Any

from pydantic import BeforeValidator, Field

from curve_quoter.constants import U64_MAX, U128_MAX


def _make_uint_validator(bits: int, max_value: int):  # type: ignore[no-untyped-def]
    def validate(value: Any) -> int:
        """Validate an unsigned integer given as int or decimal string.

        Raises:
            ValueError: If value is not a non-negative integer within range
        """
        if isinstance(value, bool):
            raise ValueError(f"Uint{bits} must be string or int, got bool")
        if isinstance(value, int):
            int_value = value
        elif isinstance(value, str):
            try:
                int_value = int(value)
            except ValueError as err:
                raise ValueError(f"Uint{bits} must be a decimal integer string: '{value}'") from err
        else:
            raise ValueError(f"Uint{bits} must be string or int, got {type(value).__name__}")

        if int_value < 0:
            raise ValueError(f"Uint{bits} cannot be negative: {value}")
        if int_value > max_value:
            raise ValueError(f"Uint{bits} overflow: {value} > 2^{bits}-1")
        return int_value

    return validate


validate_uint64 = _make_uint_validator(64, U64_MAX)
validate_uint128 = _make_uint_validator(128, U128_MAX)

# 64-bit unsigned integer (token amounts, points)
Uint64 = Annotated[
    int,
    BeforeValidator(validate_uint64),
    Field(description="64-bit unsigned integer as decimal string or number"),
]

# 128-bit unsigned integer (sqrt prices, liquidity)
Uint128 = Annotated[
    int,
    BeforeValidator(validate_uint128),
    Field(description="128-bit unsigned integer as decimal string or number"),
]

# Base58-encoded Solana public key
PublicKeyStr = Annotated[str, Field(pattern=r"^[1-9A-HJ-NP-Za-km-z]{32,44}$")]

# Whole percentage
Percent = Annotated[int, Field(ge=0, le=100)]
