"""Error classes for the quotation engine.

Every error is raised at the point of detection and propagates to the caller
unchanged. Callers surface InsufficientLiquidity as a user-facing "amount too
large" condition and treat everything else as a data or configuration defect.
"""


class CurveMathError(Exception):
    """Base error for quotation engine failures."""

    pass


class DivisionByZero(CurveMathError, ArithmeticError):
    """Zero denominator or divisor in an arithmetic primitive."""

    pass


class Underflow(CurveMathError, ArithmeticError):
    """Checked subtraction would produce a negative result."""

    pass


class MathOverflow(CurveMathError, ArithmeticError):
    """Value does not fit the unsigned integer domain it is cast to."""

    pass


class InvalidState(CurveMathError):
    """Zero price or liquidity where progress requires a positive value."""

    pass


class InvalidRange(InvalidState):
    """Price range is inverted or degenerate."""

    pass


class InvalidConfig(CurveMathError):
    """Unrecognized mode value or an inconsistent pool/config snapshot."""

    pass


class InsufficientLiquidity(CurveMathError):
    """Quote-to-base walk cannot consume the requested input."""

    pass


__all__ = [
    "CurveMathError",
    "DivisionByZero",
    "Underflow",
    "MathOverflow",
    "InvalidState",
    "InvalidRange",
    "InvalidConfig",
    "InsufficientLiquidity",
]
