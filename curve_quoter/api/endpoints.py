"""API endpoints for the quote service."""

import time

import structlog
from fastapi import APIRouter, Depends, HTTPException

from curve_quoter.config import ProgramConstants, load_program_constants
from curve_quoter.errors import CurveMathError, InsufficientLiquidity
from curve_quoter.models.quote import QuoteRequest, QuoteResponse
from curve_quoter.pools.parsing import parse_config_state, parse_pool_state
from curve_quoter.pools.types import ActivationType
from curve_quoter.quote import swap_quote

logger = structlog.get_logger()

router = APIRouter()


def get_program_constants() -> ProgramConstants:
    """Dependency provider for the program constants.

    Override this in tests to inject different constants:
        app.dependency_overrides[get_program_constants] = lambda: constants
    """
    return load_program_constants()


def get_clock() -> int:
    """Dependency provider for the current UNIX timestamp."""
    return int(time.time())


@router.post("/quote")
def quote(
    request: QuoteRequest,
    constants: ProgramConstants = Depends(get_program_constants),
    now: int = Depends(get_clock),
) -> QuoteResponse:
    """Quote a swap against the supplied pool and config snapshots.

    Error Handling:
        - Invalid request schema: 422 (Pydantic)
        - Missing currentPoint for a slot-activated config: 400
        - Amount larger than the curve can absorb: 400 insufficient_liquidity
        - Inconsistent snapshots or math errors: 422 with the error kind
    """
    pool = parse_pool_state(request.pool)
    config = parse_config_state(request.config)

    current_point = request.current_point
    if current_point is None:
        if config.activation_type != ActivationType.TIMESTAMP:
            raise HTTPException(
                status_code=400,
                detail={
                    "error": "missing_current_point",
                    "message": "currentPoint is required for slot-activated pools",
                },
            )
        current_point = now

    logger.info(
        "received_quote_request",
        amount_in=request.amount_in,
        current_point=current_point,
        has_referral=request.has_referral,
        curve_points=len(config.curve),
    )

    try:
        result = swap_quote(
            pool,
            config,
            request.amount_in,
            current_point=current_point,
            input_is_base=request.swap_base_for_quote,
            input_mint=request.input_mint if request.swap_base_for_quote is None else None,
            has_referral=request.has_referral,
            slippage_bps=request.slippage_bps,
            constants=constants,
        )
    except InsufficientLiquidity as err:
        logger.warning("quote_insufficient_liquidity", amount_in=request.amount_in)
        raise HTTPException(
            status_code=400,
            detail={"error": "insufficient_liquidity", "message": str(err)},
        ) from err
    except CurveMathError as err:
        logger.warning("quote_rejected", error=type(err).__name__, reason=str(err))
        raise HTTPException(
            status_code=422,
            detail={"error": type(err).__name__, "message": str(err)},
        ) from err

    swap_result = result.swap_result
    return QuoteResponse(
        trade_direction=result.trade_direction.name,
        swap_out_amount=str(swap_result.output_amount),
        min_swap_out_amount=str(result.min_output_amount),
        actual_input_amount=str(swap_result.actual_input_amount),
        next_sqrt_price=str(swap_result.next_sqrt_price),
        trading_fee=str(swap_result.trading_fee),
        protocol_fee=str(swap_result.protocol_fee),
        referral_fee=str(swap_result.referral_fee),
        current_point=str(current_point),
    )
