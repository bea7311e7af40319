"""API endpoints for the Stable2 pricing service."""

import asyncio
from collections.abc import Callable
from typing import Any, TypeVar

import structlog
from fastapi import APIRouter, Depends

from stableswap.models import (
    ErrorResponse,
    LpTokenSupplyRequest,
    LpTokenSupplyResponse,
    RateRequest,
    RateResponse,
    RatioRequest,
    ReserveRequest,
    ReserveResponse,
)
from stableswap.well_function import Stable2, get_default_well_function

logger = structlog.get_logger()

router = APIRouter()

T = TypeVar("T")

# Well function errors are answered with 400 and an ErrorResponse body
ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    400: {"model": ErrorResponse, "description": "Invalid pool input or no convergence"},
}


def get_well_function() -> Stable2:
    """Dependency provider for the well function.

    Override this in tests to inject a different table:
        app.dependency_overrides[get_well_function] = lambda: custom_well_function

    Returns:
        The Stable2 instance to price with.
    """
    return get_default_well_function()


async def _run(fn: Callable[[], T]) -> T:
    # Ratio searches can take up to 255 Newton solves; keep the event loop free
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(None, fn)


@router.post("/lp-token-supply", responses=ERROR_RESPONSES)
async def lp_token_supply(
    request: LpTokenSupplyRequest,
    well_function: Stable2 = Depends(get_well_function),
) -> LpTokenSupplyResponse:
    """Invariant D for the given reserves."""
    supply = await _run(
        lambda: well_function.calc_lp_token_supply(request.reserve_values, request.well_data)
    )
    return LpTokenSupplyResponse(lp_token_supply=str(supply))


@router.post("/reserve", responses=ERROR_RESPONSES)
async def reserve(
    request: ReserveRequest,
    well_function: Stable2 = Depends(get_well_function),
) -> ReserveResponse:
    """Reserve j that reproduces lpTokenSupply next to the other reserve."""
    result = await _run(
        lambda: well_function.calc_reserve(
            request.reserve_values, request.j, int(request.lp_token_supply), request.well_data
        )
    )
    return ReserveResponse(reserve=str(result))


@router.post("/rate", responses=ERROR_RESPONSES)
async def rate(
    request: RateRequest,
    well_function: Stable2 = Depends(get_well_function),
) -> RateResponse:
    """Marginal rate of token i per token j."""
    result = await _run(
        lambda: well_function.calc_rate(request.reserve_values, request.i, request.j, request.well_data)
    )
    return RateResponse(rate=str(result))


@router.post("/reserve-at-ratio/swap", responses=ERROR_RESPONSES)
async def reserve_at_ratio_swap(
    request: RatioRequest,
    well_function: Stable2 = Depends(get_well_function),
) -> ReserveResponse:
    """Reserve j after swapping the pool to the target ratio."""
    logger.info("ratio_request", mode="swap", j=request.j, ratios=request.ratios)
    result = await _run(
        lambda: well_function.calc_reserve_at_ratio_swap(
            request.reserve_values, request.j, request.ratio_values, request.well_data
        )
    )
    return ReserveResponse(reserve=str(result))


@router.post("/reserve-at-ratio/liquidity", responses=ERROR_RESPONSES)
async def reserve_at_ratio_liquidity(
    request: RatioRequest,
    well_function: Stable2 = Depends(get_well_function),
) -> ReserveResponse:
    """Reserve j that prices the pool at the target ratio with reserve i held fixed."""
    logger.info("ratio_request", mode="liquidity", j=request.j, ratios=request.ratios)
    result = await _run(
        lambda: well_function.calc_reserve_at_ratio_liquidity(
            request.reserve_values, request.j, request.ratio_values, request.well_data
        )
    )
    return ReserveResponse(reserve=str(result))
