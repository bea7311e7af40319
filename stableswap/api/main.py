"""FastAPI application for the Stable2 pricing service."""

import structlog
import uvicorn
from fastapi import Depends, FastAPI, Request
from fastapi.responses import JSONResponse

from stableswap.api.endpoints import get_well_function, router
from stableswap.config import ServiceSettings
from stableswap.errors import ConvergenceFailure, Stable2Error
from stableswap.models import ErrorResponse
from stableswap.safe_int import SafeIntError
from stableswap.well_function import Stable2

logger = structlog.get_logger()

settings = ServiceSettings.from_env()

app = FastAPI(
    title="Stable2 pricing",
    description="StableSwap invariant, rate and target-ratio solvers for two-token wells",
    version="0.1.0",
)

app.include_router(router)


def _error_response(exc: Exception, error: str) -> JSONResponse:
    body = ErrorResponse(detail=str(exc), error=error)
    return JSONResponse(status_code=400, content=body.model_dump())


@app.exception_handler(Stable2Error)
async def stable2_error_handler(request: Request, exc: Stable2Error) -> JSONResponse:
    """Well function errors are caller errors: 400 with the error name."""
    if isinstance(exc, ConvergenceFailure):
        logger.warning("convergence_failure", path=request.url.path, detail=str(exc))
    return _error_response(exc, type(exc).__name__)


@app.exception_handler(SafeIntError)
async def arithmetic_error_handler(request: Request, exc: SafeIntError) -> JSONResponse:
    """Degenerate reserves (e.g. one side empty) surface as checked-arithmetic faults."""
    return _error_response(exc, type(exc).__name__)


@app.exception_handler(ValueError)
async def value_error_handler(request: Request, exc: ValueError) -> JSONResponse:
    return _error_response(exc, "ValueError")


@app.get("/health")
async def health(well_function: Stable2 = Depends(get_well_function)) -> dict[str, object]:
    """Health check endpoint; reports the amplification of the served well function."""
    return {"status": "ok", "aParameter": well_function.a}


def run() -> None:
    """Run the pricing API server.

    Configuration via environment variables:
    - STABLESWAP_HOST: Host to bind to (default: 0.0.0.0)
    - STABLESWAP_PORT: Port to bind to (default: 8000)
    - STABLESWAP_DEBUG: Enable debug/reload mode (default: false)
    """
    uvicorn.run(
        "stableswap.api.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )


if __name__ == "__main__":
    run()
