"""
FastAPI application entry point for the Pair Partition Total service.

Run with:
    uvicorn pairsum.main:app --reload
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from pairsum import __version__
from pairsum.config import get_settings
from pairsum.errors import InvalidInputError
from pairsum.logging_config import setup_logging
from pairsum.middleware import setup_middleware
from pairsum.routes import router as totals_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    settings = get_settings()
    setup_logging(log_level=settings.log_level, json_output=settings.log_json)
    logger.info("%s starting (max_pairs=%d)", settings.app_name, settings.max_pairs)
    yield
    logger.info("%s stopped", settings.app_name)


app = FastAPI(
    title=get_settings().app_name,
    description=(
        "Sorts integer pairs by first - second, splits them at the midpoint "
        "and totals the firsts of the lower half with the seconds of the upper half."
    ),
    version=__version__,
    lifespan=lifespan,
)


# ---------------------------------------------------------------------------
# Global exception handlers
# ---------------------------------------------------------------------------

@app.exception_handler(InvalidInputError)
async def invalid_input_handler(request: Request, exc: InvalidInputError) -> JSONResponse:
    return JSONResponse(
        status_code=422,
        content={"detail": str(exc)},
    )


@app.exception_handler(Exception)
async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled exception")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


# Middleware & system routes (/health, /metrics)
setup_middleware(app)

# Computation routes (/totals/...)
app.include_router(totals_router)
