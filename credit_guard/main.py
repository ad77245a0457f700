"""
CoopCredit Guard - Main Application Entry Point

A Loan Default Risk Service that scores cooperative loan applicants
with a weighted heuristic and reports analytics over past predictions.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import structlog
from fastapi import FastAPI, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse

from credit_guard import __version__
from credit_guard.core.config import settings
from credit_guard.core.logging import setup_logging
from credit_guard.core.metrics import get_metrics, get_metrics_content_type
from credit_guard.infrastructure.database import db_manager
from credit_guard.presentation.api import api_router
from credit_guard.presentation.middleware import (
    LoggingMiddleware,
    RequestContextMiddleware,
    error_handler_middleware,
)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan manager.

    Handles startup and shutdown events:
    - Set up logging
    - Initialize the database engine and history table
    - Clean up on shutdown
    """
    setup_logging()
    db_manager.init()
    await db_manager.create_tables()

    logger = structlog.get_logger(__name__)
    logger.info(
        "application_started",
        app=settings.app_name,
        version=__version__,
        simulated_latency_ms=settings.simulated_latency_ms,
    )

    yield

    await db_manager.close()
    logger.info("application_stopped")


app = FastAPI(
    title="CoopCredit Guard",
    description="Loan Default Risk Prediction Service",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(LoggingMiddleware)
app.add_middleware(RequestContextMiddleware)

error_handler_middleware(app)

app.include_router(api_router)


@app.get("/metrics", include_in_schema=False)
async def metrics() -> Response:
    """Prometheus metrics endpoint."""
    return Response(
        content=get_metrics(),
        media_type=get_metrics_content_type(),
    )


@app.get("/", include_in_schema=False)
async def root():
    """Redirect to API documentation."""

    return RedirectResponse(url="/docs")


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "credit_guard.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
