"""
Trakr - Main Application Entry Point

A personal-finance tracking service: transactions, budgets, wallets and
behavioral streaks, with summaries and reports computed on every read.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import structlog
from fastapi import FastAPI, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse

from trakr import __version__
from trakr.core.config import settings
from trakr.core.logging import setup_logging
from trakr.core.metrics import get_metrics, get_metrics_content_type
from trakr.infrastructure.database import db_manager
from trakr.presentation.api import api_router
from trakr.presentation.middleware import (
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
    - Initialize the database when it backs the record store
    - Clean up on shutdown
    """
    setup_logging()
    logger = structlog.get_logger(__name__)

    if settings.storage_backend == "database":
        db_manager.init()
        await db_manager.create_tables()

    logger.info(
        "application_started",
        version=__version__,
        storage_backend=settings.storage_backend,
    )

    yield

    await db_manager.close()
    logger.info("application_stopped")


app = FastAPI(
    title="Trakr",
    description="Personal finance tracking: transactions, budgets, wallets and reports",
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
