"""
Credit Application System - Main Application Entry Point

Registers customers and manages their credit applications.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import structlog
from fastapi import FastAPI, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse

from credit_system import __version__
from credit_system.core.config import settings
from credit_system.core.logging import setup_logging
from credit_system.core.metrics import get_metrics, get_metrics_content_type
from credit_system.infrastructure.database import db_manager
from credit_system.presentation.api import api_router
from credit_system.presentation.middleware import (
    LoggingMiddleware,
    RequestContextMiddleware,
    register_exception_handlers,
)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan manager.

    Sets up logging, opens the database engine and creates missing
    tables on startup; disposes of the engine on shutdown.
    """
    setup_logging()
    db_manager.init()
    await db_manager.create_all()

    logger = structlog.get_logger(__name__)
    logger.info("application_started", version=__version__, app=settings.app_name)

    yield

    await db_manager.close()
    logger.info("application_stopped")


app = FastAPI(
    title="Credit Application System",
    description="Customer registration and credit application service",
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

register_exception_handlers(app)

app.include_router(api_router)


@app.get("/metrics", include_in_schema=False)
async def metrics() -> Response:
    """Prometheus metrics endpoint."""
    if not settings.metrics_enabled:
        return Response(status_code=404)
    return Response(
        content=get_metrics(),
        media_type=get_metrics_content_type(),
    )


@app.get("/", include_in_schema=False)
async def root():
    """Redirect to API documentation."""
    return RedirectResponse(url="/docs")


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    import uvicorn

    uvicorn.run(
        "credit_system.main:app",
        host=settings.host,
        port=settings.port,
        log_config=None,
    )
