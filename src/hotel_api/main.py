"""FastAPI application factory.

Creates the FastAPI app with lifespan management, exception handlers,
and OpenAPI metadata.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from loguru import logger

from hotel_api import __version__
from hotel_api.api.errors import register_exception_handlers
from hotel_api.core.config import get_settings
from hotel_api.core.database import dispose_engine, init_engine, ping
from hotel_api.core.logging import setup_logging


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Manage application lifecycle: init engine on startup, dispose on shutdown."""
    settings = get_settings()
    setup_logging(settings.log_level, log_dir=settings.log_dir)
    init_engine(
        settings.database_url,
        echo=False,
        schema=settings.database_schema,
        max_open_conns=settings.db_max_open_conns,
        max_idle_time=settings.db_max_idle_time_seconds,
    )
    await ping()
    logger.info(f"Database connection established ({settings.environment})")

    yield

    await dispose_engine()
    logger.info("Database engine disposed")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance.
    """
    settings = get_settings()

    app = FastAPI(
        title="Hotel API",
        description="Hotel and review listings with full-text search, backed by partner data",
        version=__version__,
        lifespan=lifespan,
    )

    register_exception_handlers(app)

    # Register middleware and routers
    from hotel_api.api.router import create_router, setup_middleware

    setup_middleware(app, settings)
    app.include_router(create_router(settings))

    if settings.metrics_enabled:
        from hotel_api.api.v1.healthcheck import debug_router

        app.include_router(debug_router)

    return app
