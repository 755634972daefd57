"""Root API router with /v1 prefix and middleware registration."""

from fastapi import APIRouter, FastAPI

from hotel_api.api.middleware import (
    MetricsMiddleware,
    RateLimitMiddleware,
    RecoverMiddleware,
    RequestLoggingMiddleware,
    RequestMetrics,
    setup_cors,
)
from hotel_api.core.config import Settings


def create_router(settings: Settings) -> APIRouter:
    """Create the root API router with all sub-routers included.

    Args:
        settings: Application settings.

    Returns:
        Configured API router.
    """
    from hotel_api.api.v1.healthcheck import healthcheck_router
    from hotel_api.api.v1.hotels import hotels_router
    from hotel_api.api.v1.reviews import reviews_router

    root_router = APIRouter(prefix=settings.api_v1_prefix)
    root_router.include_router(healthcheck_router)
    root_router.include_router(hotels_router)
    root_router.include_router(reviews_router)

    return root_router


def setup_middleware(app: FastAPI, settings: Settings) -> None:
    """Register all middleware on the FastAPI app.

    Starlette wraps later registrations around earlier ones, so the
    effective order (outermost first) is CORS, request logging, metrics,
    recovery, rate limiting.

    Args:
        app: The FastAPI application.
        settings: Application settings.
    """
    app.add_middleware(
        RateLimitMiddleware,
        rps=settings.limiter_rps,
        burst=settings.limiter_burst,
        enabled=settings.limiter_enabled,
        trusted_proxy_headers=settings.trusted_proxy_header_list,
    )
    app.add_middleware(RecoverMiddleware)
    if settings.metrics_enabled:
        app.state.metrics = RequestMetrics()
        app.add_middleware(MetricsMiddleware, metrics=app.state.metrics)
    app.add_middleware(RequestLoggingMiddleware)
    setup_cors(app, settings)
