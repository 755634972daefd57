"""Healthcheck and runtime counters endpoints."""

from datetime import UTC, datetime

from fastapi import APIRouter, Request

from hotel_api import __version__
from hotel_api.core.dependencies import SettingsDep
from hotel_api.schemas.common import HealthcheckResponse

healthcheck_router = APIRouter(tags=["healthcheck"])
debug_router = APIRouter(tags=["debug"])


@healthcheck_router.get("/healthcheck")
async def healthcheck(settings: SettingsDep) -> HealthcheckResponse:
    """Report that the service is up, with its environment and version."""
    return HealthcheckResponse(
        status="available",
        system_info={"environment": settings.environment, "version": __version__},
    )


@debug_router.get("/debug/vars")
async def debug_vars(request: Request) -> dict:
    """Expose request counters collected by the metrics middleware."""
    metrics = getattr(request.app.state, "metrics", None)
    counters = metrics.snapshot() if metrics is not None else {}
    return {
        "version": __version__,
        "timestamp": int(datetime.now(UTC).timestamp()),
        **counters,
    }
