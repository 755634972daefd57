"""Unit tests for the healthcheck and /debug/vars endpoints."""

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from hotel_api import __version__
from hotel_api.api.middleware import MetricsMiddleware, RequestMetrics
from hotel_api.api.v1.healthcheck import debug_router, healthcheck_router
from hotel_api.core.config import Settings, get_settings


@pytest.fixture
def app(settings: Settings) -> FastAPI:
    test_app = FastAPI()
    test_app.include_router(healthcheck_router, prefix="/v1")
    test_app.include_router(debug_router)
    test_app.dependency_overrides[get_settings] = lambda: settings
    return test_app


@pytest.fixture
def client(app: FastAPI) -> AsyncClient:
    return AsyncClient(transport=ASGITransport(app=app), base_url="http://test")


class TestHealthcheck:
    """Tests for GET /v1/healthcheck."""

    @pytest.mark.asyncio
    async def test_reports_available(self, client: AsyncClient) -> None:
        resp = await client.get("/v1/healthcheck")

        assert resp.status_code == 200
        assert resp.json() == {
            "status": "available",
            "system_info": {"environment": "development", "version": __version__},
        }


class TestDebugVars:
    """Tests for GET /debug/vars."""

    @pytest.mark.asyncio
    async def test_without_metrics_reports_version_only(self, client: AsyncClient) -> None:
        resp = await client.get("/debug/vars")

        assert resp.status_code == 200
        data = resp.json()
        assert data["version"] == __version__
        assert isinstance(data["timestamp"], int)
        assert "total_requests_received" not in data

    @pytest.mark.asyncio
    async def test_includes_request_counters(self, app: FastAPI, client: AsyncClient) -> None:
        app.state.metrics = RequestMetrics()
        app.add_middleware(MetricsMiddleware, metrics=app.state.metrics)

        await client.get("/v1/healthcheck")
        await client.get("/v1/missing")
        resp = await client.get("/debug/vars")

        data = resp.json()
        assert data["total_requests_received"] == 3
        assert data["total_responses_sent"] == 2
        assert data["total_responses_sent_by_status"] == {"200": 1, "404": 1}
