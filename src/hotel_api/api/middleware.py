"""CORS, rate limiting, metrics, request logging, and fault recovery middleware."""

import time
from collections import defaultdict
from dataclasses import dataclass, field
from typing import Any

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from loguru import logger
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.types import ASGIApp

from hotel_api.api.errors import RATE_LIMIT_MESSAGE, SERVER_ERROR_MESSAGE
from hotel_api.core.config import Settings

_DEFAULT_TRUSTED_HEADERS = ["CF-Connecting-IP", "X-Forwarded-For", "X-Real-IP"]

# Clients with no request for this many seconds lose their bucket.
_IDLE_CLIENT_SECONDS = 180.0


def get_client_ip(request: Request, trusted_headers: list[str] | None = None) -> str:
    """Extract the real client IP from proxy headers or direct connection.

    Checks headers in priority order. For X-Forwarded-For, uses the
    leftmost (client-supplied) IP. Falls back to request.client.host.

    Args:
        request: The incoming Starlette request.
        trusted_headers: Ordered list of header names to check.
            Defaults to ["CF-Connecting-IP", "X-Forwarded-For", "X-Real-IP"].

    Returns:
        The client IP address string, or "unknown" if not determinable.
    """
    headers = trusted_headers if trusted_headers is not None else _DEFAULT_TRUSTED_HEADERS

    for header in headers:
        value = request.headers.get(header, "").strip()
        if not value:
            continue
        # X-Forwarded-For can contain multiple IPs: "client, proxy1, proxy2"
        if header.lower() == "x-forwarded-for":
            return value.split(",")[0].strip()
        return value

    if request.client:
        return request.client.host
    return "unknown"


def setup_cors(app: FastAPI, settings: Settings) -> None:
    """Configure CORS middleware on the FastAPI app.

    Args:
        app: The FastAPI application.
        settings: Application settings.
    """
    kwargs: dict[str, Any] = {
        "allow_credentials": True,
        "allow_methods": ["GET", "OPTIONS"],
        "allow_headers": ["*"],
    }
    if settings.cors_origin_list:
        kwargs["allow_origins"] = settings.cors_origin_list
    if settings.cors_origin_regex.strip():
        kwargs["allow_origin_regex"] = settings.cors_origin_regex.strip()
    app.add_middleware(CORSMiddleware, **kwargs)


class TokenBucket:
    """Token bucket refilled continuously at ``rate`` tokens per second.

    Args:
        rate: Tokens added per second.
        burst: Bucket capacity; the bucket starts full.
    """

    def __init__(self, rate: float, burst: int, now: float) -> None:
        self.rate = rate
        self.burst = burst
        self.tokens = float(burst)
        self.updated = now

    def allow(self, now: float) -> bool:
        """Take one token if available."""
        elapsed = max(0.0, now - self.updated)
        self.tokens = min(float(self.burst), self.tokens + elapsed * self.rate)
        self.updated = now
        if self.tokens >= 1.0:
            self.tokens -= 1.0
            return True
        return False


class RateLimitMiddleware(BaseHTTPMiddleware):
    """Per-client token bucket rate limiting.

    Uses proxy headers to identify real client IPs behind reverse proxies.
    Buckets of clients idle for three minutes are discarded.
    """

    def __init__(
        self,
        app: ASGIApp,
        rps: float = 2.0,
        burst: int = 4,
        enabled: bool = True,
        trusted_proxy_headers: list[str] | None = None,
    ) -> None:
        super().__init__(app)
        self.rps = rps
        self.burst = burst
        self.enabled = enabled
        self.trusted_proxy_headers = trusted_proxy_headers
        self._buckets: dict[str, TokenBucket] = {}
        self._last_sweep = time.monotonic()

    def _sweep(self, now: float) -> None:
        if now - self._last_sweep < 60.0:
            return
        self._last_sweep = now
        stale = [ip for ip, bucket in self._buckets.items() if now - bucket.updated > _IDLE_CLIENT_SECONDS]
        for ip in stale:
            del self._buckets[ip]

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        """Check the client's bucket and process the request.

        Returns:
            Response, or 429 if the bucket is empty.
        """
        if not self.enabled:
            return await call_next(request)

        client_ip = get_client_ip(request, self.trusted_proxy_headers)
        now = time.monotonic()
        self._sweep(now)

        bucket = self._buckets.get(client_ip)
        if bucket is None:
            bucket = self._buckets[client_ip] = TokenBucket(self.rps, self.burst, now)

        if not bucket.allow(now):
            return JSONResponse(status_code=429, content={"error": RATE_LIMIT_MESSAGE})

        return await call_next(request)


@dataclass
class RequestMetrics:
    """Process-wide request counters exposed at ``/debug/vars``."""

    total_requests_received: int = 0
    total_responses_sent: int = 0
    total_processing_time_us: int = 0
    total_responses_sent_by_status: dict[str, int] = field(default_factory=lambda: defaultdict(int))

    def snapshot(self) -> dict[str, Any]:
        return {
            "total_requests_received": self.total_requests_received,
            "total_responses_sent": self.total_responses_sent,
            "total_processing_time_us": self.total_processing_time_us,
            "total_responses_sent_by_status": dict(self.total_responses_sent_by_status),
        }


class MetricsMiddleware(BaseHTTPMiddleware):
    """Count requests, responses by status, and total processing time."""

    def __init__(self, app: ASGIApp, metrics: RequestMetrics) -> None:
        super().__init__(app)
        self.metrics = metrics

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        start = time.perf_counter()
        self.metrics.total_requests_received += 1

        response = await call_next(request)

        self.metrics.total_responses_sent += 1
        self.metrics.total_responses_sent_by_status[str(response.status_code)] += 1
        self.metrics.total_processing_time_us += int((time.perf_counter() - start) * 1_000_000)
        return response


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log method, path, status, and duration of every request."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        start = time.monotonic()
        response = await call_next(request)
        duration_ms = round((time.monotonic() - start) * 1000)
        logger.info(f"{request.method} {request.url.path} -> {response.status_code} ({duration_ms}ms)")
        return response


class RecoverMiddleware(BaseHTTPMiddleware):
    """Turn any unhandled exception into a 500 and close the connection."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        try:
            return await call_next(request)
        except Exception:
            logger.exception(f"Unhandled error serving {request.method} {request.url.path}")
            return JSONResponse(
                status_code=500,
                content={"error": SERVER_ERROR_MESSAGE},
                headers={"Connection": "close"},
            )
