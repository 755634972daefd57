"""HTTP client for the partner hotel data API.

Requests carry the ``x-api-key`` header and are retried a fixed number
of times; any non-200 response counts as a failed attempt.
"""

import asyncio
from typing import Any

import httpx
from loguru import logger

from hotel_api.lib.partner.parser import PartnerHotel, PartnerReview, parse_hotel, parse_reviews

# Upper bound passed to the reviews endpoint, which requires an explicit limit.
REVIEWS_LIMIT = 1_000_000


class PartnerAPIError(Exception):
    """Raised when the partner API cannot be reached or returns bad data."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class PartnerClient:
    """Fetches hotels and their reviews from the partner API.

    Args:
        base_url: Partner API root, e.g. ``https://api.partner.example``.
        api_key: Value for the ``x-api-key`` header.
        timeout: Per-request timeout in seconds.
        max_attempts: Attempts per request before giving up.
        retry_delay: Seconds to wait between attempts.
    """

    def __init__(
        self,
        base_url: str,
        api_key: str,
        *,
        timeout: float = 10.0,
        max_attempts: int = 3,
        retry_delay: float = 0.0,
    ) -> None:
        self.max_attempts = max_attempts
        self.retry_delay = retry_delay
        self._client = httpx.AsyncClient(
            base_url=base_url.rstrip("/"),
            headers={"x-api-key": api_key},
            timeout=timeout,
        )

    async def fetch_hotel(self, hotel_id: str) -> PartnerHotel:
        """Fetch one hotel by its partner ID."""
        raw = await self._get_json(f"/v3.0/property/{hotel_id}")
        try:
            return parse_hotel(raw)
        except ValueError as exc:
            msg = f"Invalid hotel payload for {hotel_id}: {exc}"
            raise PartnerAPIError(msg) from exc

    async def fetch_reviews(self, hotel_id: str) -> list[PartnerReview]:
        """Fetch every review for a hotel."""
        raw = await self._get_json(f"/v3.0/property/reviews/{hotel_id}/{REVIEWS_LIMIT}")
        try:
            return parse_reviews(raw)
        except ValueError as exc:
            msg = f"Invalid review payload for {hotel_id}: {exc}"
            raise PartnerAPIError(msg) from exc

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.aclose()

    async def __aenter__(self) -> "PartnerClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    async def _get_json(self, path: str) -> Any:
        """GET ``path`` with retries and return the decoded JSON body.

        Raises:
            PartnerAPIError: When every attempt fails.
        """
        last_error: PartnerAPIError | None = None
        for attempt in range(self.max_attempts):
            try:
                return await self._request(path)
            except PartnerAPIError as e:
                last_error = e
                logger.warning(f"Partner request failed (attempt {attempt + 1}/{self.max_attempts}): {e}")

            if attempt < self.max_attempts - 1 and self.retry_delay > 0:
                await asyncio.sleep(self.retry_delay)

        assert last_error is not None
        raise last_error

    async def _request(self, path: str) -> Any:
        """Make a single GET request to the partner API."""
        try:
            response = await self._client.get(path)
        except httpx.TimeoutException as exc:
            msg = f"Timeout fetching {path}"
            raise PartnerAPIError(msg) from exc
        except httpx.HTTPError as exc:
            msg = f"HTTP error fetching {path}: {exc}"
            raise PartnerAPIError(msg) from exc

        if response.status_code != httpx.codes.OK:
            msg = f"unexpected status code: {response.status_code}"
            raise PartnerAPIError(msg, status_code=response.status_code)

        try:
            return response.json()
        except ValueError as exc:
            msg = f"Invalid JSON response for {path}"
            raise PartnerAPIError(msg) from exc
