"""Shared test fixtures for settings and sample hotel/review rows."""

from datetime import UTC, datetime
from types import SimpleNamespace

import pytest

from hotel_api.core.config import Settings

_NOW = datetime(2024, 5, 1, 12, 0, tzinfo=UTC)


@pytest.fixture
def settings() -> Settings:
    """Test application settings."""
    return Settings(
        database_url="sqlite+aiosqlite:///:memory:",
        limiter_enabled=False,
        openai_api_key="test-openai-key",
        partner_api_url="https://partner.test",
        partner_api_key="test-partner-key",
        _env_file=None,  # type: ignore[call-arg]
    )


def make_hotel(hotel_id: int = 1, **overrides: object) -> SimpleNamespace:
    """Build an ORM-like hotel row."""
    values: dict[str, object] = {
        "hotel_id": hotel_id,
        "main_image_th": f"https://img.test/{hotel_id}.jpg",
        "hotel_name": f"Hotel {hotel_id}",
        "phone": "+1 555 0100",
        "email": f"hotel{hotel_id}@example.com",
        "address": "1 Main St",
        "city": "Lisbon",
        "state": "",
        "country": "Portugal",
        "postal_code": "1100-001",
        "stars": 4,
        "rating": 8.7,
        "review_count": 120,
        "child_allowed": True,
        "pets_allowed": False,
        "description": "Quiet rooms near the river.",
        "created_at": _NOW,
        "updated_at": _NOW,
    }
    values.update(overrides)
    return SimpleNamespace(**values)


def make_review(review_id: int = 1, hotel_id: int = 1, **overrides: object) -> SimpleNamespace:
    """Build an ORM-like review row."""
    values: dict[str, object] = {
        "id": review_id,
        "hotel_id": hotel_id,
        "average_score": 9,
        "country": "Spain",
        "type": "couple",
        "name": "Ana",
        "date": "2024-04-02",
        "headline": "Lovely stay",
        "language": "en",
        "pros": "Great breakfast",
        "cons": "Small lift",
        "source": "partner",
        "created_at": _NOW,
    }
    values.update(overrides)
    return SimpleNamespace(**values)


@pytest.fixture
def sample_hotel() -> SimpleNamespace:
    return make_hotel()


@pytest.fixture
def sample_review() -> SimpleNamespace:
    return make_review()


@pytest.fixture
def hotel_factory():
    """Factory for ORM-like hotel rows."""
    return make_hotel


@pytest.fixture
def review_factory():
    """Factory for ORM-like review rows."""
    return make_review
