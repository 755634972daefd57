"""Pydantic v2 schemas for review responses."""

from datetime import datetime

from pydantic import BaseModel

from hotel_api.schemas.common import PaginationMetadata


class ReviewResponse(BaseModel):
    """A single guest review."""

    model_config = {"from_attributes": True}

    id: int
    hotel_id: int
    average_score: int
    country: str
    type: str
    name: str
    date: str
    headline: str
    language: str
    pros: str
    cons: str
    source: str
    created_at: datetime


class ReviewEnvelope(BaseModel):
    """Single-review response envelope: ``{"review": {...}}``."""

    review: ReviewResponse


class ReviewListResponse(BaseModel):
    """Paginated review list: ``{"meta": {...}, "reviews": [...]}``."""

    meta: PaginationMetadata
    reviews: list[ReviewResponse]


class ReviewSummaryResponse(BaseModel):
    """Generated summary of one review."""

    summary: str
