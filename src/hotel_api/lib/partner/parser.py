"""Pydantic models for partner API hotel and review payloads.

The partner omits or nulls optional fields freely; every string field
falls back to ``""`` and every number to zero so rows can always be
upserted.
"""

from typing import Any

from pydantic import BaseModel, Field, field_validator

_STRING_FIELDS = ("address", "city", "state", "country", "postal_code")


def _coerce_null_to_str(v: Any) -> Any:
    """Coerce explicit JSON null to empty string."""
    return v if v is not None else ""


class PartnerAddress(BaseModel):
    """Postal address block of a partner hotel."""

    address: str = ""
    city: str = ""
    state: str = ""
    country: str = ""
    postal_code: str = ""

    @field_validator(*_STRING_FIELDS, mode="before")
    @classmethod
    def _coerce_strings(cls, v: Any) -> Any:
        return _coerce_null_to_str(v)


class PartnerHotel(BaseModel):
    """A hotel as returned by ``GET /v3.0/property/{id}``."""

    hotel_id: int
    main_image_th: str = ""
    hotel_name: str = ""
    phone: str = ""
    email: str = ""
    address: PartnerAddress = Field(default_factory=PartnerAddress)
    stars: int = 0
    rating: float = 0.0
    review_count: int = 0
    child_allowed: bool = False
    pets_allowed: bool = False
    description: str = ""

    @field_validator("main_image_th", "hotel_name", "phone", "email", "description", mode="before")
    @classmethod
    def _coerce_strings(cls, v: Any) -> Any:
        return _coerce_null_to_str(v)

    @field_validator("address", mode="before")
    @classmethod
    def _coerce_address(cls, v: Any) -> Any:
        return v if v is not None else {}

    def to_row(self) -> dict[str, Any]:
        """Flatten into ``hotels`` column values."""
        row = self.model_dump(exclude={"address"})
        row.update(self.address.model_dump())
        return row


class PartnerReview(BaseModel):
    """One entry of ``GET /v3.0/property/reviews/{id}/{limit}``."""

    average_score: int = 0
    country: str = ""
    type: str = ""
    name: str = ""
    date: str = ""
    headline: str = ""
    language: str = ""
    pros: str = ""
    cons: str = ""
    source: str = ""

    @field_validator("country", "type", "name", "date", "headline", "language", "pros", "cons", "source", mode="before")
    @classmethod
    def _coerce_strings(cls, v: Any) -> Any:
        return _coerce_null_to_str(v)

    def to_row(self) -> dict[str, Any]:
        """Return ``reviews`` column values, excluding the owning hotel."""
        return self.model_dump()


def parse_hotel(raw: Any) -> PartnerHotel:
    """Validate a raw hotel payload."""
    return PartnerHotel.model_validate(raw)


def parse_reviews(raw: Any) -> list[PartnerReview]:
    """Validate a raw review list payload; ``null`` is treated as no reviews."""
    if raw is None:
        return []
    if not isinstance(raw, list):
        msg = f"expected a JSON array of reviews, got {type(raw).__name__}"
        raise ValueError(msg)
    return [PartnerReview.model_validate(item) for item in raw]
