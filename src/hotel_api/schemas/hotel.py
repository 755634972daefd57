"""Pydantic v2 schemas for hotel responses."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, model_validator

from hotel_api.schemas.common import PaginationMetadata

ADDRESS_FIELDS = ("address", "city", "state", "country", "postal_code")


class AddressSchema(BaseModel):
    """Postal address of a hotel."""

    address: str = ""
    city: str = ""
    state: str = ""
    country: str = ""
    postal_code: str = ""


class HotelResponse(BaseModel):
    """A hotel as returned by the API, with the address nested."""

    model_config = {"from_attributes": True}

    hotel_id: int
    main_image_th: str
    hotel_name: str
    phone: str
    email: str
    address: AddressSchema
    stars: int
    rating: float
    review_count: int
    child_allowed: bool
    pets_allowed: bool
    description: str
    created_at: datetime
    updated_at: datetime

    @model_validator(mode="before")
    @classmethod
    def nest_address(cls, data: Any) -> Any:
        """Group the flat ORM address columns into an ``address`` object."""
        if isinstance(data, dict):
            return data
        values = {name: getattr(data, name) for name in cls.model_fields if name != "address"}
        values["address"] = AddressSchema(**{f: getattr(data, f) for f in ADDRESS_FIELDS})
        return values


class HotelEnvelope(BaseModel):
    """Single-hotel response envelope: ``{"hotel": {...}}``."""

    hotel: HotelResponse


class HotelListResponse(BaseModel):
    """Paginated hotel list: ``{"metadata": {...}, "hotels": [...]}``."""

    metadata: PaginationMetadata
    hotels: list[HotelResponse]
