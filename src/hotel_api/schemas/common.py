"""Common Pydantic v2 schemas shared across the API.

Provides pagination metadata and error response schemas.
"""

from pydantic import BaseModel, Field


class PaginationMetadata(BaseModel):
    """Pagination metadata included in list responses.

    Every field is zero when the listing matched no rows.
    """

    model_config = {"from_attributes": True}

    current_page: int = Field(default=0, description="Requested page number")
    page_size: int = Field(default=0, description="Rows per page")
    first_page: int = Field(default=0, description="First page number (1 when any rows exist)")
    last_page: int = Field(default=0, description="Last page number")
    total_records: int = Field(default=0, description="Rows matching the search, ignoring pagination")


class ErrorResponse(BaseModel):
    """Standard error response body.

    ``error`` is a message string, or a field-to-message mapping for
    failed validation.
    """

    error: str | dict[str, str] = Field(description="Error message or per-field validation messages")


class HealthcheckResponse(BaseModel):
    """Service availability and build information."""

    status: str
    system_info: dict[str, str]
