"""ORM model registry: import all models so Alembic autogenerate discovers them."""

from hotel_api.models.hotel import Hotel
from hotel_api.models.review import Review

__all__ = [
    "Hotel",
    "Review",
]
