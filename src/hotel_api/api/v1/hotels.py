"""Hotel API endpoints."""

from fastapi import APIRouter, HTTPException, Request, status
from loguru import logger
from sqlalchemy.exc import SQLAlchemyError

from hotel_api.api.listing import page_metadata, parse_list_params
from hotel_api.api.params import query_values, read_id_param
from hotel_api.core.dependencies import SessionDep, SettingsDep
from hotel_api.schemas.common import PaginationMetadata
from hotel_api.schemas.hotel import HotelEnvelope, HotelListResponse, HotelResponse
from hotel_api.services.hotel_service import HOTEL_SORT, get_hotel, list_hotels

hotels_router = APIRouter(
    prefix="/hotels",
    tags=["hotels"],
)


@hotels_router.get("")
async def list_all_hotels(
    request: Request,
    session: SessionDep,
    settings: SettingsDep,
) -> HotelListResponse:
    """List hotels with full-text search, sorting, and pagination.

    Query parameters: ``search``, ``page`` (default 1), ``page_size``
    (default 20, max 100), and ``sort`` (default ``hotel_id``; prefix
    with ``-`` for descending).
    """
    params = parse_list_params(query_values(request.query_params), HOTEL_SORT)

    try:
        hotels, total = await list_hotels(
            session,
            params.search,
            params.filters,
            timeout=settings.query_timeout_seconds,
        )
    except (SQLAlchemyError, TimeoutError) as e:
        logger.error(f"Unexpected error listing hotels: {e!r}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error listing hotels.",
        ) from e

    return HotelListResponse(
        metadata=PaginationMetadata.model_validate(page_metadata(total, params.filters)),
        hotels=[HotelResponse.model_validate(h) for h in hotels],
    )


@hotels_router.get("/{hotel_id}")
async def get_hotel_by_id(
    hotel_id: str,
    session: SessionDep,
    settings: SettingsDep,
) -> HotelEnvelope:
    """Get a single hotel by its ID."""
    parsed_id = read_id_param(hotel_id)
    try:
        hotel = await get_hotel(session, parsed_id, timeout=settings.query_timeout_seconds)
    except (SQLAlchemyError, TimeoutError) as e:
        logger.error(f"Unexpected error fetching hotel {parsed_id}: {e!r}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error fetching hotel.",
        ) from e
    return HotelEnvelope(hotel=HotelResponse.model_validate(hotel))
