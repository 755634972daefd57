"""Review API endpoints, nested under a hotel."""

from fastapi import APIRouter, HTTPException, Request, status
from loguru import logger
from sqlalchemy.exc import SQLAlchemyError

from hotel_api.api.listing import page_metadata, parse_list_params
from hotel_api.api.params import query_values, read_id_param
from hotel_api.core.dependencies import SessionDep, SettingsDep
from hotel_api.lib.summarizer import SummarizerError
from hotel_api.schemas.common import PaginationMetadata
from hotel_api.schemas.review import ReviewEnvelope, ReviewListResponse, ReviewResponse, ReviewSummaryResponse
from hotel_api.services.review_service import REVIEW_SORT, get_review, list_reviews
from hotel_api.services.summary_service import summarize_review

reviews_router = APIRouter(
    prefix="/hotels/{hotel_id}/reviews",
    tags=["reviews"],
)


@reviews_router.get("")
async def list_hotel_reviews(
    hotel_id: str,
    request: Request,
    session: SessionDep,
    settings: SettingsDep,
) -> ReviewListResponse:
    """List a hotel's reviews with full-text search, sorting, and pagination.

    Query parameters: ``search``, ``page`` (default 1), ``page_size``
    (default 20, max 100), and ``sort`` (default ``id``; prefix with
    ``-`` for descending).
    """
    parsed_hotel_id = read_id_param(hotel_id)
    params = parse_list_params(query_values(request.query_params), REVIEW_SORT)

    try:
        reviews, total = await list_reviews(
            session,
            parsed_hotel_id,
            params.search,
            params.filters,
            timeout=settings.query_timeout_seconds,
        )
    except (SQLAlchemyError, TimeoutError) as e:
        logger.error(f"Unexpected error listing reviews for hotel {parsed_hotel_id}: {e!r}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error listing reviews.",
        ) from e

    return ReviewListResponse(
        meta=PaginationMetadata.model_validate(page_metadata(total, params.filters)),
        reviews=[ReviewResponse.model_validate(r) for r in reviews],
    )


@reviews_router.get("/{review_id}")
async def get_hotel_review(
    hotel_id: str,
    review_id: str,
    session: SessionDep,
    settings: SettingsDep,
) -> ReviewEnvelope:
    """Get a single review of a hotel."""
    parsed_review_id = read_id_param(review_id)
    parsed_hotel_id = read_id_param(hotel_id)
    try:
        review = await get_review(
            session,
            parsed_hotel_id,
            parsed_review_id,
            timeout=settings.query_timeout_seconds,
        )
    except (SQLAlchemyError, TimeoutError) as e:
        logger.error(f"Unexpected error fetching review {parsed_review_id}: {e!r}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error fetching review.",
        ) from e
    return ReviewEnvelope(review=ReviewResponse.model_validate(review))


@reviews_router.get("/{review_id}/summary")
async def get_hotel_review_summary(
    hotel_id: str,
    review_id: str,
    session: SessionDep,
    settings: SettingsDep,
) -> ReviewSummaryResponse:
    """Generate a short summary of a review."""
    parsed_review_id = read_id_param(review_id)
    parsed_hotel_id = read_id_param(hotel_id)
    try:
        summary = await summarize_review(session, settings, parsed_hotel_id, parsed_review_id)
    except (SQLAlchemyError, TimeoutError, SummarizerError) as e:
        logger.error(f"Unexpected error summarizing review {parsed_review_id}: {e!r}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error summarizing review.",
        ) from e
    return ReviewSummaryResponse(summary=summary)
