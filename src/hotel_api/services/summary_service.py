"""Review summary service -- builds the prompt and calls the summarizer."""

from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from hotel_api.core.config import Settings
from hotel_api.lib.summarizer import SummarizerError, complete_prompt
from hotel_api.models.review import Review
from hotel_api.services.review_service import get_review


def build_review_prompt(review: Review) -> str:
    """Render the summarization prompt for one review."""
    return (
        "summarize the following hotel review in a few sentences:\n"
        f"headline: {review.headline}\n"
        f"average score: {review.average_score}\n"
        f"pros: {review.pros}\n"
        f"cons: {review.cons}"
    )


async def summarize_review(
    session: AsyncSession,
    settings: Settings,
    hotel_id: int,
    review_id: int,
) -> str:
    """Return a short generated summary of a review.

    Raises:
        RecordNotFoundError: If the review does not exist for the hotel.
        SummarizerError: If summaries are not configured or the call fails.
    """
    review = await get_review(session, hotel_id, review_id, timeout=settings.query_timeout_seconds)

    if not settings.openai_api_key:
        msg = "review summaries are not configured (OPENAI_API_KEY is unset)"
        raise SummarizerError(msg)

    summary = await complete_prompt(
        build_review_prompt(review),
        api_key=settings.openai_api_key,
        model=settings.openai_model,
        base_url=settings.openai_base_url,
        timeout=settings.openai_timeout,
    )
    logger.info(f"Generated summary for review {review_id} of hotel {hotel_id}")
    return summary
