"""Chat-completion client used to summarize reviews.

Talks to any OpenAI-compatible endpoint through ``AsyncOpenAI``.
"""

from loguru import logger
from openai import APIStatusError, APITimeoutError, AsyncOpenAI, OpenAIError


class SummarizerError(Exception):
    """Raised when the completion call fails or returns no content."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


async def complete_prompt(
    prompt: str,
    *,
    api_key: str,
    model: str,
    base_url: str = "https://api.openai.com/v1",
    timeout: float = 30.0,
) -> str:
    """Send ``prompt`` as a single user message and return the reply text.

    Args:
        prompt: The user message.
        api_key: Provider API key.
        model: Model name.
        base_url: Provider API root.
        timeout: Request timeout in seconds.

    Returns:
        The content of the first choice.

    Raises:
        SummarizerError: On timeouts, API errors, or an empty reply.
    """
    client = AsyncOpenAI(api_key=api_key, base_url=base_url, timeout=timeout, max_retries=0)

    try:
        response = await client.chat.completions.create(
            model=model,
            messages=[{"role": "user", "content": prompt}],
        )
    except APITimeoutError as exc:
        msg = "Timeout waiting for chat completion"
        logger.error(msg)
        raise SummarizerError(msg) from exc
    except APIStatusError as exc:
        msg = f"HTTP {exc.status_code} from chat completion API"
        logger.error(msg)
        raise SummarizerError(msg, status_code=exc.status_code) from exc
    except OpenAIError as exc:
        msg = f"Chat completion API error: {exc}"
        logger.error(msg)
        raise SummarizerError(msg) from exc
    finally:
        await client.close()

    if not response.choices:
        msg = "Malformed chat completion response"
        logger.error(msg)
        raise SummarizerError(msg)

    content = response.choices[0].message.content
    if not content:
        msg = "empty summary"
        raise SummarizerError(msg)
    return content
