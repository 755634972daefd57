"""Review summarizer library: chat-completion client.

Public API:
    - complete_prompt: send one prompt and return the reply text
    - SummarizerError: transport, status, or empty-reply error
"""

from hotel_api.lib.summarizer.client import SummarizerError, complete_prompt

__all__ = [
    "SummarizerError",
    "complete_prompt",
]
