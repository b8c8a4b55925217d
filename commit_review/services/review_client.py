"""Client for the Anthropic Messages API used to review staged diffs."""

import logging
from typing import Any

import httpx
from pydantic import ValidationError

from commit_review.config.settings import Settings
from commit_review.exceptions import (
    EmptyFeedbackError,
    ResponseFormatError,
    TransportError,
)
from commit_review.models.outputs import MessagesResponse

logger = logging.getLogger(__name__)


class ReviewClient:
    """Send one review prompt to Claude and return the feedback text.

    A single request is made per call; failures are never retried.
    """

    def __init__(
        self,
        settings: Settings,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the review client.

        Args:
            settings: Hook settings with a non-empty ``claude_api_key``
            transport: Optional httpx transport (used by tests)
        """
        self.settings = settings
        self._transport = transport

    def build_headers(self) -> dict[str, str]:
        return {
            "content-type": "application/json",
            "x-api-key": self.settings.claude_api_key or "",
            "anthropic-version": self.settings.anthropic_version,
        }

    def build_payload(self, prompt: str) -> dict[str, Any]:
        return {
            "model": self.settings.model,
            "messages": [{"role": "user", "content": prompt}],
            "max_tokens": self.settings.max_tokens,
        }

    async def review(self, prompt: str) -> str:
        """Request a review of the prompt.

        Args:
            prompt: Complete review prompt including the diff

        Returns:
            Text of the first content block of the response

        Raises:
            TransportError: If the API is unreachable, times out or returns
                an HTTP error status
            ResponseFormatError: If the body is not JSON or has no content list
            EmptyFeedbackError: If the first content block has no text
        """
        url = self.settings.api_url
        timeout = httpx.Timeout(self.settings.request_timeout)

        logger.info(f"Requesting review from {url} with model {self.settings.model}")

        async with httpx.AsyncClient(
            timeout=timeout, transport=self._transport
        ) as client:
            try:
                response = await client.post(
                    url,
                    headers=self.build_headers(),
                    json=self.build_payload(prompt),
                )
            except httpx.TimeoutException as e:
                raise TransportError(
                    f"Review API timed out after {self.settings.request_timeout}s"
                ) from e
            except httpx.TransportError as e:
                raise TransportError(f"Failed to reach review API: {e}") from e

        if response.is_error:
            raise TransportError(
                f"Review API returned HTTP {response.status_code}: "
                f"{_error_message(response)}"
            )

        return parse_feedback(response)


def parse_feedback(response: httpx.Response) -> str:
    """Extract the feedback text from a Messages API response.

    Raises:
        ResponseFormatError: If the body is not JSON or has no content list
        EmptyFeedbackError: If the first content block has no text
    """
    try:
        data = response.json()
    except ValueError as e:
        raise ResponseFormatError("Failed to parse API response") from e

    try:
        message = MessagesResponse.model_validate(data)
    except ValidationError as e:
        raise ResponseFormatError("Invalid API response structure") from e

    feedback = message.feedback
    if not feedback:
        raise EmptyFeedbackError("No feedback received from Claude")

    logger.debug(
        f"Received {len(feedback)} characters of feedback "
        f"(stop_reason={message.stop_reason})"
    )
    return feedback


def _error_message(response: httpx.Response) -> str:
    """Best-effort error message from an API error body."""
    try:
        data = response.json()
    except ValueError:
        return response.reason_phrase or "no response body"

    if isinstance(data, dict):
        error = data.get("error")
        if isinstance(error, dict) and error.get("message"):
            return str(error["message"])

    return response.reason_phrase or "unexpected error body"
