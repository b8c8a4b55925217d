"""Models for the review API response and the gate's decision."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class ContentBlock(BaseModel):
    """A single content block of a Messages API response.

    Only text blocks carry ``text``; other block types are accepted and ignored.
    """

    model_config = ConfigDict(extra="allow")

    type: str | None = None
    text: str | None = None


class MessagesResponse(BaseModel):
    """The part of a Messages API response the hook relies on."""

    model_config = ConfigDict(extra="allow")

    content: list[ContentBlock] = Field(min_length=1)
    model: str | None = None
    stop_reason: str | None = None

    @property
    def feedback(self) -> str | None:
        """Text of the first content block, if any."""
        return self.content[0].text


class ReviewDecision(BaseModel):
    """Outcome of the decision gate for one review."""

    feedback: str
    critical: bool
    proceed: bool
    reason: Literal["approved", "declined", "confirmed", "unattended"]

    @property
    def exit_code(self) -> int:
        """Process exit status: 0 lets the commit proceed, 1 blocks it."""
        return 0 if self.proceed else 1
