"""Exceptions raised by the commit review pipeline.

Every error here is fatal: ``main()`` prints the message and exits non-zero
so git treats the hook as failed. To bypass a broken hook: git commit --no-verify
"""


class CommitReviewError(Exception):
    """Base class for all commit review failures."""


class ConfigurationError(CommitReviewError):
    """Raised when the settings file is unreadable or the credential is missing."""


class RepositoryQueryError(CommitReviewError):
    """Raised when a git query cannot be run or exits non-zero."""

    def __init__(self, command: list[str], detail: str):
        self.command = command
        self.detail = detail
        super().__init__(f"`{' '.join(command)}` failed: {detail}")


class ReviewApiError(CommitReviewError):
    """Base class for failures talking to the review API."""


class TransportError(ReviewApiError):
    """Raised when the review API cannot be reached or rejects the request."""


class ResponseFormatError(ReviewApiError):
    """Raised when the API response is not JSON or lacks a content list."""


class EmptyFeedbackError(ReviewApiError):
    """Raised when the response parsed but carried no review text."""
