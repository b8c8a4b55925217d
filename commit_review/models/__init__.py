"""Data models for AI Commit Review."""

from .outputs import ContentBlock, MessagesResponse, ReviewDecision

__all__ = [
    "ContentBlock",
    "MessagesResponse",
    "ReviewDecision",
]
