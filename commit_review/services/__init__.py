"""Services for the commit review pipeline."""

from .decision_gate import DecisionGate, has_critical_marker
from .git_repository import StagedChanges, collect_staged_changes
from .review_client import ReviewClient

__all__ = [
    "DecisionGate",
    "ReviewClient",
    "StagedChanges",
    "collect_staged_changes",
    "has_critical_marker",
]
