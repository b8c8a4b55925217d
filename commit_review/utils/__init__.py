"""Utility functions and helpers."""

from .confirmation import ask_for_confirmation, operator_input
from .logging import setup_observability

__all__ = [
    "ask_for_confirmation",
    "operator_input",
    "setup_observability",
]
