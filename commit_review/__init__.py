"""AI Commit Review - pre-commit hook that reviews staged changes with Claude."""

__version__ = "0.1.0"
