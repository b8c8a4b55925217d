"""Pre-commit hook entry point: review staged changes with Claude."""

import asyncio
import logging
import sys
from pathlib import Path

from commit_review.config.settings import Settings, load_settings, resolve_settings_path
from commit_review.exceptions import CommitReviewError
from commit_review.prompts.commit_review_prompt import build_review_prompt
from commit_review.services.decision_gate import DecisionGate
from commit_review.services.git_repository import collect_staged_changes
from commit_review.services.review_client import ReviewClient
from commit_review.utils.logging import setup_observability

logger = logging.getLogger(__name__)

SEPARATOR = "-" * 40


async def run_review(
    settings: Settings,
    cwd: Path | None = None,
    client: ReviewClient | None = None,
    gate: DecisionGate | None = None,
) -> int:
    """Run the review pipeline once.

    Args:
        settings: Loaded hook settings
        cwd: Directory inside the repository (defaults to the process cwd)
        client: Review client override (used by tests)
        gate: Decision gate override (used by tests)

    Returns:
        Exit code for the hook: 0 lets the commit proceed

    Raises:
        CommitReviewError: On any git, network or response failure
    """
    changes = collect_staged_changes(cwd)
    if changes.is_empty:
        return 0

    prompt = build_review_prompt(changes.diff)

    print("\nSanity checking diff with Claude:")
    print(f"Model: {settings.model}")
    print(f"Prompt length: {len(prompt)} characters")
    print(f"API Endpoint: {settings.api_endpoint}")
    print(SEPARATOR)

    client = client or ReviewClient(settings)
    feedback = await client.review(prompt)

    gate = gate or DecisionGate(settings)
    decision = gate.decide(feedback)

    logger.info(
        f"Review finished for {len(changes.files)} staged files: "
        f"critical={decision.critical}, reason={decision.reason}, "
        f"exit={decision.exit_code}"
    )
    return decision.exit_code


def main(settings_path: Path | None = None) -> None:
    """Load settings, run the review and exit with the hook's status."""
    try:
        settings = load_settings(settings_path or resolve_settings_path())
    except CommitReviewError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    setup_observability(settings)

    try:
        exit_code = asyncio.run(run_review(settings))
    except CommitReviewError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except KeyboardInterrupt:
        print("\nCommit aborted.", file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        logger.exception("Commit review terminated due to unexpected error")
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    sys.exit(exit_code)


if __name__ == "__main__":
    main()
