"""Decision gate: turn the review feedback into a commit go/no-go."""

import logging
from typing import TextIO

from commit_review.config.settings import Settings
from commit_review.models.outputs import ReviewDecision
from commit_review.utils.confirmation import (
    ask_for_confirmation,
    is_terminal,
    operator_input,
)

logger = logging.getLogger(__name__)


def has_critical_marker(feedback: str, marker: str) -> bool:
    """Check whether the feedback flags a critical issue."""
    return marker in feedback


class DecisionGate:
    """Print the review and decide whether the commit may proceed."""

    def __init__(self, settings: Settings, input_stream: TextIO | None = None) -> None:
        """Initialize the gate.

        Args:
            settings: Hook settings (marker and confirmation policy)
            input_stream: Stream to read the operator's answer from. When
                omitted the terminal is detected at prompt time.
        """
        self.settings = settings
        self.input_stream = input_stream

    def decide(self, feedback: str) -> ReviewDecision:
        """Print the feedback and return the gate's decision.

        A critical finding asks the operator. Confirming still blocks the
        commit unless ``allow_confirmed_commit`` is set.
        """
        print("\nClaude's Review:")
        print(feedback)

        if not has_critical_marker(feedback, self.settings.critical_marker):
            print("\nCommit approved. Committing...")
            return ReviewDecision(
                feedback=feedback, critical=False, proceed=True, reason="approved"
            )

        print("\nCritical issues found. Please address them before committing.")
        confirmed = self._confirm()

        if confirmed is None:
            return self._decide_unattended(feedback)

        if not confirmed:
            print("\nCommit aborted.")
            return ReviewDecision(
                feedback=feedback, critical=True, proceed=False, reason="declined"
            )

        if self.settings.allow_confirmed_commit:
            print("\nProceeding with commit despite critical issues.")
            return ReviewDecision(
                feedback=feedback, critical=True, proceed=True, reason="confirmed"
            )

        print(
            "\nCommit blocked. Use `git commit --no-verify` to commit "
            "with critical issues."
        )
        return ReviewDecision(
            feedback=feedback, critical=True, proceed=False, reason="confirmed"
        )

    def _confirm(self) -> bool | None:
        """Ask the operator; None means nobody answered."""
        if self.input_stream is not None:
            return self._ask(self.input_stream)

        with operator_input() as stream:
            if stream is None:
                return None
            return self._ask(stream)

    @staticmethod
    def _ask(stream: TextIO) -> bool | None:
        answer = ask_for_confirmation(stream)
        if answer is None and is_terminal(stream):
            # end of input typed at a terminal
            return False
        return answer

    def _decide_unattended(self, feedback: str) -> ReviewDecision:
        policy = self.settings.non_interactive
        logger.warning(f"Critical issues found without an answer, policy={policy}")

        if policy == "allow":
            print("\nNo answer to confirm; allowing commit (NON_INTERACTIVE=allow).")
            return ReviewDecision(
                feedback=feedback, critical=True, proceed=True, reason="unattended"
            )

        print("\nNo answer to confirm; commit aborted.")
        return ReviewDecision(
            feedback=feedback, critical=True, proceed=False, reason="unattended"
        )
