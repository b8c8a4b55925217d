"""Interactive yes/no confirmation for the decision gate."""

import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from typing import TextIO

logger = logging.getLogger(__name__)

CONFIRMATION_PROMPT = "Do you want to proceed with the commit? (y/n) "

# git runs hooks with stdin detached, the controlling terminal is still reachable here
TTY_PATH = "/dev/tty"


def is_terminal(stream: TextIO | None) -> bool:
    """Check whether a stream is an open terminal."""
    if stream is None:
        return False
    try:
        return stream.isatty()
    except ValueError:
        # closed stream
        return False


def _is_readable(stream: TextIO | None) -> bool:
    return stream is not None and not stream.closed


@contextmanager
def operator_input(stdin: TextIO | None = None) -> Iterator[TextIO | None]:
    """Yield a stream the operator can answer on, or None when there is none.

    Prefers stdin when it is a terminal, then the controlling terminal, then
    whatever stdin is (a pipe or /dev/null).

    Args:
        stdin: Stream to prefer (defaults to ``sys.stdin``)
    """
    stdin = stdin if stdin is not None else sys.stdin
    if is_terminal(stdin):
        yield stdin
        return

    try:
        tty = open(TTY_PATH, encoding="utf-8")
    except OSError as e:
        logger.info(f"No terminal available for confirmation: {e}")
        yield stdin if _is_readable(stdin) else None
        return

    with tty:
        yield tty


def ask_for_confirmation(
    input_stream: TextIO, output_stream: TextIO | None = None
) -> bool | None:
    """Ask whether to proceed with the commit.

    Only ``y`` (any case) counts as yes.

    Args:
        input_stream: Stream to read one answer line from
        output_stream: Stream the question is written to (defaults to stdout)

    Returns:
        True if the operator answered yes, False for any other answer,
        None if the input ended without an answer
    """
    output_stream = output_stream if output_stream is not None else sys.stdout
    output_stream.write(CONFIRMATION_PROMPT)
    output_stream.flush()

    answer = input_stream.readline()
    if not answer:
        output_stream.write("\n")
        logger.debug("Confirmation input closed without an answer")
        return None

    return answer.rstrip("\r\n").lower() == "y"
