"""Read-only git queries for the staged changes of the enclosing repository."""

import logging
import subprocess
from dataclasses import dataclass
from pathlib import Path

from commit_review.exceptions import RepositoryQueryError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StagedChanges:
    """Staged file list and unified diff captured once per hook run."""

    root: Path
    file_list: str
    diff: str

    @property
    def files(self) -> list[str]:
        """Staged file paths, one per line of ``git diff --cached --name-only``."""
        return [line for line in self.file_list.splitlines() if line]

    @property
    def is_empty(self) -> bool:
        return not self.file_list


def run_git(args: list[str], cwd: Path | None = None) -> str:
    """Run a git command and return its stdout.

    Args:
        args: Arguments after ``git``
        cwd: Directory to run in (the repository root for staged queries)

    Returns:
        The command's standard output, undecodable bytes replaced

    Raises:
        RepositoryQueryError: If git cannot be started or exits non-zero
    """
    command = ["git", *args]
    logger.debug(f"Running {' '.join(command)} in {cwd or Path.cwd()}")

    try:
        result = subprocess.run(
            command,
            cwd=cwd,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
            check=True,
        )
    except FileNotFoundError as e:
        raise RepositoryQueryError(command, "git executable not found") from e
    except subprocess.CalledProcessError as e:
        detail = (e.stderr or "").strip() or f"exit status {e.returncode}"
        raise RepositoryQueryError(command, detail) from e

    return result.stdout


def get_repository_root(cwd: Path | None = None) -> Path:
    """Return the top-level directory of the repository containing ``cwd``."""
    return Path(run_git(["rev-parse", "--show-toplevel"], cwd=cwd).strip())


def get_staged_files(root: Path) -> str:
    """Return staged file names as one block of text; empty means nothing staged."""
    return run_git(["diff", "--cached", "--name-only"], cwd=root).strip()


def get_staged_diff(root: Path) -> str:
    """Return the unified diff of staged changes, untrimmed."""
    return run_git(["diff", "--cached"], cwd=root)


def collect_staged_changes(cwd: Path | None = None) -> StagedChanges:
    """Resolve the repository root and capture the staged changes.

    The diff is only requested when something is staged.
    """
    root = get_repository_root(cwd)
    file_list = get_staged_files(root)
    if not file_list:
        logger.info(f"No staged changes in {root}")
        return StagedChanges(root=root, file_list="", diff="")

    diff = get_staged_diff(root)
    logger.info(
        f"Collected staged diff for {len(file_list.splitlines())} files "
        f"({len(diff)} characters)"
    )
    return StagedChanges(root=root, file_list=file_list, diff=diff)
