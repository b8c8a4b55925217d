"""Unit tests for the git repository queries."""

import subprocess
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from commit_review.exceptions import RepositoryQueryError
from commit_review.services.git_repository import (
    StagedChanges,
    collect_staged_changes,
    get_staged_diff,
    get_staged_files,
    run_git,
)


def _completed(stdout: str) -> MagicMock:
    result = MagicMock(spec=subprocess.CompletedProcess)
    result.stdout = stdout
    return result


@patch("commit_review.services.git_repository.subprocess.run")
def test_run_git_returns_stdout(mock_run) -> None:
    mock_run.return_value = _completed("hello\n")

    assert run_git(["status"], cwd=Path("/repo")) == "hello\n"

    args, kwargs = mock_run.call_args
    assert args[0] == ["git", "status"]
    assert kwargs["cwd"] == Path("/repo")
    assert kwargs["check"] is True


@patch("commit_review.services.git_repository.subprocess.run")
def test_run_git_non_zero_exit(mock_run) -> None:
    mock_run.side_effect = subprocess.CalledProcessError(
        128, ["git", "rev-parse"], stderr="fatal: not a git repository\n"
    )

    with pytest.raises(RepositoryQueryError, match="not a git repository") as exc_info:
        run_git(["rev-parse", "--show-toplevel"])

    assert exc_info.value.command == ["git", "rev-parse", "--show-toplevel"]


@patch("commit_review.services.git_repository.subprocess.run")
def test_run_git_missing_executable(mock_run) -> None:
    mock_run.side_effect = FileNotFoundError("git")

    with pytest.raises(RepositoryQueryError, match="git executable not found"):
        run_git(["diff"])


@patch("commit_review.services.git_repository.subprocess.run")
def test_staged_queries_run_from_repository_root(mock_run) -> None:
    mock_run.side_effect = [_completed("a.py\nb.py\n"), _completed("diff text\n")]
    root = Path("/repo")

    assert get_staged_files(root) == "a.py\nb.py"
    assert get_staged_diff(root) == "diff text\n"

    first, second = mock_run.call_args_list
    assert first.args[0] == ["git", "diff", "--cached", "--name-only"]
    assert second.args[0] == ["git", "diff", "--cached"]
    assert first.kwargs["cwd"] == root
    assert second.kwargs["cwd"] == root


@patch("commit_review.services.git_repository.subprocess.run")
def test_collect_staged_changes(mock_run) -> None:
    mock_run.side_effect = [
        _completed("/repo\n"),
        _completed("a.py\n"),
        _completed("diff --git a/a.py b/a.py\n"),
    ]

    changes = collect_staged_changes(Path("/repo/sub/dir"))

    assert changes.root == Path("/repo")
    assert changes.files == ["a.py"]
    assert changes.diff == "diff --git a/a.py b/a.py\n"
    assert mock_run.call_args_list[0].kwargs["cwd"] == Path("/repo/sub/dir")


@patch("commit_review.services.git_repository.subprocess.run")
def test_collect_staged_changes_nothing_staged(mock_run) -> None:
    mock_run.side_effect = [_completed("/repo\n"), _completed("\n")]

    changes = collect_staged_changes()

    assert changes.is_empty
    assert changes.diff == ""
    # The diff is never requested when nothing is staged
    assert mock_run.call_count == 2


def test_staged_changes_files_skips_blank_lines() -> None:
    changes = StagedChanges(root=Path("/repo"), file_list="a.py\n\nb.py", diff="")

    assert changes.files == ["a.py", "b.py"]
    assert not changes.is_empty
