"""Pytest configuration and fixtures."""

import os
from pathlib import Path

import pytest

from commit_review.config.settings import Settings


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch) -> None:
    """Keep COMMIT_REVIEW_* variables from the developer's shell out of tests."""
    for name in list(os.environ):
        if name.upper().startswith("COMMIT_REVIEW_"):
            monkeypatch.delenv(name, raising=False)


@pytest.fixture
def settings() -> Settings:
    """Return settings with a test credential."""
    return Settings(claude_api_key="test-key")  # pragma: allowlist secret


@pytest.fixture
def write_settings_file(tmp_path: Path):
    """Return a helper that writes a settings file and returns its path."""

    def _write(content: str) -> Path:
        path = tmp_path / ".env"
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def sample_diff() -> str:
    """Return a small staged diff."""
    return (
        "diff --git a/app.py b/app.py\n"
        "index 83db48f..bf269f4 100644\n"
        "--- a/app.py\n"
        "+++ b/app.py\n"
        "@@ -1,2 +1,3 @@\n"
        " import os\n"
        "+os.system(request.args['cmd'])\n"
        " print('ok')\n"
    )
