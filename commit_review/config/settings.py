"""Hook settings using Pydantic Settings, read from a KEY=VALUE file beside the hook."""

import logging
import os
import sys
from pathlib import Path
from typing import Literal

from dotenv import dotenv_values
from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from commit_review.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

SETTINGS_FILE_NAME = ".env"
SETTINGS_PATH_ENV_VAR = "COMMIT_REVIEW_SETTINGS_FILE"
CREDENTIAL_KEY = "CLAUDE_API_KEY"


class Settings(BaseSettings):
    """Hook settings.

    Values come from the settings file first, then from environment variables
    prefixed with ``COMMIT_REVIEW_`` (e.g. ``COMMIT_REVIEW_NON_INTERACTIVE``).
    ``load_settings`` only accepts the credential from the settings file.
    """

    model_config = SettingsConfigDict(
        env_prefix="COMMIT_REVIEW_",
        extra="ignore",
        case_sensitive=False,
        frozen=True,
    )

    # Anthropic Configuration
    claude_api_key: str | None = Field(
        default=None, description="Anthropic API key sent as x-api-key"
    )
    model: str = Field(
        default="claude-3-opus-20240229", description="Claude model to use"
    )
    api_endpoint: str = Field(
        default="api.anthropic.com", description="Messages API host"
    )
    api_path: str = Field(default="/v1/messages", description="Messages API path")
    anthropic_version: str = Field(
        default="2023-06-01", description="Value of the anthropic-version header"
    )
    max_tokens: int = Field(default=4096, gt=0, description="Maximum output tokens")
    request_timeout: float = Field(
        default=120.0, gt=0, description="Seconds to wait for the review API"
    )

    # Decision gate
    critical_marker: str = Field(
        default="[CRITICAL]",
        min_length=1,
        description="Literal string in the review that flags a critical issue",
    )
    non_interactive: Literal["block", "allow"] = Field(
        default="block",
        description="Gate outcome for critical findings when nobody answers",
    )
    allow_confirmed_commit: bool = Field(
        default=False,
        description="Exit 0 when the operator confirms a commit with critical findings",
    )

    # Observability
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING", description="Logging level"
    )
    logfire_token: str | None = Field(
        default=None, description="Pydantic Logfire token for observability"
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value

    @field_validator("non_interactive", mode="before")
    @classmethod
    def _lower_policy(cls, value: object) -> object:
        return value.lower() if isinstance(value, str) else value

    @property
    def api_url(self) -> str:
        """Full URL of the Messages API endpoint."""
        return f"https://{self.api_endpoint}{self.api_path}"


def resolve_settings_path(program_path: str | Path | None = None) -> Path:
    """Locate the settings file.

    ``COMMIT_REVIEW_SETTINGS_FILE`` wins when set; otherwise the file is the
    ``.env`` in the directory of the running program.

    Args:
        program_path: Path of the running program (defaults to ``sys.argv[0]``)

    Returns:
        Path to the settings file (it may not exist)
    """
    override = os.environ.get(SETTINGS_PATH_ENV_VAR)
    if override:
        return Path(override)

    program = Path(program_path if program_path is not None else sys.argv[0])
    return program.resolve().parent / SETTINGS_FILE_NAME


def read_settings_file(path: Path) -> dict[str, str]:
    """Parse a KEY=VALUE settings file.

    Keys and values are whitespace-trimmed. Lines without ``=`` or with an
    empty value are skipped.

    Raises:
        ConfigurationError: If the file cannot be read
    """
    if not path.is_file():
        raise ConfigurationError(f"Error reading settings file {path}: file not found")

    try:
        raw_values = dotenv_values(path, interpolate=False, encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigurationError(f"Error reading settings file {path}: {e}") from e

    values: dict[str, str] = {}
    for key, value in raw_values.items():
        key = key.strip() if key else ""
        value = value.strip() if value else ""
        if key and value:
            values[key] = value

    logger.debug(f"Read {len(values)} settings from {path}")
    return values


def load_settings(path: Path) -> Settings:
    """Build the hook settings from the settings file.

    Args:
        path: Settings file location (see ``resolve_settings_path``)

    Returns:
        Frozen Settings with a non-empty credential

    Raises:
        ConfigurationError: If the file is unreadable, a value is invalid,
            or CLAUDE_API_KEY is missing
    """
    values = read_settings_file(path)

    # The credential is only taken from the file, never from the environment
    if not any(key.upper() == CREDENTIAL_KEY for key in values):
        raise ConfigurationError(f"{CREDENTIAL_KEY} not found in {path}")

    try:
        settings = Settings(**{key.lower(): value for key, value in values.items()})
    except ValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(part) for part in first["loc"]).upper()
        raise ConfigurationError(
            f"Invalid value for {field} in {path}: {first['msg']}"
        ) from e

    return settings
