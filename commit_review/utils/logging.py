"""Logging and observability setup using Pydantic Logfire."""

import logging
import sys

from commit_review.config.settings import Settings


def setup_logging(settings: Settings) -> None:
    """Configure hook logging.

    Logs go to stderr so they never mix with the review printed on stdout.
    Reduces noise from verbose third-party libraries.
    """
    log_level = getattr(logging, settings.log_level)

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
        force=True,  # Reconfigure if already setup
    )

    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


def setup_observability(settings: Settings) -> None:
    """Setup logging and, when a token is configured, Logfire tracing of httpx."""
    setup_logging(settings)

    logger = logging.getLogger(__name__)

    if not settings.logfire_token:
        logger.debug("Logfire token not configured, skipping observability setup")
        return

    try:
        import logfire

        logfire.configure(token=settings.logfire_token, console=False)
        logfire.instrument_httpx()

        logger.info("Logfire observability enabled")

    except ImportError:
        logger.warning(
            "Logfire package not installed. Install with: pip install 'ai-commit-review[observability]'"
        )
    except Exception as e:
        logger.error(f"Failed to setup Logfire observability: {e}")
