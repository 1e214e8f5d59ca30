"""Logging and observability setup using Pydantic Logfire."""

import logging
import sys

from diff_reviewer.config.settings import Settings, settings


def setup_logging(config: Settings | None = None) -> None:
    """Configure logging for the CI run.

    Logs go to stdout so they show up in the workflow log. `enable_debug`
    raises the level to DEBUG.
    """
    config = config or settings
    log_level = getattr(logging, config.effective_log_level)

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stdout,
        force=True,
    )

    # Reduce noise from verbose libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("urllib3").setLevel(logging.WARNING)
    logging.getLogger("git").setLevel(logging.WARNING)


def setup_observability(config: Settings | None = None) -> None:
    """Setup logging and, when a token is configured, Logfire instrumentation."""
    config = config or settings
    setup_logging(config)

    logger = logging.getLogger(__name__)

    if not config.logfire_token:
        logger.debug("Logfire token not configured, skipping observability setup")
        return

    try:
        import logfire

        logfire.configure(token=config.logfire_token)
        logfire.instrument_pydantic_ai()
        logfire.instrument_httpx()
        logger.info("Logfire observability enabled")
    except ImportError:
        logger.warning(
            "Logfire package not installed. Install with: pip install 'ai-diff-reviewer[observability]'"
        )
    except Exception as e:
        logger.error(f"Failed to setup Logfire observability: {e}")
