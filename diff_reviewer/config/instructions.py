"""Loading of custom review and test generation instructions."""

import logging
from pathlib import Path

from diff_reviewer.prompts.code_reviewer_prompt import DEFAULT_REVIEW_INSTRUCTIONS

logger = logging.getLogger(__name__)


def _read_instructions(path: str | Path) -> str | None:
    try:
        content = Path(path).read_text(encoding="utf-8")
    except OSError as e:
        logger.warning(f"Could not load instructions from {path}: {e}")
        return None

    if not content.strip():
        logger.warning(f"Instructions file {path} is empty")
        return None

    logger.debug(f"Successfully loaded instructions from {path}")
    return content


def load_review_instructions(path: str | Path = "review-instructions.md") -> str:
    """Load review instructions, falling back to the built-in defaults."""
    return _read_instructions(path) or DEFAULT_REVIEW_INSTRUCTIONS


def load_test_instructions(path: str | Path = "test-instructions.md") -> str | None:
    """Load custom test generation instructions.

    Returns None when no usable file exists, so each file gets the
    framework-specific defaults instead.
    """
    return _read_instructions(path)
