"""Retry and pacing helpers for language model calls."""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

RETRIABLE_MARKERS = ("429", "rate limit", "timeout", "connection", "502", "503")


def is_retriable_error(error: Exception) -> bool:
    """Check if an API error is worth retrying (rate limits, transient failures)."""
    message = f"{type(error).__name__} {error}".lower()
    return any(marker in message for marker in RETRIABLE_MARKERS)


async def with_exponential_backoff(
    func: Callable[..., Awaitable[T]],
    *args: Any,
    max_retries: int = 3,
    initial_delay: float = 1.0,
    max_delay: float = 30.0,
    **kwargs: Any,
) -> T:
    """
    Execute an async function, retrying transient errors with exponential backoff.

    Args:
        func: The async function to execute
        *args: Positional arguments to pass to func
        max_retries: Total number of attempts
        initial_delay: Delay in seconds before the first retry
        max_delay: Upper bound for the delay between retries
        **kwargs: Keyword arguments to pass to func

    Returns:
        The result of the function call

    Raises:
        The first non-retriable exception, or the last one once attempts run out
    """
    attempts = max(max_retries, 1)

    for attempt in range(attempts):
        try:
            return await func(*args, **kwargs)
        except Exception as e:
            if not is_retriable_error(e):
                logger.error(f"Non-retriable error: {e}")
                raise

            if attempt == attempts - 1:
                logger.error(f"All {attempts} attempts exhausted. Last error: {e}")
                raise

            delay = min(initial_delay * (2**attempt), max_delay)
            logger.warning(
                f"Attempt {attempt + 1}/{attempts} failed with {type(e).__name__}: {e}. "
                f"Retrying in {delay:.1f}s..."
            )
            await asyncio.sleep(delay)

    raise RuntimeError("unreachable")  # pragma: no cover


async def pause_between_calls(index: int, total: int, delay_seconds: float) -> None:
    """Sleep after every call except the last one of a batch."""
    if index < total - 1 and delay_seconds > 0:
        logger.debug("Waiting to avoid rate limiting...")
        await asyncio.sleep(delay_seconds)
