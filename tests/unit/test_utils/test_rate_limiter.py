"""Tests for retry and pacing helpers."""

from unittest.mock import AsyncMock, patch

import pytest

from diff_reviewer.utils.rate_limiter import (
    is_retriable_error,
    pause_between_calls,
    with_exponential_backoff,
)


class TestIsRetriableError:
    @pytest.mark.parametrize(
        "error",
        [
            RuntimeError("Error code: 429 - Rate limit reached"),
            TimeoutError("Request timeout"),
            ConnectionError("reset by peer"),
            RuntimeError("502 Bad Gateway"),
            RuntimeError("503 Service Unavailable"),
        ],
    )
    def test_transient_errors(self, error):
        assert is_retriable_error(error) is True

    def test_other_errors(self):
        assert is_retriable_error(ValueError("invalid api key")) is False


class TestWithExponentialBackoff:
    @pytest.mark.asyncio
    async def test_returns_first_success(self):
        func = AsyncMock(return_value="ok")

        result = await with_exponential_backoff(func, "prompt", model_settings=None)

        assert result == "ok"
        func.assert_awaited_once_with("prompt", model_settings=None)

    @pytest.mark.asyncio
    async def test_retries_transient_errors(self):
        func = AsyncMock(side_effect=[RuntimeError("429 rate limit"), "ok"])

        with patch(
            "diff_reviewer.utils.rate_limiter.asyncio.sleep", new_callable=AsyncMock
        ) as mock_sleep:
            result = await with_exponential_backoff(
                func, max_retries=3, initial_delay=2.0
            )

        assert result == "ok"
        assert func.await_count == 2
        mock_sleep.assert_awaited_once_with(2.0)

    @pytest.mark.asyncio
    async def test_non_retriable_error_raises_immediately(self):
        func = AsyncMock(side_effect=ValueError("bad request"))

        with pytest.raises(ValueError):
            await with_exponential_backoff(func, max_retries=3)

        assert func.await_count == 1

    @pytest.mark.asyncio
    async def test_raises_last_error_when_attempts_run_out(self):
        func = AsyncMock(side_effect=RuntimeError("503 unavailable"))

        with patch(
            "diff_reviewer.utils.rate_limiter.asyncio.sleep", new_callable=AsyncMock
        ) as mock_sleep:
            with pytest.raises(RuntimeError, match="503"):
                await with_exponential_backoff(
                    func, max_retries=3, initial_delay=1.0, max_delay=1.5
                )

        assert func.await_count == 3
        assert [c.args[0] for c in mock_sleep.await_args_list] == [1.0, 1.5]


class TestPauseBetweenCalls:
    @pytest.mark.asyncio
    async def test_sleeps_between_calls(self):
        with patch(
            "diff_reviewer.utils.rate_limiter.asyncio.sleep", new_callable=AsyncMock
        ) as mock_sleep:
            await pause_between_calls(0, 2, 1.5)

        mock_sleep.assert_awaited_once_with(1.5)

    @pytest.mark.asyncio
    async def test_no_sleep_after_last_call(self):
        with patch(
            "diff_reviewer.utils.rate_limiter.asyncio.sleep", new_callable=AsyncMock
        ) as mock_sleep:
            await pause_between_calls(1, 2, 1.5)
            await pause_between_calls(0, 2, 0)

        mock_sleep.assert_not_awaited()
