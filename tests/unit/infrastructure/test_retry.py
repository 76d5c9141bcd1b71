"""
Unit tests for Retry.

Usage:
    pytest tests/unit/infrastructure/test_retry.py
"""

import pytest

from augure.infrastructure.resilience.retry import Retry, RetryConfig, with_retry


class RecordingSleep:
    """Async sleep replacement that records requested delays."""

    def __init__(self):
        self.delays: list[float] = []

    async def __call__(self, delay: float) -> None:
        self.delays.append(delay)


class Flaky:
    """Coroutine callable failing a fixed number of times."""

    def __init__(self, failures: int, error: Exception | None = None):
        self.failures = failures
        self.error = error or ConnectionError("upstream unavailable")
        self.calls = 0

    async def __call__(self, value: str = "ok") -> str:
        self.calls += 1
        if self.calls <= self.failures:
            raise self.error
        return value


class TestRetry:
    """Unit tests for Retry."""

    # ================================================================
    # Schedule
    # ================================================================

    def test_default_schedule(self):
        retry = Retry(RetryConfig())

        assert retry.delays() == [1.0, 2.0, 4.0]

    def test_zero_retries_schedule(self):
        assert Retry(RetryConfig(max_retries=0)).delays() == []

    @pytest.mark.parametrize(
        "kwargs", [{"max_retries": -1}, {"initial_delay": -0.5}]
    )
    def test_invalid_config(self, kwargs):
        with pytest.raises(ValueError):
            RetryConfig(**kwargs)

    # ================================================================
    # Execution
    # ================================================================

    async def test_success_first_attempt(self):
        sleep = RecordingSleep()
        func = Flaky(failures=0)

        result = await Retry(RetryConfig(), sleep=sleep).execute_async(func, "v")

        assert result == "v"
        assert func.calls == 1
        assert sleep.delays == []

    async def test_success_after_failures(self):
        sleep = RecordingSleep()
        func = Flaky(failures=2)

        result = await Retry(RetryConfig(), sleep=sleep).execute_async(func)

        assert result == "ok"
        assert func.calls == 3
        assert sleep.delays == [1.0, 2.0]

    async def test_exhausted_reraises_original_error(self):
        sleep = RecordingSleep()
        error = ConnectionError("boom")
        func = Flaky(failures=10, error=error)

        with pytest.raises(ConnectionError) as exc_info:
            await Retry(RetryConfig(), sleep=sleep).execute_async(func)

        assert exc_info.value is error
        assert func.calls == 4
        assert sleep.delays == [1.0, 2.0, 4.0]

    async def test_non_retryable_error_propagates_immediately(self):
        sleep = RecordingSleep()
        func = Flaky(failures=1, error=KeyError("nope"))
        retry = Retry(RetryConfig(retry_on=(ConnectionError,)), sleep=sleep)

        with pytest.raises(KeyError):
            await retry.execute_async(func)

        assert func.calls == 1
        assert sleep.delays == []

    # ================================================================
    # Decorators
    # ================================================================

    async def test_decorator(self):
        sleep = RecordingSleep()
        retry = Retry(RetryConfig(max_retries=1, initial_delay=0.5), sleep=sleep)
        func = Flaky(failures=1)

        @retry.decorator
        async def call():
            return await func()

        assert await call() == "ok"
        assert sleep.delays == [0.5]

    def test_decorator_rejects_sync_function(self):
        retry = Retry(RetryConfig())

        with pytest.raises(TypeError):

            @retry.decorator
            def not_async():
                return 1

    async def test_with_retry_factory(self):
        func = Flaky(failures=0)

        @with_retry(RetryConfig(max_retries=2, initial_delay=0.0), name="test")
        async def call():
            return await func()

        assert await call() == "ok"
