"""Unit tests for RetryExecutor.

Tests cover:
- Success on first attempt and after failures
- Exhaustion after max_retries + 1 attempts
- Per-attempt timeouts
- Retry hook calls
"""

import asyncio

import pytest

from pkg.retry.retry import RetryExecutor
from pkg.retry.type import AttemptTimeoutError, RetryConfig, RetryExhaustedError


class Flaky:
    def __init__(self, failures: int, result="ok"):
        self.failures = failures
        self.result = result
        self.calls = 0

    async def __call__(self):
        self.calls += 1
        if self.calls <= self.failures:
            raise RuntimeError(f"failure {self.calls}")
        return self.result


class TestRetryConfig:
    def test_defaults(self):
        config = RetryConfig()
        assert config.max_retries == 5
        assert config.timeout_seconds is None

    def test_negative_retries_rejected(self):
        with pytest.raises(ValueError):
            RetryConfig(max_retries=-1)

    def test_non_positive_timeout_rejected(self):
        with pytest.raises(ValueError):
            RetryConfig(timeout_seconds=0)


class TestRun:
    def test_first_attempt_success(self):
        op = Flaky(failures=0)
        result = asyncio.run(RetryExecutor().run(op))
        assert result == "ok"
        assert op.calls == 1

    def test_succeeds_after_failures(self):
        op = Flaky(failures=3)
        result = asyncio.run(RetryExecutor(RetryConfig(max_retries=5)).run(op))
        assert result == "ok"
        assert op.calls == 4

    def test_exhaustion_makes_retries_plus_one_attempts(self):
        op = Flaky(failures=100)
        executor = RetryExecutor(RetryConfig(max_retries=2))

        with pytest.raises(RetryExhaustedError) as exc_info:
            asyncio.run(executor.run(op))

        assert op.calls == 3
        assert exc_info.value.attempts == 3
        assert "gave up after 2 retries" in str(exc_info.value)
        assert isinstance(exc_info.value.last_error, RuntimeError)
        assert exc_info.value.__cause__ is exc_info.value.last_error

    def test_zero_retries_means_single_attempt(self):
        op = Flaky(failures=1)
        with pytest.raises(RetryExhaustedError):
            asyncio.run(RetryExecutor().run(op, max_retries=0))
        assert op.calls == 1

    def test_hook_called_for_each_retried_failure(self):
        seen = []
        op = Flaky(failures=2)
        executor = RetryExecutor(on_retry=lambda attempt, err: seen.append(attempt))

        asyncio.run(executor.run(op, max_retries=5))

        assert seen == [1, 2]

    def test_hook_not_called_for_final_failure(self):
        seen = []
        op = Flaky(failures=10)
        with pytest.raises(RetryExhaustedError):
            asyncio.run(
                RetryExecutor().run(
                    op, max_retries=1, on_retry=lambda attempt, err: seen.append(attempt)
                )
            )
        assert seen == [1]


class TestTimeout:
    def test_slow_attempt_times_out_and_is_retried(self):
        calls = []

        async def op():
            calls.append(1)
            if len(calls) == 1:
                await asyncio.sleep(1)
            return "done"

        result = asyncio.run(RetryExecutor().run(op, max_retries=1, timeout=0.05))

        assert result == "done"
        assert len(calls) == 2

    def test_every_attempt_timing_out_exhausts(self):
        async def op():
            await asyncio.sleep(1)

        with pytest.raises(RetryExhaustedError) as exc_info:
            asyncio.run(RetryExecutor().run(op, max_retries=1, timeout=0.01))

        assert isinstance(exc_info.value.last_error, AttemptTimeoutError)
