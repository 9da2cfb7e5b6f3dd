import asyncio
from typing import Awaitable, Callable, Optional, TypeVar

from loguru import logger

from .interface import IRetryExecutor
from .type import RetryConfig, RetryExhaustedError, AttemptTimeoutError

T = TypeVar("T")

RetryHook = Callable[[int, BaseException], None]


def _log_retry(attempt: int, error: BaseException) -> None:
    logger.opt(depth=2).warning(f"Attempt {attempt} failed, retrying: {error!r}")


class RetryExecutor(IRetryExecutor):
    """Runs an async operation with bounded, immediate retries.

    Retries happen back to back with no delay. When a per-attempt timeout is
    configured, an attempt that exceeds it counts as failed and its result is
    discarded; the work it started (an S3 write, say) may still complete, so
    operations passed here must be safe to repeat.

    Example:
        >>> executor = RetryExecutor(RetryConfig(max_retries=10, timeout_seconds=5))
        >>> keys = await executor.run(lambda: storage.list_keys("outfits/", cursor, 1000))
    """

    def __init__(self, config: Optional[RetryConfig] = None, on_retry: Optional[RetryHook] = None):
        """Initialize executor.

        Args:
            config: Default retry count and timeout
            on_retry: Called with (attempt number, error) after each failed
                attempt that will be retried. Defaults to a warning log.
        """
        self.config = config or RetryConfig()
        self.on_retry = on_retry or _log_retry

    async def run(
        self,
        operation: Callable[[], Awaitable[T]],
        max_retries: Optional[int] = None,
        timeout: Optional[float] = None,
        on_retry: Optional[RetryHook] = None,
    ) -> T:
        """Run ``operation`` until it succeeds or retries are exhausted.

        Args:
            operation: Zero-argument callable returning a fresh awaitable per attempt
            max_retries: Overrides config.max_retries
            timeout: Overrides config.timeout_seconds

        Returns:
            Result of the first successful attempt

        Raises:
            RetryExhaustedError: If all max_retries + 1 attempts failed
        """
        retries = self.config.max_retries if max_retries is None else max_retries
        attempt_timeout = self.config.timeout_seconds if timeout is None else timeout
        notify = on_retry or self.on_retry

        last_error: Optional[BaseException] = None
        for attempt in range(1, retries + 2):
            try:
                return await self._attempt(operation, attempt, attempt_timeout)
            except Exception as exc:
                last_error = exc
                if attempt <= retries:
                    notify(attempt, exc)

        raise RetryExhaustedError(retries, last_error) from last_error

    @staticmethod
    async def _attempt(
        operation: Callable[[], Awaitable[T]],
        attempt: int,
        timeout: Optional[float],
    ) -> T:
        if timeout is None:
            return await operation()
        try:
            return await asyncio.wait_for(operation(), timeout=timeout)
        except asyncio.TimeoutError as exc:
            raise AttemptTimeoutError(attempt, timeout) from exc


__all__ = ["RetryExecutor", "RetryHook"]
