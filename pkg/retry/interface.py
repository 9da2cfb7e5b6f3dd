"""Interface for retrying async operations."""

from typing import Awaitable, Callable, Optional, Protocol, TypeVar, runtime_checkable

T = TypeVar("T")


@runtime_checkable
class IRetryExecutor(Protocol):
    """Protocol for bounded retry of async operations."""

    async def run(
        self,
        operation: Callable[[], Awaitable[T]],
        max_retries: Optional[int] = None,
        timeout: Optional[float] = None,
        on_retry: Optional[Callable[[int, BaseException], None]] = None,
    ) -> T:
        """Run operation with retries; raise RetryExhaustedError when they run out."""
        ...


__all__ = ["IRetryExecutor"]
