"""Interface for the shared fetch cache."""

from typing import Awaitable, Callable, Hashable, Protocol, TypeVar, runtime_checkable

T = TypeVar("T")


@runtime_checkable
class IFetchCache(Protocol):
    """Protocol for deduplicating concurrent fetches by entity id.

    Implementations are safe for concurrent use from tasks on one event loop.
    """

    async def get_or_fetch(
        self, entity_id: Hashable, fetch_fn: Callable[[], Awaitable[T]]
    ) -> T:
        """Return the shared result for entity_id, fetching at most once."""
        ...


__all__ = ["IFetchCache"]
