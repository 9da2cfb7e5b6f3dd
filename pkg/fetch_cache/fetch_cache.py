import asyncio
from collections import OrderedDict
from typing import Any, Awaitable, Callable, Hashable, Optional, TypeVar

from .interface import IFetchCache
from .type import FetchCacheConfig, FetchCacheStats

T = TypeVar("T")


class SharedFetchCache(IFetchCache):
    """Bounded cache of in-flight or completed fetches, keyed by entity id.

    The cache stores the fetch *task*, not its value. A second caller asking
    for the same id while the first fetch is still running awaits the same
    task instead of starting another request. Completed tasks stay cached
    whether they succeeded or raised, so every caller sharing a failed fetch
    sees the same error.

    When more than ``capacity`` ids are cached the oldest inserted settled
    entries are dropped; asking for one again starts a fresh fetch. A fetch
    still in flight is never dropped, so one id never has two fetches
    running at once.
    """

    def __init__(self, config: Optional[FetchCacheConfig] = None):
        self.config = config or FetchCacheConfig()
        self.stats = FetchCacheStats()
        self._entries: "OrderedDict[Hashable, asyncio.Future]" = OrderedDict()
        self._lock = asyncio.Lock()

    async def get_or_fetch(
        self, entity_id: Hashable, fetch_fn: Callable[[], Awaitable[T]]
    ) -> T:
        """Return the shared result of ``fetch_fn`` for ``entity_id``.

        Args:
            entity_id: Upstream entity id
            fetch_fn: Zero-argument callable starting the fetch; only called on a miss

        Returns:
            The fetch result

        Raises:
            Whatever the shared fetch raised
        """
        async with self._lock:
            task = self._entries.get(entity_id)
            if task is None:
                self.stats.misses += 1
                task = asyncio.ensure_future(fetch_fn())
                self._entries[entity_id] = task
                self._evict_overflow()
            else:
                self.stats.hits += 1

        # shield: a caller timing out must not cancel the fetch other callers share
        return await asyncio.shield(task)

    def _evict_overflow(self) -> None:
        overflow = len(self._entries) - self.config.capacity
        if overflow <= 0:
            return

        # Pending fetches stay until they settle, even past capacity
        settled = [eid for eid, task in self._entries.items() if task.done()]
        for entity_id in settled[:overflow]:
            evicted = self._entries.pop(entity_id)
            self.stats.evictions += 1
            if not evicted.cancelled():
                # Mark a cached failure as retrieved so asyncio does not warn
                evicted.exception()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, entity_id: Any) -> bool:
        return entity_id in self._entries

    def clear(self) -> None:
        self._entries.clear()


__all__ = ["SharedFetchCache"]
