"""Unit tests for SharedFetchCache."""

import asyncio

import pytest

from pkg.fetch_cache.fetch_cache import SharedFetchCache
from pkg.fetch_cache.type import FetchCacheConfig


class CountingFetch:
    def __init__(self, delay: float = 0.01, error: Exception = None):
        self.delay = delay
        self.error = error
        self.calls = {}

    def for_id(self, entity_id):
        async def fetch():
            self.calls[entity_id] = self.calls.get(entity_id, 0) + 1
            await asyncio.sleep(self.delay)
            if self.error is not None:
                raise self.error
            return f"data-{entity_id}"

        return fetch


class TestConfig:
    def test_capacity_must_be_positive(self):
        with pytest.raises(ValueError):
            FetchCacheConfig(capacity=0)

    def test_for_concurrency_doubles(self):
        assert FetchCacheConfig.for_concurrency(20).capacity == 40


class TestDeduplication:
    def test_concurrent_callers_share_one_fetch(self):
        cache = SharedFetchCache(FetchCacheConfig(capacity=10))
        fetch = CountingFetch()

        async def scenario():
            return await asyncio.gather(
                *(cache.get_or_fetch("1234", fetch.for_id("1234")) for _ in range(8))
            )

        results = asyncio.run(scenario())

        assert results == ["data-1234"] * 8
        assert fetch.calls == {"1234": 1}
        assert cache.stats.misses == 1
        assert cache.stats.hits == 7

    def test_failure_is_shared_and_stays_cached(self):
        cache = SharedFetchCache(FetchCacheConfig(capacity=10))
        fetch = CountingFetch(error=RuntimeError("upstream down"))

        async def scenario():
            first = await asyncio.gather(
                *(cache.get_or_fetch(7, fetch.for_id(7)) for _ in range(3)),
                return_exceptions=True,
            )
            later = await asyncio.gather(
                cache.get_or_fetch(7, fetch.for_id(7)), return_exceptions=True
            )
            return first + later

        results = asyncio.run(scenario())

        assert all(isinstance(r, RuntimeError) for r in results)
        assert fetch.calls == {7: 1}

    def test_caller_cancellation_does_not_cancel_shared_fetch(self):
        cache = SharedFetchCache(FetchCacheConfig(capacity=10))
        fetch = CountingFetch(delay=0.05)

        async def scenario():
            impatient = asyncio.ensure_future(cache.get_or_fetch("1", fetch.for_id("1")))
            await asyncio.sleep(0.01)
            impatient.cancel()
            return await cache.get_or_fetch("1", fetch.for_id("1"))

        assert asyncio.run(scenario()) == "data-1"
        assert fetch.calls == {"1": 1}


class TestEviction:
    def test_oldest_inserted_entry_is_evicted(self):
        cache = SharedFetchCache(FetchCacheConfig(capacity=2))
        fetch = CountingFetch(delay=0)

        async def scenario():
            for entity_id in ("a", "b", "c"):
                await cache.get_or_fetch(entity_id, fetch.for_id(entity_id))
            contents = ("a" in cache, "b" in cache, "c" in cache, len(cache))
            await cache.get_or_fetch("a", fetch.for_id("a"))
            return contents

        contents = asyncio.run(scenario())

        assert contents == (False, True, True, 2)
        assert fetch.calls["a"] == 2
        assert cache.stats.evictions == 2

    def test_in_flight_entry_is_not_evicted(self):
        cache = SharedFetchCache(FetchCacheConfig(capacity=1))
        slow = CountingFetch(delay=0.05)
        fast = CountingFetch(delay=0)

        async def scenario():
            first = asyncio.ensure_future(cache.get_or_fetch("a", slow.for_id("a")))
            await asyncio.sleep(0)
            await cache.get_or_fetch("b", fast.for_id("b"))
            in_flight_kept = "a" in cache
            second = await cache.get_or_fetch("a", slow.for_id("a"))
            return in_flight_kept, await first, second

        in_flight_kept, first, second = asyncio.run(scenario())

        assert in_flight_kept
        assert first == second == "data-a"
        assert slow.calls == {"a": 1}
        assert cache.stats.evictions == 0

    def test_overflow_is_trimmed_once_fetches_settle(self):
        cache = SharedFetchCache(FetchCacheConfig(capacity=1))
        fetch = CountingFetch(delay=0.01)

        async def scenario():
            await asyncio.gather(
                cache.get_or_fetch("a", fetch.for_id("a")),
                cache.get_or_fetch("b", fetch.for_id("b")),
            )
            over_capacity = len(cache)
            await cache.get_or_fetch("c", fetch.for_id("c"))
            return over_capacity

        over_capacity = asyncio.run(scenario())

        assert over_capacity == 2
        assert len(cache) == 1
        assert "c" in cache
        assert cache.stats.evictions == 2

    def test_clear_empties_cache(self):
        cache = SharedFetchCache()
        fetch = CountingFetch(delay=0)
        asyncio.run(cache.get_or_fetch("x", fetch.for_id("x")))
        cache.clear()
        assert len(cache) == 0
