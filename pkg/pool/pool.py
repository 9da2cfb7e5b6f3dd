import asyncio
from typing import Awaitable, Callable, Optional, Sequence, TypeVar

from loguru import logger

from .type import PoolConfig, PoolFailure, PoolResult, PoolSuccess

T = TypeVar("T")
R = TypeVar("R")


class BoundedConcurrencyPool:
    """Fixed number of asyncio workers sharing one sequential index.

    Each worker repeatedly claims the next index and runs ``worker`` on that
    item until the index passes the end of ``items``. A worker's exception is
    recorded as a failure for that item and the worker moves on, so one bad
    item never stops the others. ``run`` returns once every claimed item has
    settled.
    """

    def __init__(self, config: Optional[PoolConfig] = None):
        self.config = config or PoolConfig()

    async def run(
        self,
        items: Sequence[T],
        worker: Callable[[T], Awaitable[R]],
    ) -> PoolResult:
        """Run ``worker`` over ``items`` with bounded concurrency.

        Args:
            items: Items to process, each exactly once
            worker: Async callable invoked per item

        Returns:
            PoolResult with per-item successes and failures
        """
        outcome = PoolResult()
        next_index = 0
        claim_lock = asyncio.Lock()

        async def claim() -> Optional[int]:
            nonlocal next_index
            async with claim_lock:
                if next_index >= len(items):
                    return None
                index = next_index
                next_index += 1
                outcome.claimed += 1
                return index

        async def run_worker() -> None:
            while True:
                index = await claim()
                if index is None:
                    return
                item = items[index]
                try:
                    result = await worker(item)
                except Exception as exc:
                    logger.debug(f"Pool worker failed on item {index}: {exc!r}")
                    outcome.failures.append(PoolFailure(item=item, error=exc))
                else:
                    outcome.results.append(PoolSuccess(item=item, result=result))

        num_workers = min(self.config.concurrency, len(items))
        await asyncio.gather(*(run_worker() for _ in range(num_workers)))
        return outcome


__all__ = ["BoundedConcurrencyPool"]
