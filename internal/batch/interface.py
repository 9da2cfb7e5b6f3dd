from typing import Awaitable, Callable, List, Optional, Protocol, runtime_checkable

from internal.key_listing.type import KeyGroups, WorkItem
from .type import BatchSummary

KeyHandler = Callable[[WorkItem], Awaitable[bool]]
KeySelector = Callable[[KeyGroups], List[str]]


@runtime_checkable
class IBatchRunner(Protocol):
    async def run(
        self,
        handler: KeyHandler,
        select_keys: Optional[KeySelector] = None,
        start_after: Optional[str] = None,
    ) -> BatchSummary:
        """Process every selected key after ``start_after``, page by page."""
        ...


__all__ = ["IBatchRunner", "KeyHandler", "KeySelector"]
