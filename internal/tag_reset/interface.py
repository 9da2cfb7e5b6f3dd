from typing import Protocol, runtime_checkable

from internal.key_listing.type import WorkItem


@runtime_checkable
class ITagResetUseCase(Protocol):
    async def handle(self, item: WorkItem) -> bool:
        """Delete every tag of ``item.key``."""
        ...


__all__ = ["ITagResetUseCase"]
