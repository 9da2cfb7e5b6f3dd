from typing import Protocol, runtime_checkable

from internal.key_listing.type import WorkItem
from .type import ProcessOutput


@runtime_checkable
class IImageBackupUseCase(Protocol):
    async def process(self, key: str) -> ProcessOutput:
        """Snapshot then replace one image key."""
        ...

    async def handle(self, item: WorkItem) -> bool:
        """Batch entry point; returns whether anything was written."""
        ...


__all__ = ["IImageBackupUseCase"]
