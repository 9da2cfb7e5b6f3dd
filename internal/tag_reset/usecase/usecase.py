from pkg.logger.logger import Logger
from pkg.minio.interface import IObjectStorage
from internal.key_listing.type import WorkItem
from internal.tag_reset.interface import ITagResetUseCase


class TagResetUseCase(ITagResetUseCase):
    """Strips all tags from a key so the backup workflow treats it as new."""

    def __init__(self, storage: IObjectStorage, logger: Logger):
        self.storage = storage
        self.logger = logger

    async def handle(self, item: WorkItem) -> bool:
        await self.storage.delete_tags(item.key)
        self.logger.info(f"[{item.key}] Successfully deleted tags")
        return True


__all__ = ["TagResetUseCase"]
