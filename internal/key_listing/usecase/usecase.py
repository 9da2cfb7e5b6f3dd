from typing import Optional

from pkg.logger.logger import Logger
from pkg.minio.interface import IObjectStorage
from pkg.minio.minio import MinioAdapterError
from internal.key_listing.errors import ErrListKeys
from internal.key_listing.interface import IKeyLister
from internal.key_listing.type import Config, Page


class KeyLister(IKeyLister):
    """Walks the bucket one page at a time.

    The lister keeps only the page counter; the cursor is owned by the
    caller, which lets a run resume from any key.
    """

    def __init__(
        self,
        config: Config,
        storage: IObjectStorage,
        logger: Optional[Logger] = None,
    ):
        self.config = config
        self.storage = storage
        self.logger = logger
        self.pages_listed = 0

    async def next_page(self, cursor: Optional[str]) -> Page:
        """List up to ``page_size`` keys strictly greater than ``cursor``.

        Raises:
            ErrListKeys: When the storage call fails
        """
        try:
            keys = await self.storage.list_keys(
                self.config.key_prefix, cursor, self.config.page_size
            )
        except MinioAdapterError as exc:
            raise ErrListKeys(cursor, str(exc)) from exc

        if not keys:
            return Page(keys=[], cursor=cursor, index=0)

        self.pages_listed += 1
        if self.logger:
            self.logger.info(
                f"Page {self.pages_listed}: {keys[0]} to {keys[-1]} ({len(keys)} keys)"
            )
        return Page(keys=list(keys), cursor=keys[-1], index=self.pages_listed)


__all__ = ["KeyLister"]
