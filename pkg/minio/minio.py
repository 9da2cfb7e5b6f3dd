from __future__ import annotations

import asyncio
import io
from itertools import islice
from typing import Dict, List, Optional

from minio import Minio  # type: ignore
from minio.commonconfig import REPLACE, CopySource, Tags  # type: ignore
from minio.error import S3Error  # type: ignore

from loguru import logger
from .interface import IObjectStorage
from .type import MinIOConfig
from .constant import *


class MinioAdapterError(Exception):
    """Base exception for object storage operations.

    Covers network and server errors of a single call; callers retry these.
    """

    pass


class MinioObjectNotFoundError(MinioAdapterError):
    """Raised when the requested object does not exist."""

    pass


def _to_tags(tags: Dict[str, str]) -> Optional[Tags]:
    if not tags:
        return None
    object_tags = Tags.new_object_tags()
    for name, value in tags.items():
        object_tags[name] = value
    return object_tags


def _write_headers(
    storage_class: str, acl: Optional[str], content_type: str
) -> Dict[str, str]:
    headers = {
        HEADER_CONTENT_TYPE: content_type,
        HEADER_STORAGE_CLASS: storage_class,
    }
    if acl:
        headers[HEADER_ACL] = acl
    return headers


class MinioAdapter(IObjectStorage):
    """Async wrapper around the MinIO client, bound to one bucket.

    The MinIO SDK is blocking, so every call runs in a worker thread through
    ``asyncio.to_thread``. This keeps each S3 request a suspension point for
    the event loop and lets many per-key workflows overlap their I/O.

    Attributes:
        config: MinIO configuration
    """

    def __init__(self, config: MinIOConfig, client: Optional[Minio] = None):
        """Initialize adapter.

        Args:
            config: MinIO configuration
            client: Pre-built client, mainly for tests
        """
        self.config = config
        self.bucket = config.bucket
        self._client = client or Minio(
            self.config.endpoint,
            access_key=self.config.access_key,
            secret_key=self.config.secret_key,
            secure=self.config.secure,
            region=self.config.region,
        )

    async def list_keys(
        self, prefix: str, start_after: Optional[str], max_keys: int = DEFAULT_MAX_KEYS
    ) -> List[str]:
        """List keys in lexicographic order.

        Args:
            prefix: Key prefix to restrict the listing to
            start_after: Only keys strictly greater than this are returned
            max_keys: Page size

        Returns:
            Up to max_keys object keys; empty once the listing is exhausted
        """

        def _list() -> List[str]:
            objects = self._client.list_objects(
                self.bucket,
                prefix=prefix,
                recursive=True,
                start_after=start_after or None,
            )
            return [obj.object_name for obj in islice(objects, max_keys)]

        return await self._call(_list, f"list prefix={prefix} start_after={start_after}")

    async def get_object(self, key: str) -> bytes:
        """Download an object's body.

        Raises:
            MinioObjectNotFoundError: If the object does not exist
            MinioAdapterError: On any other storage error
        """

        def _get() -> bytes:
            response = self._client.get_object(self.bucket, key)
            try:
                return response.read()
            finally:
                response.close()
                response.release_conn()

        return await self._call(_get, f"get {key}", key=key)

    async def get_tags(self, key: str) -> Dict[str, str]:
        """Return the tag set of an object.

        Raises:
            MinioObjectNotFoundError: If the object does not exist
        """

        def _get_tags() -> Dict[str, str]:
            tags = self._client.get_object_tags(self.bucket, key)
            return dict(tags) if tags else {}

        return await self._call(_get_tags, f"get tags {key}", key=key)

    async def put_object(
        self,
        key: str,
        data: bytes,
        tags: Dict[str, str],
        storage_class: str,
        acl: Optional[str] = None,
        content_type: str = DEFAULT_CONTENT_TYPE,
    ) -> None:
        """Upload an object body with tags, storage class and optional canned ACL."""

        def _put() -> None:
            self._client.put_object(
                self.bucket,
                key,
                io.BytesIO(data),
                length=len(data),
                content_type=content_type,
                metadata=_write_headers(storage_class, acl, content_type),
                tags=_to_tags(tags),
            )

        await self._call(_put, f"put {key}", key=key)
        logger.debug(
            f"Uploaded {key} size={len(data)} storage_class={storage_class} tags={tags}"
        )

    async def copy_object(
        self,
        source_key: str,
        dest_key: str,
        tags: Dict[str, str],
        storage_class: str,
        acl: Optional[str] = None,
    ) -> None:
        """Server-side copy replacing tags and storage class.

        Metadata and tagging directives are both REPLACE so that a copy onto
        the same key is accepted even when nothing but the tags changes.
        """

        def _copy() -> None:
            self._client.copy_object(
                self.bucket,
                dest_key,
                CopySource(self.bucket, source_key),
                metadata=_write_headers(storage_class, acl, DEFAULT_CONTENT_TYPE),
                tags=_to_tags(tags),
                metadata_directive=REPLACE,
                tagging_directive=REPLACE,
            )

        await self._call(_copy, f"copy {source_key} -> {dest_key}", key=source_key)
        logger.debug(
            f"Copied {source_key} -> {dest_key} storage_class={storage_class} tags={tags}"
        )

    async def put_tags(self, key: str, tags: Dict[str, str]) -> None:
        """Replace the tag set of an object."""

        def _put_tags() -> None:
            self._client.set_object_tags(self.bucket, key, _to_tags(tags))

        await self._call(_put_tags, f"put tags {key}", key=key)

    async def delete_tags(self, key: str) -> None:
        """Remove all tags of an object."""

        def _delete_tags() -> None:
            self._client.delete_object_tags(self.bucket, key)

        await self._call(_delete_tags, f"delete tags {key}", key=key)

    async def _call(self, fn, description: str, key: Optional[str] = None):
        try:
            return await asyncio.to_thread(fn)
        except S3Error as exc:
            if exc.code in NOT_FOUND_CODES:
                raise MinioObjectNotFoundError(
                    f"Object not found: {self.bucket}/{key or ''}"
                ) from exc
            logger.error(f"S3 error during {description}: {exc}")
            raise MinioAdapterError(f"S3 error during {description}: {exc}") from exc
        except Exception as exc:
            raise MinioAdapterError(f"Failed to {description}: {exc}") from exc


__all__ = [
    "MinioAdapter",
    "MinioAdapterError",
    "MinioObjectNotFoundError",
]
