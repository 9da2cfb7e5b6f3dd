"""Interface for object storage operations."""

from typing import Dict, List, Optional, Protocol, runtime_checkable

from .constant import DEFAULT_CONTENT_TYPE


@runtime_checkable
class IObjectStorage(Protocol):
    """Protocol for the object store the batch jobs work against.

    All methods are coroutines. Implementations are safe for concurrent use
    and raise MinioObjectNotFoundError when the object does not exist.
    """

    async def list_keys(
        self, prefix: str, start_after: Optional[str], max_keys: int
    ) -> List[str]:
        """List up to max_keys keys under prefix, strictly after start_after."""
        ...

    async def get_object(self, key: str) -> bytes:
        """Download the object body."""
        ...

    async def get_tags(self, key: str) -> Dict[str, str]:
        """Return the object's tag set (empty dict when untagged)."""
        ...

    async def put_object(
        self,
        key: str,
        data: bytes,
        tags: Dict[str, str],
        storage_class: str,
        acl: Optional[str] = None,
        content_type: str = DEFAULT_CONTENT_TYPE,
    ) -> None:
        """Write the object body, replacing its tags and storage class."""
        ...

    async def copy_object(
        self,
        source_key: str,
        dest_key: str,
        tags: Dict[str, str],
        storage_class: str,
        acl: Optional[str] = None,
    ) -> None:
        """Server-side copy; source_key may equal dest_key."""
        ...

    async def put_tags(self, key: str, tags: Dict[str, str]) -> None:
        """Replace the object's tag set."""
        ...

    async def delete_tags(self, key: str) -> None:
        """Remove every tag from the object."""
        ...


__all__ = ["IObjectStorage"]
