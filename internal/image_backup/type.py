from dataclasses import dataclass, field
from enum import Enum
from typing import Awaitable, Callable, Optional

from internal.metadata_gate.type import TagState, Transition
from .constant import *


@dataclass
class Config:
    """Configuration for the per-key workflow.

    Attributes:
        force: Redo compression regardless of tags; a finished backup is kept
        backup_storage_class: Storage class of <key>.bkup
        compressed_storage_class: Storage class of the replaced original
        acl: Canned ACL applied when the original is rewritten
    """

    force: bool = False
    backup_storage_class: str = STORAGE_CLASS_GLACIER
    compressed_storage_class: str = STORAGE_CLASS_STANDARD_IA
    acl: Optional[str] = ACL_PUBLIC_READ

    def __post_init__(self):
        if not self.backup_storage_class:
            raise ValueError("backup_storage_class is required")
        if not self.compressed_storage_class:
            raise ValueError("compressed_storage_class is required")


class ReplaceOutcome(str, Enum):
    COMPRESSED = "compressed"
    COMPRESSION_FAILED = "compression-failed"


@dataclass
class ProcessOutput:
    """Result of one workflow run.

    Attributes:
        key: Processed key
        made_change: True when any object was written
        snapshot: Snapshot gate transition, None if the stage was not reached
        replace: Replace gate transition, None if the stage was not reached
        replace_outcome: What the replace stage wrote, None if it wrote nothing
    """

    key: str
    made_change: bool = False
    snapshot: Optional[Transition] = None
    replace: Optional[Transition] = None
    replace_outcome: Optional[ReplaceOutcome] = None


@dataclass
class ObjectRecord:
    """An object's tag state plus a body loaded on first use.

    The body is fetched at most once per record and lives only as long as
    the record.
    """

    key: str
    state: TagState
    loader: Callable[[], Awaitable[bytes]] = field(repr=False)
    _body: Optional[bytes] = field(default=None, init=False, repr=False)

    async def body(self) -> bytes:
        if self._body is None:
            self._body = await self.loader()
        return self._body


@dataclass(frozen=True)
class ImageKey:
    """Parsed outfit image key."""

    key: str
    outfit_id: str
    filename: str
    size: int


__all__ = [
    "Config",
    "ReplaceOutcome",
    "ProcessOutput",
    "ObjectRecord",
    "ImageKey",
]
