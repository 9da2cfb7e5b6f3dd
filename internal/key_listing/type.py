from dataclasses import dataclass, field
from typing import List, Optional

from .constant import *


@dataclass
class Config:
    """Configuration for key listing."""

    key_prefix: str = DEFAULT_KEY_PREFIX
    page_size: int = DEFAULT_PAGE_SIZE

    def __post_init__(self):
        if not 1 <= self.page_size <= MAX_PAGE_SIZE:
            raise ValueError(
                f"page_size must be between 1 and {MAX_PAGE_SIZE}, got {self.page_size}"
            )


@dataclass
class Page:
    """One page of keys in lexicographic order.

    Attributes:
        keys: Keys strictly after the requested cursor
        cursor: Last key of the page, or the requested cursor when empty
        index: 1-based page number within this run; 0 for an empty page
    """

    keys: List[str]
    cursor: Optional[str]
    index: int = 0

    @property
    def exhausted(self) -> bool:
        return not self.keys


@dataclass(frozen=True)
class WorkItem:
    """A key scheduled for processing, with the page it came from."""

    key: str
    page_index: int = 0


@dataclass
class KeyGroups:
    """Keys of one page split by kind."""

    image_keys: List[str] = field(default_factory=list)
    backup_keys: List[str] = field(default_factory=list)
    other_keys: List[str] = field(default_factory=list)


__all__ = ["Config", "Page", "WorkItem", "KeyGroups"]
