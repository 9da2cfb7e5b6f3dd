from dataclasses import dataclass, field
from typing import List, Optional

from .constant import *


@dataclass
class Config:
    """Configuration for a batch run.

    Attributes:
        concurrency: Keys processed at once within a page
        list_retries: Retries for each page listing
        list_timeout_seconds: Per-attempt timeout for a listing, None for none
        key_retries: Retries for each key
        key_timeout_seconds: Per-attempt timeout for a key, None for none
        include_backup_keys: Also process ``.png.bkup`` keys
        action: Verb used in the summary, e.g. "backed up"
    """

    concurrency: int = DEFAULT_CONCURRENCY
    list_retries: int = DEFAULT_LIST_RETRIES
    list_timeout_seconds: Optional[float] = None
    key_retries: int = DEFAULT_KEY_RETRIES
    key_timeout_seconds: Optional[float] = None
    include_backup_keys: bool = False
    action: str = DEFAULT_ACTION

    def __post_init__(self):
        if self.concurrency <= 0:
            raise ValueError(f"concurrency must be positive, got {self.concurrency}")
        if self.list_retries < 0 or self.key_retries < 0:
            raise ValueError("retries cannot be negative")
        for name in ("list_timeout_seconds", "key_timeout_seconds"):
            value = getattr(self, name)
            if value is not None and value <= 0:
                raise ValueError(f"{name} must be positive, got {value}")


@dataclass
class KeyFailure:
    key: str
    message: str


@dataclass
class BatchSummary:
    """Counters of a batch run.

    Attributes:
        total_keys: Every key listed
        in_scope_keys: Keys handed to the handler
        image_keys: ``.png`` keys listed
        backup_keys: ``.png.bkup`` keys listed
        other_keys: Keys of any other kind
        successes: In-scope keys whose handler wrote something
        no_ops: In-scope keys whose handler had nothing to do
        failures: In-scope keys that failed after all retries
        cursor: Last key of the last fully settled page
        pages: Pages processed
        backup_keys_included: Whether backup keys were in scope
        action: Verb used in the report
    """

    total_keys: int = 0
    in_scope_keys: int = 0
    image_keys: int = 0
    backup_keys: int = 0
    other_keys: int = 0
    successes: int = 0
    no_ops: int = 0
    failures: List[KeyFailure] = field(default_factory=list)
    cursor: Optional[str] = None
    pages: int = 0
    backup_keys_included: bool = False
    action: str = DEFAULT_ACTION


__all__ = ["Config", "KeyFailure", "BatchSummary"]
