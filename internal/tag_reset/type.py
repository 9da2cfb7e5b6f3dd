from dataclasses import dataclass
from typing import Optional

from internal.batch.type import Config as BatchConfig
from .constant import *


@dataclass
class Config:
    """Configuration for removing tags from every image and backup key."""

    concurrency: int = DEFAULT_CONCURRENCY
    key_timeout_seconds: Optional[float] = DEFAULT_KEY_TIMEOUT_SECONDS
    key_retries: int = DEFAULT_KEY_RETRIES
    list_timeout_seconds: Optional[float] = DEFAULT_LIST_TIMEOUT_SECONDS
    list_retries: int = DEFAULT_LIST_RETRIES

    def batch_config(self) -> BatchConfig:
        return BatchConfig(
            concurrency=self.concurrency,
            list_retries=self.list_retries,
            list_timeout_seconds=self.list_timeout_seconds,
            key_retries=self.key_retries,
            key_timeout_seconds=self.key_timeout_seconds,
            include_backup_keys=True,
            action=ACTION,
        )


__all__ = ["Config"]
