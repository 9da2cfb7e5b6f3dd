from dataclasses import dataclass
from .constant import *


@dataclass
class FetchCacheConfig:
    """Shared fetch cache configuration.

    Attributes:
        capacity: Maximum number of entity ids kept. Sibling keys of one
            entity arrive close together in listing order, so about twice the
            worker concurrency is enough.
    """

    capacity: int = DEFAULT_CAPACITY

    def __post_init__(self):
        """Validate configuration."""
        if self.capacity <= 0:
            raise ValueError(ERROR_INVALID_CAPACITY.format(value=self.capacity))

    @classmethod
    def for_concurrency(cls, concurrency: int) -> "FetchCacheConfig":
        return cls(capacity=max(1, concurrency * 2))


@dataclass
class FetchCacheStats:
    hits: int = 0
    misses: int = 0
    evictions: int = 0


__all__ = ["FetchCacheConfig", "FetchCacheStats"]
