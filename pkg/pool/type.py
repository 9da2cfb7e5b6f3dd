from dataclasses import dataclass, field
from typing import Any, Generic, List, TypeVar

from .constant import *

T = TypeVar("T")
R = TypeVar("R")


@dataclass
class PoolConfig:
    """Worker pool configuration.

    Attributes:
        concurrency: Number of workers pulling from the shared index
    """

    concurrency: int = DEFAULT_CONCURRENCY

    def __post_init__(self):
        """Validate configuration."""
        if self.concurrency <= 0:
            raise ValueError(ERROR_INVALID_CONCURRENCY.format(value=self.concurrency))


@dataclass
class PoolSuccess(Generic[T, R]):
    item: T
    result: R


@dataclass
class PoolFailure(Generic[T]):
    item: T
    error: BaseException


@dataclass
class PoolResult(Generic[T, R]):
    """Outcome of one pool run.

    Attributes:
        results: One entry per item whose worker returned
        failures: One entry per item whose worker raised
        claimed: Number of indices handed out to workers
    """

    results: List[PoolSuccess] = field(default_factory=list)
    failures: List[PoolFailure] = field(default_factory=list)
    claimed: int = 0

    @property
    def settled(self) -> int:
        return len(self.results) + len(self.failures)


__all__ = ["PoolConfig", "PoolSuccess", "PoolFailure", "PoolResult"]
