from typing import Optional, Protocol, runtime_checkable

from .type import Page


@runtime_checkable
class IKeyLister(Protocol):
    async def next_page(self, cursor: Optional[str]) -> Page:
        """Return the page of keys strictly after ``cursor``."""
        ...


__all__ = ["IKeyLister"]
