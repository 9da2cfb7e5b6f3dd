"""Interface for outfit image rendering and compression."""

from typing import Protocol, runtime_checkable

from pkg.outfit_api.type import OutfitData
from .type import RenderResult


@runtime_checkable
class IOutfitRenderer(Protocol):
    """Protocol for turning outfit data into a compressed PNG."""

    async def render(self, outfit: OutfitData, size: int) -> RenderResult:
        """Composite the outfit's layers into a size x size PNG."""
        ...

    async def compress(self, image: bytes) -> bytes:
        """Return a smaller palette PNG of the same picture."""
        ...


__all__ = ["IOutfitRenderer"]
