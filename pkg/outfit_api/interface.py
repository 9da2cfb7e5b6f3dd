"""Interface for the upstream outfit data API."""

from typing import Protocol, runtime_checkable

from .type import OutfitData


@runtime_checkable
class IOutfitApi(Protocol):
    """Protocol for fetching outfit layer data by outfit id."""

    async def fetch_outfit(self, outfit_id: str) -> OutfitData:
        """Fetch outfit data; raise OutfitApiError with the upstream error list on failure."""
        ...


__all__ = ["IOutfitApi"]
