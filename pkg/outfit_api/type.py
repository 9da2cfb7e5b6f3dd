from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .constant import *


@dataclass
class OutfitApiConfig:
    """Upstream outfit API configuration.

    Attributes:
        url: GraphQL endpoint
        timeout_seconds: Per-request timeout
        user_agent: User-Agent header sent with each request
    """

    url: str = DEFAULT_GRAPHQL_URL
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    user_agent: str = DEFAULT_USER_AGENT

    def __post_init__(self):
        """Validate configuration."""
        if not self.url or not self.url.startswith(("http://", "https://")):
            raise ValueError(f"url must be an http(s) URL, got {self.url!r}")
        if self.timeout_seconds <= 0:
            raise ValueError(
                f"timeout_seconds must be positive, got {self.timeout_seconds}"
            )


class LayerZone(BaseModel):
    id: Optional[str] = None
    depth: int = 0


class OutfitLayer(BaseModel):
    """One image layer of a pet or item appearance."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    zone: LayerZone = Field(default_factory=LayerZone)
    image_url_600: Optional[str] = Field(default=None, alias="imageUrl600")
    image_url_300: Optional[str] = Field(default=None, alias="imageUrl300")
    image_url_150: Optional[str] = Field(default=None, alias="imageUrl150")

    def image_url(self, size: int) -> Optional[str]:
        if size not in SUPPORTED_SIZES:
            raise ValueError(
                ERROR_UNSUPPORTED_SIZE.format(value=size, supported=SUPPORTED_SIZES)
            )
        return {
            SIZE_600: self.image_url_600,
            SIZE_300: self.image_url_300,
            SIZE_150: self.image_url_150,
        }.get(size)


class Appearance(BaseModel):
    id: Optional[str] = None
    layers: List[OutfitLayer] = Field(default_factory=list)


class OutfitData(BaseModel):
    """Layers needed to render one outfit."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    pet_appearance: Optional[Appearance] = Field(default=None, alias="petAppearance")
    item_appearances: List[Appearance] = Field(
        default_factory=list, alias="itemAppearances"
    )

    def visible_layers(self) -> List[OutfitLayer]:
        """All layers, back to front."""
        layers: List[OutfitLayer] = []
        if self.pet_appearance:
            layers.extend(self.pet_appearance.layers)
        for appearance in self.item_appearances:
            layers.extend(appearance.layers)
        return sorted(layers, key=lambda layer: layer.zone.depth)

    def layer_urls(self, size: int) -> List[Optional[str]]:
        """Image URL of each visible layer at ``size``; None where the API has none."""
        return [layer.image_url(size) for layer in self.visible_layers()]


class GraphQLError(BaseModel):
    message: str
    path: Optional[List[Any]] = None


class GraphQLResponse(BaseModel):
    data: Optional[Dict[str, Any]] = None
    errors: List[GraphQLError] = Field(default_factory=list)


class OutfitApiError(Exception):
    """Raised when outfit data cannot be fetched.

    Attributes:
        outfit_id: Requested outfit
        errors: Error messages reported upstream (or describing the failure)
    """

    def __init__(self, outfit_id: str, errors: List[str]):
        self.outfit_id = outfit_id
        self.errors = list(errors)
        super().__init__(f"outfit {outfit_id}: " + "; ".join(self.errors))


__all__ = [
    "OutfitApiConfig",
    "LayerZone",
    "OutfitLayer",
    "Appearance",
    "OutfitData",
    "GraphQLError",
    "GraphQLResponse",
    "OutfitApiError",
]
