from dataclasses import dataclass
from .constant import *


@dataclass
class OutfitImageConfig:
    """Renderer and compressor configuration.

    Attributes:
        layer_timeout_seconds: Timeout for downloading one layer image
        palette_colors: Colors kept when quantizing to a palette PNG
        optimize: Ask the PNG encoder for its smallest output
    """

    layer_timeout_seconds: float = DEFAULT_LAYER_TIMEOUT_SECONDS
    palette_colors: int = DEFAULT_PALETTE_COLORS
    optimize: bool = DEFAULT_OPTIMIZE

    def __post_init__(self):
        """Validate configuration."""
        if not 2 <= self.palette_colors <= MAX_PALETTE_COLORS:
            raise ValueError(ERROR_INVALID_COLORS.format(value=self.palette_colors))
        if self.layer_timeout_seconds <= 0:
            raise ValueError(
                f"layer_timeout_seconds must be positive, got {self.layer_timeout_seconds}"
            )


@dataclass
class RenderResult:
    """Rendered outfit image.

    Attributes:
        image: PNG bytes
        status: SUCCESS when every layer loaded, PARTIAL_FAILURE otherwise
        layers_total: Number of layers requested
        layers_loaded: Number of layers drawn
    """

    image: bytes
    status: RenderStatus
    layers_total: int = 0
    layers_loaded: int = 0


__all__ = ["OutfitImageConfig", "RenderResult", "RenderStatus"]
