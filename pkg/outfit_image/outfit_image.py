import asyncio
import io
from typing import List, Optional

import httpx
from loguru import logger
from PIL import Image, UnidentifiedImageError

from pkg.outfit_api.constant import SUPPORTED_SIZES
from pkg.outfit_api.type import OutfitData
from .interface import IOutfitRenderer
from .type import OutfitImageConfig, RenderResult
from .constant import *


class OutfitImageRenderer(IOutfitRenderer):
    """Renders outfit previews with Pillow.

    Layers are downloaded concurrently with httpx. A layer that fails to
    download or decode is skipped with a warning, and the result is marked
    PARTIAL_FAILURE so callers can refuse to store a degraded image. Pillow
    work runs in a thread to keep the event loop responsive.
    """

    def __init__(self, config: OutfitImageConfig, client: Optional[httpx.AsyncClient] = None):
        """Initialize renderer.

        Args:
            config: Renderer configuration
            client: Shared httpx client used for layer downloads
        """
        self.config = config
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=config.layer_timeout_seconds)

    async def render(self, outfit: OutfitData, size: int) -> RenderResult:
        """Composite all visible layers of ``outfit`` at ``size`` pixels.

        Args:
            outfit: Outfit layer data
            size: Output width and height

        Returns:
            RenderResult with PNG bytes and load status
        """
        if size not in SUPPORTED_SIZES:
            raise ValueError(ERROR_INVALID_SIZE.format(value=size, supported=SUPPORTED_SIZES))

        urls = outfit.layer_urls(size)
        layers = await asyncio.gather(*(self._load_layer(url) for url in urls))
        loaded = [layer for layer in layers if layer is not None]

        image = await asyncio.to_thread(self._composite, loaded, size)
        status = (
            RenderStatus.SUCCESS if len(loaded) == len(urls) else RenderStatus.PARTIAL_FAILURE
        )
        return RenderResult(
            image=image,
            status=status,
            layers_total=len(urls),
            layers_loaded=len(loaded),
        )

    async def compress(self, image: bytes) -> bytes:
        """Quantize a PNG to a palette image and re-encode it."""
        return await asyncio.to_thread(self._quantize, image)

    async def close(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def _load_layer(self, url: Optional[str]) -> Optional[Image.Image]:
        if not url:
            logger.warning(f"Error loading layer, URL was empty: {url!r}")
            return None

        try:
            response = await self._client.get(url, timeout=self.config.layer_timeout_seconds)
            response.raise_for_status()
            return await asyncio.to_thread(self._decode, response.content)
        except (httpx.HTTPError, UnidentifiedImageError, OSError) as exc:
            logger.warning(f"Error loading layer, skipping: {exc} ({url})")
            return None

    @staticmethod
    def _decode(data: bytes) -> Image.Image:
        with Image.open(io.BytesIO(data)) as layer:
            return layer.convert("RGBA")

    def _composite(self, layers: List[Image.Image], size: int) -> bytes:
        canvas = Image.new("RGBA", (size, size), (0, 0, 0, 0))
        for layer in layers:
            if layer.size != (size, size):
                layer = layer.resize((size, size), Image.Resampling.LANCZOS)
            canvas.alpha_composite(layer)

        buffer = io.BytesIO()
        canvas.save(buffer, format=IMAGE_FORMAT)
        return buffer.getvalue()

    def _quantize(self, image: bytes) -> bytes:
        with Image.open(io.BytesIO(image)) as source:
            rgba = source.convert("RGBA")
        # Only the fast octree quantizer supports RGBA input
        palette = rgba.quantize(
            colors=self.config.palette_colors,
            method=Image.Quantize.FASTOCTREE,
        )

        buffer = io.BytesIO()
        palette.save(buffer, format=IMAGE_FORMAT, optimize=self.config.optimize)
        return buffer.getvalue()


__all__ = ["OutfitImageRenderer"]
