from dataclasses import dataclass

import httpx

from pkg.fetch_cache.fetch_cache import SharedFetchCache
from pkg.logger.logger import Logger
from pkg.minio.interface import IObjectStorage
from pkg.outfit_api.interface import IOutfitApi
from pkg.outfit_image.interface import IOutfitRenderer
from pkg.tracing.interface import ISpanRecorder
from config.config import Config


@dataclass
class Dependencies:
    """Dependencies container shared by the archiver commands.

    Attributes:
        logger: Logger instance
        storage: Object storage bound to the outfit image bucket
        http_client: Shared httpx client for the API and layer downloads
        outfit_api: Upstream outfit data client
        renderer: Outfit image renderer
        fetch_cache: Outfit data shared between sibling keys
        span_recorder: Stage span recorder
        config: Application configuration
    """

    logger: Logger
    storage: IObjectStorage
    http_client: httpx.AsyncClient
    outfit_api: IOutfitApi
    renderer: IOutfitRenderer
    fetch_cache: SharedFetchCache
    span_recorder: ISpanRecorder
    config: Config


__all__ = ["Dependencies"]
