import httpx

from pkg.fetch_cache.fetch_cache import SharedFetchCache
from pkg.fetch_cache.type import FetchCacheConfig
from pkg.logger.logger import Logger, LoggerConfig
from pkg.minio.minio import MinioAdapter
from pkg.minio.type import MinIOConfig as MinioPkgConfig
from pkg.outfit_api.outfit_api import OutfitApi
from pkg.outfit_api.type import OutfitApiConfig as OutfitApiPkgConfig
from pkg.outfit_image.outfit_image import OutfitImageRenderer
from pkg.outfit_image.type import OutfitImageConfig
from pkg.tracing.tracing import LoggingSpanRecorder
from pkg.tracing.type import TracingConfig as TracingPkgConfig
from config.config import Config
from internal.model.constant import (
    LOGGER_SERVICE_NAME,
    LOGGER_ENABLE_CONSOLE,
    LOGGER_COLORIZE,
    LOGGER_ENABLE_TRACE_ID,
)
from .type import Dependencies


def init_dependencies(config: Config) -> Dependencies:
    """Initialize all command dependencies.

    Args:
        config: Application configuration

    Returns:
        Dependencies struct with all initialized instances
    """
    # Initialize logger
    logger = Logger(
        LoggerConfig(
            level="DEBUG" if config.logging.debug else config.logging.level,
            enable_console=LOGGER_ENABLE_CONSOLE,
            colorize=LOGGER_COLORIZE,
            service_name=LOGGER_SERVICE_NAME,
            enable_trace_id=LOGGER_ENABLE_TRACE_ID,
        )
    )
    logger.info("Logger initialized")

    # Initialize object storage
    storage = MinioAdapter(
        MinioPkgConfig(
            endpoint=config.minio.endpoint,
            access_key=config.minio.access_key,
            secret_key=config.minio.secret_key,
            bucket=config.minio.bucket,
            secure=config.minio.secure,
            region=config.minio.region,
        )
    )
    logger.info(f"Object storage initialized (bucket={config.minio.bucket})")

    # Shared HTTP client for GraphQL and layer downloads
    api_config = OutfitApiPkgConfig(
        url=config.outfit_api.url,
        timeout_seconds=config.outfit_api.timeout_seconds,
    )
    http_client = httpx.AsyncClient(
        timeout=api_config.timeout_seconds,
        headers={"User-Agent": api_config.user_agent},
        follow_redirects=True,
    )

    outfit_api = OutfitApi(api_config, http_client)
    logger.info("Outfit API client initialized")

    renderer = OutfitImageRenderer(
        OutfitImageConfig(
            layer_timeout_seconds=config.render.layer_timeout_seconds,
            palette_colors=config.render.palette_colors,
            optimize=config.render.optimize,
        ),
        http_client,
    )
    logger.info("Outfit renderer initialized")

    if config.backup.fetch_cache_capacity > 0:
        cache_config = FetchCacheConfig(capacity=config.backup.fetch_cache_capacity)
    else:
        cache_config = FetchCacheConfig.for_concurrency(config.backup.concurrency)
    fetch_cache = SharedFetchCache(cache_config)

    span_recorder = LoggingSpanRecorder(
        TracingPkgConfig(
            enabled=config.tracing.enabled,
            slow_span_ms=config.tracing.slow_span_ms,
        )
    )

    return Dependencies(
        logger=logger,
        storage=storage,
        http_client=http_client,
        outfit_api=outfit_api,
        renderer=renderer,
        fetch_cache=fetch_cache,
        span_recorder=span_recorder,
        config=config,
    )


async def close_dependencies(deps: Dependencies) -> None:
    """Release network resources held by ``deps``."""
    await deps.http_client.aclose()
    deps.logger.info("Dependencies closed")


__all__ = ["init_dependencies", "close_dependencies"]
