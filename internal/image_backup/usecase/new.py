from pkg.fetch_cache.interface import IFetchCache
from pkg.logger.logger import Logger
from pkg.minio.interface import IObjectStorage
from pkg.outfit_api.interface import IOutfitApi
from pkg.outfit_image.interface import IOutfitRenderer
from pkg.tracing.interface import ISpanRecorder
from internal.metadata_gate.usecase.new import New as NewMetadataGate
from ..interface import IImageBackupUseCase
from ..type import Config
from .usecase import ImageBackupUseCase


def New(
    config: Config,
    storage: IObjectStorage,
    outfit_api: IOutfitApi,
    renderer: IOutfitRenderer,
    fetch_cache: IFetchCache,
    logger: Logger,
    span_recorder: ISpanRecorder,
) -> IImageBackupUseCase:
    """Create the per-key workflow.

    Raises:
        ValueError: If config is invalid
    """
    if not isinstance(config, Config):
        raise ValueError("config must be an instance of Config")

    return ImageBackupUseCase(
        config=config,
        storage=storage,
        outfit_api=outfit_api,
        renderer=renderer,
        fetch_cache=fetch_cache,
        gate=NewMetadataGate(logger=logger),
        logger=logger,
        span_recorder=span_recorder,
    )


__all__ = ["New"]
