from pkg.logger.logger import Logger
from pkg.minio.interface import IObjectStorage
from ..interface import ITagResetUseCase
from .usecase import TagResetUseCase


def New(storage: IObjectStorage, logger: Logger) -> ITagResetUseCase:
    return TagResetUseCase(storage, logger)


__all__ = ["New"]
