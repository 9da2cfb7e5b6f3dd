from typing import Optional

from pkg.logger.logger import Logger
from pkg.minio.interface import IObjectStorage
from ..interface import IKeyLister
from ..type import Config
from .usecase import KeyLister


def New(
    config: Config,
    storage: IObjectStorage,
    logger: Optional[Logger] = None,
) -> IKeyLister:
    return KeyLister(config, storage, logger=logger)


__all__ = ["New"]
