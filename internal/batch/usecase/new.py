from typing import Optional

from pkg.logger.logger import Logger
from pkg.retry.interface import IRetryExecutor
from internal.key_listing.interface import IKeyLister
from ..interface import IBatchRunner
from ..type import Config
from .usecase import BatchRunner


def New(
    config: Config,
    lister: IKeyLister,
    logger: Logger,
    retry: Optional[IRetryExecutor] = None,
) -> IBatchRunner:
    if not isinstance(config, Config):
        raise ValueError("config must be an instance of Config")

    return BatchRunner(config, lister, logger, retry=retry)


__all__ = ["New"]
