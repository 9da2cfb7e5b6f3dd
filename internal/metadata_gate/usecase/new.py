from typing import Optional

from pkg.logger.logger import Logger
from ..interface import IMetadataGate
from .usecase import MetadataGate


def New(logger: Optional[Logger] = None) -> IMetadataGate:
    return MetadataGate(logger=logger)


__all__ = ["New"]
