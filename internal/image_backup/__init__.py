from .errors import ErrInvalidKey, ErrObjectNotFound, ErrPartialRender, ErrUpstreamData
from .interface import IImageBackupUseCase
from .type import Config, ImageKey, ProcessOutput, ReplaceOutcome
from .usecase.helpers import keys_for_outfit
from .usecase.new import New as NewImageBackupUseCase

__all__ = [
    "ErrInvalidKey",
    "ErrObjectNotFound",
    "ErrPartialRender",
    "ErrUpstreamData",
    "IImageBackupUseCase",
    "Config",
    "ImageKey",
    "ProcessOutput",
    "ReplaceOutcome",
    "keys_for_outfit",
    "NewImageBackupUseCase",
]
