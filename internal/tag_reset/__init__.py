from .interface import ITagResetUseCase
from .type import Config
from .usecase.new import New as NewTagResetUseCase

__all__ = ["ITagResetUseCase", "Config", "NewTagResetUseCase"]
