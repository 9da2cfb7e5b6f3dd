from .new import New
from .usecase import TagResetUseCase

__all__ = ["New", "TagResetUseCase"]
