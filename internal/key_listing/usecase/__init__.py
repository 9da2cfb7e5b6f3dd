from .helpers import classify_keys
from .new import New
from .usecase import KeyLister

__all__ = ["classify_keys", "New", "KeyLister"]
