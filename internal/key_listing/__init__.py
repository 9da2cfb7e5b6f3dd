from .errors import ErrListKeys
from .interface import IKeyLister
from .type import Config, KeyGroups, Page, WorkItem
from .usecase.helpers import classify_keys
from .usecase.new import New as NewKeyLister

__all__ = [
    "ErrListKeys",
    "IKeyLister",
    "Config",
    "KeyGroups",
    "Page",
    "WorkItem",
    "classify_keys",
    "NewKeyLister",
]
