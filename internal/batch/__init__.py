from .errors import ErrEnumeration
from .interface import IBatchRunner, KeyHandler, KeySelector
from .type import BatchSummary, Config, KeyFailure
from .usecase.new import New as NewBatchRunner
from .usecase.summary import format_summary

__all__ = [
    "ErrEnumeration",
    "IBatchRunner",
    "KeyHandler",
    "KeySelector",
    "BatchSummary",
    "Config",
    "KeyFailure",
    "NewBatchRunner",
    "format_summary",
]
