from .new import New
from .summary import format_summary
from .usecase import BatchRunner

__all__ = ["New", "format_summary", "BatchRunner"]
