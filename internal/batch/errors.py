from typing import Optional

from .type import BatchSummary


class ErrEnumeration(Exception):
    """Raised when listing keys failed after every retry.

    The run cannot continue; ``cursor`` is the key to resume after.

    Attributes:
        cursor: Last key of the last fully settled page
        summary: Counters up to the failure
    """

    def __init__(self, cursor: Optional[str], summary: BatchSummary, message: str = ""):
        self.cursor = cursor
        self.summary = summary
        text = f"Error loading keys from S3, giving up (StartAfter={cursor})"
        if message:
            text += f": {message}"
        super().__init__(text)


__all__ = ["ErrEnumeration"]
