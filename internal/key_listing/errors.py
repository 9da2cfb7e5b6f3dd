class ErrListKeys(Exception):
    """Raised when a page of keys cannot be listed.

    Attributes:
        cursor: Key the failed listing started after
    """

    def __init__(self, cursor, message: str):
        self.cursor = cursor
        super().__init__(f"failed to list keys after {cursor!r}: {message}")


__all__ = ["ErrListKeys"]
