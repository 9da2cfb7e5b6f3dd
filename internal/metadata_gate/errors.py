"""Module-specific errors for the metadata gate."""


class ErrUnexpectedTag(Exception):
    """Raised when an object carries a classification the pipeline does not own.

    Attributes:
        key: Object key
        value: Stored tag value (None when the tag is missing on an object
            that should have one)
    """

    def __init__(self, key: str, value):
        self.key = key
        self.value = value
        super().__init__(f"{key}: unexpected image kind {value!r}")


__all__ = ["ErrUnexpectedTag"]
