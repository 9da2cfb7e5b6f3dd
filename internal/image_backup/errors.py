from typing import List


class ErrObjectNotFound(Exception):
    """Raised when the original image is missing."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"object not found: {key}")


class ErrInvalidKey(Exception):
    """Raised when a key does not look like outfits/AAA/BBB/CCC/<size>.png."""

    def __init__(self, key: str, reason: str = "unrecognized layout"):
        self.key = key
        super().__init__(f"invalid outfit image key {key!r}: {reason}")


class ErrUpstreamData(Exception):
    """Raised when outfit layer data cannot be fetched.

    Attributes:
        outfit_id: Requested outfit
        errors: Error messages reported by the upstream API
    """

    def __init__(self, outfit_id: str, errors: List[str]):
        self.outfit_id = outfit_id
        self.errors = list(errors)
        super().__init__(
            f"Error loading outfit data for outfit {outfit_id}: "
            + "; ".join(self.errors)
        )


class ErrPartialRender(Exception):
    """Raised when some layers could not be drawn; nothing is written."""

    def __init__(self, key: str, layers_loaded: int, layers_total: int):
        self.key = key
        self.layers_loaded = layers_loaded
        self.layers_total = layers_total
        super().__init__(
            f"{key}: render was partial ({layers_loaded}/{layers_total} layers loaded)"
        )


__all__ = [
    "ErrObjectNotFound",
    "ErrInvalidKey",
    "ErrUpstreamData",
    "ErrPartialRender",
]
