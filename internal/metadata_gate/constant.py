"""Constants for the metadata gate."""

from internal.model.constant import IMAGE_KIND_TAG

# Values of the reserved tag
TAG_VALUE_BACKUP = "backup"
TAG_VALUE_COMPRESSED = "compressed"
TAG_VALUE_COMPRESSION_FAILED = "compression-failed"

__all__ = [
    "IMAGE_KIND_TAG",
    "TAG_VALUE_BACKUP",
    "TAG_VALUE_COMPRESSED",
    "TAG_VALUE_COMPRESSION_FAILED",
]
