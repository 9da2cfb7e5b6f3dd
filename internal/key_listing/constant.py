from internal.model.constant import (
    BACKUP_IMAGE_KEY_SUFFIX,
    IMAGE_KEY_SUFFIX,
    LIST_PAGE_SIZE,
    OUTFIT_KEY_PREFIX,
)

DEFAULT_KEY_PREFIX = OUTFIT_KEY_PREFIX
DEFAULT_PAGE_SIZE = LIST_PAGE_SIZE
MAX_PAGE_SIZE = 1000

__all__ = [
    "BACKUP_IMAGE_KEY_SUFFIX",
    "IMAGE_KEY_SUFFIX",
    "DEFAULT_KEY_PREFIX",
    "DEFAULT_PAGE_SIZE",
    "MAX_PAGE_SIZE",
]
