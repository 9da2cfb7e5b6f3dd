from internal.model.constant import (
    BACKUP_KEY_SUFFIX,
    IMAGE_KIND_TAG,
    IMAGE_KEY_SUFFIX,
    OUTFIT_KEY_PREFIX,
)
from pkg.minio.constant import (
    ACL_PUBLIC_READ,
    STORAGE_CLASS_GLACIER,
    STORAGE_CLASS_STANDARD_IA,
)
from pkg.outfit_api.constant import SIZE_150, SIZE_300, SIZE_600

# Size rendered for each preview filename
SIZE_BY_FILENAME = {
    "preview.png": SIZE_600,
    "medium_preview.png": SIZE_300,
    "small_preview.png": SIZE_150,
}
PREVIEW_FILENAMES = tuple(SIZE_BY_FILENAME)

# outfits/AAA/BBB/CCC/<filename>
OUTFIT_ID_DIGITS = 9
OUTFIT_ID_SEGMENT_DIGITS = 3

# Log prefixes
LOG_BACKUP = "BKUP"
LOG_COMPRESS = "CMPR"
LOG_SAVE = "SAVE"

# Span names
SPAN_PROCESS = "image_backup.process"
SPAN_SNAPSHOT = "image_backup.snapshot"
SPAN_FETCH = "image_backup.fetch_outfit"
SPAN_RENDER = "image_backup.render"
SPAN_REPLACE = "image_backup.replace"

__all__ = [
    "BACKUP_KEY_SUFFIX",
    "IMAGE_KIND_TAG",
    "IMAGE_KEY_SUFFIX",
    "OUTFIT_KEY_PREFIX",
    "ACL_PUBLIC_READ",
    "STORAGE_CLASS_GLACIER",
    "STORAGE_CLASS_STANDARD_IA",
    "SIZE_BY_FILENAME",
    "PREVIEW_FILENAMES",
    "OUTFIT_ID_DIGITS",
    "OUTFIT_ID_SEGMENT_DIGITS",
    "LOG_BACKUP",
    "LOG_COMPRESS",
    "LOG_SAVE",
    "SPAN_PROCESS",
    "SPAN_SNAPSHOT",
    "SPAN_FETCH",
    "SPAN_RENDER",
    "SPAN_REPLACE",
]
