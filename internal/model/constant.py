from typing import Final

# Logger configuration
LOGGER_SERVICE_NAME: Final[str] = "outfit-archiver"
LOGGER_ENABLE_CONSOLE: Final[bool] = True
LOGGER_COLORIZE: Final[bool] = True
LOGGER_ENABLE_TRACE_ID: Final[bool] = True

# Object layout
OUTFIT_KEY_PREFIX: Final[str] = "outfits/"
IMAGE_KEY_SUFFIX: Final[str] = ".png"
BACKUP_KEY_SUFFIX: Final[str] = ".bkup"
BACKUP_IMAGE_KEY_SUFFIX: Final[str] = IMAGE_KEY_SUFFIX + BACKUP_KEY_SUFFIX

# Reserved tag holding the image's processing state
IMAGE_KIND_TAG: Final[str] = "DTI-Outfit-Image-Kind"

# Listing
LIST_PAGE_SIZE: Final[int] = 1000
