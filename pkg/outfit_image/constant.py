from enum import Enum


class RenderStatus(str, Enum):
    SUCCESS = "success"
    PARTIAL_FAILURE = "partial-failure"


DEFAULT_LAYER_TIMEOUT_SECONDS = 30.0
DEFAULT_PALETTE_COLORS = 256
MAX_PALETTE_COLORS = 256
DEFAULT_OPTIMIZE = True
IMAGE_FORMAT = "PNG"

ERROR_INVALID_COLORS = "palette_colors must be 2-256, got {value}"
ERROR_INVALID_SIZE = "size must be one of {supported}, got {value}"
