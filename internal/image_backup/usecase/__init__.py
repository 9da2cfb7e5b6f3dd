from .helpers import (
    backup_key_for,
    human_file_size,
    keys_for_outfit,
    outfit_id_from_key,
    parse_image_key,
)
from .new import New
from .usecase import ImageBackupUseCase

__all__ = [
    "backup_key_for",
    "human_file_size",
    "keys_for_outfit",
    "outfit_id_from_key",
    "parse_image_key",
    "New",
    "ImageBackupUseCase",
]
