from typing import Iterable

from internal.key_listing.type import KeyGroups
from internal.key_listing.constant import *


def classify_keys(keys: Iterable[str]) -> KeyGroups:
    """Split keys into image keys, backup keys and everything else."""
    groups = KeyGroups()
    for key in keys:
        if key.endswith(IMAGE_KEY_SUFFIX):
            groups.image_keys.append(key)
        elif key.endswith(BACKUP_IMAGE_KEY_SUFFIX):
            groups.backup_keys.append(key)
        else:
            groups.other_keys.append(key)
    return groups


__all__ = ["classify_keys"]
