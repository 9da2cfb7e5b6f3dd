from typing import List

from internal.image_backup.errors import ErrInvalidKey
from internal.image_backup.type import ImageKey
from internal.image_backup.constant import *

_BINARY_UNITS = ["KiB", "MiB", "GiB", "TiB", "PiB", "EiB", "ZiB", "YiB"]
_SI_UNITS = ["kB", "MB", "GB", "TB", "PB", "EB", "ZB", "YB"]


def backup_key_for(key: str) -> str:
    return key + BACKUP_KEY_SUFFIX


def parse_image_key(key: str) -> ImageKey:
    """Parse ``outfits/AAA/BBB/CCC/<filename>``.

    The three digit groups joined, without leading zeros, form the outfit
    id; the filename selects the render size.

    Raises:
        ErrInvalidKey: If the key does not have that shape
    """
    if not key.startswith(OUTFIT_KEY_PREFIX):
        raise ErrInvalidKey(key, f"expected prefix {OUTFIT_KEY_PREFIX!r}")

    parts = key[len(OUTFIT_KEY_PREFIX):].split("/")
    if len(parts) != 4:
        raise ErrInvalidKey(key, "expected three id segments and a filename")

    *segments, filename = parts
    for segment in segments:
        if len(segment) != OUTFIT_ID_SEGMENT_DIGITS or not segment.isdigit():
            raise ErrInvalidKey(key, f"bad id segment {segment!r}")

    size = SIZE_BY_FILENAME.get(filename)
    if size is None:
        raise ErrInvalidKey(key, f"unknown preview filename {filename!r}")

    outfit_id = str(int("".join(segments)))
    return ImageKey(key=key, outfit_id=outfit_id, filename=filename, size=size)


def outfit_id_from_key(key: str) -> str:
    return parse_image_key(key).outfit_id


def keys_for_outfit(outfit_id) -> List[str]:
    """Return the preview keys of one outfit, largest size first.

    >>> keys_for_outfit("1234")[0]
    'outfits/000/001/234/preview.png'
    """
    raw = str(outfit_id).strip()
    if not raw.isdigit() or len(raw) > OUTFIT_ID_DIGITS:
        raise ValueError(f"invalid outfit id: {outfit_id!r}")

    padded = raw.zfill(OUTFIT_ID_DIGITS)
    step = OUTFIT_ID_SEGMENT_DIGITS
    prefix = OUTFIT_KEY_PREFIX + "/".join(
        padded[i:i + step] for i in range(0, OUTFIT_ID_DIGITS, step)
    )
    return [f"{prefix}/{filename}" for filename in PREVIEW_FILENAMES]


def human_file_size(num_bytes: int, si: bool = False, dp: int = 1) -> str:
    """Format a byte count, e.g. ``1536 -> '1.5 KiB'``."""
    thresh = 1000 if si else 1024
    if abs(num_bytes) < thresh:
        return f"{num_bytes} B"

    units = _SI_UNITS if si else _BINARY_UNITS
    value = float(num_bytes)
    unit = -1
    scale = 10 ** dp
    while True:
        value /= thresh
        unit += 1
        if round(abs(value) * scale) / scale < thresh or unit >= len(units) - 1:
            break
    return f"{value:.{dp}f} {units[unit]}"


__all__ = [
    "backup_key_for",
    "parse_image_key",
    "outfit_id_from_key",
    "keys_for_outfit",
    "human_file_size",
]
