"""Data types for the metadata gate."""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional

from .constant import *


class ClassificationTag(str, Enum):
    """Processing state recorded in the reserved tag.

    NONE means the reserved tag is absent. UNRECOGNIZED covers every value
    outside the closed set; such objects are never overwritten.
    """

    NONE = "none"
    BACKUP = TAG_VALUE_BACKUP
    COMPRESSED = TAG_VALUE_COMPRESSED
    COMPRESSION_FAILED = TAG_VALUE_COMPRESSION_FAILED
    UNRECOGNIZED = "unrecognized"


_KNOWN_VALUES = {
    TAG_VALUE_BACKUP: ClassificationTag.BACKUP,
    TAG_VALUE_COMPRESSED: ClassificationTag.COMPRESSED,
    TAG_VALUE_COMPRESSION_FAILED: ClassificationTag.COMPRESSION_FAILED,
}


class Stage(str, Enum):
    SNAPSHOT = "snapshot"
    REPLACE = "replace"


class Transition(str, Enum):
    PROCEED = "proceed"
    SKIP_ALREADY_DONE = "skip-already-done"
    SKIP_UNEXPECTED_TAG = "skip-unexpected-tag"
    SKIP_PRIOR_FAILURE = "skip-prior-failure"


@dataclass(frozen=True)
class TagState:
    """Classification of one object plus the raw tag value it came from.

    Attributes:
        tag: Parsed classification
        raw_value: Stored value of the reserved tag, None when absent
    """

    tag: ClassificationTag
    raw_value: Optional[str] = None

    @classmethod
    def from_tags(cls, tags: Dict[str, str]) -> "TagState":
        raw = tags.get(IMAGE_KIND_TAG)
        if raw is None:
            return cls(ClassificationTag.NONE)
        return cls(_KNOWN_VALUES.get(raw, ClassificationTag.UNRECOGNIZED), raw)

    @classmethod
    def untagged_existing(cls) -> "TagState":
        """State of an object that exists but carries no reserved tag where one is required."""
        return cls(ClassificationTag.UNRECOGNIZED, None)


# Terminal tag value per stage
TERMINAL_TAG = {
    Stage.SNAPSHOT: ClassificationTag.BACKUP,
    Stage.REPLACE: ClassificationTag.COMPRESSED,
}


__all__ = [
    "ClassificationTag",
    "Stage",
    "Transition",
    "TagState",
    "TERMINAL_TAG",
]
