from .errors import ErrUnexpectedTag
from .interface import IMetadataGate
from .type import ClassificationTag, Stage, TagState, Transition
from .usecase.decide import decide
from .usecase.new import New as NewMetadataGate

__all__ = [
    "ErrUnexpectedTag",
    "IMetadataGate",
    "ClassificationTag",
    "Stage",
    "TagState",
    "Transition",
    "decide",
    "NewMetadataGate",
]
