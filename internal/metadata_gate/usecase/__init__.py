from .decide import decide
from .new import New
from .usecase import MetadataGate

__all__ = ["decide", "New", "MetadataGate"]
