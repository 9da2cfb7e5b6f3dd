from typing import Protocol, runtime_checkable

from .type import Stage, TagState, Transition


@runtime_checkable
class IMetadataGate(Protocol):
    """Protocol for deciding a stage transition from an object's tag state."""

    def evaluate(self, key: str, state: TagState, stage: Stage, force: bool = False) -> Transition:
        """Decide the transition for ``stage`` and log skips."""
        ...


__all__ = ["IMetadataGate"]
