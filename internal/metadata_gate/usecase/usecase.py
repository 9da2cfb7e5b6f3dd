from typing import Optional

from pkg.logger.logger import Logger
from internal.metadata_gate.interface import IMetadataGate
from internal.metadata_gate.type import *
from internal.metadata_gate.constant import *
from .decide import decide

# Operator-facing name of each stage in warnings
_STAGE_ACTION = {
    Stage.SNAPSHOT: "backup",
    Stage.REPLACE: "compression",
}


class MetadataGate(IMetadataGate):
    """Decides whether a workflow stage may touch an object.

    Unexpected tags are logged here as warnings; the caller reports the
    ordinary skips with its own stage prefix.
    """

    def __init__(self, logger: Optional[Logger] = None):
        self.logger = logger

    def evaluate(
        self, key: str, state: TagState, stage: Stage, force: bool = False
    ) -> Transition:
        transition = decide(state.tag, stage, force)
        if transition == Transition.SKIP_UNEXPECTED_TAG and self.logger:
            self.logger.warning(
                f"[WARN, {key}] Skipping {_STAGE_ACTION[stage]}, unexpected "
                f"{IMAGE_KIND_TAG}: {state.raw_value}"
            )
        return transition


__all__ = ["MetadataGate"]
