from internal.metadata_gate.type import (
    ClassificationTag,
    Stage,
    TERMINAL_TAG,
    Transition,
)


def decide(tag: ClassificationTag, stage: Stage, force: bool = False) -> Transition:
    """Map an object's classification to the transition for ``stage``.

    Rules apply in order: force, missing tag, terminal value, prior
    compression failure (replace stage only), anything else.
    """
    if force:
        return Transition.PROCEED

    if tag == ClassificationTag.NONE:
        return Transition.PROCEED

    if tag == TERMINAL_TAG[stage]:
        return Transition.SKIP_ALREADY_DONE

    if stage == Stage.REPLACE and tag == ClassificationTag.COMPRESSION_FAILED:
        return Transition.SKIP_PRIOR_FAILURE

    return Transition.SKIP_UNEXPECTED_TAG


__all__ = ["decide"]
