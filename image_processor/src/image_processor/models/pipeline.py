"""Per-file pipeline stages and their allowed transitions."""

from enum import Enum


class PipelineStage(str, Enum):
    """Stage of a single file moving through the pipeline."""

    COMPRESSING = "compressing"
    UPLOADING = "uploading"
    CLASSIFYING = "classifying"
    DONE = "done"
    FAILED = "failed"


# Classification always resolves to DONE, so FAILED is unreachable from it
TRANSITIONS: dict[PipelineStage, frozenset[PipelineStage]] = {
    PipelineStage.COMPRESSING: frozenset({PipelineStage.UPLOADING, PipelineStage.FAILED}),
    PipelineStage.UPLOADING: frozenset({PipelineStage.CLASSIFYING, PipelineStage.FAILED}),
    PipelineStage.CLASSIFYING: frozenset({PipelineStage.DONE}),
    PipelineStage.DONE: frozenset(),
    PipelineStage.FAILED: frozenset(),
}


def advance(current: PipelineStage, target: PipelineStage) -> PipelineStage:
    """
    Move a file to the next stage.

    Args:
        current: Stage the file is in.
        target: Stage to move to.

    Returns:
        The target stage.

    Raises:
        ValueError: If the transition is not allowed.
    """
    if target not in TRANSITIONS[current]:
        raise ValueError(f"Invalid pipeline transition: {current.value} -> {target.value}")
    return target
