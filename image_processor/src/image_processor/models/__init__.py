"""Models package."""

from image_processor.models.classifier import SCORE_NAMES, ClassifierModel
from image_processor.models.pipeline import PipelineStage, advance
from image_processor.models.schemas import (
    ClassificationScores,
    DuplicateCheckResult,
    ProcessedImageRecord,
    UploadedFile,
    UploadResult,
    ValidationResult,
)

__all__ = [
    "SCORE_NAMES",
    "ClassifierModel",
    "PipelineStage",
    "advance",
    "ClassificationScores",
    "DuplicateCheckResult",
    "ProcessedImageRecord",
    "UploadedFile",
    "UploadResult",
    "ValidationResult",
]
