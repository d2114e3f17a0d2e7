"""AI validation of report images."""

import io
import logging
from contextlib import ExitStack, closing
from typing import Sequence

import numpy as np
from PIL import Image

from image_processor.exceptions import InferenceError
from image_processor.models.classifier import SCORE_NAMES, ClassifierModel
from image_processor.models.schemas import ClassificationScores, ValidationResult

logger = logging.getLogger(__name__)

INPUT_SIZE = (224, 224)

MANGROVE_THRESHOLD = 0.7
RELEVANCE_THRESHOLD = 0.6
DEFORESTATION_THRESHOLD = 0.6
POLLUTION_THRESHOLD = 0.6


def preprocess_image(buffer: bytes) -> np.ndarray:
    """
    Turn image bytes into a model input batch.

    Args:
        buffer: Encoded image bytes.

    Returns:
        Float32 array of shape (1, 224, 224, 3) with values in [0, 1].
    """
    with ExitStack() as stack:
        decoded = stack.enter_context(closing(Image.open(io.BytesIO(buffer))))
        rgb = stack.enter_context(closing(decoded.convert("RGB")))
        resized = stack.enter_context(
            closing(rgb.resize(INPUT_SIZE, Image.Resampling.BILINEAR))
        )
        pixels = np.asarray(resized, dtype=np.float32)

    batched = np.expand_dims(pixels, axis=0)
    return batched / 255.0


def scores_from_predictions(predictions: Sequence[float]) -> ClassificationScores:
    """
    Map raw model output to named scores.

    Values are clamped to [0, 1] so float noise at the edges of a
    probability output does not invalidate the prediction.

    Raises:
        InferenceError: If the model returned fewer than four values.
    """
    values = list(predictions)
    if len(values) < len(SCORE_NAMES):
        raise InferenceError(
            f"Expected {len(SCORE_NAMES)} predictions, got {len(values)}"
        )
    return ClassificationScores(
        **{
            name: min(max(float(value), 0.0), 1.0)
            for name, value in zip(SCORE_NAMES, values)
        }
    )


def labels_from_scores(scores: ClassificationScores) -> list[str]:
    """Derive the label set from scores; labels are independent of each other."""
    labels = []
    if scores.is_mangrove > MANGROVE_THRESHOLD:
        labels.append("MANGROVE")
    if scores.has_deforestation > DEFORESTATION_THRESHOLD:
        labels.append("DEFORESTATION")
    if scores.has_pollution > POLLUTION_THRESHOLD:
        labels.append("POLLUTION")
    return labels


def validate_image(buffer: bytes, model: ClassifierModel) -> ValidationResult:
    """
    Classify an image and decide whether it is valid report evidence.

    Never raises: any decoding or inference failure yields an invalid
    result carrying the error message.

    Args:
        buffer: Compressed image bytes.
        model: Loaded classifier model.

    Returns:
        ValidationResult for the image.
    """
    try:
        batch = preprocess_image(buffer)
        scores = scores_from_predictions(model.predict(batch))
    except Exception as e:
        logger.error("AI validation failed: %s", e, exc_info=True)
        return ValidationResult(
            is_valid=False,
            confidence=0.0,
            labels=[],
            error=str(e) or type(e).__name__,
        )

    result = ValidationResult(
        is_valid=scores.is_mangrove > MANGROVE_THRESHOLD
        and scores.is_relevant > RELEVANCE_THRESHOLD,
        confidence=scores.is_mangrove,
        labels=labels_from_scores(scores),
        scores=scores,
    )
    logger.info(
        "Validation: valid=%s confidence=%.2f labels=%s",
        result.is_valid,
        result.confidence,
        result.labels,
    )
    return result
