"""TorchScript implementation of the report image classifier."""

import logging
from pathlib import Path

import numpy as np
import torch

from image_processor.exceptions import InferenceError, ModelLoadError
from image_processor.models.classifier import SCORE_NAMES, ClassifierModel

logger = logging.getLogger(__name__)


class TorchScriptClassifier(ClassifierModel):
    """Classifier backed by a TorchScript artifact loaded once at startup."""

    def __init__(self, model_path: str, device: str = "cpu", input_layout: str = "nhwc"):
        """
        Load the classifier.

        Args:
            model_path: Path to the TorchScript (.pt) artifact.
            device: Torch device to run inference on.
            input_layout: "nhwc" to feed the batch as-is, "nchw" to move
                channels first before inference.

        Raises:
            ModelLoadError: If the artifact is missing or cannot be loaded.
        """
        self._device = device
        self._input_layout = input_layout

        path = Path(model_path)
        if not path.exists():
            raise ModelLoadError(f"Model file not found: {model_path}")

        logger.info(f"Loading classifier model: {model_path}")
        logger.info(f"Device: {device}, Input layout: {input_layout}")

        try:
            self._model = torch.jit.load(str(path), map_location=device)
            self._model.eval()
        except Exception as e:
            logger.error(f"Failed to load model: {e}")
            raise ModelLoadError(f"Model loading failed: {e}") from e

        logger.info("Model loaded successfully")

    def predict(self, batch: np.ndarray) -> list[float]:
        inputs = torch.from_numpy(batch).to(self._device)
        if self._input_layout == "nchw":
            inputs = inputs.permute(0, 3, 1, 2)

        with torch.inference_mode():
            output = self._model(inputs)

        values = output.reshape(-1).cpu().tolist()
        if len(values) < len(SCORE_NAMES):
            raise InferenceError(
                f"Model returned {len(values)} values, expected {len(SCORE_NAMES)}"
            )
        return values[: len(SCORE_NAMES)]
