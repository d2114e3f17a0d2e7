"""Abstract classifier model interface."""

from abc import ABC, abstractmethod
from typing import Sequence

import numpy as np

# Output order of every classifier model
SCORE_NAMES = ("is_mangrove", "has_deforestation", "has_pollution", "is_relevant")


class ClassifierModel(ABC):
    """Pretrained image classifier shared read-only by all pipeline runs."""

    @abstractmethod
    def predict(self, batch: np.ndarray) -> Sequence[float]:
        """
        Run the classifier over a single-image batch.

        Args:
            batch: Float32 array of shape (1, 224, 224, 3) scaled to [0, 1].

        Returns:
            Four probabilities ordered as SCORE_NAMES.
        """
        pass
