"""Exceptions raised by the image processing pipeline."""


class ImageProcessingError(Exception):
    """Base exception for the image processing pipeline."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.details = details or {}


class DecodeError(ImageProcessingError):
    """Uploaded bytes are not a decodable image."""


class UploadError(ImageProcessingError):
    """Remote store rejected or failed an upload."""

    def __init__(
        self,
        message: str,
        provider_error: Exception | None = None,
        details: dict | None = None,
    ):
        super().__init__(message, details)
        self.provider_error = provider_error


class InferenceError(ImageProcessingError):
    """Classifier produced no usable prediction."""


class InvalidUploadError(ImageProcessingError):
    """Uploaded file rejected by the intake checks."""


class ModelLoadError(ImageProcessingError):
    """Classifier artifact could not be loaded."""
