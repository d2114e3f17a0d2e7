"""Services package."""

from .classifier import labels_from_scores, preprocess_image, validate_image
from .compressor import compress_image
from .duplicate_checker import check_duplicate
from .image_uploader import ImageUploader, detect_resource_type
from .intake import validate_uploads

__all__ = [
    "labels_from_scores",
    "preprocess_image",
    "validate_image",
    "compress_image",
    "check_duplicate",
    "ImageUploader",
    "detect_resource_type",
    "validate_uploads",
]
