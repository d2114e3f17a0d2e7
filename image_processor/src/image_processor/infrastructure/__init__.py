"""Infrastructure package."""

from image_processor.infrastructure.dependency_injection import DependenciesContainer
from image_processor.infrastructure.s3_client import S3Client

__all__ = [
    "DependenciesContainer",
    "S3Client",
]
