"""Configuration management for the report image processor."""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env file from service root
env_path = Path(__file__).parent.parent.parent / ".env"
load_dotenv(env_path)


@dataclass
class Config:
    """Image processor configuration loaded from environment variables."""

    # Remote store
    storage_bucket: str = os.getenv("STORAGE_BUCKET", "")
    storage_access_key: str = os.getenv("STORAGE_ACCESS_KEY", "")
    storage_secret_key: str = os.getenv("STORAGE_SECRET_KEY", "")
    storage_region: str = os.getenv("STORAGE_REGION", "us-east-1")
    storage_endpoint_url: str = os.getenv("STORAGE_ENDPOINT_URL", "")
    storage_public_base_url: str = os.getenv("STORAGE_PUBLIC_BASE_URL", "")
    upload_folder: str = os.getenv("UPLOAD_FOLDER", "mangrove-reports")

    # Classifier model
    model_path: str = os.getenv("AI_MODEL_PATH", "")
    model_device: str = os.getenv("MODEL_DEVICE", "cpu")
    model_input_layout: str = os.getenv("MODEL_INPUT_LAYOUT", "nhwc")

    # Compression
    max_image_dimension: int = int(os.getenv("MAX_IMAGE_DIMENSION", "1200"))
    jpeg_quality: int = int(os.getenv("JPEG_QUALITY", "80"))

    # Intake limits
    max_file_size: int = int(os.getenv("MAX_FILE_SIZE", str(10 * 1024 * 1024)))
    max_files_per_batch: int = int(os.getenv("MAX_FILES_PER_BATCH", "10"))

    def validate(self) -> None:
        """Validate required configuration."""
        if not self.storage_bucket:
            raise ValueError("STORAGE_BUCKET environment variable is required")

        if not self.model_path:
            raise ValueError("AI_MODEL_PATH environment variable is required")

        if self.model_input_layout not in ("nhwc", "nchw"):
            raise ValueError(
                f"MODEL_INPUT_LAYOUT must be 'nhwc' or 'nchw', got '{self.model_input_layout}'"
            )


config = Config()
