"""Main entry point for processing report images from local files."""

import argparse
import json
import logging
import sys
from pathlib import Path

from image_processor.config import config
from image_processor.exceptions import ImageProcessingError
from image_processor.handlers import process_images
from image_processor.infrastructure.dependency_injection import DependenciesContainer
from image_processor.models.schemas import UploadedFile
from image_processor.services import validate_uploads

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[
        logging.StreamHandler(sys.stdout),
    ],
)
logger = logging.getLogger(__name__)


def load_files(paths: list[str]) -> list[UploadedFile]:
    """
    Read local image files into uploaded files.

    Args:
        paths: Paths of the images to read.

    Returns:
        UploadedFile per path, in the given order.
    """
    files = []
    for path in paths:
        local_path = Path(path)
        files.append(UploadedFile(buffer=local_path.read_bytes(), filename=local_path.name))
    return files


def run(paths: list[str]) -> list[dict]:
    """
    Process local images as one report batch.

    Args:
        paths: Paths of the images to process.

    Returns:
        JSON-ready processed image records.
    """
    logger.info("=" * 60)
    logger.info("Starting report image processing")
    logger.info("=" * 60)

    config.validate()

    files = load_files(paths)
    validate_uploads(
        files,
        max_file_size=config.max_file_size,
        max_files=config.max_files_per_batch,
    )

    container = DependenciesContainer()

    # Pre-load model
    logger.info("Pre-loading classifier model...")
    classifier = container.classifier_model()
    logger.info("Model ready")

    records = process_images(
        files,
        uploader=container.image_uploader(),
        classifier=classifier,
        max_dimension=config.max_image_dimension,
        quality=config.jpeg_quality,
    )
    return [record.to_json_dict() for record in records]


def main():
    """Entry point with CLI argument parsing."""
    parser = argparse.ArgumentParser(
        description="Compress, upload, and AI-validate report images"
    )
    parser.add_argument(
        "files",
        nargs="+",
        help="Local image files of one report (e.g., photo1.jpg photo2.png)",
    )

    args = parser.parse_args()

    try:
        records = run(args.files)
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        sys.exit(0)
    except (ImageProcessingError, ValueError, OSError) as e:
        logger.error(f"Fatal error: {e}", exc_info=True)
        sys.exit(1)

    print(json.dumps(records, indent=2))


if __name__ == "__main__":
    main()
