"""Report image handler for orchestrating the image processing pipeline."""

import logging
from typing import Sequence

from image_processor.models.classifier import ClassifierModel
from image_processor.models.pipeline import PipelineStage, advance
from image_processor.models.schemas import ProcessedImageRecord, UploadedFile
from image_processor.services import compress_image, validate_image
from image_processor.services.compressor import JPEG_QUALITY, MAX_DIMENSION
from image_processor.services.image_uploader import ImageUploader

logger = logging.getLogger(__name__)


def process_file(
    file: UploadedFile,
    uploader: ImageUploader,
    classifier: ClassifierModel,
    max_dimension: int = MAX_DIMENSION,
    quality: int = JPEG_QUALITY,
) -> ProcessedImageRecord:
    """
    Compress, upload, and classify a single uploaded image.

    Args:
        file: Uploaded file.
        uploader: Remote store uploader.
        classifier: Loaded classifier model.
        max_dimension: Maximum width/height after compression.
        quality: JPEG quality used for compression.

    Returns:
        ProcessedImageRecord for the file.

    Raises:
        DecodeError: If the file is not a decodable image.
        UploadError: If the remote store fails.
    """
    stage = PipelineStage.COMPRESSING

    try:
        compressed = compress_image(file.buffer, max_dimension=max_dimension, quality=quality)

        stage = advance(stage, PipelineStage.UPLOADING)
        uploaded = uploader.upload(compressed)

        stage = advance(stage, PipelineStage.CLASSIFYING)
    except Exception as e:
        logger.error(
            "Failed to process %s while %s: %s",
            file.filename or "image",
            stage.value,
            e,
            exc_info=True,
        )
        advance(stage, PipelineStage.FAILED)
        raise

    validation = validate_image(compressed, classifier)
    advance(stage, PipelineStage.DONE)

    return ProcessedImageRecord(
        url=uploaded.remote_url,
        remote_id=uploaded.remote_id,
        ai_validated=True,
        ai_score=validation.confidence,
        validation=validation,
    )


def process_images(
    files: Sequence[UploadedFile],
    uploader: ImageUploader,
    classifier: ClassifierModel,
    max_dimension: int = MAX_DIMENSION,
    quality: int = JPEG_QUALITY,
) -> list[ProcessedImageRecord]:
    """
    Process every image of a report, one after another, in order.

    A compression or upload failure aborts the whole batch and no records
    are returned. Classification failures are recorded in the validation
    result instead.

    Args:
        files: Uploaded files in submission order.
        uploader: Remote store uploader.
        classifier: Loaded classifier model.
        max_dimension: Maximum width/height after compression.
        quality: JPEG quality used for compression.

    Returns:
        One ProcessedImageRecord per input file, in input order.
    """
    logger.info(f"Images to process: {len(files)}")

    records = []
    for i, file in enumerate(files, start=1):
        logger.info(f"[{i}/{len(files)}] Processing {file.filename or 'image'}")
        records.append(
            process_file(
                file,
                uploader=uploader,
                classifier=classifier,
                max_dimension=max_dimension,
                quality=quality,
            )
        )

    valid_count = sum(1 for record in records if record.validation.is_valid)
    logger.info(f"Completed: {len(records)} processed, {valid_count} validated as mangrove")
    return records
