"""Intake checks for files attached to a report submission."""

import logging
from pathlib import Path
from typing import Sequence

from image_processor.exceptions import InvalidUploadError
from image_processor.models.schemas import UploadedFile

logger = logging.getLogger(__name__)

ALLOWED_EXTENSIONS = {".jpeg", ".jpg", ".png", ".gif"}
ALLOWED_CONTENT_TYPES = {"image/jpeg", "image/jpg", "image/png", "image/gif"}

DEFAULT_MAX_FILE_SIZE = 10 * 1024 * 1024
DEFAULT_MAX_FILES = 10


def validate_uploads(
    files: Sequence[UploadedFile],
    max_file_size: int = DEFAULT_MAX_FILE_SIZE,
    max_files: int = DEFAULT_MAX_FILES,
) -> None:
    """
    Reject a batch that breaks the upload limits.

    Filename and content type are only checked when the caller supplied them.

    Args:
        files: Files attached to one report.
        max_file_size: Maximum size of a single file in bytes.
        max_files: Maximum number of files in one batch.

    Raises:
        InvalidUploadError: On the first file or limit that is violated.
    """
    if len(files) > max_files:
        raise InvalidUploadError(
            f"Too many files: {len(files)} (maximum {max_files})",
            details={"count": len(files), "max_files": max_files},
        )

    for index, file in enumerate(files):
        name = file.filename or f"file #{index + 1}"

        if file.size == 0:
            raise InvalidUploadError(f"{name} is empty", details={"index": index})

        if file.size > max_file_size:
            raise InvalidUploadError(
                f"{name} is {file.size} bytes (maximum {max_file_size})",
                details={"index": index, "size": file.size},
            )

        if file.filename and Path(file.filename).suffix.lower() not in ALLOWED_EXTENSIONS:
            raise InvalidUploadError(
                f"{name}: only image files are allowed", details={"index": index}
            )

        if file.content_type and file.content_type.lower() not in ALLOWED_CONTENT_TYPES:
            raise InvalidUploadError(
                f"{name}: unsupported content type {file.content_type}",
                details={"index": index},
            )

    logger.debug("Accepted %d uploaded files", len(files))
