"""Duplicate detection for report images."""

import logging
from typing import Any, Sequence

from image_processor.models.schemas import DuplicateCheckResult

logger = logging.getLogger(__name__)


def check_duplicate(buffer: bytes, existing_reports: Sequence[Any]) -> DuplicateCheckResult:
    """
    Compare an image against existing reports.

    Not implemented yet: no image comparison is performed and every image
    is reported as unique.

    Args:
        buffer: Image bytes.
        existing_reports: Reports to compare against.

    Returns:
        DuplicateCheckResult with is_duplicate=False.
    """
    logger.debug(
        "Duplicate check skipped for %d bytes against %d reports",
        len(buffer),
        len(existing_reports),
    )
    return DuplicateCheckResult(
        is_duplicate=False,
        similarity_score=0.0,
        matched_report_id=None,
    )
