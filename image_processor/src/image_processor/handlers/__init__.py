"""Handlers package."""

from image_processor.handlers.report_images import process_file, process_images

__all__ = ["process_file", "process_images"]
