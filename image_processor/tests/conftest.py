"""Shared fixtures for image processor tests."""

import io

import pytest
from PIL import Image


def _encode_image(
    size: tuple[int, int] = (64, 48),
    image_format: str = "JPEG",
    mode: str = "RGB",
    color=(20, 120, 60),
) -> bytes:
    """Encode a solid-color image in memory."""
    if mode == "RGBA" and len(color) == 3:
        color = (*color, 128)
    output = io.BytesIO()
    Image.new(mode, size, color).save(output, image_format)
    return output.getvalue()


@pytest.fixture
def make_image():
    """Factory building encoded solid-color images."""
    return _encode_image


@pytest.fixture
def jpeg_bytes(make_image) -> bytes:
    """Small JPEG image."""
    return make_image()


@pytest.fixture
def large_png_bytes(make_image) -> bytes:
    """PNG larger than the compression bound in both dimensions."""
    return make_image(size=(2400, 1800), image_format="PNG")
