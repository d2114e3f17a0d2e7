"""Image compression for report photos."""

import io
import logging
from contextlib import ExitStack, closing

from PIL import Image, UnidentifiedImageError

from image_processor.exceptions import DecodeError

logger = logging.getLogger(__name__)

MAX_DIMENSION = 1200
JPEG_QUALITY = 80


def compress_image(
    buffer: bytes,
    max_dimension: int = MAX_DIMENSION,
    quality: int = JPEG_QUALITY,
) -> bytes:
    """
    Re-encode an image as JPEG bounded to max_dimension x max_dimension.

    The aspect ratio is preserved and smaller images are never enlarged.

    Args:
        buffer: Raw bytes in any format Pillow can decode.
        max_dimension: Maximum width and height of the output.
        quality: JPEG quality on a 0-100 scale.

    Returns:
        JPEG-encoded bytes.

    Raises:
        DecodeError: If the buffer is not a decodable image.
    """
    if not buffer:
        raise DecodeError("Empty image buffer")

    try:
        with ExitStack() as stack:
            img = stack.enter_context(closing(Image.open(io.BytesIO(buffer))))
            img.load()
            original_size = img.size
            rgb = stack.enter_context(closing(img.convert("RGB")))
            rgb.thumbnail((max_dimension, max_dimension), Image.Resampling.LANCZOS)
            output = io.BytesIO()
            rgb.save(output, "JPEG", quality=quality)
            compressed_size = rgb.size
    except (UnidentifiedImageError, OSError, ValueError, Image.DecompressionBombError) as e:
        raise DecodeError(f"Could not decode image: {e}") from e

    data = output.getvalue()
    logger.info(
        "Compressed image %sx%s -> %sx%s (%d -> %d bytes)",
        original_size[0],
        original_size[1],
        compressed_size[0],
        compressed_size[1],
        len(buffer),
        len(data),
    )
    return data
