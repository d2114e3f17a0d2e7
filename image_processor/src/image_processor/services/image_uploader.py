"""Remote store upload service for report images."""

import io
import logging
import uuid

from botocore.exceptions import BotoCoreError, ClientError
from PIL import Image, UnidentifiedImageError

from image_processor.exceptions import UploadError
from image_processor.infrastructure.s3_client import S3Client
from image_processor.models.schemas import UploadResult

logger = logging.getLogger(__name__)

DEFAULT_FOLDER = "mangrove-reports"

_EXTENSIONS = {
    "JPEG": ".jpg",
    "PNG": ".png",
    "GIF": ".gif",
    "WEBP": ".webp",
}


def detect_resource_type(buffer: bytes) -> tuple[str, str]:
    """
    Detect the content type and file extension of an uploaded buffer.

    Args:
        buffer: Raw file bytes.

    Returns:
        Tuple of (content type, extension). Unknown content falls back to
        ("application/octet-stream", "").
    """
    try:
        with Image.open(io.BytesIO(buffer)) as img:
            image_format = img.format
    except (UnidentifiedImageError, OSError):
        return "application/octet-stream", ""

    content_type = Image.MIME.get(image_format, "application/octet-stream")
    extension = _EXTENSIONS.get(image_format, "")
    return content_type, extension


class ImageUploader:
    """Handles uploading report images to the remote store."""

    def __init__(self, s3_client: S3Client, bucket: str, folder: str = DEFAULT_FOLDER):
        """
        Initialize image uploader.

        Args:
            s3_client: S3Client instance.
            bucket: Destination bucket name.
            folder: Logical folder (key prefix) for report images.
        """
        self._s3_client = s3_client
        self._bucket = bucket
        self._folder = folder.strip("/")

    @property
    def bucket(self) -> str:
        """Get the destination bucket name."""
        return self._bucket

    @property
    def folder(self) -> str:
        """Get the logical folder images are stored under."""
        return self._folder

    def upload(self, buffer: bytes) -> UploadResult:
        """
        Upload an image and return its public location.

        Args:
            buffer: Image bytes to store.

        Returns:
            UploadResult with the public URL and the object key.

        Raises:
            UploadError: If the remote store fails.
        """
        content_type, extension = detect_resource_type(buffer)
        remote_id = f"{self._folder}/{uuid.uuid4().hex}{extension}"

        try:
            self._s3_client.put_object(
                bucket=self._bucket,
                key=remote_id,
                body=buffer,
                content_type=content_type,
            )
        except (ClientError, BotoCoreError) as e:
            raise UploadError(
                f"Failed to upload image to {self._bucket}: {e}",
                provider_error=e,
                details={"bucket": self._bucket, "key": remote_id},
            ) from e

        remote_url = self._s3_client.object_url(self._bucket, remote_id)
        return UploadResult(remote_url=remote_url, remote_id=remote_id)

    def delete(self, remote_id: str) -> bool:
        """
        Delete a previously uploaded image.

        Args:
            remote_id: Object key returned by upload().

        Returns:
            True if the image was deleted, False otherwise.
        """
        return self._s3_client.delete_object(self._bucket, remote_id)
