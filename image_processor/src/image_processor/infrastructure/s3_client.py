"""S3 client wrapper for remote store operations."""

import logging
from typing import Any

from botocore.exceptions import BotoCoreError, ClientError

logger = logging.getLogger(__name__)


class S3Client:
    """Handles S3 operations."""

    def __init__(self, client: Any, region: str = "us-east-1", public_base_url: str = ""):
        """
        Initialize S3 client wrapper.

        Args:
            client: boto3 S3 client instance.
            region: Bucket region, used to build public URLs.
            public_base_url: Optional CDN/origin base URL overriding the S3 URL.
        """
        self._client = client
        self._region = region
        self._public_base_url = public_base_url.rstrip("/")

    def put_object(
        self,
        bucket: str,
        key: str,
        body: bytes,
        content_type: str | None = None,
        metadata: dict | None = None,
    ) -> None:
        """
        Upload bytes to S3.

        Args:
            bucket: S3 bucket name.
            key: S3 object key.
            body: Object content.
            content_type: Optional content type.
            metadata: Optional metadata dict.

        Raises:
            ClientError: If the service rejects the upload.
            BotoCoreError: If the request could not be sent.
        """
        extra_args = {}
        if content_type:
            extra_args["ContentType"] = content_type
        if metadata:
            extra_args["Metadata"] = metadata

        logger.info("Uploading %d bytes to s3://%s/%s", len(body), bucket, key)
        try:
            self._client.put_object(Bucket=bucket, Key=key, Body=body, **extra_args)
        except (ClientError, BotoCoreError) as e:
            logger.error("Failed to upload s3://%s/%s: %s", bucket, key, e)
            raise
        logger.info("Uploaded: s3://%s/%s", bucket, key)

    def delete_object(self, bucket: str, key: str) -> bool:
        """
        Delete an object from S3.

        Args:
            bucket: S3 bucket name.
            key: S3 object key.

        Returns:
            True if deletion succeeded, False otherwise.
        """
        try:
            self._client.delete_object(Bucket=bucket, Key=key)
            logger.info("Deleted: s3://%s/%s", bucket, key)
            return True
        except ClientError as e:
            logger.error("Failed to delete s3://%s/%s: %s", bucket, key, e)
            return False

    def object_url(self, bucket: str, key: str) -> str:
        """Build the public HTTPS URL of an object."""
        if self._public_base_url:
            return f"{self._public_base_url}/{key}"
        return f"https://{bucket}.s3.{self._region}.amazonaws.com/{key}"
