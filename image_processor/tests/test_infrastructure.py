"""Tests for infrastructure layer."""

from unittest.mock import MagicMock

import pytest
from botocore.exceptions import ClientError
from dependency_injector import providers

from image_processor.config import config
from image_processor.infrastructure.dependency_injection import DependenciesContainer
from image_processor.infrastructure.s3_client import S3Client
from image_processor.services.image_uploader import ImageUploader


class TestS3Client:
    """Tests for S3Client."""

    def test_put_object_success(self):
        """Test put_object sends body, content type, and metadata."""
        mock_boto_client = MagicMock()

        client = S3Client(mock_boto_client)
        client.put_object(
            bucket="test-bucket",
            key="mangrove-reports/a.jpg",
            body=b"data",
            content_type="image/jpeg",
            metadata={"source": "test"},
        )

        mock_boto_client.put_object.assert_called_once_with(
            Bucket="test-bucket",
            Key="mangrove-reports/a.jpg",
            Body=b"data",
            ContentType="image/jpeg",
            Metadata={"source": "test"},
        )

    def test_put_object_without_extra_args(self):
        """Test put_object omits unset optional arguments."""
        mock_boto_client = MagicMock()

        client = S3Client(mock_boto_client)
        client.put_object(bucket="test-bucket", key="k", body=b"data")

        mock_boto_client.put_object.assert_called_once_with(
            Bucket="test-bucket", Key="k", Body=b"data"
        )

    def test_put_object_raises_on_client_error(self):
        """Test put_object propagates service errors."""
        mock_boto_client = MagicMock()
        mock_boto_client.put_object.side_effect = ClientError(
            {"Error": {"Code": "AccessDenied"}}, "PutObject"
        )

        client = S3Client(mock_boto_client)

        with pytest.raises(ClientError):
            client.put_object(bucket="test-bucket", key="k", body=b"data")

    def test_delete_object_success(self):
        """Test delete_object returns True on success."""
        mock_boto_client = MagicMock()

        client = S3Client(mock_boto_client)

        assert client.delete_object("test-bucket", "k") is True
        mock_boto_client.delete_object.assert_called_once_with(Bucket="test-bucket", Key="k")

    def test_delete_object_failure(self):
        """Test delete_object returns False on failure."""
        mock_boto_client = MagicMock()
        mock_boto_client.delete_object.side_effect = ClientError(
            {"Error": {"Code": "NoSuchBucket"}}, "DeleteObject"
        )

        client = S3Client(mock_boto_client)

        assert client.delete_object("test-bucket", "k") is False

    def test_object_url_default(self):
        """Test object_url builds the regional S3 URL."""
        client = S3Client(MagicMock(), region="eu-west-1")

        assert (
            client.object_url("test-bucket", "mangrove-reports/a.jpg")
            == "https://test-bucket.s3.eu-west-1.amazonaws.com/mangrove-reports/a.jpg"
        )

    def test_object_url_public_base(self):
        """Test object_url uses the public base URL when configured."""
        client = S3Client(MagicMock(), public_base_url="https://cdn.example.org/")

        assert (
            client.object_url("test-bucket", "mangrove-reports/a.jpg")
            == "https://cdn.example.org/mangrove-reports/a.jpg"
        )


class TestDependenciesContainer:
    """Tests for DependenciesContainer wiring."""

    def test_image_uploader_wiring(self):
        """Test the uploader is built on the configured bucket and folder."""
        container = DependenciesContainer()
        container.s3_boto_client.override(providers.Object(MagicMock()))

        uploader = container.image_uploader()

        assert isinstance(uploader, ImageUploader)
        assert uploader.bucket == config.storage_bucket
        assert uploader.folder == config.upload_folder.strip("/")

    def test_image_uploader_is_singleton(self):
        """Test the same uploader instance is shared."""
        container = DependenciesContainer()
        container.s3_boto_client.override(providers.Object(MagicMock()))

        assert container.image_uploader() is container.image_uploader()

    def test_classifier_model_override(self):
        """Test the classifier handle can be swapped for a fake model."""
        fake_model = MagicMock()
        container = DependenciesContainer()
        container.classifier_model.override(providers.Object(fake_model))

        assert container.classifier_model() is fake_model

    def test_classifier_model_is_thread_safe_singleton(self):
        """Test the shared model handle is created under a lock."""
        container = DependenciesContainer()

        assert isinstance(container.classifier_model, providers.ThreadSafeSingleton)
