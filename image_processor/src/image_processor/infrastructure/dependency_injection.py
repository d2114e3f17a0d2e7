"""Dependency injection container for the application."""

import boto3
from dependency_injector import providers
from dependency_injector.containers import DeclarativeContainer

from image_processor.config import config
from image_processor.infrastructure.s3_client import S3Client


def _create_s3_boto_client(
    region: str,
    access_key: str,
    secret_key: str,
    endpoint_url: str,
):
    """Create boto3 S3 client from the configured remote store credentials."""
    return boto3.client(
        "s3",
        region_name=region,
        aws_access_key_id=access_key or None,
        aws_secret_access_key=secret_key or None,
        endpoint_url=endpoint_url or None,
    )


def _create_image_uploader(s3_client: S3Client, bucket: str, folder: str):
    """Factory for ImageUploader to avoid circular import."""
    from image_processor.services.image_uploader import ImageUploader

    return ImageUploader(s3_client, bucket=bucket, folder=folder)


def _create_classifier_model(model_path: str, device: str, input_layout: str):
    """Factory for the classifier so torch is only imported when the model is loaded."""
    from image_processor.infrastructure.torch_classifier import TorchScriptClassifier

    return TorchScriptClassifier(model_path, device=device, input_layout=input_layout)


class DependenciesContainer(DeclarativeContainer):
    """DI container for the application."""

    # S3 dependency chain
    s3_boto_client = providers.Singleton(
        _create_s3_boto_client,
        region=config.storage_region,
        access_key=config.storage_access_key,
        secret_key=config.storage_secret_key,
        endpoint_url=config.storage_endpoint_url,
    )

    s3_client = providers.Singleton(
        S3Client,
        client=s3_boto_client,
        region=config.storage_region,
        public_base_url=config.storage_public_base_url,
    )

    image_uploader = providers.Singleton(
        _create_image_uploader,
        s3_client=s3_client,
        bucket=config.storage_bucket,
        folder=config.upload_folder,
    )

    # Loaded once, shared read-only by every batch across request threads
    classifier_model = providers.ThreadSafeSingleton(
        _create_classifier_model,
        model_path=config.model_path,
        device=config.model_device,
        input_layout=config.model_input_layout,
    )
