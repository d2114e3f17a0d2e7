"""Tests for configuration validation."""

import pytest

from image_processor.config import Config


class TestConfig:
    """Tests for Config.validate."""

    def test_validate_success(self):
        """Test a complete configuration validates."""
        Config(storage_bucket="reports", model_path="/models/mangrove.pt").validate()

    def test_missing_bucket(self):
        """Test the remote store bucket is required."""
        with pytest.raises(ValueError, match="STORAGE_BUCKET"):
            Config(storage_bucket="", model_path="/models/mangrove.pt").validate()

    def test_missing_model_path(self):
        """Test the model path is required."""
        with pytest.raises(ValueError, match="AI_MODEL_PATH"):
            Config(storage_bucket="reports", model_path="").validate()

    def test_invalid_input_layout(self):
        """Test only known input layouts are accepted."""
        with pytest.raises(ValueError, match="MODEL_INPUT_LAYOUT"):
            Config(
                storage_bucket="reports",
                model_path="/models/mangrove.pt",
                model_input_layout="chw",
            ).validate()

    def test_defaults(self):
        """Test compression defaults."""
        cfg = Config()

        assert cfg.upload_folder
        assert cfg.max_image_dimension > 0
        assert 0 < cfg.jpeg_quality <= 100
