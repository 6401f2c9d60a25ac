"""
Tests for configuration loading
"""

import pytest
from pydantic import ValidationError

from graymap.config import Settings, load_settings
from graymap.core.constants import APIConstants, ImageConstants


class TestSettings:
    """Test settings defaults and environment overrides"""

    def test_defaults(self):
        """Without environment variables the constants apply"""
        settings = load_settings({})

        assert settings.environment == "development"
        assert settings.system.log_level == "INFO"
        assert settings.api.port == APIConstants.DEFAULT_PORT
        assert settings.image.max_images == ImageConstants.DEFAULT_MAX_IMAGES
        assert settings.image.max_dimension == ImageConstants.MAX_IMAGE_DIMENSION
        assert settings.instrumentation.enabled

    def test_environment_overrides(self):
        """GRAYMAP_* variables override fields"""
        settings = load_settings(
            {
                "GRAYMAP_ENVIRONMENT": "production",
                "GRAYMAP_LOG_LEVEL": "debug",
                "GRAYMAP_API_PORT": "9000",
                "GRAYMAP_CORS_ORIGINS": "http://a.example, http://b.example",
                "GRAYMAP_MAX_IMAGES": "5",
                "GRAYMAP_INSTRUMENTATION": "false",
                "UNRELATED": "ignored",
            }
        )

        assert settings.environment == "production"
        assert settings.system.log_level == "DEBUG"
        assert settings.api.port == 9000
        assert settings.api.cors_origins == ["http://a.example", "http://b.example"]
        assert settings.image.max_images == 5
        assert settings.instrumentation.enabled is False

    def test_invalid_log_level(self):
        """Unknown log levels are rejected"""
        with pytest.raises(ValidationError):
            load_settings({"GRAYMAP_LOG_LEVEL": "chatty"})

    def test_invalid_port(self):
        """Ports must be in range"""
        with pytest.raises(ValidationError):
            load_settings({"GRAYMAP_API_PORT": "70000"})

    def test_to_dict(self):
        """to_dict exposes every section"""
        data = Settings().to_dict()

        assert set(data) == {"environment", "system", "api", "image", "instrumentation"}
        assert data["image"]["include_preview"] is True
