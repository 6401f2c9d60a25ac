"""
Configuration for graymap.

Settings are pydantic models with defaults from core.constants; any field
can be overridden through GRAYMAP_* environment variables, e.g.
GRAYMAP_LOG_LEVEL=DEBUG or GRAYMAP_API_PORT=9000.
"""

import logging
import os
from functools import lru_cache
from typing import Any, Dict, List, Mapping, Optional

from pydantic import BaseModel, Field, field_validator

from graymap.core.constants import (
    APIConstants,
    ImageConstants,
    SystemConstants,
)

logger = logging.getLogger(__name__)


class SystemSettings(BaseModel):
    """Logging and debug settings"""

    log_level: str = SystemConstants.LOG_LEVEL_DEFAULT
    debug: bool = False

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level: {value}")
        return level


class APISettings(BaseModel):
    """HTTP server settings"""

    host: str = APIConstants.DEFAULT_HOST
    port: int = Field(default=APIConstants.DEFAULT_PORT, ge=1, le=65535)
    cors_enabled: bool = True
    cors_origins: List[str] = Field(default_factory=lambda: ["*"])


class ImageSettings(BaseModel):
    """Image store settings"""

    max_images: int = Field(
        default=ImageConstants.DEFAULT_MAX_IMAGES,
        ge=ImageConstants.MIN_IMAGES,
        le=ImageConstants.MAX_IMAGES,
    )
    max_memory_mb: int = Field(default=ImageConstants.DEFAULT_MAX_MEMORY_MB, ge=1)
    max_dimension: int = Field(default=ImageConstants.MAX_IMAGE_DIMENSION, ge=1)
    include_preview: bool = True


class InstrumentationSettings(BaseModel):
    """Operation counter settings"""

    enabled: bool = True


class Settings(BaseModel):
    """Complete application settings"""

    environment: str = "development"
    system: SystemSettings = Field(default_factory=SystemSettings)
    api: APISettings = Field(default_factory=APISettings)
    image: ImageSettings = Field(default_factory=ImageSettings)
    instrumentation: InstrumentationSettings = Field(default_factory=InstrumentationSettings)

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump()


# Environment variable (without prefix) -> (section, field)
_ENV_FIELDS = {
    "ENVIRONMENT": (None, "environment"),
    "LOG_LEVEL": ("system", "log_level"),
    "DEBUG": ("system", "debug"),
    "API_HOST": ("api", "host"),
    "API_PORT": ("api", "port"),
    "CORS_ENABLED": ("api", "cors_enabled"),
    "CORS_ORIGINS": ("api", "cors_origins"),
    "MAX_IMAGES": ("image", "max_images"),
    "MAX_MEMORY_MB": ("image", "max_memory_mb"),
    "MAX_DIMENSION": ("image", "max_dimension"),
    "INCLUDE_PREVIEW": ("image", "include_preview"),
    "INSTRUMENTATION": ("instrumentation", "enabled"),
}


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Build settings from defaults and GRAYMAP_* environment variables.

    Args:
        environ: Environment mapping (defaults to os.environ)

    Returns:
        Validated settings
    """
    environ = os.environ if environ is None else environ
    data: Dict[str, Any] = {}

    for name, (section, key) in _ENV_FIELDS.items():
        raw = environ.get(f"{SystemConstants.ENV_PREFIX}{name}")
        if raw is None:
            continue
        value: Any = raw
        if key == "cors_origins":
            value = [origin.strip() for origin in raw.split(",") if origin.strip()]
        if section is None:
            data[key] = value
        else:
            data.setdefault(section, {})[key] = value

    return Settings(**data)


@lru_cache()
def get_settings() -> Settings:
    """Get cached application settings"""
    return load_settings()
