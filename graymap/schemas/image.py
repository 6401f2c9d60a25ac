"""
Image management API models.

This module contains models for image operations:
- Image creation requests
- Image information responses
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from graymap.core.constants import ImageConstants, PixelConstants

from .common import Size


class ImageCreateRequest(BaseModel):
    """Request to create a new black image"""

    width: int = Field(..., ge=0, le=ImageConstants.MAX_IMAGE_DIMENSION)
    height: int = Field(..., ge=0, le=ImageConstants.MAX_IMAGE_DIMENSION)
    maxval: int = Field(
        default=ImageConstants.DEFAULT_MAXVAL,
        ge=PixelConstants.MIN_MAXVAL,
        le=PixelConstants.PIX_MAX,
        description="Gray level rendered as pure white",
    )


class ImageInfo(BaseModel):
    """Stored image information"""

    id: str
    size: Size
    maxval: int
    min_level: Optional[int] = Field(default=None, description="None for empty images")
    max_level: Optional[int] = Field(default=None, description="None for empty images")
    preview_base64: Optional[str] = Field(default=None, description="PNG preview")


class ImageListResponse(BaseModel):
    """List of stored images"""

    images: List[ImageInfo]
    total: int
