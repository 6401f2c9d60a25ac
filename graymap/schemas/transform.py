"""
Transformation API models.

Request and response models for pixel, geometric, compositing and
filtering operations on stored images.
"""

from typing import Dict, Optional

from pydantic import BaseModel, Field

from graymap.core.constants import PixelConstants

from .common import Point, Rect
from .image import ImageInfo


class ThresholdRequest(BaseModel):
    """Request to threshold an image"""

    threshold: int = Field(..., ge=0, le=PixelConstants.PIX_MAX + 1)


class BrightenRequest(BaseModel):
    """Request to brighten (factor > 1) or darken (factor < 1) an image"""

    factor: float = Field(..., description="Multiplicative factor, results saturate")


class CropRequest(BaseModel):
    """Request to crop a rectangle into a new image"""

    rect: Rect


class PasteRequest(BaseModel):
    """Request to paste a stored image into another"""

    source_id: str = Field(..., description="Image to paste")
    position: Point = Field(..., description="Top-left target position")


class BlendRequest(PasteRequest):
    """Request to alpha-blend a stored image into another"""

    alpha: float = Field(default=0.5, description="Weight of the pasted image")


class TransformResponse(BaseModel):
    """Result of an operation on a stored image"""

    image: ImageInfo
    processing_time_ms: float
    counters: Optional[Dict[str, float]] = None
