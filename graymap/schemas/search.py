"""
Sub-image search API models.
"""

from typing import Dict, Optional

from pydantic import BaseModel, Field

from .common import Point


class LocateRequest(BaseModel):
    """Request to find a stored sub-image inside another stored image"""

    image_id: str = Field(..., description="Image to search in")
    sub_image_id: str = Field(..., description="Image to search for")


class MatchRequest(LocateRequest):
    """Request to compare a sub-image at one anchor position"""

    position: Point = Field(..., description="Anchor (top-left) position in the image")


class SearchResponse(BaseModel):
    """Result of a locate or match request"""

    found: bool
    position: Optional[Point] = None
    processing_time_ms: float
    counters: Optional[Dict[str, float]] = None
