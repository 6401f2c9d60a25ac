"""
Schemas Package

Pydantic schemas for data validation and serialization, organized by
domain. Shared by the API, the services and the core algorithms.
"""

# Common models (core data structures)
from .common import Point, Rect, Size

# Image management models
from .image import ImageCreateRequest, ImageInfo, ImageListResponse

# Search models
from .search import LocateRequest, MatchRequest, SearchResponse

# Transformation models
from .transform import (
    BlendRequest,
    BrightenRequest,
    CropRequest,
    PasteRequest,
    ThresholdRequest,
    TransformResponse,
)

__all__ = [
    # Common models
    "Point",
    "Rect",
    "Size",
    # Image models
    "ImageCreateRequest",
    "ImageInfo",
    "ImageListResponse",
    # Search models
    "LocateRequest",
    "MatchRequest",
    "SearchResponse",
    # Transformation models
    "BlendRequest",
    "BrightenRequest",
    "CropRequest",
    "PasteRequest",
    "ThresholdRequest",
    "TransformResponse",
]
