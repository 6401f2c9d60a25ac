"""
Service layer for graymap
"""

from .image_service import ImageService

__all__ = ["ImageService"]
