"""
Core modules for graymap
"""

from .exceptions import (
    AllocationError,
    ContractViolation,
    EmptyImageError,
    GraymapError,
    ImageFormatError,
    ImageIOError,
)
from .image_manager import ImageManager, StoredImage
from .instrumentation import PixelCounters, counting

__all__ = [
    "AllocationError",
    "ContractViolation",
    "EmptyImageError",
    "GraymapError",
    "ImageFormatError",
    "ImageIOError",
    "ImageManager",
    "StoredImage",
    "PixelCounters",
    "counting",
]
