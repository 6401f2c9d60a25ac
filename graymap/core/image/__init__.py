"""
Graymap image package - modular architecture.

This package provides the image value type and its operations:
- buffer: Image data model, pixel access and bounds predicates
- processors: Pixel level transformations (negative, threshold, brighten)
- geometry: Geometric transformations (rotate, mirror, crop, paste)
- composite: Two-image operations (blend, sub-image match)
- pgm: Binary graymap file reading and writing
- converters: Format conversions (NumPy, PIL, base64)
"""

from graymap.core.image import pgm
from graymap.core.image.buffer import (
    PIX_MAX,
    Image,
    create,
    destroy,
    get_pixel,
    height,
    maxval,
    pixel_index,
    set_pixel,
    stats,
    valid_pos,
    valid_rect,
    width,
)
from graymap.core.image.composite import blend, match_sub_image
from graymap.core.image.converters import ImageConverters
from graymap.core.image.geometry import crop, mirror, paste, rotate
from graymap.core.image.processors import brighten, negative, threshold

__all__ = [
    "PIX_MAX",
    "Image",
    "ImageConverters",
    "pgm",
    "create",
    "destroy",
    "width",
    "height",
    "maxval",
    "stats",
    "valid_pos",
    "valid_rect",
    "get_pixel",
    "set_pixel",
    "pixel_index",
    "negative",
    "threshold",
    "brighten",
    "rotate",
    "mirror",
    "crop",
    "paste",
    "blend",
    "match_sub_image",
]
