"""
graymap - 8-bit grayscale image processing.

The image library lives in graymap.core.image and graymap.vision; the HTTP
service in graymap.main exposes it over FastAPI.
"""

__version__ = "1.0.0"

from graymap.core.exceptions import (  # noqa: E402
    AllocationError,
    ContractViolation,
    EmptyImageError,
    GraymapError,
    ImageFormatError,
    ImageIOError,
)
from graymap.core.image import (  # noqa: E402
    Image,
    blend,
    brighten,
    create,
    crop,
    destroy,
    get_pixel,
    match_sub_image,
    mirror,
    negative,
    paste,
    pgm,
    rotate,
    set_pixel,
    threshold,
)
from graymap.core.instrumentation import PixelCounters, counting  # noqa: E402
from graymap.vision import blur, locate, locate_sub_image  # noqa: E402

__all__ = [
    "__version__",
    "AllocationError",
    "ContractViolation",
    "EmptyImageError",
    "GraymapError",
    "ImageFormatError",
    "ImageIOError",
    "Image",
    "PixelCounters",
    "counting",
    "create",
    "destroy",
    "get_pixel",
    "set_pixel",
    "pgm",
    "negative",
    "threshold",
    "brighten",
    "rotate",
    "mirror",
    "crop",
    "paste",
    "blend",
    "match_sub_image",
    "locate",
    "locate_sub_image",
    "blur",
]
