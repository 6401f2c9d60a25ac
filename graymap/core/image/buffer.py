"""
Pixel buffer - the 8-bit graymap image value type.

An image is stored as its width, height, maxval and a flat uint8 array
holding a raster scan of the gray levels, left to right, top to bottom.
In a 100-pixel wide image, (x, y) = (33, 0) is stored at index 33 and
(22, 1) at index 122.

All geometric, compositing and filtering code reads and writes pixels
through get_pixel/set_pixel only, so every access is bounds-checked and
counted by the active instrumentation scope.
"""

import logging
from typing import Optional, Tuple

import numpy as np

from graymap.core.constants import ErrorMessages, PixelConstants
from graymap.core.exceptions import AllocationError, ContractViolation, EmptyImageError
from graymap.core.instrumentation import count_pixmem
from graymap.core.utils.validation import (
    require,
    require_dimensions,
    require_level,
    require_maxval,
    require_position,
)

logger = logging.getLogger(__name__)

PIX_MAX = PixelConstants.PIX_MAX


def pixel_index(width: int, x: int, y: int) -> int:
    """Transform (x, y) coordinates into the linear raster index."""
    return y * width + x


def _allocate(size: int) -> np.ndarray:
    try:
        return np.zeros(size, dtype=np.uint8)
    except (MemoryError, ValueError) as e:
        logger.error(f"Failed to allocate {size} pixels: {e}")
        raise AllocationError(ErrorMessages.PIXEL_ALLOCATION_FAILED, str(e)) from e


class Image:
    """
    Single-channel 8-bit grayscale image.

    Dimensions and maxval are fixed at creation. Pixels with level maxval
    are pure white. Use create() (or the PGM loader / converters) to build
    one and destroy() or a with-block to release its pixel array.
    """

    __slots__ = ("_width", "_height", "_maxval", "_pixels")

    def __init__(self, width: int, height: int, maxval: int = PIX_MAX):
        """
        Create a new black image.

        Args:
            width: Image width (>= 0)
            height: Image height (>= 0)
            maxval: Maximum gray level, white (1..255)

        Raises:
            ContractViolation: If dimensions or maxval are out of range
            AllocationError: If the pixel array cannot be allocated
        """
        require_dimensions(width, height)
        require_maxval(maxval)
        self._width = width
        self._height = height
        self._maxval = maxval
        self._pixels: Optional[np.ndarray] = _allocate(width * height)

    @classmethod
    def from_array(cls, array: np.ndarray, maxval: int = PIX_MAX) -> "Image":
        """
        Create an image from a 2-D (height, width) array of levels.

        The array is copied; the new image never aliases it.
        """
        array = np.asarray(array)
        require(array.ndim == 2, f"Expected a 2-D array, got shape {array.shape}")
        height, width = array.shape
        img = cls(width, height, maxval)
        if array.size:
            low, high = int(array.min()), int(array.max())
            require(low >= 0, ErrorMessages.INVALID_LEVEL.format(level=low))
            require(high <= maxval, ErrorMessages.INVALID_LEVEL.format(level=high))
        img._pixels[:] = array.astype(np.uint8, copy=False).reshape(-1)
        return img

    # Lifecycle

    @property
    def released(self) -> bool:
        return self._pixels is None

    def release(self) -> None:
        """Free the pixel array. Idempotent, never fails."""
        self._pixels = None

    def __enter__(self) -> "Image":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.release()

    def _live_pixels(self) -> np.ndarray:
        pixels = self._pixels
        if pixels is None:
            raise ContractViolation(ErrorMessages.RELEASED_IMAGE)
        return pixels

    # Information queries

    @property
    def width(self) -> int:
        self._live_pixels()
        return self._width

    @property
    def height(self) -> int:
        self._live_pixels()
        return self._height

    @property
    def maxval(self) -> int:
        self._live_pixels()
        return self._maxval

    @property
    def size(self) -> int:
        """Number of pixels."""
        return self.width * self.height

    @property
    def samples(self) -> np.ndarray:
        """
        The raw raster array, for bulk transfer by I/O and converters.

        Accesses through this view are not counted; algorithms must use
        get_pixel/set_pixel.
        """
        return self._live_pixels()

    def stats(self) -> Tuple[int, int]:
        """
        Find the minimum and maximum gray levels in the image.

        Raises:
            EmptyImageError: If the image has no pixels
        """
        pixels = self._live_pixels()
        if pixels.size == 0:
            raise EmptyImageError(ErrorMessages.EMPTY_IMAGE)
        count_pixmem(pixels.size)
        return int(pixels.min()), int(pixels.max())

    def valid_pos(self, x: int, y: int) -> bool:
        """Check if pixel position (x, y) is inside the image."""
        self._live_pixels()
        return 0 <= x < self._width and 0 <= y < self._height

    def valid_rect(self, x: int, y: int, w: int, h: int) -> bool:
        """Check if rectangular area (x, y, w, h) is completely inside the image."""
        self._live_pixels()
        return (
            x >= 0
            and y >= 0
            and w >= 0
            and h >= 0
            and x + w <= self._width
            and y + h <= self._height
        )

    # Pixel get & set

    def get_pixel(self, x: int, y: int) -> int:
        """Get the pixel level at position (x, y)."""
        pixels = self._live_pixels()
        require_position(self, x, y)
        count_pixmem()
        return int(pixels[pixel_index(self._width, x, y)])

    def set_pixel(self, x: int, y: int, level: int) -> None:
        """Set the pixel at position (x, y) to a new level."""
        pixels = self._live_pixels()
        require_position(self, x, y)
        require_level(level)
        count_pixmem()
        pixels[pixel_index(self._width, x, y)] = level

    # Helpers

    def copy(self) -> "Image":
        """Independent copy with the same dimensions, maxval and levels."""
        pixels = self._live_pixels()
        duplicate = Image(self._width, self._height, self._maxval)
        duplicate._pixels[:] = pixels
        return duplicate

    def to_array(self) -> np.ndarray:
        """Copy of the levels as a 2-D (height, width) uint8 array."""
        return self._live_pixels().reshape(self._height, self._width).copy()

    def pixels_equal(self, other: "Image") -> bool:
        """True if both images have the same dimensions and levels."""
        return (
            self.width == other.width
            and self.height == other.height
            and bool(np.array_equal(self._live_pixels(), other._live_pixels()))
        )

    def __repr__(self) -> str:
        if self.released:
            return "Image(<released>)"
        return f"Image(width={self._width}, height={self._height}, maxval={self._maxval})"


# Functional interface


def create(width: int, height: int, maxval: int = PIX_MAX) -> Image:
    """
    Create a new black image.

    Raises:
        ContractViolation: If width/height are negative or maxval is not in 1..255
        AllocationError: If memory cannot be obtained; no image is produced
    """
    return Image(width, height, maxval)


def destroy(img: Optional[Image]) -> None:
    """
    Release img. No-op for None or an already destroyed image.

    Returns None so callers can clear their handle: img = destroy(img)
    """
    if img is not None:
        img.release()
    return None


def width(img: Image) -> int:
    return img.width


def height(img: Image) -> int:
    return img.height


def maxval(img: Image) -> int:
    return img.maxval


def stats(img: Image) -> Tuple[int, int]:
    return img.stats()


def valid_pos(img: Image, x: int, y: int) -> bool:
    return img.valid_pos(x, y)


def valid_rect(img: Image, x: int, y: int, w: int, h: int) -> bool:
    return img.valid_rect(x, y, w, h)


def get_pixel(img: Image, x: int, y: int) -> int:
    return img.get_pixel(x, y)


def set_pixel(img: Image, x: int, y: int, level: int) -> None:
    img.set_pixel(x, y, level)
