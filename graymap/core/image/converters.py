"""
Image format conversion utilities.

Handles conversions between graymap images and other representations:
- NumPy arrays (grayscale or OpenCV BGR/BGRA, converted to gray)
- PIL Images
- Base64 encoded strings (PNG by default)
"""

import base64
import io
import logging
from typing import Union

import cv2
import numpy as np
from PIL import Image as PILImage

from graymap.core.constants import PixelConstants
from graymap.core.image.buffer import Image

logger = logging.getLogger(__name__)


class ImageConverters:
    """Utilities for converting between image formats."""

    @staticmethod
    def to_numpy(img: Image) -> np.ndarray:
        """
        Convert image to a 2-D (height, width) uint8 NumPy array.

        The array is a copy; modifying it does not affect the image.
        """
        return img.to_array()

    @staticmethod
    def from_numpy(array: np.ndarray, maxval: int = PixelConstants.PIX_MAX) -> Image:
        """
        Convert NumPy array to image.

        Args:
            array: 2-D grayscale array, or 3-D BGR/BGRA array (OpenCV order)
            maxval: Maximum gray level of the new image

        Returns:
            New image holding a copy of the (gray) levels
        """
        gray = ImageConverters.ensure_grayscale(array)
        if gray.dtype != np.uint8:
            gray = np.clip(gray, 0, PixelConstants.PIX_MAX).astype(np.uint8)
        if maxval < PixelConstants.PIX_MAX:
            gray = np.minimum(gray, maxval)
        return Image.from_array(gray, maxval)

    @staticmethod
    def ensure_grayscale(array: np.ndarray) -> np.ndarray:
        """
        Ensure array is single-channel (convert from BGR/BGRA if needed).

        Args:
            array: Input array (grayscale, BGR or BGRA)

        Returns:
            2-D grayscale array
        """
        if array.ndim == 3 and array.shape[2] == 1:
            return array[:, :, 0].copy()
        if array.ndim == 3 and array.shape[2] == 3:
            return cv2.cvtColor(array, cv2.COLOR_BGR2GRAY)
        if array.ndim == 3 and array.shape[2] == 4:
            return cv2.cvtColor(array, cv2.COLOR_BGRA2GRAY)
        return array.copy()

    @staticmethod
    def to_pil(img: Image) -> PILImage.Image:
        """Convert image to a PIL Image in mode "L"."""
        return PILImage.fromarray(img.to_array())

    @staticmethod
    def from_pil(image: PILImage.Image) -> Image:
        """Convert PIL Image (any mode) to a graymap image."""
        if image.mode != "L":
            image = image.convert("L")
        return Image.from_array(np.array(image))

    @staticmethod
    def to_base64(img: Union[Image, bytes], format: str = "PNG") -> str:
        """
        Convert image to base64 string.

        Args:
            img: Input image, or already encoded bytes
            format: PIL image format (PNG, BMP, ...)

        Returns:
            Base64 encoded string
        """
        try:
            if isinstance(img, bytes):
                return base64.b64encode(img).decode("utf-8")

            buffer = io.BytesIO()
            ImageConverters.to_pil(img).save(buffer, format=format)
            return base64.b64encode(buffer.getvalue()).decode("utf-8")

        except Exception as e:
            logger.error(f"Failed to convert image to base64: {e}")
            raise

    @staticmethod
    def from_base64(base64_string: str) -> Image:
        """
        Convert base64 encoded picture (any PIL-readable format) to image.
        """
        try:
            image_bytes = base64.b64decode(base64_string)
            return ImageConverters.from_pil(PILImage.open(io.BytesIO(image_bytes)))

        except Exception as e:
            logger.error(f"Failed to decode base64 image: {e}")
            raise

    @staticmethod
    def encode_image_to_base64(img: Image, format: str = ".png") -> str:
        """
        Encode image to base64 using OpenCV, avoiding PIL conversion overhead.

        Args:
            img: Image to encode
            format: OpenCV extension ('.png', '.bmp', ...)

        Returns:
            Base64 encoded string
        """
        try:
            ok, buffer = cv2.imencode(format, img.to_array())
            if not ok:
                raise ValueError(f"OpenCV could not encode image as {format}")
            return base64.b64encode(buffer).decode("utf-8")
        except Exception as e:
            logger.error(f"Failed to encode image to base64: {e}")
            raise
