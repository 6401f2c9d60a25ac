"""
Geometric transformations.

rotate, mirror and crop return a new image and never modify the original;
paste writes into its first argument in place. Every pixel is copied
exactly once through get_pixel/set_pixel.
"""

import logging

from graymap.core.image.buffer import Image, create
from graymap.core.utils.validation import require_rect

logger = logging.getLogger(__name__)


def rotate(img: Image) -> Image:
    """
    Rotate an image 90 degrees anti-clockwise.

    Source pixel (x, y) lands at (y, width-1-x) of a height x width image.

    Returns:
        New rotated image (caller owns it)
    """
    w, h = img.width, img.height
    rotated = create(h, w, img.maxval)

    for y in range(h):
        for x in range(w):
            rotated.set_pixel(y, w - 1 - x, img.get_pixel(x, y))

    return rotated


def mirror(img: Image) -> Image:
    """
    Mirror an image left-right.

    Returns:
        New mirrored image (caller owns it)
    """
    w, h = img.width, img.height
    mirrored = create(w, h, img.maxval)

    for y in range(h):
        for x in range(w):
            mirrored.set_pixel(w - 1 - x, y, img.get_pixel(x, y))

    return mirrored


def crop(img: Image, x: int, y: int, w: int, h: int) -> Image:
    """
    Crop the rectangle with top-left corner (x, y) and size w x h.

    Raises:
        ContractViolation: If the rectangle is not inside img

    Returns:
        New w x h image (caller owns it)
    """
    require_rect(img, x, y, w, h)
    cropped = create(w, h, img.maxval)

    for cy in range(h):
        for cx in range(w):
            cropped.set_pixel(cx, cy, img.get_pixel(x + cx, y + cy))

    return cropped


def paste(img1: Image, x: int, y: int, img2: Image) -> None:
    """
    Paste img2 into position (x, y) of img1, in place.

    Raises:
        ContractViolation: If img2 does not fit inside img1 at (x, y)
    """
    require_rect(img1, x, y, img2.width, img2.height)

    for cy in range(img2.height):
        for cx in range(img2.width):
            img1.set_pixel(x + cx, y + cy, img2.get_pixel(cx, cy))

    logger.debug(f"Pasted {img2!r} into {img1!r} at ({x}, {y})")
