"""
Pixel transformations.

These operations change pixel levels in place but never pixel positions or
image geometry. No allocation is involved and they never fail on a live
image.
"""

import logging

import numpy as np

from graymap.core.constants import PixelConstants
from graymap.core.image.buffer import Image
from graymap.core.instrumentation import count_pixmem
from graymap.core.utils.pixel_math import saturate_round_array

logger = logging.getLogger(__name__)


def negative(img: Image) -> None:
    """
    Transform image to its photographic negative.

    Each level v becomes PIX_MAX - v (255 - v, independent of maxval).
    """
    pixels = img.samples
    count_pixmem(2 * pixels.size)
    np.subtract(PixelConstants.PIX_MAX, pixels, out=pixels)


def threshold(img: Image, thr: int) -> None:
    """
    Apply threshold to image.

    Pixels with level < thr become black (0), all others white (maxval).
    """
    pixels = img.samples
    count_pixmem(2 * pixels.size)
    pixels[:] = np.where(pixels < thr, 0, img.maxval).astype(np.uint8)


def brighten(img: Image, factor: float) -> None:
    """
    Brighten image by a factor.

    Each level is multiplied by factor, rounded half-up and saturated to
    [0, maxval]: factor > 1.0 brightens, factor < 1.0 darkens. Infinite
    factors saturate; black pixels (0 * inf) stay black.
    """
    pixels = img.samples
    count_pixmem(2 * pixels.size)
    with np.errstate(over="ignore", invalid="ignore"):
        scaled = pixels * float(factor)
    pixels[:] = saturate_round_array(scaled, img.maxval)
    logger.debug(f"Brightened {img!r} by factor {factor}")
