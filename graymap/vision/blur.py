"""
Mean (box) filter for graymap images.

Each pixel becomes the rounded mean of the pixels in the
(2dx+1) x (2dy+1) rectangle [x-dx, x+dx] x [y-dy, y+dy]. Near the border
only in-bounds neighbours are averaged: no padding, no wraparound.
"""

import logging

from pydantic import BaseModel, Field

from graymap.core.constants import ErrorMessages, InstrumentationConstants
from graymap.core.image.buffer import Image, create, destroy
from graymap.core.instrumentation import count
from graymap.core.utils.pixel_math import rounded_mean
from graymap.core.utils.validation import require

logger = logging.getLogger(__name__)


class BlurParams(BaseModel):
    """
    Mean filter parameters.

    Window radii in pixels; zero leaves that axis unfiltered.
    """

    class Config:
        extra = "forbid"

    dx: int = Field(default=1, ge=0, description="Horizontal window radius")
    dy: int = Field(default=1, ge=0, description="Vertical window radius")


def blur(img: Image, dx: int, dy: int) -> None:
    """
    Blur img in place with a (2dx+1) x (2dy+1) mean filter.

    Means are computed from the original levels into a scratch image and
    copied back afterwards, so already blurred pixels never feed later ones.
    The mean is rounded half-up: (2*sum + count) // (2*count).

    Raises:
        ContractViolation: If dx or dy is negative
    """
    require(dx >= 0 and dy >= 0, ErrorMessages.INVALID_RADIUS.format(dx=dx, dy=dy))
    w, h = img.width, img.height
    blurred = create(w, h, img.maxval)

    try:
        for y in range(h):
            y_lo, y_hi = max(0, y - dy), min(h - 1, y + dy)
            for x in range(w):
                x_lo, x_hi = max(0, x - dx), min(w - 1, x + dx)
                total = 0
                n = 0
                for cy in range(y_lo, y_hi + 1):
                    for cx in range(x_lo, x_hi + 1):
                        total += img.get_pixel(cx, cy)
                        n += 1
                count(InstrumentationConstants.ADDS, n)
                blurred.set_pixel(x, y, rounded_mean(total, n))

        for y in range(h):
            for x in range(w):
                img.set_pixel(x, y, blurred.get_pixel(x, y))
    finally:
        destroy(blurred)

    logger.debug(f"Blurred {img!r} with dx={dx}, dy={dy}")
