"""
Sub-image location for graymap images.

Exhaustive search: every anchor of the larger image is tried in raster
order until the sub-image matches exactly. No preprocessing, worst case
O(W1*H1*W2*H2) pixel comparisons.
"""

import logging
from typing import Optional, Tuple

from graymap.core.constants import InstrumentationConstants
from graymap.core.image.buffer import Image
from graymap.core.image.composite import match_sub_image
from graymap.core.instrumentation import count
from graymap.schemas.common import Point

logger = logging.getLogger(__name__)

_PIXMEM = InstrumentationConstants.PIXMEM
_ADDS = InstrumentationConstants.ADDS
_PIXMEM_PER_ANCHOR = InstrumentationConstants.LOCATE_PIXMEM_PER_ANCHOR
_ADDS_PER_ANCHOR = InstrumentationConstants.LOCATE_ADDS_PER_ANCHOR


def locate(img1: Image, img2: Image) -> Optional[Point]:
    """
    Locate img2 inside img1.

    Anchors are scanned with y outer and x inner, both ascending, so the
    first (topmost, then leftmost) match wins and the scan stops there.

    Args:
        img1: Image to search in
        img2: Image to search for

    Returns:
        Top-left anchor of the first match, or None if img2 does not occur
        (or is larger than img1 in either dimension)
    """
    if img1.width == 0 or img1.height == 0:
        return None

    last_y = img1.height - img2.height
    last_x = img1.width - img2.width

    for y in range(last_y + 1):
        for x in range(last_x + 1):
            count(_PIXMEM, _PIXMEM_PER_ANCHOR)
            count(_ADDS, _ADDS_PER_ANCHOR)
            if match_sub_image(img1, x, y, img2):
                logger.debug(f"Located {img2!r} in {img1!r} at ({x}, {y})")
                return Point(x=x, y=y)

    return None


def locate_sub_image(
    img1: Image, img2: Image, px: Optional[int] = None, py: Optional[int] = None
) -> Tuple[bool, Optional[int], Optional[int]]:
    """
    Locate img2 inside img1, reporting the anchor through the return tuple.

    Args:
        img1: Image to search in
        img2: Image to search for
        px: Value returned as x when nothing matches
        py: Value returned as y when nothing matches

    Returns:
        (True, x, y) on a match, otherwise (False, px, py) unchanged
    """
    anchor = locate(img1, img2)
    if anchor is None:
        return False, px, py
    return True, anchor.x, anchor.y
