"""
Operations combining two images: alpha blending and sub-image comparison.
"""

from graymap.core.image.buffer import Image
from graymap.core.utils.pixel_math import saturate_round
from graymap.core.utils.validation import require_position, require_rect


def blend(img1: Image, x: int, y: int, img2: Image, alpha: float) -> None:
    """
    Blend img2 into position (x, y) of img1, in place.

    Each covered pixel becomes (1-alpha)*p1 + alpha*p2, rounded half-up and
    saturated to [0, img1.maxval]. alpha usually lies in [0.0, 1.0]; values
    outside that interval, infinite ones included, extrapolate and saturate.
    Pixels where p1 == p2 keep their level for any alpha.

    Raises:
        ContractViolation: If img2 does not fit inside img1 at (x, y)
    """
    require_rect(img1, x, y, img2.width, img2.height)
    limit = img1.maxval

    for cy in range(img2.height):
        for cx in range(img2.width):
            below = img1.get_pixel(x + cx, y + cy)
            above = img2.get_pixel(cx, cy)
            value = below if above == below else below + alpha * (above - below)
            img1.set_pixel(x + cx, y + cy, saturate_round(value, limit))


def match_sub_image(img1: Image, x: int, y: int, img2: Image) -> bool:
    """
    Compare img2 to the subimage of img1 anchored at (x, y).

    Stops at the first mismatching pixel. Only the anchor is validated; a
    subimage extending past img1 fails on the first out-of-range read.

    Raises:
        ContractViolation: If (x, y) is not a valid position of img1
    """
    require_position(img1, x, y)

    for cy in range(img2.height):
        for cx in range(img2.width):
            if img1.get_pixel(x + cx, y + cy) != img2.get_pixel(cx, cy):
                return False

    return True
