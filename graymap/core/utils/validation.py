"""
Precondition checks shared by all image operations.

Violations raise ContractViolation right away: continuing past an
out-of-range index would corrupt the geometric math that follows.
"""

from graymap.core.constants import ErrorMessages, PixelConstants
from graymap.core.exceptions import ContractViolation


def require(condition: bool, message: str) -> None:
    """Raise ContractViolation with message unless condition holds."""
    if not condition:
        raise ContractViolation(message)


def require_dimensions(width: int, height: int) -> None:
    require(
        width >= 0 and height >= 0,
        ErrorMessages.INVALID_DIMENSIONS.format(width=width, height=height),
    )


def require_maxval(maxval: int) -> None:
    require(
        PixelConstants.MIN_MAXVAL <= maxval <= PixelConstants.PIX_MAX,
        ErrorMessages.INVALID_MAXVAL.format(maxval=maxval, pix_max=PixelConstants.PIX_MAX),
    )


def require_level(level: int) -> None:
    require(
        PixelConstants.BLACK <= level <= PixelConstants.PIX_MAX,
        ErrorMessages.INVALID_LEVEL.format(level=level),
    )


def require_position(img, x: int, y: int) -> None:
    """Require (x, y) to be a valid pixel position of img."""
    require(
        img.valid_pos(x, y),
        ErrorMessages.INVALID_POSITION.format(x=x, y=y, width=img.width, height=img.height),
    )


def require_rect(img, x: int, y: int, w: int, h: int) -> None:
    """Require rectangle (x, y, w, h) to lie completely inside img."""
    require(
        img.valid_rect(x, y, w, h),
        ErrorMessages.INVALID_RECT.format(
            x=x, y=y, w=w, h=h, width=img.width, height=img.height
        ),
    )
