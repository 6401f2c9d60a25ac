"""
Common data structures shared across all layers.

- Rect: rectangular sub-region of an image
- Point: pixel position
- Size: image dimensions
"""

from pydantic import BaseModel, Field


class Rect(BaseModel):
    """
    Rectangular region (x, y, width, height) of an image.

    A transient description of a sub-region; whether it fits a particular
    image is checked with Image.valid_rect().
    """

    x: int = Field(..., ge=0, description="X coordinate of the top-left corner")
    y: int = Field(..., ge=0, description="Y coordinate of the top-left corner")
    width: int = Field(..., ge=0, description="Width")
    height: int = Field(..., ge=0, description="Height")


class Point(BaseModel):
    """Pixel position"""

    x: int = Field(..., description="X coordinate (column)")
    y: int = Field(..., description="Y coordinate (row)")

    def as_tuple(self) -> tuple[int, int]:
        return (self.x, self.y)


class Size(BaseModel):
    """Image dimensions"""

    width: int = Field(..., ge=0)
    height: int = Field(..., ge=0)
