"""
Search and filtering algorithms built on the pixel buffer primitives.
"""

from .blur import BlurParams, blur
from .locate import locate, locate_sub_image

__all__ = ["BlurParams", "blur", "locate", "locate_sub_image"]
