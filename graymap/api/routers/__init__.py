"""
API routers for graymap
"""

from . import image, search, system, transform

__all__ = ["image", "search", "system", "transform"]
