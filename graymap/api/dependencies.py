"""
Shared FastAPI dependencies for graymap.
"""

import logging

from fastapi import Depends, HTTPException, Path, Request

from graymap.core.constants import ImageConstants
from graymap.core.image_manager import ImageManager
from graymap.services.image_service import ImageService

logger = logging.getLogger(__name__)


def get_image_manager(request: Request) -> ImageManager:
    """
    Get ImageManager instance from app state.

    Raises:
        HTTPException: If the manager is not initialized
    """
    try:
        return request.app.state.image_manager
    except AttributeError as e:
        logger.error(f"Image manager not initialized in app state: {e}")
        raise HTTPException(
            status_code=500, detail="Internal server error: Image manager not initialized"
        )


def get_image_service(
    request: Request, image_manager: ImageManager = Depends(get_image_manager)
) -> ImageService:
    """Get ImageService bound to the stored images and current settings."""
    config = getattr(request.app.state, "config", {}) or {}
    image_config = config.get("image", {})
    return ImageService(
        image_manager=image_manager,
        include_preview=image_config.get("include_preview", True),
        instrumentation=config.get("instrumentation", {}).get("enabled", True),
        max_dimension=image_config.get("max_dimension", ImageConstants.MAX_IMAGE_DIMENSION),
    )


def image_id_param(image_id: str = Path(..., description="Unique image identifier")) -> str:
    """Common image ID path parameter."""
    return image_id
