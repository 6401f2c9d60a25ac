"""
System API Router - Status and configuration
"""

import logging

from fastapi import APIRouter, Depends, Request

from graymap import __version__
from graymap.api.dependencies import get_image_manager
from graymap.api.exceptions import safe_endpoint

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/status")
@safe_endpoint
async def get_status(image_manager=Depends(get_image_manager)) -> dict:
    """Get image store status"""
    return {"version": __version__, "storage": image_manager.get_statistics()}


@router.get("/config")
@safe_endpoint
async def get_config(request: Request) -> dict:
    """Get active configuration"""
    return getattr(request.app.state, "config", {})
