"""
Transform API Router - Pixel, geometric, compositing and filtering operations

In-place operations return the updated image; rotate, mirror and crop store
and return a new image.
"""

import logging

from fastapi import APIRouter, Depends

from graymap.api.dependencies import get_image_service, image_id_param
from graymap.api.exceptions import safe_endpoint
from graymap.schemas import (
    BlendRequest,
    BrightenRequest,
    CropRequest,
    PasteRequest,
    ThresholdRequest,
    TransformResponse,
)
from graymap.vision import BlurParams

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/{image_id}/negative")
@safe_endpoint
async def negative(
    image_id: str = Depends(image_id_param), image_service=Depends(get_image_service)
) -> TransformResponse:
    """Transform image to its negative (in place)"""
    return image_service.negative(image_id)


@router.post("/{image_id}/threshold")
@safe_endpoint
async def threshold(
    request: ThresholdRequest,
    image_id: str = Depends(image_id_param),
    image_service=Depends(get_image_service),
) -> TransformResponse:
    """Threshold image: levels below threshold become 0, others maxval (in place)"""
    return image_service.threshold(image_id, request.threshold)


@router.post("/{image_id}/brighten")
@safe_endpoint
async def brighten(
    request: BrightenRequest,
    image_id: str = Depends(image_id_param),
    image_service=Depends(get_image_service),
) -> TransformResponse:
    """Multiply levels by a factor, saturating at maxval (in place)"""
    return image_service.brighten(image_id, request.factor)


@router.post("/{image_id}/blur")
@safe_endpoint
async def blur(
    request: BlurParams,
    image_id: str = Depends(image_id_param),
    image_service=Depends(get_image_service),
) -> TransformResponse:
    """Apply a (2dx+1)x(2dy+1) mean filter (in place)"""
    return image_service.blur(image_id, request.dx, request.dy)


@router.post("/{image_id}/rotate")
@safe_endpoint
async def rotate(
    image_id: str = Depends(image_id_param), image_service=Depends(get_image_service)
) -> TransformResponse:
    """Rotate 90 degrees anti-clockwise into a new image"""
    return image_service.rotate(image_id)


@router.post("/{image_id}/mirror")
@safe_endpoint
async def mirror(
    image_id: str = Depends(image_id_param), image_service=Depends(get_image_service)
) -> TransformResponse:
    """Mirror left-right into a new image"""
    return image_service.mirror(image_id)


@router.post("/{image_id}/crop")
@safe_endpoint
async def crop(
    request: CropRequest,
    image_id: str = Depends(image_id_param),
    image_service=Depends(get_image_service),
) -> TransformResponse:
    """Crop a rectangle into a new image; the rectangle must fit the image"""
    return image_service.crop(image_id, request.rect)


@router.post("/{image_id}/paste")
@safe_endpoint
async def paste(
    request: PasteRequest,
    image_id: str = Depends(image_id_param),
    image_service=Depends(get_image_service),
) -> TransformResponse:
    """Paste another stored image at a position (in place)"""
    return image_service.paste(image_id, request.source_id, request.position)


@router.post("/{image_id}/blend")
@safe_endpoint
async def blend(
    request: BlendRequest,
    image_id: str = Depends(image_id_param),
    image_service=Depends(get_image_service),
) -> TransformResponse:
    """Alpha-blend another stored image at a position (in place)"""
    return image_service.blend(image_id, request.source_id, request.position, request.alpha)
