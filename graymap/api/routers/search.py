"""
Search API Router - Sub-image location and comparison
"""

import logging

from fastapi import APIRouter, Depends

from graymap.api.dependencies import get_image_service
from graymap.api.exceptions import safe_endpoint
from graymap.schemas import LocateRequest, MatchRequest, SearchResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/locate")
@safe_endpoint
async def locate(
    request: LocateRequest, image_service=Depends(get_image_service)
) -> SearchResponse:
    """
    Find the first occurrence of a sub-image.

    Anchors are scanned row by row, left to right; the topmost, then
    leftmost exact match is returned.
    """
    return image_service.locate(request.image_id, request.sub_image_id)


@router.post("/match")
@safe_endpoint
async def match(request: MatchRequest, image_service=Depends(get_image_service)) -> SearchResponse:
    """Check whether a sub-image matches the image exactly at one anchor"""
    return image_service.match(request.image_id, request.sub_image_id, request.position)
