"""
Image API Router - Image creation, upload, download and deletion
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import Response

from graymap.api.dependencies import get_image_service, image_id_param
from graymap.api.exceptions import safe_endpoint
from graymap.core.constants import APIConstants, PGMConstants
from graymap.schemas import ImageCreateRequest, ImageInfo, ImageListResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/create")
@safe_endpoint
async def create_image(
    request: ImageCreateRequest, image_service=Depends(get_image_service)
) -> ImageInfo:
    """Create a new black image"""
    return image_service.create_image(request.width, request.height, request.maxval)


@router.post("/upload")
@safe_endpoint
async def upload_image(request: Request, image_service=Depends(get_image_service)) -> ImageInfo:
    """
    Upload a binary PGM (P5) image.

    The request body is the raw file content.
    """
    data = await request.body()
    limit = APIConstants.MAX_UPLOAD_SIZE_MB * 1024 * 1024
    if len(data) > limit:
        raise HTTPException(
            status_code=413, detail=f"Upload of {len(data)} bytes exceeds {limit} bytes"
        )
    return image_service.import_pgm(data)


@router.get("/")
@safe_endpoint
async def list_images(image_service=Depends(get_image_service)) -> ImageListResponse:
    """List stored images"""
    images = image_service.list_images()
    return ImageListResponse(images=images, total=len(images))


@router.get("/{image_id}")
@safe_endpoint
async def get_image(
    image_id: str = Depends(image_id_param), image_service=Depends(get_image_service)
) -> ImageInfo:
    """Get image information (size, maxval, level range, preview)"""
    return image_service.describe(image_id)


@router.get("/{image_id}/pgm")
@safe_endpoint
async def download_image(
    image_id: str = Depends(image_id_param), image_service=Depends(get_image_service)
) -> Response:
    """Download image as a binary PGM file"""
    content = image_service.export_pgm(image_id)
    return Response(
        content=content,
        media_type=PGMConstants.MEDIA_TYPE,
        headers={
            "Content-Disposition": f'attachment; filename="{image_id}{PGMConstants.FILE_EXTENSION}"'
        },
    )


@router.delete("/{image_id}")
@safe_endpoint
async def delete_image(
    image_id: str = Depends(image_id_param), image_service=Depends(get_image_service)
) -> dict:
    """Delete a stored image"""
    image_service.delete_image(image_id)
    return {"success": True, "message": f"Image {image_id} deleted"}
