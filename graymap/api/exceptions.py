"""
API exceptions and exception handlers.

Maps library exceptions onto HTTP responses:
- ContractViolation, ImageFormatError, EmptyImageError -> 400
- ImageNotFoundException -> 404
- ImageTooLargeException -> 413
- AllocationError -> 507
"""

import functools
import logging

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse

from graymap.core.constants import ErrorMessages
from graymap.core.exceptions import (
    AllocationError,
    ContractViolation,
    EmptyImageError,
    GraymapError,
    ImageFormatError,
)

logger = logging.getLogger(__name__)


class ImageNotFoundException(HTTPException):
    """Stored image does not exist"""

    def __init__(self, image_id: str):
        super().__init__(
            status_code=404, detail=ErrorMessages.IMAGE_NOT_FOUND.format(image_id=image_id)
        )
        self.image_id = image_id


class ImageTooLargeException(HTTPException):
    """Image dimensions exceed the configured limit"""

    def __init__(self, width: int, height: int, limit: int):
        super().__init__(
            status_code=413,
            detail=ErrorMessages.IMAGE_TOO_LARGE.format(width=width, height=height, limit=limit),
        )


_STATUS_CODES = (
    (ContractViolation, 400),
    (ImageFormatError, 400),
    (EmptyImageError, 400),
    (AllocationError, 507),
)


def status_for(exc: GraymapError) -> int:
    for exc_type, status_code in _STATUS_CODES:
        if isinstance(exc, exc_type):
            return status_code
    return 500


def safe_endpoint(func):
    """
    Decorator for endpoints: lets HTTP and library errors through to their
    handlers, logs anything else and converts it to HTTP 500.
    """

    @functools.wraps(func)
    async def wrapper(*args, **kwargs):
        try:
            return await func(*args, **kwargs)
        except (HTTPException, GraymapError):
            raise
        except Exception as e:
            logger.error(f"Unexpected error in {func.__name__}: {e}", exc_info=True)
            raise HTTPException(status_code=500, detail=f"Internal server error: {str(e)}")

    return wrapper


async def graymap_exception_handler(request: Request, exc: GraymapError) -> JSONResponse:
    status_code = status_for(exc)
    logger.warning(f"{request.method} {request.url.path} failed ({status_code}): {exc}")
    return JSONResponse(
        status_code=status_code,
        content={"error": type(exc).__name__, "cause": exc.cause, "detail": str(exc)},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register library exception handlers on the application"""
    app.add_exception_handler(GraymapError, graymap_exception_handler)
