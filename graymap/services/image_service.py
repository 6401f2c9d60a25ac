"""
Image Service - Business logic for operations on stored images.

This service looks images up in the ImageManager, runs the library
operations on them under a timer and (optionally) an instrumentation
scope, stores any new images and builds the API responses.
"""

import logging
from contextlib import nullcontext
from typing import Any, Callable, Dict, List, Optional, Tuple

from graymap.api.exceptions import ImageNotFoundException, ImageTooLargeException
from graymap.core.constants import ImageConstants
from graymap.core.image import (
    Image,
    blend,
    brighten,
    create,
    crop,
    match_sub_image,
    mirror,
    negative,
    paste,
    pgm,
    rotate,
    threshold,
)
from graymap.core.image_manager import ImageManager
from graymap.core.instrumentation import PixelCounters, counting
from graymap.core.utils.decorators import timer
from graymap.schemas import ImageInfo, Point, Rect, SearchResponse, Size, TransformResponse
from graymap.vision import blur, locate

logger = logging.getLogger(__name__)


class ImageService:
    """
    Service for graymap image operations.

    Operations that modify an image act on the stored image in place;
    operations that produce a new image store it under a new ID.
    """

    def __init__(
        self,
        image_manager: ImageManager,
        include_preview: bool = True,
        instrumentation: bool = True,
        max_dimension: int = ImageConstants.MAX_IMAGE_DIMENSION,
    ):
        """
        Initialize image service.

        Args:
            image_manager: Image manager instance
            include_preview: Attach base64 PNG previews to image info
            instrumentation: Count pixel accesses of every operation
            max_dimension: Largest accepted width/height for uploads
        """
        self.image_manager = image_manager
        self.include_preview = include_preview
        self.instrumentation = instrumentation
        self.max_dimension = max_dimension

    # Lookup and description

    def get_image(self, image_id: str) -> Image:
        image = self.image_manager.get(image_id)
        if image is None:
            raise ImageNotFoundException(image_id)
        return image

    def describe(self, image_id: str, with_preview: Optional[bool] = None) -> ImageInfo:
        """Build ImageInfo (size, maxval, level range, preview) for a stored image"""
        image = self.get_image(image_id)
        min_level = max_level = None
        if image.size:
            min_level, max_level = image.stats()

        preview = None
        if self.include_preview if with_preview is None else with_preview:
            preview = self.image_manager.create_preview(image)

        return ImageInfo(
            id=image_id,
            size=Size(width=image.width, height=image.height),
            maxval=image.maxval,
            min_level=min_level,
            max_level=max_level,
            preview_base64=preview,
        )

    def list_images(self) -> List[ImageInfo]:
        return [
            self.describe(image_id, with_preview=False)
            for image_id in self.image_manager.list_images()
        ]

    # Image management

    def create_image(self, width: int, height: int, maxval: int) -> ImageInfo:
        """Create and store a new black image"""
        self._check_dimensions(width, height)
        image_id = self.image_manager.store(create(width, height, maxval))
        logger.info(f"Created {width}x{height} image {image_id} (maxval {maxval})")
        return self.describe(image_id)

    def import_pgm(self, data: bytes) -> ImageInfo:
        """Parse PGM bytes and store the image"""
        image = pgm.parse(data)
        try:
            self._check_dimensions(image.width, image.height)
        except ImageTooLargeException:
            image.release()
            raise
        image_id = self.image_manager.store(image, metadata={"source": "upload"})
        logger.info(f"Imported {image!r} as {image_id}")
        return self.describe(image_id)

    def export_pgm(self, image_id: str) -> bytes:
        return pgm.serialize(self.get_image(image_id))

    def delete_image(self, image_id: str) -> None:
        if not self.image_manager.delete(image_id):
            raise ImageNotFoundException(image_id)

    def _check_dimensions(self, width: int, height: int) -> None:
        if width > self.max_dimension or height > self.max_dimension:
            raise ImageTooLargeException(width, height, self.max_dimension)

    # Execution helpers

    def _execute(
        self, operation: Callable[..., Any], *args: Any
    ) -> Tuple[Any, float, Optional[Dict[str, Any]]]:
        """
        Run operation under a timer and, if enabled, an instrumentation scope.

        Returns:
            Tuple of (operation result, processing_time_ms, counter snapshot)
        """
        counters = PixelCounters() if self.instrumentation else None
        scope = counting(counters) if counters is not None else nullcontext()

        with timer() as t:
            with scope:
                result = operation(*args)

        snapshot = counters.report(operation.__name__) if counters is not None else None
        return result, t["ms"], snapshot

    def _in_place(
        self, image_id: str, operation: Callable[..., Any], *args: Any
    ) -> TransformResponse:
        image = self.get_image(image_id)
        _, elapsed_ms, counters = self._execute(operation, image, *args)
        return TransformResponse(
            image=self.describe(image_id), processing_time_ms=elapsed_ms, counters=counters
        )

    def _new_image(
        self, image_id: str, operation: Callable[..., Image], *args: Any
    ) -> TransformResponse:
        image = self.get_image(image_id)
        result, elapsed_ms, counters = self._execute(operation, image, *args)
        new_id = self.image_manager.store(
            result, metadata={"source": image_id, "operation": operation.__name__}
        )
        return TransformResponse(
            image=self.describe(new_id), processing_time_ms=elapsed_ms, counters=counters
        )

    # Pixel transformations (in place)

    def negative(self, image_id: str) -> TransformResponse:
        return self._in_place(image_id, negative)

    def threshold(self, image_id: str, thr: int) -> TransformResponse:
        return self._in_place(image_id, threshold, thr)

    def brighten(self, image_id: str, factor: float) -> TransformResponse:
        return self._in_place(image_id, brighten, factor)

    def blur(self, image_id: str, dx: int, dy: int) -> TransformResponse:
        return self._in_place(image_id, blur, dx, dy)

    # Geometric transformations (new image)

    def rotate(self, image_id: str) -> TransformResponse:
        return self._new_image(image_id, rotate)

    def mirror(self, image_id: str) -> TransformResponse:
        return self._new_image(image_id, mirror)

    def crop(self, image_id: str, rect: Rect) -> TransformResponse:
        return self._new_image(image_id, crop, rect.x, rect.y, rect.width, rect.height)

    # Two-image operations

    def paste(self, image_id: str, source_id: str, position: Point) -> TransformResponse:
        source = self.get_image(source_id)
        return self._in_place(image_id, paste, position.x, position.y, source)

    def blend(
        self, image_id: str, source_id: str, position: Point, alpha: float
    ) -> TransformResponse:
        source = self.get_image(source_id)
        return self._in_place(image_id, blend, position.x, position.y, source, alpha)

    def locate(self, image_id: str, sub_image_id: str) -> SearchResponse:
        """Find the first (topmost, then leftmost) occurrence of a sub-image"""
        image = self.get_image(image_id)
        sub_image = self.get_image(sub_image_id)
        anchor, elapsed_ms, counters = self._execute(locate, image, sub_image)
        logger.info(
            f"Locate {sub_image_id} in {image_id}: "
            f"{'found at ' + str(anchor.as_tuple()) if anchor else 'no match'}"
        )
        return SearchResponse(
            found=anchor is not None,
            position=anchor,
            processing_time_ms=elapsed_ms,
            counters=counters,
        )

    def match(self, image_id: str, sub_image_id: str, position: Point) -> SearchResponse:
        """Compare a sub-image against the image at one anchor"""
        image = self.get_image(image_id)
        sub_image = self.get_image(sub_image_id)
        # The anchor alone is validated by match_sub_image; reject overhangs here
        if not image.valid_rect(position.x, position.y, sub_image.width, sub_image.height):
            return SearchResponse(found=False, position=None, processing_time_ms=0.0)
        found, elapsed_ms, counters = self._execute(
            match_sub_image, image, position.x, position.y, sub_image
        )
        return SearchResponse(
            found=found,
            position=position if found else None,
            processing_time_ms=elapsed_ms,
            counters=counters,
        )

