"""
Image Manager - bounded in-memory store of graymap images
"""

import logging
import uuid
from collections import OrderedDict
from dataclasses import dataclass, field
from datetime import datetime
from threading import RLock
from typing import Any, Dict, List, Optional

from graymap.core.constants import ErrorMessages, ImageConstants
from graymap.core.exceptions import AllocationError
from graymap.core.image import Image, ImageConverters

logger = logging.getLogger(__name__)


@dataclass
class StoredImage:
    """Image plus bookkeeping"""

    id: str
    image: Image
    created_at: datetime = field(default_factory=datetime.now)
    metadata: Dict[str, Any] = field(default_factory=dict)

    @property
    def size_bytes(self) -> int:
        return self.image.size


class ImageManager:
    """Keeps images by id, evicting least recently used ones when full"""

    def __init__(
        self,
        max_size_mb: int = ImageConstants.DEFAULT_MAX_MEMORY_MB,
        max_images: int = ImageConstants.DEFAULT_MAX_IMAGES,
    ):
        """
        Initialize Image Manager

        Args:
            max_size_mb: Memory budget for pixel data in megabytes
            max_images: Maximum number of stored images
        """
        self.max_size_bytes = max_size_mb * 1024 * 1024
        self.max_images = max_images
        self.images: "OrderedDict[str, StoredImage]" = OrderedDict()
        self.total_bytes = 0

        # Thread safety (RLock allows reentrant locking)
        self.lock = RLock()

        logger.info(
            f"Image Manager initialized: max {max_images} images, {max_size_mb} MB"
        )

    def store(
        self,
        image: Image,
        image_id: Optional[str] = None,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> str:
        """
        Store an image, taking ownership of it

        Args:
            image: Image to store
            image_id: Optional identifier (generated if omitted)
            metadata: Optional metadata

        Returns:
            Image ID

        Raises:
            AllocationError: If the image alone exceeds the memory budget
        """
        if image.size > self.max_size_bytes:
            raise AllocationError(ErrorMessages.IMAGE_STORAGE_FULL, f"{image.size} bytes")

        with self.lock:
            image_id = image_id or f"img_{uuid.uuid4().hex[:8]}"
            if image_id in self.images:
                self._remove(image_id)

            while self.images and (
                len(self.images) >= self.max_images
                or self.total_bytes + image.size > self.max_size_bytes
            ):
                oldest_id = next(iter(self.images))
                logger.info(f"Evicting least recently used image {oldest_id}")
                self._remove(oldest_id)

            self.images[image_id] = StoredImage(
                id=image_id, image=image, metadata=metadata or {}
            )
            self.total_bytes += image.size

            logger.debug(f"Stored {image!r} as {image_id}")
            return image_id

    def get(self, image_id: str) -> Optional[Image]:
        """Get image by ID, marking it as recently used"""
        with self.lock:
            entry = self.images.get(image_id)
            if entry is None:
                return None
            self.images.move_to_end(image_id)
            return entry.image

    def has_image(self, image_id: str) -> bool:
        with self.lock:
            return image_id in self.images

    def delete(self, image_id: str) -> bool:
        """Delete image and release its pixels"""
        with self.lock:
            if image_id not in self.images:
                return False
            self._remove(image_id)
            logger.info(f"Deleted image {image_id}")
            return True

    def _remove(self, image_id: str) -> None:
        entry = self.images.pop(image_id)
        self.total_bytes -= entry.size_bytes
        entry.image.release()

    def get_metadata(self, image_id: str) -> Optional[Dict[str, Any]]:
        """Get image metadata"""
        with self.lock:
            entry = self.images.get(image_id)
            if entry is None:
                return None
            return {
                "id": entry.id,
                "width": entry.image.width,
                "height": entry.image.height,
                "maxval": entry.image.maxval,
                "created_at": entry.created_at.isoformat(),
                **entry.metadata,
            }

    def list_images(self) -> List[str]:
        """List stored image IDs, least recently used first"""
        with self.lock:
            return list(self.images.keys())

    def create_preview(self, image: Image) -> Optional[str]:
        """Create base64 PNG preview, or None for empty images"""
        if image.size == 0:
            return None
        return ImageConverters.encode_image_to_base64(image, ImageConstants.PREVIEW_FORMAT)

    def get_statistics(self) -> Dict[str, Any]:
        """Get storage statistics"""
        with self.lock:
            return {
                "count": len(self.images),
                "max_images": self.max_images,
                "total_bytes": self.total_bytes,
                "max_bytes": self.max_size_bytes,
                "usage": round(self.total_bytes / self.max_size_bytes, 4)
                if self.max_size_bytes
                else 0.0,
            }

    def cleanup(self) -> None:
        """Release all stored images"""
        with self.lock:
            for image_id in list(self.images):
                self._remove(image_id)
            self.total_bytes = 0
            logger.info("Image manager cleaned up")
