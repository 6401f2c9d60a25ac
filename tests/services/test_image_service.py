"""
Tests for ImageService
"""

import numpy as np
import pytest

from graymap.api.exceptions import ImageNotFoundException, ImageTooLargeException
from graymap.core.exceptions import ContractViolation, ImageFormatError
from graymap.core.image import Image
from graymap.schemas import Point, Rect
from graymap.services.image_service import ImageService


class TestImageService:
    """Test image service operations"""

    @pytest.fixture
    def ramp_id(self, image_service, ramp_array):
        """Store the 5x5 ramp and return its ID"""
        return image_service.image_manager.store(Image.from_array(ramp_array))

    def test_create_image(self, image_service):
        """Created images are stored black"""
        info = image_service.create_image(4, 3, 200)

        assert info.size.width == 4
        assert info.maxval == 200
        assert (info.min_level, info.max_level) == (0, 0)
        assert image_service.image_manager.has_image(info.id)

    def test_create_image_too_large(self, image_service):
        """Dimensions above max_dimension are refused"""
        with pytest.raises(ImageTooLargeException):
            image_service.create_image(65, 1, 255)

    def test_describe_empty_image(self, image_service):
        """Empty images have no level range and no preview"""
        info = image_service.create_image(0, 0, 255)
        described = image_service.describe(info.id, with_preview=True)

        assert described.min_level is None
        assert described.preview_base64 is None

    def test_get_missing_image(self, image_service):
        """Unknown IDs raise 404 exceptions"""
        with pytest.raises(ImageNotFoundException):
            image_service.get_image("missing")

    def test_import_and_export_pgm(self, image_service, pgm_bytes, ramp_array):
        """PGM bytes round-trip through the store"""
        data = pgm_bytes(ramp_array)
        info = image_service.import_pgm(data)

        assert (info.min_level, info.max_level) == (0, 24)
        assert image_service.export_pgm(info.id) == data

    def test_import_malformed_pgm(self, image_service):
        """Malformed uploads propagate the format error"""
        with pytest.raises(ImageFormatError):
            image_service.import_pgm(b"not a graymap")

    def test_import_too_large(self, image_service, pgm_bytes):
        """Uploads above max_dimension are refused and not stored"""
        with pytest.raises(ImageTooLargeException):
            image_service.import_pgm(pgm_bytes(np.zeros((1, 65), dtype=np.uint8)))
        assert image_service.image_manager.list_images() == []

    def test_in_place_operation_reports_counters(self, image_service, ramp_id):
        """In-place operations update the stored image and report counters"""
        response = image_service.negative(ramp_id)

        assert response.image.id == ramp_id
        assert response.image.max_level == 255
        assert response.counters["pixmem"] == 50
        assert response.processing_time_ms >= 0

    def test_instrumentation_disabled(self, image_manager, ramp_array):
        """Counters are omitted when instrumentation is off"""
        service = ImageService(image_manager, instrumentation=False)
        image_id = image_manager.store(Image.from_array(ramp_array))

        assert service.threshold(image_id, 10).counters is None

    def test_new_image_operations_store_result(self, image_service, ramp_id):
        """rotate, mirror and crop store a new image"""
        rotated = image_service.rotate(ramp_id)
        cropped = image_service.crop(ramp_id, Rect(x=1, y=1, width=2, height=3))

        assert rotated.image.id != ramp_id
        assert (cropped.image.size.width, cropped.image.size.height) == (2, 3)
        metadata = image_service.image_manager.get_metadata(cropped.image.id)
        assert metadata["source"] == ramp_id
        assert metadata["operation"] == "crop"

    def test_crop_outside_image(self, image_service, ramp_id):
        """Contract violations propagate"""
        with pytest.raises(ContractViolation):
            image_service.crop(ramp_id, Rect(x=4, y=4, width=2, height=2))

    def test_paste_and_blend(self, image_service, ramp_id):
        """Two-image operations modify the target in place"""
        patch_id = image_service.image_manager.store(
            Image.from_array(np.full((2, 2), 200, dtype=np.uint8))
        )

        pasted = image_service.paste(ramp_id, patch_id, Point(x=0, y=0))
        assert pasted.image.max_level == 200

        blended = image_service.blend(ramp_id, patch_id, Point(x=3, y=3), 0.5)
        assert blended.image.max_level == 200
        assert image_service.get_image(ramp_id).get_pixel(4, 4) == 112

    def test_locate(self, image_service, ramp_id, ramp_array):
        """locate reports the anchor of the first match"""
        sub_id = image_service.image_manager.store(Image.from_array(ramp_array[3:5, 2:4]))
        response = image_service.locate(ramp_id, sub_id)

        assert response.found
        assert response.position == Point(x=2, y=3)
        assert response.counters["adds"] == 15

    def test_match(self, image_service, ramp_id, ramp_array):
        """match compares at one anchor and rejects overhangs"""
        sub_id = image_service.image_manager.store(Image.from_array(ramp_array[0:2, 0:2]))

        assert image_service.match(ramp_id, sub_id, Point(x=0, y=0)).found
        assert not image_service.match(ramp_id, sub_id, Point(x=1, y=0)).found
        assert not image_service.match(ramp_id, sub_id, Point(x=4, y=4)).found
