"""
Pytest configuration and fixtures for graymap tests
"""

import numpy as np
import pytest

from graymap.core.image import Image
from graymap.core.image_manager import ImageManager
from graymap.services.image_service import ImageService


@pytest.fixture
def uniform_image():
    """4x4 image where every pixel has level 10"""
    img = Image.from_array(np.full((4, 4), 10, dtype=np.uint8))
    yield img
    img.release()


@pytest.fixture
def ramp_array():
    """5x5 array of distinct levels 0..24 in raster order"""
    return np.arange(25, dtype=np.uint8).reshape(5, 5)


@pytest.fixture
def ramp_image(ramp_array):
    """5x5 image with distinct levels: level at (x, y) is 5*y + x"""
    img = Image.from_array(ramp_array)
    yield img
    img.release()


@pytest.fixture
def small_image():
    """3x2 image (width 3, height 2) with levels 1..6"""
    return Image.from_array(np.array([[1, 2, 3], [4, 5, 6]], dtype=np.uint8))


@pytest.fixture
def image_manager():
    """Create ImageManager instance for testing"""
    manager = ImageManager(max_size_mb=16, max_images=10)
    yield manager
    # Cleanup
    manager.cleanup()


@pytest.fixture
def image_service(image_manager):
    """Create ImageService instance for testing"""
    return ImageService(image_manager=image_manager, include_preview=False, max_dimension=64)


def make_pgm(array, maxval=255):
    """Encode a 2-D uint8 array as binary PGM bytes"""
    array = np.asarray(array, dtype=np.uint8)
    height, width = array.shape
    return f"P5\n{width} {height}\n{maxval}\n".encode("ascii") + array.tobytes()


@pytest.fixture
def pgm_bytes():
    """Factory fixture encoding arrays as PGM bytes"""
    return make_pgm
