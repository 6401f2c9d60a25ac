"""
Tests for ImageConverters
"""

import base64

import cv2
import numpy as np
from PIL import Image as PILImage

from graymap.core.image import Image, ImageConverters


class TestNumpy:
    """Test NumPy conversions"""

    def test_to_numpy_is_copy(self, small_image):
        """Modifying the array leaves the image untouched"""
        array = ImageConverters.to_numpy(small_image)
        array[0, 0] = 200

        assert array.shape == (2, 3)
        assert small_image.get_pixel(0, 0) == 1

    def test_from_numpy_gray(self, ramp_array):
        """2-D arrays are taken as gray levels"""
        img = ImageConverters.from_numpy(ramp_array)
        assert np.array_equal(img.to_array(), ramp_array)

    def test_from_numpy_bgr(self):
        """Color arrays are converted to gray with OpenCV weights"""
        bgr = np.zeros((4, 6, 3), dtype=np.uint8)
        bgr[:, :3] = (255, 0, 0)
        bgr[:, 3:] = (0, 0, 255)

        img = ImageConverters.from_numpy(bgr)

        assert (img.width, img.height) == (6, 4)
        assert np.array_equal(img.to_array(), cv2.cvtColor(bgr, cv2.COLOR_BGR2GRAY))

    def test_from_numpy_float_clips(self):
        """Non-uint8 input is clipped into 0..255"""
        img = ImageConverters.from_numpy(np.array([[-5.0, 300.0, 42.0]]))
        assert img.to_array().tolist() == [[0, 255, 42]]

    def test_from_numpy_caps_at_maxval(self):
        """Levels above maxval are capped"""
        img = ImageConverters.from_numpy(np.array([[10, 200]], dtype=np.uint8), maxval=100)
        assert img.maxval == 100
        assert img.to_array().tolist() == [[10, 100]]


class TestPil:
    """Test PIL conversions"""

    def test_to_pil(self, small_image):
        """Images convert to mode L"""
        pil_image = ImageConverters.to_pil(small_image)

        assert pil_image.mode == "L"
        assert pil_image.size == (3, 2)
        assert pil_image.getpixel((2, 1)) == 6

    def test_from_pil_rgb(self):
        """Color PIL images are converted to L"""
        pil_image = PILImage.new("RGB", (5, 2), (255, 255, 255))
        img = ImageConverters.from_pil(pil_image)

        assert (img.width, img.height) == (5, 2)
        assert img.stats() == (255, 255)


class TestBase64:
    """Test base64 encoding"""

    def test_png_base64_decodes_to_same_levels(self, ramp_image):
        """PNG is lossless"""
        encoded = ImageConverters.to_base64(ramp_image)
        assert ImageConverters.from_base64(encoded).pixels_equal(ramp_image)

    def test_to_base64_passes_bytes_through(self):
        """Already encoded bytes are only base64 encoded"""
        assert ImageConverters.to_base64(b"abc") == base64.b64encode(b"abc").decode("utf-8")

    def test_opencv_encoding(self, ramp_image):
        """OpenCV PNG encoding decodes back to the same levels"""
        encoded = ImageConverters.encode_image_to_base64(ramp_image)
        buffer = np.frombuffer(base64.b64decode(encoded), dtype=np.uint8)
        decoded = cv2.imdecode(buffer, cv2.IMREAD_GRAYSCALE)

        assert np.array_equal(decoded, ramp_image.to_array())

    def test_from_base64_returns_image(self, small_image):
        """Decoded pictures are graymap images"""
        decoded = ImageConverters.from_base64(ImageConverters.to_base64(small_image, "PNG"))
        assert isinstance(decoded, Image)
        assert decoded.to_array().tolist() == [[1, 2, 3], [4, 5, 6]]
