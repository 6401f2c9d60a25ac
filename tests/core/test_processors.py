"""
Tests for pixel transformations (negative, threshold, brighten)
"""

import math

import numpy as np

from graymap.core.image import Image, brighten, negative, threshold
from graymap.core.instrumentation import counting


class TestNegative:
    """Test photographic negative"""

    def test_negative_uniform(self, uniform_image):
        """Level 10 becomes 245"""
        negative(uniform_image)
        assert np.all(uniform_image.to_array() == 245)

    def test_negative_twice_restores(self, ramp_image, ramp_array):
        """negative is an involution"""
        negative(ramp_image)
        negative(ramp_image)
        assert np.array_equal(ramp_image.to_array(), ramp_array)

    def test_negative_counts_pixel_accesses(self, uniform_image):
        """Each pixel is read and written once"""
        with counting() as counters:
            negative(uniform_image)
        assert counters["pixmem"] == 2 * 16


class TestThreshold:
    """Test thresholding"""

    def test_threshold_at_level(self, uniform_image):
        """Levels equal to the threshold become white"""
        threshold(uniform_image, 10)
        assert np.all(uniform_image.to_array() == 255)

    def test_threshold_above_level(self, uniform_image):
        """Levels below the threshold become black"""
        threshold(uniform_image, 11)
        assert np.all(uniform_image.to_array() == 0)

    def test_threshold_mixed(self, ramp_image):
        """Threshold splits the ramp"""
        threshold(ramp_image, 12)
        result = ramp_image.to_array().reshape(-1)

        assert np.all(result[:12] == 0)
        assert np.all(result[12:] == 255)

    def test_threshold_uses_maxval(self):
        """White is the image maxval, not 255"""
        img = Image.from_array(np.array([[10, 90]], dtype=np.uint8), maxval=100)
        threshold(img, 50)
        assert img.to_array().tolist() == [[0, 100]]


class TestBrighten:
    """Test brightening and darkening"""

    def test_brighten_no_saturation(self, uniform_image):
        """Level 10 doubled is 20"""
        brighten(uniform_image, 2.0)
        assert np.all(uniform_image.to_array() == 20)

    def test_brighten_saturates_at_maxval(self):
        """Results clamp to maxval"""
        img = Image.from_array(np.array([[60, 200]], dtype=np.uint8))
        brighten(img, 2.0)
        assert img.to_array().tolist() == [[120, 255]]

        low = Image.from_array(np.array([[60, 40]], dtype=np.uint8), maxval=100)
        brighten(low, 2.0)
        assert low.to_array().tolist() == [[100, 80]]

    def test_brighten_rounds_half_up(self):
        """0.5 rounds to 1, 1.5 rounds to 2"""
        img = Image.from_array(np.array([[1, 3, 4]], dtype=np.uint8))
        brighten(img, 0.5)
        assert img.to_array().tolist() == [[1, 2, 2]]

    def test_brighten_negative_factor_clamps_to_black(self, uniform_image):
        """Negative products saturate at 0"""
        brighten(uniform_image, -1.0)
        assert np.all(uniform_image.to_array() == 0)

    def test_brighten_infinite_factor(self):
        """Infinite factors saturate and black stays black"""
        img = Image.from_array(np.array([[0, 1, 200]], dtype=np.uint8), maxval=250)
        brighten(img, math.inf)
        assert img.to_array().tolist() == [[0, 250, 250]]

        brighten(img, -math.inf)
        assert img.to_array().tolist() == [[0, 0, 0]]

    def test_brighten_huge_factor(self, uniform_image):
        """Products overflowing to infinity clamp to maxval"""
        brighten(uniform_image, 1e308)
        assert uniform_image.stats() == (255, 255)

    def test_brighten_counts_read_and_write(self, uniform_image):
        """Each pixel is read and written once"""
        with counting() as counters:
            brighten(uniform_image, 1.5)
        assert counters["pixmem"] == 2 * 16

    def test_brighten_never_exceeds_maxval(self, ramp_image):
        """Any factor keeps levels within [0, maxval]"""
        for factor in (0.0, 0.3, 1.7, 50.0):
            brighten(ramp_image, factor)
            low, high = ramp_image.stats()
            assert 0 <= low <= high <= ramp_image.maxval
