"""
Constants and configuration values for the graymap library.
Centralizes all magic numbers and configuration constants.
"""


# Pixel Constants
class PixelConstants:
    """Constants related to 8-bit gray levels."""

    # Maximum value storable in a pixel (maximum maxval accepted)
    PIX_MAX = 255
    MIN_MAXVAL = 1
    BLACK = 0


# Image Management Constants
class ImageConstants:
    """Constants related to image storage."""

    # Storage limits
    DEFAULT_MAX_IMAGES = 100
    DEFAULT_MAX_MEMORY_MB = 256
    MIN_IMAGES = 1
    MAX_IMAGES = 1000

    # Image dimensions
    MAX_IMAGE_DIMENSION = 8192
    DEFAULT_MAXVAL = 255

    # Preview settings
    PREVIEW_FORMAT = ".png"


# PGM Format Constants
class PGMConstants:
    """Constants for the binary graymap (P5) file format."""

    MAGIC = b"P5"
    COMMENT = b"#"
    HEADER_TEMPLATE = "P5\n{width} {height}\n{maxval}\n"
    FILE_EXTENSION = ".pgm"
    MEDIA_TYPE = "image/x-portable-graymap"


# Instrumentation Constants
class InstrumentationConstants:
    """Names of the instrumentation counters."""

    PIXMEM = "pixmem"
    ADDS = "adds"
    DEFAULT_COUNTERS = (PIXMEM, ADDS)

    # Pixel accesses charged for each anchor tried by the sub-image locator
    LOCATE_PIXMEM_PER_ANCHOR = 3
    LOCATE_ADDS_PER_ANCHOR = 1


# API Constants
class APIConstants:
    """Constants for API endpoints."""

    DEFAULT_HOST = "0.0.0.0"
    DEFAULT_PORT = 8000
    MAX_UPLOAD_SIZE_MB = 64


# System Constants
class SystemConstants:
    """Constants for system operations."""

    LOG_LEVEL_DEFAULT = "INFO"
    LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    ENV_PREFIX = "GRAYMAP_"


# Error Messages
class ErrorMessages:
    """Standard error messages."""

    # Allocation errors
    PIXEL_ALLOCATION_FAILED = "Memory allocation for pixel array failed"

    # Contract violations
    INVALID_DIMENSIONS = "Invalid image dimensions: {width}x{height}"
    INVALID_MAXVAL = "Invalid maxval: {maxval} (must be in 1..{pix_max})"
    INVALID_POSITION = "Position ({x}, {y}) is outside image {width}x{height}"
    INVALID_RECT = "Rectangle ({x}, {y}, {w}, {h}) is not inside image {width}x{height}"
    INVALID_LEVEL = "Invalid pixel level: {level}"
    INVALID_RADIUS = "Invalid blur radius: dx={dx}, dy={dy}"
    RELEASED_IMAGE = "Image has been destroyed"
    EMPTY_IMAGE = "Image has no pixels"

    # PGM errors
    OPEN_FAILED = "Open failed"
    INVALID_FORMAT = "Invalid file format"
    INVALID_WIDTH = "Invalid width"
    INVALID_HEIGHT = "Invalid height"
    INVALID_MAXVAL_FIELD = "Invalid maxval"
    WHITESPACE_EXPECTED = "Whitespace expected"
    READING_PIXELS = "Reading pixels"
    WRITING_HEADER_FAILED = "Writing header failed"
    WRITING_PIXELS_FAILED = "Writing pixels failed"

    # Store errors
    IMAGE_NOT_FOUND = "Image with ID {image_id} not found"
    IMAGE_STORAGE_FULL = "Image storage is full, cannot store new image"
    IMAGE_TOO_LARGE = "Image dimensions {width}x{height} exceed limit {limit}"
