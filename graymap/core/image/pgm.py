"""
Binary graymap (PGM, "P5") reading and writing.

Handles the persisted raster format:
- Header: magic "P5", width, height and maxval as whitespace-separated
  ASCII decimals; "#" comment lines may appear between header tokens
- Exactly one whitespace byte after maxval
- width*height raw sample bytes in raster order

Only 8-bit graymaps (maxval <= 255) are accepted.
See http://netpbm.sourceforge.net/doc/pgm.html
"""

import logging
import re
from pathlib import Path
from typing import Optional, Union

import numpy as np

from graymap.core.constants import ErrorMessages, PGMConstants, PixelConstants
from graymap.core.exceptions import ImageFormatError, ImageIOError
from graymap.core.image.buffer import Image
from graymap.core.instrumentation import count_pixmem

logger = logging.getLogger(__name__)

_WHITESPACE = b" \t\n\r\v\f"
_INTEGER = re.compile(rb"[+-]?\d+")


class _HeaderReader:
    """Cursor over the header bytes of a graymap."""

    def __init__(self, data: bytes):
        self.data = data
        self.pos = 0

    def peek(self) -> bytes:
        return self.data[self.pos : self.pos + 1]

    def skip_whitespace(self) -> None:
        while self.peek() and self.peek() in _WHITESPACE:
            self.pos += 1

    def skip_comments(self) -> int:
        """Skip zero or more comment lines; returns how many were skipped."""
        skipped = 0
        while self.peek() == PGMConstants.COMMENT:
            end = self.data.find(b"\n", self.pos)
            self.pos = len(self.data) if end < 0 else end + 1
            skipped += 1
            self.skip_whitespace()
        return skipped

    def read_int(self) -> Optional[int]:
        self.skip_whitespace()
        match = _INTEGER.match(self.data, self.pos)
        if match is None:
            return None
        self.pos = match.end()
        return int(match.group())


def parse(data: bytes) -> Image:
    """
    Parse graymap bytes into a new image.

    Raises:
        ImageFormatError: With the failing field as cause
        AllocationError: If the pixel array cannot be allocated
    """
    reader = _HeaderReader(bytes(data))

    magic_end = len(PGMConstants.MAGIC)
    if reader.data[:magic_end] != PGMConstants.MAGIC:
        raise ImageFormatError(ErrorMessages.INVALID_FORMAT)
    reader.pos = magic_end
    # "P512" is not a P5 header
    follow = reader.peek()
    if follow and follow not in _WHITESPACE and follow != PGMConstants.COMMENT:
        raise ImageFormatError(ErrorMessages.INVALID_FORMAT)
    reader.skip_whitespace()

    reader.skip_comments()
    width = reader.read_int()
    if width is None or width < 0:
        raise ImageFormatError(ErrorMessages.INVALID_WIDTH)

    reader.skip_whitespace()
    reader.skip_comments()
    height = reader.read_int()
    if height is None or height < 0:
        raise ImageFormatError(ErrorMessages.INVALID_HEIGHT)

    reader.skip_whitespace()
    reader.skip_comments()
    maxval = reader.read_int()
    if maxval is None or not (0 < maxval <= PixelConstants.PIX_MAX):
        raise ImageFormatError(ErrorMessages.INVALID_MAXVAL_FIELD)

    separator = reader.peek()
    if not separator or separator not in _WHITESPACE:
        raise ImageFormatError(ErrorMessages.WHITESPACE_EXPECTED)
    reader.pos += 1

    size = width * height
    raster = reader.data[reader.pos : reader.pos + size]
    if len(raster) != size:
        raise ImageFormatError(
            ErrorMessages.READING_PIXELS, f"expected {size} bytes, got {len(raster)}"
        )

    samples = np.frombuffer(raster, dtype=np.uint8)
    if size and int(samples.max()) > maxval:
        raise ImageFormatError(
            ErrorMessages.READING_PIXELS, f"sample {int(samples.max())} exceeds maxval {maxval}"
        )

    img = Image(width, height, maxval)
    img.samples[:] = samples
    count_pixmem(size)
    return img


def serialize(img: Image) -> bytes:
    """Encode an image as graymap bytes."""
    header = PGMConstants.HEADER_TEMPLATE.format(
        width=img.width, height=img.height, maxval=img.maxval
    ).encode("ascii")
    raster = img.samples.tobytes()
    count_pixmem(len(raster))
    return header + raster


def load(path: Union[str, Path]) -> Image:
    """
    Load a raw PGM file.

    Raises:
        ImageIOError: If the file cannot be opened or read
        ImageFormatError: If the contents are not an 8-bit graymap
    """
    try:
        data = Path(path).read_bytes()
    except OSError as e:
        logger.error(f"Failed to open {path}: {e}")
        raise ImageIOError(ErrorMessages.OPEN_FAILED, str(e)) from e

    img = parse(data)
    logger.info(f"Loaded {img!r} from {path}")
    return img


def save(img: Image, path: Union[str, Path]) -> None:
    """
    Save image to a PGM file.

    On failure a partial, invalid file may be left behind.

    Raises:
        ImageIOError: If the file cannot be opened or written
    """
    header = PGMConstants.HEADER_TEMPLATE.format(
        width=img.width, height=img.height, maxval=img.maxval
    ).encode("ascii")

    try:
        f = open(path, "wb")
    except OSError as e:
        logger.error(f"Failed to open {path} for writing: {e}")
        raise ImageIOError(ErrorMessages.OPEN_FAILED, str(e)) from e

    with f:
        try:
            f.write(header)
        except OSError as e:
            raise ImageIOError(ErrorMessages.WRITING_HEADER_FAILED, str(e)) from e
        try:
            f.write(img.samples.tobytes())
        except OSError as e:
            raise ImageIOError(ErrorMessages.WRITING_PIXELS_FAILED, str(e)) from e

    count_pixmem(img.size)
    logger.info(f"Saved {img!r} to {path}")
