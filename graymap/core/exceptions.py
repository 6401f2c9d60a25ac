"""
Exception hierarchy for the graymap library.

Two classes of failure are distinguished:
- Contract violations: the caller broke a precondition (bad coordinates,
  rectangles that do not fit, destroyed images). Raised immediately.
- Resource and format failures: allocation, file and parse errors that a
  caller can recover from. No partially constructed image is ever returned.
"""


class GraymapError(Exception):
    """Base exception carrying a short cause string."""

    def __init__(self, cause: str, detail: str = ""):
        self.cause = cause
        self.detail = detail
        super().__init__(f"{cause}: {detail}" if detail else cause)


class ContractViolation(GraymapError, AssertionError):
    """A precondition of an image operation was not met."""


class AllocationError(GraymapError, MemoryError):
    """Memory for a new image could not be obtained."""


class EmptyImageError(GraymapError, ValueError):
    """Operation needs at least one pixel."""


class ImageFormatError(GraymapError, ValueError):
    """Malformed graymap data."""


class ImageIOError(GraymapError):
    """File could not be opened, read or written."""
