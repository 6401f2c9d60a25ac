"""
Instrumentation - named operation counters for algorithm analysis.

Counters are injected explicitly instead of living in a global array:

    >>> with counting() as counters:
    ...     rotate(img)
    >>> counters["pixmem"]

Outside a counting() scope nothing is recorded. The active scope is kept in
a ContextVar, so threads and asyncio tasks each see their own scope.
"""

import logging
import time
from contextlib import contextmanager
from contextvars import ContextVar
from threading import RLock
from typing import Any, Dict, Iterable, Iterator, Optional

from graymap.core.constants import InstrumentationConstants

logger = logging.getLogger(__name__)


class PixelCounters:
    """Set of named counters with elapsed-time bookkeeping"""

    def __init__(self, names: Iterable[str] = InstrumentationConstants.DEFAULT_COUNTERS):
        """
        Initialize counters

        Args:
            names: Counter names registered up front (others are added on first use)
        """
        self.counts: Dict[str, int] = {name: 0 for name in names}
        self.started_at = time.perf_counter()

        # Thread safety when one instance is shared across threads
        self.lock = RLock()

    def add(self, name: str, amount: int = 1) -> None:
        """Increase counter name by amount"""
        with self.lock:
            self.counts[name] = self.counts.get(name, 0) + amount

    def __getitem__(self, name: str) -> int:
        with self.lock:
            return self.counts.get(name, 0)

    def reset(self) -> None:
        """Zero all counters and restart the clock"""
        with self.lock:
            for name in self.counts:
                self.counts[name] = 0
            self.started_at = time.perf_counter()

    @property
    def elapsed_ms(self) -> float:
        return round((time.perf_counter() - self.started_at) * 1000, 3)

    def snapshot(self) -> Dict[str, Any]:
        """Get current counter values plus elapsed time"""
        with self.lock:
            data: Dict[str, Any] = dict(self.counts)
        data["elapsed_ms"] = self.elapsed_ms
        return data

    def report(self, label: str = "") -> Dict[str, Any]:
        """Log the current snapshot and return it"""
        data = self.snapshot()
        counters = " ".join(f"{name}={value}" for name, value in data.items())
        logger.info(f"Instrumentation{f' [{label}]' if label else ''}: {counters}")
        return data


_active_counters: ContextVar[Optional[PixelCounters]] = ContextVar(
    "graymap_active_counters", default=None
)


@contextmanager
def counting(counters: Optional[PixelCounters] = None) -> Iterator[PixelCounters]:
    """
    Activate counters for the duration of the block.

    Args:
        counters: Counters to record into; a fresh PixelCounters if None

    Yields:
        The active counters
    """
    if counters is None:
        counters = PixelCounters()
    token = _active_counters.set(counters)
    try:
        yield counters
    finally:
        _active_counters.reset(token)


def active_counters() -> Optional[PixelCounters]:
    """Get the counters of the current scope, or None"""
    return _active_counters.get()


def count(name: str, amount: int = 1) -> None:
    """Record amount units on counter name if a counting() scope is active"""
    counters = _active_counters.get()
    if counters is not None:
        counters.add(name, amount)


def count_pixmem(amount: int = 1) -> None:
    count(InstrumentationConstants.PIXMEM, amount)
