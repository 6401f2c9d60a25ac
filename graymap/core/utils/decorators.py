"""
Utility decorators and context managers.
"""

import time
from contextlib import contextmanager
from typing import Dict, Iterator


@contextmanager
def timer() -> Iterator[Dict[str, float]]:
    """
    Measure wall-clock time of a block.

    The yielded dict is filled in when the block exits, so read it after
    the with statement:

        >>> with timer() as t:
        ...     do_work()
        >>> t["ms"]
    """
    result: Dict[str, float] = {"ms": 0.0, "seconds": 0.0}
    start = time.perf_counter()
    try:
        yield result
    finally:
        elapsed = time.perf_counter() - start
        result["seconds"] = elapsed
        result["ms"] = round(elapsed * 1000, 3)
