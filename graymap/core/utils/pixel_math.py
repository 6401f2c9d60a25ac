"""
Saturating pixel arithmetic.

Gray levels are 8-bit unsigned values. Every producer of new levels
(brighten, blend, blur) rounds half-up and clamps into [0, maxval] instead
of wrapping around.
"""

import math

import numpy as np


def round_half_up(value: float) -> int:
    """Round to nearest integer, ties towards +infinity ("add 0.5, floor")."""
    return math.floor(value + 0.5)


def saturate(value: int, maxval: int) -> int:
    """Clamp a level into [0, maxval]."""
    if value < 0:
        return 0
    if value > maxval:
        return maxval
    return value


def saturate_round(value: float, maxval: int) -> int:
    """
    Round half-up, then clamp into [0, maxval].

    Non-finite values saturate: +inf gives maxval, -inf and NaN give 0.
    """
    if math.isnan(value) or value <= 0:
        return 0
    if value >= maxval:
        return maxval
    return round_half_up(value)


def rounded_mean(total: int, count: int) -> int:
    """
    Exact round-half-up of total / count for non-negative integers.

    Uses (2*total + count) // (2*count), avoiding floating point.
    """
    return (2 * total + count) // (2 * count)


def saturate_round_array(values: np.ndarray, maxval: int) -> np.ndarray:
    """Vectorised saturate_round, returning uint8 levels."""
    values = np.nan_to_num(values.astype(np.float64), nan=0.0, posinf=maxval, neginf=0.0)
    rounded = np.floor(np.clip(values, 0, maxval) + 0.5)
    return np.clip(rounded, 0, maxval).astype(np.uint8)
