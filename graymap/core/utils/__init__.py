"""
Utility modules for core functionality.

Modules:
- pixel_math: Saturating and rounding arithmetic on gray levels
- validation: Precondition checks raising ContractViolation
- decorators: Utility decorators and context managers (timer)
"""

from .decorators import timer
from .pixel_math import (
    round_half_up,
    rounded_mean,
    saturate,
    saturate_round,
    saturate_round_array,
)
from .validation import (
    require,
    require_dimensions,
    require_level,
    require_maxval,
    require_position,
    require_rect,
)

__all__ = [
    "timer",
    "round_half_up",
    "rounded_mean",
    "saturate",
    "saturate_round",
    "saturate_round_array",
    "require",
    "require_dimensions",
    "require_level",
    "require_maxval",
    "require_position",
    "require_rect",
]
