import math
from numbers import Real
from typing import Any


def is_number(value: Any) -> bool:
    """True for finite real numbers. Booleans are not numbers here."""
    if isinstance(value, bool) or not isinstance(value, Real):
        return False
    return math.isfinite(value)


def round_half_up(value: float) -> int:
    """
    Round to the nearest integer, halves going up.

    For the non-negative channel values this library produces, this is the
    same as rounding half away from zero. The built-in ``round`` rounds halves
    to even and is not used for channel quantization.
    """
    return int(math.floor(value + 0.5))
