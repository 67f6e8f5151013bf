from ..types.color_types import Scalar
from ..config import MIN_LIGHTNESS, MAX_LIGHTNESS


def clamp_percent(value: Scalar) -> float:
    """Clamp a saturation or lightness value to [0, 100]."""
    return float(max(MIN_LIGHTNESS, min(value, MAX_LIGHTNESS)))


def normalize_hue(h: Scalar) -> float:
    """Normalize hue to [0, 360) range."""
    return float(h) % 360.0
