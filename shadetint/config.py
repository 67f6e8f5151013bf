"""
Palette defaults and bounds.

Everything here is a plain module constant; functions that can be tuned take
the matching keyword argument and fall back to these values.
"""
from .types.color_types import RGBAValue

# Percentage points of lightness between two neighbouring shades/tints.
DEFAULT_LIGHTNESS_STEP: float = 10.0

MIN_LIGHTNESS: float = 0.0
MAX_LIGHTNESS: float = 100.0

# Bounds the interactive picker enforces on shade/tint counts.
MIN_COUNT: int = 1
MAX_COUNT: int = 10
DEFAULT_SHADE_COUNT: int = 4
DEFAULT_TINT_COUNT: int = 4

FALLBACK_RGBA: RGBAValue = (0, 0, 0, 1.0)
WHITE_RGBA: RGBAValue = (255, 255, 255, 1.0)
WHITE_TOKEN: str = "white"

DEFAULT_PALETTE_NAME: str = "Unnamed"
BASE_SUFFIX: str = " (Base)"
PALETTE_TITLE_SUFFIX: str = " - Shades and Tints"
