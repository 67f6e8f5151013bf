from typing import List
import numpy as np
from ..colors.hsl import HSLA
from ..config import DEFAULT_LIGHTNESS_STEP
from ..conversions import rgb_to_hsl, np_hsl_to_rgb
from ..css import parse_color, format_rgba
from .lightness import shade_lightness, tint_lightness


def base_hsla(color: str, *, stacklevel: int = 2) -> HSLA:
    """Parse ``color`` and convert it to HSLA. Unparseable input gives opaque black."""
    return rgb_to_hsl(*parse_color(color, stacklevel=stacklevel + 1))


def _render(base: HSLA, lightness: np.ndarray) -> List[str]:
    rgb = np_hsl_to_rgb(base.h, base.s, lightness)
    return [format_rgba(r, g, b, base.a) for r, g, b in rgb.reshape(-1, 3).tolist()]


def generate_shades(
    color: str, count: int, *, step: float = DEFAULT_LIGHTNESS_STEP, stacklevel: int = 2
) -> List[str]:
    """
    Darker variants of ``color`` with hue, saturation and alpha kept.

    Args:
        color: ``rgb()``/``rgba()`` string or ``"white"``
        count: number of shades; zero or less gives an empty list
        step: lightness points per shade before adaptive shrinking
        stacklevel: frame a parse warning is attributed to, as in ``warnings.warn``

    Returns:
        ``rgba(R, G, B, A)`` strings, the shade closest to ``color`` first and
        the darkest last.
    """
    if count <= 0:
        return []
    base = base_hsla(color, stacklevel=stacklevel + 1)
    return _render(base, shade_lightness(base.l, count, step))


def generate_tints(
    color: str, count: int, *, step: float = DEFAULT_LIGHTNESS_STEP, stacklevel: int = 2
) -> List[str]:
    """
    Lighter variants of ``color`` with hue, saturation and alpha kept.

    Returns:
        ``rgba(R, G, B, A)`` strings, the tint closest to ``color`` first and
        the lightest last.
    """
    if count <= 0:
        return []
    base = base_hsla(color, stacklevel=stacklevel + 1)
    return _render(base, tint_lightness(base.l, count, step))
