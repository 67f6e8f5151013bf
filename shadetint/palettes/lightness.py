"""
Adaptive lightness stepping.

The default step walks 10 percentage points per variant. When the requested
count would run past the lightness boundary (0 for shades, 100 for tints), the
step shrinks to ``available / count`` so the last variant lands exactly on the
boundary and no two variants collapse onto it.
"""
import numpy as np
from ..config import DEFAULT_LIGHTNESS_STEP, MIN_LIGHTNESS, MAX_LIGHTNESS


def _adaptive_step(available: float, count: int, step: float) -> float:
    if count <= 0:
        return 0.0
    if available <= 0:
        # Already at the boundary.
        return 0.0
    if count * step > available:
        return available / count
    return float(step)


def shade_step(l0: float, count: int, step: float = DEFAULT_LIGHTNESS_STEP) -> float:
    """Percentage points of lightness removed per shade."""
    return _adaptive_step(l0 - MIN_LIGHTNESS, count, step)


def tint_step(l0: float, count: int, step: float = DEFAULT_LIGHTNESS_STEP) -> float:
    """Percentage points of lightness added per tint."""
    return _adaptive_step(MAX_LIGHTNESS - l0, count, step)


def shade_lightness(l0: float, count: int, step: float = DEFAULT_LIGHTNESS_STEP) -> np.ndarray:
    """Shade lightness values, closest to ``l0`` first."""
    if count <= 0:
        return np.empty(0, dtype=float)
    delta = shade_step(l0, count, step)
    return np.maximum(MIN_LIGHTNESS, l0 - np.arange(1, count + 1) * delta)


def tint_lightness(l0: float, count: int, step: float = DEFAULT_LIGHTNESS_STEP) -> np.ndarray:
    """Tint lightness values, closest to ``l0`` first."""
    if count <= 0:
        return np.empty(0, dtype=float)
    delta = tint_step(l0, count, step)
    return np.minimum(MAX_LIGHTNESS, l0 + np.arange(1, count + 1) * delta)
