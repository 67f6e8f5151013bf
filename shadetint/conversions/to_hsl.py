import numpy as np
from numpy import ndarray as NDArray
from ..colors.hsl import HSLA
from .numbers import normalize_hue

## RGB to HSL conversions

def unit_rgb_to_hsl(r: float, g: float, b: float) -> tuple[float, float, float]:
    """
    Convert unit RGB to HSL.

    Args:
        r: Red component in [0, 1]
        g: Green component in [0, 1]
        b: Blue component in [0, 1]

    Returns:
        Tuple[float, float, float]: (hue [0,360), saturation [0,1], lightness [0,1])
    """
    max_c = max(r, g, b)
    min_c = min(r, g, b)
    delta = max_c - min_c

    lightness = (max_c + min_c) / 2.0

    if delta == 0:
        # achromatic
        return 0.0, 0.0, lightness

    if lightness > 0.5:
        saturation = delta / (2.0 - max_c - min_c)
    else:
        saturation = delta / (max_c + min_c)

    if max_c == r:
        hue = (g - b) / delta + (6.0 if g < b else 0.0)
    elif max_c == g:
        hue = (b - r) / delta + 2.0
    else:
        hue = (r - g) / delta + 4.0

    return normalize_hue(hue * 60.0), saturation, lightness


def rgb_to_hsl(r: int, g: int, b: int, a: float = 1.0) -> HSLA:
    """
    Convert 8-bit RGB (plus alpha) to HSLA.

    Saturation and lightness come back in percent; alpha passes through.

    >>> rgb_to_hsl(255, 0, 0, 0.5)
    HSLA(0.0, 100.0, 50.0, 0.5)
    """
    h, s, l = unit_rgb_to_hsl(r / 255, g / 255, b / 255)
    return HSLA((h, s * 100.0, l * 100.0, a))


def np_rgb_to_hsl(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized: Convert 8-bit RGB to HSL.

    Args:
        r, g, b: array-like or scalar, [0, 255]

    Returns:
        hsl: array of shape (..., 3): (hue [0,360), saturation [0,100], lightness [0,100])
    """
    r = np.asarray(r, dtype=float) / 255
    g = np.asarray(g, dtype=float) / 255
    b = np.asarray(b, dtype=float) / 255

    out_shape = np.broadcast(r, g, b).shape
    r = np.broadcast_to(r, out_shape)
    g = np.broadcast_to(g, out_shape)
    b = np.broadcast_to(b, out_shape)

    max_c = np.maximum.reduce([r, g, b])
    min_c = np.minimum.reduce([r, g, b])
    delta = max_c - min_c

    lightness = (max_c + min_c) / 2.0

    chromatic = delta > 0
    light = chromatic & (lightness > 0.5)
    dark = chromatic & ~(lightness > 0.5)

    saturation = np.zeros(out_shape)
    saturation[light] = delta[light] / (2.0 - max_c[light] - min_c[light])
    saturation[dark] = delta[dark] / (max_c[dark] + min_c[dark])

    # Same precedence as the scalar version: red, then green, then blue.
    mask_r = chromatic & (max_c == r)
    mask_g = chromatic & ~mask_r & (max_c == g)
    mask_b = chromatic & ~mask_r & ~mask_g

    hue = np.zeros(out_shape)
    hue[mask_r] = (g[mask_r] - b[mask_r]) / delta[mask_r] + np.where(g[mask_r] < b[mask_r], 6.0, 0.0)
    hue[mask_g] = (b[mask_g] - r[mask_g]) / delta[mask_g] + 2.0
    hue[mask_b] = (r[mask_b] - g[mask_b]) / delta[mask_b] + 4.0
    hue = (hue * 60.0) % 360.0

    return np.stack([hue, saturation * 100.0, lightness * 100.0], axis=-1)
