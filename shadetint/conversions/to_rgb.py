import numpy as np
from numpy import ndarray as NDArray
from boundednumbers.np_functions import clamp, cyclic_wrap_float
from ..colors.rgb import RGBA
from ..css.formatter import format_color
from ..utils import round_half_up
from .numbers import clamp_percent, normalize_hue

## HSL to RGB conversions

def hsl_to_unit_rgb(h: float, s: float, l: float) -> tuple[float, float, float]:
    """
    Convert HSL to unit RGB using chroma, the intermediate X and the offset m.

    Sectors are half-open: [0, 60), [60, 120), ..., and [300, 360) is last.

    Args:
        h: Hue in degrees [0, 360)
        s: Saturation in [0, 1]
        l: Lightness in [0, 1]

    Returns:
        Tuple[float, float, float]: (r, g, b) in [0, 1], not yet quantized
    """
    c = (1 - abs(2 * l - 1)) * s
    x = c * (1 - abs((h / 60) % 2 - 1))
    m = l - c / 2

    if h < 60:
        r, g, b = c, x, 0.0
    elif h < 120:
        r, g, b = x, c, 0.0
    elif h < 180:
        r, g, b = 0.0, c, x
    elif h < 240:
        r, g, b = 0.0, x, c
    elif h < 300:
        r, g, b = x, 0.0, c
    else:
        r, g, b = c, 0.0, x

    return r + m, g + m, b + m


def hsl_to_rgba(h: float, s: float, l: float, a: float = 1.0) -> RGBA:
    """
    Convert HSL (degrees, percent, percent) plus alpha to 8-bit RGBA.

    Hue wraps modulo 360 and saturation/lightness are clamped to [0, 100]
    first. Channels are rounded half up, so 127.5 becomes 128.
    """
    r, g, b = hsl_to_unit_rgb(
        normalize_hue(h),
        clamp_percent(s) / 100,
        clamp_percent(l) / 100,
    )
    return RGBA((round_half_up(r * 255), round_half_up(g * 255), round_half_up(b * 255), a))


def hsl_to_rgb(h: float, s: float, l: float, a: float = 1.0) -> str:
    """
    Convert HSL plus alpha straight to the canonical ``rgba(R, G, B, A)`` string.

    >>> hsl_to_rgb(0, 100, 50, 0.5)
    'rgba(255, 0, 0, 0.5)'
    """
    return format_color(hsl_to_rgba(h, s, l, a))


def np_hsl_to_rgb(h: NDArray, s: NDArray, l: NDArray) -> NDArray:
    """
    Vectorized: Convert HSL to 8-bit RGB.

    Args:
        h: array-like or scalar, hue in degrees
        s: array-like or scalar, saturation in [0, 100]
        l: array-like or scalar, lightness in [0, 100]

    Returns:
        rgb: int array of shape (..., 3) in [0, 255]
    """
    h = np.asarray(h, dtype=float)
    s = np.asarray(s, dtype=float)
    l = np.asarray(l, dtype=float)

    out_shape = np.broadcast(h, s, l).shape
    work_shape = out_shape or (1,)
    h = np.asarray(cyclic_wrap_float(np.broadcast_to(h, work_shape).copy(), 0.0, 360.0), dtype=float)
    s = np.asarray(clamp(np.broadcast_to(s, work_shape).copy(), 0.0, 100.0), dtype=float) / 100
    l = np.asarray(clamp(np.broadcast_to(l, work_shape).copy(), 0.0, 100.0), dtype=float) / 100

    c = (1 - np.abs(2 * l - 1)) * s
    x = c * (1 - np.abs((h / 60) % 2 - 1))
    m = l - c / 2
    zero = np.zeros(work_shape)

    sector = np.minimum(np.floor(h / 60), 5).astype(int)
    r = np.choose(sector, [c, x, zero, zero, x, c])
    g = np.choose(sector, [x, c, c, x, zero, zero])
    b = np.choose(sector, [zero, zero, x, c, c, x])

    rgb = np.stack([r + m, g + m, b + m], axis=-1) * 255
    rgb = np.clip(np.floor(rgb + 0.5), 0, 255).astype(int)
    return rgb.reshape(out_shape + (3,))
