"""
shadetint color space conversions
=================================

RGB ↔ HSL conversion with scalar and vectorized (numpy) implementations.

Scalar functions
----------------
    unit_rgb_to_hsl(r, g, b)
        Unit RGB → (hue degrees, unit saturation, unit lightness)
    rgb_to_hsl(r, g, b, a=1)
        8-bit RGB plus alpha → HSLA (percent saturation/lightness)
    hsl_to_unit_rgb(h, s, l)
        (hue degrees, unit saturation, unit lightness) → unit RGB
    hsl_to_rgba(h, s, l, a=1)
        HSL in degrees/percent plus alpha → 8-bit RGBA
    hsl_to_rgb(h, s, l, a=1)
        Same, rendered as an ``rgba(R, G, B, A)`` string

Vectorized functions
--------------------
    np_rgb_to_hsl(r, g, b)
    np_hsl_to_rgb(h, s, l)

Rounding
--------
RGB channels are quantized with round-half-up (``floor(x + 0.5)``), not
Python's round-half-to-even. Every 8-bit RGB triple survives
RGB → HSL → RGB unchanged.

>>> from shadetint.conversions import rgb_to_hsl, hsl_to_rgb
>>> rgb_to_hsl(255, 0, 0, 0.5)
HSLA(0.0, 100.0, 50.0, 0.5)
>>> hsl_to_rgb(0, 100, 50, 0.5)
'rgba(255, 0, 0, 0.5)'
"""

from .to_hsl import unit_rgb_to_hsl, rgb_to_hsl, np_rgb_to_hsl
from .to_rgb import hsl_to_unit_rgb, hsl_to_rgba, hsl_to_rgb, np_hsl_to_rgb
from .numbers import clamp_percent, normalize_hue

__all__ = [
    'unit_rgb_to_hsl',
    'rgb_to_hsl',
    'np_rgb_to_hsl',
    'hsl_to_unit_rgb',
    'hsl_to_rgba',
    'hsl_to_rgb',
    'np_hsl_to_rgb',
    'clamp_percent',
    'normalize_hue',
]
