"""
shadetint palettes
==================

Shades and tints of a base color, built by walking HSL lightness.

>>> from shadetint.palettes import generate_shades, generate_tints
>>> generate_shades("rgba(255, 0, 0, 1)", 2)
['rgba(204, 0, 0, 1)', 'rgba(153, 0, 0, 1)']
>>> generate_tints("rgb(255, 0, 0)", 2)
['rgba(255, 51, 51, 1)', 'rgba(255, 102, 102, 1)']
"""
from .lightness import shade_step, tint_step, shade_lightness, tint_lightness
from .generator import base_hsla, generate_shades, generate_tints
from .palette import Palette, Swatch, build_palette, clamp_count

__all__ = [
    "shade_step",
    "tint_step",
    "shade_lightness",
    "tint_lightness",
    "base_hsla",
    "generate_shades",
    "generate_tints",
    "Palette",
    "Swatch",
    "build_palette",
    "clamp_count",
]
