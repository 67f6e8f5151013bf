"""shadetint: shades and tints of a color by walking HSL lightness."""

from .colors import ColorBase, RGBA, HSLA
from .css import (
    ColorParseWarning,
    ParseResult,
    parse_color,
    parse_color_result,
    format_alpha,
    format_rgba,
    format_color,
)
from .conversions import (
    unit_rgb_to_hsl,
    rgb_to_hsl,
    np_rgb_to_hsl,
    hsl_to_unit_rgb,
    hsl_to_rgba,
    hsl_to_rgb,
    np_hsl_to_rgb,
)
from .palettes import (
    shade_step,
    tint_step,
    shade_lightness,
    tint_lightness,
    generate_shades,
    generate_tints,
    Palette,
    Swatch,
    build_palette,
    clamp_count,
)
from .utils import is_number

__version__ = "0.1.0"

__all__ = [
    # value types
    "ColorBase",
    "RGBA",
    "HSLA",
    # parsing and formatting
    "ColorParseWarning",
    "ParseResult",
    "parse_color",
    "parse_color_result",
    "format_alpha",
    "format_rgba",
    "format_color",
    # conversions
    "unit_rgb_to_hsl",
    "rgb_to_hsl",
    "np_rgb_to_hsl",
    "hsl_to_unit_rgb",
    "hsl_to_rgba",
    "hsl_to_rgb",
    "np_hsl_to_rgb",
    # palettes
    "shade_step",
    "tint_step",
    "shade_lightness",
    "tint_lightness",
    "generate_shades",
    "generate_tints",
    "Palette",
    "Swatch",
    "build_palette",
    "clamp_count",
    "is_number",
    "__version__",
]
