from .formatter import format_alpha, format_rgba, format_color
from .parser import (
    RGBA_PATTERN,
    ColorParseWarning,
    ParseResult,
    parse_color,
    parse_color_result,
)

__all__ = [
    "format_alpha",
    "format_rgba",
    "format_color",
    "RGBA_PATTERN",
    "ColorParseWarning",
    "ParseResult",
    "parse_color",
    "parse_color_result",
]
