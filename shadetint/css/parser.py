"""
Parsing of the ``rgb()``/``rgba()`` color strings handed over by the host.

Only three inputs are understood: the literal ``white``, ``rgb(R, G, B)`` and
``rgba(R, G, B, A)``. Anything else resolves to opaque black and issues a
``ColorParseWarning``; parsing never raises.
"""
from __future__ import annotations
import re
import warnings
from dataclasses import dataclass
from typing import Any, Optional
from ..colors.rgb import RGBA
from ..config import FALLBACK_RGBA, WHITE_RGBA, WHITE_TOKEN

RGBA_PATTERN = re.compile(
    r"rgba?\s*\(\s*(\d+)\s*,\s*(\d+)\s*,\s*(\d+)\s*(?:,\s*(\d*\.?\d+)\s*)?\)"
)


class ColorParseWarning(UserWarning):
    """Issued when a color string could not be parsed and black was substituted."""


@dataclass(frozen=True)
class ParseResult:
    rgba: RGBA
    fallback: bool = False
    source: Optional[str] = None

    @property
    def ok(self) -> bool:
        return not self.fallback


def parse_color_result(color: Any, *, stacklevel: int = 2) -> ParseResult:
    """
    Parse a color string, reporting whether the fallback was used.

    Args:
        color: ``"white"``, ``"rgb(r, g, b)"``, ``"rgba(r, g, b, a)"`` or None
        stacklevel: frame the fallback warning is attributed to, counted
            from this function as in ``warnings.warn``

    Returns:
        ParseResult holding the RGBA value. On failure ``rgba`` is opaque
        black and ``fallback`` is True.
    """
    if color == WHITE_TOKEN:
        return ParseResult(RGBA(WHITE_RGBA), source=color)

    match = RGBA_PATTERN.search(color) if isinstance(color, str) else None
    if match is None:
        warnings.warn(
            f"Failed to parse color {color!r}; using opaque black",
            ColorParseWarning,
            stacklevel=stacklevel,
        )
        return ParseResult(RGBA(FALLBACK_RGBA), fallback=True, source=color if isinstance(color, str) else None)

    r, g, b, a = match.groups()
    alpha = float(a) if a is not None else 1.0
    return ParseResult(RGBA((int(r), int(g), int(b), alpha)), source=color)


def parse_color(color: Any, *, stacklevel: int = 2) -> RGBA:
    """
    Parse a color string into RGBA; opaque black when it cannot be parsed.

    >>> parse_color("rgba(255, 0, 0, 0.5)")
    RGBA(255, 0, 0, 0.5)
    >>> parse_color("rgb(0, 255, 0)")
    RGBA(0, 255, 0, 1.0)
    """
    return parse_color_result(color, stacklevel=stacklevel + 1).rgba
