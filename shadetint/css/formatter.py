import numpy as np
from ..colors.rgb import RGBA


def format_alpha(a: float) -> str:
    """
    Render alpha in its shortest positional form: ``1``, ``0.5``, ``0.125``.

    Never uses exponent notation, so the parser can always read it back.
    """
    return np.format_float_positional(float(a), trim='-')


def format_rgba(r: int, g: int, b: int, a: float = 1.0) -> str:
    """Canonical ``rgba(R, G, B, A)`` form of the given channels."""
    return f"rgba({int(r)}, {int(g)}, {int(b)}, {format_alpha(a)})"


def format_color(color: RGBA) -> str:
    return format_rgba(color.r, color.g, color.b, color.a)
