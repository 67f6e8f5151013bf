"""
Color value types
=================

Immutable scalar color values used across shadetint.

- ``RGBA``: integer red, green, blue in ``[0, 255]`` and a float alpha in ``[0, 1]``
- ``HSLA``: hue in degrees ``[0, 360)``, saturation and lightness in percent,
  float alpha in ``[0, 1]``

Instances are frozen after ``__init__``, clamp out-of-range channels, iterate
like tuples and compare equal to plain tuples holding the same values.

>>> from shadetint.colors import RGBA, HSLA
>>> RGBA((255, 0, 0, 0.5)) == (255, 0, 0, 0.5)
True
>>> HSLA((370, 120, 50)).value
(10.0, 100.0, 50.0, 1.0)
"""
from .color_base import ColorBase, WithAlpha
from .rgb import RGBA
from .hsl import HSLA

__all__ = ["ColorBase", "WithAlpha", "RGBA", "HSLA"]
