from typing import ClassVar, Tuple
from ..types.color_types import ColorSpace, ScalarVector
from .color_base import ColorBase, WithAlpha


class HSLA(ColorBase, WithAlpha):
    """
    Hue in degrees, saturation and lightness in percent, unit alpha.

    Hue wraps modulo 360 instead of being clamped; saturation, lightness and
    alpha are clamped into their ranges.
    """
    __slots__ = ()

    num_channels:  ClassVar[int] = 4
    mode:          ClassVar[ColorSpace] = "hsla"
    channel_types: ClassVar[Tuple[type, ...]] = (float, float, float, float)
    maxima:        ClassVar[Tuple[float, float, float, float]] = (360.0, 100.0, 100.0, 1.0)

    @classmethod
    def _normalize(cls, values: ScalarVector) -> Tuple[float, ...]:
        h, rest = values[0], values[1:]
        _, s, l, a = super()._normalize((0.0,) + tuple(rest))
        return (float(h) % 360.0, s, l, a)

    @property
    def h(self) -> float:
        return self.value[0]

    @property
    def s(self) -> float:
        return self.value[1]

    @property
    def l(self) -> float:
        return self.value[2]
