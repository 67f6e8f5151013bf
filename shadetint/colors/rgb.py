from typing import ClassVar, Tuple
from ..types.color_types import ColorSpace
from .color_base import ColorBase, WithAlpha


class RGBA(ColorBase, WithAlpha):
    """8-bit red, green and blue with a unit alpha."""
    __slots__ = ()

    num_channels:  ClassVar[int] = 4
    mode:          ClassVar[ColorSpace] = "rgba"
    channel_types: ClassVar[Tuple[type, ...]] = (int, int, int, float)
    maxima:        ClassVar[Tuple[int, int, int, float]] = (255, 255, 255, 1.0)

    @property
    def r(self) -> int:
        return self.value[0]

    @property
    def g(self) -> int:
        return self.value[1]

    @property
    def b(self) -> int:
        return self.value[2]
