from __future__ import annotations
from typing import Any, ClassVar, Iterator, Tuple, cast
from abc import ABC
from ..types.color_types import ColorSpace, ColorValue, Scalar, ScalarVector
from ..utils import get_dimension, round_half_up


class ColorBase:
    __slots__ = ('_value', '_is_frozen')  # no new attributes → immutability

    num_channels:  ClassVar[int] = 1
    mode:          ClassVar[ColorSpace]
    channel_types: ClassVar[Tuple[type, ...]]
    maxima:        ClassVar[ScalarVector]

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, value: ColorValue | ColorBase) -> None:
        if isinstance(value, ColorBase):
            if value.mode != self.mode:
                raise ValueError(f"{self.mode} cannot be built from a {value.mode} color; convert it first")
            value = cast(ColorValue, value.value)

        value_dim = get_dimension(value)
        if value_dim == self.num_channels - 1 and isinstance(self, WithAlpha):
            value = tuple(value) + (self.alpha_max,)
        elif value_dim != self.num_channels:
            raise ValueError(f"{self.mode} expects {self.num_channels} channels, got {value!r}")

        self._value = self._normalize(tuple(cast(ScalarVector, value)))

        # freeze instance; no more writes allowed
        super().__setattr__('_is_frozen', True)

    @classmethod
    def _normalize(cls, values: ScalarVector) -> Tuple[Scalar, ...]:
        """Cast each channel to its type and clamp it into ``[0, maximum]``."""
        out = []
        for v, kind, m in zip(values, cls.channel_types, cls.maxima):
            v = max(0, min(v, m))
            out.append(round_half_up(v) if kind is int else float(v))
        return tuple(out)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> Tuple[Scalar, ...]:
        return self._value

    # ------------------ TUPLE BEHAVIOUR ------------------
    def __iter__(self) -> Iterator[Scalar]:
        return iter(self._value)

    def __len__(self) -> int:
        return self.num_channels

    def __getitem__(self, index):
        return self._value[index]

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, ColorBase):
            return self.mode == other.mode and self._value == other.value
        if isinstance(other, tuple):
            return self._value == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self.mode, self._value))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}{self._value!r}"


class WithAlpha(ABC):
    """
    Mixin for a ColorBase subclass that includes an alpha channel.
    Assumes alpha is the *last* channel.
    """
    __slots__ = ()

    # Tell static checkers these come from the real subclass (ColorBase)
    num_channels: ClassVar[int]
    mode: ClassVar[ColorSpace]
    value: Tuple[Scalar, ...]

    alpha_index: ClassVar[int] = -1
    alpha_max:   ClassVar[Scalar] = 1.0

    @property
    def alpha(self) -> float:
        return float(self.value[self.alpha_index])

    @property
    def a(self) -> float:
        return self.alpha
