from __future__ import annotations
from typing import Literal, Tuple, Union

Scalar = int | float
ScalarVector = Tuple[Scalar, ...]
RGBAValue = Tuple[int, int, int, float]
HSLAValue = Tuple[float, float, float, float]
ColorValue = Union[RGBAValue, HSLAValue, ScalarVector]
ColorSpace = Literal["rgba", "hsla"]
