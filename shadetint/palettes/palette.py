from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Iterator, List, Optional, Tuple
from ..config import (
    BASE_SUFFIX,
    DEFAULT_LIGHTNESS_STEP,
    DEFAULT_PALETTE_NAME,
    DEFAULT_SHADE_COUNT,
    DEFAULT_TINT_COUNT,
    MAX_COUNT,
    MIN_COUNT,
    PALETTE_TITLE_SUFFIX,
)
from ..utils import is_number, value_or_default
from .generator import generate_shades, generate_tints


@dataclass(frozen=True)
class Swatch:
    name: str
    color: str
    is_base: bool = False


@dataclass(frozen=True)
class Palette:
    """
    Shades, optional base color and tints, ordered darkest to lightest.

    ``shades`` is stored darkest first and ``tints`` lightest last, so the
    concatenation reads as one continuous ramp.
    """
    shades: Tuple[str, ...] = ()
    base: Optional[str] = None
    tints: Tuple[str, ...] = ()
    name: Optional[str] = None
    _colors: Tuple[str, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        base = (self.base,) if self.base is not None else ()
        object.__setattr__(self, '_colors', tuple(self.shades) + base + tuple(self.tints))

    @property
    def colors(self) -> List[str]:
        return list(self._colors)

    @property
    def display_name(self) -> str:
        return value_or_default(self.name, DEFAULT_PALETTE_NAME)

    @property
    def title(self) -> str:
        """Label for a container holding the whole palette."""
        return f"{self.display_name}{PALETTE_TITLE_SUFFIX}"

    @property
    def base_index(self) -> Optional[int]:
        return len(self.shades) if self.base is not None else None

    def swatches(self) -> List[Swatch]:
        """
        Name every entry ``"<name> <n>"``, n counting down from the palette
        length at the darkest entry to 1 at the lightest.
        """
        total = len(self._colors)
        out = []
        for i, color in enumerate(self._colors):
            is_base = i == self.base_index
            label = f"{self.display_name} {total - i}"
            if is_base:
                label += BASE_SUFFIX
            out.append(Swatch(label, color, is_base))
        return out

    def __len__(self) -> int:
        return len(self._colors)

    def __iter__(self) -> Iterator[str]:
        return iter(self._colors)

    def __getitem__(self, index):
        return self._colors[index]


def clamp_count(value: Any, default: int = DEFAULT_SHADE_COUNT) -> int:
    """Force a shade/tint count into ``[MIN_COUNT, MAX_COUNT]``; non-numbers give ``default``."""
    if not is_number(value):
        return default
    return max(MIN_COUNT, min(int(value), MAX_COUNT))


def build_palette(
    color: str,
    shades: int = DEFAULT_SHADE_COUNT,
    tints: int = DEFAULT_TINT_COUNT,
    name: Optional[str] = None,
    *,
    include_base: bool = True,
    step: float = DEFAULT_LIGHTNESS_STEP,
) -> Palette:
    """
    Build the full ramp around ``color``.

    Counts are clamped to the interactive range with ``clamp_count``. The base
    entry is ``color`` exactly as given.
    """
    shade_list = generate_shades(color, clamp_count(shades, DEFAULT_SHADE_COUNT), step=step, stacklevel=3)
    tint_list = generate_tints(color, clamp_count(tints, DEFAULT_TINT_COUNT), step=step, stacklevel=3)
    return Palette(
        shades=tuple(reversed(shade_list)),
        base=color if include_base else None,
        tints=tuple(tint_list),
        name=name,
    )
