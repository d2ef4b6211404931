from __future__ import annotations
from typing import Any, List, Sequence

from ..colors.color_base import ColorBase


class ColorStop:
    """
    A color pinned to a location along a gradient.

    Locations are usually in [0, 1] and expected to be non-decreasing within a
    gradient. Neither is enforced.
    """
    __slots__ = ('color', 'location')

    color: ColorBase
    location: float

    def __init__(self, color: ColorBase, location: float) -> None:
        if not isinstance(color, ColorBase):
            raise TypeError(f"ColorStop color must be a ColorBase, got {type(color).__name__}")
        object.__setattr__(self, 'color', color)
        object.__setattr__(self, 'location', float(location))

    def __setattr__(self, name, value):
        raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")

    @property
    def transparent(self) -> ColorStop:
        """This stop with its color at zero alpha."""
        return self.with_opacity(0.0)

    def with_color(self, color: ColorBase) -> ColorStop:
        return ColorStop(color, self.location)

    def with_location(self, location: float) -> ColorStop:
        return ColorStop(self.color, location)

    def with_opacity(self, alpha: float) -> ColorStop:
        return ColorStop(self.color.with_alpha(alpha), self.location)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, ColorStop):
            return NotImplemented
        return self.color == other.color and self.location == other.location

    def __hash__(self) -> int:
        return hash((self.color, self.location))

    def __repr__(self) -> str:
        return f"ColorStop({self.color!r}, location={self.location!r})"


def stops_from_colors(colors: Sequence[ColorBase]) -> List[ColorStop]:
    """
    Spread colors evenly over [0, 1].

    A single color yields one stop at 0.0; no colors yield no stops.
    """
    colors = list(colors)
    if len(colors) == 1:
        return [ColorStop(colors[0], 0.0)]
    last = len(colors) - 1
    return [ColorStop(color, i / last) for i, color in enumerate(colors)]
