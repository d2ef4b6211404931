from __future__ import annotations
from enum import Enum
from typing import Any, Iterable, NamedTuple, Optional, Sequence, Tuple, Union

from ..colors.color_base import ColorBase
from ..types.color_types import ColorSpace, ColorSpaceLike, as_color_space
from ..utils.default import DEFAULT_SAMPLES_PER_UNIT
from .stops import ColorStop, stops_from_colors

ColorOrStop = Union[ColorBase, ColorStop]


class GradientKind(str, Enum):
    """Geometry of a gradient. Values are the renderer's type names."""
    LINEAR = "axial"
    CONIC = "conic"
    RADIAL = "radial"


class Point(NamedTuple):
    """Unit-square coordinate with the origin at the top-left corner."""
    x: float
    y: float


TOP_LEFT = Point(0.0, 0.0)
TOP = Point(0.5, 0.0)
TOP_RIGHT = Point(1.0, 0.0)
LEFT = Point(0.0, 0.5)
CENTER = Point(0.5, 0.5)
RIGHT = Point(1.0, 0.5)
BOTTOM_LEFT = Point(0.0, 1.0)
BOTTOM = Point(0.5, 1.0)
BOTTOM_RIGHT = Point(1.0, 1.0)


def _as_stops(items: Iterable[ColorOrStop]) -> Tuple[ColorStop, ...]:
    """Accept either stops (kept as given) or colors (spread evenly)."""
    items = list(items)
    if all(isinstance(item, ColorStop) for item in items):
        return tuple(items)
    if all(isinstance(item, ColorBase) for item in items):
        return tuple(stops_from_colors(items))
    raise TypeError("Gradient expects either all ColorStop or all ColorBase items")


class Gradient:
    """
    Immutable description of a color gradient.

    ``color_space`` is the model the gradient should be interpolated in. When
    it is set and differs from the renderer's native model, ``resolved()``
    re-expresses the stops so a renderer that only interpolates natively
    still draws the intended gradient.
    """
    __slots__ = ('stops', 'start_point', 'end_point', 'kind', 'color_space')

    stops: Tuple[ColorStop, ...]
    start_point: Point
    end_point: Point
    kind: GradientKind
    color_space: Optional[ColorSpace]

    def __init__(
        self,
        stops: Iterable[ColorStop] = (),
        start_point: Tuple[float, float] = TOP,
        end_point: Tuple[float, float] = BOTTOM,
        kind: GradientKind = GradientKind.LINEAR,
        color_space: Optional[ColorSpaceLike] = None,
    ) -> None:
        stops = tuple(stops)
        for stop in stops:
            if not isinstance(stop, ColorStop):
                raise TypeError(f"Gradient stops must be ColorStop, got {type(stop).__name__}")
        object.__setattr__(self, 'stops', stops)
        object.__setattr__(self, 'start_point', Point(*start_point))
        object.__setattr__(self, 'end_point', Point(*end_point))
        object.__setattr__(self, 'kind', GradientKind(kind))
        object.__setattr__(
            self, 'color_space', None if color_space is None else as_color_space(color_space)
        )

    def __setattr__(self, name, value):
        raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")

    # ------------------ CONSTRUCTION ------------------
    @classmethod
    def from_colors(cls, colors: Sequence[ColorBase], **kwargs: Any) -> Gradient:
        return cls(stops_from_colors(colors), **kwargs)

    @classmethod
    def from_stops(cls, stops: Sequence[ColorStop], **kwargs: Any) -> Gradient:
        return cls(stops, **kwargs)

    @classmethod
    def linear(
        cls,
        items: Iterable[ColorOrStop],
        start_point: Tuple[float, float] = TOP,
        end_point: Tuple[float, float] = BOTTOM,
        color_space: Optional[ColorSpaceLike] = None,
    ) -> Gradient:
        return cls(_as_stops(items), start_point, end_point, GradientKind.LINEAR, color_space)

    @classmethod
    def conic(
        cls,
        items: Iterable[ColorOrStop],
        start_point: Tuple[float, float] = TOP,
        end_point: Tuple[float, float] = BOTTOM,
        color_space: Optional[ColorSpaceLike] = None,
    ) -> Gradient:
        return cls(_as_stops(items), start_point, end_point, GradientKind.CONIC, color_space)

    @classmethod
    def radial(
        cls,
        items: Iterable[ColorOrStop],
        start_point: Tuple[float, float] = TOP,
        end_point: Tuple[float, float] = BOTTOM,
        color_space: Optional[ColorSpaceLike] = None,
    ) -> Gradient:
        return cls(_as_stops(items), start_point, end_point, GradientKind.RADIAL, color_space)

    @classmethod
    def none(cls) -> Gradient:
        """A gradient without stops."""
        return cls()

    # ------------------ PROPERTIES ------------------
    @property
    def colors(self) -> Tuple[ColorBase, ...]:
        return tuple(stop.color for stop in self.stops)

    @property
    def locations(self) -> Tuple[float, ...]:
        return tuple(stop.location for stop in self.stops)

    # ------------------ MODIFIERS ------------------
    def _replace(self, **changes: Any) -> Gradient:
        fields = {name: getattr(self, name) for name in self.__slots__}
        fields.update(changes)
        return Gradient(**fields)

    def with_stops(self, stops: Iterable[ColorStop]) -> Gradient:
        return self._replace(stops=stops)

    def with_colors(self, colors: Sequence[ColorBase]) -> Gradient:
        """Replace the stops with ``colors`` spread evenly."""
        return self._replace(stops=stops_from_colors(colors))

    def with_opacity(self, alpha: float) -> Gradient:
        return self._replace(stops=[stop.with_opacity(alpha) for stop in self.stops])

    def with_start_point(self, point: Tuple[float, float]) -> Gradient:
        return self._replace(start_point=point)

    def with_end_point(self, point: Tuple[float, float]) -> Gradient:
        return self._replace(end_point=point)

    def with_kind(self, kind: GradientKind) -> Gradient:
        return self._replace(kind=kind)

    def with_color_space(self, color_space: Optional[ColorSpaceLike]) -> Gradient:
        return self._replace(color_space=color_space)

    # ------------------ RESAMPLING ------------------
    def resampled(
        self,
        samples_per_unit: float = DEFAULT_SAMPLES_PER_UNIT,
        **kwargs: Any,
    ) -> Optional[Gradient]:
        """See :func:`chromaspace.gradients.resample.resample`."""
        from .resample import resample
        return resample(self, samples_per_unit, **kwargs)

    def resolved(self, samples_per_unit: float = DEFAULT_SAMPLES_PER_UNIT, **kwargs: Any) -> Gradient:
        """See :func:`chromaspace.gradients.resample.resolve`."""
        from .resample import resolve
        return resolve(self, samples_per_unit, **kwargs)

    # ------------------ DUNDER ------------------
    def __len__(self) -> int:
        return len(self.stops)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Gradient):
            return NotImplemented
        return all(getattr(self, name) == getattr(other, name) for name in self.__slots__)

    def __hash__(self) -> int:
        return hash(tuple(getattr(self, name) for name in self.__slots__))

    def __repr__(self) -> str:
        space = self.color_space.value if self.color_space is not None else None
        return (
            f"Gradient(stops={len(self.stops)}, kind={self.kind.name}, "
            f"start_point={tuple(self.start_point)}, end_point={tuple(self.end_point)}, "
            f"color_space={space!r})"
        )
