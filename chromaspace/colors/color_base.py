from __future__ import annotations
from typing import Any, Callable, ClassVar, Iterable, Iterator, List, Optional, Sequence, Tuple, TypeVar, TYPE_CHECKING

import numpy as np

from ..types.color_types import ColorSpace, ColorSpaceLike, ScalarVector
from ..utils.default import DEFAULT_EPSILON
from ..utils.interpolate_hue import interpolate_hue, np_interpolate_hue
from ..utils.num_utils import wrap_hue

if TYPE_CHECKING:
    from .xyz import XYZ

C = TypeVar('C', bound='ColorBase')


def channel(index: int, doc: Optional[str] = None) -> property:
    """Read-only accessor for the channel stored at ``index``."""
    return property(lambda self: self._value[index], doc=doc)


class ColorBase:
    """
    Immutable color value in one specific color model.

    A color holds ``num_channels`` float channels followed by alpha. Values are
    never clamped on construction, so out-of-gamut intermediates survive; the
    only normalisation is wrapping the hue channel into [0, 360).

    Subclasses declare their model through class variables and implement
    ``to_xyz`` / ``from_xyz``, the two edges connecting them to the XYZ hub.
    """
    __slots__ = ('_value',)  # prevents adding new attributes → immutability

    space:         ClassVar[ColorSpace]
    display_name:  ClassVar[str]
    channel_names: ClassVar[Tuple[str, ...]]
    hue_index:     ClassVar[Optional[int]] = None
    # def convert(self, to_space: ColorSpaceLike) -> ColorBase
    convert: Callable[[ColorBase, ColorSpaceLike], ColorBase]

    def __init__(self, *channels: float, alpha: float = 1.0) -> None:
        if len(channels) != self.num_channels:
            raise ValueError(
                f"{self.display_name} expects {self.num_channels} channels "
                f"{self.channel_names}, got {len(channels)}"
            )
        values = [float(v) for v in channels]
        if self.hue_index is not None:
            values[self.hue_index] = wrap_hue(values[self.hue_index])
        values.append(float(alpha))
        object.__setattr__(self, '_value', tuple(values))

    def __setattr__(self, name, value):
        """Block attribute changes, colors are values."""
        raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")

    # ------------------ CONSTRUCTION ------------------
    @classmethod
    def from_components(cls: type[C], components: Sequence[float]) -> C:
        """
        Create a color from a flat sequence of channels with optional trailing alpha.

        Raises:
            ValueError: if the sequence has neither N nor N+1 values.
        """
        values = list(components)
        n = len(cls.channel_names)
        if len(values) == n:
            return cls(*values)
        if len(values) == n + 1:
            return cls(*values[:-1], alpha=values[-1])
        raise ValueError(
            f"{cls.display_name} expects {n} or {n + 1} "
            f"components, got {len(values)}"
        )

    @classmethod
    def from_xyz(cls: type[C], xyz: XYZ) -> C:
        raise NotImplementedError

    def to_xyz(self) -> XYZ:
        raise NotImplementedError

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def num_channels(self) -> int:
        return len(self.channel_names)

    @property
    def components(self) -> ScalarVector:
        """Channels followed by alpha."""
        return self._value

    @property
    def channels(self) -> ScalarVector:
        """Channels without alpha."""
        return self._value[:-1]

    @property
    def alpha(self) -> float:
        return self._value[-1]

    @property
    def has_hue(self) -> bool:
        return self.hue_index is not None

    @property
    def is_visible(self) -> bool:
        """False when the color is fully transparent."""
        return self.alpha > 0.0

    # ------------------ DERIVED VALUES ------------------
    def replace(self: C, **channels: float) -> C:
        """Return a copy with the named channels (or ``alpha``) replaced."""
        values = dict(zip(self.channel_names + ('alpha',), self._value))
        for name, value in channels.items():
            if name not in values:
                raise ValueError(f"{self.display_name} has no channel {name!r}")
            values[name] = value
        alpha = values.pop('alpha')
        return type(self)(*values.values(), alpha=alpha)

    def with_alpha(self: C, alpha: float) -> C:
        return type(self)(*self.channels, alpha=alpha)

    def _check_same_model(self, other: ColorBase) -> None:
        if type(other) is not type(self):
            raise TypeError(
                f"Cannot mix {type(self).__name__} with {type(other).__name__}; "
                f"convert both colors to the same model first"
            )

    def mixed(self: C, other: C, fraction: float) -> C:
        """
        Linearly interpolate every channel, alpha included, towards ``other``.

        The hue channel travels along the shorter arc. ``fraction`` is not
        clamped, so values outside [0, 1] extrapolate.
        """
        self._check_same_model(other)
        values = [a + fraction * (b - a) for a, b in zip(self._value, other._value)]
        if self.hue_index is not None:
            i = self.hue_index
            values[i] = interpolate_hue(self._value[i], other._value[i], fraction)
        return type(self).from_components(values)

    def mixed_many(self: C, other: C, fractions: Iterable[float]) -> List[C]:
        """``mixed`` for several fractions at once, evaluated with numpy."""
        self._check_same_model(other)
        u = np.asarray(list(fractions), dtype=float)
        start = np.array(self._value)
        end = np.array(other._value)
        values = start[None, :] + u[:, None] * (end - start)[None, :]
        if self.hue_index is not None:
            i = self.hue_index
            values[:, i] = np_interpolate_hue(self._value[i], other._value[i], u)
        cls = type(self)
        return [cls.from_components(row.tolist()) for row in values]

    def is_approximately_equal(self, other: ColorBase, epsilon: float = DEFAULT_EPSILON) -> bool:
        """True if both colors share a model and every component is within ``epsilon``."""
        if type(other) is not type(self):
            return False
        for i, (a, b) in enumerate(zip(self._value, other._value)):
            diff = abs(a - b)
            if i == self.hue_index:
                diff = min(diff, 360.0 - diff)
            if diff > epsilon:
                return False
        return True

    # ------------------ DUNDER ------------------
    def __getitem__(self, index: int) -> float:
        return self._value[index]

    def __iter__(self) -> Iterator[float]:
        return iter(self._value)

    def __len__(self) -> int:
        return len(self._value)

    def __eq__(self, other: Any) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._value))

    def __repr__(self) -> str:
        parts = ", ".join(
            f"{name}={value!r}"
            for name, value in zip(self.channel_names + ('alpha',), self._value)
        )
        return f"{type(self).__name__}({parts})"

    def __reduce__(self):
        return (type(self).from_components, (self._value,))


def build_registry(*classes: type[ColorBase]):
    return {
        cls.space: cls
        for cls in classes
    }
