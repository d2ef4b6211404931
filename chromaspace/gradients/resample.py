"""
Resampling of gradients into the renderer's native color model.

A renderer interpolates between stops in its own (native) model, normally
sRGB. To draw a gradient that should be interpolated in another model, the
stops are densified: every span between two stops is sampled in the target
model and the samples are converted back to native colors. A renderer
interpolating linearly between those dense stops then closely follows the
intended curve.
"""
from __future__ import annotations
import logging
import math
import warnings
from typing import Callable, List, Optional, Sequence

import numpy as np

from ..colors import ColorBase, convert
from ..types.color_types import ColorSpace, ColorSpaceLike, as_color_space
from ..utils.default import DEFAULT_SAMPLES_PER_UNIT, NATIVE_SPACE, value_or_default
from ..utils.num_utils import clamp01
from .gradient import Gradient
from .stops import ColorStop

log = logging.getLogger(__name__)

ComponentsProvider = Callable[[ColorBase, ColorSpace], ColorBase]


def components_for(color: ColorBase, space: ColorSpace) -> ColorBase:
    """Default components provider: plain model conversion."""
    return convert(color, space)


def to_device(color: ColorBase, native_space: ColorSpaceLike = NATIVE_SPACE) -> ColorBase:
    """
    Convert a color into the native model for handing to a renderer.

    Alpha is clamped into [0, 1] here; color channels are left in extended
    range.
    """
    native = convert(color, native_space)
    alpha = clamp01(native.alpha)
    if alpha != native.alpha:
        native = native.with_alpha(alpha)
    return native


def _check_samples_per_unit(samples_per_unit: float) -> None:
    if not math.isfinite(samples_per_unit) or samples_per_unit <= 0:
        raise ValueError(f"samples_per_unit must be positive and finite, got {samples_per_unit!r}")


def _warn_if_descending(stops: Sequence[ColorStop]) -> None:
    for s1, s2 in zip(stops, stops[1:]):
        if s2.location < s1.location:
            warnings.warn(
                f"Gradient stop locations are not ascending ({s1.location} -> {s2.location}); "
                f"spans are sampled in the given order",
                RuntimeWarning,
                stacklevel=3,
            )
            return


def resample(
    gradient: Gradient,
    samples_per_unit: float = DEFAULT_SAMPLES_PER_UNIT,
    *,
    space: Optional[ColorSpaceLike] = None,
    native_space: ColorSpaceLike = NATIVE_SPACE,
    components: ComponentsProvider = components_for,
) -> Optional[Gradient]:
    """
    Densify a gradient by interpolating each span inside another color model.

    Args:
        gradient: Gradient to resample
        samples_per_unit: Samples per unit of location distance
        space: Model to interpolate in; defaults to ``gradient.color_space``
        native_space: Model of the emitted stop colors
        components: Converts a stop color into the interpolation model

    Returns:
        A copy of ``gradient`` with the new stops, or None if there is nothing
        to resample (fewer than two stops, no interpolation model, or every
        span has zero length).

    Raises:
        ValueError: if ``samples_per_unit`` is not positive.
    """
    _check_samples_per_unit(samples_per_unit)
    stops = gradient.stops
    if len(stops) < 2:
        log.debug("Not resampling: %d stop(s)", len(stops))
        return None
    target = value_or_default(space, gradient.color_space)
    if target is None:
        log.debug("Not resampling: no interpolation color space")
        return None
    target = as_color_space(target)
    native_space = as_color_space(native_space)
    _warn_if_descending(stops)

    new_stops: List[ColorStop] = []
    for s1, s2 in zip(stops, stops[1:]):
        delta = s2.location - s1.location
        if delta == 0:
            log.debug("Skipping zero-length span at %s", s1.location)
            continue
        c1 = components(s1.color, target)
        c2 = components(s2.color, target)
        sample_count = max(2, math.ceil(abs(delta) * samples_per_unit))
        # the first sample of later spans duplicates the previous span's last one
        start_index = 0 if not new_stops else 1
        t = np.arange(start_index, sample_count) / (sample_count - 1)
        locations = s1.location + t * delta
        locations[-1] = s2.location
        log.debug(
            "Span %s -> %s in %s: %d samples", s1.location, s2.location, target.value, len(t)
        )
        for color, location in zip(c1.mixed_many(c2, t), locations):
            new_stops.append(ColorStop(to_device(color, native_space), float(location)))

    if not new_stops:
        log.debug("Not resampling: every span has zero length")
        return None
    return gradient.with_stops(new_stops)


def resolve(
    gradient: Gradient,
    samples_per_unit: float = DEFAULT_SAMPLES_PER_UNIT,
    *,
    native_space: ColorSpaceLike = NATIVE_SPACE,
) -> Gradient:
    """
    Make a gradient drawable by a renderer that only interpolates natively.

    - No declared color space, or the native one: returned unchanged.
    - CMYK: every stop is converted to the native model, locations kept.
    - Anything else: ``resample``; if that is not applicable the input is
      returned.
    """
    declared = gradient.color_space
    native_space = as_color_space(native_space)
    if declared is None or declared is native_space:
        return gradient
    if declared is ColorSpace.CMYK:
        # stops keep their colors, only their model changes
        log.debug("Resolving CMYK gradient per stop")
        return gradient.with_stops(
            stop.with_color(to_device(stop.color, native_space))
            for stop in gradient.stops
        )
    resampled = resample(gradient, samples_per_unit, native_space=native_space)
    return resampled if resampled is not None else gradient


def mix_colors(
    a: ColorBase,
    b: ColorBase,
    fraction: float,
    space: ColorSpaceLike = ColorSpace.SRGB,
    *,
    native_space: ColorSpaceLike = NATIVE_SPACE,
) -> ColorBase:
    """
    Mix two colors inside ``space`` and return the result in ``native_space``.

    >>> from chromaspace.colors import SRGB
    >>> mix_colors(SRGB(1, 0, 0), SRGB(0, 0, 1), 0.5, "oklch").space.value
    'srgb'
    """
    space = as_color_space(space)
    mixed = convert(a, space).mixed(convert(b, space), fraction)
    return to_device(mixed, native_space)
