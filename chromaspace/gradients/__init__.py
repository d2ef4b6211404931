"""
Chromaspace Gradients
=====================

Gradient value objects and their resampling into the renderer's native
color model.

>>> from chromaspace.colors import SRGB
>>> from chromaspace.gradients import Gradient
>>> g = Gradient.from_colors([SRGB(1, 0, 0), SRGB(0, 0, 1)], color_space="oklab")
>>> len(g.resolved(10).stops)
10
"""
from .gradient import (
    BOTTOM,
    BOTTOM_LEFT,
    BOTTOM_RIGHT,
    CENTER,
    LEFT,
    RIGHT,
    TOP,
    TOP_LEFT,
    TOP_RIGHT,
    Gradient,
    GradientKind,
    Point,
)
from .resample import components_for, mix_colors, resample, resolve, to_device
from .stops import ColorStop, stops_from_colors

__all__ = [
    'Gradient',
    'GradientKind',
    'Point',
    'TOP',
    'BOTTOM',
    'LEFT',
    'RIGHT',
    'CENTER',
    'TOP_LEFT',
    'TOP_RIGHT',
    'BOTTOM_LEFT',
    'BOTTOM_RIGHT',
    'ColorStop',
    'stops_from_colors',
    'resample',
    'resolve',
    'mix_colors',
    'components_for',
    'to_device',
]
