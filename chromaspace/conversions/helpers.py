import math
from typing import Tuple

import numpy as np

from ..utils.num_utils import wrap_hue
from .constants import (
    SRGB_GAMMA,
    SRGB_SLOPE,
    SRGB_OFFSET,
    SRGB_DIVISOR,
    SRGB_TO_LINEAR_TH,
    LINEAR_TO_SRGB_TH,
)

Triple = Tuple[float, float, float]


def srgb_to_linear(value: float) -> float:
    """Decode one gamma-encoded sRGB channel; mirrored for negative input."""
    sign = -1.0 if value < 0 else 1.0
    v = abs(value)
    if v <= SRGB_TO_LINEAR_TH:
        return value / SRGB_SLOPE
    return sign * ((v + SRGB_OFFSET) / SRGB_DIVISOR) ** SRGB_GAMMA


def linear_to_srgb(value: float) -> float:
    """Encode one linear channel with the sRGB curve; mirrored for negative input."""
    sign = -1.0 if value < 0 else 1.0
    v = abs(value)
    if v <= LINEAR_TO_SRGB_TH:
        return value * SRGB_SLOPE
    return sign * (SRGB_DIVISOR * v ** (1.0 / SRGB_GAMMA) - SRGB_OFFSET)


def mat_vec(matrix: np.ndarray, a: float, b: float, c: float) -> Triple:
    """Multiply a 3x3 matrix with a column vector and return a plain tuple."""
    out = matrix @ np.array((a, b, c), dtype=float)
    return float(out[0]), float(out[1]), float(out[2])


def spow(value: float, exponent: float) -> float:
    """Sign-preserving power."""
    if value < 0:
        return -((-value) ** exponent)
    return value ** exponent


def to_polar(a: float, b: float) -> Tuple[float, float]:
    """Cartesian opponent axes to (chroma, hue degrees in [0, 360))."""
    chroma = math.hypot(a, b)
    hue = wrap_hue(math.degrees(math.atan2(b, a)))
    return chroma, hue


def from_polar(chroma: float, hue: float) -> Tuple[float, float]:
    """(chroma, hue degrees) to cartesian opponent axes."""
    hrad = math.radians(hue)
    return chroma * math.cos(hrad), chroma * math.sin(hrad)
