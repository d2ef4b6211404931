"""
Hue interpolation along the shorter arc of the color wheel.
"""
import numpy as np

from .num_utils import HUE_360, wrap_hue


def _shortest_delta(h0: float, h1: float) -> float:
    delta = h1 - h0
    if delta > HUE_360 / 2:
        delta -= HUE_360
    elif delta < -HUE_360 / 2:
        delta += HUE_360
    return delta


def interpolate_hue(h0: float, h1: float, fraction: float) -> float:
    """
    Interpolate between two hue angles through the shorter arc.

    Args:
        h0: Start hue in degrees
        h1: End hue in degrees
        fraction: Interpolation coefficient (not clamped)

    Returns:
        Interpolated hue in [0, 360)
    """
    h0 = wrap_hue(h0)
    h1 = wrap_hue(h1)
    return wrap_hue(h0 + fraction * _shortest_delta(h0, h1))


def np_interpolate_hue(h0: float, h1: float, u: np.ndarray) -> np.ndarray:
    """
    Vectorised ``interpolate_hue`` over an array of coefficients.

    Args:
        h0: Start hue in degrees
        h1: End hue in degrees
        u: Interpolation coefficients

    Returns:
        Array of hues in [0, 360), same shape as ``u``
    """
    h0 = wrap_hue(h0)
    h1 = wrap_hue(h1)
    hues = np.mod(h0 + np.asarray(u, dtype=float) * _shortest_delta(h0, h1), HUE_360)
    # np.mod can return exactly 360 for tiny negative input
    hues[hues >= HUE_360] = 0.0
    return hues
