"""
HSLuv and HPLuv conversions (Boronine), built on LCh(uv).

Saturation and lightness use 0-100 scales; hue is in degrees. Chroma is
expressed relative to the sRGB gamut boundary for the given lightness (HSLuv)
or to the largest chroma safe for every hue at that lightness (HPLuv).
"""
import math
from typing import List, Tuple

from ..utils.num_utils import wrap_hue
from .constants import D65, D65_U, D65_V, M_XYZ_TO_SRGB, LAB_EPSILON, LAB_KAPPA
from .helpers import Triple

_L_MAX = 99.9999999
_L_MIN = 1e-8

Line = Tuple[float, float]


def _bounds(lightness: float) -> List[Line]:
    """
    Lines (slope, intercept) bounding the sRGB gamut in the (u, v) chroma plane.

    Each sRGB channel pinned at 0 or 1 is a line ``A u + B v + 13 L K = 0``
    once X and Z are written through u'v' chromaticity at fixed Y.
    """
    sub1 = ((lightness + 16.0) / 116.0) ** 3
    y = (sub1 if sub1 > LAB_EPSILON else lightness / LAB_KAPPA) * D65[1]
    result = []
    for m1, m2, m3 in M_XYZ_TO_SRGB:
        a = y * (9.0 * m1 - 3.0 * m3)
        for t in (0.0, 1.0):
            b = y * (4.0 * m2 - 20.0 * m3) - 4.0 * t
            k = a * D65_U + b * D65_V + 12.0 * m3 * y
            result.append((float(-a / b), float(-13.0 * lightness * k / b)))
    return result


def max_chroma_for_lh(lightness: float, hue: float) -> float:
    hrad = math.radians(hue)
    sin_h, cos_h = math.sin(hrad), math.cos(hrad)
    best = math.inf
    for slope, intercept in _bounds(lightness):
        denom = sin_h - slope * cos_h
        if denom == 0:
            continue
        length = intercept / denom
        if length >= 0:
            best = min(best, length)
    return best


def max_safe_chroma_for_l(lightness: float) -> float:
    return min(
        abs(intercept) / math.sqrt(slope * slope + 1.0)
        for slope, intercept in _bounds(lightness)
    )


def hsluv_to_lchuv(h: float, s: float, lightness: float) -> Triple:
    h = wrap_hue(h)
    if lightness > _L_MAX:
        return 100.0, 0.0, h
    if lightness < _L_MIN:
        return 0.0, 0.0, h
    return lightness, max_chroma_for_lh(lightness, h) / 100.0 * s, h


def lchuv_to_hsluv(lightness: float, chroma: float, h: float) -> Triple:
    h = wrap_hue(h)
    if lightness > _L_MAX:
        return h, 0.0, 100.0
    if lightness < _L_MIN:
        return h, 0.0, 0.0
    return h, chroma / max_chroma_for_lh(lightness, h) * 100.0, lightness


def hpluv_to_lchuv(h: float, s: float, lightness: float) -> Triple:
    h = wrap_hue(h)
    if lightness > _L_MAX:
        return 100.0, 0.0, h
    if lightness < _L_MIN:
        return 0.0, 0.0, h
    return lightness, max_safe_chroma_for_l(lightness) / 100.0 * s, h


def lchuv_to_hpluv(lightness: float, chroma: float, h: float) -> Triple:
    h = wrap_hue(h)
    if lightness > _L_MAX:
        return h, 0.0, 100.0
    if lightness < _L_MIN:
        return h, 0.0, 0.0
    return h, chroma / max_safe_chroma_for_l(lightness) * 100.0, lightness
