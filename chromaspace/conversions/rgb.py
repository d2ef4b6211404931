"""
RGB-family conversions: sRGB, Display P3, HSB, HSL, HWB, Gray and CMYK.

All channels are unit floats except hue, which is in degrees [0, 360).
Nothing is clamped here unless stated; extended-range RGB passes through.
"""
from typing import Tuple

from ..utils.num_utils import clamp01, wrap_hue
from .constants import (
    M_SRGB_TO_XYZ,
    M_XYZ_TO_SRGB,
    M_P3_TO_XYZ,
    M_XYZ_TO_P3,
    LUMINANCE_WEIGHTS,
    CMYK_BLACK_TH,
)
from .helpers import Triple, linear_to_srgb, mat_vec, srgb_to_linear

HUE_SECTOR = 60.0


# ---- sRGB <-> XYZ ----

def srgb_to_xyz(r: float, g: float, b: float) -> Triple:
    return mat_vec(M_SRGB_TO_XYZ, srgb_to_linear(r), srgb_to_linear(g), srgb_to_linear(b))


def xyz_to_srgb(x: float, y: float, z: float) -> Triple:
    lr, lg, lb = mat_vec(M_XYZ_TO_SRGB, x, y, z)
    return linear_to_srgb(lr), linear_to_srgb(lg), linear_to_srgb(lb)


def srgb_relative_luminance(r: float, g: float, b: float) -> float:
    """Relative luminance (Y) of a gamma-encoded sRGB color."""
    return float(
        LUMINANCE_WEIGHTS[0] * srgb_to_linear(r)
        + LUMINANCE_WEIGHTS[1] * srgb_to_linear(g)
        + LUMINANCE_WEIGHTS[2] * srgb_to_linear(b)
    )


# ---- Display P3 <-> XYZ ----

def display_p3_to_xyz(r: float, g: float, b: float) -> Triple:
    return mat_vec(M_P3_TO_XYZ, srgb_to_linear(r), srgb_to_linear(g), srgb_to_linear(b))


def xyz_to_display_p3(x: float, y: float, z: float) -> Triple:
    lr, lg, lb = mat_vec(M_XYZ_TO_P3, x, y, z)
    return linear_to_srgb(lr), linear_to_srgb(lg), linear_to_srgb(lb)


# ---- RGB <-> HSB / HSL ----

def _rgb_hue(r: float, g: float, b: float, cmax: float, delta: float) -> float:
    if delta == 0:
        return 0.0
    if cmax == r:
        h = ((g - b) / delta) % 6.0
    elif cmax == g:
        h = (b - r) / delta + 2.0
    else:
        h = (r - g) / delta + 4.0
    return wrap_hue(HUE_SECTOR * h)


def rgb_to_hsb(r: float, g: float, b: float) -> Triple:
    """Convert unit RGB to HSB (hue degrees, saturation, brightness)."""
    cmax = max(r, g, b)
    cmin = min(r, g, b)
    delta = cmax - cmin
    s = delta / cmax if cmax != 0 else 0.0
    return _rgb_hue(r, g, b, cmax, delta), s, cmax


def hsb_to_rgb(h: float, s: float, v: float) -> Triple:
    """Convert HSB to unit RGB."""
    if s <= 0:
        return v, v, v
    h6 = wrap_hue(h) / HUE_SECTOR
    i = int(h6)
    f = h6 - i
    p = v * (1.0 - s)
    q = v * (1.0 - s * f)
    t = v * (1.0 - s * (1.0 - f))
    sector = i % 6
    if sector == 0:
        return v, t, p
    if sector == 1:
        return q, v, p
    if sector == 2:
        return p, v, t
    if sector == 3:
        return p, q, v
    if sector == 4:
        return t, p, v
    return v, p, q


def rgb_to_hsl(r: float, g: float, b: float) -> Triple:
    """Convert unit RGB to HSL (hue degrees, saturation, lightness)."""
    cmax = max(r, g, b)
    cmin = min(r, g, b)
    delta = cmax - cmin
    lightness = (cmax + cmin) / 2.0
    denom = 1.0 - abs(2.0 * lightness - 1.0)
    s = delta / denom if delta != 0 and denom != 0 else 0.0
    return _rgb_hue(r, g, b, cmax, delta), s, lightness


def hsl_to_rgb(h: float, s: float, lightness: float) -> Triple:
    """Convert HSL to unit RGB."""
    return hsb_to_rgb(*hsl_to_hsb(h, s, lightness))


def hsb_to_hsl(h: float, s: float, v: float) -> Triple:
    lightness = v * (1.0 - s / 2.0)
    if lightness == 0 or lightness == 1:
        sl = 0.0
    else:
        sl = (v - lightness) / min(lightness, 1.0 - lightness)
    return wrap_hue(h), sl, lightness


def hsl_to_hsb(h: float, s: float, lightness: float) -> Triple:
    v = lightness + s * min(lightness, 1.0 - lightness)
    sv = 0.0 if v == 0 else 2.0 * (1.0 - lightness / v)
    return wrap_hue(h), sv, v


# ---- HSB <-> HWB ----

def hsb_to_hwb(h: float, s: float, v: float) -> Triple:
    return wrap_hue(h), v * (1.0 - s), 1.0 - v


def hwb_to_hsb(h: float, w: float, bk: float) -> Triple:
    # whiteness + blackness >= 1 collapses to a gray
    total = w + bk
    if total >= 1.0:
        gray = w / total
        return wrap_hue(h), 0.0, gray
    v = 1.0 - bk
    s = 1.0 - w / v if v != 0 else 0.0
    return wrap_hue(h), s, v


# ---- Gray ----

def gray_to_rgb(white: float) -> Triple:
    return white, white, white


def rgb_to_gray(r: float, g: float, b: float) -> float:
    """Perceptual gray: the gamma-encoded relative luminance."""
    return linear_to_srgb(srgb_relative_luminance(r, g, b))


def xyz_to_gray(x: float, y: float, z: float) -> float:
    return linear_to_srgb(y)


# ---- CMYK ----
# Naive device-independent formula, no ICC profile: k = 1 - max(r, g, b).

def rgb_to_cmyk(r: float, g: float, b: float) -> Tuple[float, float, float, float]:
    r, g, b = clamp01(r), clamp01(g), clamp01(b)
    k = 1.0 - max(r, g, b)
    if k >= CMYK_BLACK_TH:
        return 0.0, 0.0, 0.0, k
    inv = 1.0 - k
    return (1.0 - r - k) / inv, (1.0 - g - k) / inv, (1.0 - b - k) / inv, k


def cmyk_to_rgb(c: float, m: float, y: float, k: float) -> Triple:
    return (1.0 - c) * (1.0 - k), (1.0 - m) * (1.0 - k), (1.0 - y) * (1.0 - k)
