"""
OKLab family conversions: OKLab, OKLCH, OKHSB and OKHSL.

OKLab is defined on linear sRGB, so the XYZ hub path goes through the linear
sRGB matrix first. OKHSB/OKHSL use a cusp-triangle mapping: brightness is
OKLab L, lightness is the toe-corrected L, and saturation maps chroma onto the
triangle spanned by the cusp of the sRGB gamut for the hue. The mapping is
exactly invertible for any chromatic color.
"""
import math
from typing import Tuple

import numpy as np

from ..utils.num_utils import wrap_hue
from .constants import (
    M_XYZ_TO_SRGB,
    M_SRGB_TO_XYZ,
    M_SRGB_TO_LMS,
    M_LMS_TO_SRGB,
    M_LMS_TO_OKLAB,
    M_OKLAB_TO_LMS,
    OK_TOE_K1,
    OK_TOE_K2,
    OK_TOE_K3,
    OK_S0,
)
from .helpers import Triple, from_polar, mat_vec, to_polar


# ---- OKLab <-> linear sRGB / XYZ ----

def linear_srgb_to_oklab(r: float, g: float, b: float) -> Triple:
    lms = np.cbrt(M_SRGB_TO_LMS @ np.array((r, g, b), dtype=float))
    return mat_vec(M_LMS_TO_OKLAB, *lms)


def oklab_to_linear_srgb(lightness: float, a: float, b: float) -> Triple:
    lms = (M_OKLAB_TO_LMS @ np.array((lightness, a, b), dtype=float)) ** 3
    return mat_vec(M_LMS_TO_SRGB, *lms)


def xyz_to_oklab(x: float, y: float, z: float) -> Triple:
    return linear_srgb_to_oklab(*mat_vec(M_XYZ_TO_SRGB, x, y, z))


def oklab_to_xyz(lightness: float, a: float, b: float) -> Triple:
    return mat_vec(M_SRGB_TO_XYZ, *oklab_to_linear_srgb(lightness, a, b))


def oklab_to_oklch(lightness: float, a: float, b: float) -> Triple:
    chroma, hue = to_polar(a, b)
    return lightness, chroma, hue


def oklch_to_oklab(lightness: float, chroma: float, hue: float) -> Triple:
    a, b = from_polar(chroma, wrap_hue(hue))
    return lightness, a, b


# ---- OKHSB / OKHSL ----

def toe(x: float) -> float:
    if x <= 0:
        return 0.0
    if x >= 1:
        return x  # linear above the gamut
    k = OK_TOE_K3 * x - OK_TOE_K1
    return 0.5 * (k + math.sqrt(k * k + 4.0 * OK_TOE_K2 * OK_TOE_K3 * x))


def toe_inv(x: float) -> float:
    if x <= 0:
        return 0.0
    if x >= 1:
        return x
    return (x * x + OK_TOE_K1 * x) / (OK_TOE_K3 * (x + OK_TOE_K2))


def compute_max_saturation(a: float, b: float) -> float:
    """Max saturation S = C/L for a normalised hue (a, b) inside sRGB."""
    if -1.88170328 * a - 0.80936493 * b > 1:
        k0, k1, k2, k3, k4 = 1.19086277, 1.76576728, 0.59662641, 0.75515197, 0.56771245
        wl, wm, ws = 4.0767416621, -3.3077115913, 0.2309699292
    elif 1.81444104 * a - 1.19445276 * b > 1:
        k0, k1, k2, k3, k4 = 0.73956515, -0.45954404, 0.08285427, 0.12541070, 0.14503204
        wl, wm, ws = -1.2684380046, 2.6097574011, -0.3413193965
    else:
        k0, k1, k2, k3, k4 = 1.35733652, -0.00915799, -1.15130210, -0.50559606, 0.00692167
        wl, wm, ws = -0.0041960863, -0.7034186147, 1.7076147010

    s = k0 + k1 * a + k2 * b + k3 * a * a + k4 * a * b

    kl = 0.3963377774 * a + 0.2158037573 * b
    km = -0.1055613458 * a - 0.0638541728 * b
    ks = -0.0894841775 * a - 1.2914855480 * b

    # one Halley step
    l_ = 1.0 + s * kl
    m_ = 1.0 + s * km
    s_ = 1.0 + s * ks
    l3, m3, s3 = l_ ** 3, m_ ** 3, s_ ** 3
    f = wl * l3 + wm * m3 + ws * s3
    f1 = 3.0 * (wl * kl * l_ * l_ + wm * km * m_ * m_ + ws * ks * s_ * s_)
    f2 = 6.0 * (wl * kl * kl * l_ + wm * km * km * m_ + ws * ks * ks * s_)
    return s - f * f1 / (f1 * f1 - 0.5 * f * f2)


def find_cusp(a: float, b: float) -> Tuple[float, float]:
    """(L, C) of the sRGB gamut cusp for a normalised hue (a, b)."""
    s_cusp = compute_max_saturation(a, b)
    rgb = oklab_to_linear_srgb(1.0, s_cusp * a, s_cusp * b)
    l_cusp = (1.0 / max(rgb)) ** (1.0 / 3.0)
    return l_cusp, l_cusp * s_cusp


def _st_max(a: float, b: float) -> Tuple[float, float]:
    l_cusp, c_cusp = find_cusp(a, b)
    return c_cusp / l_cusp, c_cusp / (1.0 - l_cusp)


def oklab_to_okhsx(lightness: float, a: float, b: float, hsl: bool) -> Triple:
    chroma, hue = to_polar(a, b)
    if chroma > 1e-6:
        a_unit, b_unit = a / chroma, b / chroma
    else:
        a_unit, b_unit = from_polar(1.0, hue)
    s_max, t_max = _st_max(a_unit, b_unit)
    k = 1.0 - OK_S0 / s_max
    saturation = chroma * (OK_S0 + t_max) / (t_max * OK_S0 + t_max * k * chroma)
    light = toe(lightness) if hsl else lightness
    return hue, saturation, light


def okhsx_to_oklab(hue: float, saturation: float, light: float, hsl: bool) -> Triple:
    a_unit, b_unit = from_polar(1.0, wrap_hue(hue))
    s_max, t_max = _st_max(a_unit, b_unit)
    k = 1.0 - OK_S0 / s_max
    lightness = toe_inv(light) if hsl else light
    chroma = saturation * t_max * OK_S0 / (OK_S0 + t_max - k * t_max * saturation)
    return lightness, chroma * a_unit, chroma * b_unit


def oklab_to_okhsb(lightness: float, a: float, b: float) -> Triple:
    return oklab_to_okhsx(lightness, a, b, hsl=False)


def okhsb_to_oklab(hue: float, saturation: float, brightness: float) -> Triple:
    return okhsx_to_oklab(hue, saturation, brightness, hsl=False)


def oklab_to_okhsl(lightness: float, a: float, b: float) -> Triple:
    return oklab_to_okhsx(lightness, a, b, hsl=True)


def okhsl_to_oklab(hue: float, saturation: float, lightness: float) -> Triple:
    return okhsx_to_oklab(hue, saturation, lightness, hsl=True)
