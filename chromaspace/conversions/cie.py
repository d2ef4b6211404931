"""CIE L*a*b*, LCh(ab), L*u*v* and LCh(uv) conversions relative to D65."""
from ..utils.num_utils import wrap_hue
from .constants import D65, D65_U, D65_V, LAB_EPSILON, LAB_KAPPA, LAB_DELTA
from .helpers import Triple, from_polar, to_polar


def _lab_f(t: float) -> float:
    if t > LAB_EPSILON:
        return t ** (1.0 / 3.0)
    return (LAB_KAPPA * t + 16.0) / 116.0


def _lab_f_inv(f: float) -> float:
    if f > LAB_DELTA:
        return f ** 3
    return (116.0 * f - 16.0) / LAB_KAPPA


def xyz_to_lab(x: float, y: float, z: float) -> Triple:
    fx = _lab_f(x / D65[0])
    fy = _lab_f(y / D65[1])
    fz = _lab_f(z / D65[2])
    return 116.0 * fy - 16.0, 500.0 * (fx - fy), 200.0 * (fy - fz)


def lab_to_xyz(lightness: float, a: float, b: float) -> Triple:
    fy = (lightness + 16.0) / 116.0
    fx = fy + a / 500.0
    fz = fy - b / 200.0
    return (
        float(_lab_f_inv(fx) * D65[0]),
        float(_lab_f_inv(fy) * D65[1]),
        float(_lab_f_inv(fz) * D65[2]),
    )


def lab_to_lch(lightness: float, a: float, b: float) -> Triple:
    chroma, hue = to_polar(a, b)
    return lightness, chroma, hue


def lch_to_lab(lightness: float, chroma: float, hue: float) -> Triple:
    a, b = from_polar(chroma, wrap_hue(hue))
    return lightness, a, b


def _y_to_luv_lightness(y: float) -> float:
    yr = y / D65[1]
    if yr > LAB_EPSILON:
        return 116.0 * yr ** (1.0 / 3.0) - 16.0
    return LAB_KAPPA * yr


def xyz_to_luv(x: float, y: float, z: float) -> Triple:
    lightness = float(_y_to_luv_lightness(y))
    denom = x + 15.0 * y + 3.0 * z
    if denom == 0 or lightness == 0:
        return lightness, 0.0, 0.0
    u_prime = 4.0 * x / denom
    v_prime = 9.0 * y / denom
    return (
        lightness,
        float(13.0 * lightness * (u_prime - D65_U)),
        float(13.0 * lightness * (v_prime - D65_V)),
    )


def luv_to_xyz(lightness: float, u: float, v: float) -> Triple:
    if lightness <= 0:
        return 0.0, 0.0, 0.0
    u_prime = u / (13.0 * lightness) + D65_U
    v_prime = v / (13.0 * lightness) + D65_V
    if lightness > LAB_KAPPA * LAB_EPSILON:
        y = ((lightness + 16.0) / 116.0) ** 3
    else:
        y = lightness / LAB_KAPPA
    y = float(y * D65[1])
    if v_prime == 0:
        return 0.0, y, 0.0
    x = y * 9.0 * u_prime / (4.0 * v_prime)
    z = y * (12.0 - 3.0 * u_prime - 20.0 * v_prime) / (4.0 * v_prime)
    return float(x), y, float(z)


def luv_to_lchuv(lightness: float, u: float, v: float) -> Triple:
    chroma, hue = to_polar(u, v)
    return lightness, chroma, hue


def lchuv_to_luv(lightness: float, chroma: float, hue: float) -> Triple:
    u, v = from_polar(chroma, wrap_hue(hue))
    return lightness, u, v
