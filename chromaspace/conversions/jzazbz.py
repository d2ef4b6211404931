"""Jzazbz and JzCzHz conversions (Safdar et al. 2017) on relative XYZ."""

from ..utils.num_utils import wrap_hue
from .constants import (
    JZ_B,
    JZ_G,
    JZ_N,
    JZ_C1,
    JZ_C2,
    JZ_C3,
    JZ_P,
    JZ_D,
    JZ_D0,
    JZ_PEAK,
    M_JZ_XYZ_TO_LMS,
    M_JZ_LMS_TO_XYZ,
    M_JZ_LMS_TO_IAB,
    M_JZ_IAB_TO_LMS,
)
from .helpers import Triple, from_polar, mat_vec, spow, to_polar


def _pq_encode(value: float) -> float:
    vn = spow(value / JZ_PEAK, JZ_N)
    return spow((JZ_C1 + JZ_C2 * vn) / (1.0 + JZ_C3 * vn), JZ_P)


def _pq_decode(value: float) -> float:
    vp = spow(value, 1.0 / JZ_P)
    return JZ_PEAK * spow((JZ_C1 - vp) / (JZ_C3 * vp - JZ_C2), 1.0 / JZ_N)


def xyz_to_jzazbz(x: float, y: float, z: float) -> Triple:
    # pre-adjust X and Y to reduce blue curvature
    xm = JZ_B * x - (JZ_B - 1.0) * z
    ym = JZ_G * y - (JZ_G - 1.0) * x
    lms = mat_vec(M_JZ_XYZ_TO_LMS, xm, ym, z)
    iz, az, bz = mat_vec(M_JZ_LMS_TO_IAB, *(_pq_encode(v) for v in lms))
    jz = (1.0 + JZ_D) * iz / (1.0 + JZ_D * iz) - JZ_D0
    return jz, az, bz


def jzazbz_to_xyz(jz: float, az: float, bz: float) -> Triple:
    iz = (jz + JZ_D0) / (1.0 + JZ_D - JZ_D * (jz + JZ_D0))
    pq = mat_vec(M_JZ_IAB_TO_LMS, iz, az, bz)
    xm, ym, z = mat_vec(M_JZ_LMS_TO_XYZ, *(_pq_decode(v) for v in pq))
    x = (xm + (JZ_B - 1.0) * z) / JZ_B
    y = (ym + (JZ_G - 1.0) * x) / JZ_G
    return x, y, z


def jzazbz_to_jzczhz(jz: float, az: float, bz: float) -> Triple:
    chroma, hue = to_polar(az, bz)
    return jz, chroma, hue


def jzczhz_to_jzazbz(jz: float, chroma: float, hue: float) -> Triple:
    az, bz = from_polar(chroma, wrap_hue(hue))
    return jz, az, bz
