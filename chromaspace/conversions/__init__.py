"""
Chromaspace Color Space Conversions
===================================

Pure scalar conversion math between every supported color model. Each
function takes plain floats and returns a plain tuple; alpha is handled by the
color classes in ``chromaspace.colors``.

The conversion graph is hub-and-spoke: every model has a path to and from CIE
XYZ (D65). A few pairs also have direct spoke-to-spoke functions:

    sRGB <-> HSB <-> HSL, HSB <-> HWB, sRGB <-> CMYK, sRGB <-> Gray
    LAB <-> LCH
    LUV <-> LCHuv <-> HSLuv / HPLuv
    OKLab <-> OKLCH / OKHSB / OKHSL
    Jzazbz <-> JzCzHz

Conventions
-----------
- Hue is in degrees, always returned in [0, 360).
- RGB, HSB, HSL, HWB, Gray, CMYK, OKHSB and OKHSL channels are unit floats.
- LAB/LCH/LUV/LCHuv lightness is 0-100; HSLuv/HPLuv use 0-100 scales.
- Out-of-gamut input is never rejected or clamped (CMYK excepted, which
  clamps its RGB input before separating black).

Examples
--------
>>> from chromaspace.conversions import srgb_to_xyz, xyz_to_oklab
>>> xyz_to_oklab(*srgb_to_xyz(1.0, 0.0, 0.0))
(0.6279..., 0.2248..., 0.1258...)
"""

from .rgb import (
    srgb_to_xyz,
    xyz_to_srgb,
    srgb_relative_luminance,
    display_p3_to_xyz,
    xyz_to_display_p3,
    rgb_to_hsb,
    hsb_to_rgb,
    rgb_to_hsl,
    hsl_to_rgb,
    hsb_to_hsl,
    hsl_to_hsb,
    hsb_to_hwb,
    hwb_to_hsb,
    gray_to_rgb,
    rgb_to_gray,
    xyz_to_gray,
    rgb_to_cmyk,
    cmyk_to_rgb,
)
from .cie import (
    xyz_to_lab,
    lab_to_xyz,
    lab_to_lch,
    lch_to_lab,
    xyz_to_luv,
    luv_to_xyz,
    luv_to_lchuv,
    lchuv_to_luv,
)
from .hsluv import (
    hsluv_to_lchuv,
    lchuv_to_hsluv,
    hpluv_to_lchuv,
    lchuv_to_hpluv,
)
from .oklab import (
    xyz_to_oklab,
    oklab_to_xyz,
    linear_srgb_to_oklab,
    oklab_to_linear_srgb,
    oklab_to_oklch,
    oklch_to_oklab,
    oklab_to_okhsb,
    okhsb_to_oklab,
    oklab_to_okhsl,
    okhsl_to_oklab,
)
from .jzazbz import (
    xyz_to_jzazbz,
    jzazbz_to_xyz,
    jzazbz_to_jzczhz,
    jzczhz_to_jzazbz,
)
from .helpers import srgb_to_linear, linear_to_srgb

__all__ = [
    # RGB family
    'srgb_to_xyz',
    'xyz_to_srgb',
    'srgb_relative_luminance',
    'display_p3_to_xyz',
    'xyz_to_display_p3',
    'rgb_to_hsb',
    'hsb_to_rgb',
    'rgb_to_hsl',
    'hsl_to_rgb',
    'hsb_to_hsl',
    'hsl_to_hsb',
    'hsb_to_hwb',
    'hwb_to_hsb',
    'gray_to_rgb',
    'rgb_to_gray',
    'xyz_to_gray',
    'rgb_to_cmyk',
    'cmyk_to_rgb',

    # CIE family
    'xyz_to_lab',
    'lab_to_xyz',
    'lab_to_lch',
    'lch_to_lab',
    'xyz_to_luv',
    'luv_to_xyz',
    'luv_to_lchuv',
    'lchuv_to_luv',

    # HSLuv family
    'hsluv_to_lchuv',
    'lchuv_to_hsluv',
    'hpluv_to_lchuv',
    'lchuv_to_hpluv',

    # OK family
    'xyz_to_oklab',
    'oklab_to_xyz',
    'linear_srgb_to_oklab',
    'oklab_to_linear_srgb',
    'oklab_to_oklch',
    'oklch_to_oklab',
    'oklab_to_okhsb',
    'okhsb_to_oklab',
    'oklab_to_okhsl',
    'okhsl_to_oklab',

    # Jz family
    'xyz_to_jzazbz',
    'jzazbz_to_xyz',
    'jzazbz_to_jzczhz',
    'jzczhz_to_jzazbz',

    # Transfer function
    'srgb_to_linear',
    'linear_to_srgb',
]
