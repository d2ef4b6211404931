"""Chromaspace: color models, conversions and gradient resampling."""

from .types.color_types import ColorSpace, as_color_space
from .colors import (
    ColorBase,
    XYZ,
    SRGB,
    DisplayP3,
    Gray,
    CMYK,
    GrayscalingMode,
    HSB,
    HSL,
    HWB,
    LAB,
    LCH,
    LUV,
    LCHuv,
    HSLuv,
    HPLuv,
    OKLAB,
    OKLCH,
    OKHSB,
    OKHSL,
    JZAZBZ,
    JZCZHZ,
    available_color_spaces,
    convert,
    convert_components,
    get_color_class,
)
from .gradients import (
    ColorStop,
    Gradient,
    GradientKind,
    Point,
    mix_colors,
    resample,
    resolve,
    stops_from_colors,
)

__version__ = "0.1.0"
