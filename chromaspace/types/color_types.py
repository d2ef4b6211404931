from __future__ import annotations
from enum import Enum
from typing import Tuple, Union

ScalarVector = Tuple[float, ...]


class ColorSpace(str, Enum):
    """Closed enumeration of every supported color model."""
    SRGB = "srgb"
    HSL = "hsl"
    HSB = "hsb"
    OKLAB = "oklab"
    OKLCH = "oklch"
    OKHSB = "okhsb"
    OKHSL = "okhsl"
    XYZ = "xyz"
    LAB = "lab"
    LCH = "lch"
    LUV = "luv"
    HPLUV = "hpluv"
    GRAY = "gray"
    CMYK = "cmyk"
    DISPLAY_P3 = "displayp3"
    HWB = "hwb"
    LCHUV = "lchuv"
    HSLUV = "hsluv"
    JZAZBZ = "jzazbz"
    JZCZHZ = "jzczhz"


ColorSpaceLike = Union[ColorSpace, str]

HUE_SPACES = {
    ColorSpace.HSB,
    ColorSpace.HSL,
    ColorSpace.HWB,
    ColorSpace.LCH,
    ColorSpace.LCHUV,
    ColorSpace.HSLUV,
    ColorSpace.HPLUV,
    ColorSpace.OKLCH,
    ColorSpace.OKHSB,
    ColorSpace.OKHSL,
    ColorSpace.JZCZHZ,
}


def as_color_space(value: ColorSpaceLike) -> ColorSpace:
    """
    Coerce a tag or its string name to a ColorSpace.

    Raises:
        ValueError: if the value is not part of the enumeration.
    """
    if isinstance(value, ColorSpace):
        return value
    try:
        return ColorSpace(str(value).lower().replace("_", "").replace("-", ""))
    except ValueError:
        raise ValueError(f"Unknown color space: {value!r}") from None


def is_hue_space(color_space: ColorSpaceLike) -> bool:
    """
    Check if the given color space stores a hue angle.

    Args:
        color_space: Color space tag or name
    Returns:
        True if hue-based, False otherwise
    """
    return as_color_space(color_space) in HUE_SPACES
