from __future__ import annotations
import logging
from typing import Callable, Dict, NamedTuple, Sequence, Tuple

from ..types.color_types import ColorSpace, ColorSpaceLike, as_color_space
from .cie import HPLuv, HSLuv, LAB, LCH, LCHuv, LUV
from .color_base import ColorBase, build_registry
from .hue import HSB, HSL, HWB
from .jz import JZAZBZ, JZCZHZ
from .ok import OKHSB, OKHSL, OKLAB, OKLCH
from .rgb import CMYK, DisplayP3, Gray, SRGB
from .xyz import XYZ

log = logging.getLogger(__name__)

color_classes: Dict[ColorSpace, type[ColorBase]] = build_registry(
    SRGB, DisplayP3, HSB, HSL, HWB, Gray, CMYK,
    XYZ, LAB, LCH, LUV, LCHuv, HSLuv, HPLuv,
    OKLAB, OKLCH, OKHSB, OKHSL,
    JZAZBZ, JZCZHZ,
)

Shortcut = Callable[[ColorBase], ColorBase]

# Direct spoke-to-spoke conversions that skip the XYZ hub.
shortcuts: Dict[Tuple[ColorSpace, ColorSpace], Shortcut] = {
    # sRGB cylinders
    (ColorSpace.SRGB, ColorSpace.HSB): HSB.from_srgb,
    (ColorSpace.SRGB, ColorSpace.HSL): HSL.from_srgb,
    (ColorSpace.SRGB, ColorSpace.HWB): HWB.from_srgb,
    (ColorSpace.HSB, ColorSpace.SRGB): lambda c: c.to_srgb(),
    (ColorSpace.HSL, ColorSpace.SRGB): lambda c: c.to_srgb(),
    (ColorSpace.HWB, ColorSpace.SRGB): lambda c: c.to_srgb(),
    (ColorSpace.HSB, ColorSpace.HSL): lambda c: c.to_hsl(),
    (ColorSpace.HSL, ColorSpace.HSB): lambda c: c.to_hsb(),
    (ColorSpace.HSB, ColorSpace.HWB): lambda c: c.to_hwb(),
    (ColorSpace.HWB, ColorSpace.HSB): lambda c: c.to_hsb(),
    # device spokes
    (ColorSpace.SRGB, ColorSpace.CMYK): CMYK.from_srgb,
    (ColorSpace.CMYK, ColorSpace.SRGB): lambda c: c.to_srgb(),
    (ColorSpace.SRGB, ColorSpace.GRAY): Gray.from_srgb,
    (ColorSpace.GRAY, ColorSpace.SRGB): lambda c: c.to_srgb(),
    # CIE
    (ColorSpace.LAB, ColorSpace.LCH): lambda c: c.to_lch(),
    (ColorSpace.LCH, ColorSpace.LAB): lambda c: c.to_lab(),
    (ColorSpace.LUV, ColorSpace.LCHUV): lambda c: c.to_lchuv(),
    (ColorSpace.LCHUV, ColorSpace.LUV): lambda c: c.to_luv(),
    (ColorSpace.LCHUV, ColorSpace.HSLUV): lambda c: c.to_hsluv(),
    (ColorSpace.HSLUV, ColorSpace.LCHUV): lambda c: c.to_lchuv(),
    (ColorSpace.LCHUV, ColorSpace.HPLUV): lambda c: c.to_hpluv(),
    (ColorSpace.HPLUV, ColorSpace.LCHUV): lambda c: c.to_lchuv(),
    # OK
    (ColorSpace.OKLAB, ColorSpace.OKLCH): lambda c: c.to_oklch(),
    (ColorSpace.OKLAB, ColorSpace.OKHSB): lambda c: c.to_okhsb(),
    (ColorSpace.OKLAB, ColorSpace.OKHSL): lambda c: c.to_okhsl(),
    (ColorSpace.OKLCH, ColorSpace.OKLAB): lambda c: c.to_oklab(),
    (ColorSpace.OKHSB, ColorSpace.OKLAB): lambda c: c.to_oklab(),
    (ColorSpace.OKHSL, ColorSpace.OKLAB): lambda c: c.to_oklab(),
    # Jz
    (ColorSpace.JZAZBZ, ColorSpace.JZCZHZ): lambda c: c.to_jzczhz(),
    (ColorSpace.JZCZHZ, ColorSpace.JZAZBZ): lambda c: c.to_jzazbz(),
}


def get_color_class(color_space: ColorSpaceLike) -> type[ColorBase]:
    """
    Look up the component class for a tag.

    Raises:
        ValueError: if the tag is unknown.
    """
    return color_classes[as_color_space(color_space)]


def convert(color: ColorBase, to_space: ColorSpaceLike) -> ColorBase:
    """
    Convert a color into another model.

    Returns the very same object when the color is already in ``to_space``.
    Pairs with a registered shortcut convert directly; everything else goes
    through XYZ.

    Args:
        color: Source color
        to_space: Target tag or its string name

    Returns:
        Instance of the target model's class, alpha carried over unchanged

    Raises:
        ValueError: if ``to_space`` is unknown.
    """
    target = as_color_space(to_space)
    if color.space is target:
        return color
    shortcut = shortcuts.get((color.space, target))
    if shortcut is not None:
        return shortcut(color)
    log.debug("Converting %s -> %s through XYZ", color.space.value, target.value)
    return color_classes[target].from_xyz(color.to_xyz())


def convert_components(
    values: Sequence[float],
    from_space: ColorSpaceLike,
    to_space: ColorSpaceLike,
) -> Tuple[float, ...]:
    """
    Convert a raw component tuple (channels with optional alpha).

    When both tags name the same model the values come back exactly as given,
    without hue normalisation or an appended alpha.

    Returns:
        Target channels followed by alpha
    """
    color = get_color_class(from_space).from_components(values)
    if color.space is as_color_space(to_space):
        return tuple(values)
    return convert(color, to_space).components


def color_convert(self: ColorBase, to_space: ColorSpaceLike) -> ColorBase:
    """Convert this color to a different color model."""
    return convert(self, to_space)


ColorBase.convert = color_convert


class ColorSpaceInfo(NamedTuple):
    space: ColorSpace
    display_name: str
    channel_names: Tuple[str, ...]
    has_hue: bool


def available_color_spaces() -> Tuple[ColorSpaceInfo, ...]:
    """Every supported color model with its display name and channel layout."""
    return tuple(
        ColorSpaceInfo(space, cls.display_name, cls.channel_names, cls.hue_index is not None)
        for space, cls in color_classes.items()
    )
