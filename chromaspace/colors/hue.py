"""Cylindrical RGB models: HSB, HSL and HWB."""
from __future__ import annotations

from ..conversions import (
    hsb_to_hsl,
    hsb_to_hwb,
    hsb_to_rgb,
    hsl_to_hsb,
    hsl_to_rgb,
    hwb_to_hsb,
    rgb_to_hsb,
    rgb_to_hsl,
)
from ..types.color_types import ColorSpace
from .color_base import ColorBase, channel
from .rgb import SRGB
from .xyz import XYZ


class _RGBCylinder(ColorBase):
    """Models that are a reshaping of gamma-encoded sRGB."""
    __slots__ = ()
    hue_index = 0

    hue = channel(0, "Hue in degrees [0, 360).")

    def to_srgb(self) -> SRGB:
        raise NotImplementedError

    @classmethod
    def from_srgb(cls, rgb: SRGB):
        raise NotImplementedError

    def to_xyz(self) -> XYZ:
        return self.to_srgb().to_xyz()

    @classmethod
    def from_xyz(cls, xyz: XYZ):
        return cls.from_srgb(SRGB.from_xyz(xyz))


class HSB(_RGBCylinder):
    __slots__ = ()
    space = ColorSpace.HSB
    display_name = "HSB"
    channel_names = ("hue", "saturation", "brightness")

    saturation = channel(1)
    brightness = channel(2)

    def to_srgb(self) -> SRGB:
        return SRGB(*hsb_to_rgb(*self.channels), alpha=self.alpha)

    @classmethod
    def from_srgb(cls, rgb: SRGB) -> HSB:
        return cls(*rgb_to_hsb(*rgb.channels), alpha=rgb.alpha)

    def to_hsl(self) -> HSL:
        return HSL(*hsb_to_hsl(*self.channels), alpha=self.alpha)

    def to_hwb(self) -> HWB:
        return HWB(*hsb_to_hwb(*self.channels), alpha=self.alpha)


class HSL(_RGBCylinder):
    __slots__ = ()
    space = ColorSpace.HSL
    display_name = "HSL"
    channel_names = ("hue", "saturation", "lightness")

    saturation = channel(1)
    lightness = channel(2)

    def to_srgb(self) -> SRGB:
        return SRGB(*hsl_to_rgb(*self.channels), alpha=self.alpha)

    @classmethod
    def from_srgb(cls, rgb: SRGB) -> HSL:
        return cls(*rgb_to_hsl(*rgb.channels), alpha=rgb.alpha)

    def to_hsb(self) -> HSB:
        return HSB(*hsl_to_hsb(*self.channels), alpha=self.alpha)


class HWB(_RGBCylinder):
    """Hue, whiteness, blackness. Whiteness + blackness >= 1 is a gray."""
    __slots__ = ()
    space = ColorSpace.HWB
    display_name = "HWB"
    channel_names = ("hue", "whiteness", "blackness")

    whiteness = channel(1)
    blackness = channel(2)

    def to_hsb(self) -> HSB:
        return HSB(*hwb_to_hsb(*self.channels), alpha=self.alpha)

    def to_srgb(self) -> SRGB:
        return self.to_hsb().to_srgb()

    @classmethod
    def from_srgb(cls, rgb: SRGB) -> HWB:
        return HSB.from_srgb(rgb).to_hwb()


__all__ = ["HSB", "HSL", "HWB"]
