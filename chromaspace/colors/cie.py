"""CIE models relative to D65: L*a*b*, LCh(ab), L*u*v*, LCh(uv), HSLuv and HPLuv."""
from __future__ import annotations

from ..conversions import (
    hpluv_to_lchuv,
    hsluv_to_lchuv,
    lab_to_lch,
    lab_to_xyz,
    lch_to_lab,
    lchuv_to_hpluv,
    lchuv_to_hsluv,
    lchuv_to_luv,
    luv_to_lchuv,
    luv_to_xyz,
    xyz_to_lab,
    xyz_to_luv,
)
from ..types.color_types import ColorSpace
from .color_base import ColorBase, channel
from .xyz import XYZ


class LAB(ColorBase):
    """CIE L*a*b*. Lightness in [0, 100]."""
    __slots__ = ()
    space = ColorSpace.LAB
    display_name = "CIELAB"
    channel_names = ("lightness", "a", "b")

    lightness = channel(0)
    a = channel(1)
    b = channel(2)

    def to_xyz(self) -> XYZ:
        return XYZ(*lab_to_xyz(*self.channels), alpha=self.alpha)

    @classmethod
    def from_xyz(cls, xyz: XYZ) -> LAB:
        return cls(*xyz_to_lab(*xyz.channels), alpha=xyz.alpha)

    def to_lch(self) -> LCH:
        return LCH(*lab_to_lch(*self.channels), alpha=self.alpha)


class LCH(ColorBase):
    """Polar form of CIE L*a*b*."""
    __slots__ = ()
    space = ColorSpace.LCH
    display_name = "CIELCh"
    channel_names = ("lightness", "chroma", "hue")
    hue_index = 2

    lightness = channel(0)
    chroma = channel(1)
    hue = channel(2)

    def to_lab(self) -> LAB:
        return LAB(*lch_to_lab(*self.channels), alpha=self.alpha)

    def to_xyz(self) -> XYZ:
        return self.to_lab().to_xyz()

    @classmethod
    def from_xyz(cls, xyz: XYZ) -> LCH:
        return LAB.from_xyz(xyz).to_lch()


class LUV(ColorBase):
    """CIE L*u*v*. Lightness in [0, 100]."""
    __slots__ = ()
    space = ColorSpace.LUV
    display_name = "CIELUV"
    channel_names = ("lightness", "u", "v")

    lightness = channel(0)
    u = channel(1)
    v = channel(2)

    def to_xyz(self) -> XYZ:
        return XYZ(*luv_to_xyz(*self.channels), alpha=self.alpha)

    @classmethod
    def from_xyz(cls, xyz: XYZ) -> LUV:
        return cls(*xyz_to_luv(*xyz.channels), alpha=xyz.alpha)

    def to_lchuv(self) -> LCHuv:
        return LCHuv(*luv_to_lchuv(*self.channels), alpha=self.alpha)


class LCHuv(ColorBase):
    """Polar form of CIE L*u*v*."""
    __slots__ = ()
    space = ColorSpace.LCHUV
    display_name = "CIELCh(uv)"
    channel_names = ("lightness", "chroma", "hue")
    hue_index = 2

    lightness = channel(0)
    chroma = channel(1)
    hue = channel(2)

    def to_luv(self) -> LUV:
        return LUV(*lchuv_to_luv(*self.channels), alpha=self.alpha)

    def to_xyz(self) -> XYZ:
        return self.to_luv().to_xyz()

    @classmethod
    def from_xyz(cls, xyz: XYZ) -> LCHuv:
        return LUV.from_xyz(xyz).to_lchuv()

    def to_hsluv(self) -> HSLuv:
        return HSLuv(*lchuv_to_hsluv(*self.channels), alpha=self.alpha)

    def to_hpluv(self) -> HPLuv:
        return HPLuv(*lchuv_to_hpluv(*self.channels), alpha=self.alpha)


class HSLuv(ColorBase):
    """
    Human-friendly HSL built on LCh(uv).

    Saturation and lightness are in [0, 100]; saturation 100 is the edge of
    the sRGB gamut for the given hue and lightness.
    """
    __slots__ = ()
    space = ColorSpace.HSLUV
    display_name = "HSLuv"
    channel_names = ("hue", "saturation", "lightness")
    hue_index = 0

    hue = channel(0)
    saturation = channel(1)
    lightness = channel(2)

    def to_lchuv(self) -> LCHuv:
        return LCHuv(*hsluv_to_lchuv(*self.channels), alpha=self.alpha)

    def to_xyz(self) -> XYZ:
        return self.to_lchuv().to_xyz()

    @classmethod
    def from_xyz(cls, xyz: XYZ) -> HSLuv:
        return LCHuv.from_xyz(xyz).to_hsluv()


class HPLuv(ColorBase):
    """
    Pastel variant of HSLuv: saturation 100 is the largest chroma that stays
    inside sRGB for every hue at the given lightness.
    """
    __slots__ = ()
    space = ColorSpace.HPLUV
    display_name = "HPLuv"
    channel_names = ("hue", "saturation", "lightness")
    hue_index = 0

    hue = channel(0)
    saturation = channel(1)
    lightness = channel(2)

    def to_lchuv(self) -> LCHuv:
        return LCHuv(*hpluv_to_lchuv(*self.channels), alpha=self.alpha)

    def to_xyz(self) -> XYZ:
        return self.to_lchuv().to_xyz()

    @classmethod
    def from_xyz(cls, xyz: XYZ) -> HPLuv:
        return LCHuv.from_xyz(xyz).to_hpluv()


__all__ = ["LAB", "LCH", "LUV", "LCHuv", "HSLuv", "HPLuv"]
