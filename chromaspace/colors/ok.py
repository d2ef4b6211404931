"""OKLab family: OKLab, OKLCH, OKHSB and OKHSL."""
from __future__ import annotations

from ..conversions import (
    okhsb_to_oklab,
    okhsl_to_oklab,
    oklab_to_okhsb,
    oklab_to_okhsl,
    oklab_to_oklch,
    oklab_to_xyz,
    oklch_to_oklab,
    xyz_to_oklab,
)
from ..types.color_types import ColorSpace
from .color_base import ColorBase, channel
from .xyz import XYZ


class OKLAB(ColorBase):
    """Björn Ottosson's OKLab, defined on linear sRGB. Lightness in [0, 1]."""
    __slots__ = ()
    space = ColorSpace.OKLAB
    display_name = "OKLab"
    channel_names = ("lightness", "a", "b")

    lightness = channel(0)
    a = channel(1, "Green-red axis.")
    b = channel(2, "Blue-yellow axis.")

    def to_xyz(self) -> XYZ:
        return XYZ(*oklab_to_xyz(*self.channels), alpha=self.alpha)

    @classmethod
    def from_xyz(cls, xyz: XYZ) -> OKLAB:
        return cls(*xyz_to_oklab(*xyz.channels), alpha=xyz.alpha)

    def to_oklch(self) -> OKLCH:
        return OKLCH(*oklab_to_oklch(*self.channels), alpha=self.alpha)

    def to_okhsb(self) -> OKHSB:
        return OKHSB(*oklab_to_okhsb(*self.channels), alpha=self.alpha)

    def to_okhsl(self) -> OKHSL:
        return OKHSL(*oklab_to_okhsl(*self.channels), alpha=self.alpha)


class _OKDerived(ColorBase):
    __slots__ = ()

    def to_oklab(self) -> OKLAB:
        raise NotImplementedError

    def to_xyz(self) -> XYZ:
        return self.to_oklab().to_xyz()


class OKLCH(_OKDerived):
    __slots__ = ()
    space = ColorSpace.OKLCH
    display_name = "OKLCH"
    channel_names = ("lightness", "chroma", "hue")
    hue_index = 2

    lightness = channel(0)
    chroma = channel(1)
    hue = channel(2)

    def to_oklab(self) -> OKLAB:
        return OKLAB(*oklch_to_oklab(*self.channels), alpha=self.alpha)

    @classmethod
    def from_xyz(cls, xyz: XYZ) -> OKLCH:
        return OKLAB.from_xyz(xyz).to_oklch()


class OKHSB(_OKDerived):
    """Hue, saturation and brightness over the OKLab sRGB gamut cusp."""
    __slots__ = ()
    space = ColorSpace.OKHSB
    display_name = "OKHSB"
    channel_names = ("hue", "saturation", "brightness")
    hue_index = 0

    hue = channel(0)
    saturation = channel(1)
    brightness = channel(2)

    def to_oklab(self) -> OKLAB:
        return OKLAB(*okhsb_to_oklab(*self.channels), alpha=self.alpha)

    @classmethod
    def from_xyz(cls, xyz: XYZ) -> OKHSB:
        return OKLAB.from_xyz(xyz).to_okhsb()


class OKHSL(_OKDerived):
    """Like OKHSB, with toe-corrected lightness."""
    __slots__ = ()
    space = ColorSpace.OKHSL
    display_name = "OKHSL"
    channel_names = ("hue", "saturation", "lightness")
    hue_index = 0

    hue = channel(0)
    saturation = channel(1)
    lightness = channel(2)

    def to_oklab(self) -> OKLAB:
        return OKLAB(*okhsl_to_oklab(*self.channels), alpha=self.alpha)

    @classmethod
    def from_xyz(cls, xyz: XYZ) -> OKHSL:
        return OKLAB.from_xyz(xyz).to_okhsl()


__all__ = ["OKLAB", "OKLCH", "OKHSB", "OKHSL"]
