from __future__ import annotations

from ..conversions import jzazbz_to_jzczhz, jzazbz_to_xyz, jzczhz_to_jzazbz, xyz_to_jzazbz
from ..types.color_types import ColorSpace
from .color_base import ColorBase, channel
from .xyz import XYZ


class JZAZBZ(ColorBase):
    """Jzazbz (Safdar et al. 2017) computed on relative XYZ."""
    __slots__ = ()
    space = ColorSpace.JZAZBZ
    display_name = "Jzazbz"
    channel_names = ("jz", "az", "bz")

    jz = channel(0)
    az = channel(1)
    bz = channel(2)

    def to_xyz(self) -> XYZ:
        return XYZ(*jzazbz_to_xyz(*self.channels), alpha=self.alpha)

    @classmethod
    def from_xyz(cls, xyz: XYZ) -> JZAZBZ:
        return cls(*xyz_to_jzazbz(*xyz.channels), alpha=xyz.alpha)

    def to_jzczhz(self) -> JZCZHZ:
        return JZCZHZ(*jzazbz_to_jzczhz(*self.channels), alpha=self.alpha)


class JZCZHZ(ColorBase):
    """Polar form of Jzazbz."""
    __slots__ = ()
    space = ColorSpace.JZCZHZ
    display_name = "JzCzHz"
    channel_names = ("jz", "chroma", "hue")
    hue_index = 2

    jz = channel(0)
    chroma = channel(1)
    hue = channel(2)

    def to_jzazbz(self) -> JZAZBZ:
        return JZAZBZ(*jzczhz_to_jzazbz(*self.channels), alpha=self.alpha)

    def to_xyz(self) -> XYZ:
        return self.to_jzazbz().to_xyz()

    @classmethod
    def from_xyz(cls, xyz: XYZ) -> JZCZHZ:
        return JZAZBZ.from_xyz(xyz).to_jzczhz()


__all__ = ["JZAZBZ", "JZCZHZ"]
