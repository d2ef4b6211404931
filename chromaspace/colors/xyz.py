from __future__ import annotations

from ..types.color_types import ColorSpace
from .color_base import ColorBase, channel


class XYZ(ColorBase):
    """CIE 1931 XYZ relative to D65, Y = 1 for the reference white. The conversion hub."""
    __slots__ = ()
    space = ColorSpace.XYZ
    display_name = "XYZ"
    channel_names = ("x", "y", "z")

    x = channel(0)
    y = channel(1)
    z = channel(2)

    def to_xyz(self) -> XYZ:
        return self

    @classmethod
    def from_xyz(cls, xyz: XYZ) -> XYZ:
        return xyz
