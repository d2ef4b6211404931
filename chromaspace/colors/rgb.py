from __future__ import annotations
import re
from enum import Enum
from typing import Tuple

from ..conversions import (
    cmyk_to_rgb,
    display_p3_to_xyz,
    gray_to_rgb,
    hsb_to_hsl,
    rgb_to_cmyk,
    rgb_to_gray,
    rgb_to_hsb,
    srgb_relative_luminance,
    srgb_to_linear,
    srgb_to_xyz,
    xyz_to_display_p3,
    xyz_to_gray,
    xyz_to_srgb,
)
from ..types.color_types import ColorSpace
from ..utils.num_utils import clamp01
from .color_base import ColorBase, channel
from .xyz import XYZ

_HEX_PREFIX = re.compile(r"^(#|0x)", re.IGNORECASE)
_HEX_DIGITS = re.compile(r"^[0-9a-fA-F]+$")


class GrayscalingMode(str, Enum):
    """How ``SRGB.gray`` reduces a color to a single channel."""
    LUMINANCE = "luminance"    # XYZ Y, linear light
    LIGHTNESS = "lightness"    # HSL lightness
    AVERAGE = "average"        # mean of r, g, b
    VALUE = "value"            # HSB brightness
    PERCEPTUAL = "perceptual"  # gamma-encoded relative luminance


def _to_byte(value: float) -> int:
    return int(round(clamp01(value) * 255))


class SRGB(ColorBase):
    """Gamma-encoded sRGB. Extended-range channels are allowed."""
    __slots__ = ()
    space = ColorSpace.SRGB
    display_name = "sRGB"
    channel_names = ("red", "green", "blue")

    red = channel(0)
    green = channel(1)
    blue = channel(2)

    def to_xyz(self) -> XYZ:
        return XYZ(*srgb_to_xyz(*self.channels), alpha=self.alpha)

    @classmethod
    def from_xyz(cls, xyz: XYZ) -> SRGB:
        return cls(*xyz_to_srgb(*xyz.channels), alpha=xyz.alpha)

    # ------------------ HEX ------------------
    @classmethod
    def from_hex(cls, hex_string: str) -> SRGB:
        """
        Parse ``#RGB``, ``#RGBA``, ``#RRGGBB`` or ``#RRGGBBAA``.

        The ``#`` or ``0x`` prefix is optional.

        Raises:
            ValueError: if the string is not a hex color.
        """
        digits = _HEX_PREFIX.sub("", hex_string.strip())
        if len(digits) not in (3, 4, 6, 8) or not _HEX_DIGITS.match(digits):
            raise ValueError(f"Invalid hex color: {hex_string!r}")
        if len(digits) in (3, 4):
            digits = "".join(ch * 2 for ch in digits)
        values = [int(digits[i:i + 2], 16) / 255.0 for i in range(0, len(digits), 2)]
        return cls.from_components(values)

    @classmethod
    def from_hex_int(cls, value: int, alpha: float = 1.0) -> SRGB:
        """Create a color from an integer such as ``0xFF8800``."""
        r = (value >> 16) & 0xFF
        g = (value >> 8) & 0xFF
        b = value & 0xFF
        return cls(r / 255.0, g / 255.0, b / 255.0, alpha=alpha)

    @property
    def hex(self) -> int:
        """``0xRRGGBB``, or ``0xRRGGBBAA`` when the color is not opaque."""
        r, g, b = (_to_byte(v) for v in self.channels)
        if self.alpha == 1.0:
            return r << 16 | g << 8 | b
        return r << 24 | g << 16 | b << 8 | _to_byte(self.alpha)

    @property
    def hex_string(self) -> str:
        """``#RRGGBB``, or ``#RRGGBBAA`` when the color is not opaque."""
        if self.alpha == 1.0:
            return f"#{self.hex:06X}"
        return f"#{self.hex:08X}"

    # ------------------ DERIVED ------------------
    @property
    def linear(self) -> Tuple[float, float, float]:
        """Linear-light red, green and blue."""
        return tuple(srgb_to_linear(v) for v in self.channels)

    @property
    def relative_luminance(self) -> float:
        return srgb_relative_luminance(*self.channels)

    def contrast_ratio(self, other: SRGB) -> float:
        """WCAG 2.2 contrast ratio, from 1.0 to 21.0."""
        l1 = self.relative_luminance
        l2 = other.relative_luminance
        return (max(l1, l2) + 0.05) / (min(l1, l2) + 0.05)

    @property
    def is_light(self) -> bool:
        return self.relative_luminance >= 0.5

    @property
    def inverted(self) -> SRGB:
        return SRGB(1.0 - self.red, 1.0 - self.green, 1.0 - self.blue, alpha=self.alpha)

    def clamped(self) -> SRGB:
        """Every channel and alpha clamped into [0, 1]."""
        return SRGB.from_components([clamp01(v) for v in self._value])

    def gray(self, mode: GrayscalingMode = GrayscalingMode.PERCEPTUAL) -> Gray:
        mode = GrayscalingMode(mode)
        r, g, b = self.channels
        if mode is GrayscalingMode.LUMINANCE:
            white = self.relative_luminance
        elif mode is GrayscalingMode.LIGHTNESS:
            white = hsb_to_hsl(*rgb_to_hsb(r, g, b))[2]
        elif mode is GrayscalingMode.AVERAGE:
            white = (r + g + b) / 3.0
        elif mode is GrayscalingMode.VALUE:
            white = max(r, g, b)
        else:
            white = rgb_to_gray(r, g, b)
        return Gray(white, alpha=self.alpha)


class DisplayP3(ColorBase):
    """Display P3: P3 primaries, D65 white, sRGB transfer curve."""
    __slots__ = ()
    space = ColorSpace.DISPLAY_P3
    display_name = "Display P3"
    channel_names = ("red", "green", "blue")

    red = channel(0)
    green = channel(1)
    blue = channel(2)

    def to_xyz(self) -> XYZ:
        return XYZ(*display_p3_to_xyz(*self.channels), alpha=self.alpha)

    @classmethod
    def from_xyz(cls, xyz: XYZ) -> DisplayP3:
        return cls(*xyz_to_display_p3(*xyz.channels), alpha=xyz.alpha)


class Gray(ColorBase):
    """Single gamma-encoded white channel, equal parts red, green and blue."""
    __slots__ = ()
    space = ColorSpace.GRAY
    display_name = "Gray"
    channel_names = ("white",)

    white = channel(0)

    def to_srgb(self) -> SRGB:
        return SRGB(*gray_to_rgb(self.white), alpha=self.alpha)

    @classmethod
    def from_srgb(cls, rgb: SRGB) -> Gray:
        return cls(rgb_to_gray(*rgb.channels), alpha=rgb.alpha)

    def to_xyz(self) -> XYZ:
        return self.to_srgb().to_xyz()

    @classmethod
    def from_xyz(cls, xyz: XYZ) -> Gray:
        return cls(xyz_to_gray(*xyz.channels), alpha=xyz.alpha)


class CMYK(ColorBase):
    """
    Device-independent CMYK using the naive separation ``k = 1 - max(r, g, b)``.

    There is no ICC profile behind this model. RGB input is clamped to [0, 1]
    before separation, and only tuples with ``min(c, m, y) == 0`` survive a
    round trip unchanged.
    """
    __slots__ = ()
    space = ColorSpace.CMYK
    display_name = "CMYK"
    channel_names = ("cyan", "magenta", "yellow", "black")

    cyan = channel(0)
    magenta = channel(1)
    yellow = channel(2)
    black = channel(3)

    def to_srgb(self) -> SRGB:
        return SRGB(*cmyk_to_rgb(*self.channels), alpha=self.alpha)

    @classmethod
    def from_srgb(cls, rgb: SRGB) -> CMYK:
        return cls(*rgb_to_cmyk(*rgb.channels), alpha=rgb.alpha)

    def to_xyz(self) -> XYZ:
        return self.to_srgb().to_xyz()

    @classmethod
    def from_xyz(cls, xyz: XYZ) -> CMYK:
        return cls.from_srgb(SRGB.from_xyz(xyz))


__all__ = ["GrayscalingMode", "SRGB", "DisplayP3", "Gray", "CMYK"]
