"""
Chromaspace Color Classes
=========================

One immutable class per supported color model. Every instance stores its
channels followed by alpha, converts through the CIE XYZ hub (or a direct
shortcut where one is registered) and mixes only with colors of the same
class.

Usage
-----
>>> from chromaspace.colors import SRGB, OKLCH
>>> red = SRGB(1.0, 0.0, 0.0)
>>> lch = red.convert("oklch")
>>> isinstance(lch, OKLCH)
True
>>> red.convert("srgb") is red
True
>>> SRGB(0.0, 0.0, 1.0, alpha=0.5).mixed(red, 0.5).components
(0.5, 0.0, 0.5, 0.75)

Color Classes
-------------
RGB family:
    - SRGB, DisplayP3, Gray, CMYK
    - HSB, HSL, HWB
CIE family:
    - XYZ (hub), LAB, LCH, LUV, LCHuv, HSLuv, HPLuv
OK family:
    - OKLAB, OKLCH, OKHSB, OKHSL
Jz family:
    - JZAZBZ, JZCZHZ
"""
from .color_base import ColorBase, build_registry
from .xyz import XYZ
from .rgb import CMYK, DisplayP3, Gray, GrayscalingMode, SRGB
from .hue import HSB, HSL, HWB
from .cie import HPLuv, HSLuv, LAB, LCH, LCHuv, LUV
from .ok import OKHSB, OKHSL, OKLAB, OKLCH
from .jz import JZAZBZ, JZCZHZ
from .color import (
    ColorSpaceInfo,
    available_color_spaces,
    color_classes,
    convert,
    convert_components,
    get_color_class,
    shortcuts,
)

__all__ = [
    'ColorBase',
    'build_registry',
    'XYZ',
    'SRGB',
    'DisplayP3',
    'Gray',
    'CMYK',
    'GrayscalingMode',
    'HSB',
    'HSL',
    'HWB',
    'LAB',
    'LCH',
    'LUV',
    'LCHuv',
    'HSLuv',
    'HPLuv',
    'OKLAB',
    'OKLCH',
    'OKHSB',
    'OKHSL',
    'JZAZBZ',
    'JZCZHZ',
    'ColorSpaceInfo',
    'available_color_spaces',
    'color_classes',
    'convert',
    'convert_components',
    'get_color_class',
    'shortcuts',
]
