import logging

import numpy as np
import pytest

from chromaspace.colors import (
    CMYK,
    HSB,
    HSL,
    HWB,
    LAB,
    LCH,
    OKLAB,
    OKLCH,
    SRGB,
    XYZ,
    color_classes,
    convert,
    convert_components,
    shortcuts,
)
from chromaspace.types import ColorSpace

rgb_tolerance = 1e-9


@pytest.mark.parametrize("space", list(ColorSpace))
def test_identity_returns_same_object(space):
    color = convert(SRGB(0.8, 0.4, 0.2, alpha=0.7), space)
    assert convert(color, space) is color
    assert color.convert(space) is color


def test_convert_accepts_string_tags():
    assert isinstance(convert(SRGB(1.0, 0.0, 0.0), "oklch"), OKLCH)
    assert isinstance(SRGB(1.0, 0.0, 0.0).convert("OKLab"), OKLAB)
    assert isinstance(SRGB(1.0, 0.0, 0.0).convert("display_p3"), color_classes[ColorSpace.DISPLAY_P3])


def test_unknown_tag_raises():
    with pytest.raises(ValueError):
        convert(SRGB(1.0, 0.0, 0.0), "rgb24")
    with pytest.raises(ValueError):
        convert_components((1.0, 0.0, 0.0), "nope", "srgb")


def test_alpha_is_carried_unchanged():
    color = SRGB(0.8, 0.4, 0.2, alpha=1.7)
    for space in ColorSpace:
        assert convert(color, space).alpha == 1.7


def test_shortcuts_agree_with_hub():
    source = SRGB(0.8, 0.4, 0.2, alpha=0.7)
    for (from_space, to_space), shortcut in shortcuts.items():
        color = convert(source, from_space)
        direct = shortcut(color)
        via_hub = color_classes[to_space].from_xyz(color.to_xyz())
        assert type(direct) is color_classes[to_space]
        assert direct.is_approximately_equal(via_hub, 1e-6), (from_space, to_space)


def test_spoke_shortcuts_are_registered():
    expected = {
        (ColorSpace.SRGB, ColorSpace.HSB), (ColorSpace.HSB, ColorSpace.HSL),
        (ColorSpace.HSB, ColorSpace.HWB), (ColorSpace.SRGB, ColorSpace.CMYK),
        (ColorSpace.SRGB, ColorSpace.GRAY), (ColorSpace.LAB, ColorSpace.LCH),
        (ColorSpace.LUV, ColorSpace.LCHUV), (ColorSpace.LCHUV, ColorSpace.HSLUV),
        (ColorSpace.LCHUV, ColorSpace.HPLUV), (ColorSpace.OKLAB, ColorSpace.OKLCH),
        (ColorSpace.OKLAB, ColorSpace.OKHSB), (ColorSpace.OKLAB, ColorSpace.OKHSL),
        (ColorSpace.JZAZBZ, ColorSpace.JZCZHZ),
    }
    for src, dst in expected:
        assert (src, dst) in shortcuts
        assert (dst, src) in shortcuts


def test_direct_spokes():
    red = SRGB(1.0, 0.0, 0.0)
    assert red.convert("hsb") == HSB(0.0, 1.0, 1.0)
    assert red.convert("hsl") == HSL(0.0, 1.0, 0.5)
    assert red.convert("hwb") == HWB(0.0, 0.0, 0.0)
    assert red.convert("cmyk") == CMYK(0.0, 1.0, 1.0, 0.0)
    assert HSB(0.0, 1.0, 1.0).convert("hsl") == HSL(0.0, 1.0, 0.5)
    assert HWB(0.0, 0.0, 0.0).convert("srgb") == red


def test_polar_models():
    lab = LAB(50.0, 0.0, 30.0)
    lch = lab.convert("lch")
    assert isinstance(lch, LCH)
    assert abs(lch.chroma - 30.0) < rgb_tolerance
    assert abs(lch.hue - 90.0) < rgb_tolerance
    assert np.allclose(lch.convert("lab").channels, lab.channels, atol=rgb_tolerance)


def test_out_of_gamut_values_pass_through():
    # a saturated P3 green is outside sRGB; conversion must not clamp
    p3_green = color_classes[ColorSpace.DISPLAY_P3](0.0, 1.0, 0.0)
    rgb = p3_green.convert("srgb")
    assert rgb.red < 0.0
    assert rgb.green > 1.0
    back = rgb.convert("displayp3")
    assert np.allclose(back.channels, p3_green.channels, atol=1e-6)


def test_hub_conversion_logs_at_debug(caplog):
    with caplog.at_level(logging.DEBUG, logger="chromaspace.colors.color"):
        SRGB(1.0, 0.0, 0.0).convert("lab")
    assert any("through XYZ" in record.getMessage() for record in caplog.records)


def test_convert_components():
    result = convert_components((1.0, 0.0, 0.0), "srgb", "hsb")
    assert result == (0.0, 1.0, 1.0, 1.0)
    result = convert_components((0.0, 1.0, 0.5, 0.25), ColorSpace.HSL, ColorSpace.SRGB)
    assert result == (1.0, 0.0, 0.0, 0.25)
    xyz = convert_components((1.0, 1.0, 1.0), "srgb", "xyz")
    assert np.allclose(xyz[:3], XYZ(0.95047, 1.0, 1.08883).channels, atol=1e-6)


def test_convert_components_same_model_is_untouched():
    values = (370.0, 0.5, 0.5)
    assert convert_components(values, "hsl", "hsl") == values
    assert convert_components([0.2, 0.4, 0.6, 0.5], ColorSpace.SRGB, "srgb") == (0.2, 0.4, 0.6, 0.5)
    with pytest.raises(ValueError):
        convert_components((0.1, 0.2), "hsl", "hsl")
