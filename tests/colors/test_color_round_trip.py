import numpy as np
import pytest

from chromaspace.colors import color_classes, convert, SRGB, CMYK, Gray, HSLuv, HPLuv
from chromaspace.types import ColorSpace

xyz_tolerance = 1e-6

# Chromatic in-gamut sources so every model carries a defined hue
sources = [
    SRGB(0.8, 0.4, 0.2, alpha=0.7),
    SRGB(0.25, 0.6, 0.9),
    SRGB(0.3, 0.7, 0.45, alpha=0.0),
]


@pytest.mark.parametrize("space", list(ColorSpace))
def test_round_trip_through_xyz(space):
    cls = color_classes[space]
    for source in sources:
        color = convert(source, space)
        back = cls.from_xyz(color.to_xyz())

        assert type(back) is cls
        assert np.allclose(back.components, color.components, atol=xyz_tolerance)


@pytest.mark.parametrize("space", list(ColorSpace))
def test_round_trip_back_to_srgb(space):
    for source in sources:
        rgb = convert(convert(source, space), ColorSpace.SRGB)
        if space is ColorSpace.GRAY:
            continue  # gray keeps luminance only
        assert np.allclose(rgb.components, source.components, atol=xyz_tolerance)


def test_cmyk_canonical_round_trip():
    cmyk = CMYK(1 / 3, 2 / 3, 0.0, 0.25)
    back = CMYK.from_xyz(cmyk.to_xyz())
    assert np.allclose(back.components, cmyk.components, atol=xyz_tolerance)


def test_cmyk_non_canonical_is_normalised():
    # equal amounts of c, m, y move into black
    cmyk = CMYK(0.2, 0.2, 0.2, 0.0)
    back = convert(convert(cmyk, "srgb"), "cmyk")
    assert back.cyan == 0.0 and back.magenta == 0.0 and back.yellow == 0.0
    assert abs(back.black - 0.2) < 1e-12


def test_gray_round_trip():
    for white in (0.0, 0.1, 0.5, 0.9, 1.0):
        gray = Gray(white)
        back = Gray.from_xyz(gray.to_xyz())
        assert abs(back.white - white) < xyz_tolerance


def test_hsluv_lightness_extremes():
    assert HSLuv(120.0, 50.0, 100.0).convert("lchuv").chroma == 0.0
    assert HPLuv(120.0, 50.0, 0.0).convert("lchuv").chroma == 0.0
