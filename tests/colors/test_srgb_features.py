import pytest

from chromaspace.colors import Gray, GrayscalingMode, SRGB


def test_from_hex_formats():
    assert SRGB.from_hex("#ff8000").is_approximately_equal(SRGB(1.0, 128 / 255, 0.0))
    assert SRGB.from_hex("FF8000") == SRGB.from_hex("#ff8000")
    assert SRGB.from_hex("0xff8000") == SRGB.from_hex("#ff8000")
    assert SRGB.from_hex("#f80") == SRGB.from_hex("#ff8800")
    assert SRGB.from_hex("#ff800080").alpha == pytest.approx(128 / 255)
    assert SRGB.from_hex("#f808").alpha == pytest.approx(136 / 255)


@pytest.mark.parametrize("text", ["", "#", "#12", "#12345", "#gggggg", "#1234567", "rgb(1,2,3)"])
def test_from_hex_rejects_bad_input(text):
    with pytest.raises(ValueError):
        SRGB.from_hex(text)


def test_from_hex_int():
    color = SRGB.from_hex_int(0x336699, alpha=0.5)
    assert color.is_approximately_equal(SRGB(0.2, 0.4, 0.6, alpha=0.5))


def test_hex_output():
    assert SRGB(1.0, 0.5, 0.0).hex == 0xFF8000
    assert SRGB(1.0, 0.5, 0.0).hex_string == "#FF8000"
    assert SRGB(1.0, 0.0, 0.0, alpha=0.0).hex_string == "#FF000000"
    assert SRGB.from_hex("#12345678").hex_string == "#12345678"


def test_hex_clamps_extended_values():
    assert SRGB(1.2, -0.1, 0.0).hex_string == "#FF0000"


def test_relative_luminance_and_contrast():
    white = SRGB(1.0, 1.0, 1.0)
    black = SRGB(0.0, 0.0, 0.0)
    assert white.relative_luminance == pytest.approx(1.0, abs=1e-6)
    assert black.relative_luminance == 0.0
    assert white.contrast_ratio(black) == pytest.approx(21.0, abs=1e-4)
    assert black.contrast_ratio(white) == white.contrast_ratio(black)
    assert white.contrast_ratio(white) == pytest.approx(1.0)


def test_is_light():
    assert SRGB(1.0, 1.0, 1.0).is_light
    assert SRGB(1.0, 1.0, 0.0).is_light
    assert not SRGB(0.0, 0.0, 1.0).is_light
    assert not SRGB(0.2, 0.2, 0.2).is_light


def test_inverted_and_clamped():
    assert SRGB(0.25, 0.5, 1.0, alpha=0.3).inverted == SRGB(0.75, 0.5, 0.0, alpha=0.3)
    assert SRGB(1.5, -0.5, 0.5, alpha=2.0).clamped() == SRGB(1.0, 0.0, 0.5, alpha=1.0)


def test_linear():
    r, g, b = SRGB(1.0, 0.5, 0.0).linear
    assert r == pytest.approx(1.0)
    assert g == pytest.approx(0.214041, abs=1e-6)
    assert b == 0.0


def test_extended_range_transfer_is_mirrored():
    r, g, b = SRGB(-0.5, 0.5, 0.0).linear
    assert r == pytest.approx(-g)


def test_gray_modes():
    color = SRGB(0.8, 0.4, 0.2, alpha=0.6)
    assert color.gray(GrayscalingMode.AVERAGE).white == pytest.approx(1.4 / 3)
    assert color.gray(GrayscalingMode.VALUE).white == pytest.approx(0.8)
    assert color.gray(GrayscalingMode.LIGHTNESS).white == pytest.approx(0.5)
    assert color.gray(GrayscalingMode.LUMINANCE).white == pytest.approx(color.relative_luminance)
    perceptual = color.gray()
    assert isinstance(perceptual, Gray)
    assert perceptual.alpha == 0.6
    assert perceptual.is_approximately_equal(color.convert("gray"))
    assert color.gray("average") == color.gray(GrayscalingMode.AVERAGE)


def test_gray_of_white_and_black():
    assert SRGB(1.0, 1.0, 1.0).gray().white == pytest.approx(1.0, abs=1e-6)
    assert SRGB(0.0, 0.0, 0.0).gray().white == 0.0
    assert Gray(0.5).convert("srgb") == SRGB(0.5, 0.5, 0.5)
