import pickle

import pytest

from chromaspace.colors import (
    HSB,
    HSL,
    LCH,
    OKLCH,
    SRGB,
    XYZ,
    available_color_spaces,
    color_classes,
    get_color_class,
)
from chromaspace.types import ColorSpace, HUE_SPACES


def test_every_tag_has_one_class():
    assert set(color_classes) == set(ColorSpace)
    assert len(set(color_classes.values())) == len(ColorSpace)
    for space, cls in color_classes.items():
        assert cls.space is space


def test_alpha_defaults_to_one():
    color = SRGB(0.1, 0.2, 0.3)
    assert color.alpha == 1.0
    assert color.components == (0.1, 0.2, 0.3, 1.0)
    assert color.channels == (0.1, 0.2, 0.3)


def test_named_channels():
    color = OKLCH(0.7, 0.1, 200.0, alpha=0.5)
    assert color.lightness == 0.7
    assert color.chroma == 0.1
    assert color.hue == 200.0
    assert color.alpha == 0.5
    assert color.space is ColorSpace.OKLCH
    assert color.has_hue
    assert not SRGB(0, 0, 0).has_hue


def test_hue_is_normalised_on_construction():
    assert HSB(370.0, 0.5, 0.5).hue == 10.0
    assert HSB(-30.0, 0.5, 0.5).hue == 330.0
    assert HSL(360.0, 0.5, 0.5).hue == 0.0
    assert LCH(50.0, 20.0, 720.5).hue == pytest.approx(0.5)


def test_values_are_not_clamped():
    color = SRGB(1.5, -0.25, 0.5, alpha=2.0)
    assert color.components == (1.5, -0.25, 0.5, 2.0)


def test_colors_are_immutable():
    color = SRGB(0.1, 0.2, 0.3)
    with pytest.raises(AttributeError):
        color.red = 0.5
    with pytest.raises(AttributeError):
        color.extra = 1


def test_from_components():
    assert SRGB.from_components([0.1, 0.2, 0.3]).alpha == 1.0
    assert SRGB.from_components((0.1, 0.2, 0.3, 0.4)).alpha == 0.4
    with pytest.raises(ValueError):
        SRGB.from_components([0.1, 0.2])
    with pytest.raises(ValueError):
        SRGB.from_components([0.1, 0.2, 0.3, 0.4, 0.5])


def test_wrong_channel_count():
    with pytest.raises(ValueError):
        XYZ(0.1, 0.2)


def test_replace_and_with_alpha():
    color = SRGB(0.1, 0.2, 0.3)
    assert color.replace(green=0.9) == SRGB(0.1, 0.9, 0.3)
    assert color.replace(alpha=0.5).alpha == 0.5
    assert color.with_alpha(0.25) == SRGB(0.1, 0.2, 0.3, alpha=0.25)
    with pytest.raises(ValueError):
        color.replace(hue=10.0)


def test_equality_and_hash():
    assert SRGB(0.1, 0.2, 0.3) == SRGB(0.1, 0.2, 0.3)
    assert SRGB(0.1, 0.2, 0.3) != SRGB(0.1, 0.2, 0.31)
    assert len({SRGB(0.1, 0.2, 0.3), SRGB(0.1, 0.2, 0.3)}) == 1
    # same numbers in another model are a different color
    assert SRGB(0.1, 0.2, 0.3) != color_classes[ColorSpace.DISPLAY_P3](0.1, 0.2, 0.3)


def test_is_approximately_equal():
    a = SRGB(0.1, 0.2, 0.3)
    assert a.is_approximately_equal(SRGB(0.1 + 1e-7, 0.2, 0.3))
    assert not a.is_approximately_equal(SRGB(0.1 + 1e-3, 0.2, 0.3))
    assert not a.is_approximately_equal(HSB(0.1, 0.2, 0.3))
    # hue distance wraps around
    assert HSB(359.999999, 0.5, 0.5).is_approximately_equal(HSB(0.0, 0.5, 0.5))


def test_is_visible():
    assert SRGB(0, 0, 0).is_visible
    assert not SRGB(0, 0, 0, alpha=0.0).is_visible


def test_sequence_protocol_and_repr():
    color = SRGB(0.1, 0.2, 0.3, alpha=0.4)
    assert list(color) == [0.1, 0.2, 0.3, 0.4]
    assert color[0] == 0.1
    assert len(color) == 4
    assert repr(color) == "SRGB(red=0.1, green=0.2, blue=0.3, alpha=0.4)"


def test_pickle():
    color = OKLCH(0.7, 0.1, 200.0, alpha=0.5)
    assert pickle.loads(pickle.dumps(color)) == color


def test_get_color_class():
    assert get_color_class("oklch") is OKLCH
    assert get_color_class("Display-P3") is color_classes[ColorSpace.DISPLAY_P3]
    with pytest.raises(ValueError):
        get_color_class("rgb24")


def test_available_color_spaces():
    table = available_color_spaces()
    assert len(table) == len(ColorSpace)
    by_space = {info.space: info for info in table}
    assert by_space[ColorSpace.SRGB].channel_names == ("red", "green", "blue")
    assert by_space[ColorSpace.CMYK].channel_names == ("cyan", "magenta", "yellow", "black")
    assert {info.space for info in table if info.has_hue} == HUE_SPACES
