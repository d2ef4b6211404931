import numpy as np
import pytest

from chromaspace.colors import HSB, HSL, LCH, OKLAB, OKLCH, SRGB

tolerance = 1e-12


def test_mixed_interpolates_every_channel_including_alpha():
    a = SRGB(0.0, 0.2, 1.0, alpha=0.5)
    b = SRGB(1.0, 0.4, 0.0, alpha=1.0)
    mid = a.mixed(b, 0.5)
    assert np.allclose(mid.components, (0.5, 0.3, 0.5, 0.75), atol=tolerance)


def test_mixed_endpoints():
    a = OKLAB(0.3, 0.1, -0.1)
    b = OKLAB(0.9, -0.2, 0.05, alpha=0.2)
    assert a.mixed(b, 0.0) == a
    assert np.allclose(a.mixed(b, 1.0).components, b.components, atol=tolerance)


def test_fraction_is_not_clamped():
    a = SRGB(0.0, 0.0, 0.0)
    b = SRGB(1.0, 1.0, 1.0)
    assert np.allclose(a.mixed(b, 1.5).channels, (1.5, 1.5, 1.5), atol=tolerance)
    assert np.allclose(a.mixed(b, -0.5).channels, (-0.5, -0.5, -0.5), atol=tolerance)


def test_mixing_different_models_raises():
    with pytest.raises(TypeError):
        SRGB(1.0, 0.0, 0.0).mixed(HSB(0.0, 1.0, 1.0), 0.5)
    with pytest.raises(TypeError):
        SRGB(1.0, 0.0, 0.0).mixed_many(HSB(0.0, 1.0, 1.0), [0.5])


def test_hue_takes_shortest_arc():
    a = HSB(350.0, 1.0, 1.0)
    b = HSB(10.0, 1.0, 1.0)
    assert a.mixed(b, 0.5).hue == 0.0
    assert b.mixed(a, 0.5).hue == 0.0


def test_hue_shortest_arc_in_polar_models():
    a = LCH(50.0, 40.0, 350.0)
    b = LCH(50.0, 40.0, 10.0)
    assert a.mixed(b, 0.25).hue == pytest.approx(355.0)
    assert a.mixed(b, 0.75).hue == pytest.approx(5.0)

    c = OKLCH(0.5, 0.1, 90.0)
    d = OKLCH(0.5, 0.1, 180.0)
    assert c.mixed(d, 0.5).hue == pytest.approx(135.0)


def test_hue_half_turn_goes_forward():
    # exactly 180 degrees apart is not wrapped
    a = HSL(0.0, 1.0, 0.5)
    b = HSL(180.0, 1.0, 0.5)
    assert a.mixed(b, 0.5).hue == pytest.approx(90.0)


def test_mixed_many_matches_mixed():
    a = OKLCH(0.4, 0.15, 340.0, alpha=0.3)
    b = OKLCH(0.8, 0.05, 40.0)
    fractions = [0.0, 0.1, 0.5, 0.9, 1.0]
    many = a.mixed_many(b, fractions)
    assert len(many) == len(fractions)
    for fraction, color in zip(fractions, many):
        assert color.is_approximately_equal(a.mixed(b, fraction), 1e-9)
