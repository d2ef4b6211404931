import pytest

from chromaspace.colors import SRGB
from chromaspace.gradients import (
    BOTTOM,
    CENTER,
    LEFT,
    RIGHT,
    TOP,
    ColorStop,
    Gradient,
    GradientKind,
    Point,
)
from chromaspace.types import ColorSpace


def test_defaults():
    gradient = Gradient()
    assert gradient.stops == ()
    assert gradient.start_point == TOP
    assert gradient.end_point == BOTTOM
    assert gradient.kind is GradientKind.LINEAR
    assert gradient.color_space is None
    assert Gradient.none() == gradient


def test_from_colors_spreads_stops(red, blue):
    gradient = Gradient.from_colors([red, blue])
    assert gradient.stops == (ColorStop(red, 0.0), ColorStop(blue, 1.0))
    assert gradient.colors == (red, blue)
    assert gradient.locations == (0.0, 1.0)


def test_from_stops_keeps_locations(red, blue):
    stops = [ColorStop(red, 0.2), ColorStop(blue, 0.6)]
    gradient = Gradient.from_stops(stops, color_space="oklab")
    assert gradient.locations == (0.2, 0.6)
    assert gradient.color_space is ColorSpace.OKLAB


def test_stops_must_be_color_stops(red):
    with pytest.raises(TypeError):
        Gradient([red])


def test_unknown_color_space_raises(red, blue):
    with pytest.raises(ValueError):
        Gradient.from_colors([red, blue], color_space="rgb24")


def test_gradient_is_immutable(red, blue):
    gradient = Gradient.from_colors([red, blue])
    with pytest.raises(AttributeError):
        gradient.kind = GradientKind.RADIAL


def test_kind_constructors(red, blue):
    linear = Gradient.linear([red, blue], start_point=LEFT, end_point=RIGHT)
    assert linear.kind is GradientKind.LINEAR
    assert linear.start_point == Point(0.0, 0.5)

    conic = Gradient.conic([red, blue])
    assert conic.kind is GradientKind.CONIC
    assert (conic.start_point, conic.end_point) == (TOP, BOTTOM)
    centered = Gradient.conic([red, blue], start_point=CENTER, end_point=TOP)
    assert centered.start_point == Point(0.5, 0.5)

    radial = Gradient.radial([ColorStop(red, 0.1), ColorStop(blue, 0.9)], color_space=ColorSpace.LCH)
    assert radial.kind is GradientKind.RADIAL
    assert radial.locations == (0.1, 0.9)
    assert radial.color_space is ColorSpace.LCH
    assert (radial.start_point, radial.end_point) == (TOP, BOTTOM)


def test_mixed_items_raise(red, blue):
    with pytest.raises(TypeError):
        Gradient.linear([red, ColorStop(blue, 1.0)])


def test_kind_renderer_names():
    assert GradientKind.LINEAR.value == "axial"
    assert GradientKind.CONIC.value == "conic"
    assert GradientKind.RADIAL.value == "radial"


def test_modifiers_return_new_gradients(red, green, blue):
    gradient = Gradient.from_colors([red, blue])

    recolored = gradient.with_colors([red, green, blue])
    assert recolored.locations == (0.0, 0.5, 1.0)
    assert gradient.locations == (0.0, 1.0)

    assert gradient.with_stops([ColorStop(green, 0.3)]).colors == (green,)
    assert gradient.with_start_point((0.0, 0.0)).start_point == Point(0.0, 0.0)
    assert gradient.with_end_point(RIGHT).end_point == RIGHT
    assert gradient.with_kind(GradientKind.RADIAL).kind is GradientKind.RADIAL
    assert gradient.with_color_space("oklch").color_space is ColorSpace.OKLCH
    assert gradient.with_color_space("oklch").with_color_space(None).color_space is None

    faded = gradient.with_opacity(0.5)
    assert all(color.alpha == 0.5 for color in faded.colors)
    assert faded.locations == gradient.locations


def test_modifiers_keep_other_fields(red, blue):
    gradient = Gradient.radial([red, blue], color_space="lab")
    changed = gradient.with_colors([blue, red])
    assert changed.kind is GradientKind.RADIAL
    assert changed.color_space is ColorSpace.LAB
    assert changed.start_point == gradient.start_point
    assert changed.end_point == gradient.end_point


def test_equality_and_hash(red, blue):
    a = Gradient.from_colors([red, blue], color_space="oklab")
    b = Gradient.from_colors([SRGB(1.0, 0.0, 0.0), SRGB(0.0, 0.0, 1.0)], color_space=ColorSpace.OKLAB)
    assert a == b
    assert hash(a) == hash(b)
    assert a != a.with_kind(GradientKind.CONIC)
    assert len(a) == 2
