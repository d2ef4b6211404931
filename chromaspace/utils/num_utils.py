import math

HUE_360 = 360.0


def wrap_hue(hue: float) -> float:
    """Wrap a hue angle into [0, 360)."""
    h = math.fmod(hue, HUE_360)
    if h < 0:
        h += HUE_360
    # fmod of a tiny negative value can round up to exactly 360
    return 0.0 if h >= HUE_360 else h


def clamp01(value: float) -> float:
    return max(0.0, min(1.0, value))

