from .default import (
    DEFAULT_EPSILON,
    DEFAULT_SAMPLES_PER_UNIT,
    NATIVE_SPACE,
    value_or_default,
)
from .num_utils import HUE_360, clamp01, wrap_hue

__all__ = [
    "DEFAULT_EPSILON",
    "DEFAULT_SAMPLES_PER_UNIT",
    "NATIVE_SPACE",
    "value_or_default",
    "HUE_360",
    "clamp01",
    "wrap_hue",
]
