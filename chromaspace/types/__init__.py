from .color_types import (
    ColorSpace,
    ColorSpaceLike,
    HUE_SPACES,
    ScalarVector,
    as_color_space,
    is_hue_space,
)

__all__ = [
    "ColorSpace",
    "ColorSpaceLike",
    "HUE_SPACES",
    "ScalarVector",
    "as_color_space",
    "is_hue_space",
]
