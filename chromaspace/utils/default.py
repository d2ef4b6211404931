from typing import Optional, TypeVar

from ..types.color_types import ColorSpace

T = TypeVar('T')

# Samples emitted per unit of gradient location when resampling.
DEFAULT_SAMPLES_PER_UNIT = 24.0
# Color model of device colors handed to and received from the renderer.
NATIVE_SPACE = ColorSpace.SRGB
# Per-channel tolerance for approximate color equality.
DEFAULT_EPSILON = 1e-5


def value_or_default(value: Optional[T], default: T) -> T:
    """Return the value if it is not None, otherwise return the default."""
    return value if value is not None else default
