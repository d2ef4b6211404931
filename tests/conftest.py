import pytest

from chromaspace.colors import SRGB


@pytest.fixture
def red():
    return SRGB(1.0, 0.0, 0.0)


@pytest.fixture
def green():
    return SRGB(0.0, 1.0, 0.0)


@pytest.fixture
def blue():
    return SRGB(0.0, 0.0, 1.0)


@pytest.fixture
def orange():
    """A chromatic, in-gamut color with a non-trivial hue and partial alpha."""
    return SRGB(0.8, 0.4, 0.2, alpha=0.7)
