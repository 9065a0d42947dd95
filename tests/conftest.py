"""Shared test fixtures for rgb-scale."""

import pytest

from rgb_scale.core.color_scale import ColorScale


@pytest.fixture
def gray_colors():
    """Black → white, RGB only."""
    return [[0, 0, 0], [255, 255, 255]]


@pytest.fixture
def gray_scale(gray_colors):
    return ColorScale(gray_colors)


@pytest.fixture
def four_stop_colors():
    """Black → red → transparent yellow → white."""
    return [[0, 0, 0, 1], [255, 0, 0, 1], [255, 255, 0, 0], [255, 255, 255, 1]]


@pytest.fixture
def four_stop_scale(four_stop_colors):
    return ColorScale(four_stop_colors, [0, 0.25, 0.75, 1], [0, 100])


@pytest.fixture
def classed_scale(gray_colors):
    """Three bins: [0, 10), [10, 20), [20, 30)."""
    return ColorScale(gray_colors, None, [0, 10, 20, 30])
