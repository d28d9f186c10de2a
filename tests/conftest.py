import itertools

import numpy as np
import pytest

from geometry import Point


class CycleRng:
    """Stand-in for numpy's Generator that replays a fixed cycle of draws."""

    def __init__(self, values):
        self._values = itertools.cycle(values)

    def integers(self, low, high):
        value = next(self._values)
        assert low <= value < high
        return value


@pytest.fixture()
def rng():
    return np.random.default_rng(12345)


@pytest.fixture()
def small_settings():
    # 120x120 grid, no jitter, no cleanup below d=80
    return {
        "variant": "ellipse",
        "width": 120,
        "height": 120,
        "center": Point(60, 60),
        "sweep": (20, 40),
        "stroke": "#FFFFFF",
        "stroke_width": 1,
        "ellipse_tolerance": 0.1,
        "ellipse_density_divisor": 10,
        "cleanup_after": 80,
        "cleanup_y": 60,
        "circle_tolerance": 40,
        "circle_density_divisor": 10,
        "triangle_side": 5,
        "jitter_divisor": 80,
    }
