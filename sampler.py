import logging

import numpy as np

from curves import is_circumference, is_ellipse
from geometry import Point
from settings import DEFAULT_SETTINGS
from shapes import Rectangle, Style, triangle_from
from utils import Color

logger = logging.getLogger(__name__)


def grid(width: int, height: int):
    """Every pixel of the canvas as one Point of coordinate arrays, indexed [x, y]."""
    xs, ys = np.meshgrid(np.arange(width), np.arange(height), indexing="ij")
    return Point(xs, ys)


def gate(rng, d: float, divisor: float, power: int = 2):
    # Selectivity falls as d grows: one hit out of int((d/divisor)^power) draws.
    n = int((d / divisor) ** power)
    return rng.integers(0, n) == 1


def jitter(rng, d: float, divisor: float):
    k = int((d / divisor) ** 3)
    return int(rng.integers(0, 2 * k + 1)) - k


def fill_for(y: int, d: int):
    return str(Color(y % 200, d % 200, d % 200))


class Variant:
    def __init__(self, mask, make_shape, density_key, cleanup=False):
        self.mask = mask
        self.make_shape = make_shape
        self.density_key = density_key
        self.cleanup = cleanup


def ellipse_mask(points: Point, d, settings):
    return is_ellipse(
        points, settings["center"], 1.0 + d / 2, 90.0 + d, settings["ellipse_tolerance"]
    )


def bar_shape(x, y, d, dx, dy, settings):
    a = Point(x + dx, y + dy)
    return Rectangle(
        a=a,
        b=Point(a.x + 2, a.y),
        c=Point(a.x + 2, a.y + 5 + dy),
        d=Point(a.x, a.y + 5 + dy),
        style=Style(fill_for(y, d), settings["stroke"], settings["stroke_width"]),
    )


def circle_mask(points: Point, d, settings):
    return is_circumference(points, settings["center"], d, settings["circle_tolerance"])


def triangle_shape(x, y, d, dx, dy, settings):
    style = Style(fill_for(y, d), settings["stroke"], settings["stroke_width"])
    # triangles sit on the unjittered point; the jitter draws still happen
    return triangle_from(Point(x, y), settings["triangle_side"], style)


VARIANTS = {
    "ellipse": Variant(ellipse_mask, bar_shape, "ellipse_density_divisor", cleanup=True),
    "circle": Variant(circle_mask, triangle_shape, "circle_density_divisor"),
}


def sample(rng, settings=DEFAULT_SETTINGS):
    """Brute-force the grid for every sweep value and return the kept shapes.

    `rng` is a numpy Generator; the same seed and settings always produce the
    same shapes in the same order.
    """
    variant = VARIANTS.get(settings["variant"])
    if variant is None:
        raise ValueError(f"Unknown variant: {settings['variant']}")

    points = grid(settings["width"], settings["height"])
    divisor = settings[variant.density_key]
    start, end = settings["sweep"]

    shapes = []
    for d in range(start, end):
        mask = variant.mask(points, d, settings)
        before = len(shapes)

        # nonzero walks x-major, then y
        for x, y in zip(*np.nonzero(mask)):
            x, y = int(x), int(y)
            if not gate(rng, d, divisor):
                continue

            dx = jitter(rng, d, settings["jitter_divisor"])
            dy = jitter(rng, d, settings["jitter_divisor"])

            # thin out the upper half near the outer rings
            if (
                variant.cleanup
                and d > settings["cleanup_after"]
                and y < settings["cleanup_y"]
                and not gate(rng, d, divisor)
            ):
                continue

            shapes.append(variant.make_shape(x, y, d, dx, dy, settings))

        logger.debug("d=%d: %d on curve, %d kept", d, np.count_nonzero(mask), len(shapes) - before)

    logger.info("%s variant kept %d shapes", settings["variant"], len(shapes))
    return shapes
