from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class Point:
    x: int
    y: int

    def __str__(self):
        return f"{self.x},{self.y}"

    def __add__(self, other):
        if isinstance(other, Point):
            return Point(self.x + other.x, self.y + other.y)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Point):
            return Point(self.x - other.x, self.y - other.y)
        return NotImplemented

    def __iter__(self):
        yield self.x
        yield self.y

    @staticmethod
    def origin():
        return Point(0, 0)


def rotate(pivot: Point, point: Point, theta: float):
    """Rotate `point` about `pivot` by `theta` radians.

    Coordinates are truncated toward zero, not rounded. Returns the pivot
    unchanged alongside the rotated point.
    """
    cos_a = np.cos(theta)
    sin_a = np.sin(theta)

    # Translate to origin
    dx = point.x - pivot.x
    dy = point.y - pivot.y

    # Rotate and translate back
    x = cos_a * dx - sin_a * dy + pivot.x
    y = sin_a * dx + cos_a * dy + pivot.y

    return pivot, Point(int(x), int(y))
