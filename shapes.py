import logging
from dataclasses import dataclass, field, replace

import numpy as np

from geometry import Point, rotate

logger = logging.getLogger(__name__)

# Skew of the cube's right face. The value is applied as radians.
CUBE_SKEW = 30


@dataclass
class Style:
    fill: str = "none"
    stroke: str = "black"
    stroke_width: int = 1

    def __post_init__(self):
        if self.stroke_width < 0:
            raise ValueError(f"stroke width must be >= 0, got {self.stroke_width}")

    def to_svg(self):
        return f"fill:{self.fill};stroke:{self.stroke};stroke-width:{self.stroke_width}"


@dataclass
class Triangle:
    a: Point
    b: Point
    c: Point
    style: Style = field(default_factory=Style)

    def vertices(self):
        return [self.a, self.b, self.c]


@dataclass
class Rectangle:
    a: Point
    b: Point
    c: Point
    d: Point
    style: Style = field(default_factory=Style)

    def vertices(self):
        return [self.a, self.b, self.c, self.d]


# Rhombus faces are drawn with the same four-point polygon.
Quad = Rectangle


@dataclass
class Ellipse:
    center: Point
    radius: Point
    style: Style = field(default_factory=Style)


@dataclass
class IsometricCube:
    top: Quad
    left: Quad
    right: Quad

    def faces(self):
        return [self.top, self.left, self.right]


def polygon_svg(vertices, style: Style):
    points = " ".join(str(v) for v in vertices)
    return f'<polygon points="{points}" style="{style.to_svg()}" />'


def to_svg(shape):
    match shape:
        case Point():
            return str(shape)
        case Triangle() | Rectangle():
            return polygon_svg(shape.vertices(), shape.style)
        case Ellipse(center=c, radius=r, style=s):
            return f'<ellipse rx="{r.x}" ry="{r.y}" cx="{c.x}" cy="{c.y}" style="{s.to_svg()}" />'
        case IsometricCube():
            return "\n".join(to_svg(face) for face in shape.faces())
        case _:
            raise TypeError(f"Wrong shape type: {type(shape).__name__}")


def triangle_from(center: Point, side: int, style: Style | None = None):
    """Equilateral triangle whose centroid sits at `center`."""
    # https://math.stackexchange.com/a/1344707
    height = np.sqrt(3) / 3 * side
    base = np.sqrt(3) / 6 * side
    return Triangle(
        a=Point(center.x, int(center.y + height)),
        b=Point(int(center.x - side / 2), int(center.y - base)),
        c=Point(int(center.x + side / 2), int(center.y - base)),
        style=style or Style(),
    )


def isometric_cube_from(
    origin: Point,
    side: int,
    left_a: Point | None = None,
    left_b: Point | None = None,
    top_c: Point | None = None,
    style: Style | None = None,
):
    """Three faces of an isometric cube hanging from `origin`.

    Only the right face is derived here. The left and top faces reuse its
    vertices so that shared edges line up exactly. The far corners
    `left_a`, `left_b` and `top_c` have no derivation and must be supplied
    by the caller; missing ones fall back to the origin point (0, 0).
    """
    missing = [
        name
        for name, value in (("left_a", left_a), ("left_b", left_b), ("top_c", top_c))
        if value is None
    ]
    if missing:
        logger.warning("cube at %s missing vertices %s, using (0,0)", origin, missing)
    left_a = Point.origin() if left_a is None else left_a
    left_b = Point.origin() if left_b is None else left_b
    top_c = Point.origin() if top_c is None else top_c

    style = style or Style()
    down = origin + Point(0, side)
    _, far_top = rotate(origin, origin + Point(side, 0), CUBE_SKEW)
    _, far_bottom = rotate(down, down + Point(side, 0), CUBE_SKEW)

    right = Quad(origin, far_top, far_bottom, down, style=replace(style))
    left = Quad(left_a, left_b, right.d, right.a, style=replace(style))
    top = Quad(right.a, right.b, top_c, left_a, style=replace(style))
    return IsometricCube(top=top, left=left, right=right)
