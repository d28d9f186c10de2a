from geometry import Point
from utils import Color

WIDTH = 900
HEIGHT = 900

OUTPUT_PATH = "art.svg"
# Optional raster preview next to the svg, e.g. "art.png".
PREVIEW_PATH = None

# None draws a fresh seed from the OS on every run.
SEED = None

LOG_LEVEL = "INFO"

DEFAULT_SETTINGS = {
    "variant": "ellipse",
    "width": WIDTH,
    "height": HEIGHT,
    "center": Point(450, 450),
    "sweep": (80, 300),
    "stroke": Color.WHITE().format_hex(),
    "stroke_width": 1,
    # ellipse variant
    "ellipse_tolerance": 0.01,
    "ellipse_density_divisor": 30,
    "cleanup_after": 80,
    "cleanup_y": 405,
    # circle variant
    "circle_tolerance": 90,
    "circle_density_divisor": 40,
    "triangle_side": 5,
    # jitter bound is int((d / jitter_divisor) ** 3)
    "jitter_divisor": 80,
}
