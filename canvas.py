import logging

from PIL import Image, ImageDraw

from shapes import Ellipse, IsometricCube, Rectangle, Triangle, to_svg
from utils import Color

logger = logging.getLogger(__name__)

TEMPLATE = """<?xml version="1.0" encoding="UTF-8" ?>
<svg version="1.1" width="900" height="900" xmlns="http://www.w3.org/2000/svg">
<rect width="900" height="900" x="0" y="0" fill="#ffffff" />
SHAPES
</svg>"""

# Crops to the central 600x600 window.
CROPPED_TEMPLATE = """<?xml version="1.0" encoding="UTF-8" ?>
<svg version="1.1" viewBox="150 150 600 600" xmlns="http://www.w3.org/2000/svg">
SHAPES
</svg>"""


class Canvas:
    def __init__(self, shapes=None, template=TEMPLATE):
        if "SHAPES" not in template:
            raise ValueError("Template has no SHAPES slot")

        self.shapes = list(shapes) if shapes is not None else []
        self.template = template

    def add(self, shape):
        self.shapes.append(shape)

    def to_svg(self):
        content = "".join(to_svg(shape) + "\n" for shape in self.shapes)
        return self.template.replace("SHAPES", content)

    def write(self, path):
        with open(path, "w") as f:
            f.write(self.to_svg())
        logger.info("wrote %d shapes to %s", len(self.shapes), path)

    def render_image(self, size=(900, 900), background: Color = Color.WHITE()):
        img = Image.new("RGB", size, background.format_PIL())
        draw = ImageDraw.Draw(img)
        for shape in self.shapes:
            self.draw_shape(draw, shape)
        return img

    def draw_shape(self, draw, shape):
        if isinstance(shape, (Triangle, Rectangle)):
            s = shape.style
            draw.polygon(
                [tuple(v) for v in shape.vertices()],
                fill=_pil_color(s.fill),
                outline=_pil_color(s.stroke),
                width=s.stroke_width,
            )

        elif isinstance(shape, Ellipse):
            s = shape.style
            c, r = shape.center, shape.radius
            draw.ellipse(
                [c.x - r.x, c.y - r.y, c.x + r.x, c.y + r.y],
                fill=_pil_color(s.fill),
                outline=_pil_color(s.stroke),
                width=s.stroke_width,
            )

        elif isinstance(shape, IsometricCube):
            for face in shape.faces():
                self.draw_shape(draw, face)

        else:
            raise TypeError(f"Wrong shape type: {type(shape).__name__}")

    def save_preview(self, path, size=(900, 900)):
        self.render_image(size).save(path)
        logger.info("wrote preview to %s", path)


def _pil_color(value: str):
    # svg "none" means transparent; PIL wants None
    return None if value == "none" else value
