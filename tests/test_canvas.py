import pytest
from PIL import Image

from canvas import CROPPED_TEMPLATE, TEMPLATE, Canvas
from geometry import Point
from shapes import Ellipse, Rectangle, Style, to_svg, triangle_from


def test_empty_canvas_is_bare_template():
    svg = Canvas().to_svg()
    assert svg == TEMPLATE.replace("SHAPES", "")
    assert svg.endswith('fill="#ffffff" />\n\n</svg>')
    assert "<polygon" not in svg


def test_shapes_serialized_in_order():
    shapes = [triangle_from(Point(10 * i, 10 * i), 5) for i in range(1, 6)]
    svg = Canvas(shapes).to_svg()

    assert svg.count("<polygon") == 5
    positions = [svg.index(to_svg(s) + "\n") for s in shapes]
    assert positions == sorted(positions)


def test_single_triangle_document():
    c = Canvas()
    c.add(triangle_from(Point(100, 100), 10, Style("white", "black", 1)))
    svg = c.to_svg()

    assert svg.startswith('<?xml version="1.0" encoding="UTF-8" ?>')
    assert svg.count("<polygon") == 1
    assert '<polygon points="100,105 95,97 105,97" ' in svg


def test_to_svg_is_repeatable():
    c = Canvas([triangle_from(Point(50, 50), 8)])
    assert c.to_svg() == c.to_svg()


def test_cropped_template_uses_viewbox():
    svg = Canvas(template=CROPPED_TEMPLATE).to_svg()
    assert 'viewBox="150 150 600 600"' in svg
    assert "width=" not in svg


def test_template_needs_slot():
    with pytest.raises(ValueError):
        Canvas(template="<svg></svg>")


def test_write_overwrites(tmp_path):
    path = tmp_path / "art.svg"
    path.write_text("stale content " * 100)

    c = Canvas([triangle_from(Point(100, 100), 10)])
    c.write(path)
    assert path.read_text() == c.to_svg()


def test_write_failure_propagates(tmp_path):
    with pytest.raises(OSError):
        Canvas().write(tmp_path / "missing" / "art.svg")


def test_render_image_fills_shapes():
    c = Canvas(
        [
            triangle_from(Point(100, 100), 100, Style("red", "black", 1)),
            Ellipse(Point(300, 300), Point(40, 20), Style("blue", "blue", 1)),
            Rectangle(Point(0, 350), Point(50, 350), Point(50, 399), Point(0, 399), Style("none")),
        ]
    )
    img = c.render_image((400, 400))

    assert img.size == (400, 400)
    assert img.getpixel((100, 100)) == (255, 0, 0)
    assert img.getpixel((300, 300)) == (0, 0, 255)
    # unfilled rectangle leaves its inside blank
    assert img.getpixel((25, 375)) == (255, 255, 255)
    assert img.getpixel((5, 5)) == (255, 255, 255)


def test_save_preview(tmp_path):
    path = tmp_path / "art.png"
    Canvas([triangle_from(Point(10, 10), 6)]).save_preview(path, (50, 60))

    with Image.open(path) as img:
        assert img.size == (50, 60)
