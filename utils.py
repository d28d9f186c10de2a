import logging


def setup_default_logging(level="INFO"):
    """Configure the root logger once. No-op if handlers already exist."""
    if isinstance(level, str):
        lvl = getattr(logging, level.upper(), logging.INFO)
    else:
        lvl = int(level)

    root = logging.getLogger()
    if root.handlers:
        return
    logging.basicConfig(
        level=lvl,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


class Color:
    def __init__(self, r, g, b):
        self.r = int(r)
        self.g = int(g)
        self.b = int(b)

    def __str__(self):
        return f"rgb({self.r},{self.g},{self.b})"

    def format_hex(self):
        return f"#{self.r:02X}{self.g:02X}{self.b:02X}"

    def format_PIL(self):
        return (self.r, self.g, self.b)

    def WHITE():
        return Color(255, 255, 255)
