from geometry import Point

# On a discrete grid almost no point lands exactly on a continuous curve, so
# both tests accept a band around it. The points may hold numpy arrays, in
# which case a boolean mask comes back.


def is_circumference(p: Point, center: Point, radius: float, tolerance: float):
    t = (p.x - center.x) ** 2 + (p.y - center.y) ** 2
    rr = radius**2
    return (t > rr - tolerance) & (t < rr + tolerance)


def is_ellipse(p: Point, center: Point, a: float, b: float, tolerance: float):
    # (x-h)^2 / b^2 + (y-k)^2 / a^2 = 1
    t = (p.x - center.x) ** 2 / b**2 + (p.y - center.y) ** 2 / a**2
    return (t > 1.0 - tolerance) & (t < 1.0 + tolerance)
