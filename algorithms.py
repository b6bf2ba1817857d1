# algorithms.py
import math
from collections import namedtuple

PixelPoint = namedtuple("PixelPoint", ["x", "y"])


def round_half_away(v):
    """Round to nearest integer, ties away from zero (2.5 -> 3, -2.5 -> -3)."""
    return int(math.copysign(math.floor(abs(v) + 0.5), v))


def dda_line(x1, y1, x2, y2):
    """Digital Differential Analyzer line algorithm.
    Returns tuple of PixelPoint from (x1,y1) to (x2,y2), max(|dx|,|dy|)+1 long."""
    dx = x2 - x1
    dy = y2 - y1
    steps = max(abs(dx), abs(dy))
    if steps == 0:
        return (PixelPoint(x1, y1),)
    x_inc = dx / steps
    y_inc = dy / steps
    pts = []
    for i in range(steps + 1):
        # from i*inc, not a running sum: i == steps is exactly (x2, y2)
        x = x1 + i * x_inc
        y = y1 + i * y_inc
        pts.append(PixelPoint(round_half_away(x), round_half_away(y)))
    return tuple(pts)


def bresenham_line(x1, y1, x2, y2):
    """Integer Bresenham line algorithm. Returns tuple of PixelPoint."""
    x1, y1, x2, y2 = int(x1), int(y1), int(x2), int(y2)
    pts = []
    dx = abs(x2 - x1)
    dy = abs(y2 - y1)
    sx = 1 if x1 < x2 else -1
    sy = 1 if y1 < y2 else -1
    err = dx - dy
    x, y = x1, y1
    while True:
        pts.append(PixelPoint(x, y))
        if x == x2 and y == y2:
            break
        e2 = 2 * err
        if e2 > -dy:
            err -= dy
            x += sx
        if e2 < dx:
            err += dx
            y += sy
    return tuple(pts)


def symmetric_octant_points(center, x, y):
    """The 8 reflections of octant offset (x, y) around center.
    Duplicates are kept (x == y, or x == y == 0)."""
    xc, yc = center
    return (
        PixelPoint(xc + x, yc + y), PixelPoint(xc - x, yc + y),
        PixelPoint(xc + x, yc - y), PixelPoint(xc - x, yc - y),
        PixelPoint(xc + y, yc + x), PixelPoint(xc - y, yc + x),
        PixelPoint(xc + y, yc - x), PixelPoint(xc - y, yc - x),
    )


def _check_radius(r):
    if r < 0:
        raise ValueError(f"circle radius must be >= 0, got {r}")


def bresenham_circle(xc, yc, r):
    """Bresenham circle with decision variable d = 3 - 2r.

    Walks the octant from (0, r) towards the diagonal, emitting the 8-way
    symmetric set at every step, so len(result) is a multiple of 8.
    Raises ValueError for a negative radius.
    """
    _check_radius(r)
    center = (xc, yc)
    x, y = 0, r
    d = 3 - 2 * r
    pts = list(symmetric_octant_points(center, x, y))
    if r == 0:
        return tuple(pts)
    while y >= x:
        # d is updated from the position before the step
        if d > 0:
            d = d + 4 * (x - y) + 10
            y -= 1
        else:
            d = d + 4 * x + 6
        x += 1
        pts.extend(symmetric_octant_points(center, x, y))
    return tuple(pts)


def midpoint_circle(xc, yc, r):
    """Midpoint circle algorithm (p = 1 - r), same 8-way output shape as
    bresenham_circle. Raises ValueError for a negative radius."""
    _check_radius(r)
    center = (xc, yc)
    x, y = 0, r
    p = 1 - r
    pts = list(symmetric_octant_points(center, x, y))
    while x < y:
        x += 1
        if p < 0:
            p = p + 2 * x + 1
        else:
            y -= 1
            p = p + 2 * (x - y) + 1
        pts.extend(symmetric_octant_points(center, x, y))
    return tuple(pts)
