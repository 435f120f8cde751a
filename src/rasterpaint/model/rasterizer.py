"""
Rasterizer
==========
Pure scan-conversion routines turning geometric primitives into integer
pixel coordinates. No buffer access, no I/O.

All routines are generators: the renderer consumes the points one by one and
an undo replays exactly the same sequence.
"""
from __future__ import annotations

import math
from typing import Iterator

from rasterpaint.model.errors import DegenerateGeometry
from rasterpaint.model.geometry import Point

# Residue tolerated around integers before flooring rotated coordinates
_SNAP_DIGITS = 9


def rasterize_line(x0: int, y0: int, x1: int, y1: int, *, strict: bool = False) -> Iterator[Point]:
    """
    Bresenham line from (x0, y0) towards (x1, y1).

    The axis with the larger absolute delta drives the loop, so any slope is
    gap-free. Exactly max(|dx|, |dy|) points are produced: the start point is
    included, the end point is not.

    Args:
        x0, y0: Start point.
        x1, y1: End point (excluded).
        strict: Raise DegenerateGeometry for a zero-length line instead of
            producing nothing.

    Yields:
        Pixel coordinates in drawing order.
    """
    dx = abs(x1 - x0)
    dy = abs(y1 - y0)
    if strict and dx == 0 and dy == 0:
        raise DegenerateGeometry(f"Zero-length line at ({x0}, {y0}).")

    inc_x = 1 if x1 > x0 else -1
    inc_y = 1 if y1 > y0 else -1
    x, y = x0, y0

    if dx > dy:
        decision = 2 * dy - dx
        for _ in range(dx):
            yield Point(x, y)
            x += inc_x
            if decision < 0:
                decision += 2 * dy
            else:
                y += inc_y
                decision += 2 * dy - 2 * dx
    else:
        decision = 2 * dx - dy
        for _ in range(dy):
            yield Point(x, y)
            y += inc_y
            if decision < 0:
                decision += 2 * dx
            else:
                x += inc_x
                decision += 2 * dx - 2 * dy


def rasterize_circle(cx: int, cy: int, radius: int, *, strict: bool = False) -> Iterator[Point]:
    """
    Midpoint (Bresenham) circle.

    Only one octant is computed; every step yields its eight reflections, so
    each octant receives the same number of points. Reflections on the axes
    coincide and are yielded twice.

    Args:
        cx, cy: Center.
        radius: Integer radius. Zero or negative produces nothing.
        strict: Raise DegenerateGeometry for a non-positive radius.
    """
    if radius <= 0:
        if strict:
            raise DegenerateGeometry(f"Circle at ({cx}, {cy}) has radius {radius}.")
        return

    x = 0
    y = radius
    decision = 3 - 2 * radius
    while y > x:
        yield Point(cx + x, cy + y)
        yield Point(cx + x, cy - y)
        yield Point(cx - x, cy + y)
        yield Point(cx - x, cy - y)
        yield Point(cx + y, cy + x)
        yield Point(cx + y, cy - x)
        yield Point(cx - y, cy + x)
        yield Point(cx - y, cy - x)
        if decision < 0:
            decision += 4 * x + 6
        else:
            decision += 4 * (x - y) + 10
            y -= 1
        x += 1


def distance(a: Point, b: Point) -> float:
    return math.hypot(b[0] - a[0], b[1] - a[1])


def radius_between(center: Point, edge: Point) -> int:
    """Euclidean distance between two points, floored to whole pixels."""
    return math.floor(distance(center, edge))


def _floor(value: float) -> int:
    # cos(pi/2) is 6e-17, not 0; snap such residue before truncating
    return math.floor(round(value, _SNAP_DIGITS))


def rotate_point(pivot: Point, point: Point, angle: float) -> Point:
    """
    Rotate `point` around `pivot` by `angle` radians.

    Screen coordinates have y pointing down, so a positive angle turns
    clockwise on screen. Each coordinate of the result is floored on its own,
    the result is never rounded to the nearest pixel.
    """
    px, py = pivot
    qx, qy = point
    dx = qx - px
    dy = qy - py
    cos_a = math.cos(angle)
    sin_a = math.sin(angle)
    return Point(
        _floor(px + dx * cos_a - dy * sin_a),
        _floor(py + dx * sin_a + dy * cos_a),
    )
