"""
Shapes & Renderer
=================
Composes rasterizer output into the shapes offered by the toolbar and writes
them into a PixelBuffer.

Why is this file needed?
------------------------
1. Composition: A rectangle is four lines, a clock is a circle plus three
   rotated hands. Each shape is a single point sequence, so drawing and
   undoing walk exactly the same pixels.
2. Registry: Tools map to shape generators through `register_shape`, the
   controller never switches on the tool itself.

Classes:
    ShapeRenderer: draw/undo entry points for every shape.
"""
from __future__ import annotations

import itertools as it
import logging
import math
from typing import Callable, Iterable, Iterator

from rasterpaint.config import HOURS_HAND_RATIO, MINUTES_HAND_RATIO, SECONDS_HAND_RATIO
from rasterpaint.model.errors import InvalidTool, OutOfBounds
from rasterpaint.model.geometry import ClockFace, HourFormula, Point, Tool
from rasterpaint.model.pixel_buffer import PixelBuffer
from rasterpaint.model.rasterizer import (
    distance,
    radius_between,
    rasterize_circle,
    rasterize_line,
    rotate_point,
)

logger = logging.getLogger(__name__)

ShapeFn = Callable[[Point, Point], Iterator[Point]]

_REGISTRY: dict[Tool, ShapeFn] = {}

MS_PER_SECOND = 1000
MS_PER_MINUTE = 60 * MS_PER_SECOND
MS_PER_HOUR = 60 * MS_PER_MINUTE


def register_shape(tool: Tool) -> Callable[[ShapeFn], ShapeFn]:
    """Decorator registering a point generator for a two-point tool."""
    def decorator(fn: ShapeFn) -> ShapeFn:
        _REGISTRY[tool] = fn
        return fn
    return decorator


def shape_points(tool: Tool, start: Point, end: Point) -> Iterator[Point]:
    fn = _REGISTRY.get(tool)
    if fn is None:
        raise InvalidTool(tool)
    return fn(start, end)


def registered_tools() -> list[Tool]:
    return list(_REGISTRY.keys())


# -------------------------------------------------------------------------------
# Two-point shapes
# -------------------------------------------------------------------------------

@register_shape(Tool.LINE)
def line_points(start: Point, end: Point) -> Iterator[Point]:
    return rasterize_line(start.x, start.y, end.x, end.y)


@register_shape(Tool.RECT)
def rect_points(start: Point, end: Point) -> Iterator[Point]:
    """Bounding box of the drag as four lines. Corners are not deduplicated."""
    x0, y0 = start
    x1, y1 = end
    return it.chain(
        rasterize_line(x0, y0, x1, y0),
        rasterize_line(x0, y0, x0, y1),
        rasterize_line(x1, y1, x0, y1),
        rasterize_line(x1, y1, x1, y0),
    )


@register_shape(Tool.CIRCLE)
def circle_points(start: Point, end: Point) -> Iterator[Point]:
    """Circle centered on the drag start, passing through the drag end."""
    return rasterize_circle(start.x, start.y, radius_between(start, end))


# -------------------------------------------------------------------------------
# Clock
# -------------------------------------------------------------------------------

def hand_angles(timestamp: int, formula: HourFormula = HourFormula.LEGACY) -> tuple[float, float, float]:
    """
    Angles (radians, clockwise from 12 o'clock) of the seconds, minutes and
    hours hands for a timestamp in milliseconds.

    The legacy hour formula floors the angle itself, not the hour, and is
    shifted by eleven hours. STANDARD gives the usual 12-hour dial.
    """
    seconds = math.floor((timestamp / MS_PER_SECOND) % 60) * (math.pi / 30)
    minutes = math.floor((timestamp / MS_PER_MINUTE) % 60) * (math.pi / 30)
    if formula is HourFormula.STANDARD:
        hours = math.floor((timestamp / MS_PER_HOUR) % 12) * (math.pi / 6)
    else:
        hours = math.floor((((timestamp / MS_PER_HOUR) % 12) + 1 - 12) * (math.pi / 6))
    return seconds, minutes, hours


def clock_hands(face: ClockFace, formula: HourFormula = HourFormula.LEGACY) -> tuple[Point, Point, Point]:
    """Tips of the seconds, minutes and hours hands."""
    cx, cy = face.center
    r = distance(face.center, face.edge)
    angles = hand_angles(face.timestamp, formula)
    ratios = (SECONDS_HAND_RATIO, MINUTES_HAND_RATIO, HOURS_HAND_RATIO)
    tips = []
    for ratio, angle in zip(ratios, angles):
        length = math.floor(r * ratio)
        tips.append(rotate_point(face.center, Point(cx, cy - length), angle))
    return tips[0], tips[1], tips[2]


def clock_points(face: ClockFace, formula: HourFormula = HourFormula.LEGACY) -> Iterator[Point]:
    """Dial first, then seconds, minutes and hours hands."""
    cx, cy = face.center
    dial = rasterize_circle(cx, cy, radius_between(face.center, face.edge))
    hands = (rasterize_line(cx, cy, tip.x, tip.y) for tip in clock_hands(face, formula))
    return it.chain(dial, it.chain.from_iterable(hands))


# -------------------------------------------------------------------------------
# Renderer
# -------------------------------------------------------------------------------

class ShapeRenderer:
    """
    Writes shapes into a PixelBuffer.

    Every shape has a `draw_*` entry point with an `erase` flag and an
    `undo_*` alias that replays the same pixels in erase mode. Erasing keeps
    committed (baseline) ink. Pixels outside the buffer are dropped.
    All entry points return the number of in-bounds pixels visited.
    """

    def __init__(self, buffer: PixelBuffer, hour_formula: HourFormula = HourFormula.LEGACY) -> None:
        self.buffer = buffer
        self.hour_formula = hour_formula

    # ---- generic ----

    def draw(self, tool: Tool, start: Point, end: Point, erase: bool = False) -> int:
        """
        Draw a two-point shape (line, rect, circle).

        Raises:
            InvalidTool: If the tool has no two-point shape.
        """
        points = shape_points(tool, start, end)
        return self._plot(points, erase, label=f"{tool} {start}->{end}")

    def undo(self, tool: Tool, start: Point, end: Point) -> int:
        return self.draw(tool, start, end, erase=True)

    # ---- line ----

    def draw_line(self, start: Point, end: Point, erase: bool = False) -> int:
        return self.draw(Tool.LINE, start, end, erase)

    def undo_line(self, start: Point, end: Point) -> int:
        return self.draw_line(start, end, erase=True)

    # ---- rect ----

    def draw_rect(self, start: Point, end: Point, erase: bool = False) -> int:
        return self.draw(Tool.RECT, start, end, erase)

    def undo_rect(self, start: Point, end: Point) -> int:
        return self.draw_rect(start, end, erase=True)

    # ---- circle ----

    def draw_circle(self, start: Point, end: Point, erase: bool = False) -> int:
        return self.draw(Tool.CIRCLE, start, end, erase)

    def undo_circle(self, start: Point, end: Point) -> int:
        return self.draw_circle(start, end, erase=True)

    # ---- clock ----

    def draw_clock(self, face: ClockFace, erase: bool = False) -> int:
        points = clock_points(face, self.hour_formula)
        return self._plot(points, erase, label=f"clock {face.center}@{face.timestamp}")

    def undo_clock(self, face: ClockFace) -> int:
        return self.draw_clock(face, erase=True)

    # ---- internals ----

    def _plot(self, points: Iterable[Point], erase: bool, label: str) -> int:
        write = self.buffer.clear_pixel if erase else self.buffer.set_pixel
        written = 0
        dropped = 0
        for x, y in points:
            try:
                write(x, y)
            except OutOfBounds:
                dropped += 1
                continue
            written += 1

        logger.debug(
            "%s %s: %d pixels, %d out of bounds",
            "Erased" if erase else "Drew", label, written, dropped,
        )
        return written
