"""
Geometry Primitives
===================
Value types shared by the rasterizer, the renderer and the controller.

Classes:
    Point: Integer pixel coordinate.
    Tool: Drawing tool identifiers.
    HourFormula: Selectable hour-hand angle formula for the clock.
    ClockFace: Center, edge and time of one rendered clock frame.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from enum import StrEnum
from typing import NamedTuple

from rasterpaint.model.errors import InvalidTool


class Point(NamedTuple):
    x: int
    y: int


class Tool(StrEnum):
    """The fixed set of tools offered by the toolbar."""
    LINE = "line"
    RECT = "rect"
    CIRCLE = "circle"
    CLOCK = "clock"
    ERASE = "erase"

    @classmethod
    def parse(cls, tool_id: object) -> Tool:
        """
        Convert an external tool identifier into a Tool.

        Raises:
            InvalidTool: If the identifier is not one of the known tools.
        """
        if isinstance(tool_id, Tool):
            return tool_id
        try:
            return cls(str(tool_id).strip().lower())
        except ValueError:
            raise InvalidTool(tool_id) from None

    @property
    def draws_shape(self) -> bool:
        return self in (Tool.LINE, Tool.RECT, Tool.CIRCLE)


class HourFormula(StrEnum):
    LEGACY = "legacy"
    STANDARD = "standard"


@dataclass(frozen=True)
class ClockFace:
    """
    One frame of the analog clock.

    The radius is the distance between center and edge, the hands are derived
    from the timestamp (milliseconds since the epoch).
    """
    center: Point
    edge: Point
    timestamp: int

    def at(self, timestamp: int) -> ClockFace:
        """Same face, different time."""
        return replace(self, timestamp=timestamp)
