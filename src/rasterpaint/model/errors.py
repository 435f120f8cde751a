"""
Error Taxonomy
==============
Exceptions raised by the drawing core.

None of them is fatal for a drawing session: the renderer drops
out-of-bounds pixels, the controller ignores unknown tools and degenerate
shapes simply render nothing. They exist so that the lower layers can report
the anomaly and the upper layers can decide to absorb and log it.
"""
from __future__ import annotations


class RasterPaintError(Exception):
    """Base class for all drawing core errors."""


class OutOfBounds(RasterPaintError, IndexError):
    """A pixel coordinate lies outside the buffer extent."""

    def __init__(self, x: int, y: int, width: int, height: int) -> None:
        super().__init__(f"Pixel ({x}, {y}) is outside the {width}x{height} buffer.")
        self.x = x
        self.y = y


class InvalidTool(RasterPaintError, ValueError):
    """An unrecognized tool identifier, or a tool without a shape."""

    def __init__(self, tool_id: object) -> None:
        super().__init__(f"Unknown tool '{tool_id}'.")
        self.tool_id = tool_id


class DegenerateGeometry(RasterPaintError, ValueError):
    """Zero-length line or zero-radius circle (strict rasterization only)."""
