"""
Drawing Session
===============
Everything one canvas needs, constructed once and passed by reference.

Why is this file needed?
------------------------
1. No globals: The buffer, the stores and the renderer belong to a Session,
   so several canvases (or tests) can run side by side.
2. Presentation: Frame sinks registered here receive the full buffer after
   every event that changed pixels.
"""
from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import Callable, Optional

from rasterpaint.config import CANVAS_MARGIN, DEFAULT_CANVAS_SIZE, TOOLBAR_HEIGHT
from rasterpaint.model.geometry import HourFormula
from rasterpaint.model.pixel_buffer import PixelBuffer
from rasterpaint.model.shapes import ShapeRenderer
from rasterpaint.model.state import ClockStore, StrokeStore

logger = logging.getLogger(__name__)

FrameSink = Callable[[PixelBuffer], None]


def fit_canvas(
    available: Optional[tuple[int, int]],
    margin: tuple[int, int] = CANVAS_MARGIN,
    toolbar_height: int = TOOLBAR_HEIGHT,
) -> tuple[int, int]:
    """
    Buffer size for a canvas filling `available` (width, height) pixels
    below the toolbar row.

    Falls back to DEFAULT_CANVAS_SIZE when nothing is known about the screen
    or the area left over is empty.
    """
    if available is None:
        return DEFAULT_CANVAS_SIZE
    width = available[0] - margin[0]
    height = available[1] - toolbar_height - margin[1]
    if width <= 0 or height <= 0:
        logger.warning("No room for a canvas in %dx%d, using %dx%d.", *available, *DEFAULT_CANVAS_SIZE)
        return DEFAULT_CANVAS_SIZE
    return width, height


@dataclass
class Session:
    buffer: PixelBuffer
    renderer: ShapeRenderer
    stroke: StrokeStore = field(default_factory=StrokeStore)
    clock: ClockStore = field(default_factory=ClockStore)
    sinks: list[FrameSink] = field(default_factory=list)

    @classmethod
    def create(cls, width: int, height: int, hour_formula: HourFormula = HourFormula.LEGACY) -> Session:
        buffer = PixelBuffer(width, height)
        logger.info("New %dx%d session (hour formula: %s).", width, height, hour_formula)
        return cls(buffer=buffer, renderer=ShapeRenderer(buffer, hour_formula))

    def add_sink(self, sink: FrameSink) -> Callable[[], None]:
        """Register a presentation surface; returns the removal function."""
        self.sinks.append(sink)

        def remove() -> None:
            if sink in self.sinks:
                self.sinks.remove(sink)

        return remove

    def present(self) -> None:
        """Push the full buffer to every sink."""
        for sink in list(self.sinks):
            sink(self.buffer)
