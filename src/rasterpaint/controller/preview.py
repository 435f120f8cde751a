"""
Preview Controller
==================
The state machine behind live shape dragging.

Why is this file needed?
------------------------
1. Preview cycle: On every pointer move the shape rendered for the previous
   pointer position is undone before the shape for the new position is drawn.
2. Commit: Releasing the pointer turns the last preview into permanent ink by
   taking a new baseline of the buffer.
3. Clock animation: While the clock tool is active a periodic ticker re-times
   the clock face, which undoes the old frame and draws the new one.

Input adapters call the `on_*` methods with coordinates already translated
into drawing-surface space. Rendering itself happens in the store listeners,
so every path (pointer, tool switch, tick) goes through the same undo/draw
logic.

Classes:
    PreviewController: Input events -> stores -> renderer -> frame sinks.
"""
from __future__ import annotations

import logging
from typing import Callable, Optional

from rasterpaint.controller.scheduler import PeriodicTask, now_ms
from rasterpaint.controller.session import Session
from rasterpaint.model.errors import InvalidTool
from rasterpaint.model.geometry import ClockFace, Point, Tool
from rasterpaint.model.state import StrokeState

logger = logging.getLogger(__name__)


class PreviewController:
    def __init__(
        self,
        session: Session,
        ticker: Optional[PeriodicTask] = None,
        clock: Callable[[], int] = now_ms,
    ) -> None:
        self.session = session
        self.ticker = ticker
        self._clock = clock

        self._unsubscribe = [
            session.stroke.subscribe(self._on_stroke_changed),
            session.clock.subscribe(self._on_clock_changed),
        ]

    # ------------------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------------------

    def start(self) -> None:
        """Start the clock ticker, if one was given."""
        if self.ticker is not None and not self.ticker.active:
            self.ticker.start(self.on_tick)

    def stop(self) -> None:
        """Cancel the ticker and detach from the session stores."""
        if self.ticker is not None:
            self.ticker.stop()
        for unsubscribe in self._unsubscribe:
            unsubscribe()
        self._unsubscribe.clear()

    # ------------------------------------------------------------------------------
    # Input events
    # ------------------------------------------------------------------------------

    @property
    def tool(self) -> Tool:
        return self.session.stroke.state.tool

    @property
    def dragging(self) -> bool:
        return self.session.stroke.state.pointer_down

    def on_pointer_down(self, x: int, y: int) -> None:
        # a press during a drag undoes the previous preview
        self.session.stroke.press(Point(int(x), int(y)))
        self.session.present()

    def on_pointer_move(self, x: int, y: int) -> None:
        if not self.dragging:
            return
        point = Point(int(x), int(y))
        stroke = self.session.stroke
        stroke.drag_to(point)

        if self.tool is Tool.CLOCK:
            self.session.clock.show(ClockFace(center=stroke.state.start, edge=point, timestamp=self._clock()))

        self.session.present()

    def on_pointer_up(self) -> None:
        # the clock is never committed, only its last frame lingers until the next tick
        face = self.session.clock.state
        if self.tool is Tool.CLOCK and face is not None:
            self.session.renderer.undo_clock(face)

        self.session.stroke.release()
        self.session.buffer.commit()
        self.session.present()

    def on_tool_select(self, tool_id: object) -> None:
        """
        Switch tools. Unknown identifiers are logged and ignored.

        Any switch cancels the in-flight preview. Selecting ERASE clears the
        canvas and keeps the previously selected tool.
        """
        try:
            tool = Tool.parse(tool_id)
        except InvalidTool as e:
            logger.warning("Ignoring tool selection: %s", e)
            return

        previous = self.tool
        if tool is previous:
            return

        self._cancel_preview()
        stroke = self.session.stroke
        if tool is Tool.ERASE:
            stroke.select_tool(Tool.ERASE)
            self.session.buffer.clear_all()
            stroke.select_tool(previous)
        else:
            stroke.select_tool(tool)
            logger.info("Selected tool: %s", tool)

        self.session.present()

    def on_tick(self, timestamp: Optional[int] = None) -> None:
        """Advance the clock face, only while the clock tool is active."""
        if self.tool is not Tool.CLOCK or self.session.clock.state is None:
            return
        self.session.clock.tick(self._clock() if timestamp is None else timestamp)
        self.session.present()

    # ------------------------------------------------------------------------------
    # Store listeners
    # ------------------------------------------------------------------------------

    def _cancel_preview(self) -> None:
        state = self.session.stroke.state
        if state.pointer_down and state.end is not None:
            self.session.stroke.cancel_preview()
        if self.session.clock.state is not None:
            self.session.clock.hide()

    def _on_stroke_changed(self, previous: StrokeState, current: StrokeState) -> None:
        if previous.tool is not current.tool or not current.tool.draws_shape:
            return
        # releasing keeps the last frame, the controller commits it
        if previous.pointer_down and not current.pointer_down:
            return

        old_end = previous.end if previous.pointer_down else None
        new_end = current.end if current.pointer_down else None
        if (previous.start, old_end) == (current.start, new_end):
            return

        renderer = self.session.renderer
        if old_end is not None and previous.start is not None:
            renderer.undo(previous.tool, previous.start, old_end)
        if new_end is not None and current.start is not None:
            renderer.draw(current.tool, current.start, new_end)

    def _on_clock_changed(self, previous: Optional[ClockFace], current: Optional[ClockFace]) -> None:
        if previous == current:
            return
        renderer = self.session.renderer
        if previous is not None:
            renderer.undo_clock(previous)
        if current is not None:
            renderer.draw_clock(current)
