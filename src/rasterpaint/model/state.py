"""
Drawing State (Observable Stores)
=================================
Holds the mutable state of a drawing session and notifies subscribers on
every change.

Why is this file needed?
------------------------
1. State Management: The selected tool, the drag points and the current clock
   frame live in one place per session.
2. Change Events: Every mutator calls the subscribers with the
   (previous, current) state pair, so the controller can undo what the
   previous state rendered and draw what the current one asks for.

Classes:
    StrokeState: Frozen snapshot of tool + drag.
    StrokeStore: Observable container for StrokeState.
    ClockStore: Observable container for the current ClockFace.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
import logging
from typing import Callable, Generic, Optional, TypeVar

from rasterpaint.config import DEFAULT_TOOL
from rasterpaint.model.geometry import ClockFace, Point, Tool

logger = logging.getLogger(__name__)

S = TypeVar("S")
Listener = Callable[[S, S], None]


class Observable(Generic[S]):
    """Minimal subscriber list around an immutable state value."""

    def __init__(self, initial: S) -> None:
        self._state = initial
        self._listeners: list[Listener[S]] = []

    @property
    def state(self) -> S:
        return self._state

    def subscribe(self, listener: Listener[S]) -> Callable[[], None]:
        """Register `listener(previous, current)`; returns the unsubscribe function."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _set(self, new_state: S) -> None:
        previous = self._state
        self._state = new_state
        # copy: listeners may unsubscribe while being notified
        for listener in list(self._listeners):
            listener(previous, new_state)


@dataclass(frozen=True)
class StrokeState:
    tool: Tool = Tool(DEFAULT_TOOL)
    start: Optional[Point] = None
    end: Optional[Point] = None
    pointer_down: bool = False


class StrokeStore(Observable[StrokeState]):
    """Tool selection and the in-flight drag."""

    def __init__(self, initial: StrokeState | None = None) -> None:
        super().__init__(initial or StrokeState())

    def select_tool(self, tool: Tool) -> None:
        logger.debug("Tool %s -> %s", self.state.tool, tool)
        self._set(replace(self.state, tool=tool))

    def press(self, point: Point) -> None:
        self._set(replace(self.state, start=point, end=None, pointer_down=True))

    def drag_to(self, point: Point) -> None:
        self._set(replace(self.state, end=point))

    def release(self) -> None:
        self._set(replace(self.state, pointer_down=False))

    def cancel_preview(self) -> None:
        """Forget the last preview end point, the start stays."""
        self._set(replace(self.state, end=None))


class ClockStore(Observable[Optional[ClockFace]]):
    """The clock frame currently on the canvas, if any."""

    def __init__(self) -> None:
        super().__init__(None)

    def show(self, face: ClockFace) -> None:
        self._set(face)

    def tick(self, timestamp: int) -> None:
        """Re-time the current face; nothing happens without one."""
        if self.state is None:
            return
        self._set(self.state.at(timestamp))

    def hide(self) -> None:
        self._set(None)
