from __future__ import annotations

from typing import Optional

from PySide6.QtCore import QObject, QTimer

from rasterpaint.config import TICK_INTERVAL_MS
from rasterpaint.controller.scheduler import PeriodicTask, TickCallback, now_ms


class QtTicker(PeriodicTask):
    """PeriodicTask backed by a QTimer on the GUI event loop."""

    def __init__(self, parent: QObject | None = None, interval_ms: int = TICK_INTERVAL_MS) -> None:
        super().__init__(interval_ms)
        self._timer = QTimer(parent)
        self._timer.setInterval(interval_ms)
        self._timer.timeout.connect(self._fire)
        self._callback: Optional[TickCallback] = None

    def start(self, callback: TickCallback) -> None:
        self._callback = callback
        self._timer.start()

    def stop(self) -> None:
        self._timer.stop()
        self._callback = None

    @property
    def active(self) -> bool:
        return self._timer.isActive()

    def _fire(self) -> None:
        if self._callback is not None:
            self._callback(now_ms())
