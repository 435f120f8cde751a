"""
Periodic Scheduling
===================
The one-second ticker that keeps the clock animating.

Why is this file needed?
------------------------
The controller only needs "call me every N milliseconds until cancelled".
Hiding that behind PeriodicTask lets the Qt shell back it with a QTimer while
tests drive time by hand with ManualTicker.

Classes:
    PeriodicTask: Abstract cancellable periodic task.
    ManualTicker: Deterministic implementation driven by `advance()`.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
import time
from typing import Callable, Optional

from rasterpaint.config import TICK_INTERVAL_MS


TickCallback = Callable[[int], None]


def now_ms() -> int:
    """Wall-clock time in milliseconds since the epoch."""
    return int(time.time() * 1000)


class PeriodicTask(ABC):
    """Calls `callback(timestamp_ms)` every `interval_ms` until stopped."""

    def __init__(self, interval_ms: int = TICK_INTERVAL_MS) -> None:
        if interval_ms <= 0:
            raise ValueError(f"Interval must be positive, got {interval_ms} ms.")
        self.interval_ms = interval_ms

    @abstractmethod
    def start(self, callback: TickCallback) -> None:
        ...

    @abstractmethod
    def stop(self) -> None:
        ...

    @property
    @abstractmethod
    def active(self) -> bool:
        ...


class ManualTicker(PeriodicTask):
    """
    Simulated time for tests.

    `advance(ms)` moves the simulated clock forward and fires the callback
    once for every interval boundary crossed, passing the simulated time.
    """

    def __init__(self, interval_ms: int = TICK_INTERVAL_MS, start_ms: int = 0) -> None:
        super().__init__(interval_ms)
        self.now = start_ms
        self._next_due = start_ms + interval_ms
        self._callback: Optional[TickCallback] = None

    def start(self, callback: TickCallback) -> None:
        self._callback = callback
        self._next_due = self.now + self.interval_ms

    def stop(self) -> None:
        self._callback = None

    @property
    def active(self) -> bool:
        return self._callback is not None

    def time(self) -> int:
        return self.now

    def advance(self, ms: int) -> int:
        """Move time forward by `ms`; returns the number of ticks fired."""
        target = self.now + ms
        fired = 0
        while self._callback is not None and self._next_due <= target:
            self.now = self._next_due
            self._next_due += self.interval_ms
            self._callback(self.now)
            fired += 1
        self.now = target
        return fired
