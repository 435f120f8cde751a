from __future__ import annotations

import pytest

from rasterpaint.controller.preview import PreviewController
from rasterpaint.controller.scheduler import ManualTicker
from rasterpaint.controller.session import Session
from rasterpaint.model.pixel_buffer import PixelBuffer
from rasterpaint.model.shapes import ShapeRenderer

# 2023-11-14 22:13:20 UTC
T0 = 1_700_000_000_000


@pytest.fixture
def buffer() -> PixelBuffer:
    return PixelBuffer(100, 100)


@pytest.fixture
def renderer(buffer: PixelBuffer) -> ShapeRenderer:
    return ShapeRenderer(buffer)


@pytest.fixture
def session() -> Session:
    return Session.create(100, 100)


@pytest.fixture
def ticker() -> ManualTicker:
    return ManualTicker(start_ms=T0)


@pytest.fixture
def controller(session: Session, ticker: ManualTicker) -> PreviewController:
    ctrl = PreviewController(session, ticker=ticker, clock=ticker.time)
    ctrl.start()
    yield ctrl
    ctrl.stop()
