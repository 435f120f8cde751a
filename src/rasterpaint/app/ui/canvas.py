from __future__ import annotations

import logging

from PySide6.QtCore import Qt
from PySide6.QtGui import QColor, QImage, QMouseEvent, QPainter, QPaintEvent
from PySide6.QtWidgets import QWidget

from rasterpaint.controller.preview import PreviewController
from rasterpaint.model.pixel_buffer import PixelBuffer

logger = logging.getLogger(__name__)


class CanvasWidget(QWidget):
    """
    Presentation surface and input adapter for one drawing session.

    Mouse events are forwarded to the controller in widget-local pixel
    coordinates; every pushed frame is blitted as a full RGBA image over a
    white background.
    """
    def __init__(self, controller: PreviewController, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.controller = controller
        buffer = controller.session.buffer
        self.setFixedSize(buffer.width, buffer.height)
        self.setMouseTracking(False)
        self.setCursor(Qt.CursorShape.CrossCursor)

        self._frame: QImage | None = None
        self._remove_sink = controller.session.add_sink(self.present)
        self.present(buffer)

    # ---- Core -> surface ----

    def present(self, buffer: PixelBuffer) -> None:
        # QImage does not own foreign memory, copy() detaches it from the numpy bytes
        raw = buffer.as_rgba().tobytes()
        image = QImage(raw, buffer.width, buffer.height, buffer.width * 4, QImage.Format.Format_RGBA8888)
        self._frame = image.copy()
        self.update()

    def paintEvent(self, event: QPaintEvent) -> None:
        painter = QPainter(self)
        painter.fillRect(self.rect(), QColor("white"))
        if self._frame is not None:
            painter.drawImage(0, 0, self._frame)
        painter.end()

    # ---- Input -> core ----

    def mousePressEvent(self, event: QMouseEvent) -> None:
        if event.button() != Qt.MouseButton.LeftButton:
            return
        pos = event.position().toPoint()
        self.controller.on_pointer_down(pos.x(), pos.y())

    def mouseMoveEvent(self, event: QMouseEvent) -> None:
        # without mouse tracking Qt only reports moves while a button is held
        pos = event.position().toPoint()
        self.controller.on_pointer_move(pos.x(), pos.y())

    def mouseReleaseEvent(self, event: QMouseEvent) -> None:
        if event.button() != Qt.MouseButton.LeftButton:
            return
        self.controller.on_pointer_up()

    def closeEvent(self, event) -> None:
        self._remove_sink()
        super().closeEvent(event)
