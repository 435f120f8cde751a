"""
Main window: tool buttons on top, the canvas below.
"""
from __future__ import annotations

from PySide6.QtCore import QCoreApplication
from PySide6.QtWidgets import QHBoxLayout, QLabel, QMainWindow, QPushButton, QVBoxLayout, QWidget

from rasterpaint.app.application import VISIBLE_APP_NAME
from rasterpaint.app.ui.canvas import CanvasWidget
from rasterpaint.config import CANVAS_MARGIN
from rasterpaint.controller.preview import PreviewController
from rasterpaint.model.geometry import Tool
from rasterpaint.model.state import StrokeState

TOOL_LABELS = {
    Tool.LINE: "Line",
    Tool.RECT: "Rectangle",
    Tool.CIRCLE: "Circle",
    Tool.CLOCK: "Clock",
    Tool.ERASE: "Erase",
}


class MainWindow(QMainWindow):
    def __init__(self, controller: PreviewController) -> None:
        super().__init__()
        self.setWindowTitle(VISIBLE_APP_NAME)
        self.controller = controller

        central = QWidget(self)
        v = QVBoxLayout(central)
        margin_x, margin_y = CANVAS_MARGIN
        v.setContentsMargins(margin_x, margin_y, margin_x, margin_y)

        # ---- Toolbar row ----
        row = QHBoxLayout()
        self.buttons: dict[Tool, QPushButton] = {}
        for tool in Tool:
            btn = QPushButton(QCoreApplication.translate("Tools", TOOL_LABELS[tool]), central)
            btn.setObjectName(tool.value)
            btn.clicked.connect(lambda _checked=False, t=tool: self.controller.on_tool_select(t))
            row.addWidget(btn)
            self.buttons[tool] = btn
        row.addStretch(1)

        self.current_shape = QLabel(central)
        row.addWidget(self.current_shape)
        v.addLayout(row)

        # ---- Canvas ----
        self.canvas = CanvasWidget(controller, central)
        v.addWidget(self.canvas, 1)

        self.setCentralWidget(central)

        self._unsubscribe = controller.session.stroke.subscribe(self._on_stroke_changed)
        self._show_tool(controller.tool)
        self.statusBar().showMessage(
            f"{controller.session.buffer.width}x{controller.session.buffer.height} canvas"
        )

    def _on_stroke_changed(self, previous: StrokeState, current: StrokeState) -> None:
        if previous.tool is not current.tool:
            self._show_tool(current.tool)

    def _show_tool(self, tool: Tool) -> None:
        self.current_shape.setText(f"Current Shape: {tool.value}")

    def closeEvent(self, event) -> None:
        self._unsubscribe()
        self.controller.stop()
        super().closeEvent(event)
