"""
Application Initialization
==========================
This module wires the drawing core to the Qt shell and starts the Qt Event
Loop.

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root. It:
1. Creates the QApplication, reads the user settings and sets up logging.
2. Instantiates the drawing Session (buffer, stores, renderer), its buffer
   sized to the available screen area.
3. Instantiates the PreviewController with a QTimer-backed ticker.
4. Passes the controller into the Main Window and starts the loop.
"""
import sys

from rasterpaint.app.application import create_app, load_settings
from rasterpaint.app.ticker import QtTicker
from rasterpaint.app.ui.main_window import MainWindow
from rasterpaint.controller.preview import PreviewController
from rasterpaint.controller.session import Session, fit_canvas
from rasterpaint.logging_config import setup_logging


def main() -> int:
    # 1. Create the Qt Application (QSettings needs the organisation names first)
    app = create_app()
    settings = load_settings()

    # 2. Setup Logging
    setup_logging(level=settings.log_level, log_file=settings.log_file)

    # 3. Initialize the drawing core, sized to the screen it opens on
    screen = app.primaryScreen()
    available = None
    if screen is not None:
        geometry = screen.availableGeometry()
        available = (geometry.width(), geometry.height())
    width, height = fit_canvas(available)
    session = Session.create(width, height, hour_formula=settings.hour_formula)
    controller = PreviewController(session, ticker=QtTicker(app))

    # 4. Initialize the Main Window, passing the controller
    window = MainWindow(controller)
    window.show()
    controller.start()

    # 5. Start Event Loop
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
