from PySide6.QtWidgets import QApplication
from PySide6.QtCore import QCoreApplication, QSettings

import logging
import os
import sys
from dataclasses import dataclass
from typing import Optional

from rasterpaint.config import DEFAULT_HOUR_FORMULA
from rasterpaint.logging_config import resolve_level
from rasterpaint.model.geometry import HourFormula

logger = logging.getLogger(__name__)

ORG_ID = "rasterpaint"
APP_ID = "rasterpaint"
ORG_DOMAIN = "rasterpaint.local"

VISIBLE_APP_NAME = "Raster Paint"


@dataclass
class AppSettings:
    hour_formula: HourFormula = HourFormula(DEFAULT_HOUR_FORMULA)
    log_level: int = logging.INFO
    log_file: Optional[str] = None


def load_settings() -> AppSettings:
    """Read user settings from the INI store, falling back to the defaults."""
    settings = QSettings()

    raw_formula = settings.value("clock/hour_formula", DEFAULT_HOUR_FORMULA, type=str)
    try:
        hour_formula = HourFormula(str(raw_formula).lower())
    except ValueError:
        logger.warning(f"Unknown hour formula '{raw_formula}' in settings, using '{DEFAULT_HOUR_FORMULA}'.")
        hour_formula = HourFormula(DEFAULT_HOUR_FORMULA)

    log_level = resolve_level(settings.value("app/log_level", "INFO", type=str))

    # empty means console only
    log_file = str(settings.value("app/log_file", "", type=str)).strip() or None

    return AppSettings(hour_formula=hour_formula, log_level=log_level, log_file=log_file)


def create_app() -> QApplication:
    """Create and configure the QApplication instance."""
    os.environ.setdefault("QT_ENABLE_HIGHDPI_SCALING", "1")

    QCoreApplication.setOrganizationName(ORG_ID)
    QCoreApplication.setOrganizationDomain(ORG_DOMAIN)
    QCoreApplication.setApplicationName(APP_ID)
    QSettings.setDefaultFormat(QSettings.Format.IniFormat)

    app = QApplication(sys.argv)

    visible_name = QCoreApplication.translate("App", VISIBLE_APP_NAME)
    app.setApplicationDisplayName(visible_name)

    return app
