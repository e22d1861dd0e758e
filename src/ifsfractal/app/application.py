from PySide6.QtWidgets import QApplication
from PySide6.QtCore import QCoreApplication, QSettings

import sys
import os

import pyqtgraph as pg

from ifsfractal.config import BACKGROUND_COLOR, POINT_COLOR, WINDOW_TITLE

ORG_ID = "ifsfractal"
APP_ID = "ifs-fractal-generator"
ORG_DOMAIN = "ifsfractal.local"

VISIBLE_APP_NAME = WINDOW_TITLE


def create_app() -> QApplication:
    """Create and configure the QApplication instance."""
    os.environ.setdefault("QT_ENABLE_HIGHDPI_SCALING", "1")
    os.environ.setdefault("QT_AUTO_SCREEN_SCALE_FACTOR", "1")

    QCoreApplication.setOrganizationName(ORG_ID)
    QCoreApplication.setOrganizationDomain(ORG_DOMAIN)
    QCoreApplication.setApplicationName(APP_ID)
    QSettings.setDefaultFormat(QSettings.Format.IniFormat)

    app = QApplication.instance() or QApplication(sys.argv)

    # White points on black, like a bare GL_POINTS draw
    pg.setConfigOption("background", BACKGROUND_COLOR)
    pg.setConfigOption("foreground", POINT_COLOR)

    visible_name = QCoreApplication.translate("App", VISIBLE_APP_NAME)
    app.setApplicationDisplayName(visible_name)

    return app
