from PySide6.QtWidgets import QApplication
from PySide6.QtCore import QCoreApplication

import sys
import os

ORG_ID = "cubeview"
APP_ID = "cube-view"

VISIBLE_APP_NAME = "Cube View"


def create_app(argv: list[str] | None = None) -> QApplication:
    """Create and configure the QApplication instance (or return the running one)."""
    existing = QApplication.instance()
    if existing is not None:
        return existing

    os.environ.setdefault("QT_ENABLE_HIGHDPI_SCALING", "1")

    QCoreApplication.setOrganizationName(ORG_ID)
    QCoreApplication.setApplicationName(APP_ID)

    app = QApplication(argv if argv is not None else sys.argv)

    # Set the visible, translatable display name
    visible_name = QCoreApplication.translate("App", VISIBLE_APP_NAME)
    app.setApplicationDisplayName(visible_name)

    return app
