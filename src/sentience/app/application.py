import os
import sys

from PySide6.QtCore import QCoreApplication
from PySide6.QtWidgets import QApplication

ORG_ID = "sentience"
APP_ID = "sentience-presentation"
ORG_DOMAIN = "https://sentience.example/"

VISIBLE_APP_NAME = "SENTIENCE"


def create_app() -> QApplication:
    """Return the running QApplication, creating it with the presentation's identity if needed."""
    os.environ.setdefault("QT_ENABLE_HIGHDPI_SCALING", "1")

    QCoreApplication.setOrganizationName(ORG_ID)
    QCoreApplication.setOrganizationDomain(ORG_DOMAIN)
    QCoreApplication.setApplicationName(APP_ID)

    app = QApplication.instance()
    if app is None:
        app = QApplication(sys.argv)
    app.setApplicationDisplayName(VISIBLE_APP_NAME)
    app.setQuitOnLastWindowClosed(True)
    return app
