"""
Run with: python -m sentience
"""
from __future__ import annotations

import logging
import sys

from sentience.app.application import create_app
from sentience.app.ui.main_window import MainWindow
from sentience.logging_config import level_from_env, setup_logging
from sentience.model.content import ContentError, load_content

logger = logging.getLogger(__name__)


def main() -> int:
    """Main entry point for the application."""
    setup_logging(level=level_from_env())

    try:
        catalog = load_content()
    except ContentError as e:
        logger.error(f"Cannot start presentation: {e}")
        return 1

    app = create_app()
    win = MainWindow(catalog)
    win.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
