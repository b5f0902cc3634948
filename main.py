#!/usr/bin/env python3
"""
MySQL Connect Toggle — entry point.
"""

import logging
import sys
from pathlib import Path

# Allow running from repo root without installing package
sys.path.insert(0, str(Path(__file__).resolve().parent / "src"))

from PySide6.QtWidgets import QApplication

from mysql_toggle.services.app_state import AppState
from mysql_toggle.services.preferences import get_data_dir
from mysql_toggle.ui.theme import apply_theme
from mysql_toggle.ui.main_window import ToggleWindow


def _setup_logging() -> None:
    """Log to console and to mysql_toggle.log in the data directory; route unhandled exceptions there too."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=[
            logging.FileHandler(get_data_dir() / "mysql_toggle.log", encoding="utf-8"),
            logging.StreamHandler(sys.stdout),
        ],
    )

    def handle_exception(exc_type, exc_value, exc_traceback) -> None:
        if issubclass(exc_type, KeyboardInterrupt):
            sys.__excepthook__(exc_type, exc_value, exc_traceback)
            return
        logging.exception(
            "Unhandled exception",
            exc_info=(exc_type, exc_value, exc_traceback),
        )

    sys.excepthook = handle_exception


def main() -> None:
    _setup_logging()
    app = QApplication(sys.argv)
    app.setApplicationName("MySQL Connect Toggle")
    apply_theme(app)
    with AppState() as state:
        window = ToggleWindow(state)
        window.show()
        code = app.exec()
    sys.exit(code)


if __name__ == "__main__":
    main()
