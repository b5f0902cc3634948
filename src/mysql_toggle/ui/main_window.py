"""
Main window: a single toggle button. Routes clicks to the controller and renders its labels.
"""

from __future__ import annotations

import logging

from PySide6.QtWidgets import (
    QMainWindow,
    QWidget,
    QVBoxLayout,
    QPushButton,
    QMessageBox,
    QApplication,
)
from PySide6.QtCore import Qt, QByteArray

from ..db.connection import ConnectionError
from ..services.app_state import AppState
from ..services import preferences
from .theme import set_connected_style, toggle_button_font

logger = logging.getLogger(__name__)


def _restore_window_geometry(window: QMainWindow) -> None:
    """Restore main window size and position from preferences if available."""
    geom_b64 = preferences.get_window_geometry()
    if not geom_b64:
        return
    data = QByteArray.fromBase64(geom_b64.encode("utf-8"))
    if data.isEmpty():
        return
    window.restoreGeometry(data)


def _save_window_geometry(window: QMainWindow) -> None:
    """Persist main window size and position to preferences."""
    data = window.saveGeometry()
    if data.isEmpty():
        return
    preferences.set_window_geometry(data.toBase64().data().decode("utf-8"))


class ToggleWindow(QMainWindow):
    """Window whose title and only button mirror the connection state."""

    def __init__(self, app_state: AppState) -> None:
        super().__init__()
        self.app_state = app_state
        self.controller = app_state.controller
        self.setMinimumSize(320, 160)
        self.resize(400, 200)
        _restore_window_geometry(self)

        central = QWidget()
        self.setCentralWidget(central)
        layout = QVBoxLayout(central)
        self.toggle_button = QPushButton()
        self.toggle_button.setObjectName("toggle_button")
        self.toggle_button.setFont(toggle_button_font(self.toggle_button.font()))
        self.toggle_button.setCursor(Qt.CursorShape.PointingHandCursor)
        self.toggle_button.clicked.connect(self._on_toggle_clicked)
        layout.addStretch()
        layout.addWidget(self.toggle_button, alignment=Qt.AlignmentFlag.AlignCenter)
        layout.addStretch()

        self.statusBar().showMessage(self.controller.config.describe())
        self._render()

    def _render(self) -> None:
        labels = self.controller.labels
        self.toggle_button.setText(labels.button_text)
        self.setWindowTitle(labels.window_title)
        set_connected_style(self.toggle_button, self.controller.is_connected)

    def _on_toggle_clicked(self) -> None:
        # activate() blocks; ignore further clicks until it returns
        self.toggle_button.setEnabled(False)
        target = self.controller.config.describe()
        self.statusBar().showMessage(
            f"Disconnecting from {target}..." if self.controller.is_connected else f"Connecting to {target}..."
        )
        QApplication.processEvents()
        try:
            self.controller.activate()
        except ConnectionError as e:
            title = "Connection failed" if e.operation == "open" else "Disconnect error"
            QMessageBox.warning(self, title, str(e))
        finally:
            self._render()
            self.statusBar().showMessage(target)
            self.toggle_button.setEnabled(True)

    def closeEvent(self, event) -> None:
        _save_window_geometry(self)
        self.app_state.close()
        super().closeEvent(event)
