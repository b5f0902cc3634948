"""
Dark theme. In-code palette and QSS for PySide6.
The toggle button carries a "connected" dynamic property so its border follows the connection state.
"""

from PySide6.QtGui import QPalette, QColor, QFont
from PySide6.QtWidgets import QApplication, QWidget


# --- Dark palette ---
COLOR_BACKGROUND = "#0d0b14"
COLOR_SURFACE = "#12101a"
COLOR_OUTLINE = "#3d3654"
COLOR_OUTLINE_VARIANT = "#4a4260"
COLOR_PRIMARY = "#c9a227"
COLOR_ON_SURFACE = "#e8e4dc"
COLOR_TEXT_HEADER = "#e8d4a0"
COLOR_TEXT_SECONDARY = "#b4a8a8"
COLOR_TEXT_DISABLED = "#5c5460"
COLOR_CONNECTED = "#2d4a2d"
COLOR_HIGHLIGHT = "#3d3654"

TOGGLE_BUTTON_POINT_SIZE = 14


def dark_palette() -> QPalette:
    """Build QPalette for dark theme."""
    p = QPalette()
    p.setColor(QPalette.ColorRole.Window, QColor(COLOR_BACKGROUND))
    p.setColor(QPalette.ColorRole.WindowText, QColor(COLOR_ON_SURFACE))
    p.setColor(QPalette.ColorRole.Base, QColor(COLOR_SURFACE))
    p.setColor(QPalette.ColorRole.Text, QColor(COLOR_ON_SURFACE))
    p.setColor(QPalette.ColorRole.Button, QColor(COLOR_SURFACE))
    p.setColor(QPalette.ColorRole.ButtonText, QColor(COLOR_ON_SURFACE))
    p.setColor(QPalette.ColorRole.BrightText, QColor(COLOR_TEXT_HEADER))
    p.setColor(QPalette.ColorRole.Highlight, QColor(COLOR_HIGHLIGHT))
    p.setColor(QPalette.ColorRole.HighlightedText, QColor(COLOR_ON_SURFACE))
    return p


def dark_stylesheet() -> str:
    """QSS for the main window, toggle button, status bar and message boxes."""
    return f"""
        QMainWindow, QWidget {{
            background-color: {COLOR_BACKGROUND};
            color: {COLOR_ON_SURFACE};
        }}
        QPushButton {{
            background-color: {COLOR_SURFACE};
            color: {COLOR_ON_SURFACE};
            border: 1px solid {COLOR_OUTLINE};
            border-radius: 4px;
            padding: 8px 24px;
        }}
        QPushButton:hover {{
            border-color: {COLOR_PRIMARY};
        }}
        QPushButton:pressed {{
            background-color: {COLOR_OUTLINE_VARIANT};
        }}
        QPushButton:disabled {{
            color: {COLOR_TEXT_DISABLED};
        }}
        QPushButton[connected="true"] {{
            background-color: {COLOR_CONNECTED};
            border-color: {COLOR_PRIMARY};
        }}
        QStatusBar {{
            color: {COLOR_TEXT_SECONDARY};
        }}
        QMessageBox QLabel {{
            color: {COLOR_ON_SURFACE};
        }}
    """


def set_connected_style(button: QWidget, connected: bool) -> None:
    """Update the "connected" property and re-polish so the QSS selector takes effect."""
    button.setProperty("connected", "true" if connected else "false")
    button.style().unpolish(button)
    button.style().polish(button)


def toggle_button_font(base: QFont) -> QFont:
    font = QFont(base)
    font.setPointSize(TOGGLE_BUTTON_POINT_SIZE)
    return font


def apply_theme(app: QApplication) -> None:
    """Apply dark theme to the application."""
    app.setPalette(dark_palette())
    app.setStyleSheet(dark_stylesheet())
