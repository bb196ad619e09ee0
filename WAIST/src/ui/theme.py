import sys

from PyQt5 import QtWidgets

# Dark palette
COLOR_BG_DARK = "#1e1e1e"        # Main Background
COLOR_BG_LIGHT = "#2b2b2b"       # Inputs, menus
COLOR_BORDER = "#3d3d3d"         # Borders
COLOR_TEXT = "#e0e0e0"           # Main Text
COLOR_TEXT_DIM = "#888888"       # Secondary Text

# Accents
COLOR_ACCENT = "#007acc"         # Blue (Primary)
COLOR_SUCCESS = "#2ea043"        # Green (Results)

HEX_BG_DARK = COLOR_BG_DARK
HEX_TEXT_DIM = COLOR_TEXT_DIM
HEX_SUCCESS = COLOR_SUCCESS

# Profile plot pens
HEX_PROFILE_IN = "#ff6464"
HEX_PROFILE_OUT = "#64b4ff"


def apply_theme(app: QtWidgets.QApplication):
    """Applies the global QSS stylesheet to the application."""

    if sys.platform.startswith("win"):
        font_stack = '"Segoe UI", "Arial", sans-serif'
    elif sys.platform == "darwin":
        font_stack = '"SF Pro Text", "Helvetica Neue", "Arial", sans-serif'
    else:
        font_stack = '"DejaVu Sans", "Liberation Sans", "Arial", sans-serif'

    qss = f"""
    QMainWindow, QWidget {{
        background-color: {COLOR_BG_DARK};
        color: {COLOR_TEXT};
        font-family: {font_stack};
        font-size: 13px;
    }}

    QGroupBox {{
        border: 1px solid {COLOR_BORDER};
        border-radius: 6px;
        margin-top: 14px;
        padding: 8px 6px 4px 6px;
    }}
    QGroupBox::title {{
        subcontrol-origin: margin;
        left: 8px;
        color: {COLOR_ACCENT};
    }}

    QLabel {{
        color: {COLOR_TEXT};
        border: none;
    }}

    QLineEdit {{
        background-color: {COLOR_BG_LIGHT};
        border: 1px solid {COLOR_BORDER};
        color: {COLOR_TEXT};
        border-radius: 3px;
        padding: 3px;
        selection-background-color: {COLOR_ACCENT};
    }}
    QLineEdit:focus {{
        border: 1px solid {COLOR_ACCENT};
    }}

    QMenuBar {{
        background-color: {COLOR_BG_DARK};
        border-bottom: 1px solid {COLOR_BORDER};
    }}
    QMenu {{
        background-color: {COLOR_BG_LIGHT};
        border: 1px solid {COLOR_BORDER};
    }}
    QMenu::item:selected {{
        background-color: {COLOR_ACCENT};
    }}
    """

    app.setStyleSheet(qss)
