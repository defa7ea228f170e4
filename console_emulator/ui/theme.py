from __future__ import annotations

import os
from typing import Literal

from PySide6.QtGui import QColor, QPalette
from PySide6.QtWidgets import QApplication

ThemeName = Literal["dark", "light"]

_ROLE = QPalette.ColorRole

# Base is the terminal buffer; Window/Button frame the toolbar and input line
_PALETTES: dict[str, dict[QPalette.ColorRole, str]] = {
    "dark": {
        _ROLE.Window: "#1e1e1e",
        _ROLE.WindowText: "#d4d4d4",
        _ROLE.Base: "#0c0c0c",
        _ROLE.AlternateBase: "#1e1e1e",
        _ROLE.Text: "#cccccc",
        _ROLE.Button: "#2d2d2d",
        _ROLE.ButtonText: "#d4d4d4",
        _ROLE.Highlight: "#264f78",
        _ROLE.HighlightedText: "#ffffff",
    },
    "light": {
        _ROLE.Window: "#f3f3f3",
        _ROLE.WindowText: "#1f1f1f",
        _ROLE.Base: "#ffffff",
        _ROLE.AlternateBase: "#f3f3f3",
        _ROLE.Text: "#1f1f1f",
        _ROLE.Button: "#e8e8e8",
        _ROLE.ButtonText: "#1f1f1f",
        _ROLE.Highlight: "#add6ff",
        _ROLE.HighlightedText: "#000000",
    },
}
_DISABLED_TEXT = {"dark": "#6e6e6e", "light": "#a0a0a0"}


def available_themes() -> list[ThemeName]:
    return ["dark", "light"]


def _build_palette(theme: ThemeName) -> QPalette:
    palette = QPalette()
    for role, color in _PALETTES[theme].items():
        palette.setColor(role, QColor(color))
    disabled = QColor(_DISABLED_TEXT[theme])
    palette.setColor(QPalette.ColorGroup.Disabled, _ROLE.Text, disabled)
    palette.setColor(QPalette.ColorGroup.Disabled, _ROLE.ButtonText, disabled)
    return palette


def apply_theme(app: QApplication, theme: ThemeName | None = None) -> ThemeName:
    """Apply the light or dark terminal palette and return the active theme."""
    name = (theme or os.getenv("CONSOLE_UI_THEME", "dark")).lower()
    if name not in available_themes():
        name = "dark"

    app.setStyle("Fusion")
    app.setPalette(_build_palette(name))  # type: ignore[arg-type]
    app.setProperty("activeTheme", name)
    return name  # type: ignore[return-value]


def toggle_theme(app: QApplication, current: ThemeName) -> ThemeName:
    return apply_theme(app, "light" if current == "dark" else "dark")
