"""Visual theme constants and QSS styles for fenview."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtGui import QColor


@dataclass(frozen=True)
class BoardTheme:
    """Colour scheme for the chessboard."""

    light_square: QColor
    dark_square: QColor
    square_border: QColor  # thin grid line between squares
    piece_color: QColor  # glyph colour for both sides

    @classmethod
    def default(cls) -> BoardTheme:
        return cls(
            light_square=QColor(240, 217, 181),  # tan
            dark_square=QColor(181, 136, 99),  # brown
            square_border=QColor(0, 0, 0, 30),
            piece_color=QColor(0, 0, 0),
        )

    @classmethod
    def blue(cls) -> BoardTheme:
        return cls(
            light_square=QColor(222, 227, 230),
            dark_square=QColor(140, 162, 173),
            square_border=QColor(0, 0, 0, 30),
            piece_color=QColor(0, 0, 0),
        )

    @classmethod
    def green(cls) -> BoardTheme:
        return cls(
            light_square=QColor(236, 238, 220),
            dark_square=QColor(112, 149, 120),
            square_border=QColor(0, 0, 0, 30),
            piece_color=QColor(0, 0, 0),
        )

    @classmethod
    def walnut(cls) -> BoardTheme:
        return cls(
            light_square=QColor(228, 210, 184),
            dark_square=QColor(118, 74, 47),
            square_border=QColor(0, 0, 0, 40),
            piece_color=QColor(20, 12, 6),
        )

    @classmethod
    def slate(cls) -> BoardTheme:
        return cls(
            light_square=QColor(224, 226, 231),
            dark_square=QColor(101, 110, 122),
            square_border=QColor(0, 0, 0, 30),
            piece_color=QColor(0, 0, 0),
        )


THEMES: dict[str, BoardTheme] = {
    "Classic": BoardTheme.default(),
    "Blue": BoardTheme.blue(),
    "Green": BoardTheme.green(),
    "Walnut": BoardTheme.walnut(),
    "Slate": BoardTheme.slate(),
}


def theme_by_name(name: str) -> BoardTheme | None:
    """Look up a theme by its display name; ``None`` if unknown."""
    return THEMES.get(name)


# ── Application-wide QSS ────────────────────────────────────────────────────

APP_STYLE = """
QMainWindow {
    background: #2b2b2b;
}

QLabel {
    color: #e0e0e0;
    font-family: "Adwaita Sans", "Helvetica Neue", sans-serif;
}

QLineEdit {
    background: #1e1e1e;
    color: #d4d4d4;
    border: 1px solid #3c3c3c;
    border-radius: 4px;
    padding: 5px 8px;
    selection-background-color: #264f78;
}

QPushButton {
    background: #3c3c3c;
    color: #e0e0e0;
    border: 1px solid #555;
    border-radius: 4px;
    padding: 6px 14px;
    font-size: 13px;
}
QPushButton:hover {
    background: #505050;
}
QPushButton:pressed {
    background: #264f78;
}

QStatusBar {
    color: #aaa;
}
"""
