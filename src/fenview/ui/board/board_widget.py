"""BoardWidget — 8×8 grid of square labels showing a parsed position."""

from __future__ import annotations

from typing import TYPE_CHECKING

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QColor, QFont
from PyQt6.QtWidgets import QGridLayout, QLabel, QSizePolicy, QWidget

from fenview.core.position import EMPTY_BOARD, Board
from fenview.core.types import is_light_square
from fenview.ui.styles.theme import BoardTheme

if TYPE_CHECKING:
    from fenview.core.position import Position


def _rgba(color: QColor) -> str:
    return f"rgba({color.red()}, {color.green()}, {color.blue()}, {color.alpha()})"


class _SquareLabel(QLabel):
    """A single board square; row 0 / col 0 is a8."""

    def __init__(self, row: int, col: int, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.row = row
        self.col = col
        self.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.setSizePolicy(
            QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding
        )
        self.setMinimumSize(40, 40)

    @property
    def is_light(self) -> bool:
        return is_light_square(self.row, self.col)

    def apply_theme(self, theme: BoardTheme) -> None:
        background = theme.light_square if self.is_light else theme.dark_square
        self.setStyleSheet(
            f"background-color: {_rgba(background)};"
            f"color: {_rgba(theme.piece_color)};"
            f"border: 1px solid {_rgba(theme.square_border)};"
        )


class BoardWidget(QWidget):
    """Renders ``Position.board`` with row 0 at the top.

    Pieces are drawn as unicode glyphs; empty squares are blank.
    """

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._theme = BoardTheme.default()
        self._font_size = 36
        self._board: Board = EMPTY_BOARD
        self._squares: list[list[_SquareLabel]] = []
        self._setup_ui()

    def _setup_ui(self) -> None:
        layout = QGridLayout(self)
        layout.setContentsMargins(8, 8, 8, 8)
        layout.setSpacing(0)

        for row in range(8):
            rank: list[_SquareLabel] = []
            for col in range(8):
                square = _SquareLabel(row, col, self)
                square.apply_theme(self._theme)
                layout.addWidget(square, row, col)
                rank.append(square)
            self._squares.append(rank)
        self._apply_font()

    # ── Public API ───────────────────────────────────────────────────────

    def set_position(self, position: Position) -> None:
        """Draw the pieces of *position* (full redraw)."""
        self._set_board(position.board)

    def clear(self) -> None:
        """Remove all pieces, keeping the square colours."""
        self._set_board(EMPTY_BOARD)

    def set_theme(self, theme: BoardTheme) -> None:
        self._theme = theme
        for rank in self._squares:
            for square in rank:
                square.apply_theme(theme)

    def set_font_size(self, size: int) -> None:
        """Set the glyph point size."""
        self._font_size = size
        self._apply_font()

    def glyph_at(self, row: int, col: int) -> str:
        """Text currently shown on a square ("" when empty)."""
        return self._squares[row][col].text()

    def is_empty(self) -> bool:
        return all(piece is None for rank in self._board for piece in rank)

    # ── Internals ────────────────────────────────────────────────────────

    def _set_board(self, board: Board) -> None:
        self._board = board
        for row, rank in enumerate(board):
            for col, piece in enumerate(rank):
                self._squares[row][col].setText(piece.symbol if piece else "")

    def _apply_font(self) -> None:
        font = QFont("Adwaita Sans", self._font_size)
        for rank in self._squares:
            for square in rank:
                square.setFont(font)
