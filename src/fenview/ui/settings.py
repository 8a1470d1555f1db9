"""Application settings."""

from __future__ import annotations

from dataclasses import dataclass

# Pre-filled text of the FEN input box
DEFAULT_INPUT_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w - - 1 1"


@dataclass
class AppSettings:
    """All user-configurable settings."""

    # General
    language: str = "English"

    # Board
    board_theme: str = "Classic"
    square_font_size: int = 36  # glyph point size

    # Input
    initial_fen: str = DEFAULT_INPUT_FEN
    parse_on_start: bool = False

    # Errors
    show_error_dialog: bool = True
    clear_board_on_error: bool = False
