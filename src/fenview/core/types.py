"""Board coordinate helpers.

Rows and columns follow FEN reading order: row 0 is rank 8 (the first
placement substring), column 0 is the a-file.
"""

from __future__ import annotations

from typing import NamedTuple

FILES = "abcdefgh"
EN_PASSANT_RANKS = (3, 6)


class Square(NamedTuple):
    """Algebraic square, e.g. ``Square("e", 3)``."""

    file: str
    rank: int

    @property
    def name(self) -> str:
        return f"{self.file}{self.rank}"

    def __str__(self) -> str:
        return self.name


def rank_label(row: int) -> int:
    """Rank number (1–8) shown for a FEN row index (0–7)."""
    return 8 - row


def is_light_square(row: int, col: int) -> bool:
    """Top-left square (a8) is light."""
    return (row + col) % 2 == 0
