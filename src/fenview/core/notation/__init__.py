"""Notation package: FEN parsing and validation."""

from fenview.core.notation.fen import (
    MAX_COUNTER,
    STARTING_FEN,
    parse_fen,
    position_from_fen,
)

__all__ = [
    "MAX_COUNTER",
    "STARTING_FEN",
    "parse_fen",
    "position_from_fen",
]
