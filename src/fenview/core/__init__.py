"""Core domain layer — pure FEN logic with zero external dependencies.

Quick start::

    from fenview.core import FenError, parse_fen, STARTING_FEN

    result = parse_fen(STARTING_FEN)
    if isinstance(result, FenError):
        print(result)
    else:
        print(result.side_to_move, result.castling_letters)
"""

from fenview.core.enums import CastlingRights, Color, FenField, PieceType
from fenview.core.errors import FenError, FenErrorKind
from fenview.core.notation import (
    MAX_COUNTER,
    STARTING_FEN,
    parse_fen,
    position_from_fen,
)
from fenview.core.piece import Piece
from fenview.core.position import EMPTY_BOARD, Board, Position
from fenview.core.types import FILES, Square, is_light_square, rank_label

__all__ = [
    # Enums / flags
    "CastlingRights",
    "Color",
    "FenField",
    "PieceType",
    # Types / helpers
    "FILES",
    "Square",
    "is_light_square",
    "rank_label",
    # Domain objects
    "Board",
    "EMPTY_BOARD",
    "Piece",
    "Position",
    # Errors
    "FenError",
    "FenErrorKind",
    # Notation
    "MAX_COUNTER",
    "STARTING_FEN",
    "parse_fen",
    "position_from_fen",
]
