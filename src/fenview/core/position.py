"""Position — the structured result of a successful FEN parse."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

from fenview.core.enums import CastlingRights, Color
from fenview.core.piece import Piece
from fenview.core.types import Square

Rank: TypeAlias = tuple[Piece | None, ...]
Board: TypeAlias = tuple[Rank, ...]

# Canonical FEN ordering of castling letters
_CASTLING_LETTERS: tuple[tuple[CastlingRights, str], ...] = (
    (CastlingRights.WHITE_KINGSIDE, "K"),
    (CastlingRights.WHITE_QUEENSIDE, "Q"),
    (CastlingRights.BLACK_KINGSIDE, "k"),
    (CastlingRights.BLACK_QUEENSIDE, "q"),
)

EMPTY_BOARD: Board = tuple((None,) * 8 for _ in range(8))


@dataclass(frozen=True, slots=True)
class Position:
    """Immutable snapshot of everything a FEN string encodes.

    ``board[row][col]``: row 0 is rank 8 as written first in FEN, col 0 is
    the a-file. Empty squares hold ``None``.
    """

    board: Board
    side_to_move: Color
    castling: CastlingRights
    en_passant: Square | None
    halfmove_clock: int
    fullmove_number: int

    def piece_at(self, row: int, col: int) -> Piece | None:
        return self.board[row][col]

    def pieces(self) -> list[tuple[int, int, Piece]]:
        """All occupied squares as ``(row, col, piece)`` in reading order."""
        return [
            (row, col, piece)
            for row, rank in enumerate(self.board)
            for col, piece in enumerate(rank)
            if piece is not None
        ]

    @property
    def castling_letters(self) -> str:
        """Castling rights as FEN letters in KQkq order ("" when none)."""
        return "".join(
            letter for right, letter in _CASTLING_LETTERS if self.castling & right
        )
