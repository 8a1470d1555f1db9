"""FEN validation failures.

Every rule the parser enforces has its own :class:`FenErrorKind`. A failed
parse surfaces exactly one :class:`FenError`: the first rule broken, in
field order and then left to right within the field.
"""

from __future__ import annotations

from enum import Enum

from fenview.core.enums import FenField


class FenErrorKind(Enum):
    """Which validation rule rejected the input."""

    EMPTY_INPUT = "EmptyInput"
    WRONG_FIELD_COUNT = "WrongFieldCount"

    WRONG_RANK_COUNT = "WrongRankCount"
    INVALID_EMPTY_COUNT = "InvalidEmptyCount"
    RANK_OVERFLOW = "RankOverflow"
    INVALID_PLACEMENT_CHAR = "InvalidPlacementChar"
    INCOMPLETE_RANK = "IncompleteRank"

    SIDE_TO_MOVE_WRONG_LENGTH = "SideToMoveWrongLength"
    SIDE_TO_MOVE_INVALID_CHAR = "SideToMoveInvalidChar"

    CASTLING_LENGTH_OUT_OF_RANGE = "CastlingLengthOutOfRange"
    INVALID_CASTLING_CHAR = "InvalidCastlingChar"
    DUPLICATE_CASTLING_CHAR = "DuplicateCastlingChar"

    EN_PASSANT_WRONG_LENGTH = "EnPassantWrongLength"
    EN_PASSANT_INVALID_FILE = "EnPassantInvalidFile"
    EN_PASSANT_INVALID_RANK = "EnPassantInvalidRank"

    HALFMOVE_NOT_NUMERIC = "HalfmoveNotNumeric"
    HALFMOVE_OUT_OF_RANGE = "HalfmoveOutOfRange"

    FULLMOVE_NOT_NUMERIC = "FullmoveNotNumeric"
    FULLMOVE_MUST_BE_POSITIVE = "FullmoveMustBePositive"
    FULLMOVE_OUT_OF_RANGE = "FullmoveOutOfRange"


class FenError(ValueError):
    """A FEN string was rejected.

    ``str(error)`` is the user-facing message. ``field`` is ``None`` for
    failures detected before the fields were split apart.
    """

    def __init__(
        self,
        kind: FenErrorKind,
        message: str,
        field: FenField | None = None,
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.field = field
        self.message = message

    def __repr__(self) -> str:
        return f"FenError({self.kind.value}, {self.message!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FenError):
            return NotImplemented
        return (self.kind, self.field, self.message) == (
            other.kind,
            other.field,
            other.message,
        )

    def __hash__(self) -> int:
        return hash((self.kind, self.field, self.message))
