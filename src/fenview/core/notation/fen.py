"""FEN parsing and validation.

The six fields are validated strictly left to right and the first broken
rule aborts the parse. Usage::

    pos = position_from_fen(STARTING_FEN)     # raises FenError
    result = parse_fen(text)                  # Position or FenError, never raises
    if isinstance(result, FenError):
        print(result.kind, result)
"""

from __future__ import annotations

import logging
import re

from fenview.core.enums import CastlingRights, Color, FenField
from fenview.core.errors import FenError, FenErrorKind
from fenview.core.piece import PIECE_CHARS, Piece
from fenview.core.position import Board, Position, Rank
from fenview.core.types import EN_PASSANT_RANKS, FILES, Square, rank_label

_LOGGER = logging.getLogger(__name__)

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"

# Signed 32-bit ceiling for the move counters
MAX_COUNTER = 2**31 - 1

_FIELD_COUNT = 6
_DIGITS = "0123456789"
_COUNTER_RE = re.compile(r"[0-9]+")
_MAX_COUNTER_DIGITS = str(MAX_COUNTER)

_CASTLING_CHARS: dict[str, CastlingRights] = {
    "K": CastlingRights.WHITE_KINGSIDE,
    "Q": CastlingRights.WHITE_QUEENSIDE,
    "k": CastlingRights.BLACK_KINGSIDE,
    "q": CastlingRights.BLACK_QUEENSIDE,
}

_SIDES: dict[str, Color] = {"w": Color.WHITE, "b": Color.BLACK}

_EN_PASSANT_RANK_CHARS = tuple(str(rank) for rank in EN_PASSANT_RANKS)


def parse_fen(fen: str) -> Position | FenError:
    """Parse *fen*, returning the :class:`Position` or the first error found."""
    try:
        return position_from_fen(fen)
    except FenError as exc:
        return exc


def position_from_fen(fen: str) -> Position:
    """Parse a FEN string into a :class:`Position`.

    Raises:
        FenError: if any field is malformed.
        TypeError: if *fen* is not a string.
    """
    if not isinstance(fen, str):
        raise TypeError(f"FEN must be a string, not {type(fen).__name__}")
    try:
        placement, side, castling, ep, halfmove, fullmove = _split_fields(fen)
        return Position(
            board=_parse_placement(placement),
            side_to_move=_parse_side_to_move(side),
            castling=_parse_castling(castling),
            en_passant=_parse_en_passant(ep),
            halfmove_clock=_parse_halfmove(halfmove),
            fullmove_number=_parse_fullmove(fullmove),
        )
    except FenError as exc:
        _LOGGER.debug(
            "Rejected FEN %r in %s: %s (%s)",
            fen,
            exc.field or "input",
            exc,
            exc.kind.value,
        )
        raise


# ── Field splitter ──────────────────────────────────────────────────────────


def _split_fields(fen: str) -> list[str]:
    text = fen.strip()
    if not text:
        raise FenError(FenErrorKind.EMPTY_INPUT, "FEN string is empty")
    tokens = text.split()
    if len(tokens) != _FIELD_COUNT:
        raise FenError(
            FenErrorKind.WRONG_FIELD_COUNT,
            "FEN must have 6 fields (piece placement, side to move, castling, "
            f"en-passant, halfmove, fullmove). Found: {len(tokens)}",
        )
    return tokens


# ── 1. Piece placement ──────────────────────────────────────────────────────


def _placement_error(kind: FenErrorKind, message: str) -> FenError:
    return FenError(kind, message, FenField.PLACEMENT)


def _parse_placement(placement: str) -> Board:
    ranks = placement.split("/")
    if len(ranks) != 8:
        raise _placement_error(
            FenErrorKind.WRONG_RANK_COUNT,
            "Piece placement must contain 8 ranks separated by '/'. "
            f"Found: {len(ranks)}",
        )
    return tuple(_parse_rank(row, text) for row, text in enumerate(ranks))


def _parse_rank(row: int, text: str) -> Rank:
    label = rank_label(row)
    squares: list[Piece | None] = []
    for ch in text:
        if ch in _DIGITS:
            empties = int(ch)
            if not (1 <= empties <= 8):
                raise _placement_error(
                    FenErrorKind.INVALID_EMPTY_COUNT,
                    "Digit in rank must be between 1 and 8. "
                    f"Found {ch!r} in rank {label}",
                )
            if len(squares) + empties > 8:
                raise _placement_error(
                    FenErrorKind.RANK_OVERFLOW,
                    f"Too many squares in rank {label} (empty run {ch!r}).",
                )
            squares.extend([None] * empties)
        elif ch in PIECE_CHARS:
            if len(squares) >= 8:
                raise _placement_error(
                    FenErrorKind.RANK_OVERFLOW,
                    f"Too many squares in rank {label} (extra piece {ch!r}).",
                )
            squares.append(Piece.from_char(ch))
        else:
            raise _placement_error(
                FenErrorKind.INVALID_PLACEMENT_CHAR,
                f"Invalid character {ch!r} in rank {label} of piece placement "
                "(allowed: pnbrqkPNBRQK and digits 1-8).",
            )
    if len(squares) != 8:
        raise _placement_error(
            FenErrorKind.INCOMPLETE_RANK,
            f"Rank {label} does not have exactly 8 squares (has {len(squares)}).",
        )
    return tuple(squares)


# ── 2. Side to move ─────────────────────────────────────────────────────────


def _parse_side_to_move(token: str) -> Color:
    if len(token) != 1:
        raise FenError(
            FenErrorKind.SIDE_TO_MOVE_WRONG_LENGTH,
            "Side-to-move field must be a single character 'w' or 'b'. "
            f"Found: {token!r}",
            FenField.SIDE_TO_MOVE,
        )
    side = _SIDES.get(token)
    if side is None:
        raise FenError(
            FenErrorKind.SIDE_TO_MOVE_INVALID_CHAR,
            f"Side-to-move must be 'w' or 'b'. Found: {token!r}",
            FenField.SIDE_TO_MOVE,
        )
    return side


# ── 3. Castling ─────────────────────────────────────────────────────────────


def _parse_castling(token: str) -> CastlingRights:
    if token == "-":
        return CastlingRights.NONE
    if not (1 <= len(token) <= 4):
        raise FenError(
            FenErrorKind.CASTLING_LENGTH_OUT_OF_RANGE,
            "Castling availability must be '-' or between 1 and 4 characters "
            f"from [KQkq]. Found: {token!r}",
            FenField.CASTLING,
        )
    castling = CastlingRights.NONE
    seen: set[str] = set()
    for ch in token:
        right = _CASTLING_CHARS.get(ch)
        if right is None:
            raise FenError(
                FenErrorKind.INVALID_CASTLING_CHAR,
                f"Invalid castling character {ch!r}. Allowed: K Q k q or '-'",
                FenField.CASTLING,
            )
        if ch in seen:
            raise FenError(
                FenErrorKind.DUPLICATE_CASTLING_CHAR,
                f"Duplicate castling character {ch!r} in castling field.",
                FenField.CASTLING,
            )
        seen.add(ch)
        castling |= right
    return castling


# ── 4. En passant ───────────────────────────────────────────────────────────


def _parse_en_passant(token: str) -> Square | None:
    if token == "-":
        return None
    if len(token) != 2:
        raise FenError(
            FenErrorKind.EN_PASSANT_WRONG_LENGTH,
            "En-passant field must be '-' or a square like 'e3' or 'd6'. "
            f"Found: {token!r}",
            FenField.EN_PASSANT,
        )
    file, rank = token
    if file not in FILES:
        raise FenError(
            FenErrorKind.EN_PASSANT_INVALID_FILE,
            f"En-passant file must be between 'a' and 'h'. Found: {file!r}",
            FenField.EN_PASSANT,
        )
    if rank not in _EN_PASSANT_RANK_CHARS:
        raise FenError(
            FenErrorKind.EN_PASSANT_INVALID_RANK,
            "En-passant rank must be '3' or '6' (square behind a pawn that "
            f"could be captured). Found: {rank!r}",
            FenField.EN_PASSANT,
        )
    return Square(file, int(rank))


# ── 5–6. Move counters ──────────────────────────────────────────────────────


def _counter_value(token: str) -> int | None:
    """Value of a digits-only *token*, or ``None`` above :data:`MAX_COUNTER`."""
    digits = token.lstrip("0") or "0"
    if len(digits) > len(_MAX_COUNTER_DIGITS):
        return None
    value = int(digits)
    return value if value <= MAX_COUNTER else None


def _parse_halfmove(token: str) -> int:
    if not _COUNTER_RE.fullmatch(token):
        raise FenError(
            FenErrorKind.HALFMOVE_NOT_NUMERIC,
            "Halfmove clock must be a non-negative integer (digits only). "
            f"Found: {token!r}",
            FenField.HALFMOVE,
        )
    value = _counter_value(token)
    if value is None:
        raise FenError(
            FenErrorKind.HALFMOVE_OUT_OF_RANGE,
            f"Halfmove clock number too large: {token}",
            FenField.HALFMOVE,
        )
    return value


def _parse_fullmove(token: str) -> int:
    if not _COUNTER_RE.fullmatch(token):
        raise FenError(
            FenErrorKind.FULLMOVE_NOT_NUMERIC,
            f"Fullmove number must be a positive integer. Found: {token!r}",
            FenField.FULLMOVE,
        )
    value = _counter_value(token)
    if value is None:
        raise FenError(
            FenErrorKind.FULLMOVE_OUT_OF_RANGE,
            f"Fullmove number too large: {token}",
            FenField.FULLMOVE,
        )
    if value < 1:
        raise FenError(
            FenErrorKind.FULLMOVE_MUST_BE_POSITIVE,
            f"Fullmove number must be >= 1. Found: {token!r}",
            FenField.FULLMOVE,
        )
    return value
