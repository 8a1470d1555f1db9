"""Internationalisation strings for the fenview UI.

Usage::

    from fenview.ui.i18n import t, set_language

    set_language("Russian")
    print(t().parse_button)         # "Разобрать и показать"
    print(t().status_ok.format(side=t().color_white))

Parser error messages are produced by the core and are not translated.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Strings:
    # ── Main window ──────────────────────────────────────────────────────
    window_title: str
    fen_label: str
    parse_button: str

    status_ready: str
    status_ok: str  # e.g. "FEN OK. Side to move: {side}"
    status_invalid: str  # e.g. "Invalid FEN: {msg}"

    # Error dialog
    error_title: str
    error_body: str  # e.g. "Invalid FEN string:\n{msg}"

    # Info panel
    info_side_to_move: str  # e.g. "Side to move: {value}"
    info_castling: str
    info_en_passant: str
    info_halfmove: str
    info_fullmove: str
    info_none: str

    color_white: str
    color_black: str


_EN = Strings(
    window_title="FEN Viewer",
    fen_label="FEN:",
    parse_button="Parse && Show",
    status_ready="Enter FEN and press Parse & Show",
    status_ok="FEN OK. Side to move: {side}",
    status_invalid="Invalid FEN: {msg}",
    error_title="FEN Error",
    error_body="Invalid FEN string:\n{msg}",
    info_side_to_move="Side to move: {value}",
    info_castling="Castling: {value}",
    info_en_passant="En-passant: {value}",
    info_halfmove="Halfmove clock: {value}",
    info_fullmove="Fullmove number: {value}",
    info_none="None",
    color_white="White",
    color_black="Black",
)

_RU = Strings(
    window_title="Просмотр FEN",
    fen_label="FEN:",
    parse_button="Разобрать и показать",
    status_ready="Введите FEN и нажмите «Разобрать и показать»",
    status_ok="FEN корректен. Ход: {side}",
    status_invalid="Некорректный FEN: {msg}",
    error_title="Ошибка FEN",
    error_body="Некорректная строка FEN:\n{msg}",
    info_side_to_move="Очередь хода: {value}",
    info_castling="Рокировка: {value}",
    info_en_passant="Взятие на проходе: {value}",
    info_halfmove="Полуходы: {value}",
    info_fullmove="Номер хода: {value}",
    info_none="Нет",
    color_white="Белые",
    color_black="Чёрные",
)

_LOCALES: dict[str, Strings] = {
    "English": _EN,
    "Russian": _RU,
}

LANGUAGES: list[str] = list(_LOCALES.keys())

_current: Strings = _EN


def t() -> Strings:
    """Return the active locale strings."""
    return _current


def set_language(language: str) -> None:
    """Switch the global locale. Unknown names fall back to English."""
    global _current
    _current = _LOCALES.get(language, _EN)
