"""Tests for InfoPanel formatting."""

from __future__ import annotations

from fenview.core.notation import position_from_fen
from fenview.ui.i18n import set_language
from fenview.ui.panels.info_panel import InfoPanel


def test_shows_all_fields() -> None:
    panel = InfoPanel()
    panel.set_position(position_from_fen("8/8/8/8/8/8/8/8 b Kq d6 3 42"))

    assert panel.lines() == [
        "Side to move: Black",
        "Castling: Kq",
        "En-passant: d6",
        "Halfmove clock: 3",
        "Fullmove number: 42",
    ]


def test_none_for_missing_castling_and_en_passant() -> None:
    panel = InfoPanel()
    panel.set_position(position_from_fen("8/8/8/8/8/8/8/8 w - - 0 1"))

    lines = panel.lines()
    assert "Castling: None" in lines
    assert "En-passant: None" in lines
    assert "Side to move: White" in lines


def test_clear_empties_panel() -> None:
    panel = InfoPanel()
    panel.set_position(position_from_fen("8/8/8/8/8/8/8/8 w - - 0 1"))
    panel.clear()
    assert panel.lines() == []


def test_retranslate_switches_language() -> None:
    panel = InfoPanel()
    panel.set_position(position_from_fen("8/8/8/8/8/8/8/8 w - - 0 1"))

    set_language("Russian")
    panel.retranslate_ui()

    assert panel.lines()[0] == "Очередь хода: Белые"
    assert "Рокировка: Нет" in panel.lines()
