"""InfoPanel — textual summary of the non-board FEN fields."""

from __future__ import annotations

from PyQt6.QtWidgets import QLabel, QVBoxLayout, QWidget

from fenview.core.enums import Color
from fenview.core.position import Position
from fenview.ui.i18n import t


def side_name(color: Color) -> str:
    s = t()
    return s.color_white if color == Color.WHITE else s.color_black


class InfoPanel(QWidget):
    """Side to move, castling, en passant and both move counters."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._position: Position | None = None

        layout = QVBoxLayout(self)
        layout.setContentsMargins(8, 0, 8, 8)
        layout.setSpacing(2)

        self._side_label = QLabel()
        self._castling_label = QLabel()
        self._ep_label = QLabel()
        self._halfmove_label = QLabel()
        self._fullmove_label = QLabel()
        for label in self._labels():
            layout.addWidget(label)
            label.setVisible(False)

    def _labels(self) -> list[QLabel]:
        return [
            self._side_label,
            self._castling_label,
            self._ep_label,
            self._halfmove_label,
            self._fullmove_label,
        ]

    def set_position(self, position: Position) -> None:
        self._position = position
        self.retranslate_ui()

    def clear(self) -> None:
        self._position = None
        for label in self._labels():
            label.clear()
            label.setVisible(False)

    def retranslate_ui(self) -> None:
        pos = self._position
        if pos is None:
            return
        s = t()
        castling = pos.castling_letters or s.info_none
        ep = pos.en_passant.name if pos.en_passant is not None else s.info_none

        self._side_label.setText(
            s.info_side_to_move.format(value=side_name(pos.side_to_move))
        )
        self._castling_label.setText(s.info_castling.format(value=castling))
        self._ep_label.setText(s.info_en_passant.format(value=ep))
        self._halfmove_label.setText(s.info_halfmove.format(value=pos.halfmove_clock))
        self._fullmove_label.setText(
            s.info_fullmove.format(value=pos.fullmove_number)
        )
        for label in self._labels():
            label.setVisible(True)

    def lines(self) -> list[str]:
        """Currently displayed text, one entry per visible line."""
        return [label.text() for label in self._labels() if label.text()]
