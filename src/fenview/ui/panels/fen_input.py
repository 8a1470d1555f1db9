"""FenInput — FEN text field with a parse button."""

from __future__ import annotations

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import QHBoxLayout, QLabel, QLineEdit, QPushButton, QWidget

from fenview.ui.i18n import t


class FenInput(QWidget):
    """Single-line FEN editor.

    Signals:
        fen_submitted(str): Raw text of the field, on button click or Return.
    """

    fen_submitted = pyqtSignal(str)

    def __init__(self, initial_fen: str = "", parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._setup_ui()
        self._edit.setText(initial_fen)
        self.retranslate_ui()

    def _setup_ui(self) -> None:
        layout = QHBoxLayout(self)
        layout.setContentsMargins(8, 8, 8, 0)
        layout.setSpacing(6)

        self._label = QLabel()
        layout.addWidget(self._label)

        self._edit = QLineEdit()
        self._edit.setFont(QFont("Adwaita Mono", 14))
        self._edit.returnPressed.connect(self._submit)
        layout.addWidget(self._edit, stretch=1)

        self._btn_parse = QPushButton()
        self._btn_parse.setMinimumHeight(32)
        self._btn_parse.clicked.connect(self._submit)
        layout.addWidget(self._btn_parse)

    def retranslate_ui(self) -> None:
        s = t()
        self._label.setText(s.fen_label)
        self._btn_parse.setText(s.parse_button)

    def text(self) -> str:
        return self._edit.text()

    def set_text(self, fen: str) -> None:
        self._edit.setText(fen)

    def _submit(self) -> None:
        self.fen_submitted.emit(self._edit.text())
