"""MainWindow — FEN input, board and position summary."""

from __future__ import annotations

import logging

from PyQt6.QtWidgets import (
    QLabel,
    QMainWindow,
    QMessageBox,
    QStatusBar,
    QVBoxLayout,
    QWidget,
)

from fenview.core.errors import FenError
from fenview.core.notation import parse_fen
from fenview.core.position import Position
from fenview.ui.board.board_widget import BoardWidget
from fenview.ui.i18n import set_language, t
from fenview.ui.panels.fen_input import FenInput
from fenview.ui.panels.info_panel import InfoPanel, side_name
from fenview.ui.settings import AppSettings
from fenview.ui.styles.theme import BoardTheme, theme_by_name

_LOGGER = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Main application window for fenview."""

    def __init__(self, settings: AppSettings | None = None) -> None:
        super().__init__()
        self._settings = settings or AppSettings()
        self._position: Position | None = None
        self._last_error: FenError | None = None

        self.setMinimumSize(480, 520)
        self.resize(760, 640)

        self._setup_ui()
        self._connect_signals()
        self._apply_settings()

        if self._settings.parse_on_start:
            self.show_fen(self._settings.initial_fen)

    # ── UI setup ─────────────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        central = QWidget()
        self.setCentralWidget(central)
        root = QVBoxLayout(central)
        root.setContentsMargins(0, 0, 0, 0)
        root.setSpacing(6)

        self._fen_input = FenInput(self._settings.initial_fen)
        root.addWidget(self._fen_input)

        self._board = BoardWidget()
        root.addWidget(self._board, stretch=1)

        self._info_panel = InfoPanel()
        root.addWidget(self._info_panel)

        self._status_label = QLabel()
        status_bar = QStatusBar()
        status_bar.addWidget(self._status_label, 1)
        self.setStatusBar(status_bar)

    def _connect_signals(self) -> None:
        self._fen_input.fen_submitted.connect(self.show_fen)

    def _apply_settings(self) -> None:
        s = self._settings
        set_language(s.language)

        theme = theme_by_name(s.board_theme)
        if theme is None:
            _LOGGER.warning("Unknown board theme %r, using Classic", s.board_theme)
            theme = BoardTheme.default()
        self._board.set_theme(theme)
        self._board.set_font_size(s.square_font_size)
        self.retranslate_ui()

    def retranslate_ui(self) -> None:
        s = t()
        self.setWindowTitle(s.window_title)
        self._fen_input.retranslate_ui()
        self._info_panel.retranslate_ui()
        self._refresh_status()

    # ── Parsing ──────────────────────────────────────────────────────────

    def show_fen(self, fen: str) -> bool:
        """Parse *fen* and display it. Returns ``True`` on success."""
        result = parse_fen(fen)
        if isinstance(result, FenError):
            self._show_error(result)
            return False

        _LOGGER.debug("Showing FEN %r (%s to move)", fen.strip(), result.side_to_move)
        self._position = result
        self._last_error = None
        self._board.set_position(result)
        self._info_panel.set_position(result)
        self._refresh_status()
        return True

    def _show_error(self, error: FenError) -> None:
        _LOGGER.info("Invalid FEN (%s): %s", error.kind.value, error)
        self._last_error = error
        if self._settings.clear_board_on_error:
            self._position = None
            self._board.clear()
            self._info_panel.clear()
        self._refresh_status()

        if self._settings.show_error_dialog:
            s = t()
            QMessageBox.critical(
                self,
                s.error_title,
                s.error_body.format(msg=error),
            )

    def _refresh_status(self) -> None:
        s = t()
        if self._last_error is not None:
            text = s.status_invalid.format(msg=self._last_error)
        elif self._position is not None:
            text = s.status_ok.format(side=side_name(self._position.side_to_move))
        else:
            text = s.status_ready
        self._status_label.setText(text)

    # ── Accessors ────────────────────────────────────────────────────────

    @property
    def position(self) -> Position | None:
        """Last successfully parsed position, if any."""
        return self._position

    @property
    def last_error(self) -> FenError | None:
        return self._last_error

    def status_text(self) -> str:
        return self._status_label.text()
