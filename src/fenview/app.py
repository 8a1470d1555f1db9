"""Application entry point."""

from __future__ import annotations

import argparse
import logging
import sys

from fenview.ui.settings import AppSettings


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fenview",
        description="Validate a FEN string and show the position on a board.",
    )
    parser.add_argument(
        "fen",
        nargs="?",
        help="FEN to load and parse immediately (quote it in the shell)",
    )
    parser.add_argument("--theme", default=None, help="board theme name")
    parser.add_argument("--language", default=None, help="UI language")
    parser.add_argument(
        "--clear-on-error",
        action="store_true",
        help="clear the board when a FEN is rejected",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def settings_from_args(args: argparse.Namespace) -> AppSettings:
    """Overlay command-line options on the default settings."""
    settings = AppSettings()
    if args.fen is not None:
        settings.initial_fen = args.fen
        settings.parse_on_start = True
    if args.theme is not None:
        settings.board_theme = args.theme
    if args.language is not None:
        settings.language = args.language
    if args.clear_on_error:
        settings.clear_board_on_error = True
    return settings


def main(argv: list[str] | None = None) -> None:
    """Launch the fenview application."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    from fenview.ui.bootstrap import run_application

    sys.exit(run_application([sys.argv[0]], settings_from_args(args)))


if __name__ == "__main__":
    main()
