#!/usr/bin/env python3
"""Crossword grid application entry point."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional, Tuple

from PySide6.QtWidgets import QApplication

from ui.main_window import MainWindow
from utils.logger import configure_logging


def _parse_command_line(argv: List[str]) -> Tuple[Optional[str], bool, List[str]]:
    """Return (answers_file, verbose, argv_for_qt)."""

    parser = argparse.ArgumentParser(add_help=False, allow_abbrev=False)
    parser.add_argument("answers_file", nargs="?", help="Path to a .json answers file to open")
    parser.add_argument("--verbose", action="store_true", help="Log debug output")
    args, qt_args = parser.parse_known_args(argv[1:])
    qt_argv = [argv[0], *qt_args]
    return args.answers_file, args.verbose, qt_argv


def main():
    """Main entry point for the application."""
    requested_file, verbose, qt_argv = _parse_command_line(sys.argv)
    configure_logging(logging.DEBUG if verbose else logging.INFO)

    app = QApplication(qt_argv)
    app.setApplicationName("Crossword")
    app.setApplicationVersion("1.0.0")

    window = MainWindow()
    if requested_file:
        window.load_answers_from_path(requested_file)
    else:
        window.load_sample()

    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
