"""Tests for ui/clues_panel.py."""

import pytest

pytest.importorskip("PySide6.QtWidgets")

from ui.clues_panel import clue_markup  # noqa: E402


class TestClueMarkup:
    def test_number_in_bold(self):
        assert clue_markup(3, "Feline") == "<b>3</b> Feline"

    def test_markup_characters_shown_literally(self):
        assert clue_markup(1, "Salt & <pepper>") == "<b>1</b> Salt &amp; &lt;pepper&gt;"

    def test_surrounding_whitespace_trimmed(self):
        assert clue_markup(2, "  Feline \n") == "<b>2</b> Feline"
