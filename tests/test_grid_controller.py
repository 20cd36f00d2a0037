"""Tests for services/grid_controller.py."""

import pytest

from models.crossword import Coordinate, Direction
from services.grid_controller import CellFlags, GridController


@pytest.fixture
def cat_controller(cat):
    requests = []
    controller = GridController([cat], grid_size=10, on_focus_request=requests.append)
    controller.requests = requests
    return controller


class TestTyping:
    def test_cat_scenario(self, cat_controller):
        controller = cat_controller
        controller.select_cell(0, 0)
        assert controller.current_direction is Direction.ACROSS

        assert controller.enter_text(0, 0, "c") == (0, 1)
        assert controller.enter_text(0, 1, "A") == (0, 2)
        controller.enter_text(0, 2, "T")

        assert [p.word for p in controller.correct_placements] == ["CAT"]
        for col in range(3):
            assert controller.is_correct(0, col)
        assert not controller.is_correct(0, 3)
        assert controller.is_solved()

    def test_wrong_last_letter(self, cat_controller):
        controller = cat_controller
        controller.select_cell(0, 0)
        for col, letter in enumerate("CAD"):
            controller.enter_text(0, col, letter)
        assert controller.correct_placements == []
        assert not controller.is_correct(0, 0)
        assert not controller.is_solved()

    def test_focus_requests_reach_host(self, cat_controller):
        controller = cat_controller
        controller.select_cell(0, 0)
        controller.enter_text(0, 0, "C")
        controller.enter_text(0, 1, "A")
        # last letter has nowhere to go
        assert controller.enter_text(0, 2, "T") is None
        assert controller.requests == [Coordinate(0, 1), Coordinate(0, 2)]
        assert controller.focused == (0, 2)

    def test_no_advance_without_direction(self, cat_controller):
        assert cat_controller.enter_text(0, 0, "C") is None
        assert cat_controller.cell_value(0, 0) == "C"
        assert cat_controller.requests == []

    def test_multi_character_input_rejected(self, cat_controller):
        controller = cat_controller
        controller.select_cell(0, 0)
        controller.enter_text(0, 0, "C")
        grid = controller.grid
        assert controller.enter_text(0, 0, "CAT") is None
        assert controller.grid is grid
        assert controller.cell_value(0, 0) == "C"

    def test_inactive_cell_ignored(self, cat_controller):
        grid = cat_controller.grid
        assert cat_controller.enter_text(5, 5, "X") is None
        assert cat_controller.grid is grid
        assert cat_controller.cell_value(5, 5) == ""

    def test_clearing_does_not_advance(self, cat_controller):
        controller = cat_controller
        controller.select_cell(0, 0)
        controller.enter_text(0, 0, "C")
        assert controller.enter_text(0, 0, "") is None
        assert controller.cell_value(0, 0) == ""


class TestArrows:
    def test_arrow_left_at_origin_is_noop(self, cat_controller):
        controller = cat_controller
        controller.select_cell(0, 0)
        assert controller.press_arrow(0, 0, "left") is None
        assert controller.focused == (0, 0)
        assert controller.requests == []

    def test_arrows_ignore_current_direction(self, crossing):
        controller = GridController(crossing)
        controller.select_cell(2, 2)
        assert controller.current_direction is Direction.DOWN
        assert controller.press_arrow(2, 2, "right") == (2, 3)
        assert controller.press_arrow(2, 3, "left") == (2, 2)
        assert controller.press_arrow(2, 2, "up") == (1, 2)

    def test_unknown_key(self, cat_controller):
        assert cat_controller.press_arrow(0, 0, "home") is None


class TestBackspace:
    def test_clears_filled_cell_without_moving(self, cat_controller):
        controller = cat_controller
        controller.select_cell(0, 0)
        controller.enter_text(0, 0, "C")
        controller.enter_text(0, 1, "A")
        assert controller.press_backspace(0, 1) is None
        assert controller.cell_value(0, 1) == ""
        assert controller.cell_value(0, 0) == "C"

    def test_empty_cell_moves_back(self, cat_controller):
        controller = cat_controller
        controller.select_cell(0, 1)
        assert controller.press_backspace(0, 1) == (0, 0)
        assert controller.focused == (0, 0)

    def test_empty_cell_at_word_start_stays(self, cat_controller):
        cat_controller.select_cell(0, 0)
        assert cat_controller.press_backspace(0, 0) is None

    def test_no_direction_no_move(self, cat_controller):
        assert cat_controller.press_backspace(0, 1) is None

    def test_clearing_breaks_correctness(self, cat_controller):
        controller = cat_controller
        controller.select_cell(0, 0)
        for col, letter in enumerate("CAT"):
            controller.enter_text(0, col, letter)
        controller.press_backspace(0, 2)
        assert controller.correct_placements == []


class TestSelection:
    def test_intersection_toggle_updates_highlight(self, crossing):
        across, down = crossing
        controller = GridController(crossing)

        controller.select_cell(2, 2)
        assert controller.current_direction is Direction.DOWN
        assert controller.highlight_set == set(down.cells)
        assert controller.active_clue_text == down.clue

        controller.select_cell(2, 2)
        assert controller.current_direction is Direction.ACROSS
        assert controller.highlight_set == set(across.cells)
        assert controller.active_clue_text == across.clue

    def test_leaving_intersection_keeps_direction_for_next_crossing(self, crossing):
        controller = GridController(crossing)
        controller.select_cell(2, 0)
        assert controller.current_direction is Direction.ACROSS
        controller.select_cell(2, 2)
        assert controller.current_direction is Direction.DOWN

    def test_inactive_click_clears(self, cat_controller):
        controller = cat_controller
        controller.select_cell(0, 0)
        controller.select_cell(4, 4)
        assert controller.current_direction is None
        assert controller.highlight_set == frozenset()
        assert controller.active_clue_text is None
        assert controller.focused == (0, 0)

    def test_cell_flags(self, cat_controller):
        controller = cat_controller
        controller.select_cell(0, 0)
        assert controller.cell_flags(0, 1) == CellFlags(active=True, correct=False, highlighted=True)
        assert controller.cell_flags(1, 1) == CellFlags(active=False, correct=False, highlighted=False)

    def test_is_solved_false_without_placements(self):
        assert not GridController([]).is_solved()
