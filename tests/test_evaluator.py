"""Tests for services/evaluator.py."""

from models.crossword import Direction, Placement, empty_grid, set_cell
from services.evaluator import correct_cells, evaluate, is_cell_correct, is_word_correct


def _fill(grid, placement, word=None):
    for (row, col), letter in zip(placement.cells, word or placement.word):
        grid = set_cell(grid, row, col, letter)
    return grid


class TestIsWordCorrect:
    def test_filled_word_matches(self, cat):
        assert is_word_correct(_fill(empty_grid(), cat), cat)

    def test_lowercase_input_matches(self, cat):
        grid = (("c", "a", "t"),)
        assert is_word_correct(grid, cat)

    def test_empty_cells_never_match(self, cat):
        assert not is_word_correct(empty_grid(), cat)
        grid = set_cell(set_cell(empty_grid(), 0, 0, "C"), 0, 1, "A")
        assert not is_word_correct(grid, cat)

    def test_out_of_range_cells_read_empty(self):
        placement = Placement(0, 1, "AB", Direction.ACROSS, "Runs off")
        grid = (("", "A"),)
        assert not is_word_correct(grid, placement)


class TestEvaluate:
    def test_only_correct_placements(self, crossing):
        across, down = crossing
        grid = _fill(empty_grid(), across)
        assert evaluate(grid, crossing) == [across]

    def test_wrong_letter(self, cat):
        grid = _fill(empty_grid(), cat, "CAD")
        assert evaluate(grid, [cat]) == []

    def test_keeps_input_order(self):
        first = Placement(0, 0, "AT", Direction.ACROSS, "Near")
        second = Placement(0, 0, "AS", Direction.DOWN, "Like")
        grid = _fill(_fill(empty_grid(), first), second)
        assert evaluate(grid, [second, first]) == [second, first]

    def test_idempotent(self, crossing):
        grid = _fill(empty_grid(), crossing[1])
        assert evaluate(grid, crossing) == evaluate(grid, crossing)


class TestCellCorrectness:
    def test_is_cell_correct(self, cat):
        assert is_cell_correct((0, 2), [cat])
        assert not is_cell_correct((0, 3), [cat])
        assert not is_cell_correct((0, 0), [])

    def test_correct_cells(self, cat):
        assert correct_cells([cat]) == {(0, 0), (0, 1), (0, 2)}
        assert correct_cells([]) == frozenset()
