from typing import FrozenSet, List, Sequence, Tuple

from models.crossword import Coordinate, Grid, Placement, cell_value


def is_word_correct(grid: Grid, placement: Placement) -> bool:
    """Check if a word is correctly filled in"""
    for (row, col), letter in placement:
        if cell_value(grid, row, col) != letter:
            return False
    return True


def evaluate(grid: Grid, placements: Sequence[Placement]) -> List[Placement]:
    """Return the placements whose letters all match the grid.

    Recomputed from scratch after every mutation; the result keeps the order
    of ``placements``.
    """
    return [placement for placement in placements if is_word_correct(grid, placement)]


def is_cell_correct(coord: Tuple[int, int], correct_placements: Sequence[Placement]) -> bool:
    return any(placement.covers(coord) for placement in correct_placements)


def correct_cells(correct_placements: Sequence[Placement]) -> FrozenSet[Coordinate]:
    cells = set()
    for placement in correct_placements:
        cells.update(placement.cells)
    return frozenset(cells)
