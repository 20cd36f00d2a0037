from typing import Dict, FrozenSet, List, Sequence, Tuple

from models.crossword import GRID_SIZE, Coordinate, Direction, Placement


def build_active_cells(placements: Sequence[Placement]) -> FrozenSet[Coordinate]:
    """Get coordinates of all playable cells"""
    cells = set()
    for placement in placements:
        cells.update(placement.cells)
    return frozenset(cells)


def build_reverse_index(placements: Sequence[Placement]) -> Dict[Coordinate, Tuple[Placement, ...]]:
    """Map every covered coordinate to the placements running through it.

    Placements are listed in the order they appear in ``placements``; the
    selection logic relies on that order when two words cross a cell.
    """
    index: Dict[Coordinate, List[Placement]] = {}
    for placement in placements:
        for coord in placement.cells:
            index.setdefault(coord, []).append(placement)
    return {coord: tuple(found) for coord, found in index.items()}


class PlacementIndex:
    """Read-only lookups derived once from the answer list.

    Precondition: every placement lies inside a ``grid_size`` square grid.
    """

    def __init__(self, placements: Sequence[Placement], grid_size: int = GRID_SIZE):
        self.placements: Tuple[Placement, ...] = tuple(placements)
        self.grid_size = grid_size
        self.active_cells = build_active_cells(self.placements)
        self._by_cell = build_reverse_index(self.placements)

    def is_active(self, coord: Tuple[int, int]) -> bool:
        return Coordinate(*coord) in self.active_cells

    def placements_at(self, coord: Tuple[int, int]) -> Tuple[Placement, ...]:
        return self._by_cell.get(Coordinate(*coord), ())

    def clue_numbers(self) -> Dict[Coordinate, int]:
        """Number word start cells 1, 2, ... in reading order"""
        starts = sorted({Coordinate(p.row, p.col) for p in self.placements})
        return {coord: number for number, coord in enumerate(starts, start=1)}

    def clue_number(self, placement: Placement) -> int:
        return self.clue_numbers()[Coordinate(placement.row, placement.col)]

    def clues(self, direction: Direction) -> List[Placement]:
        """Placements running in ``direction``, in reading order"""
        return sorted(
            (p for p in self.placements if p.direction == direction),
            key=lambda p: (p.row, p.col),
        )

    @property
    def across(self) -> List[Placement]:
        return self.clues(Direction.ACROSS)

    @property
    def down(self) -> List[Placement]:
        return self.clues(Direction.DOWN)
