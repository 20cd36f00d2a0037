from dataclasses import dataclass
from enum import Enum
from typing import Iterator, NamedTuple, Optional, Tuple

GRID_SIZE = 10

Grid = Tuple[Tuple[str, ...], ...]


class Direction(str, Enum):
    """Word orientation of a placement"""
    ACROSS = "across"
    DOWN = "down"

    def opposite(self) -> "Direction":
        return Direction.DOWN if self is Direction.ACROSS else Direction.ACROSS


class Coordinate(NamedTuple):
    row: int
    col: int


@dataclass(frozen=True)
class Placement:
    """One answer word: where it starts, which way it runs and its clue.

    Placements come from the answers file and are assumed well formed: ``word``
    is non-empty uppercase and every cell of the span lies inside the grid.
    """
    row: int
    col: int
    word: str
    direction: Direction
    clue: str

    @property
    def cells(self) -> Tuple[Coordinate, ...]:
        if self.direction == Direction.ACROSS:
            return tuple(Coordinate(self.row, self.col + i) for i in range(len(self.word)))
        return tuple(Coordinate(self.row + i, self.col) for i in range(len(self.word)))

    def __iter__(self) -> Iterator[Tuple[Coordinate, str]]:
        return iter(zip(self.cells, self.word))

    def covers(self, coord: Tuple[int, int]) -> bool:
        return self.letter_at(coord) is not None

    def letter_at(self, coord: Tuple[int, int]) -> Optional[str]:
        """Expected letter at ``coord``, or None if the word does not pass through it"""
        row, col = coord
        if self.direction == Direction.ACROSS:
            offset = col - self.col
            on_line = row == self.row
        else:
            offset = row - self.row
            on_line = col == self.col
        if on_line and 0 <= offset < len(self.word):
            return self.word[offset]
        return None


def empty_grid(size: int = GRID_SIZE) -> Grid:
    """Initialize empty grid"""
    return tuple(tuple("" for _ in range(size)) for _ in range(size))


def set_cell(grid: Grid, row: int, col: int, value: str) -> Grid:
    """Return a new grid snapshot with one cell replaced.

    Only single characters are accepted: a longer value (a paste, say) is
    rejected wholesale and the same grid is returned. An empty value clears
    the cell. Letters are stored uppercase.
    """
    if len(value) > 1:
        return grid
    new_row = grid[row][:col] + (value.upper(),) + grid[row][col + 1:]
    return grid[:row] + (new_row,) + grid[row + 1:]


def cell_value(grid: Grid, row: int, col: int) -> str:
    """Letter at (row, col); out of range reads as unfilled"""
    if 0 <= row < len(grid) and 0 <= col < len(grid[row]):
        return grid[row][col].upper()
    return ""
