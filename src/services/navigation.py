from typing import AbstractSet, Dict, Optional, Tuple

from models.crossword import GRID_SIZE, Coordinate, Direction

# arrow key -> (direction, forward)
ARROW_MOVES: Dict[str, Tuple[Direction, bool]] = {
    "left": (Direction.ACROSS, False),
    "right": (Direction.ACROSS, True),
    "up": (Direction.DOWN, False),
    "down": (Direction.DOWN, True),
}


def move_focus(
    row: int,
    col: int,
    direction: Direction,
    forward: bool,
    active_cells: AbstractSet[Coordinate],
    grid_size: int = GRID_SIZE,
) -> Optional[Coordinate]:
    """Return the neighbouring cell to focus, or None if focus stays put.

    Only one step is taken: an inactive or out-of-bounds neighbour means no
    move, there is no skipping over black cells.
    """
    step = 1 if forward else -1
    if direction == Direction.ACROSS:
        candidate = Coordinate(row, col + step)
    else:
        candidate = Coordinate(row + step, col)

    if not (0 <= candidate.row < grid_size and 0 <= candidate.col < grid_size):
        return None
    if candidate not in active_cells:
        return None
    return candidate
