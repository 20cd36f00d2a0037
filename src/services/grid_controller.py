from __future__ import annotations

from typing import Callable, FrozenSet, List, NamedTuple, Optional, Sequence, Tuple

from models.crossword import (
    GRID_SIZE,
    Coordinate,
    Direction,
    Grid,
    Placement,
    cell_value,
    empty_grid,
    set_cell,
)
from services.evaluator import correct_cells, evaluate
from services.navigation import ARROW_MOVES, move_focus
from services.placement_index import PlacementIndex
from services.selection import SelectionState, select_cell
from utils.logger import get_logger

LOGGER = get_logger(__name__)

FocusCallback = Callable[[Coordinate], None]


class CellFlags(NamedTuple):
    active: bool
    correct: bool
    highlighted: bool


class GridController:
    """Owns the grid and selection state of one puzzle.

    Every public method handles one user event and runs to completion. Focus
    moves are only requested: the host passes ``on_focus_request`` and is
    responsible for moving real input focus to the coordinate it receives.
    """

    def __init__(
        self,
        placements: Sequence[Placement],
        grid_size: int = GRID_SIZE,
        on_focus_request: Optional[FocusCallback] = None,
    ):
        self.index = PlacementIndex(placements, grid_size)
        self.grid_size = grid_size
        self.on_focus_request = on_focus_request
        self.grid: Grid = empty_grid(grid_size)
        self.selection = SelectionState()
        self.focused: Optional[Coordinate] = None
        self._correct: List[Placement] = []
        self._correct_cells: FrozenSet[Coordinate] = frozenset()

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    @property
    def placements(self) -> Tuple[Placement, ...]:
        return self.index.placements

    @property
    def correct_placements(self) -> List[Placement]:
        return list(self._correct)

    @property
    def current_direction(self) -> Optional[Direction]:
        return self.selection.current_direction

    @property
    def active_clue_text(self) -> Optional[str]:
        return self.selection.active_clue_text

    @property
    def highlight_set(self) -> FrozenSet[Coordinate]:
        return self.selection.highlighted_cells

    def is_active(self, row: int, col: int) -> bool:
        return self.index.is_active((row, col))

    def is_correct(self, row: int, col: int) -> bool:
        return Coordinate(row, col) in self._correct_cells

    def is_highlighted(self, row: int, col: int) -> bool:
        return Coordinate(row, col) in self.selection.highlighted_cells

    def cell_value(self, row: int, col: int) -> str:
        return cell_value(self.grid, row, col)

    def cell_flags(self, row: int, col: int) -> CellFlags:
        return CellFlags(
            active=self.is_active(row, col),
            correct=self.is_correct(row, col),
            highlighted=self.is_highlighted(row, col),
        )

    def is_solved(self) -> bool:
        return bool(self.placements) and len(self._correct) == len(self.placements)

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------
    def select_cell(self, row: int, col: int) -> SelectionState:
        """Handle a click (or focus) on a cell"""
        self.selection = select_cell((row, col), self.selection.current_direction, self.index)
        if self.index.is_active((row, col)):
            self.focused = Coordinate(row, col)
        LOGGER.debug(
            "Cell selected: (%s, %s) direction=%s clue=%r",
            row,
            col,
            self.selection.current_direction,
            self.selection.active_clue_text,
        )
        return self.selection

    def enter_text(self, row: int, col: int, value: str) -> Optional[Coordinate]:
        """Apply typed text to a cell and auto-advance along the selected word.

        Returns the coordinate focus was moved to, if any.
        """
        if not self.index.is_active((row, col)):
            LOGGER.debug("Ignoring input on inactive cell (%s, %s)", row, col)
            return None
        if len(value) > 1:
            LOGGER.debug("Rejected multi-character input %r at (%s, %s)", value, row, col)
            return None

        self.focused = Coordinate(row, col)
        self._set_grid(set_cell(self.grid, row, col, value))

        direction = self.selection.current_direction
        if value and direction is not None:
            return self._request_focus(move_focus(
                row, col, direction, True, self.index.active_cells, self.grid_size
            ))
        return None

    def press_arrow(self, row: int, col: int, key: str) -> Optional[Coordinate]:
        """Move one cell in the arrow's direction, whatever word is selected"""
        if key not in ARROW_MOVES:
            return None
        direction, forward = ARROW_MOVES[key]
        return self._request_focus(move_focus(
            row, col, direction, forward, self.index.active_cells, self.grid_size
        ))

    def press_backspace(self, row: int, col: int) -> Optional[Coordinate]:
        """Clear a filled cell, or step back along the selected word from an empty one"""
        if not self.index.is_active((row, col)):
            return None
        if self.cell_value(row, col):
            self._set_grid(set_cell(self.grid, row, col, ""))
            return None

        direction = self.selection.current_direction
        if direction is None:
            return None
        return self._request_focus(move_focus(
            row, col, direction, False, self.index.active_cells, self.grid_size
        ))

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------
    def _set_grid(self, grid: Grid) -> None:
        self.grid = grid
        self._correct = evaluate(grid, self.placements)
        self._correct_cells = correct_cells(self._correct)

    def _request_focus(self, target: Optional[Coordinate]) -> Optional[Coordinate]:
        if target is None:
            return None
        self.focused = target
        LOGGER.debug("Focus requested at (%s, %s)", target.row, target.col)
        if self.on_focus_request is not None:
            self.on_focus_request(target)
        return target
