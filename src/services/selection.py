from dataclasses import dataclass, field
from typing import FrozenSet, Optional, Sequence, Tuple

from models.crossword import Coordinate, Direction, Placement
from services.placement_index import PlacementIndex

# Direction assumed before the first click; an intersection toggles away from
# it, so the first click on a crossing cell selects the down word.
DEFAULT_PREVIOUS_DIRECTION = Direction.ACROSS


@dataclass(frozen=True)
class SelectionState:
    """What the last click selected.

    ``highlighted_cells`` is always the full span of ``active_clue`` and is
    empty when no clue resolves.
    """
    selected_placements: Tuple[Placement, ...] = ()
    current_direction: Optional[Direction] = None
    highlighted_cells: FrozenSet[Coordinate] = field(default_factory=frozenset)
    active_clue: Optional[Placement] = None

    @property
    def active_clue_text(self) -> Optional[str]:
        return self.active_clue.clue if self.active_clue else None


def resolve_direction(
    placements: Sequence[Placement], current_direction: Optional[Direction]
) -> Optional[Direction]:
    """Pick the direction for a clicked cell covered by ``placements``"""
    if not placements:
        return None
    if len(placements) == 1:
        return placements[0].direction
    previous = current_direction or DEFAULT_PREVIOUS_DIRECTION
    return previous.opposite()


def select_cell(
    coord: Tuple[int, int],
    current_direction: Optional[Direction],
    index: PlacementIndex,
) -> SelectionState:
    """Work out the active clue after a click on ``coord``.

    A cell inside one word selects that word. A cell where two words cross
    toggles between them on repeated clicks. A cell outside every word
    clears the selection.
    """
    placements = index.placements_at(coord)
    direction = resolve_direction(placements, current_direction)
    active = next((p for p in placements if p.direction == direction), None)
    if active is None:
        return SelectionState(selected_placements=placements, current_direction=direction)
    return SelectionState(
        selected_placements=placements,
        current_direction=direction,
        highlighted_cells=frozenset(active.cells),
        active_clue=active,
    )
