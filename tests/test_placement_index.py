"""Tests for services/placement_index.py."""

from models.crossword import Direction, Placement
from services.placement_index import PlacementIndex, build_active_cells, build_reverse_index


class TestBuildActiveCells:
    def test_union_of_spans(self, crossing):
        active = build_active_cells(crossing)
        expected = {(2, c) for c in range(7)} | {(r, 2) for r in range(5)}
        assert active == expected

    def test_uncovered_cell_not_active(self, cat):
        active = build_active_cells([cat])
        assert (1, 0) not in active
        assert (0, 3) not in active

    def test_empty_placements(self):
        assert build_active_cells([]) == frozenset()


class TestBuildReverseIndex:
    def test_intersection_lists_both_in_order(self, crossing):
        index = build_reverse_index(crossing)
        assert index[(2, 2)] == tuple(crossing)
        assert index[(2, 0)] == (crossing[0],)
        assert index[(0, 2)] == (crossing[1],)

    def test_order_follows_placement_list(self, crossing):
        index = build_reverse_index(list(reversed(crossing)))
        assert index[(2, 2)] == (crossing[1], crossing[0])

    def test_inactive_cell_absent(self, cat):
        assert (5, 5) not in build_reverse_index([cat])


class TestPlacementIndex:
    def test_lookups(self, crossing):
        index = PlacementIndex(crossing)
        assert index.is_active((2, 2))
        assert not index.is_active((0, 0))
        assert index.placements_at((0, 0)) == ()
        assert len(index.placements_at((2, 2))) == 2

    def test_clue_lists_in_reading_order(self):
        late = Placement(4, 0, "EGG", Direction.ACROSS, "Breakfast")
        early = Placement(0, 1, "ANT", Direction.ACROSS, "Insect")
        down = Placement(0, 1, "ACE", Direction.DOWN, "Top card")
        index = PlacementIndex([late, down, early])
        assert index.across == [early, late]
        assert index.down == [down]

    def test_clue_numbers_share_start_cells(self):
        across = Placement(0, 1, "ANT", Direction.ACROSS, "Insect")
        down = Placement(0, 1, "ACE", Direction.DOWN, "Top card")
        other = Placement(2, 0, "BEE", Direction.ACROSS, "Buzzer")
        index = PlacementIndex([other, across, down])
        assert index.clue_numbers() == {(0, 1): 1, (2, 0): 2}
        assert index.clue_number(down) == 1
        assert index.clue_number(other) == 2
