import pytest

from models.crossword import Direction, Placement


@pytest.fixture
def cat():
    return Placement(0, 0, "CAT", Direction.ACROSS, "Feline")


@pytest.fixture
def crossing():
    """Two words sharing cell (2, 2)."""
    across = Placement(2, 0, "ACROSS5", Direction.ACROSS, "Horizontal entry")
    down = Placement(0, 2, "DOWN3", Direction.DOWN, "Vertical entry")
    return [across, down]
