import json
from dataclasses import dataclass, field
from typing import Any, List

from models.crossword import GRID_SIZE, Direction, Placement
from utils.logger import get_logger

LOGGER = get_logger(__name__)

REQUIRED_FIELDS = ("row", "col", "word", "direction", "clue")


@dataclass
class AnswerSet:
    """Placements loaded from an answers file"""
    title: str = "Untitled Crossword"
    size: int = GRID_SIZE
    placements: List[Placement] = field(default_factory=list)


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class AnswersParser:
    """Parser for JSON answers files.

    Two layouts are accepted: a bare list of placement objects, or an object
    with an ``answers`` list and optional ``title`` and ``size``. Each answer
    must have integer ``row``/``col``, a non-empty ``word`` and a ``clue``,
    and must fit inside the grid. Whether the answers agree where they cross
    is the puzzle author's business.
    """

    def parse(self, file_path: str) -> AnswerSet:
        """Parse an answers file and return its placements"""
        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                return self.parse_string(f.read())
        except UnicodeDecodeError as e:
            raise ValueError(f"Error reading answers file: {e}")

    def parse_string(self, text: str) -> AnswerSet:
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise ValueError(f"Error reading answers file: {e}")
        return self.parse_data(data)

    def parse_data(self, data: Any) -> AnswerSet:
        if isinstance(data, list):
            data = {"answers": data}
        if not isinstance(data, dict) or not isinstance(data.get("answers"), list):
            raise ValueError("Answers file must be a list of answers or an object with an 'answers' list")

        size = data.get("size", GRID_SIZE)
        if not _is_int(size) or size <= 0:
            raise ValueError(f"Invalid grid size: {size!r}")

        answer_set = AnswerSet(
            title=str(data.get("title", "Untitled Crossword")),
            size=size,
            placements=[self._parse_placement(i, entry, size) for i, entry in enumerate(data["answers"])],
        )
        LOGGER.info("Parsed %d answers for %r", len(answer_set.placements), answer_set.title)
        return answer_set

    def _parse_placement(self, position: int, entry: Any, size: int) -> Placement:
        if not isinstance(entry, dict):
            raise ValueError(f"Answer #{position} is not an object")
        missing = [name for name in REQUIRED_FIELDS if name not in entry]
        if missing:
            raise ValueError(f"Answer #{position} is missing {', '.join(missing)}")

        for name in ("row", "col"):
            if not _is_int(entry[name]):
                raise ValueError(f"Answer #{position} has non-integer {name} {entry[name]!r}")
        for name in ("word", "clue", "direction"):
            if not isinstance(entry[name], str):
                raise ValueError(f"Answer #{position} has non-text {name} {entry[name]!r}")

        try:
            direction = Direction(entry["direction"].lower())
        except ValueError:
            raise ValueError(f"Answer #{position} has unknown direction {entry['direction']!r}")

        word = entry["word"].strip().upper()
        if not word:
            raise ValueError(f"Answer #{position} has an empty word")

        placement = Placement(
            row=entry["row"],
            col=entry["col"],
            word=word,
            direction=direction,
            clue=entry["clue"],
        )
        if not all(0 <= row < size and 0 <= col < size for row, col in placement.cells):
            raise ValueError(
                f"Answer #{position} ({word}) does not fit in a {size}x{size} grid"
            )
        return placement
