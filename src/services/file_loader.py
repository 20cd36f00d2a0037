import os
from importlib import resources

from parsers.answers_parser import AnswerSet, AnswersParser
from utils.logger import get_logger

LOGGER = get_logger(__name__)

SAMPLE_ANSWERS = "sample_answers.json"


class FileLoaderService:
    """Service for loading answers files"""

    def __init__(self):
        self.parser = AnswersParser()

    def load_answers_file(self, file_path: str) -> AnswerSet:
        """Load placements from a .json answers file"""
        if not os.path.exists(file_path):
            raise FileNotFoundError(f"File not found: {file_path}")

        if not file_path.lower().endswith('.json'):
            raise ValueError("File must have .json extension")

        answer_set = self.parser.parse(file_path)
        LOGGER.info("Loaded %s (%dx%d, %d answers)", file_path, answer_set.size,
                    answer_set.size, len(answer_set.placements))
        return answer_set

    def load_sample(self) -> AnswerSet:
        """Load the puzzle bundled with the services package"""
        text = resources.files(__package__).joinpath(SAMPLE_ANSWERS).read_text(encoding="utf-8")
        return self.parser.parse_string(text)
