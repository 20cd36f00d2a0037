import html
import math
from typing import Dict, Iterable, Optional

from PySide6.QtCore import Qt
from PySide6.QtGui import QFont, QTextDocument
from PySide6.QtWidgets import (
    QWidget,
    QHBoxLayout,
    QVBoxLayout,
    QLabel,
    QSizePolicy,
    QScrollArea,
)

from models.crossword import Direction, Placement
from services.placement_index import PlacementIndex


def clue_markup(number: int, clue: str) -> str:
    """Rich text for one clue line; the clue itself is shown literally"""
    return f"<b>{number}</b> {html.escape(clue.strip())}"


class ClueLabel(QLabel):
    """Label for one clue that can be highlighted, greyed out and copied."""

    def __init__(self, placement: Placement, parent=None):
        super().__init__(parent)
        self.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Fixed)
        self.setAlignment(Qt.AlignLeft | Qt.AlignTop)
        self.setWordWrap(True)
        self.setTextFormat(Qt.RichText)
        self.setTextInteractionFlags(Qt.TextSelectableByMouse)
        self.placement = placement
        self.stylesheet = {"highlight": "", "grey": ""}

    def setText(self, text):
        """Set clue text and resize the label to tightly wrap the content."""
        super().setText(text)
        self._shrink_to_fit()

    def resizeEvent(self, event):  # noqa: N802
        super().resizeEvent(event)
        self._shrink_to_fit()

    def set_highlighted(self, highlighted: bool) -> None:
        self.stylesheet["highlight"] = "background-color: #47c8ff;" if highlighted else ""
        self.applyStyleSheet()

    def set_grey_text(self, make_grey: bool) -> None:
        self.stylesheet["grey"] = "color: grey;" if make_grey else ""
        self.applyStyleSheet()

    def applyStyleSheet(self):
        self.setStyleSheet(self.stylesheet["highlight"] + self.stylesheet["grey"])

    def _shrink_to_fit(self) -> None:
        """Match label height to wrapped text height."""
        available_width = self.width()
        if available_width <= 0:
            return

        margins = self.contentsMargins()
        text_width = max(1, available_width - (margins.left() + margins.right()))

        doc = QTextDocument()
        doc.setDefaultFont(self.font())
        doc.setHtml(self.text())
        doc.setDocumentMargin(0)
        doc.setTextWidth(text_width)

        height = math.ceil(max(doc.size().height(), self.fontMetrics().height()))
        height += margins.top() + margins.bottom()

        self.setMinimumHeight(height)
        self.setMaximumHeight(height)


class CluesPanel(QWidget):
    """Container showing across and down clues side by side."""

    def __init__(self, index: PlacementIndex, parent=None):
        super().__init__(parent)
        self.layout = QHBoxLayout()
        self.layout.setContentsMargins(5, 5, 5, 5)
        self.layout.setSpacing(10)
        self.setLayout(self.layout)
        self.clues: Dict[Placement, ClueLabel] = {}
        self._scroll_areas: Dict[Direction, QScrollArea] = {}
        self._highlighted: Optional[Placement] = None
        numbers = index.clue_numbers()
        for direction in Direction:
            self._create_section(direction, index.clues(direction), numbers)

    def _create_section(self, direction: Direction, placements, numbers) -> None:
        container = QWidget(self)
        container.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Expanding)

        section_layout = QVBoxLayout()
        section_layout.setContentsMargins(0, 0, 0, 0)
        section_layout.setSpacing(4)
        container.setLayout(section_layout)

        label = QLabel(direction.value.upper())
        label.setFont(QFont("Arial", 11, QFont.Bold))
        section_layout.addWidget(label)

        scroll_area = QScrollArea(container)
        scroll_area.setWidgetResizable(True)
        scroll_area.setHorizontalScrollBarPolicy(Qt.ScrollBarAlwaysOff)
        section_layout.addWidget(scroll_area)
        self._scroll_areas[direction] = scroll_area

        scroll_content = QWidget(scroll_area)
        scroll_layout = QVBoxLayout()
        scroll_layout.setContentsMargins(0, 0, 0, 0)
        scroll_layout.setSpacing(4)
        scroll_content.setLayout(scroll_layout)
        scroll_area.setWidget(scroll_content)

        for placement in placements:
            clue_label = ClueLabel(placement, scroll_content)
            number = numbers[(placement.row, placement.col)]
            clue_label.setText(clue_markup(number, placement.clue))
            self.clues[placement] = clue_label
            scroll_layout.addWidget(clue_label)
        scroll_layout.addStretch()

        self.layout.addWidget(container)

    def highlight_clue(self, placement: Optional[Placement]) -> None:
        """Highlight the active clue and reset the previous one."""
        if placement == self._highlighted:
            return
        if self._highlighted in self.clues:
            self.clues[self._highlighted].set_highlighted(False)

        clue_label = self.clues.get(placement)
        if clue_label:
            clue_label.set_highlighted(True)
            self._scroll_areas[placement.direction].ensureWidgetVisible(clue_label)
            self._highlighted = placement
        else:
            self._highlighted = None

    def grey_out_solved(self, correct: Iterable[Placement]) -> None:
        """Grey out clues whose words are filled in correctly"""
        solved = set(correct)
        for placement, clue_label in self.clues.items():
            clue_label.set_grey_text(placement in solved)
