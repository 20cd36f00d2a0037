from typing import Optional

from PySide6.QtCore import Qt
from PySide6.QtGui import QFont
from PySide6.QtWidgets import QLabel, QHBoxLayout, QVBoxLayout, QWidget

from models.crossword import Direction

PLACEHOLDER_TEXT = "Select a cell to see clue"


class CurrentClueWidget(QWidget):
    """Bar above the grid showing the direction and text of the active clue"""

    def __init__(self, parent: Optional[QWidget] = None):
        super().__init__(parent)
        shared_bg = "#47c8ff"

        # self.container widget paints the background; spacing inherits its color.
        self.container = QWidget(self)
        self.container.setAutoFillBackground(True)
        self.container.setStyleSheet(f"background-color: {shared_bg};")

        self.current_clue_label = QLabel(PLACEHOLDER_TEXT, self.container)
        self.current_clue_label.setTextFormat(Qt.PlainText)
        self.current_clue_label.setTextInteractionFlags(Qt.TextSelectableByMouse)
        self.current_clue_label.setFont(QFont("Arial", 12))
        self.current_clue_label.setWordWrap(True)
        self.current_clue_label.setAlignment(Qt.AlignLeft | Qt.AlignVCenter)
        self.current_clue_label.setMinimumHeight(50)

        self.direction_label = QLabel()
        self.direction_label.setFixedWidth(70)
        font = QFont("Arial", 12)
        font.setBold(True)
        self.direction_label.setFont(font)
        self.direction_label.setStyleSheet("background-color: transparent;")

        row_layout = QHBoxLayout(self.container)
        row_layout.setContentsMargins(0, 0, 0, 0)
        row_layout.addSpacing(12)
        row_layout.addWidget(self.direction_label)
        row_layout.addSpacing(12)
        row_layout.addWidget(self.current_clue_label)
        self.container.setLayout(row_layout)

        outer_layout = QVBoxLayout(self)
        outer_layout.setContentsMargins(0, 0, 0, 0)
        outer_layout.addWidget(self.container)
        self.setLayout(outer_layout)

    def set_clue(self, direction: Optional[Direction], text: Optional[str]) -> None:
        self.direction_label.setText(direction.value.upper() if direction else "")
        self.current_clue_label.setText(text or PLACEHOLDER_TEXT)
