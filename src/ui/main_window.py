import os
from typing import Optional

from PySide6.QtCore import QSettings
from PySide6.QtGui import QAction, QFont
from PySide6.QtWidgets import (
    QFileDialog,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QMessageBox,
    QVBoxLayout,
    QWidget,
)

from parsers.answers_parser import AnswerSet
from services.file_loader import FileLoaderService
from services.grid_controller import GridController
from ui.clues_panel import CluesPanel
from ui.crossword_widget import CrosswordGridWidget
from ui.current_clue_widget import CurrentClueWidget
from utils.logger import get_logger

LOGGER = get_logger(__name__)


class MainWindow(QMainWindow):
    """Main application window"""

    def __init__(self):
        super().__init__()
        self.file_loader_service = FileLoaderService()
        self.settings = QSettings("CrosswordGrid", "CrosswordGrid")
        self.controller: Optional[GridController] = None
        self.clues_panel: Optional[CluesPanel] = None
        self.solved_shown = False
        self.init_ui()

    def create_menu_bar(self):
        """Create the application menu bar"""
        file_menu = self.menuBar().addMenu("File")

        load_action = QAction("Load Answers", self)
        load_action.setShortcut("Ctrl+O")
        load_action.triggered.connect(self.load_answers)
        file_menu.addAction(load_action)

        file_menu.addSeparator()

        exit_action = QAction("Exit", self)
        exit_action.setShortcut("Ctrl+Q")
        exit_action.triggered.connect(self.close)
        file_menu.addAction(exit_action)

    def init_ui(self):
        """Initialize the user interface"""
        self.setWindowTitle("Crossword")
        self.resize(900, 600)
        self.create_menu_bar()

        central_widget = QWidget()
        self.setCentralWidget(central_widget)
        self.layout = QHBoxLayout(central_widget)

        left_panel = QWidget()
        self.left_layout = QVBoxLayout(left_panel)
        self.title_label = QLabel("No puzzle loaded")
        self.title_label.setFont(QFont("Arial", 14, QFont.Bold))
        self.left_layout.addWidget(self.title_label)

        self.current_clue_widget = CurrentClueWidget()
        self.left_layout.addWidget(self.current_clue_widget)

        self.crossword_widget = CrosswordGridWidget()
        self.crossword_widget.selection_changed.connect(self.on_selection_changed)
        self.crossword_widget.grid_changed.connect(self.on_grid_changed)
        self.crossword_widget.puzzle_solved.connect(self.on_puzzle_solved)
        self.left_layout.addWidget(self.crossword_widget, stretch=1)

        self.layout.addWidget(left_panel, stretch=3)

    def load_answers(self):
        """Load an answers file using a file dialog"""
        last_dir = self.settings.value("last_answers_dir", "")
        file_path, _ = QFileDialog.getOpenFileName(
            self, caption="Load Answers", filter="Answers Files (*.json);;All Files (*)", dir=last_dir
        )

        if file_path:
            self.settings.setValue("last_answers_dir", os.path.dirname(file_path))
            self.load_answers_from_path(file_path)

    def load_answers_from_path(self, file_path: str, show_error_dialog: bool = True) -> bool:
        """Load an answers file from an explicit filesystem path"""
        if not file_path:
            return False

        normalized_path = os.path.abspath(os.path.expanduser(file_path))
        try:
            answer_set = self.file_loader_service.load_answers_file(normalized_path)
        except (OSError, ValueError) as e:
            LOGGER.warning("Failed to load answers from %s: %s", normalized_path, e)
            if show_error_dialog:
                QMessageBox.warning(self, "Error", f"Failed to load answers:\n{e}")
            return False

        self.show_answer_set(answer_set)
        return True

    def load_sample(self) -> bool:
        """Open the bundled sample puzzle"""
        try:
            answer_set = self.file_loader_service.load_sample()
        except (OSError, ValueError) as e:
            LOGGER.warning("Failed to load the sample puzzle: %s", e)
            QMessageBox.warning(self, "Error", f"Failed to load the sample puzzle:\n{e}")
            return False

        self.show_answer_set(answer_set)
        return True

    def show_answer_set(self, answer_set: AnswerSet) -> None:
        self.controller = GridController(answer_set.placements, grid_size=answer_set.size)
        self.solved_shown = False
        self.title_label.setText(answer_set.title)

        if self.clues_panel:
            self.layout.removeWidget(self.clues_panel)
            self.clues_panel.deleteLater()
        self.clues_panel = CluesPanel(self.controller.index)
        self.layout.addWidget(self.clues_panel, stretch=2)

        self.crossword_widget.set_controller(self.controller)
        self.crossword_widget.setFocus()

    def on_selection_changed(self):
        """Refresh the clue bar and the clue list after a click"""
        self.current_clue_widget.set_clue(
            self.controller.current_direction, self.controller.active_clue_text
        )
        if self.clues_panel:
            self.clues_panel.highlight_clue(self.controller.selection.active_clue)

    def on_grid_changed(self):
        if self.clues_panel:
            self.clues_panel.grey_out_solved(self.controller.correct_placements)

    def on_puzzle_solved(self):
        if self.solved_shown:
            return
        self.solved_shown = True
        QMessageBox.information(self, "Solved", "Congratulations, every answer is correct!")
