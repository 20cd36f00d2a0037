from __future__ import annotations

from typing import Dict, Optional

from PySide6.QtCore import Qt, Signal, QRectF
from PySide6.QtGui import QBrush, QColor, QFont, QPainter, QPen
from PySide6.QtWidgets import QWidget

from models.crossword import Coordinate
from services.grid_controller import GridController
from utils.logger import get_logger

LOGGER = get_logger(__name__)

ARROW_KEYS = {
    Qt.Key_Left: "left",
    Qt.Key_Right: "right",
    Qt.Key_Up: "up",
    Qt.Key_Down: "down",
}

FOCUS_COLOR = QColor(255, 255, 150)
HIGHLIGHT_COLOR = QColor(150, 200, 255)
CORRECT_COLOR = QColor(170, 230, 170)


class CrosswordGridWidget(QWidget):
    """Paints a GridController and feeds it mouse and keyboard events.

    The widget is the focus host: the controller requests a cell and the
    widget moves its cursor there.
    """

    selection_changed = Signal()
    grid_changed = Signal()
    puzzle_solved = Signal()

    def __init__(self, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self.controller: Optional[GridController] = None
        self.clue_numbers: Dict[Coordinate, int] = {}
        self.selected_row = 0
        self.selected_col = 0
        self.cell_size = 1
        self.font_size = 16
        self.setMinimumSize(200, 200)
        self.setFocusPolicy(Qt.StrongFocus)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def set_controller(self, controller: GridController) -> None:
        self.controller = controller
        self.clue_numbers = controller.index.clue_numbers()
        controller.on_focus_request = self.focus_cell
        self._recompute_cell_metrics()
        self.select_first_square()
        self.update()

    def select_first_square(self):
        size = self.controller.grid_size
        for row in range(size):
            for col in range(size):
                if self.controller.is_active(row, col):
                    self._select(row, col)
                    return

    def focus_cell(self, coord: Coordinate) -> None:
        """Move the cursor to a cell the controller asked for"""
        self.selected_row, self.selected_col = coord
        self.update()

    def focusNextPrevChild(self, next: bool) -> bool:
        return False  # keep Tab inside the grid

    # ------------------------------------------------------------------
    # Qt event handlers
    # ------------------------------------------------------------------
    def resizeEvent(self, event):  # noqa: N802
        super().resizeEvent(event)
        if self.controller:
            self._recompute_cell_metrics()
            self.update()

    def paintEvent(self, event):  # noqa: N802 (Qt override)
        if not self.controller:
            return
        painter = QPainter(self)
        painter.setRenderHint(QPainter.Antialiasing)
        for row in range(self.controller.grid_size):
            for col in range(self.controller.grid_size):
                self._draw_cell(painter, row, col)
        self._draw_grid(painter)

    def mousePressEvent(self, event):  # noqa: N802
        if not self.controller or event.button() != Qt.MouseButton.LeftButton:
            return
        col = int(event.position().x() // self.cell_size)
        row = int(event.position().y() // self.cell_size)
        size = self.controller.grid_size
        if 0 <= row < size and 0 <= col < size and self.controller.is_active(row, col):
            self.setFocus()
            self._select(row, col)

    def keyPressEvent(self, event):  # noqa: N802
        if not self.controller:
            return
        key = event.key()
        row, col = self.selected_row, self.selected_col
        if key in ARROW_KEYS:
            self.controller.press_arrow(row, col, ARROW_KEYS[key])
        elif key in (Qt.Key_Backspace, Qt.Key_Delete):
            self.controller.press_backspace(row, col)
            self._after_edit()
        elif Qt.Key_A <= key <= Qt.Key_Z:
            self.controller.enter_text(row, col, event.text()[:1] or chr(key))
            self._after_edit()
        else:
            super().keyPressEvent(event)
            return
        self.update()

    # ------------------------------------------------------------------
    # Drawing helpers
    # ------------------------------------------------------------------
    def _recompute_cell_metrics(self) -> None:
        """Update cell size based on the current widget dimensions."""
        size = self.controller.grid_size
        rect = self.contentsRect()
        available = min(rect.width() or self.width(), rect.height() or self.height())
        if available <= 0:
            return
        self.cell_size = max(1, available // size)
        self.font_size = max(6, int(self.cell_size * 0.55))

    def _draw_grid(self, painter: QPainter) -> None:
        painter.setPen(QPen(Qt.gray, 2))
        extent = self.controller.grid_size * self.cell_size
        for i in range(self.controller.grid_size + 1):
            offset = min(i * self.cell_size, extent - 1)
            painter.drawLine(0, offset, extent - 1, offset)
            painter.drawLine(offset, 0, offset, extent - 1)

    def _draw_cell(self, painter: QPainter, row: int, col: int) -> None:
        x = col * self.cell_size
        y = row * self.cell_size
        flags = self.controller.cell_flags(row, col)

        if not flags.active:
            painter.fillRect(x, y, self.cell_size, self.cell_size, QBrush(Qt.black))
            return

        if (row, col) == (self.selected_row, self.selected_col):
            color = FOCUS_COLOR
        elif flags.highlighted:
            color = HIGHLIGHT_COLOR
        elif flags.correct:
            color = CORRECT_COLOR
        else:
            color = QColor(Qt.white)
        painter.fillRect(x, y, self.cell_size, self.cell_size, QBrush(color))

        number = self.clue_numbers.get((row, col))
        if number:
            painter.save()
            small_font = QFont("Arial")
            small_font.setPointSizeF(max(1.0, self.cell_size * 0.22))
            painter.setFont(small_font)
            padding = self.cell_size * 0.08
            painter.drawText(
                QRectF(x + padding, y + padding, self.cell_size / 2, self.cell_size / 2),
                Qt.AlignLeft | Qt.AlignTop,
                str(number),
            )
            painter.restore()

        text = self.controller.cell_value(row, col)
        if not text:
            return
        painter.save()
        painter.setFont(QFont("Arial", self.font_size, QFont.Normal))
        # correct words stay green on the letter even under the highlight
        painter.setPen(QPen(Qt.darkGreen if flags.correct else Qt.black))
        painter.drawText(QRectF(x, y, self.cell_size, self.cell_size), Qt.AlignCenter, text)
        painter.restore()

    # ------------------------------------------------------------------
    # Selection and editing
    # ------------------------------------------------------------------
    def _select(self, row: int, col: int) -> None:
        self.controller.select_cell(row, col)
        self.focus_cell(Coordinate(row, col))
        self.selection_changed.emit()

    def _after_edit(self) -> None:
        self.grid_changed.emit()
        if self.controller.is_solved():
            LOGGER.info("Puzzle solved")
            self.puzzle_solved.emit()
