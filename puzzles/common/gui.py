"""
Puzzle GUI Module

Provides the PyQt5 window shared by the board puzzles: a message line,
a grid of cell labels, a direction pad and Load/Reset/Hint controls.
The window reaches its model only through ModelUpdate values, re-emitted
on a Qt signal.

Not imported by puzzles.common so that the text front ends work without Qt.
"""

import logging
from typing import List, Tuple

from PyQt5.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QGridLayout, QLabel,
    QPushButton, QFileDialog
)
from PyQt5.QtCore import Qt, pyqtSignal
from PyQt5.QtGui import QFont

from .coordinates import Direction
from .model import PuzzleModel
from .updates import ModelUpdate, UpdateKind

logger = logging.getLogger(__name__)

CELL_SIZE = 60


class PuzzleWindow(QMainWindow):
    """
    Main window for one interactive board puzzle.

    Subclasses set WINDOW_TITLE and implement board_shape(), style_cell()
    and apply_move(). (Qt's metaclass rules out ABCMeta here.)

    Signals:
        model_updated(ModelUpdate): Emitted after every model operation
    """

    model_updated = pyqtSignal(object)

    WINDOW_TITLE = "Puzzle"

    def __init__(self, model: PuzzleModel, data_dir: str = "data"):
        """
        Initialize the window.

        Args:
            model: Game model to display and drive
            data_dir: Starting directory for the Load dialog
        """
        super().__init__()
        self.model = model
        self.data_dir = data_dir
        self._cells: List[List[QLabel]] = []
        self._shape: Tuple[int, int] = (0, 0)
        self._board_layout: QGridLayout = None
        self.model_updated.connect(self._on_model_updated)
        self._init_ui()

    def board_shape(self) -> Tuple[int, int]:
        """Rows and columns of the model's current board."""
        raise NotImplementedError

    def style_cell(self, label: QLabel, row: int, col: int) -> None:
        """Set text and style sheet of one cell from the model."""
        raise NotImplementedError

    def apply_move(self, direction: Direction) -> ModelUpdate:
        """Forward a direction button to the model."""
        raise NotImplementedError

    def _init_ui(self):
        """Initialize the user interface components."""
        self.setWindowTitle(self.WINDOW_TITLE)

        central_widget = QWidget()
        self.setCentralWidget(central_widget)
        layout = QVBoxLayout()
        layout.setSpacing(10)
        layout.setContentsMargins(15, 15, 15, 15)
        central_widget.setLayout(layout)

        # Message line
        self.message_label = QLabel(PuzzleModel.LOADED + self.model.display_name)
        self.message_label.setAlignment(Qt.AlignCenter)
        message_font = QFont()
        message_font.setPointSize(12)
        self.message_label.setFont(message_font)
        layout.addWidget(self.message_label)

        # Board and controls side by side
        body = QHBoxLayout()
        board_widget = QWidget()
        self._board_layout = QGridLayout()
        self._board_layout.setSpacing(2)
        board_widget.setLayout(self._board_layout)
        body.addWidget(board_widget)
        body.addLayout(self._build_controls())
        layout.addLayout(body)

        self._build_board()

    def _build_controls(self) -> QVBoxLayout:
        """Create the direction pad and the Load/Reset/Hint buttons."""
        controls = QVBoxLayout()

        pad = QGridLayout()
        arrows = {
            Direction.NORTH: ("↑", 0, 1),
            Direction.WEST: ("←", 1, 0),
            Direction.EAST: ("→", 1, 2),
            Direction.SOUTH: ("↓", 2, 1),
        }
        for direction, (text, row, col) in arrows.items():
            button = QPushButton(text)
            button.setFixedSize(40, 40)
            button.clicked.connect(lambda _checked, d=direction: self._on_move(d))
            pad.addWidget(button, row, col)
        controls.addLayout(pad)

        controls.addSpacing(15)

        for text, handler in (("Load", self._on_load),
                              ("Reset", self._on_reset),
                              ("Hint", self._on_hint)):
            button = QPushButton(text)
            button.setMinimumHeight(35)
            button.clicked.connect(handler)
            controls.addWidget(button)

        controls.addStretch()
        return controls

    def _build_board(self):
        """(Re)create one label per board cell."""
        while self._board_layout.count():
            item = self._board_layout.takeAt(0)
            if item.widget():
                item.widget().deleteLater()

        rows, cols = self.board_shape()
        self._shape = (rows, cols)
        self._cells = []
        for r in range(rows):
            row_labels = []
            for c in range(cols):
                label = QLabel()
                label.setFixedSize(CELL_SIZE, CELL_SIZE)
                label.setAlignment(Qt.AlignCenter)
                self._board_layout.addWidget(label, r, c)
                row_labels.append(label)
            self._cells.append(row_labels)
        self._refresh_board()

    def _refresh_board(self):
        """Redraw every cell from the model."""
        for r, row_labels in enumerate(self._cells):
            for c, label in enumerate(row_labels):
                self.style_cell(label, r, c)

    def _emit_file_update(self, update: ModelUpdate):
        """Emit a load or reset update, rebuilding the grid if the board size changed."""
        if update.board_changed and self.board_shape() != self._shape:
            self._build_board()
        self.model_updated.emit(update)

    def _on_move(self, direction: Direction):
        """Handle a direction button click."""
        self.model_updated.emit(self.apply_move(direction))

    def _on_load(self):
        """Handle Load button click."""
        path, _ = QFileDialog.getOpenFileName(self, "Load puzzle", self.data_dir, "Text files (*.txt)")
        if not path:
            return
        self._emit_file_update(self.model.load(path))

    def _on_reset(self):
        """Handle Reset button click."""
        self._emit_file_update(self.model.reset())

    def _on_hint(self):
        """Handle Hint button click."""
        self.model_updated.emit(self.model.hint())

    def _on_model_updated(self, update: ModelUpdate):
        """Show the update message and redraw the board if it changed."""
        logger.debug(f"Model update: {update.kind.name} {update.message!r}")
        self.message_label.setText(update.message)
        if update.board_changed:
            self._refresh_board()
        if update.kind is UpdateKind.WON:
            logger.info(f"{self.WINDOW_TITLE} solved")
