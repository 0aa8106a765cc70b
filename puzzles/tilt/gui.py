"""
Tilt GUI Module

PyQt5 window for playing tilt. Disks are drawn as colored circles, the
hole as a dark ring and blockers as solid gray squares.
"""

from typing import Tuple

from PyQt5.QtWidgets import QLabel

from puzzles.common.coordinates import Direction
from puzzles.common.gui import PuzzleWindow
from puzzles.common.updates import ModelUpdate

from .config import BLOCKER, BLUE, GREEN, HOLE
from .model import TiltModel

BOARD_COLOR = "#f5f5f5"

# Symbol -> extra style sheet rules on top of the empty cell
_SYMBOL_STYLES = {
    GREEN: "background-color: #4CAF50; border-radius: 28px;",
    BLUE: "background-color: #1976D2; border-radius: 28px;",
    HOLE: "background-color: #212121; border: 6px solid #757575; border-radius: 28px;",
    BLOCKER: "background-color: #616161;",
}


class TiltWindow(PuzzleWindow):
    """Main window for the tilt game."""

    WINDOW_TITLE = "Tilt"

    model: TiltModel

    def board_shape(self) -> Tuple[int, int]:
        return self.model.size, self.model.size

    def apply_move(self, direction: Direction) -> ModelUpdate:
        return self.model.tilt(direction)

    def style_cell(self, label: QLabel, row: int, col: int) -> None:
        symbol = self.model.grid_value(row, col)
        label.setText("")
        label.setStyleSheet(
            f"background-color: {BOARD_COLOR}; border: 1px solid #bdbdbd; "
            + _SYMBOL_STYLES.get(symbol, "")
        )
