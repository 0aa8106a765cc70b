"""
Tip-Over GUI Module

PyQt5 window for playing tip-over. Cells are colored by height; the
tipper and the goal get colored borders.
"""

from typing import Tuple

from PyQt5.QtWidgets import QLabel

from puzzles.common.coordinates import Coordinates, Direction
from puzzles.common.gui import PuzzleWindow
from puzzles.common.updates import ModelUpdate

from .model import TipOverModel

# Cell colors
EMPTY_COLOR = "#eeeeee"
CRATE_COLOR = "#c8a165"
TOWER_COLOR = "#8d5a2b"
TIPPER_COLOR = "#4CAF50"
GOAL_COLOR = "#d32f2f"


class TipOverWindow(PuzzleWindow):
    """Main window for the tip-over game."""

    WINDOW_TITLE = "Tip Over"

    model: TipOverModel

    def board_shape(self) -> Tuple[int, int]:
        return self.model.rows, self.model.cols

    def apply_move(self, direction: Direction) -> ModelUpdate:
        return self.model.move(direction)

    def style_cell(self, label: QLabel, row: int, col: int) -> None:
        """Color a cell by height and outline the tipper and goal."""
        height = self.model.grid_value(row, col)
        position = Coordinates(row, col)

        if height == 0:
            background = EMPTY_COLOR
        elif height == 1:
            background = CRATE_COLOR
        else:
            background = TOWER_COLOR

        border = "1px solid #999999"
        if position == self.model.tipper:
            border = f"4px solid {TIPPER_COLOR}"
        elif position == self.model.goal:
            border = f"4px solid {GOAL_COLOR}"

        label.setText(str(height) if height > 1 else "")
        label.setStyleSheet(
            f"background-color: {background}; border: {border}; "
            f"color: white; font-size: 18px; font-weight: bold;"
        )
