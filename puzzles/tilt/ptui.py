"""
Tilt PTUI - Text front end for the tilt game.
"""

from puzzles.common.ptui import PuzzlePTUI
from puzzles.common.updates import ModelUpdate

from .model import TiltModel


class TiltPTUI(PuzzlePTUI):
    """Play tilt by typing commands."""
    PUZZLE = "tilt"
    MOVE_WORDS = ("t", "tilt")
    MOVE_HELP = "t(ilt) {N|S|E|W}    -- tilt the board in the given direction"

    model: TiltModel

    def apply_move(self, direction: str) -> ModelUpdate:
        return self.model.tilt(direction)
