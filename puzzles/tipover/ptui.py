"""
Tip-Over PTUI - Text front end for the tip-over game.
"""

from puzzles.common.ptui import PuzzlePTUI
from puzzles.common.updates import ModelUpdate

from .model import TipOverModel


class TipOverPTUI(PuzzlePTUI):
    """Play tip-over by typing commands."""
    PUZZLE = "tipover"
    MOVE_HELP = "m(ove) {N|S|E|W}    -- move the tipper in the given direction"

    model: TipOverModel

    def apply_move(self, direction: str) -> ModelUpdate:
        return self.model.move(direction)
