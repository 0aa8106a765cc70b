"""
Tilt Model - Game rules for playing tilt interactively.
"""

import logging
from pathlib import Path
from typing import Union

from puzzles.common.coordinates import Direction
from puzzles.common.model import PuzzleModel
from puzzles.common.updates import ModelUpdate, UpdateKind

from .config import TiltConfig

logger = logging.getLogger(__name__)


class TiltModel(PuzzleModel):
    """Interactive tilt game."""
    SOLVED = "Already solved!"
    ILLEGAL = "Illegal move. A blue slider will fall through the hole!"

    @classmethod
    def read_config(cls, path: Union[str, Path]) -> TiltConfig:
        return TiltConfig.from_file(path)

    @property
    def size(self) -> int:
        return self.config.size

    def grid_value(self, row: int, col: int) -> str:
        """Get the symbol at a cell of the current board."""
        return self.config.cell(row, col)

    def tilt(self, direction: Union[str, Direction]) -> ModelUpdate:
        """
        Tilt the board.

        Args:
            direction: Direction enum or user text such as "n" or "north"

        Returns:
            ModelUpdate describing the result
        """
        if self.is_solved():
            return ModelUpdate(UpdateKind.ALREADY_SOLVED, self.SOLVED)

        if isinstance(direction, str):
            parsed = Direction.parse(direction)
            if parsed is None:
                return ModelUpdate(UpdateKind.INVALID_COMMAND, f"Invalid direction: {direction}")
            direction = parsed

        tilted = self.config.tilt(direction)
        if tilted is None:
            logger.debug(f"Tilt {direction.letter} rejected: blue disk would fall")
            return ModelUpdate(UpdateKind.ILLEGAL_MOVE, self.ILLEGAL)

        self._config = tilted
        if self.is_solved():
            return ModelUpdate(UpdateKind.WON, self.SOLUTION)
        return ModelUpdate(UpdateKind.MOVED)
