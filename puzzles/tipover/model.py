"""
Tip-Over Model - Game rules for playing tip-over interactively.
"""

import logging
from pathlib import Path
from typing import Union

from puzzles.common.coordinates import Coordinates, Direction
from puzzles.common.model import PuzzleModel
from puzzles.common.updates import ModelUpdate, UpdateKind

from .config import MoveOutcome, TipOverConfig

logger = logging.getLogger(__name__)


class TipOverModel(PuzzleModel):
    """
    Interactive tip-over game.

    Example:
        model = TipOverModel.from_file("data/tipover/tipover-1.txt")
        update = model.move("N")
        print(update.message)
        print(model)
    """
    NO_SOLUTION = "No Solution"
    MESSAGE = "No crate or tower there."
    TIPMSG = "A tower has been tipped over."
    OFFBOARDMSG = "Move goes off the board."
    CANTIP = "Tower cannot be tipped over."

    _ILLEGAL_MESSAGES = {
        MoveOutcome.CANNOT_TIP: CANTIP,
        MoveOutcome.OFF_BOARD: OFFBOARDMSG,
        MoveOutcome.NO_CRATE_OR_TOWER: MESSAGE,
    }

    @classmethod
    def read_config(cls, path: Union[str, Path]) -> TipOverConfig:
        return TipOverConfig.from_file(path)

    @property
    def rows(self) -> int:
        return self.config.rows

    @property
    def cols(self) -> int:
        return self.config.cols

    @property
    def tipper(self) -> Coordinates:
        return self.config.tipper

    @property
    def goal(self) -> Coordinates:
        return self.config.goal

    def grid_value(self, row: int, col: int) -> int:
        """Get the height of a cell on the current board."""
        return self.config.height_at(Coordinates(row, col))

    def move(self, direction: Union[str, Direction]) -> ModelUpdate:
        """
        Move the tipper, tipping its tower over if it stands on one.

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

        result = self.config.attempt(direction)
        if not result.succeeded:
            logger.debug(f"Move {direction.letter} rejected: {result.outcome.name}")
            return ModelUpdate(UpdateKind.ILLEGAL_MOVE, self._ILLEGAL_MESSAGES[result.outcome])

        self._config = result.config
        prefix = self.TIPMSG if result.tipped else ""

        if self.is_solved():
            return ModelUpdate(UpdateKind.WON, " ".join(filter(None, [prefix, self.SOLUTION])))
        if result.tipped:
            return ModelUpdate(UpdateKind.TIPPED, self.TIPMSG)
        return ModelUpdate(UpdateKind.MOVED)
