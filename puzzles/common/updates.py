"""
Model Updates - Messages passed from a puzzle model to its views.

Every model operation returns one ModelUpdate describing what happened.
Views decide how to present it; models never call into a view.
"""

from dataclasses import dataclass
from enum import Enum, auto


class UpdateKind(Enum):
    """
    Outcome of a model operation.

    Kinds:
        LOADED: A puzzle file was loaded
        LOAD_FAILED: A puzzle file could not be loaded; state unchanged
        RESET: The current puzzle file was reloaded
        HINT: The model advanced one step along a shortest path
        NO_SOLUTION: No solution is reachable from the current state
        ALREADY_SOLVED: The current state is already a solution
        WON: The last move or hint reached a solution
        MOVED: A move succeeded
        TIPPED: A move succeeded by tipping a tower over
        ILLEGAL_MOVE: A move was rejected by the puzzle rules
        INVALID_COMMAND: The requested direction was not understood
    """
    LOADED = auto()
    LOAD_FAILED = auto()
    RESET = auto()
    HINT = auto()
    NO_SOLUTION = auto()
    ALREADY_SOLVED = auto()
    WON = auto()
    MOVED = auto()
    TIPPED = auto()
    ILLEGAL_MOVE = auto()
    INVALID_COMMAND = auto()


# Kinds after which the board on screen must be redrawn
_BOARD_CHANGING = {
    UpdateKind.LOADED,
    UpdateKind.RESET,
    UpdateKind.HINT,
    UpdateKind.WON,
    UpdateKind.MOVED,
    UpdateKind.TIPPED,
}


@dataclass(frozen=True)
class ModelUpdate:
    """
    Immutable notification of a model change.

    Attributes:
        kind: What happened
        message: Text for the user (may be empty)
    """
    kind: UpdateKind
    message: str = ""

    @property
    def board_changed(self) -> bool:
        """True if the model's current configuration was replaced."""
        return self.kind in _BOARD_CHANGING
