"""
Tip-Over Package - Crate and tower puzzle.

Public API:
    - TipOverConfig: Immutable board, usable with the solver
    - MoveResult / MoveOutcome: Result of attempting one move
    - TipOverModel: Interactive game rules
    - TipOverPTUI: Text front end

The PyQt5 window lives in puzzles.tipover.gui and is imported on demand.
"""

from .config import MoveOutcome, MoveResult, TipOverConfig
from .model import TipOverModel
from .ptui import TipOverPTUI

__all__ = [
    "MoveOutcome",
    "MoveResult",
    "TipOverConfig",
    "TipOverModel",
    "TipOverPTUI",
]
