"""
Common Package - Pieces shared by the puzzle variants and their front ends.
"""

from .coordinates import Coordinates, Direction
from .errors import PuzzleFileError
from .updates import ModelUpdate, UpdateKind
from .model import PuzzleModel
from .ptui import PuzzlePTUI

__all__ = [
    "Coordinates",
    "Direction",
    "PuzzleFileError",
    "ModelUpdate",
    "UpdateKind",
    "PuzzleModel",
    "PuzzlePTUI",
]
