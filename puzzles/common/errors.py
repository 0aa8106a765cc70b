"""
Exceptions raised while loading puzzle files.
"""

from pathlib import Path
from typing import Union


class PuzzleFileError(ValueError):
    """
    Raised when a puzzle file is missing, unreadable or malformed.

    Attributes:
        path: File that failed to load
        reason: Human-readable description of the problem
    """

    def __init__(self, path: Union[str, Path], reason: str):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"{self.path}: {reason}")
