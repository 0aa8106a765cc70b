"""
Grid coordinates and compass directions shared by the board puzzles.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


class Direction(Enum):
    """
    Compass direction as a (row, col) offset.

    Iteration order (N, S, W, E) is the order board puzzles try moves in.
    """
    NORTH = (-1, 0)
    SOUTH = (1, 0)
    WEST = (0, -1)
    EAST = (0, 1)

    @property
    def delta(self) -> Tuple[int, int]:
        """Row and column offset of one step."""
        return self.value

    @property
    def letter(self) -> str:
        """Single-letter name (N, S, W or E)."""
        return self.name[0]

    @classmethod
    def parse(cls, text: str) -> Optional["Direction"]:
        """
        Parse a direction typed by a user.

        Accepts single letters or full names in any case.

        Args:
            text: User input such as "n", "North" or "E"

        Returns:
            Matching Direction, or None if the text is not a direction
        """
        word = text.strip().upper()
        if not word:
            return None
        for direction in cls:
            if word == direction.letter or word == direction.name:
                return direction
        return None


@dataclass(frozen=True)
class Coordinates:
    """
    Immutable (row, col) position on a grid.

    Attributes:
        row: Row index, 0 at the top
        col: Column index, 0 at the left
    """
    row: int
    col: int

    def step(self, direction: Direction, distance: int = 1) -> "Coordinates":
        """
        Get the position distance cells away in a direction.

        The result may lie off the board; callers check bounds.

        Args:
            direction: Direction to move in
            distance: Number of cells to move

        Returns:
            New Coordinates
        """
        d_row, d_col = direction.delta
        return Coordinates(self.row + d_row * distance, self.col + d_col * distance)

    def __str__(self) -> str:
        return f"({self.row}, {self.col})"
