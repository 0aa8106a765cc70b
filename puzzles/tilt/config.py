"""
Tilt Configuration - Sliding disks into a hole by tilting the board.

The board is square. Tilting slides every disk as far as it can go in the
chosen direction. Green disks that reach the hole drop out; the puzzle is
solved when none are left. A blue disk must never fall in, so any tilt
that would drop one is illegal.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, List, Optional, Sequence, Tuple, Union

from puzzles.common.coordinates import Direction
from puzzles.common.errors import PuzzleFileError
from puzzles.common.loader import read_rows
from puzzles.solver import Configuration

logger = logging.getLogger(__name__)

GREEN = 'G'
BLUE = 'B'
EMPTY = '.'
BLOCKER = '*'
HOLE = 'O'

SYMBOLS = {GREEN, BLUE, EMPTY, BLOCKER, HOLE}


@dataclass(frozen=True)
class TiltConfig(Configuration):
    """
    Immutable tilt board.

    Attributes:
        grid: One tuple of cell symbols per row
    """
    grid: Tuple[Tuple[str, ...], ...]

    @classmethod
    def from_grid(cls, grid: Sequence[Sequence[str]]) -> 'TiltConfig':
        """
        Create a TiltConfig from a 2D list of symbols.

        Args:
            grid: Rows of symbols (strings of equal length also work)

        Returns:
            TiltConfig instance
        """
        return cls(grid=tuple(tuple(row) for row in grid))

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> 'TiltConfig':
        """
        Load a board file: the size on the first line, then one line of
        whitespace-separated symbols per row.

        Raises:
            PuzzleFileError: If the file is missing or malformed
        """
        rows_of_tokens = read_rows(path)
        if not rows_of_tokens or len(rows_of_tokens[0]) != 1:
            raise PuzzleFileError(path, "first line must hold the board size")
        try:
            size = int(rows_of_tokens[0][0])
        except ValueError as e:
            raise PuzzleFileError(path, f"invalid board size {rows_of_tokens[0][0]!r}") from e
        if size < 1:
            raise PuzzleFileError(path, f"invalid board size {size}")
        if len(rows_of_tokens) - 1 < size:
            raise PuzzleFileError(path, f"expected {size} rows, found {len(rows_of_tokens) - 1}")

        grid = []
        for r in range(size):
            row = rows_of_tokens[r + 1]
            if len(row) != size:
                raise PuzzleFileError(path, f"row {r} has {len(row)} cells, expected {size}")
            unknown = [token for token in row if token not in SYMBOLS]
            if unknown:
                raise PuzzleFileError(path, f"row {r} has unknown symbols {unknown}")
            grid.append(row)

        logger.debug(f"Loaded {size}x{size} tilt board from {path}")
        return cls.from_grid(grid)

    @property
    def size(self) -> int:
        """Number of rows (and columns) on the board."""
        return len(self.grid)

    def cell(self, row: int, col: int) -> str:
        """Get the symbol at a cell."""
        return self.grid[row][col]

    def is_solution(self) -> bool:
        """Check if every green disk has left the board."""
        return all(GREEN not in row for row in self.grid)

    def _sweep(self, direction: Direction) -> Iterator[Tuple[int, int]]:
        """Visit cells starting with those closest to the wall being tilted toward."""
        d_row, d_col = direction.delta
        near_first = list(range(self.size))
        far_first = near_first[::-1]
        if d_row != 0:
            for row in (near_first if d_row < 0 else far_first):
                for col in near_first:
                    yield row, col
        else:
            for col in (near_first if d_col < 0 else far_first):
                for row in near_first:
                    yield row, col

    def tilt(self, direction: Direction) -> Optional['TiltConfig']:
        """
        Tilt the board.

        Args:
            direction: Direction to tilt toward

        Returns:
            New board, or None if a blue disk would fall into the hole
        """
        grid: List[List[str]] = [list(row) for row in self.grid]
        d_row, d_col = direction.delta
        size = self.size

        for row, col in self._sweep(direction):
            disk = grid[row][col]
            if disk not in (GREEN, BLUE):
                continue

            r, c = row, col
            while 0 <= r + d_row < size and 0 <= c + d_col < size and grid[r + d_row][c + d_col] == EMPTY:
                grid[r][c] = EMPTY
                r += d_row
                c += d_col
                grid[r][c] = disk

            ahead_r, ahead_c = r + d_row, c + d_col
            if 0 <= ahead_r < size and 0 <= ahead_c < size and grid[ahead_r][ahead_c] == HOLE:
                if disk == BLUE:
                    return None
                grid[r][c] = EMPTY

        return TiltConfig.from_grid(grid)

    def successors(self) -> List['TiltConfig']:
        """Every legal tilt in N, S, W, E order."""
        found = []
        for direction in Direction:
            tilted = self.tilt(direction)
            if tilted is not None:
                found.append(tilted)
        return found

    def __str__(self) -> str:
        return "\n".join(" ".join(row) for row in self.grid)
