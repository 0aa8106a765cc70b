"""
Tip-Over Configuration - Crates, towers and a tipper on a grid.

Each cell holds a height: 0 is empty, 1 is a crate, anything taller is a
tower. The tipper stands on a crate or tower and must reach the goal cell.
From a crate the tipper steps onto a neighboring crate or tower. From a
tower of height h the tipper can tip the tower over, laying it flat across
the next h cells, provided they are all on the board and empty.
"""

import logging
from dataclasses import dataclass
from enum import Enum, auto
from pathlib import Path
from typing import List, Optional, Sequence, Tuple, Union

from puzzles.common.coordinates import Coordinates, Direction
from puzzles.common.errors import PuzzleFileError
from puzzles.common.loader import parse_ints, read_rows
from puzzles.solver import Configuration

logger = logging.getLogger(__name__)


class MoveOutcome(Enum):
    """
    Classification of a move attempt.

    Outcomes:
        MOVED: The tipper stepped onto a neighboring crate or tower
        TIPPED: A tower was tipped over and the tipper rode it down
        CANNOT_TIP: A tower is blocked by a crate or tower in its way
        OFF_BOARD: The move would leave the board
        NO_CRATE_OR_TOWER: The destination cell is empty
    """
    MOVED = auto()
    TIPPED = auto()
    CANNOT_TIP = auto()
    OFF_BOARD = auto()
    NO_CRATE_OR_TOWER = auto()


@dataclass(frozen=True)
class MoveResult:
    """
    Result of attempting a move in one direction.

    Attributes:
        outcome: What happened
        config: New board for MOVED and TIPPED, None otherwise
    """
    outcome: MoveOutcome
    config: Optional["TipOverConfig"] = None

    @property
    def succeeded(self) -> bool:
        """True if the move produced a new board."""
        return self.config is not None

    @property
    def tipped(self) -> bool:
        """True if a tower was tipped over."""
        return self.outcome is MoveOutcome.TIPPED


@dataclass(frozen=True)
class TipOverConfig(Configuration):
    """
    Immutable tip-over board.

    Uses tuple-of-tuples for hashability and immutability. Every move
    builds a new grid; boards share nothing mutable.

    Attributes:
        grid: Cell heights, one tuple per row
        tipper: Position of the tipper
        goal: Cell the tipper must reach
    """
    grid: Tuple[Tuple[int, ...], ...]
    tipper: Coordinates
    goal: Coordinates

    @classmethod
    def from_grid(cls, grid: Sequence[Sequence[int]],
                  tipper: Tuple[int, int], goal: Tuple[int, int]) -> 'TipOverConfig':
        """
        Create a TipOverConfig from a 2D list and (row, col) pairs.

        Args:
            grid: 2D list of cell heights
            tipper: Tipper position as (row, col)
            goal: Goal position as (row, col)

        Returns:
            TipOverConfig instance with immutable grid
        """
        return cls(
            grid=tuple(tuple(row) for row in grid),
            tipper=Coordinates(*tipper),
            goal=Coordinates(*goal),
        )

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> 'TipOverConfig':
        """
        Load a board file.

        The first line holds "rows cols tipperRow tipperCol goalRow
        goalCol"; each following line holds one row of cell heights.

        Args:
            path: Board file to read

        Returns:
            TipOverConfig instance

        Raises:
            PuzzleFileError: If the file is missing or malformed
        """
        rows_of_tokens = read_rows(path)
        if not rows_of_tokens:
            raise PuzzleFileError(path, "file is empty")

        header = parse_ints(rows_of_tokens[0], path, 1)
        if len(header) != 6:
            raise PuzzleFileError(path, "header must hold rows, cols, tipper and goal positions")
        rows, cols, tipper_row, tipper_col, goal_row, goal_col = header
        if rows < 1 or cols < 1:
            raise PuzzleFileError(path, f"invalid board size {rows}x{cols}")
        if len(rows_of_tokens) - 1 < rows:
            raise PuzzleFileError(path, f"expected {rows} rows, found {len(rows_of_tokens) - 1}")

        grid = []
        for r in range(rows):
            values = parse_ints(rows_of_tokens[r + 1], path, r + 2)
            if len(values) != cols:
                raise PuzzleFileError(path, f"row {r} has {len(values)} cells, expected {cols}")
            if any(v < 0 for v in values):
                raise PuzzleFileError(path, f"row {r} has a negative height")
            grid.append(values)

        config = cls.from_grid(grid, (tipper_row, tipper_col), (goal_row, goal_col))
        for label, position in (("tipper", config.tipper), ("goal", config.goal)):
            if not config.on_board(position):
                raise PuzzleFileError(path, f"{label} position {position} is off the board")

        logger.debug(f"Loaded {rows}x{cols} tip-over board from {path}")
        return config

    @property
    def rows(self) -> int:
        """Get number of rows in board."""
        return len(self.grid)

    @property
    def cols(self) -> int:
        """Get number of columns in board."""
        return len(self.grid[0]) if self.rows > 0 else 0

    def on_board(self, position: Coordinates) -> bool:
        """Check if a position lies inside the grid."""
        return 0 <= position.row < self.rows and 0 <= position.col < self.cols

    def height_at(self, position: Coordinates) -> int:
        """
        Get the height of a cell.

        Args:
            position: Cell on the board

        Returns:
            Cell height (0 empty, 1 crate, >1 tower)
        """
        return self.grid[position.row][position.col]

    def is_tower(self, position: Coordinates) -> bool:
        """Check if a cell holds a tower (height greater than 1)."""
        return self.height_at(position) > 1

    def is_solution(self) -> bool:
        """Check if the tipper stands on the goal."""
        return self.tipper == self.goal

    def attempt(self, direction: Direction) -> MoveResult:
        """
        Try to move the tipper one way.

        Never modifies this board; a successful move returns a new one.

        Args:
            direction: Direction to move or tip in

        Returns:
            MoveResult with the outcome and, on success, the new board
        """
        height = self.height_at(self.tipper)
        if height > 1:
            return self._tip_tower(direction, height)
        return self._step(direction)

    def _step(self, direction: Direction) -> MoveResult:
        """Step onto the adjacent cell if it holds a crate or tower."""
        target = self.tipper.step(direction)
        if not self.on_board(target):
            return MoveResult(MoveOutcome.OFF_BOARD)
        if self.height_at(target) == 0:
            return MoveResult(MoveOutcome.NO_CRATE_OR_TOWER)
        return MoveResult(MoveOutcome.MOVED, TipOverConfig(self.grid, target, self.goal))

    def _tip_tower(self, direction: Direction, height: int) -> MoveResult:
        """
        Tip the tower under the tipper over, or step off it if blocked.

        The tower needs height empty cells in a row. The first non-empty
        cell in the way blocks the tip; if that cell is the adjacent one
        the tipper steps onto it instead. Reaching the edge of the board
        before finding enough room fails as off board.
        """
        run: List[Coordinates] = []
        for distance in range(1, height + 1):
            cell = self.tipper.step(direction, distance)
            if not self.on_board(cell):
                return MoveResult(MoveOutcome.OFF_BOARD)
            if self.height_at(cell) != 0:
                if distance == 1:
                    return MoveResult(MoveOutcome.MOVED, TipOverConfig(self.grid, cell, self.goal))
                return MoveResult(MoveOutcome.CANNOT_TIP)
            run.append(cell)

        new_grid = [list(row) for row in self.grid]
        new_grid[self.tipper.row][self.tipper.col] = 0
        for cell in run:
            new_grid[cell.row][cell.col] = 1

        tipped = TipOverConfig(
            grid=tuple(tuple(row) for row in new_grid),
            tipper=run[0],
            goal=self.goal,
        )
        return MoveResult(MoveOutcome.TIPPED, tipped)

    def successors(self) -> List['TipOverConfig']:
        """The unchanged board, then each successful move in N, S, W, E order."""
        found = [self]
        for direction in Direction:
            result = self.attempt(direction)
            if result.config is not None:
                found.append(result.config)
        return found

    def __str__(self) -> str:
        """
        Render the board with column numbers across the top.

        The tipper's cell is marked with '*', the goal with '!', and empty
        cells are drawn as '_'.
        """
        header = "\t" + "".join(f"  {c}" for c in range(self.cols))
        underline = "\t" + "___" * self.cols
        lines = [header, underline]
        for r, row in enumerate(self.grid):
            cells = []
            for c, height in enumerate(row):
                position = Coordinates(r, c)
                if position == self.tipper:
                    cells.append(f" *{height}")
                elif position == self.goal:
                    cells.append(f" !{height}")
                elif height > 0:
                    cells.append(f"  {height}")
                else:
                    cells.append("  _")
            lines.append(f" {r} |" + "".join(cells))
        return "\n".join(lines)
