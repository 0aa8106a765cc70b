"""
Puzzle Model Module - Shared game rules for interactive front ends.

A model holds the current configuration of one puzzle and replaces it
wholesale on every successful operation. Configurations themselves are
never modified.
"""

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional, Union

from puzzles.solver import Configuration, Solver

from .errors import PuzzleFileError
from .updates import ModelUpdate, UpdateKind

logger = logging.getLogger(__name__)


class PuzzleModel(ABC):
    """
    Abstract base class for interactive puzzle models.

    Subclasses implement read_config() to load their file format and add
    their own move operation.

    Attributes:
        LOADED: Message prefix for a successful load
        LOAD_FAILED: Message prefix for a failed load
        RESET_MSG: Message for a reset
        HINT_PREFIX: Message for a hint step
        NO_SOLUTION: Message when the puzzle cannot be solved
        SOLVED: Message when the puzzle is already solved
        SOLUTION: Message when the player wins
    """
    LOADED = "Loaded: "
    LOAD_FAILED = "Failed to load: "
    RESET_MSG = "Puzzle reset!"
    HINT_PREFIX = "Next step!"
    NO_SOLUTION = "No solution!"
    SOLVED = "Current board is already solved."
    SOLUTION = "I WON!"

    def __init__(self, config: Configuration, filename: Optional[Union[str, Path]] = None):
        """
        Initialize the model.

        Args:
            config: Starting configuration
            filename: File the configuration was loaded from, used by reset()
        """
        self._config = config
        self._filename = str(filename) if filename is not None else None

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "PuzzleModel":
        """
        Create a model from a puzzle file.

        Raises:
            PuzzleFileError: If the file cannot be loaded
        """
        return cls(cls.read_config(path), path)

    @classmethod
    @abstractmethod
    def read_config(cls, path: Union[str, Path]) -> Configuration:
        """
        Read a configuration from a puzzle file.

        Raises:
            PuzzleFileError: If the file cannot be loaded
        """
        pass

    @property
    def config(self) -> Configuration:
        """Get the current configuration."""
        return self._config

    @property
    def filename(self) -> Optional[str]:
        """Get the file the current puzzle came from."""
        return self._filename

    @property
    def display_name(self) -> str:
        """Get the base name of the current puzzle file."""
        if self._filename is None:
            return ""
        return Path(self._filename).name

    def is_solved(self) -> bool:
        """Check if the current configuration is a solution."""
        return self._config.is_solution()

    def load(self, path: Union[str, Path]) -> ModelUpdate:
        """
        Load a new puzzle, keeping the current one if loading fails.

        Args:
            path: Puzzle file to load

        Returns:
            LOADED or LOAD_FAILED update
        """
        name = Path(path).name
        try:
            config = self.read_config(path)
        except PuzzleFileError as e:
            logger.warning(f"Load failed: {e}")
            return ModelUpdate(UpdateKind.LOAD_FAILED, self.LOAD_FAILED + name)

        self._config = config
        self._filename = str(path)
        logger.info(f"Loaded puzzle from {path}")
        return ModelUpdate(UpdateKind.LOADED, self.LOADED + name)

    def reset(self) -> ModelUpdate:
        """
        Reload the current puzzle file.

        Returns:
            RESET update, or LOAD_FAILED if the file is gone or there is none
        """
        if self._filename is None:
            return ModelUpdate(UpdateKind.LOAD_FAILED, self.LOAD_FAILED + "no puzzle file")

        update = self.load(self._filename)
        if update.kind is UpdateKind.LOADED:
            return ModelUpdate(UpdateKind.RESET, self.RESET_MSG)
        return update

    def hint(self) -> ModelUpdate:
        """
        Advance one step along a freshly computed shortest path.

        Returns:
            HINT, WON, NO_SOLUTION or ALREADY_SOLVED update
        """
        if self.is_solved():
            return ModelUpdate(UpdateKind.ALREADY_SOLVED, self.SOLVED)

        solution = Solver().solve(self._config)
        if not solution.is_solved:
            return ModelUpdate(UpdateKind.NO_SOLUTION, self.NO_SOLUTION)

        self._config = solution.next_step
        if self.is_solved():
            return ModelUpdate(UpdateKind.WON, self.SOLUTION)
        return ModelUpdate(UpdateKind.HINT, self.HINT_PREFIX)

    def __str__(self) -> str:
        return str(self._config)
