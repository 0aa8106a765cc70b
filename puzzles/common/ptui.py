"""
PTUI Module - Plain text user interface for interactive puzzles.

Reads one command per line and prints each model update followed by the
board. The loop is iterative and ends on quit or end of input.
"""

import logging
import sys
from abc import ABC, abstractmethod
from typing import Optional, TextIO

from puzzles.settings import resolve_puzzle_path

from .model import PuzzleModel
from .updates import ModelUpdate, UpdateKind

logger = logging.getLogger(__name__)


class PuzzlePTUI(ABC):
    """
    Text front end shared by the interactive puzzles.

    Subclasses set PUZZLE, MOVE_WORDS and MOVE_HELP and implement
    apply_move(). PUZZLE names the folder under the data directory where
    bare file names given to the load command are looked up.

    Example:
        ptui = TipOverPTUI(TipOverModel.from_file("data/tipover/tipover-1.txt"))
        ptui.run()
    """
    PUZZLE = ""
    MOVE_WORDS = ("m", "move")
    MOVE_HELP = "m(ove) {N|S|E|W}    -- move in the given direction"

    def __init__(self, model: PuzzleModel, stdin: TextIO = None, stdout: TextIO = None,
                 data_dir: Optional[str] = None):
        """
        Initialize the text UI.

        Args:
            model: Puzzle model to drive
            stdin: Command source (defaults to stdin)
            stdout: Output stream (defaults to stdout)
            data_dir: Root directory searched for puzzle files by name
        """
        self.model = model
        self._in = stdin or sys.stdin
        self._out = stdout or sys.stdout
        self.data_dir = data_dir

    @property
    def help_text(self) -> str:
        """Command summary printed at start and after an unknown command."""
        return "\n".join([
            "h(int)              -- hint next move",
            "l(oad) filename     -- load new puzzle file",
            self.MOVE_HELP,
            "q(uit)              -- quit the game",
            "r(eset)             -- reset the current game",
        ])

    @abstractmethod
    def apply_move(self, direction: str) -> ModelUpdate:
        """Forward a move command to the model."""
        pass

    def resolve(self, name: str) -> str:
        """Find a file named in a load command, trying the data directory too."""
        if self.data_dir is None:
            return name
        return str(resolve_puzzle_path(name, self.PUZZLE, self.data_dir))

    def _print(self, text: str = "") -> None:
        print(text, file=self._out)

    def display_board(self) -> None:
        """Print the current board."""
        self._print(str(self.model))

    def show(self, update: ModelUpdate) -> None:
        """
        Print a model update, then the board.

        Args:
            update: Update returned by the model
        """
        if update.message:
            self._print(update.message)
        if update.kind is not UpdateKind.INVALID_COMMAND:
            self._print()
            self.display_board()
        self._print()

    def handle(self, line: str) -> bool:
        """
        Execute one command line.

        Args:
            line: Raw user input

        Returns:
            False if the user asked to quit, True otherwise
        """
        words = line.split()
        if not words:
            return True

        command = words[0].lower()
        args = words[1:]

        if command in ("q", "quit"):
            return False
        if command in ("h", "hint"):
            self.show(self.model.hint())
        elif command in ("r", "reset"):
            self.show(self.model.reset())
        elif command in ("l", "load") and args:
            self.show(self.model.load(self.resolve(" ".join(args))))
        elif command in self.MOVE_WORDS and len(args) == 1:
            self.show(self.apply_move(args[0]))
        else:
            logger.debug(f"Unrecognized command: {line!r}")
            self._print("Not a valid command")
            self._print(self.help_text)
        return True

    def run(self) -> None:
        """Run the command loop until quit or end of input."""
        self._print(PuzzleModel.LOADED + self.model.display_name)
        self._print()
        self.display_board()
        self._print()
        self._print(self.help_text)

        while True:
            self._out.write("> ")
            self._out.flush()
            line = self._in.readline()
            if not line:
                break
            if not self.handle(line):
                break
