"""
Base Command Module - Abstract base class for puzzle command-line runners.
"""

import argparse
import sys
from abc import ABC, abstractmethod
from typing import Callable, TextIO

from puzzles.solver import Configuration, Solution


class PuzzleCommand(ABC):
    """
    Abstract base class for all puzzle commands.

    Subclasses must implement add_arguments() and run() and define
    name and description class attributes.

    Attributes:
        name: Subcommand name on the command line
        description: Help text for the subcommand
        multiline_steps: Print each path step below its "Step i:" label
    """
    name: str = "base"
    description: str = "Base command"
    multiline_steps: bool = False

    def __init__(self, data_dir: str = "data", out: TextIO = None, err: TextIO = None):
        """
        Initialize the command.

        Args:
            data_dir: Root directory searched for puzzle files
            out: Stream for results (defaults to stdout)
            err: Stream for diagnostics (defaults to stderr)
        """
        self.data_dir = data_dir
        self.out = out or sys.stdout
        self.err = err or sys.stderr

    @abstractmethod
    def add_arguments(self, parser: argparse.ArgumentParser) -> None:
        """
        Declare the command's positional arguments.

        Args:
            parser: Subparser for this command
        """
        pass

    @abstractmethod
    def run(self, args: argparse.Namespace) -> int:
        """
        Execute the command.

        Args:
            args: Parsed command-line arguments

        Returns:
            Process exit code
        """
        pass

    def _print(self, text: str = "") -> None:
        print(text, file=self.out)

    def fail(self, message: str) -> int:
        """
        Report a diagnostic and return a failing exit code.

        Args:
            message: Text to print on the error stream

        Returns:
            Exit code 1
        """
        print(message, file=self.err)
        return 1

    def describe_step(self, config: Configuration) -> str:
        """Text printed for one step of the solution path."""
        return str(config)

    def report(self, solution: Solution,
               describe: Callable[[Configuration], str] = None) -> None:
        """
        Print the search counters and the solution path.

        Args:
            solution: Result of the solver
            describe: Formatter for one path step (defaults to describe_step)
        """
        describe = describe or self.describe_step
        if not solution.is_solved:
            self._print("No solution")
            return

        self._print(f"Total configs: {solution.total_expansions}")
        self._print(f"Unique configs: {solution.unique_states}")
        for step, config in enumerate(solution.path):
            if self.multiline_steps:
                self._print(f"Step {step}:\n{describe(config)}\n")
            else:
                self._print(f"Step {step}: {describe(config)}")
