"""
Tilt Commands - Solve or play the tilt puzzle from the command line.
"""

import argparse
import logging
import sys

from puzzles.common.errors import PuzzleFileError
from puzzles.settings import resolve_puzzle_path
from puzzles.solver import Solver
from puzzles.tilt import TiltConfig, TiltModel, TiltPTUI

from .base import PuzzleCommand
from .factory import register_command

logger = logging.getLogger(__name__)


@register_command
class TiltCommand(PuzzleCommand):
    """
    Solve a tilt board file.

    Example:
        python main.py tilt data/tilt/tilt-1.txt
    """
    name = "tilt"
    description = "Tilt: slide every green disk into the hole"
    multiline_steps = True

    def add_arguments(self, parser: argparse.ArgumentParser) -> None:
        parser.add_argument("filename", help="Tilt board file")

    def run(self, args: argparse.Namespace) -> int:
        path = resolve_puzzle_path(args.filename, "tilt", self.data_dir)
        try:
            tilt = TiltConfig.from_file(path)
        except PuzzleFileError as e:
            return self.fail(f"Failed to load: {e}")

        self._print(f"File: {args.filename}")
        self._print(str(tilt))
        self.report(Solver().solve(tilt))
        return 0


@register_command
class TiltPlayCommand(PuzzleCommand):
    """
    Play tilt in the terminal.

    Example:
        python main.py tilt-ptui data/tilt/tilt-1.txt
    """
    name = "tilt-ptui"
    description = "Tilt: play in the terminal"

    def add_arguments(self, parser: argparse.ArgumentParser) -> None:
        parser.add_argument("filename", help="Tilt board file")

    def run(self, args: argparse.Namespace) -> int:
        path = resolve_puzzle_path(args.filename, "tilt", self.data_dir)
        try:
            model = TiltModel.from_file(path)
        except PuzzleFileError as e:
            return self.fail(f"Failed to load: {e}")

        TiltPTUI(model, stdout=self.out, data_dir=self.data_dir).run()
        return 0


@register_command
class TiltGUICommand(PuzzleCommand):
    """
    Play tilt in a PyQt5 window.

    Example:
        python main.py tilt-gui data/tilt/tilt-1.txt
    """
    name = "tilt-gui"
    description = "Tilt: play in a window"

    def add_arguments(self, parser: argparse.ArgumentParser) -> None:
        parser.add_argument("filename", help="Tilt board file")

    def run(self, args: argparse.Namespace) -> int:
        path = resolve_puzzle_path(args.filename, "tilt", self.data_dir)
        try:
            model = TiltModel.from_file(path)
        except PuzzleFileError as e:
            return self.fail(f"Failed to load: {e}")

        # Qt is only needed for this command
        from PyQt5.QtWidgets import QApplication
        from puzzles.tilt.gui import TiltWindow

        app = QApplication(sys.argv)
        window = TiltWindow(model, data_dir=self.data_dir)
        window.show()
        logger.info(f"Tilt window opened for {path}")
        return app.exec_()
