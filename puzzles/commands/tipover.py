"""
Tip-Over Commands - Solve or play tip-over from the command line.
"""

import argparse
import logging
import sys

from puzzles.common.errors import PuzzleFileError
from puzzles.settings import resolve_puzzle_path
from puzzles.solver import Solver
from puzzles.tipover import TipOverConfig, TipOverModel, TipOverPTUI

from .base import PuzzleCommand
from .factory import register_command

logger = logging.getLogger(__name__)


@register_command
class TipOverCommand(PuzzleCommand):
    """
    Solve a tip-over board file.

    Example:
        python main.py tipover data/tipover/tipover-1.txt
    """
    name = "tipover"
    description = "Tip-over: walk and tip towers until the tipper reaches the goal"
    multiline_steps = True

    def add_arguments(self, parser: argparse.ArgumentParser) -> None:
        parser.add_argument("filename", help="Tip-over board file")

    def run(self, args: argparse.Namespace) -> int:
        path = resolve_puzzle_path(args.filename, "tipover", self.data_dir)
        try:
            board = TipOverConfig.from_file(path)
        except PuzzleFileError as e:
            return self.fail(f"Failed to load: {e}")

        self._print(f"File: {args.filename}")
        self._print(str(board))
        self.report(Solver().solve(board))
        return 0


@register_command
class TipOverPlayCommand(PuzzleCommand):
    """
    Play tip-over in the terminal.

    Example:
        python main.py tipover-ptui data/tipover/tipover-1.txt
    """
    name = "tipover-ptui"
    description = "Tip-over: play in the terminal"

    def add_arguments(self, parser: argparse.ArgumentParser) -> None:
        parser.add_argument("filename", help="Tip-over board file")

    def run(self, args: argparse.Namespace) -> int:
        path = resolve_puzzle_path(args.filename, "tipover", self.data_dir)
        try:
            model = TipOverModel.from_file(path)
        except PuzzleFileError as e:
            return self.fail(f"Failed to load: {e}")

        TipOverPTUI(model, stdout=self.out, data_dir=self.data_dir).run()
        return 0


@register_command
class TipOverGUICommand(PuzzleCommand):
    """
    Play tip-over in a PyQt5 window.

    Example:
        python main.py tipover-gui data/tipover/tipover-1.txt
    """
    name = "tipover-gui"
    description = "Tip-over: play in a window"

    def add_arguments(self, parser: argparse.ArgumentParser) -> None:
        parser.add_argument("filename", help="Tip-over board file")

    def run(self, args: argparse.Namespace) -> int:
        path = resolve_puzzle_path(args.filename, "tipover", self.data_dir)
        try:
            model = TipOverModel.from_file(path)
        except PuzzleFileError as e:
            return self.fail(f"Failed to load: {e}")

        # Qt is only needed for this command
        from PyQt5.QtWidgets import QApplication
        from puzzles.tipover.gui import TipOverWindow

        app = QApplication(sys.argv)
        window = TipOverWindow(model, data_dir=self.data_dir)
        window.show()
        logger.info(f"Tip-over window opened for {path}")
        return app.exec_()
