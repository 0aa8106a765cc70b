"""
Clock Command - Solve the clock puzzle from the command line.
"""

import argparse

from puzzles.clock import ClockConfig
from puzzles.solver import Solver

from .base import PuzzleCommand
from .factory import register_command


@register_command
class ClockCommand(PuzzleCommand):
    """
    Find the fewest one-hour turns from a start hour to a goal hour.

    Example:
        python main.py clock 12 9 3
    """
    name = "clock"
    description = "Clock: fewest one-hour turns between two hours"

    def add_arguments(self, parser: argparse.ArgumentParser) -> None:
        parser.add_argument("hours", type=int, help="Number of hours on the clock")
        parser.add_argument("start", type=int, help="Starting hour")
        parser.add_argument("finish", type=int, help="Goal hour")

    def describe_step(self, config: ClockConfig) -> str:
        return str(config.current)

    def run(self, args: argparse.Namespace) -> int:
        if args.hours < 1 or not (1 <= args.start <= args.hours) or not (1 <= args.finish <= args.hours):
            return self.fail("Hours must be positive and start/finish must lie between 1 and hours")

        clock = ClockConfig(args.hours, args.start, args.finish)
        self._print(str(clock))
        self.report(Solver().solve(clock))
        return 0
