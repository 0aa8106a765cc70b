"""
Water Command - Solve the water buckets puzzle from the command line.
"""

import argparse

from puzzles.solver import Solver
from puzzles.water import WaterConfig

from .base import PuzzleCommand
from .factory import register_command


@register_command
class WaterCommand(PuzzleCommand):
    """
    Measure an amount of water with buckets that start empty.

    Example:
        python main.py water 4 5 3
    """
    name = "water"
    description = "Water buckets: measure an amount by filling, emptying and pouring"

    def add_arguments(self, parser: argparse.ArgumentParser) -> None:
        parser.add_argument("amount", type=int, help="Amount of water to measure")
        parser.add_argument("buckets", type=int, nargs="+", help="Capacity of each bucket")

    def run(self, args: argparse.Namespace) -> int:
        if args.amount < 0 or any(cap < 0 for cap in args.buckets):
            return self.fail("Amount and bucket capacities must not be negative")

        water = WaterConfig.create(args.amount, args.buckets)
        self._print(f"Amount: {args.amount}, Buckets: {list(args.buckets)}")
        self.report(Solver().solve(water))
        return 0
