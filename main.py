"""
Puzzle Solvers - Entry Point

Solves or plays one of the registered puzzles. Solver commands print the
shortest path found by breadth-first search.

Example:
    python main.py clock 12 9 3
    python main.py water 4 5 3
    python main.py tipover data/tipover/tipover-1.txt
    python main.py tipover-ptui tipover-1.txt       # looked up under data/tipover/
    python main.py --log-level DEBUG tilt data/tilt/tilt-1.txt
"""

import sys
import logging
import argparse
from typing import List, Optional

from puzzles.commands import create_command, get_command_info
from puzzles.settings import load_settings


logger = logging.getLogger(__name__)


def configure_logging(level: str, log_file: Optional[str] = None) -> None:
    """
    Configure logging - output to console and, optionally, a file.

    Args:
        level: Logging level name (e.g. "DEBUG", "WARNING")
        log_file: Optional file receiving the same records
    """
    handlers: List[logging.Handler] = [logging.StreamHandler()]  # Console output (stderr)
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        handlers=handlers,
        force=True
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with one subcommand per puzzle command."""
    parser = argparse.ArgumentParser(
        description="Puzzle Solvers - shortest solutions by breadth-first search"
    )
    parser.add_argument(
        "--log-level", "-l",
        default=None,
        help="Logging level (default: from config.json, else WARNING)"
    )
    parser.add_argument(
        "--log-file",
        default=None,
        help="Also write log records to this file"
    )
    parser.add_argument(
        "--data-dir", "-d",
        default=None,
        help="Directory searched for puzzle files (default: from config.json, else data)"
    )

    subparsers = parser.add_subparsers(dest="puzzle", metavar="PUZZLE")
    subparsers.required = True
    for info in get_command_info():
        sub = subparsers.add_parser(info["name"], help=info["description"])
        create_command(info["name"]).add_arguments(sub)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Parse arguments, configure logging and run the chosen command."""
    settings = load_settings()
    args = build_parser().parse_args(argv)

    # CLI flags override saved settings
    configure_logging(
        args.log_level or settings.get("log_level", "WARNING"),
        args.log_file or settings.get("log_file")
    )
    data_dir = args.data_dir or settings.get("data_dir", "data")

    logger.info(f"Running {args.puzzle} (data dir: {data_dir})")
    command = create_command(args.puzzle, data_dir=data_dir)
    return command.run(args)


if __name__ == "__main__":
    sys.exit(main())
