"""
Commands Package - Command-line runners for each puzzle.

Each puzzle registers one or more commands; the entry point builds one
argparse subcommand per registered command.

Public API:
    - PuzzleCommand: Abstract base for commands
    - create_command(): Factory function
    - get_command_names(): List available commands
    - get_command_info(): Get command metadata
    - register_command(): Class decorator adding a command

Usage:
    from puzzles.commands import create_command

    command = create_command("clock")
    parser = argparse.ArgumentParser()
    command.add_arguments(parser)
    command.run(parser.parse_args(["12", "9", "3"]))
"""

from .base import PuzzleCommand
from .factory import (
    create_command,
    get_command_names,
    get_command_info,
    register_command,
)

# Import commands to register them
from . import clock, water, tilt, tipover

__all__ = [
    "PuzzleCommand",
    "create_command",
    "get_command_names",
    "get_command_info",
    "register_command",
]
