"""
Command Registry - Maps subcommand names to puzzle command classes.

Command modules register themselves on import; main.py walks the registry
to build one argparse subcommand per entry, in registration order.
"""

from typing import Dict, List, Type, Any

from .base import PuzzleCommand


# Subcommand name -> command class, in registration order
_COMMANDS: Dict[str, Type[PuzzleCommand]] = {}


def register_command(cls: Type[PuzzleCommand]) -> Type[PuzzleCommand]:
    """
    Class decorator making a command available under its `name`.

    A later class with the same name replaces the earlier one.

    Usage:
        @register_command
        class ClockCommand(PuzzleCommand):
            name = "clock"
            ...
    """
    _COMMANDS[cls.name] = cls
    return cls


def create_command(name: str, **kwargs: Any) -> PuzzleCommand:
    """
    Instantiate the command registered as name.

    Args:
        name: Subcommand typed on the command line (e.g. "tipover-ptui")
        **kwargs: Passed to the command's constructor (data_dir, out, err)

    Returns:
        Ready-to-run command

    Raises:
        ValueError: If no puzzle registered that name; the message lists
            every subcommand that is available
    """
    command_class = _COMMANDS.get(name)
    if command_class is None:
        available = ", ".join(_COMMANDS)
        raise ValueError(f"Unknown puzzle: {name}. Available: {available}")
    return command_class(**kwargs)


def get_command_names() -> List[str]:
    """Subcommand names in registration order."""
    return list(_COMMANDS)


def get_command_info() -> List[Dict[str, str]]:
    """
    Describe each registered command for the argument parser's help.

    Returns:
        One {'name', 'description'} dict per command
    """
    return [
        {"name": name, "description": command_class.description}
        for name, command_class in _COMMANDS.items()
    ]
