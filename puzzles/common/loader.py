"""
Helpers for reading whitespace-separated puzzle files.
"""

import logging
from pathlib import Path
from typing import List, Union

from .errors import PuzzleFileError

logger = logging.getLogger(__name__)


def read_rows(path: Union[str, Path]) -> List[List[str]]:
    """
    Read a puzzle file as rows of whitespace-separated tokens.

    Blank lines are skipped.

    Args:
        path: Puzzle file to read

    Returns:
        One list of tokens per non-blank line

    Raises:
        PuzzleFileError: If the file cannot be read
    """
    try:
        with open(path, 'r', encoding='utf-8') as f:
            lines = f.read().splitlines()
    except (OSError, UnicodeDecodeError) as e:
        logger.warning(f"Failed to read puzzle file {path}: {e}")
        raise PuzzleFileError(path, "file not found or unreadable") from e

    return [line.split() for line in lines if line.strip()]


def parse_ints(tokens: List[str], path: Union[str, Path], line_no: int) -> List[int]:
    """
    Convert one row of tokens to integers.

    Args:
        tokens: Tokens from one line
        path: Source file (for error messages)
        line_no: 1-based line number (for error messages)

    Returns:
        List of integers

    Raises:
        PuzzleFileError: If any token is not an integer
    """
    try:
        return [int(token) for token in tokens]
    except ValueError as e:
        raise PuzzleFileError(path, f"line {line_no}: expected integers, got {' '.join(tokens)!r}") from e
