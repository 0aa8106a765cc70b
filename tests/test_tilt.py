"""
Tests for the tilt board.

Usage:
    pytest tests/test_tilt.py
"""

import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from puzzles.common import Direction, PuzzleFileError
from puzzles.solver import solve
from puzzles.tilt import TiltConfig

DATA_DIR = Path(__file__).parent.parent / "data" / "tilt"


def rows(config: TiltConfig):
    return ["".join(row) for row in config.grid]


def test_disks_slide_to_the_wall():
    board = TiltConfig.from_grid(["G.G", "...", "B.."])

    assert rows(board.tilt(Direction.WEST)) == ["GG.", "...", "B.."]
    assert rows(board.tilt(Direction.EAST)) == [".GG", "...", "..B"]
    assert rows(board.tilt(Direction.SOUTH)) == ["...", "G..", "B.G"]
    assert rows(board.tilt(Direction.NORTH)) == ["G.G", "B..", "..."]


def test_blocker_stops_disks():
    board = TiltConfig.from_grid(["G*.", "...", "..."])

    assert rows(board.tilt(Direction.EAST)) == ["G*.", "...", "..."]
    assert rows(board.tilt(Direction.SOUTH)) == [".*.", "...", "G.."]


def test_green_disk_drops_into_hole():
    board = TiltConfig.from_grid(["G.O", "...", "..."])
    tilted = board.tilt(Direction.EAST)

    assert rows(tilted) == ["..O", "...", "..."]
    assert tilted.is_solution()
    assert not board.is_solution()


def test_blue_disk_into_hole_is_illegal():
    board = TiltConfig.from_grid(["B.O", "...", "..."])

    assert board.tilt(Direction.EAST) is None
    # north, south and west remain legal
    assert len(board.successors()) == 3


def test_tilt_does_not_change_original():
    board = TiltConfig.from_grid(["G..", "...", "..."])
    board.tilt(Direction.EAST)

    assert rows(board) == ["G..", "...", "..."]


def test_successors_in_direction_order():
    board = TiltConfig.from_grid(["...", ".G.", "..."])

    assert [rows(c) for c in board.successors()] == [
        [".G.", "...", "..."],
        ["...", "...", ".G."],
        ["...", "G..", "..."],
        ["...", "..G", "..."],
    ]


def test_equal_boards_hash_alike():
    first = TiltConfig.from_grid(["G.", ".O"])
    second = TiltConfig.from_grid([["G", "."], [".", "O"]])

    assert first == second
    assert len({first, second}) == 1


def test_solve_data_board():
    start = TiltConfig.from_file(DATA_DIR / "tilt-1.txt")
    solution = solve(start)

    assert start.size == 3
    assert start.cell(0, 2) == "O"
    assert len(solution.path) == 2
    assert rows(solution.path[-1]) == ["..O", "...", "..B"]


def test_unsolvable_board():
    # The green disk can only reach the hole through the blue one
    board = TiltConfig.from_grid(["GBO", "***", "***"])
    assert solve(board).path == []


def test_render():
    board = TiltConfig.from_grid(["G.", "*O"])
    assert str(board) == "G .\n* O"


@pytest.mark.parametrize("content", [
    "",
    "x\n",
    "0\n",
    "2\nG .\n",
    "2\nG . .\n. O\n",
    "2\nG X\n. O\n",
])
def test_from_file_rejects_malformed(tmp_path, content):
    path = tmp_path / "bad.txt"
    path.write_text(content)

    with pytest.raises(PuzzleFileError):
        TiltConfig.from_file(path)
