"""
Tests for the PyQt5 windows, run on Qt's offscreen platform.

Usage:
    pytest tests/test_gui.py
"""

import os
import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
QtWidgets = pytest.importorskip("PyQt5.QtWidgets")

from puzzles.common import Coordinates, Direction
from puzzles.tilt import TiltModel
from puzzles.tilt.gui import TiltWindow
from puzzles.tipover import TipOverModel
from puzzles.tipover.gui import TipOverWindow

DATA_DIR = Path(__file__).parent.parent / "data"


@pytest.fixture(scope="module")
def qapp():
    app = QtWidgets.QApplication.instance() or QtWidgets.QApplication([])
    yield app


def test_tipover_window_moves(qapp):
    model = TipOverModel.from_file(DATA_DIR / "tipover" / "tipover-1.txt")
    window = TipOverWindow(model)

    assert len(window._cells) == 3
    assert len(window._cells[0]) == 4
    assert window._cells[1][0].text() == "3"

    window._on_move(Direction.EAST)
    assert window.message_label.text() == "No crate or tower there."

    window._on_move(Direction.SOUTH)
    window._on_move(Direction.EAST)
    assert window.message_label.text() == TipOverModel.TIPMSG
    assert model.tipper == Coordinates(1, 1)
    assert window._cells[1][0].text() == ""


def test_reset_rebuilds_grid_when_file_changes_size(qapp, tmp_path):
    path = tmp_path / "board.txt"
    path.write_text("2 3 0 0 1 2\n1 0 0\n0 0 1\n")
    window = TipOverWindow(TipOverModel.from_file(path))
    assert (len(window._cells), len(window._cells[0])) == (2, 3)

    path.write_text("3 4 0 0 2 3\n1 0 0 0\n3 0 0 0\n0 0 0 1\n")
    window._on_reset()

    assert window.message_label.text() == "Puzzle reset!"
    assert (len(window._cells), len(window._cells[0])) == (3, 4)
    assert window._cells[1][0].text() == "3"


def test_tilt_window(qapp):
    model = TiltModel.from_file(DATA_DIR / "tilt" / "tilt-1.txt")
    window = TiltWindow(model)

    assert (len(window._cells), len(window._cells[0])) == (3, 3)

    window._on_move(Direction.EAST)
    assert window.message_label.text() == "I WON!"
    assert model.is_solved()

    window._on_hint()
    assert window.message_label.text() == TiltModel.SOLVED
