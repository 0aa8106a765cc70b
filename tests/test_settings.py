"""
Tests for saved settings and puzzle file lookup.

Usage:
    pytest tests/test_settings.py
"""

import json
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from puzzles import settings
from puzzles.common import PuzzleFileError


def test_missing_file_gives_defaults(tmp_path):
    loaded = settings.load_settings(tmp_path / "config.json")

    assert loaded == settings.DEFAULT_SETTINGS
    assert loaded is not settings.DEFAULT_SETTINGS


def test_saved_values_merge_with_defaults(tmp_path):
    path = tmp_path / "config.json"
    settings.save_settings({"log_level": "DEBUG"}, path)

    loaded = settings.load_settings(path)
    assert loaded["log_level"] == "DEBUG"
    assert loaded["data_dir"] == "data"
    assert loaded["log_file"] is None


def test_invalid_json_gives_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{not json")
    assert settings.load_settings(path) == settings.DEFAULT_SETTINGS

    path.write_text(json.dumps(["a", "list"]))
    assert settings.load_settings(path) == settings.DEFAULT_SETTINGS


def test_default_location(tmp_path, monkeypatch):
    monkeypatch.setattr(settings, "SETTINGS_FILE", tmp_path / "saved.json")
    settings.save_settings({"data_dir": "boards"})

    assert settings.load_settings()["data_dir"] == "boards"


def test_resolve_existing_path(tmp_path):
    board = tmp_path / "board.txt"
    board.write_text("1\n.\n")

    assert settings.resolve_puzzle_path(board, "tilt", "elsewhere") == board


def test_resolve_in_data_dir(tmp_path):
    folder = tmp_path / "tipover"
    folder.mkdir()
    (folder / "board.txt").write_text("1 1 0 0 0 0\n1\n")

    resolved = settings.resolve_puzzle_path("board.txt", "tipover", tmp_path)
    assert resolved == folder / "board.txt"


def test_resolve_unknown_name_is_unchanged(tmp_path):
    resolved = settings.resolve_puzzle_path("nowhere/board.txt", "tipover", tmp_path)
    assert resolved == Path("nowhere/board.txt")


def test_puzzle_file_error_message():
    error = PuzzleFileError("boards/a.txt", "expected 3 rows, found 2")

    assert isinstance(error, ValueError)
    assert error.path == "boards/a.txt"
    assert error.reason == "expected 3 rows, found 2"
    assert str(error) == "boards/a.txt: expected 3 rows, found 2"


def test_wrong_types_fall_back_to_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"log_level": 10, "data_dir": None, "log_file": 3}))

    loaded = settings.load_settings(path)
    assert loaded["log_level"] == "WARNING"
    assert loaded["data_dir"] == "data"
    assert loaded["log_file"] is None


def test_valid_values_survive_type_check(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"log_level": "INFO", "log_file": "run.log", "extra": 1}))

    loaded = settings.load_settings(path)
    assert loaded["log_level"] == "INFO"
    assert loaded["log_file"] == "run.log"
    assert loaded["extra"] == 1
