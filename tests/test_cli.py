"""
Tests for the command-line entry point and the command registry.

Usage:
    pytest tests/test_cli.py
"""

import io
import json
import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

import main
from puzzles.commands import create_command, get_command_info, get_command_names

DATA_DIR = Path(__file__).parent.parent / "data"


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Run every test from an empty directory so no config.json is picked up."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


def output_lines(capsys):
    return capsys.readouterr().out.splitlines()


# ========== Registry ==========

def test_all_commands_registered():
    names = get_command_names()
    for expected in ("clock", "water", "tilt", "tilt-ptui", "tipover", "tipover-ptui", "tipover-gui", "tilt-gui"):
        assert expected in names

    info = {item["name"]: item["description"] for item in get_command_info()}
    assert info["clock"]


def test_unknown_command():
    with pytest.raises(ValueError) as e:
        create_command("sudoku")
    assert "sudoku" in str(e.value)
    assert "clock" in str(e.value)


# ========== Solver commands ==========

def test_clock(capsys):
    assert main.main(["clock", "12", "9", "3"]) == 0
    lines = output_lines(capsys)

    assert lines[0] == "Hours: 12, Start: 9, End: 3"
    assert lines[1].startswith("Total configs: ")
    assert lines[2].startswith("Unique configs: ")
    assert lines[3:] == [f"Step {i}: {hour}" for i, hour in enumerate([9, 8, 7, 6, 5, 4, 3])]


def test_clock_rejects_bad_hours(capsys):
    assert main.main(["clock", "12", "13", "3"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "between 1 and hours" in captured.err


def test_water(capsys):
    assert main.main(["water", "4", "5", "3"]) == 0
    lines = output_lines(capsys)

    assert lines[0] == "Amount: 4, Buckets: [5, 3]"
    assert lines[3] == "Step 0: [0, 0]"
    assert lines[-1] == "Step 6: [4, 3]"


def test_water_no_solution(capsys):
    assert main.main(["water", "1", "2", "4"]) == 0
    lines = output_lines(capsys)

    assert lines == ["Amount: 1, Buckets: [2, 4]", "No solution"]


def test_tipover(capsys):
    path = DATA_DIR / "tipover" / "tipover-1.txt"
    assert main.main(["tipover", str(path)]) == 0
    out = capsys.readouterr().out

    assert out.startswith(f"File: {path}\n")
    assert "Step 5:\n" in out
    assert "Step 6:" not in out


def test_tipover_name_looked_up_in_data_dir(capsys):
    assert main.main(["--data-dir", str(DATA_DIR), "tipover", "tipover-2.txt"]) == 0
    lines = output_lines(capsys)

    assert lines[0] == "File: tipover-2.txt"
    assert lines[-1] == "No solution"


def test_tilt(capsys):
    assert main.main(["tilt", str(DATA_DIR / "tilt" / "tilt-1.txt")]) == 0
    out = capsys.readouterr().out

    assert "Step 1:\n. . O\n. . .\n. . B\n" in out


def test_missing_file(capsys):
    assert main.main(["tipover", "no-such-board.txt"]) == 1
    captured = capsys.readouterr()

    assert captured.out == ""
    assert "Failed to load" in captured.err
    assert "no-such-board.txt" in captured.err


def test_unknown_subcommand():
    with pytest.raises(SystemExit):
        main.main(["sudoku"])


# ========== Play commands ==========

def test_tipover_ptui_reads_stdin(capsys, monkeypatch):
    monkeypatch.setattr(sys, "stdin", io.StringIO("m s\nq\n"))
    path = DATA_DIR / "tipover" / "tipover-1.txt"

    assert main.main(["tipover-ptui", str(path)]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Loaded: tipover-1.txt")
    assert " 1 | *3" in out


def test_tilt_ptui_missing_file(capsys):
    assert main.main(["tilt-ptui", "missing.txt"]) == 1
    assert "Failed to load" in capsys.readouterr().err


# ========== Settings ==========

def test_settings_provide_data_dir(isolated_settings, capsys):
    config = isolated_settings / "config.json"
    config.write_text(json.dumps({"data_dir": str(DATA_DIR)}))

    assert main.main(["tilt", "tilt-1.txt"]) == 0
    assert capsys.readouterr().out.startswith("File: tilt-1.txt\n")


def test_log_file_option(isolated_settings, capsys):
    log_file = isolated_settings / "run.log"

    assert main.main(["--log-level", "INFO", "--log-file", str(log_file), "clock", "4", "1", "3"]) == 0
    capsys.readouterr()

    assert "Running clock" in log_file.read_text(encoding="utf-8")


def test_settings_with_wrong_types_still_run(isolated_settings, capsys):
    config = isolated_settings / "config.json"
    config.write_text(json.dumps({"log_level": 10, "data_dir": None}))

    assert main.main(["clock", "12", "9", "3"]) == 0
    assert main.main(["tipover", str(DATA_DIR / "tipover" / "tipover-1.txt")]) == 0
    assert "Step 5:" in capsys.readouterr().out


def test_registered_command_can_be_replaced():
    from puzzles.commands import factory
    from puzzles.commands.clock import ClockCommand

    class LoudClock(ClockCommand):
        name = "clock"

    factory.register_command(LoudClock)
    try:
        assert isinstance(create_command("clock", data_dir="boards"), LoudClock)
        assert get_command_names().count("clock") == 1
    finally:
        factory.register_command(ClockCommand)
    assert type(create_command("clock")) is ClockCommand
