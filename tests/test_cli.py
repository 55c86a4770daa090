"""
Tests for the command line entry point.

Usage:
    python -m pytest tests/test_cli.py
"""

import io
import json
import logging
import sys
from contextlib import redirect_stdout
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from sudoku_logic import cli
from sudoku_logic.solver import LogicSolver, SolverConfig


@pytest.fixture(autouse=True)
def restore_logging():
    """cli.main() reconfigures the root logger; put it back afterwards."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def test_solve_text_prints_solution(easy_puzzle_text):
    out = io.StringIO()

    code = cli.solve_text(easy_puzzle_text, LogicSolver(), out=out)

    text = out.getvalue()
    assert code == cli.EXIT_SOLVED
    assert "Final Solution:" in text
    assert "534678912\n672195348" in text
    assert "Final Score" not in text


def test_solve_text_verbose_prints_report(easy_puzzle_text):
    out = io.StringIO()

    cli.solve_text(easy_puzzle_text, LogicSolver(SolverConfig(verbose=True)),
                   show_candidates=True, out=out)

    text = out.getvalue()
    assert "Methods Used:" in text
    assert "Final Score: " in text
    assert "-" * 51 in text


def test_solve_text_bad_input():
    out = io.StringIO()

    code = cli.solve_text("12345", LogicSolver(), out=out)

    assert code == cli.EXIT_BAD_INPUT
    assert "at least 81 characters" in out.getvalue()


def test_solve_text_unsolved():
    out = io.StringIO()

    code = cli.solve_text("0" * 81, LogicSolver(), out=out)

    assert code == cli.EXIT_UNSOLVED
    assert "000000000" in out.getvalue()


def test_interactive_loop_survives_bad_input(easy_puzzle_text):
    stream = io.StringIO(f"bad\n\n{easy_puzzle_text}\nquit\n{easy_puzzle_text}\n")
    out = io.StringIO()

    attempted = cli.interactive_loop(LogicSolver(), stream=stream, out=out)

    text = out.getvalue()
    assert attempted == 2
    assert "only digits" not in text
    assert "at least 81 characters" in text
    assert text.count("Final Solution:") == 1


def test_interactive_loop_stops_at_eof():
    out = io.StringIO()

    assert cli.interactive_loop(LogicSolver(), stream=io.StringIO(""), out=out) == 0
    assert "Enter the puzzle in string form:" in out.getvalue()


def test_build_config_cli_overrides_settings():
    args = cli.parse_args(["--max-rounds", "5", "--no-ywing-elimination", "-c"])
    settings = {"max_rounds": 20, "verbose": True, "ywing_eliminates": True}

    config = cli.build_config(args, settings)

    assert config.max_rounds == 5
    assert config.verbose is True
    assert config.ywing_eliminates is False
    assert settings["show_candidates"] is True


def test_main_with_puzzle(easy_puzzle_text, tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)

    code = cli.main(["--puzzle", easy_puzzle_text])

    assert code == cli.EXIT_SOLVED
    assert "345286179" in capsys.readouterr().out
    assert not (tmp_path / "config.json").exists()


def test_main_saves_settings(easy_puzzle_text, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    cli.main(["--puzzle", easy_puzzle_text, "--max-rounds", "3", "--save-settings"])

    saved = json.loads((tmp_path / "config.json").read_text(encoding="utf-8"))
    assert saved["max_rounds"] == 3


def test_output_follows_redirected_stdout(easy_puzzle_text):
    buffer = io.StringIO()

    with redirect_stdout(buffer):
        cli.solve_text(easy_puzzle_text, LogicSolver())

    assert "345286179" in buffer.getvalue()


def test_interactive_loop_reads_current_stdin(easy_puzzle_text, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(f"  {easy_puzzle_text}  \n"))

    assert cli.interactive_loop(LogicSolver()) == 1
    assert "Final Solution:" in capsys.readouterr().out


def test_main_rejects_negative_round_cap(easy_puzzle_text, tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)

    code = cli.main(["--puzzle", easy_puzzle_text, "--max-rounds", "-1"])

    assert code == cli.EXIT_BAD_INPUT
    assert "max_rounds must be >= 0" in capsys.readouterr().err


def test_main_rejects_unknown_technique_in_settings(easy_puzzle_text, tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "config.json").write_text(json.dumps({"techniques": ["guessing"]}), encoding="utf-8")

    code = cli.main(["--puzzle", easy_puzzle_text])

    assert code == cli.EXIT_BAD_INPUT
    assert "Unknown technique" in capsys.readouterr().err


def test_main_ignores_non_numeric_round_cap(easy_puzzle_text, tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "config.json").write_text(json.dumps({"max_rounds": "many"}), encoding="utf-8")

    code = cli.main(["--puzzle", easy_puzzle_text])

    assert code == cli.EXIT_SOLVED
    assert "345286179" in capsys.readouterr().out
