"""
Tests for settings persistence.

Usage:
    python -m pytest tests/test_settings.py
"""

import json
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from sudoku_logic.settings import DEFAULT_SETTINGS, load_settings, save_settings
from sudoku_logic.solver import SolverConfig


def test_missing_file_gives_defaults(tmp_path):
    settings = load_settings(tmp_path / "config.json")

    assert settings == DEFAULT_SETTINGS
    assert settings is not DEFAULT_SETTINGS


def test_save_then_load(tmp_path):
    path = tmp_path / "config.json"
    save_settings({"max_rounds": 7, "ywing_eliminates": False}, path)

    settings = load_settings(path)

    assert settings["max_rounds"] == 7
    assert settings["ywing_eliminates"] is False
    # missing keys come from the defaults
    assert settings["verbose"] is False
    assert SolverConfig.from_settings(settings).max_rounds == 7


def test_invalid_json_gives_defaults(tmp_path, caplog):
    path = tmp_path / "config.json"
    path.write_text("{not json", encoding="utf-8")

    assert load_settings(path) == DEFAULT_SETTINGS
    assert "Failed to load settings" in caplog.text


def test_non_object_gives_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps([1, 2, 3]), encoding="utf-8")

    assert load_settings(path) == DEFAULT_SETTINGS


def test_save_to_missing_directory_logs_error(tmp_path, caplog):
    save_settings(DEFAULT_SETTINGS, tmp_path / "missing" / "config.json")

    assert "Failed to save settings" in caplog.text


def test_bad_values_fall_back_per_key(tmp_path, caplog):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({
        "max_rounds": "many",
        "verbose": "yes",
        "ywing_eliminates": False,
        "techniques": ["simple_elimination"],
    }), encoding="utf-8")

    settings = load_settings(path)

    assert settings["max_rounds"] == DEFAULT_SETTINGS["max_rounds"]
    assert settings["verbose"] is False
    assert settings["ywing_eliminates"] is False
    assert settings["techniques"] == ["simple_elimination"]
    assert "Ignoring setting max_rounds='many'" in caplog.text


def test_negative_or_boolean_round_cap_rejected(tmp_path):
    path = tmp_path / "config.json"
    for value in (-3, True, 2.5):
        path.write_text(json.dumps({"max_rounds": value}), encoding="utf-8")
        assert load_settings(path)["max_rounds"] == DEFAULT_SETTINGS["max_rounds"]
