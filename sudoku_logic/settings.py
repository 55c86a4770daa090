"""
Settings Module for the Sudoku logic solver

Solver preferences persist as a JSON object in config.json in the working
directory. Known keys are checked against the type of their default so a
hand-edited file cannot smuggle a string round cap into the solver; bad
values fall back to the default with a warning.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

from .solver.context import DEFAULT_MAX_ROUNDS

logger = logging.getLogger(__name__)

# Settings file location (working directory)
SETTINGS_FILE = Path("config.json")

DEFAULT_SETTINGS: Dict[str, Any] = {
    "max_rounds": DEFAULT_MAX_ROUNDS,
    "verbose": False,
    "ywing_eliminates": True,
    "show_candidates": False,
}


def _checked(key: str, value: Any) -> Any:
    """Return value if it suits the key's default, else the default."""
    default = DEFAULT_SETTINGS.get(key)
    if default is None:
        # not one of ours (e.g. "techniques"); SolverConfig validates it
        return value

    if isinstance(default, bool):
        ok = isinstance(value, bool)
    else:
        # bool is an int subclass; a round cap of True is not meant
        ok = isinstance(value, int) and not isinstance(value, bool) and value >= 0
    if not ok:
        logger.warning(f"Ignoring setting {key}={value!r}, using {default!r}")
        return default
    return value


def load_settings(path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Load solver settings, layered over DEFAULT_SETTINGS.

    Args:
        path: Settings file (defaults to SETTINGS_FILE)

    Returns:
        Settings dictionary. A missing, unreadable or non-object file gives
        the defaults; individual bad values are replaced by their default.
    """
    path = path or SETTINGS_FILE
    if not path.exists():
        logger.debug(f"No settings at {path}, using defaults")
        return DEFAULT_SETTINGS.copy()

    try:
        with open(path, 'r', encoding='utf-8') as f:
            stored = json.load(f)
        if not isinstance(stored, dict):
            raise ValueError("settings file must hold a JSON object")
    except (ValueError, IOError) as e:
        logger.warning(f"Failed to load settings: {e}, using defaults")
        return DEFAULT_SETTINGS.copy()

    result = DEFAULT_SETTINGS.copy()
    for key, value in stored.items():
        result[key] = _checked(key, value)
    logger.debug(f"Settings loaded from {path}: {result}")
    return result


def save_settings(settings: Dict[str, Any], path: Optional[Path] = None) -> None:
    """
    Write settings as indented JSON. Failures are logged, not raised.

    Args:
        settings: Settings dictionary to save
        path: Settings file (defaults to SETTINGS_FILE)
    """
    path = path or SETTINGS_FILE
    try:
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(settings, f, indent=2)
        logger.debug(f"Settings saved to {path}")
    except IOError as e:
        logger.error(f"Failed to save settings: {e}")
