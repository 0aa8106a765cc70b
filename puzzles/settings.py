"""
Settings Module for the puzzle solvers

Provides persistent storage for user preferences using JSON.
Settings are stored in config.json in the working directory.
"""

import json
import logging
from pathlib import Path
from typing import Dict, Any, Optional, Union

logger = logging.getLogger(__name__)

# Settings file location (working directory)
SETTINGS_FILE = Path("config.json")

# Default settings
DEFAULT_SETTINGS: Dict[str, Any] = {
    "log_level": "WARNING",
    "log_file": None,
    "data_dir": "data",
}

# Accepted types per known key
_SETTING_TYPES: Dict[str, tuple] = {
    "log_level": (str,),
    "log_file": (str, type(None)),
    "data_dir": (str,),
}


def _replace_bad_values(settings: Dict[str, Any]) -> None:
    """Reset known keys holding a value of the wrong type to their default."""
    for key, types in _SETTING_TYPES.items():
        if not isinstance(settings.get(key), types):
            logger.warning(f"Invalid setting {key}={settings.get(key)!r}, using {DEFAULT_SETTINGS[key]!r}")
            settings[key] = DEFAULT_SETTINGS[key]


def load_settings(path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Load settings from config.json.

    Args:
        path: Settings file (defaults to SETTINGS_FILE)

    Returns:
        Settings dictionary. Returns defaults if file missing or invalid.
    """
    path = path or SETTINGS_FILE
    if not path.exists():
        logger.debug("Settings file not found, using defaults")
        return DEFAULT_SETTINGS.copy()

    try:
        with open(path, 'r', encoding='utf-8') as f:
            settings = json.load(f)

        if not isinstance(settings, dict):
            raise ValueError("settings must be a JSON object")

        # Merge with defaults to handle missing keys
        result = DEFAULT_SETTINGS.copy()
        result.update(settings)
        _replace_bad_values(result)
        logger.debug(f"Settings loaded: {result}")
        return result

    except (json.JSONDecodeError, ValueError, IOError) as e:
        logger.warning(f"Failed to load settings: {e}, using defaults")
        return DEFAULT_SETTINGS.copy()


def save_settings(settings: Dict[str, Any], path: Optional[Path] = None) -> None:
    """
    Save settings to config.json.

    Args:
        settings: Settings dictionary to save
        path: Settings file (defaults to SETTINGS_FILE)
    """
    path = path or SETTINGS_FILE
    try:
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(settings, f, indent=2)
        logger.debug(f"Settings saved: {settings}")
    except IOError as e:
        logger.error(f"Failed to save settings: {e}")


def resolve_puzzle_path(name: Union[str, Path], puzzle: str, data_dir: Union[str, Path]) -> Path:
    """
    Find a puzzle file given on the command line.

    A path that exists is used as is; otherwise the name is looked up in
    the puzzle's folder under the data directory (e.g. data/tipover/).

    Args:
        name: File name or path typed by the user
        puzzle: Puzzle folder name, such as "tipover"
        data_dir: Root data directory

    Returns:
        Path to use (may not exist; loaders report that)
    """
    path = Path(name)
    if path.exists():
        return path
    candidate = Path(data_dir) / puzzle / path.name
    if candidate.exists():
        logger.debug(f"Resolved {name} to {candidate}")
        return candidate
    return path
