"""Runtime settings read from the environment."""

import os
from pathlib import Path

ROSTER_PATH_ENV = "ROTATION_ROSTER_PATH"
PREFERENCES_PATH_ENV = "ROTATION_PREFERENCES_PATH"
LOG_LEVEL_ENV = "ROTATION_LOG_LEVEL"

DEFAULT_ROSTER_PATH = Path(__file__).parent / "data" / "roster.json"
DEFAULT_PREFERENCES_PATH = Path.home() / ".config" / "shift-rotation" / "preferences.json"
DEFAULT_LOG_LEVEL = "WARNING"


def roster_path() -> Path:
    """Location of the roster JSON (env override, else the bundled file)."""
    override = os.environ.get(ROSTER_PATH_ENV)
    return Path(override) if override else DEFAULT_ROSTER_PATH


def preferences_path() -> Path:
    override = os.environ.get(PREFERENCES_PATH_ENV)
    return Path(override) if override else DEFAULT_PREFERENCES_PATH


def log_level() -> str:
    return os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).upper()
