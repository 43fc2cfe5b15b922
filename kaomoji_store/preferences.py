"""User preferences for kaomoji-store.

Loads settings from ``preferences.yaml`` in the per-user config directory.
Falls back to sensible defaults if the file doesn't exist or is invalid.
Creates a default file on first run so users can discover and edit it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import yaml

from .log import logger
from .platform import default_config_dir

PREFS_FILE = "preferences.yaml"

_DEFAULT_YAML = """\
# kaomoji-store preferences
# Delete this file to reset to defaults.

storage:
  data_dir: ""                   # where collection files live (empty = platform default)

logging:
  level: "WARNING"               # DEBUG, INFO, WARNING, ERROR
  file: ""                       # optional log file path (empty = stderr only)
"""


@dataclass
class StoragePreferences:
    """Where the collection files are kept."""

    data_dir: str = ""  # Empty means the platform data directory


@dataclass
class LoggingPreferences:
    """Diagnostic logging settings."""

    level: str = "WARNING"
    file: str = ""


@dataclass
class Preferences:
    """Top-level preferences."""

    storage: StoragePreferences = field(default_factory=StoragePreferences)
    logging: LoggingPreferences = field(default_factory=LoggingPreferences)


def prefs_path() -> Path:
    return default_config_dir() / PREFS_FILE


def load_preferences(path: Path | None = None) -> Preferences:
    """Load preferences from YAML file.

    Falls back to defaults if the file doesn't exist or is invalid.
    Creates a default preferences file on first run.
    """
    path = path or prefs_path()
    prefs = Preferences()

    if path.exists():
        try:
            data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
        except (OSError, yaml.YAMLError):
            logger.warning("ignoring unreadable preferences file %s", path, exc_info=True)
            return prefs
        if not isinstance(data, dict):
            return prefs
        if isinstance(data.get("storage"), dict):
            sdata = data["storage"]
            if "data_dir" in sdata:
                prefs.storage.data_dir = str(sdata["data_dir"] or "")
        if isinstance(data.get("logging"), dict):
            ldata = data["logging"]
            if "level" in ldata:
                prefs.logging.level = str(ldata["level"] or "WARNING").upper()
            if "file" in ldata:
                prefs.logging.file = str(ldata["file"] or "")
    else:
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(_DEFAULT_YAML, encoding="utf-8")
        except OSError:
            logger.debug("could not write default preferences to %s", path, exc_info=True)

    return prefs
