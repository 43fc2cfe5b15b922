"""Cross-platform abstractions for kaomoji-store.

Detects the runtime platform once at import time and resolves the
per-user directories the stores and preferences live in. Every other
module imports from here instead of doing its own platform detection.
"""

from __future__ import annotations

import os
import platform
from pathlib import Path

from platformdirs import user_config_dir, user_data_dir

from .constants import APP_NAME, DATA_DIR_ENV
from .errors import StoreIOError
from .log import logger

# ---------------------------------------------------------------------------
# Platform detection (runs once at import time)
# ---------------------------------------------------------------------------

_system = platform.system()  # "Linux", "Darwin", "Windows"

IS_WINDOWS = _system == "Windows"
IS_MACOS = _system == "Darwin"
IS_LINUX = _system == "Linux"

if IS_WINDOWS:
    PLATFORM = "windows"
elif IS_MACOS:
    PLATFORM = "macos"
else:
    PLATFORM = "linux"

# ---------------------------------------------------------------------------
# Paths
# ---------------------------------------------------------------------------


def default_data_dir() -> Path:
    """Return the platform's per-user data directory for the app."""
    return Path(user_data_dir(APP_NAME, appauthor=False))


def default_config_dir() -> Path:
    """Return the platform's per-user config directory for the app."""
    return Path(user_config_dir(APP_NAME, appauthor=False))


def resolve_data_dir(override: str | os.PathLike[str] | None = None) -> Path:
    """Return the absolute data directory, creating it if needed.

    Resolution order: *override*, then ``$KAOMOJI_STORE_DATA_DIR``, then the
    platform default. Raises ``StoreIOError`` if the directory cannot be
    created.
    """
    raw = override or os.environ.get(DATA_DIR_ENV) or default_data_dir()
    data_dir = Path(raw).expanduser().resolve()
    try:
        data_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise StoreIOError(f"cannot create data directory {data_dir}: {exc}") from exc
    logger.debug("using data directory %s", data_dir)
    return data_dir
