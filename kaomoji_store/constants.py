"""Constants shared across kaomoji-store."""

from __future__ import annotations

APP_NAME = "kaomoji-store"

# Environment variable that overrides the data directory.
DATA_DIR_ENV = "KAOMOJI_STORE_DATA_DIR"

# Collection file names inside the data directory.
CATALOG_FILE = "kaomojis.user.json"
RECENTS_FILE = "kaomojis.recents.json"
FAVORITES_FILE = "kaomojis.favorites.json"

MAX_RECENTS = 20

# Marker inserted between the collection file name and the timestamp of a
# backup taken from an unreadable file.
CORRUPT_MARKER = "corrupt"

TEMP_SUFFIX = ".tmp"
