"""Quarantine of collection files that no longer parse."""

from __future__ import annotations

import time
from pathlib import Path

from ..constants import CORRUPT_MARKER
from ..log import logger


def backup_path_for(path: Path, now: float | None = None) -> Path:
    """Return an unused ``<name>.corrupt.<unix-seconds>`` path beside *path*.

    A numeric suffix is appended if a backup from the same second exists.
    """
    seconds = int(time.time() if now is None else now)
    candidate = path.with_name(f"{path.name}.{CORRUPT_MARKER}.{seconds}")
    n = 1
    while candidate.exists():
        candidate = path.with_name(f"{path.name}.{CORRUPT_MARKER}.{seconds}.{n}")
        n += 1
    return candidate


def backup_corrupt(path: Path) -> Path | None:
    """Move the unreadable file at *path* aside and return the backup path.

    Tries a rename first and falls back to copy-then-delete (e.g. across
    devices). Returns ``None`` when no backup could be made. Never raises;
    the caller carries on with an empty collection either way.
    """
    backup = backup_path_for(path)
    try:
        path.rename(backup)
    except OSError as rename_err:
        try:
            backup.write_bytes(path.read_bytes())
        except OSError:
            logger.warning(
                "kaomoji file %s is corrupt; failed to back up: %s",
                path,
                rename_err,
                exc_info=True,
            )
            return None
        try:
            path.unlink()
        except OSError as remove_err:
            logger.warning(
                "kaomoji file %s is corrupt; copied to %s but could not remove original: %s",
                path,
                backup,
                remove_err,
            )
        else:
            logger.warning("kaomoji file %s is corrupt; backed up via copy to %s", path, backup)
        return backup

    logger.warning("kaomoji file %s is corrupt; backed up to %s", path, backup)
    return backup
