"""Operations exposed to the UI / command layer.

Each call resolves the data directory, builds fresh stores, runs one
load → mutate → persist transaction and reports a :class:`CommandResult`.
Validation and I/O failures come back as ``ok=False`` with a readable
message; nothing is retried.
"""

from __future__ import annotations

import os
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from .constants import CATALOG_FILE, FAVORITES_FILE, RECENTS_FILE
from .entry import Entry
from .errors import KaomojiStoreError
from .log import logger
from .persistence import CatalogStore, FavoritesStore, RecentsStore
from .persistence.atomic import AtomicWriter
from .platform import resolve_data_dir

RawEntry = Entry | Mapping[str, Any]


@dataclass
class CommandResult:
    """Outcome of one exposed operation."""

    ok: bool
    value: Any = None
    error: str = ""


@dataclass
class Stores:
    """The three collection stores bound to one data directory."""

    catalog: CatalogStore
    recents: RecentsStore
    favorites: FavoritesStore

    @classmethod
    def in_dir(cls, data_dir: Path, writer: AtomicWriter | None = None) -> Stores:
        writer = writer or AtomicWriter()
        return cls(
            catalog=CatalogStore(data_dir / CATALOG_FILE, writer),
            recents=RecentsStore(data_dir / RECENTS_FILE, writer),
            favorites=FavoritesStore(data_dir / FAVORITES_FILE, writer),
        )


def _run(
    name: str,
    data_dir: str | os.PathLike[str] | None,
    op: Callable[[Stores], Any],
) -> CommandResult:
    try:
        stores = Stores.in_dir(resolve_data_dir(data_dir))
        return CommandResult(ok=True, value=op(stores))
    except KaomojiStoreError as exc:
        logger.info("%s failed: %s", name, exc)
        return CommandResult(ok=False, error=str(exc))


def load_catalog(data_dir: str | os.PathLike[str] | None = None) -> CommandResult:
    """Return the user catalog as ``value``."""
    return _run("load_catalog", data_dir, lambda s: s.catalog.load())


def upsert_catalog_entry(
    entry: RawEntry, data_dir: str | os.PathLike[str] | None = None
) -> CommandResult:
    """Add or update a catalog entry; ``value`` is the stored entry."""
    return _run("upsert_catalog_entry", data_dir, lambda s: s.catalog.upsert(entry))


def load_recents(data_dir: str | os.PathLike[str] | None = None) -> CommandResult:
    """Return the recents list, newest first."""
    return _run("load_recents", data_dir, lambda s: s.recents.load())


def record_recent(
    entry: RawEntry, data_dir: str | os.PathLike[str] | None = None
) -> CommandResult:
    """Push *entry* to the front of the recents list."""
    return _run("record_recent", data_dir, lambda s: s.recents.record(entry))


def load_favorites(data_dir: str | os.PathLike[str] | None = None) -> CommandResult:
    """Return the favorites list."""
    return _run("load_favorites", data_dir, lambda s: s.favorites.load())


def toggle_favorite(
    entry: RawEntry, data_dir: str | os.PathLike[str] | None = None
) -> CommandResult:
    """Flip favorite membership; ``value`` is the new membership."""
    return _run("toggle_favorite", data_dir, lambda s: s.favorites.toggle(entry))
