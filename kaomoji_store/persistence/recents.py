"""Most-recently-used persistence store."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

from ..constants import MAX_RECENTS
from ..entry import Entry, sanitize
from ._base import EntryListStore
from .atomic import AtomicWriter


class RecentsStore(EntryListStore):
    """Recently used kaomojis, newest first, capped at ``capacity``."""

    def __init__(
        self,
        path: Path,
        writer: AtomicWriter | None = None,
        capacity: int = MAX_RECENTS,
    ) -> None:
        super().__init__(path, writer)
        self.capacity = capacity

    def record(self, raw: Entry | Mapping[str, Any]) -> list[Entry]:
        """Move *raw* to the front, dropping duplicates and the overflow."""
        entry = sanitize(raw)
        entries = [e for e in self.load() if e.symbol != entry.symbol]
        entries.insert(0, entry)
        entries = entries[: self.capacity]
        self.save(entries)
        return entries
