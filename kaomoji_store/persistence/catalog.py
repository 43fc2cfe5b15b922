"""User catalog persistence store."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ..entry import Entry, sanitize
from ._base import EntryListStore


class CatalogStore(EntryListStore):
    """User-added kaomojis, unique by symbol, in insertion order."""

    def upsert(self, raw: Entry | Mapping[str, Any]) -> Entry:
        """Insert *raw* or update the tags and category of its match.

        An existing entry keeps its position. Returns the stored entry.
        Raises ``ValidationError`` before touching the file when the symbol
        is blank.
        """
        entry = sanitize(raw)
        entries = self.load()
        idx = self.index_of(entries, entry.symbol)
        if idx is None:
            entries.append(entry)
        else:
            entries[idx].tags = entry.tags
            entries[idx].category = entry.category
            entry = entries[idx]
        self.save(entries)
        return entry

    def find(self, symbol: str) -> Entry | None:
        """Return the catalog entry for *symbol* (trimmed), if any."""
        entries = self.load()
        idx = self.index_of(entries, symbol.strip())
        return None if idx is None else entries[idx]
