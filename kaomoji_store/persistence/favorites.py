"""Favorites persistence store."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ..entry import Entry, sanitize
from ._base import EntryListStore


class FavoritesStore(EntryListStore):
    """Favorite kaomojis; membership is keyed on the symbol."""

    def toggle(self, raw: Entry | Mapping[str, Any]) -> bool:
        """Add *raw* if absent, remove it if present.

        Returns ``True`` when the entry is a favorite after the call.
        """
        entry = sanitize(raw)
        entries = self.load()
        idx = self.index_of(entries, entry.symbol)
        if idx is None:
            entries.append(entry)
            is_favorite = True
        else:
            del entries[idx]
            is_favorite = False
        self.save(entries)
        return is_favorite

    def contains(self, symbol: str) -> bool:
        return self.index_of(self.load(), symbol.strip()) is not None
