"""Persistence layer – each store owns its file path, data format, and I/O."""

from ._base import EntryListStore, LoadResult
from .atomic import AtomicWriter, PosixReplacer, WindowsReplacer, atomic_write
from .catalog import CatalogStore
from .favorites import FavoritesStore
from .recents import RecentsStore
from .recovery import backup_corrupt

__all__ = [
    "AtomicWriter",
    "CatalogStore",
    "EntryListStore",
    "FavoritesStore",
    "LoadResult",
    "PosixReplacer",
    "RecentsStore",
    "WindowsReplacer",
    "atomic_write",
    "backup_corrupt",
]
