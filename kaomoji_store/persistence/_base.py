"""Base store for a JSON list of kaomoji entries."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path

from ..entry import Entry
from ..errors import StoreIOError
from ..log import logger
from .atomic import AtomicWriter
from .recovery import backup_corrupt


@dataclass
class LoadResult:
    """Entries read from disk, plus whether a corrupt file was quarantined."""

    entries: list[Entry] = field(default_factory=list)
    recovered: bool = False
    backup_path: Path | None = None


class EntryListStore:
    """A single collection file holding a pretty-printed JSON array.

    Nothing is cached between calls: every mutation re-reads the file,
    applies its policy and writes the whole list back through the
    ``AtomicWriter``. Subclasses add the mutation policies.
    """

    def __init__(self, path: Path, writer: AtomicWriter | None = None) -> None:
        self.path = path
        self.writer = writer or AtomicWriter()

    # -- core I/O -------------------------------------------------------------

    def load_checked(self) -> LoadResult:
        """Read the collection, quarantining the file if it does not parse.

        A missing file is an empty collection. Read errors raise
        ``StoreIOError``; parse errors never do.
        """
        try:
            if not self.path.exists():
                return LoadResult()
            raw = self.path.read_bytes()
        except OSError as exc:
            raise StoreIOError(f"failed to read {self.path}: {exc}") from exc

        try:
            entries = self._parse(raw)
        except ValueError:
            # JSONDecodeError and UnicodeDecodeError are both ValueErrors.
            logger.debug("failed to parse %s", self.path, exc_info=True)
            backup = backup_corrupt(self.path)
            return LoadResult(recovered=True, backup_path=backup)
        return LoadResult(entries=entries)

    def load(self) -> list[Entry]:
        """Return the stored entries in file order."""
        return self.load_checked().entries

    def save(self, entries: list[Entry]) -> None:
        """Atomically replace the collection file with *entries*."""
        self.writer.write(self.path, self.dumps(entries))

    # -- format ---------------------------------------------------------------

    @staticmethod
    def dumps(entries: list[Entry]) -> str:
        return json.dumps([e.to_dict() for e in entries], indent=2, ensure_ascii=False)

    @staticmethod
    def _parse(raw: bytes) -> list[Entry]:
        try:
            data = json.loads(raw.decode("utf-8"))
        except RecursionError:
            raise ValueError("JSON nested too deeply") from None
        if not isinstance(data, list):
            raise ValueError(f"expected a JSON array, got {type(data).__name__}")
        return [Entry.from_dict(item) for item in data]

    # -- helpers --------------------------------------------------------------

    @staticmethod
    def index_of(entries: list[Entry], symbol: str) -> int | None:
        for i, entry in enumerate(entries):
            if entry.symbol == symbol:
                return i
        return None
