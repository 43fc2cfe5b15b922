"""Shared test fixtures for kaomoji-store test suite."""

from __future__ import annotations

from pathlib import Path

import pytest

from kaomoji_store.constants import DATA_DIR_ENV
from kaomoji_store.entry import Entry
from kaomoji_store.log import logger


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    """Provide an empty data directory for the collection files."""
    d = tmp_path / "data"
    d.mkdir()
    return d


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch):
    """Keep the real user data directory and logger state out of tests."""
    monkeypatch.delenv(DATA_DIR_ENV, raising=False)
    handlers = list(logger.handlers)
    level = logger.level
    yield
    for handler in list(logger.handlers):
        if handler not in handlers:
            logger.removeHandler(handler)
            handler.close()
    logger.setLevel(level)


@pytest.fixture
def sample_entries() -> list[Entry]:
    """A few already-normalized entries in a known order."""
    return [
        Entry("(^_^)", ["happy", "smile"], "Positive"),
        Entry("(╯°□°)╯︵ ┻━┻", ["angry", "table"], "Negative"),
        Entry("¯\\_(ツ)_/¯", ["shrug"], ""),
        Entry("[¬º-°]¬", [], "Misc"),
    ]
