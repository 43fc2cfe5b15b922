"""Error types raised by the kaomoji stores.

Parse failures never appear here: a malformed collection file is backed up
and replaced by an empty list inside the store.
"""

from __future__ import annotations


class KaomojiStoreError(Exception):
    """Base class for errors reported to callers of the stores."""


class ValidationError(KaomojiStoreError, ValueError):
    """A candidate entry was rejected before any file was touched."""


class StoreIOError(KaomojiStoreError, OSError):
    """Directory creation, read, temp write, flush, or swap failed."""


class AtomicSwapError(StoreIOError):
    """The temp file was written but could not be swapped into place.

    ``primary`` is the error from the first swap primitive; ``fallback`` is
    set when a second primitive was tried and also failed.
    """

    def __init__(
        self,
        message: str,
        primary: OSError | None = None,
        fallback: OSError | None = None,
    ) -> None:
        super().__init__(message)
        self.primary = primary
        self.fallback = fallback

    def __str__(self) -> str:
        return self.args[0] if self.args else ""
