"""Crash-safe file replacement.

A write goes to a uniquely named sibling temp file, is fsynced, and is then
swapped over the target in one atomic step. Readers see either the previous
file or the new one, never a truncated mix.

The swap itself is delegated to a *replacer*. ``PosixReplacer`` uses
``rename(2)`` plus a directory fsync; ``WindowsReplacer`` uses
``ReplaceFileW`` with a ``MoveFileExW`` fallback. Both satisfy the same
contract, so the writer does not care which one it is given.
"""

from __future__ import annotations

import os
import time
from collections.abc import Callable
from pathlib import Path
from typing import Any, Protocol

from ..constants import TEMP_SUFFIX
from ..errors import AtomicSwapError, StoreIOError
from ..log import logger
from ..platform import IS_WINDOWS

# Win32 flag values (winbase.h)
REPLACEFILE_WRITE_THROUGH = 0x00000001
MOVEFILE_REPLACE_EXISTING = 0x00000001
MOVEFILE_WRITE_THROUGH = 0x00000008


class Replacer(Protocol):
    """Swap a fully written temp file into place."""

    def replace(self, src: Path, dst: Path) -> None:
        """Atomically replace the existing *dst* with *src*."""

    def move(self, src: Path, dst: Path) -> None:
        """Atomically move *src* to the not-yet-existing *dst*."""

    def sync_directory(self, directory: Path) -> None:
        """Best-effort flush of *directory* metadata. Must not raise."""


class PosixReplacer:
    """``rename(2)`` based swap; the rename already replaces *dst*."""

    def replace(self, src: Path, dst: Path) -> None:
        self._rename(src, dst)

    def move(self, src: Path, dst: Path) -> None:
        self._rename(src, dst)

    @staticmethod
    def _rename(src: Path, dst: Path) -> None:
        try:
            os.replace(src, dst)
        except OSError as exc:
            raise AtomicSwapError(f"rename failed ({exc})", primary=exc) from exc

    def sync_directory(self, directory: Path) -> None:  # noqa: PLR6301
        # A rename is only durable once the directory entry is on disk.
        try:
            fd = os.open(directory, os.O_RDONLY)
        except OSError:
            logger.debug("cannot open %s for fsync", directory, exc_info=True)
            return
        try:
            os.fsync(fd)
        except OSError:
            logger.debug("directory fsync failed for %s", directory, exc_info=True)
        finally:
            os.close(fd)


def _load_kernel32() -> Any:
    import ctypes
    from ctypes import wintypes

    kernel32 = ctypes.WinDLL("kernel32", use_last_error=True)  # type: ignore[attr-defined]
    kernel32.ReplaceFileW.argtypes = [
        wintypes.LPCWSTR,
        wintypes.LPCWSTR,
        wintypes.LPCWSTR,
        wintypes.DWORD,
        wintypes.LPVOID,
        wintypes.LPVOID,
    ]
    kernel32.ReplaceFileW.restype = wintypes.BOOL
    kernel32.MoveFileExW.argtypes = [wintypes.LPCWSTR, wintypes.LPCWSTR, wintypes.DWORD]
    kernel32.MoveFileExW.restype = wintypes.BOOL
    return kernel32


def _win_last_error() -> OSError:
    import ctypes

    return ctypes.WinError(ctypes.get_last_error())  # type: ignore[attr-defined]


class WindowsReplacer:
    """``ReplaceFileW`` swap that falls back to ``MoveFileExW``.

    *kernel32* and *last_error* default to the real Win32 bindings and are
    resolved lazily, so the class can be built (and tested with fakes) on
    any platform.
    """

    def __init__(
        self,
        kernel32: Any = None,
        last_error: Callable[[], OSError] | None = None,
    ) -> None:
        self._kernel32 = kernel32
        self._last_error = last_error or _win_last_error

    @property
    def kernel32(self) -> Any:
        if self._kernel32 is None:
            self._kernel32 = _load_kernel32()
        return self._kernel32

    def replace(self, src: Path, dst: Path) -> None:
        # ReplaceFileW keeps the destination's identity (ACLs, attributes).
        ok = self.kernel32.ReplaceFileW(
            str(dst), str(src), None, REPLACEFILE_WRITE_THROUGH, None, None
        )
        if ok:
            return
        primary = self._last_error()
        ok = self.kernel32.MoveFileExW(
            str(src), str(dst), MOVEFILE_REPLACE_EXISTING | MOVEFILE_WRITE_THROUGH
        )
        if ok:
            logger.debug("ReplaceFileW failed (%s); MoveFileExW succeeded", primary)
            return
        fallback = self._last_error()
        raise AtomicSwapError(
            f"ReplaceFileW failed ({primary}); MoveFileExW failed ({fallback})",
            primary=primary,
            fallback=fallback,
        )

    def move(self, src: Path, dst: Path) -> None:
        ok = self.kernel32.MoveFileExW(str(src), str(dst), MOVEFILE_WRITE_THROUGH)
        if not ok:
            err = self._last_error()
            raise AtomicSwapError(f"MoveFileExW failed ({err})", primary=err)

    def sync_directory(self, directory: Path) -> None:  # noqa: PLR6301
        # Write-through flags already cover the directory entry.
        return None


def default_replacer() -> Replacer:
    """Return the replacer for the running platform."""
    if IS_WINDOWS:
        return WindowsReplacer()
    return PosixReplacer()


def temp_path_for(path: Path) -> Path:
    """Return ``<name>.<pid>.<ns-timestamp>.tmp`` beside *path*."""
    return path.with_name(f"{path.name}.{os.getpid()}.{time.time_ns()}{TEMP_SUFFIX}")


def _discard(tmp: Path) -> None:
    try:
        tmp.unlink(missing_ok=True)
    except OSError:
        logger.debug("failed to remove temp file %s", tmp, exc_info=True)


class AtomicWriter:
    """Write whole files so that a crash never leaves a partial target."""

    def __init__(self, replacer: Replacer | None = None) -> None:
        self.replacer = replacer or default_replacer()

    def write(self, path: Path, content: str | bytes) -> None:
        """Replace *path* with *content* or raise ``StoreIOError``.

        On any failure the target is left exactly as it was.
        """
        data = content.encode("utf-8") if isinstance(content, str) else content
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise StoreIOError(f"cannot create directory {path.parent}: {exc}") from exc

        tmp = temp_path_for(path)
        try:
            try:
                with open(tmp, "xb") as fh:
                    fh.write(data)
                    fh.flush()
                    os.fsync(fh.fileno())
            except OSError as exc:
                raise StoreIOError(f"failed to write {tmp.name}: {exc}") from exc

            try:
                exists = path.exists()
            except OSError as exc:
                raise StoreIOError(f"cannot stat {path}: {exc}") from exc
            if exists:
                self.replacer.replace(tmp, path)
            else:
                self.replacer.move(tmp, path)
            self.replacer.sync_directory(path.parent)
        finally:
            _discard(tmp)


def atomic_write(path: Path, content: str | bytes, replacer: Replacer | None = None) -> None:
    """Convenience wrapper around :meth:`AtomicWriter.write`."""
    AtomicWriter(replacer).write(path, content)
