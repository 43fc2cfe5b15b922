"""Entry point for the kaomoji-store CLI."""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from . import __version__
from .commands import (
    CommandResult,
    Stores,
    load_catalog,
    load_favorites,
    load_recents,
    record_recent,
    toggle_favorite,
    upsert_catalog_entry,
)
from .constants import DATA_DIR_ENV
from .entry import Entry
from .errors import KaomojiStoreError
from .log import configure_logging
from .platform import resolve_data_dir
from .preferences import load_preferences, prefs_path

_LOADERS = {
    "catalog": load_catalog,
    "recents": load_recents,
    "favorites": load_favorites,
}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="kaomoji-store", description="Manage saved kaomoji collections"
    )
    parser.add_argument(
        "--version",
        "-V",
        action="version",
        version=f"kaomoji-store {__version__}",
    )
    parser.add_argument(
        "--data-dir",
        type=str,
        default=None,
        help=f"Directory holding the collection files (overrides ${DATA_DIR_ENV})",
    )
    parser.add_argument(
        "--prefs",
        type=Path,
        default=None,
        help="Preferences file to use instead of the default location",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log diagnostics to stderr",
    )

    sub = parser.add_subparsers(dest="command", required=True)

    p_list = sub.add_parser("list", help="Show a collection")
    p_list.add_argument("collection", choices=sorted(_LOADERS))

    p_add = sub.add_parser("add", help="Add or update a catalog entry")
    p_add.add_argument("symbol")
    p_add.add_argument("--tag", "-t", action="append", default=[], dest="tags")
    p_add.add_argument("--category", "-c", default="")

    p_use = sub.add_parser("use", help="Record a kaomoji as recently used")
    p_use.add_argument("symbol")

    p_fav = sub.add_parser("fav", help="Toggle a kaomoji in favorites")
    p_fav.add_argument("symbol")

    sub.add_parser("where", help="Print the data and preferences locations")
    return parser


def _lookup(symbol: str, stores: Stores) -> Entry:
    """Reuse the catalog's tags/category for *symbol* when it is known."""
    return stores.catalog.find(symbol) or Entry(symbol=symbol)


def _render(title: str, entries: list[Entry], console: Console) -> None:
    if not entries:
        console.print(f"[dim]{escape(title)} is empty[/dim]")
        return
    table = Table(title=title)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Symbol")
    table.add_column("Tags")
    table.add_column("Category")
    for i, entry in enumerate(entries, 1):
        table.add_row(
            str(i),
            escape(entry.symbol),
            escape(", ".join(entry.tags)),
            escape(entry.category),
        )
    console.print(table)


def _fail(result: CommandResult, err: Console) -> int:
    err.print(f"[red]error:[/red] {escape(result.error)}")
    return 1


def main(argv: list[str] | None = None) -> int:
    """Run the kaomoji-store CLI."""
    args = _build_parser().parse_args(argv)
    console = Console()
    err = Console(stderr=True)

    prefs = load_preferences(args.prefs)
    level = "DEBUG" if args.verbose else prefs.logging.level
    configure_logging(level, Path(prefs.logging.file) if prefs.logging.file else None)

    data_dir = (
        args.data_dir or os.environ.get(DATA_DIR_ENV) or prefs.storage.data_dir or None
    )

    if args.command == "where":
        try:
            console.print(f"data:        {escape(str(resolve_data_dir(data_dir)))}")
        except KaomojiStoreError as exc:
            err.print(f"[red]error:[/red] {escape(str(exc))}")
            return 1
        console.print(f"preferences: {escape(str(args.prefs or prefs_path()))}")
        return 0

    if args.command == "list":
        result = _LOADERS[args.collection](data_dir)
        if not result.ok:
            return _fail(result, err)
        _render(args.collection.capitalize(), result.value, console)
        return 0

    if args.command == "add":
        result = upsert_catalog_entry(
            {"Symbol": args.symbol, "Tags": args.tags, "Category": args.category},
            data_dir,
        )
        if not result.ok:
            return _fail(result, err)
        console.print(f"saved {escape(result.value.symbol)}")
        return 0

    try:
        stores = Stores.in_dir(resolve_data_dir(data_dir))
        entry = _lookup(args.symbol, stores)
        is_favorite = stores.favorites.contains(args.symbol)
    except KaomojiStoreError as exc:
        err.print(f"[red]error:[/red] {escape(str(exc))}")
        return 1

    if args.command == "use":
        result = record_recent(entry, data_dir)
        if not result.ok:
            return _fail(result, err)
        note = " (favorite)" if is_favorite else ""
        console.print(f"recorded {escape(args.symbol.strip())}{note}")
        return 0

    if args.command == "fav":
        result = toggle_favorite(entry, data_dir)
        if not result.ok:
            return _fail(result, err)
        verb = "added to" if result.value else "removed from"
        console.print(f"{escape(args.symbol.strip())} {verb} favorites")
        return 0

    return 2


if __name__ == "__main__":
    sys.exit(main())
