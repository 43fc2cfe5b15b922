"""Durable JSON storage for kaomoji catalogs, recents and favorites."""

__version__ = "0.1.0"
