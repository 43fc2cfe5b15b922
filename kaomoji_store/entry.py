"""Kaomoji entry model and input sanitizing."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from .errors import ValidationError


@dataclass
class Entry:
    """A single kaomoji record.

    ``symbol`` is the identity key inside a collection. On disk the fields
    are written as ``Symbol``, ``Tags`` and ``Category``.
    """

    symbol: str
    tags: list[str] = field(default_factory=list)
    category: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {"Symbol": self.symbol, "Tags": list(self.tags), "Category": self.category}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Entry:
        """Build an entry from its on-disk form without normalizing it.

        Raises ``ValueError`` when a field is missing or has the wrong type;
        stores treat that the same as undecodable JSON.
        """
        if not isinstance(data, Mapping):
            raise ValueError(f"entry must be an object, got {type(data).__name__}")
        try:
            symbol = data["Symbol"]
            tags = data["Tags"]
            category = data["Category"]
        except KeyError as exc:
            raise ValueError(f"entry is missing field {exc.args[0]!r}") from None
        if not isinstance(symbol, str) or not isinstance(category, str):
            raise ValueError("Symbol and Category must be strings")
        if not isinstance(tags, list) or not all(isinstance(t, str) for t in tags):
            raise ValueError("Tags must be a list of strings")
        return cls(symbol=symbol, tags=list(tags), category=category)


def normalize_tags(tags: Iterable[str]) -> list[str]:
    """Trim and lowercase each tag, dropping empties. Order is kept."""
    out: list[str] = []
    for tag in tags:
        cleaned = tag.strip().lower()
        if cleaned:
            out.append(cleaned)
    return out


def sanitize(raw: Entry | Mapping[str, Any]) -> Entry:
    """Return a normalized copy of *raw* or raise ``ValidationError``.

    Accepts an :class:`Entry` or a mapping in the on-disk shape. Missing tags
    and category default to empty.
    """
    if isinstance(raw, Entry):
        symbol, tags, category = raw.symbol, raw.tags, raw.category
    elif isinstance(raw, Mapping):
        symbol = raw.get("Symbol") or ""
        tags = raw.get("Tags") or []
        category = raw.get("Category") or ""
    else:
        raise ValidationError("Kaomoji entry must be an object")

    if isinstance(tags, str):
        tags = [tags]
    elif not isinstance(tags, Iterable):
        raise ValidationError("Kaomoji tags must be a list of strings")

    symbol = str(symbol).strip()
    if not symbol:
        raise ValidationError("Kaomoji symbol cannot be empty")

    return Entry(
        symbol=symbol,
        tags=normalize_tags(str(t) for t in tags),
        category=str(category).strip(),
    )
