"""Tests for the entry model and sanitizer."""

from __future__ import annotations

import pytest

from kaomoji_store.entry import Entry, normalize_tags, sanitize
from kaomoji_store.errors import ValidationError


class TestSanitize:
    def test_example_record(self):
        entry = sanitize({"Symbol": "(^_^)", "Tags": ["  Happy ", " "], "Category": " Positive "})
        assert entry == Entry("(^_^)", ["happy"], "Positive")

    def test_symbol_is_trimmed(self):
        assert sanitize(Entry("  (o_o)\n")).symbol == "(o_o)"

    @pytest.mark.parametrize("symbol", ["", "   ", "\t\n"])
    def test_blank_symbol_rejected(self, symbol):
        with pytest.raises(ValidationError, match="cannot be empty"):
            sanitize({"Symbol": symbol, "Tags": ["x"], "Category": "y"})

    def test_missing_symbol_rejected(self):
        with pytest.raises(ValidationError):
            sanitize({"Tags": ["x"]})

    def test_validation_error_is_value_error(self):
        with pytest.raises(ValueError):
            sanitize(Entry(" "))

    def test_tag_order_preserved_and_duplicates_kept(self):
        entry = sanitize(Entry("x", ["B", " a ", "", "b"]))
        assert entry.tags == ["b", "a", "b"]

    def test_non_iterable_tags_rejected(self):
        with pytest.raises(ValidationError, match="tags must be a list"):
            sanitize({"Symbol": "x", "Tags": 5})

    def test_non_mapping_rejected(self):
        with pytest.raises(ValidationError, match="must be an object"):
            sanitize(None)  # type: ignore[arg-type]

    def test_missing_tags_and_category_default_empty(self):
        entry = sanitize({"Symbol": "x"})
        assert entry.tags == []
        assert entry.category == ""

    def test_single_string_tag(self):
        assert sanitize({"Symbol": "x", "Tags": " Cat "}).tags == ["cat"]

    def test_input_not_mutated(self):
        raw = Entry(" x ", [" A "], " c ")
        sanitize(raw)
        assert raw == Entry(" x ", [" A "], " c ")


class TestNormalizeTags:
    def test_drops_whitespace_only(self):
        assert normalize_tags(["  ", "\t", "Ok"]) == ["ok"]


class TestEntryDict:
    def test_to_dict_uses_disk_keys(self):
        assert Entry("x", ["a"], "c").to_dict() == {
            "Symbol": "x",
            "Tags": ["a"],
            "Category": "c",
        }

    def test_from_dict_trusts_content(self):
        # Loaded data is not re-normalized.
        entry = Entry.from_dict({"Symbol": " x ", "Tags": ["A "], "Category": " c"})
        assert entry == Entry(" x ", ["A "], " c")

    def test_from_dict_missing_field(self):
        with pytest.raises(ValueError, match="Category"):
            Entry.from_dict({"Symbol": "x", "Tags": []})

    def test_from_dict_wrong_types(self):
        with pytest.raises(ValueError):
            Entry.from_dict({"Symbol": 1, "Tags": [], "Category": ""})
        with pytest.raises(ValueError):
            Entry.from_dict({"Symbol": "x", "Tags": "a", "Category": ""})

    def test_from_dict_not_an_object(self):
        with pytest.raises(ValueError):
            Entry.from_dict(["x"])  # type: ignore[arg-type]
