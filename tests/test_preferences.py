"""Tests for kaomoji_store.preferences.

All file I/O uses tmp_path so nothing touches the real user config.
"""

from __future__ import annotations

from pathlib import Path

import yaml

from kaomoji_store.preferences import Preferences, load_preferences


class TestLoadPreferencesDefaults:
    """When no file exists, load_preferences returns sensible defaults."""

    def test_defaults_when_no_file(self, tmp_path: Path):
        prefs = load_preferences(tmp_path / "nonexistent.yaml")
        assert prefs == Preferences()
        assert prefs.storage.data_dir == ""
        assert prefs.logging.level == "WARNING"

    def test_creates_default_file(self, tmp_path: Path):
        path = tmp_path / "cfg" / "preferences.yaml"
        load_preferences(path)
        assert path.exists()
        data = yaml.safe_load(path.read_text())
        assert data["storage"]["data_dir"] == ""
        assert data["logging"]["level"] == "WARNING"

    def test_default_file_round_trips_to_defaults(self, tmp_path: Path):
        path = tmp_path / "preferences.yaml"
        load_preferences(path)
        assert load_preferences(path) == Preferences()


class TestLoadPreferencesFromFile:
    def test_reads_values(self, tmp_path: Path):
        path = tmp_path / "preferences.yaml"
        path.write_text(
            "storage:\n  data_dir: /srv/kaomoji\nlogging:\n  level: debug\n  file: /tmp/k.log\n"
        )
        prefs = load_preferences(path)
        assert prefs.storage.data_dir == "/srv/kaomoji"
        assert prefs.logging.level == "DEBUG"
        assert prefs.logging.file == "/tmp/k.log"

    def test_partial_file_keeps_other_defaults(self, tmp_path: Path):
        path = tmp_path / "preferences.yaml"
        path.write_text("logging:\n  level: INFO\n")
        prefs = load_preferences(path)
        assert prefs.logging.level == "INFO"
        assert prefs.storage.data_dir == ""

    def test_null_values(self, tmp_path: Path):
        path = tmp_path / "preferences.yaml"
        path.write_text("storage:\n  data_dir:\nlogging:\n  level:\n")
        prefs = load_preferences(path)
        assert prefs.storage.data_dir == ""
        assert prefs.logging.level == "WARNING"

    def test_invalid_yaml_falls_back(self, tmp_path: Path):
        path = tmp_path / "preferences.yaml"
        path.write_text("storage: [unclosed\n  - : :")
        assert load_preferences(path) == Preferences()

    def test_non_mapping_falls_back(self, tmp_path: Path):
        path = tmp_path / "preferences.yaml"
        path.write_text("- just\n- a list\n")
        assert load_preferences(path) == Preferences()

    def test_unknown_keys_ignored(self, tmp_path: Path):
        path = tmp_path / "preferences.yaml"
        path.write_text("colors:\n  fg: red\nstorage:\n  data_dir: x\n  extra: 1\n")
        assert load_preferences(path).storage.data_dir == "x"
