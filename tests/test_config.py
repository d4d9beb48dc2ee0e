"""Tests for the config module."""
import json
from pathlib import Path

from journal_streak.config import (
    get_db_path,
    load_config,
    save_config,
    set_db_path,
)


class TestLoadConfig:
    def test_missing_file_returns_empty(self, tmp_path):
        assert load_config(tmp_path / "nonexistent.json") == {}

    def test_invalid_json_returns_empty(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("not json", encoding="utf-8")
        assert load_config(path) == {}

    def test_non_object_json_returns_empty(self, tmp_path):
        path = tmp_path / "list.json"
        path.write_text("[1, 2]", encoding="utf-8")
        assert load_config(path) == {}

    def test_loads_valid_json(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text('{"key": "value"}', encoding="utf-8")
        assert load_config(path) == {"key": "value"}


class TestSaveConfig:
    def test_creates_parent_dirs(self, tmp_path):
        path = tmp_path / "sub" / "dir" / "config.json"
        save_config({"nested": True}, path)
        assert json.loads(path.read_text()) == {"nested": True}

    def test_overwrites_existing(self, tmp_path):
        path = tmp_path / "config.json"
        save_config({"v": 1}, path)
        save_config({"v": 2}, path)
        assert json.loads(path.read_text()) == {"v": 2}


class TestDbPath:
    def test_not_set_returns_none(self, tmp_path):
        assert get_db_path(tmp_path / "config.json") is None

    def test_set_and_get(self, tmp_path):
        config_path = tmp_path / "config.json"
        target = tmp_path / "notes" / "journal.db"
        set_db_path(target, config_path)
        assert get_db_path(config_path) == target

    def test_preserves_other_config_keys(self, tmp_path):
        config_path = tmp_path / "config.json"
        save_config({"other_key": "keep_me"}, config_path)
        set_db_path(Path("/some/journal.db"), config_path)
        config = load_config(config_path)
        assert config["other_key"] == "keep_me"
        assert config["db_path"] == "/some/journal.db"

