"""
Tests for persisted directory overrides.
"""
import json
from pathlib import Path

from parity_dir.core.settings import (
    SETTINGS_FILE,
    DirectorySettings,
    load_settings,
    save_settings,
)


def test_missing_file_gives_defaults(tmp_path: Path):
    assert load_settings(tmp_path) == DirectorySettings()


def test_save_then_load(tmp_path: Path):
    """Settings survive a trip through settings.json, creating the dir."""
    settings_dir = tmp_path / "config"
    settings = DirectorySettings(base_path="/srv/parity", keys_path="$BASE/k", verbose=True)
    path = save_settings(settings_dir, settings)
    assert path == settings_dir / SETTINGS_FILE
    assert load_settings(settings_dir) == settings


def test_corrupt_file_gives_defaults(tmp_path: Path):
    (tmp_path / SETTINGS_FILE).write_text("{not json", encoding="utf-8")
    assert load_settings(tmp_path) == DirectorySettings()


def test_non_object_json_gives_defaults(tmp_path: Path):
    (tmp_path / SETTINGS_FILE).write_text("[1, 2]", encoding="utf-8")
    assert load_settings(tmp_path) == DirectorySettings()


def test_from_dict_ignores_unknown_keys():
    settings = DirectorySettings.from_dict({"db_path": "/fast/ssd", "colour": "blue"})
    assert settings.db_path == "/fast/ssd"
    assert not hasattr(settings, "colour")


def test_templates_only_lists_set_overrides():
    """base_path is not a Directories field template, so it is excluded."""
    settings = DirectorySettings(base_path="/b", db_path="$LOCAL/db", dapps_path="$BASE/d")
    assert settings.templates() == {"db": "$LOCAL/db", "dapps": "$BASE/d"}


def test_non_utf8_file_gives_defaults(tmp_path: Path):
    """Bytes that are not UTF-8 are treated like any other corrupt file."""
    (tmp_path / SETTINGS_FILE).write_bytes(b"\xff\xfe{garbage")
    assert load_settings(tmp_path) == DirectorySettings()


def test_unreadable_path_gives_defaults(tmp_path: Path):
    """A settings.json that cannot be read as a file does not abort startup."""
    (tmp_path / SETTINGS_FILE).mkdir()
    assert load_settings(tmp_path) == DirectorySettings()


def test_save_omits_unset_overrides(tmp_path: Path):
    path = save_settings(tmp_path, DirectorySettings(db_path="/ssd/chains"))
    assert json.loads(path.read_text(encoding="utf-8")) == {"db_path": "/ssd/chains", "verbose": False}
