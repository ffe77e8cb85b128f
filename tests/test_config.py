"""
Tests for configuration loading.
"""

import json

import pytest

from records_toolkit.config import ToolkitConfig, load_config
from records_toolkit.tracker.store import DEFAULT_STORAGE_KEY

_ENV_VARS = (
    "RECORDS_TOOLKIT_DB",
    "RECORDS_TOOLKIT_STORAGE_KEY",
    "RECORDS_TOOLKIT_LOG_LEVEL",
    "RECORDS_TOOLKIT_LOG_FILE",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)


class TestLoadConfig:
    def test_defaults(self):
        config = load_config()
        assert config == ToolkitConfig()
        assert config.storage_key == DEFAULT_STORAGE_KEY
        assert config.log_file is None

    def test_from_file(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"db_url": "sqlite:///x.db", "log_level": "DEBUG"}))
        config = load_config(path)
        assert config.db_url == "sqlite:///x.db"
        assert config.log_level == "DEBUG"
        assert config.storage_key == DEFAULT_STORAGE_KEY

    def test_env_overrides_file(self, tmp_path, monkeypatch):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"db_url": "sqlite:///x.db"}))
        monkeypatch.setenv("RECORDS_TOOLKIT_DB", "sqlite:///env.db")
        monkeypatch.setenv("RECORDS_TOOLKIT_STORAGE_KEY", "mine")
        config = load_config(str(path))
        assert config.db_url == "sqlite:///env.db"
        assert config.storage_key == "mine"

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "nope.json")

    def test_malformed_file(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("{broken")
        with pytest.raises(json.JSONDecodeError):
            load_config(path)
