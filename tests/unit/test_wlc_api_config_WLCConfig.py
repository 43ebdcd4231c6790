"""Unit tests for wlc.api.config.WLCConfig module."""

import json
from pathlib import Path

import pytest

from wlc.api.config.WLCConfig import WLCConfig

pytestmark = pytest.mark.config


class TestWLCConfigLoad:
    """Test WLCConfig.load() method."""

    def test_load_valid_config(self, wlc_home_with_config):
        config = WLCConfig.load()

        assert isinstance(config, WLCConfig)
        assert config.base_url == "/"
        assert config.default_args == []

    def test_load_missing_file_gives_defaults(self, wlc_home):
        config = WLCConfig.load()

        assert config == WLCConfig()
        assert config.container_command == "docker"
        assert config.log_path is None

    def test_load_invalid_json(self, wlc_home):
        (wlc_home / "config.json").write_text("{invalid json")

        with pytest.raises(ValueError) as exc_info:
            WLCConfig.load()
        assert "Invalid JSON" in str(exc_info.value)

    def test_load_non_object(self, wlc_home):
        (wlc_home / "config.json").write_text("[1, 2]")

        with pytest.raises(ValueError, match="must contain a JSON object"):
            WLCConfig.load()

    def test_load_wrong_type_names_field(self, wlc_home):
        (wlc_home / "config.json").write_text(json.dumps({"default_args": "--quiet"}))

        with pytest.raises(ValueError) as exc_info:
            WLCConfig.load()
        assert str(exc_info.value).startswith("Configuration validation error: default_args")

    def test_load_normalizes_base_url(self, wlc_home):
        (wlc_home / "config.json").write_text(json.dumps({"base_url": "docs/"}))

        assert WLCConfig.load().base_url == "/docs/"


class TestWLCConfigPaths:
    def test_config_path_follows_wlc_home(self, wlc_home):
        assert WLCConfig.get_home_dir() == wlc_home.resolve()
        assert WLCConfig.get_config_path() == wlc_home.resolve() / "config.json"

    def test_default_home(self, tmp_path, monkeypatch):
        monkeypatch.delenv("WLC_HOME", raising=False)
        monkeypatch.setenv("HOME", str(tmp_path))

        assert WLCConfig.get_home_dir() == tmp_path / ".wlc"

    def test_log_path_expands_user(self, tmp_path, monkeypatch):
        monkeypatch.setenv("HOME", str(tmp_path))

        config = WLCConfig(log_file="~/logs/wlc.log")

        assert config.log_path == Path(tmp_path) / "logs" / "wlc.log"
