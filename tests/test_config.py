"""Tests for the configuration module."""

from __future__ import annotations

import json
import stat

import pytest

from hotaisle.config import (
    ConfigError,
    ConfigNotFoundError,
    HotAisleConfig,
    load_config,
    resolve_path,
    save_config,
)


@pytest.fixture
def config_dir(tmp_path, monkeypatch):
    """Redirect config to a temp directory."""
    config_dir = tmp_path / ".hotaisle"
    config_path = config_dir / "config.json"
    monkeypatch.setattr("hotaisle.config.CONFIG_DIR", config_dir)
    monkeypatch.setattr("hotaisle.config.CONFIG_PATH", config_path)
    return config_dir


@pytest.fixture
def config_path(config_dir):
    return config_dir / "config.json"


class TestLoadConfig:
    def test_missing_file_raises_with_defaults(self, config_dir, config_path):
        with pytest.raises(ConfigNotFoundError) as exc_info:
            load_config()
        assert exc_info.value.config == HotAisleConfig()
        assert exc_info.value.config.log_level == "info"
        assert not config_path.exists()

    def test_loads_existing_config(self, config_dir, config_path):
        config_dir.mkdir(parents=True)
        config_path.write_text(
            json.dumps({"log_level": "warn", "api_token": "abc123", "default_team": "devs"})
        )
        config = load_config()
        assert config == HotAisleConfig(log_level="warn", api_token="abc123", default_team="devs")

    def test_missing_keys_take_defaults(self, config_dir, config_path):
        config_dir.mkdir(parents=True)
        config_path.write_text(json.dumps({"api_token": "abc"}))
        config = load_config()
        assert config.log_level == "info"
        assert config.default_team == ""

    def test_invalid_json_raises(self, config_dir, config_path):
        config_dir.mkdir(parents=True)
        config_path.write_text("{invalid")
        with pytest.raises(ConfigError):
            load_config()

    def test_non_object_raises(self, config_dir, config_path):
        config_dir.mkdir(parents=True)
        config_path.write_text("[]")
        with pytest.raises(ConfigError, match="JSON object"):
            load_config()

    def test_explicit_path(self, tmp_path):
        path = tmp_path / "custom.json"
        path.write_text(json.dumps({"api_token": "t"}))
        assert load_config(path).api_token == "t"


class TestSaveConfig:
    def test_round_trip(self, config_dir, config_path):
        config = HotAisleConfig(log_level="warn", api_token="abc123", default_team="devs")
        save_config(config)
        assert load_config() == config

    def test_writes_expected_keys(self, config_dir, config_path):
        save_config(HotAisleConfig(api_token="abc"))
        data = json.loads(config_path.read_text())
        assert data == {"log_level": "info", "api_token": "abc", "default_team": ""}

    def test_empty_log_level_omitted(self, config_dir, config_path):
        save_config(HotAisleConfig(log_level=""))
        assert "log_level" not in json.loads(config_path.read_text())

    def test_permissions(self, config_dir, config_path):
        save_config(HotAisleConfig())
        assert stat.S_IMODE(config_path.stat().st_mode) == 0o600
        assert stat.S_IMODE(config_dir.stat().st_mode) == 0o700


class TestResolvePath:
    def test_default(self, config_dir, config_path):
        assert resolve_path() == config_path
        assert resolve_path("~/.hotaisle/config.json") == config_path

    def test_expands_user(self, monkeypatch, tmp_path):
        monkeypatch.setenv("HOME", str(tmp_path))
        assert resolve_path("~/other.json") == tmp_path / "other.json"
