"""Configuration management for the hotaisle CLI.

Reads and writes JSON config at ~/.hotaisle/config.json.
"""

from __future__ import annotations

import json
import os
from dataclasses import asdict, dataclass
from pathlib import Path

from hotaisle.log import get_logger

CONFIG_DIR = Path.home() / ".hotaisle"
CONFIG_PATH = CONFIG_DIR / "config.json"
PRETTY_PATH = "~/.hotaisle/config.json"

logger = get_logger(__name__)


class ConfigError(Exception):
    """The config file could not be read or written."""


class ConfigNotFoundError(ConfigError):
    """No config file exists yet; ``config`` holds the defaults."""

    def __init__(self, path: Path, config: HotAisleConfig) -> None:
        self.path = path
        self.config = config
        super().__init__(f"config file not found: {path}")


@dataclass
class HotAisleConfig:
    log_level: str = "info"
    api_token: str = ""
    default_team: str = ""


def resolve_path(path: str | Path | None = None) -> Path:
    if path is None or str(path) in ("", PRETTY_PATH):
        return CONFIG_PATH
    return Path(path).expanduser()


def load_config(path: str | Path | None = None) -> HotAisleConfig:
    """Load config from JSON file.

    Raises ConfigNotFoundError (carrying defaults) when the file is missing
    and ConfigError when it is not a JSON object.
    """
    config_path = resolve_path(path)
    logger.debug(f"Loading config from {config_path}")
    if not config_path.exists():
        raise ConfigNotFoundError(config_path, HotAisleConfig())
    try:
        with open(config_path, "rb") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        raise ConfigError(f"failed to read config {config_path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"failed to read config {config_path}: expected a JSON object")

    defaults = HotAisleConfig()
    return HotAisleConfig(
        log_level=data.get("log_level") or defaults.log_level,
        api_token=data.get("api_token") or "",
        default_team=data.get("default_team") or "",
    )


def save_config(config: HotAisleConfig, path: str | Path | None = None) -> None:
    """Write config to JSON file, readable only by the current user."""
    config_path = resolve_path(path)
    config_path.parent.mkdir(parents=True, exist_ok=True)
    if config_path == CONFIG_PATH:
        os.chmod(config_path.parent, 0o700)

    data = asdict(config)
    if not data["log_level"]:
        del data["log_level"]

    try:
        with open(config_path, "w") as f:
            json.dump(data, f, indent=2)
        os.chmod(config_path, 0o600)
    except OSError as e:
        raise ConfigError(f"failed to write config {config_path}: {e}") from e

