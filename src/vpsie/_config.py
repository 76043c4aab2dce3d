"""Configuration management for VPSie SDK.

Supports:
- Environment variables (VPSIE_API_KEY, VPSIE_BASE_URL, etc.)
- Config file (~/.vpsie/config.toml)
- Programmatic configuration
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib


DEFAULT_BASE_URL = "https://api.vpsie.com/apps/v2"
DEFAULT_TIMEOUT = 60.0
DEFAULT_MAX_RETRIES = 3

CONFIG_DIR = Path.home() / ".vpsie"
CONFIG_FILE = CONFIG_DIR / "config.toml"

_FALSY = ("0", "false", "no")
_TRUTHY = ("1", "true", "yes")


@dataclass
class VpsieConfig:
    """SDK configuration."""

    api_key: str | None = None
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    max_retries: int = DEFAULT_MAX_RETRIES
    verify_ssl: bool = True
    debug: bool = False

    @classmethod
    def from_env(cls) -> VpsieConfig:
        """Load configuration from environment variables."""
        return cls(
            api_key=os.getenv("VPSIE_API_KEY"),
            base_url=os.getenv("VPSIE_BASE_URL", DEFAULT_BASE_URL),
            timeout=float(os.getenv("VPSIE_TIMEOUT", DEFAULT_TIMEOUT)),
            max_retries=int(os.getenv("VPSIE_MAX_RETRIES", DEFAULT_MAX_RETRIES)),
            verify_ssl=os.getenv("VPSIE_VERIFY_SSL", "true").lower() not in _FALSY,
            debug=os.getenv("VPSIE_DEBUG", "").lower() in _TRUTHY,
        )

    @classmethod
    def from_file(cls, path: Path | None = None) -> VpsieConfig:
        """Load configuration from TOML file."""
        config_path = path or CONFIG_FILE

        if not config_path.exists():
            return cls()

        with open(config_path, "rb") as f:
            data = tomllib.load(f)

        return cls(
            api_key=data.get("api_key"),
            base_url=data.get("api_url", DEFAULT_BASE_URL),
            timeout=float(data.get("timeout", DEFAULT_TIMEOUT)),
            max_retries=int(data.get("max_retries", DEFAULT_MAX_RETRIES)),
            verify_ssl=data.get("verify_ssl", True),
            debug=data.get("debug", False),
        )

    @classmethod
    def load(cls) -> VpsieConfig:
        """Load configuration with precedence: env > file > defaults."""
        config = cls.from_file()
        env_config = cls.from_env()

        if env_config.api_key:
            config.api_key = env_config.api_key
        if os.getenv("VPSIE_BASE_URL"):
            config.base_url = env_config.base_url
        if os.getenv("VPSIE_TIMEOUT"):
            config.timeout = env_config.timeout
        if os.getenv("VPSIE_MAX_RETRIES"):
            config.max_retries = env_config.max_retries
        if os.getenv("VPSIE_VERIFY_SSL"):
            config.verify_ssl = env_config.verify_ssl
        if os.getenv("VPSIE_DEBUG"):
            config.debug = env_config.debug

        return config


def save_config(config: dict[str, Any], path: Path | None = None) -> None:
    """Save configuration to TOML file.

    The file is chmod'ed to 0o600 since it may hold the API token.
    """
    import tomli_w

    config_path = path or CONFIG_FILE
    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, "wb") as f:
        tomli_w.dump(config, f)

    config_path.chmod(0o600)


def get_config_value(key: str) -> Any:
    """Get a single config value."""
    config = VpsieConfig.load()
    key_mapping = {
        "api_url": "base_url",
    }
    attr_name = key_mapping.get(key, key)
    return getattr(config, attr_name, None)


def set_config_value(key: str, value: Any) -> None:
    """Set a single config value in the config file."""
    config_path = CONFIG_FILE

    if config_path.exists():
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    else:
        data = {}

    data[key] = value
    save_config(data, config_path)
