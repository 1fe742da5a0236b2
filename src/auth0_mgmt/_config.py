"""Configuration management for the Auth0 Management SDK.

Supports:
- Environment variables (AUTH0_DOMAIN, AUTH0_API_TOKEN, etc.)
- Config file (~/.auth0-mgmt/config.toml)
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


DEFAULT_TIMEOUT = 60.0

CONFIG_DIR = Path.home() / ".auth0-mgmt"
CONFIG_FILE = CONFIG_DIR / "config.toml"


def base_url_for_domain(domain: str) -> str:
    """Build the API base URL for a tenant domain.

    A domain that already carries a scheme is used as is.
    """
    domain = domain.strip().rstrip("/")
    if domain.startswith(("http://", "https://")):
        return domain
    return f"https://{domain}"


@dataclass
class ManagementConfig:
    """SDK configuration."""

    domain: str | None = None
    api_token: str | None = None
    base_url: str | None = None
    timeout: float = DEFAULT_TIMEOUT
    verify_ssl: bool = True
    debug: bool = False

    @property
    def resolved_base_url(self) -> str | None:
        """Explicit base URL, falling back to one derived from the domain."""
        if self.base_url:
            return self.base_url.rstrip("/")
        if self.domain:
            return base_url_for_domain(self.domain)
        return None

    @classmethod
    def from_env(cls) -> ManagementConfig:
        """Load configuration from environment variables."""
        return cls(
            domain=os.getenv("AUTH0_DOMAIN"),
            api_token=os.getenv("AUTH0_API_TOKEN"),
            base_url=os.getenv("AUTH0_BASE_URL"),
            timeout=float(os.getenv("AUTH0_TIMEOUT", DEFAULT_TIMEOUT)),
            verify_ssl=os.getenv("AUTH0_VERIFY_SSL", "true").lower() not in ("0", "false", "no"),
            debug=os.getenv("AUTH0_DEBUG", "").lower() in ("1", "true", "yes"),
        )

    @classmethod
    def from_file(cls, path: Path | None = None) -> ManagementConfig:
        """Load configuration from TOML file."""
        config_path = path or CONFIG_FILE

        if not config_path.exists():
            return cls()

        with open(config_path, "rb") as f:
            data = tomllib.load(f)

        return cls(
            domain=data.get("domain"),
            api_token=data.get("api_token"),
            base_url=data.get("base_url"),
            timeout=float(data.get("timeout", DEFAULT_TIMEOUT)),
            verify_ssl=data.get("verify_ssl", True),
            debug=data.get("debug", False),
        )

    @classmethod
    def load(cls) -> ManagementConfig:
        """Load configuration with precedence: env > file > defaults."""
        config = cls.from_file()
        env_config = cls.from_env()

        if env_config.domain:
            config.domain = env_config.domain
        if env_config.api_token:
            config.api_token = env_config.api_token
        if env_config.base_url:
            config.base_url = env_config.base_url
        if os.getenv("AUTH0_TIMEOUT"):
            config.timeout = env_config.timeout
        if os.getenv("AUTH0_VERIFY_SSL"):
            config.verify_ssl = env_config.verify_ssl
        if os.getenv("AUTH0_DEBUG"):
            config.debug = env_config.debug

        return config


def save_config(config: dict[str, Any], path: Path | None = None) -> None:
    """Save configuration to TOML file.

    Sets restrictive file permissions (0o600) since the file may hold an API
    token.
    """
    import tomli_w

    config_path = path or CONFIG_FILE
    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, "wb") as f:
        tomli_w.dump(config, f)

    config_path.chmod(0o600)


def get_config_value(key: str) -> Any:
    """Get a single config value."""
    config = ManagementConfig.load()
    return getattr(config, key, None)


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
