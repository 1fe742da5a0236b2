"""Tests for configuration loading."""

from __future__ import annotations

import os
import stat
import sys
from pathlib import Path
from unittest.mock import patch

import pytest

from auth0_mgmt._config import (
    ManagementConfig,
    base_url_for_domain,
    get_config_value,
    set_config_value,
)

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib


class TestBaseUrlForDomain:
    def test_plain_domain(self) -> None:
        assert base_url_for_domain("tenant.auth0.com") == "https://tenant.auth0.com"

    def test_domain_with_scheme_kept(self) -> None:
        assert base_url_for_domain("http://localhost:3000/") == "http://localhost:3000"


class TestManagementConfig:
    """Test config precedence."""

    def test_defaults_without_file(self) -> None:
        config = ManagementConfig.load()

        assert config.domain is None
        assert config.api_token is None
        assert config.timeout == 60.0
        assert config.verify_ssl is True
        assert config.resolved_base_url is None

    def test_env_overrides_file(self, isolated_config: Path) -> None:
        isolated_config.write_text('domain = "file.auth0.com"\nverify_ssl = true\n')

        with patch.dict(
            os.environ,
            {"AUTH0_DOMAIN": "env.auth0.com", "AUTH0_VERIFY_SSL": "false", "AUTH0_DEBUG": "1"},
        ):
            config = ManagementConfig.load()

        assert config.domain == "env.auth0.com"
        assert config.verify_ssl is False
        assert config.debug is True

    def test_base_url_wins_over_domain(self) -> None:
        config = ManagementConfig(domain="a.auth0.com", base_url="https://proxy.example.com/")

        assert config.resolved_base_url == "https://proxy.example.com"


class TestConfigFile:
    """Test reading and writing single values."""

    def test_set_and_get_value(self, isolated_config: Path) -> None:
        set_config_value("domain", "tenant.auth0.com")
        set_config_value("timeout", 30)

        with open(isolated_config, "rb") as f:
            data = tomllib.load(f)
        assert data == {"domain": "tenant.auth0.com", "timeout": 30}
        assert get_config_value("domain") == "tenant.auth0.com"
        assert get_config_value("timeout") == 30.0

    @pytest.mark.skipif(sys.platform == "win32", reason="POSIX permissions")
    def test_saved_file_is_private(self, isolated_config: Path) -> None:
        set_config_value("api_token", "secret")

        assert stat.S_IMODE(isolated_config.stat().st_mode) == 0o600

    def test_unknown_key_is_none(self) -> None:
        assert get_config_value("nope") is None
