"""Pytest configuration and fixtures."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Generator

import pytest
import respx

from auth0_mgmt._http import HttpClient
from auth0_mgmt.client import ManagementClient
from auth0_mgmt.resources.actions import Actions


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Keep tests away from the real config file and AUTH0_* variables."""
    config_file = tmp_path / "config.toml"
    monkeypatch.setattr("auth0_mgmt._config.CONFIG_FILE", config_file)
    for name in (
        "AUTH0_DOMAIN",
        "AUTH0_API_TOKEN",
        "AUTH0_BASE_URL",
        "AUTH0_TIMEOUT",
        "AUTH0_VERIFY_SSL",
        "AUTH0_DEBUG",
    ):
        monkeypatch.delenv(name, raising=False)
    return config_file


@pytest.fixture
def api_token() -> str:
    """Test API token."""
    return "test-api-token-12345"


@pytest.fixture
def base_url() -> str:
    """Test tenant base URL."""
    return "https://tenant.test.auth0.com"


@pytest.fixture
def mock_api(base_url: str) -> Generator[respx.MockRouter, None, None]:
    """Mock API router."""
    with respx.mock(base_url=base_url, assert_all_called=False) as router:
        yield router


@pytest.fixture
def http() -> Generator[HttpClient, None, None]:
    c = HttpClient()
    yield c
    c.close()


@pytest.fixture
def actions(http: HttpClient, base_url: str, api_token: str) -> Actions:
    """Actions resource bound to the test tenant."""
    return Actions(http, base_url, api_token)


@pytest.fixture
def client(api_token: str, base_url: str) -> Generator[ManagementClient, None, None]:
    """Create a test ManagementClient."""
    c = ManagementClient(api_token=api_token, base_url=base_url)
    yield c
    c.close()


# Sample response data
@pytest.fixture
def sample_action() -> dict[str, Any]:
    """Sample action response."""
    return {
        "id": "910b1053-577f-4d81-a8c8-020e7319a38a",
        "name": "add-claims",
        "supported_triggers": [{"id": "post-login", "version": "v3"}],
        "code": "exports.onExecutePostLogin = async (event, api) => {};",
        "dependencies": [{"name": "lodash", "version": "4.17.21"}],
        "runtime": "node18",
        "secrets": [{"name": "API_KEY", "updated_at": "2024-01-01T00:00:00.000Z"}],
        "status": "built",
        "all_changes_deployed": False,
        "created_at": "2024-01-01T00:00:00.000Z",
        "updated_at": "2024-01-02T00:00:00.000Z",
    }


@pytest.fixture
def sample_version() -> dict[str, Any]:
    """Sample version response."""
    return {
        "id": "12a3b9e6-06e6-4a29-96bf-90c82fe79a0d",
        "action_id": "910b1053-577f-4d81-a8c8-020e7319a38a",
        "code": "exports.onExecutePostLogin = async (event, api) => {};",
        "dependencies": [],
        "deployed": True,
        "runtime": "node18",
        "secrets": [],
        "status": "built",
        "number": 3,
        "errors": [],
        "action": {
            "id": "910b1053-577f-4d81-a8c8-020e7319a38a",
            "name": "add-claims",
            "supported_triggers": [{"id": "post-login", "version": "v3"}],
            "all_changes_deployed": True,
        },
        "built_at": "2024-01-02T00:00:00.000Z",
        "created_at": "2024-01-02T00:00:00.000Z",
        "updated_at": "2024-01-02T00:00:00.000Z",
        "supported_triggers": [{"id": "post-login", "version": "v3"}],
    }


@pytest.fixture
def sample_triggers() -> dict[str, Any]:
    """Sample triggers response."""
    return {
        "triggers": [
            {
                "id": "post-login",
                "version": "v3",
                "status": "CURRENT",
                "runtimes": ["node16", "node18"],
                "default_runtime": "node18",
                "compatible_triggers": [{"id": "post-login", "version": "v2"}],
            },
            {
                "id": "credentials-exchange",
                "version": "v2",
                "status": "CURRENT",
                "runtimes": ["node18"],
                "default_runtime": "node18",
                "compatible_triggers": [],
            },
        ]
    }
