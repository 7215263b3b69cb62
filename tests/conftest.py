"""Pytest configuration and shared fixtures."""

import json
from pathlib import Path

import pytest
import structlog

from packaging_common.host import InMemoryTaskHost
from packaging_common.models import EndpointAuthorization


@pytest.fixture(autouse=True)
def reset_structlog():
    """Undo any structlog configuration a test applied."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def agent_dir(tmp_path: Path) -> Path:
    """Temporary agent build directory."""
    build_dir = tmp_path / "agent" / "_work" / "1"
    build_dir.mkdir(parents=True)
    return build_dir


@pytest.fixture
def host(agent_dir: Path) -> InMemoryTaskHost:
    """InMemoryTaskHost pointing at the temporary agent directory."""
    return InMemoryTaskHost(
        variables={"Agent.BuildDirectory": str(agent_dir)},
        system_access_token="system-token",
    )


@pytest.fixture
def nuget_endpoints() -> str:
    """Endpoint credentials document as the agent injects it."""
    return json.dumps(
        {
            "endpointCredentials": [
                {"endpoint": "https://pkgs.example/org/_packaging/feedA/nuget/v3/index.json", "password": "tok1"},
                {"endpoint": "https://pkgs.example/org/_packaging/feedB/nuget/v3/index.json", "password": "tok2"},
            ]
        }
    )


@pytest.fixture
def token_endpoint() -> EndpointAuthorization:
    """Service connection using the token scheme."""
    return EndpointAuthorization(scheme="Token", parameters={"apitoken": "abc"})
