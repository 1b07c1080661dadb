"""Shared test fixtures for greptile_cli.

This module provides pytest fixtures used across all tests.
"""

import pytest
from mocks.mock_greptile import MockGreptileService
from mocks.mock_vcs import MockVersionControl

from greptile_cli.config import GreptileSettings
from greptile_cli.models.message import Message
from greptile_cli.models.repository import RepositoryIdentity

SETTINGS_ENV_VARS = (
    "GH_TOKEN",
    "GITHUB_TOKEN",
    "GREPTILE_API_TOKEN",
    "GREPTILE_BASE_URL",
    "GREPTILE_REMOTE",
    "GREPTILE_DEFAULT_BRANCH",
    "GREPTILE_TIMEOUT",
)


@pytest.fixture(autouse=True)
def isolated_environment(
    monkeypatch: pytest.MonkeyPatch,
    tmp_path_factory: pytest.TempPathFactory,
) -> None:
    """Keep real settings and .env files out of every test."""
    for name in SETTINGS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path_factory.mktemp("cwd"))


@pytest.fixture
def credentials(monkeypatch: pytest.MonkeyPatch) -> None:
    """Provide both credentials through the environment."""
    monkeypatch.setenv("GH_TOKEN", "gh-test-token")
    monkeypatch.setenv("GREPTILE_API_TOKEN", "greptile-test-key")


@pytest.fixture
def settings(credentials: None) -> GreptileSettings:
    """Create settings with both credentials present."""
    return GreptileSettings()


@pytest.fixture
def sample_identity() -> RepositoryIdentity:
    """Create sample RepositoryIdentity."""
    return RepositoryIdentity(remote="github", branch="main", repository="acme/widgets")


@pytest.fixture
def sample_messages() -> list[Message]:
    """Create a short chronological conversation."""
    return [
        Message.system("Answer with file paths where possible."),
        Message.user("Where is the billing logic?"),
        Message.assistant("Mostly in billing/invoice.py."),
        Message.user("And the tests for it?"),
    ]


@pytest.fixture
def greptile_service() -> MockGreptileService:
    """Create a Greptile fake answering 200 to everything."""
    return MockGreptileService()


@pytest.fixture
def github_checkout() -> MockVersionControl:
    """Create a working copy whose origin points at acme/widgets."""
    return MockVersionControl({"origin": "https://github.com/acme/widgets.git"})
