"""Integration tests for the greptile_cli pipeline."""

import shutil
import subprocess
from pathlib import Path

import pytest
from mocks.mock_greptile import MockGreptileService

from greptile_cli.config import GreptileSettings
from greptile_cli.infra.git import GitRepositoryReader
from greptile_cli.infra.greptile.client import GreptileClient
from greptile_cli.models.message import Message, Role
from greptile_cli.orchestrator import IndexPolicy, RepositoryAssistant
from greptile_cli.services.request_builder import build_index_request, build_query_request
from greptile_cli.services.resolver import RepositoryResolver


class TestExplicitRepositoryPipeline:
    """End-to-end flow starting from an explicit repository argument."""

    def test_identity_to_query_request(self) -> None:
        resolver = RepositoryResolver(GitRepositoryReader())

        identity = resolver.resolve("acme/widgets")
        request = build_query_request(identity, Message.user("What does this project do?"))

        assert identity.model_dump() == {
            "remote": "github",
            "branch": "main",
            "repository": "acme/widgets",
        }
        assert identity.repo_id == "github:main:acme/widgets"
        assert len(request.messages) == 1
        assert request.messages[0].role == Role.USER
        assert request.repositories == (identity,)
        payload = request.to_payload()
        assert payload["stream"] is False
        assert payload["genius"] is False
        assert payload["sessionId"] == ""

    @pytest.mark.asyncio
    async def test_index_then_query(self, greptile_service: MockGreptileService) -> None:
        identity = RepositoryResolver(GitRepositoryReader()).resolve("acme/widgets")
        greptile_service.query_body = "## Overview\nA widget factory."

        async with GreptileClient(
            "gh-token", "api-key", http_client=greptile_service.http_client()
        ) as client:
            exists = await client.repository_exists(identity.repo_id)
            await client.submit_for_indexing(build_index_request(identity))
            answer = await client.run_query(
                build_query_request(identity, Message.user("What does this project do?"))
            )

        assert exists is True
        assert answer == "## Overview\nA widget factory."
        assert len(greptile_service.requests) == 3


@pytest.mark.skipif(shutil.which("git") is None, reason="git is not installed")
class TestWorkingCopyPipeline:
    """End-to-end flow resolving the repository from a real git checkout."""

    @pytest.fixture
    def checkout(self, tmp_path: Path) -> Path:
        repo = tmp_path / "widgets"
        repo.mkdir()
        for args in (
            ["init", "--quiet"],
            ["remote", "add", "origin", "https://github.com/acme/widgets.git"],
        ):
            subprocess.run(["git", "-C", str(repo), *args], check=True, capture_output=True)
        return repo

    @pytest.mark.asyncio
    async def test_ask_from_checkout(
        self,
        checkout: Path,
        settings: GreptileSettings,
        greptile_service: MockGreptileService,
    ) -> None:
        async with RepositoryAssistant(
            settings,
            http_client=greptile_service.http_client(),
            path=str(checkout),
        ) as assistant:
            result = await assistant.ask("Where is auth?", policy=IndexPolicy.ALWAYS)

        assert result.identity.repo_id == "github:main:acme/widgets"
        assert greptile_service.json_body(0)["repository"] == "acme/widgets"
        assert greptile_service.json_body(1)["repositories"][0]["repository"] == "acme/widgets"
