"""Unit tests for the greptile command."""

from pathlib import Path

import httpx
import pytest
from click.testing import CliRunner
from pydantic import ValidationError
from mocks.mock_greptile import MockGreptileService

from greptile_cli.cli import cli


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def patched_http(
    monkeypatch: pytest.MonkeyPatch,
    greptile_service: MockGreptileService,
) -> MockGreptileService:
    """Route every httpx.AsyncClient created by the command to the mock service."""
    real_async_client = httpx.AsyncClient

    def factory(**kwargs: object) -> httpx.AsyncClient:
        return real_async_client(transport=httpx.MockTransport(greptile_service.handler))

    monkeypatch.setattr(httpx, "AsyncClient", factory)
    return greptile_service


class TestCli:
    """Tests for the click command."""

    def test_prints_answer(
        self,
        runner: CliRunner,
        credentials: None,
        patched_http: MockGreptileService,
    ) -> None:
        patched_http.query_body = "Auth lives in src/auth.py"

        result = runner.invoke(cli, ["acme/widgets", "-q", "Where is auth?"])

        assert result.exit_code == 0, result.output
        assert "Auth lives in src/auth.py" in result.output
        body = patched_http.json_body()
        assert body["repositories"] == [
            {"remote": "github", "branch": "main", "repository": "acme/widgets"}
        ]
        assert body["messages"][0]["content"] == "Where is auth?"

    def test_skip_index(
        self,
        runner: CliRunner,
        credentials: None,
        patched_http: MockGreptileService,
    ) -> None:
        result = runner.invoke(cli, ["acme/widgets", "-q", "Hi", "--skip-index"])

        assert result.exit_code == 0, result.output
        assert patched_http.paths() == [("POST", "/v2/query")]

    def test_reindex(
        self,
        runner: CliRunner,
        credentials: None,
        patched_http: MockGreptileService,
    ) -> None:
        result = runner.invoke(cli, ["acme/widgets", "-q", "Hi", "--reindex"])

        assert result.exit_code == 0, result.output
        assert [path for _, path in patched_http.paths()] == ["/v2/repositories", "/v2/query"]

    def test_question_prompt(
        self,
        runner: CliRunner,
        credentials: None,
        patched_http: MockGreptileService,
    ) -> None:
        result = runner.invoke(cli, ["acme/widgets", "--skip-index"], input="Prompted?\n")

        assert result.exit_code == 0, result.output
        assert patched_http.json_body()["messages"][0]["content"] == "Prompted?"

    def test_conflicting_index_flags(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["acme/widgets", "-q", "Hi", "--reindex", "--skip-index"])
        assert result.exit_code == 2

    def test_missing_credentials(
        self,
        runner: CliRunner,
        patched_http: MockGreptileService,
    ) -> None:
        result = runner.invoke(cli, ["acme/widgets", "-q", "Hi"])

        assert result.exit_code == 1
        assert "GH_TOKEN" in result.output
        assert patched_http.requests == []

    def test_remote_rejection(
        self,
        runner: CliRunner,
        credentials: None,
        patched_http: MockGreptileService,
    ) -> None:
        patched_http.query_status = 429
        patched_http.query_body = "rate limited"

        result = runner.invoke(cli, ["acme/widgets", "-q", "Hi", "--skip-index"])

        assert result.exit_code == 1
        assert "rate limited" in result.output

    def test_not_a_working_copy(
        self,
        runner: CliRunner,
        credentials: None,
        patched_http: MockGreptileService,
        tmp_path: Path,
    ) -> None:
        result = runner.invoke(cli, ["-q", "Hi", "--path", str(tmp_path)])

        assert result.exit_code == 1
        assert "No git repository" in result.output
        assert patched_http.requests == []

    def test_reports_repo_id(
        self,
        runner: CliRunner,
        credentials: None,
        patched_http: MockGreptileService,
    ) -> None:
        result = runner.invoke(cli, ["acme/widgets", "-q", "Hi", "--skip-index"])

        assert result.exit_code == 0, result.output
        assert "github:main:acme/widgets" in result.output

    def test_invalid_configuration(
        self,
        runner: CliRunner,
        credentials: None,
        patched_http: MockGreptileService,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.setenv("GREPTILE_TIMEOUT", "soon")

        result = runner.invoke(cli, ["acme/widgets", "-q", "Hi"])

        assert result.exit_code == 1
        assert "Invalid configuration" in result.output
        assert not isinstance(result.exception, ValidationError)
        assert patched_http.requests == []
