"""Orchestrator for a single greptile_cli invocation.

Wires the repository resolver, the request builders and the Greptile
client together: resolve, optionally index, then query.
"""

from dataclasses import dataclass
from enum import StrEnum
from typing import Any

import httpx

from greptile_cli.config import GreptileSettings
from greptile_cli.infra.git import GitRepositoryReader
from greptile_cli.infra.greptile.client import GreptileClient
from greptile_cli.interfaces.vcs import VersionControlInterface
from greptile_cli.logging import get_logger
from greptile_cli.models.conversation import Conversation
from greptile_cli.models.message import Message
from greptile_cli.models.repository import RepositoryIdentity
from greptile_cli.services.request_builder import build_index_request, build_query_request
from greptile_cli.services.resolver import RepositoryResolver

__all__ = ["IndexPolicy", "QueryResult", "RepositoryAssistant"]

logger = get_logger(__name__)


class IndexPolicy(StrEnum):
    """When to submit the repository for indexing before querying."""

    IF_MISSING = "if-missing"
    ALWAYS = "always"
    NEVER = "never"


@dataclass
class QueryResult:
    """Outcome of one question."""

    identity: RepositoryIdentity
    answer: str
    indexed: bool = False


class RepositoryAssistant:
    """Ask questions about a repository through the Greptile API.

    Example:
        async with RepositoryAssistant(GreptileSettings()) as assistant:
            result = await assistant.ask("Where is auth handled?", "acme/widgets")
            print(result.answer)
    """

    def __init__(
        self,
        settings: GreptileSettings | None = None,
        *,
        vcs: VersionControlInterface | None = None,
        http_client: httpx.AsyncClient | None = None,
        path: str = ".",
    ) -> None:
        """Initialize the assistant.

        Args:
            settings: Settings; loaded from the environment and .env if omitted
            vcs: Working copy reader (defaults to the git CLI)
            http_client: Transport handed to the Greptile client
            path: Working copy used when no repository is given explicitly
        """
        self._settings = settings or GreptileSettings()
        self._resolver = RepositoryResolver(
            vcs or GitRepositoryReader(),
            remote=self._settings.remote,
            default_branch=self._settings.default_branch,
            path=path,
        )
        self._http_client = http_client
        self._client: GreptileClient | None = None

    async def __aenter__(self) -> "RepositoryAssistant":
        self._client = GreptileClient.from_config(self._settings, http_client=self._http_client)
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        if self._client is not None:
            await self._client.close()
            self._client = None

    @property
    def client(self) -> GreptileClient:
        if self._client is None:
            raise RuntimeError("RepositoryAssistant must be used as an async context manager")
        return self._client

    def resolve(self, repository: str | None = None) -> RepositoryIdentity:
        """Resolve the target repository from an argument or the working copy."""
        return self._resolver.resolve(repository)

    async def ensure_indexed(
        self,
        identity: RepositoryIdentity,
        policy: IndexPolicy = IndexPolicy.IF_MISSING,
    ) -> bool:
        """Submit the repository for indexing according to policy.

        Returns:
            True if an index request was submitted
        """
        if policy is IndexPolicy.NEVER:
            return False
        if policy is IndexPolicy.IF_MISSING and await self.client.repository_exists(
            identity.repo_id
        ):
            logger.info("repository_already_indexed", repo_id=identity.repo_id)
            return False

        await self.client.submit_for_indexing(build_index_request(identity))
        return True

    async def ask(
        self,
        question: str,
        repository: RepositoryIdentity | str | None = None,
        *,
        system_prompt: str | None = None,
        policy: IndexPolicy = IndexPolicy.IF_MISSING,
    ) -> QueryResult:
        """Resolve the repository, index it if needed and run one query.

        Args:
            question: Natural-language question
            repository: Resolved identity, explicit "<owner>/<name>", or None to
                use the working copy
            system_prompt: Optional system message placed before the question
            policy: Indexing policy applied before querying

        Returns:
            QueryResult holding the raw answer text
        """
        if isinstance(repository, RepositoryIdentity):
            identity = repository
        else:
            identity = self.resolve(repository)
        indexed = await self.ensure_indexed(identity, policy)

        conversation = Conversation()
        if system_prompt:
            conversation = conversation.append(Message.system(system_prompt))
        conversation = conversation.append(Message.user(question))

        request = build_query_request(identity, conversation)
        answer = await self.client.run_query(request)
        return QueryResult(identity=identity, answer=answer, indexed=indexed)
