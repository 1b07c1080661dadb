"""greptile_cli - Ask the Greptile code-intelligence API about a repository.

This package provides tools for:
- Resolving a GitHub repository from an argument or a git working copy
- Submitting the repository to Greptile for indexing
- Building conversations and querying the indexed repository

Example usage:
    from greptile_cli import GreptileSettings, RepositoryAssistant

    async with RepositoryAssistant(GreptileSettings()) as assistant:
        result = await assistant.ask("Where is auth handled?", "acme/widgets")
        print(result.answer)
"""

__version__ = "0.1.0"

from greptile_cli.config import GreptileSettings, load_settings
from greptile_cli.errors import (
    ConfigurationError,
    GreptileCliError,
    MissingCredentialError,
    NoRemoteError,
    NoRemoteUrlError,
    NoRepositoryError,
    RemoteRejectedError,
    RepositoryResolutionError,
    TransportError,
    UnparseableRemoteUrlError,
)
from greptile_cli.infra.git import GitRepositoryReader
from greptile_cli.infra.greptile.client import GreptileClient
from greptile_cli.models import (
    Conversation,
    IndexRequest,
    Message,
    QueryRequest,
    RepositoryIdentity,
    Role,
)
from greptile_cli.orchestrator import IndexPolicy, QueryResult, RepositoryAssistant
from greptile_cli.services import (
    RepositoryResolver,
    build_index_request,
    build_query_request,
)

__all__ = [  # noqa: RUF022
    # Orchestrator
    "RepositoryAssistant",
    "IndexPolicy",
    "QueryResult",
    # Implementations
    "GreptileClient",
    "GitRepositoryReader",
    "GreptileSettings",
    "load_settings",
    # Models
    "Conversation",
    "IndexRequest",
    "Message",
    "QueryRequest",
    "RepositoryIdentity",
    "Role",
    # Services
    "RepositoryResolver",
    "build_index_request",
    "build_query_request",
    # Errors
    "ConfigurationError",
    "GreptileCliError",
    "MissingCredentialError",
    "NoRemoteError",
    "NoRemoteUrlError",
    "NoRepositoryError",
    "RemoteRejectedError",
    "RepositoryResolutionError",
    "TransportError",
    "UnparseableRemoteUrlError",
]
