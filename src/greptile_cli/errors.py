"""Exception hierarchy for greptile_cli.

Every failure is terminal for the current invocation. Components raise
these exceptions and the command-line layer reports them and exits.
"""

__all__ = [
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


class GreptileCliError(Exception):
    """Base class for all errors raised by greptile_cli."""


class RepositoryResolutionError(GreptileCliError):
    """The repository identity could not be derived from the working copy."""


class NoRepositoryError(RepositoryResolutionError):
    """The path is not a readable git working copy."""

    def __init__(self, path: str, detail: str = "") -> None:
        self.path = path
        self.detail = detail
        message = f"No git repository found at {path!r}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class NoRemoteError(RepositoryResolutionError):
    """The working copy has no remote with the requested name."""

    def __init__(self, remote_name: str) -> None:
        self.remote_name = remote_name
        super().__init__(f"No remote named {remote_name!r} is configured")


class NoRemoteUrlError(RepositoryResolutionError):
    """The remote exists but has no URL configured."""

    def __init__(self, remote_name: str) -> None:
        self.remote_name = remote_name
        super().__init__(f"Could not find remote URL for {remote_name!r} remote")


class UnparseableRemoteUrlError(RepositoryResolutionError):
    """The remote URL is not an HTTPS GitHub URL ending in .git."""

    def __init__(self, url: str) -> None:
        self.url = url
        super().__init__(
            f"Cannot derive an owner/name repository from remote URL {url!r}; "
            "expected https://github.com/<owner>/<name>.git"
        )


class ConfigurationError(GreptileCliError):
    """Settings from the environment or .env file are invalid."""


class MissingCredentialError(GreptileCliError):
    """A required credential is absent from the configuration."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"{name} environment variable is not set")


class TransportError(GreptileCliError):
    """The request failed below the HTTP status level.

    Covers connection, TLS and timeout failures, redirect loops and
    response bodies that cannot be decoded.
    """


class RemoteRejectedError(GreptileCliError):
    """The service answered with a non-success status code.

    Attributes:
        status_code: HTTP status returned by the service
        body: Response body text, verbatim
    """

    def __init__(self, status_code: int, body: str) -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(f"Greptile API returned {status_code}: {body}")
