"""Repository identity resolution for greptile_cli.

This module turns either an explicit "<owner>/<name>" argument or the
origin remote of a local working copy into a RepositoryIdentity.
"""

import re

from greptile_cli.errors import NoRemoteUrlError, UnparseableRemoteUrlError
from greptile_cli.interfaces.vcs import VersionControlInterface
from greptile_cli.logging import get_logger
from greptile_cli.models.repository import RepositoryIdentity

__all__ = [
    "GITHUB_REMOTE_PATTERN",
    "RepositoryResolver",
    "parse_remote_url",
]

logger = get_logger(__name__)

GITHUB_REMOTE_PATTERN = re.compile(
    r"^https?://(?:www\.)?github\.com/(?P<repository>[\w.-]+/[\w.-]+)\.git$"
)


def parse_remote_url(url: str) -> str:
    """Extract "<owner>/<name>" from an HTTPS GitHub remote URL.

    Args:
        url: Remote URL, e.g. "https://github.com/acme/widgets.git"

    Returns:
        The "<owner>/<name>" repository path

    Raises:
        UnparseableRemoteUrlError: If the URL is not an HTTPS github.com URL
            ending in ".git"
    """
    match = GITHUB_REMOTE_PATTERN.fullmatch(url.strip())
    if match is None:
        raise UnparseableRemoteUrlError(url)
    return match.group("repository")


class RepositoryResolver:
    """Service resolving which repository a query targets.

    Example:
        resolver = RepositoryResolver(GitRepositoryReader())
        identity = resolver.resolve(None)  # from ./.git origin remote
        identity = resolver.resolve("acme/widgets")
    """

    def __init__(
        self,
        vcs: VersionControlInterface,
        *,
        remote: str = "github",
        default_branch: str = "main",
        path: str = ".",
        remote_name: str = "origin",
    ) -> None:
        """Initialize the resolver.

        Args:
            vcs: Version control reader for the local working copy
            remote: Provider identifier placed in every identity
            default_branch: Branch placed in every identity
            path: Working copy directory used when no explicit repository is given
            remote_name: Remote whose URL identifies the repository
        """
        self._vcs = vcs
        self._remote = remote
        self._default_branch = default_branch
        self._path = path
        self._remote_name = remote_name

    def resolve(self, explicit: str | None = None) -> RepositoryIdentity:
        """Resolve the repository identity.

        Args:
            explicit: Repository path to use verbatim, bypassing the working copy

        Returns:
            RepositoryIdentity for the configured remote and default branch

        Raises:
            RepositoryResolutionError: If the working copy cannot provide one
        """
        if explicit:
            repository = explicit
            source = "argument"
        else:
            url = self._vcs.get_remote_url(self._path, self._remote_name)
            if url is None:
                raise NoRemoteUrlError(self._remote_name)
            repository = parse_remote_url(url)
            source = "remote"

        identity = RepositoryIdentity(
            remote=self._remote,
            branch=self._default_branch,
            repository=repository,
        )
        logger.info("repository_resolved", repo_id=identity.repo_id, source=source)
        return identity
