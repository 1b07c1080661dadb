"""Version control interface for greptile_cli.

This module defines the Protocol for the single read capability the
repository resolver needs: the configured URL of a named remote.
"""

from typing import Protocol, runtime_checkable

__all__ = [
    "VersionControlInterface",
]


@runtime_checkable
class VersionControlInterface(Protocol):
    """Contract for read-only access to a local working copy."""

    def get_remote_url(self, path: str, remote_name: str) -> str | None:
        """Read the URL configured for a remote.

        Args:
            path: Directory of the working copy
            remote_name: Remote to look up (e.g. "origin")

        Returns:
            The remote URL, or None if the remote has no URL configured

        Raises:
            NoRepositoryError: If path is not a readable working copy
            NoRemoteError: If no remote with that name exists
        """
        ...
