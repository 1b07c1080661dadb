"""Git working copy reader for greptile_cli.

Reads remote configuration by shelling out to the git executable.
Only read commands are issued.
"""

import subprocess

from greptile_cli.errors import NoRemoteError, NoRepositoryError
from greptile_cli.interfaces.vcs import VersionControlInterface
from greptile_cli.logging import get_logger

__all__ = [
    "GitRepositoryReader",
]

logger = get_logger(__name__)


class GitRepositoryReader(VersionControlInterface):
    """Read remote URLs from a git working copy using the git CLI.

    Example:
        reader = GitRepositoryReader()
        url = reader.get_remote_url(".", "origin")
    """

    def __init__(self, git_executable: str = "git") -> None:
        self._git = git_executable

    def _run(self, path: str, *args: str) -> subprocess.CompletedProcess[str]:
        try:
            return subprocess.run(
                [self._git, "-C", path, *args],
                capture_output=True,
                text=True,
            )
        except OSError as e:
            raise NoRepositoryError(path, f"cannot run {self._git}: {e}") from e

    def _ensure_working_copy(self, path: str) -> None:
        result = self._run(path, "rev-parse", "--is-inside-work-tree")
        if result.returncode != 0 or result.stdout.strip() != "true":
            raise NoRepositoryError(path, result.stderr.strip())

    def list_remotes(self, path: str) -> set[str]:
        """Return the names of all remotes configured in the working copy."""
        self._ensure_working_copy(path)
        # exit code 1 means no key matched, i.e. no remotes at all
        result = self._run(path, "config", "--local", "--get-regexp", r"^remote\.")
        if result.returncode not in (0, 1):
            raise NoRepositoryError(path, result.stderr.strip())

        names: set[str] = set()
        for line in result.stdout.splitlines():
            key = line.split(" ", 1)[0]
            # remote.<name>.<variable>; names may contain dots
            name, _, _ = key.removeprefix("remote.").rpartition(".")
            if name:
                names.add(name)
        return names

    def get_remote_url(self, path: str, remote_name: str) -> str | None:
        if remote_name not in self.list_remotes(path):
            raise NoRemoteError(remote_name)

        result = self._run(path, "config", "--local", "--get", f"remote.{remote_name}.url")
        url = result.stdout.strip() if result.returncode == 0 else ""
        if not url:
            logger.debug("remote_without_url", path=path, remote=remote_name)
            return None
        return url
