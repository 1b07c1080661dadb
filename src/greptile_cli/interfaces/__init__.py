"""Protocol interfaces for greptile_cli."""

from greptile_cli.interfaces.vcs import VersionControlInterface

__all__ = [
    "VersionControlInterface",
]
