"""Repository identity model for greptile_cli."""

from pydantic import BaseModel, Field

__all__ = [
    "RepositoryIdentity",
]


class RepositoryIdentity(BaseModel, frozen=True):
    """A repository as addressed by the Greptile API.

    Attributes:
        remote: Hosting provider identifier (only "github" is supported)
        branch: Branch name to index and query
        repository: Repository path in "<owner>/<name>" form
    """

    remote: str = Field(min_length=1)
    branch: str = Field(min_length=1)
    repository: str = Field(min_length=1)

    @property
    def repo_id(self) -> str:
        """Composite key used by the API, "remote:branch:repository"."""
        return f"{self.remote}:{self.branch}:{self.repository}"

    def __str__(self) -> str:
        return self.repo_id
