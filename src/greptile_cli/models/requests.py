"""Request body models for the Greptile API.

These frozen Pydantic models mirror the JSON bodies the service accepts.
Query requests use camelCase field names on the wire.
"""

from typing import Any, Self

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from greptile_cli.models.message import Message
from greptile_cli.models.repository import RepositoryIdentity

__all__ = [
    "IndexRequest",
    "QueryRequest",
]


class IndexRequest(BaseModel, frozen=True):
    """Body of POST /repositories.

    Attributes:
        remote: Hosting provider identifier
        repository: Repository path in "<owner>/<name>" form
        branch: Branch to index
        reload: Force re-indexing even if already processed
        notify: Ask the service to notify on completion
    """

    remote: str
    repository: str
    branch: str
    reload: bool = True
    notify: bool = True

    @classmethod
    def from_identity(cls, identity: RepositoryIdentity) -> Self:
        return cls(
            remote=identity.remote,
            repository=identity.repository,
            branch=identity.branch,
        )

    def to_payload(self) -> dict[str, Any]:
        """Serialize to the JSON body sent to the service."""
        return self.model_dump(mode="json")


class QueryRequest(BaseModel):
    """Body of POST /query.

    Attributes:
        messages: Conversation messages, oldest first (at least one)
        repositories: Repositories to query (this client sends exactly one)
        session_id: Opaque session identifier, empty to start a new session
        stream: Stream the answer (always disabled here)
        genius: Extended reasoning mode (always disabled here)
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    messages: tuple[Message, ...] = Field(min_length=1)
    repositories: tuple[RepositoryIdentity, ...] = Field(min_length=1)
    session_id: str = ""
    stream: bool = False
    genius: bool = False

    def with_message(self, message: Message) -> Self:
        """Return a copy with message appended to the conversation."""
        return self.model_copy(update={"messages": (*self.messages, message)})

    def to_payload(self) -> dict[str, Any]:
        """Serialize to the JSON body sent to the service."""
        return self.model_dump(mode="json", by_alias=True)
