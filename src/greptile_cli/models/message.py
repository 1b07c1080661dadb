"""Message models for greptile_cli.

Messages are the building blocks of a query conversation. The role is
sent as its bare string value, so the service matches on "user",
"system" and "assistant" literally.
"""

from enum import StrEnum
from typing import Self
from uuid import uuid4

from pydantic import BaseModel, Field

__all__ = [
    "Message",
    "Role",
]


class Role(StrEnum):
    """Author of a conversation message."""

    USER = "user"
    SYSTEM = "system"
    ASSISTANT = "assistant"


def _new_message_id() -> str:
    return str(uuid4())


class Message(BaseModel, frozen=True):
    """Single conversation message.

    Attributes:
        id: Random UUID4 string assigned at construction
        content: Message text
        role: Message author role
    """

    id: str = Field(default_factory=_new_message_id)
    content: str
    role: Role

    @classmethod
    def user(cls, content: str) -> Self:
        """Create a message authored by the user."""
        return cls(content=content, role=Role.USER)

    @classmethod
    def system(cls, content: str) -> Self:
        """Create a system instruction message."""
        return cls(content=content, role=Role.SYSTEM)

    @classmethod
    def assistant(cls, content: str) -> Self:
        """Create a message authored by the assistant."""
        return cls(content=content, role=Role.ASSISTANT)
