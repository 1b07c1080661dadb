"""Conversation model for greptile_cli.

A conversation is an ordered, immutable sequence of messages.
Appending returns a new conversation and leaves the original untouched.
"""

from typing import Self

from pydantic import BaseModel, Field

from greptile_cli.models.message import Message

__all__ = [
    "Conversation",
]


class Conversation(BaseModel, frozen=True):
    """Chronologically ordered messages of a single exchange.

    Example:
        conversation = Conversation().append(Message.system("Be brief."))
        conversation = conversation.append(Message.user("Where is auth handled?"))
    """

    messages: tuple[Message, ...] = Field(default_factory=tuple)

    @classmethod
    def start(cls, message: Message) -> Self:
        """Create a conversation from its initiating message."""
        return cls(messages=(message,))

    def append(self, message: Message) -> Self:
        """Return a new conversation with message added at the end.

        Args:
            message: Message to append

        Returns:
            New Conversation; this instance is not modified
        """
        return self.model_copy(update={"messages": (*self.messages, message)})

    @property
    def message_count(self) -> int:
        """Get the number of messages in this conversation."""
        return len(self.messages)

    @property
    def is_empty(self) -> bool:
        """Check if the conversation has no messages."""
        return not self.messages
