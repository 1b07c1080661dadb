"""Request builders for greptile_cli.

Pure functions assembling API request bodies from a repository identity
and a conversation.
"""

from collections.abc import Sequence

from greptile_cli.models.conversation import Conversation
from greptile_cli.models.message import Message
from greptile_cli.models.repository import RepositoryIdentity
from greptile_cli.models.requests import IndexRequest, QueryRequest

__all__ = [
    "build_index_request",
    "build_query_request",
]


def build_index_request(identity: RepositoryIdentity) -> IndexRequest:
    """Build a forced re-index request with completion notification."""
    return IndexRequest.from_identity(identity)


def build_query_request(
    identity: RepositoryIdentity,
    messages: Message | Conversation | Sequence[Message],
) -> QueryRequest:
    """Build a query against a single repository.

    Args:
        identity: Repository to query
        messages: The initiating message, or an existing conversation
            in chronological order

    Returns:
        QueryRequest with an empty session and streaming and genius mode disabled

    Raises:
        ValueError: If no messages are given
    """
    if isinstance(messages, Message):
        conversation = (messages,)
    elif isinstance(messages, Conversation):
        conversation = messages.messages
    else:
        conversation = tuple(messages)

    if not conversation:
        raise ValueError("A query needs at least one message")

    return QueryRequest(
        messages=conversation,
        repositories=(identity,),
        session_id="",
        stream=False,
        genius=False,
    )
