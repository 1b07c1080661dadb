"""Public models for greptile_cli.

This module exports the repository, conversation and request models.
"""

from greptile_cli.models.conversation import Conversation
from greptile_cli.models.message import Message, Role
from greptile_cli.models.repository import RepositoryIdentity
from greptile_cli.models.requests import IndexRequest, QueryRequest

__all__ = [
    "Conversation",
    "IndexRequest",
    "Message",
    "QueryRequest",
    "RepositoryIdentity",
    "Role",
]
