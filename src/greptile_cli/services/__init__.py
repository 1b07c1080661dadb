"""Domain services for greptile_cli."""

from greptile_cli.services.request_builder import build_index_request, build_query_request
from greptile_cli.services.resolver import RepositoryResolver, parse_remote_url

__all__ = [
    "RepositoryResolver",
    "build_index_request",
    "build_query_request",
    "parse_remote_url",
]
