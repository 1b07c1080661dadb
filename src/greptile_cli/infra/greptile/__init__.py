"""Greptile API infrastructure for greptile_cli."""

from greptile_cli.infra.greptile.client import GreptileClient

__all__ = ["GreptileClient"]
