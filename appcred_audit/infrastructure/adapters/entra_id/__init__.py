"""Entra ID adapter - Microsoft Graph access to app registrations."""

from .directory import EntraIdApplicationDirectory
from .graph_client import GraphClient, GraphClientConfig

__all__ = [
    "EntraIdApplicationDirectory",
    "GraphClient",
    "GraphClientConfig",
]
