"""Async client for the ProPublica Congress API."""

from propublica_congress.client import ClientConfig, ProPublicaClient, create_client
from propublica_congress.config import Settings, settings
from propublica_congress.congress import Congress, create
from propublica_congress.errors import CongressAPIError, InvalidArgumentError, InvalidResponseError
from propublica_congress.log import configure_logging

__all__ = [
    "ClientConfig",
    "Congress",
    "CongressAPIError",
    "InvalidArgumentError",
    "InvalidResponseError",
    "ProPublicaClient",
    "Settings",
    "configure_logging",
    "create",
    "create_client",
    "settings",
]
