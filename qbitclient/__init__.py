# qbitclient/__init__.py
"""Async client for the qBittorrent WebUI API v2."""

import logging

from .base import ALL, APIError, APINames, AuthenticationError, Envelope, Parsed, Raw
from .config import load_config
from .logconfig import setup_logging
from .qbittorrent import QBittorrentClient
from .uploads import ByteStream, InMemoryBytes, LocalPath, UrlReference

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())


def get_torrent_client(config: dict | None = None, **kwargs) -> QBittorrentClient:
    """
    Creates a client from a config dict (see config.load_config). Not logged in yet.

    Extra keyword arguments (e.g. http_client) go straight to QBittorrentClient.
    """
    if config is None:
        config = load_config()
    return QBittorrentClient(
        config.get("TORRENT_CLIENT_URL") or "http://localhost:8080",
        timeout=config.get("TORRENT_CLIENT_TIMEOUT"),
        **kwargs,
    )


async def connect(config: dict | None = None, **kwargs) -> QBittorrentClient:
    """Creates a client and logs in with the configured credentials."""
    if config is None:
        config = load_config()
    client = get_torrent_client(config, **kwargs)
    await client.login(
        config.get("TORRENT_CLIENT_USERNAME") or "",
        config.get("TORRENT_CLIENT_PASSWORD") or "",
    )
    return client


__all__ = [
    "ALL",
    "APIError",
    "APINames",
    "AuthenticationError",
    "ByteStream",
    "Envelope",
    "InMemoryBytes",
    "LocalPath",
    "Parsed",
    "QBittorrentClient",
    "Raw",
    "UrlReference",
    "connect",
    "get_torrent_client",
    "load_config",
    "setup_logging",
]
