"""Shared fixtures: a client pointed at a fake qBittorrent, with and without a session."""

import pytest

from qbitclient import QBittorrentClient

BASE_URL = "http://localhost:8080"
SESSION = "SID=abc123; Path=/"


@pytest.fixture
def qb() -> QBittorrentClient:
    return QBittorrentClient(f"{BASE_URL}/")


@pytest.fixture
def logged_in(qb: QBittorrentClient) -> QBittorrentClient:
    qb.auth_cookie = SESSION
    return qb
