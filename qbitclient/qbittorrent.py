# qbitclient/qbittorrent.py
from .api import (
    ApplicationAPI,
    AuthAPI,
    LogAPI,
    RSSAPI,
    SearchAPI,
    SyncAPI,
    TorrentsAPI,
    TransferAPI,
)


class QBittorrentClient(
    AuthAPI,
    ApplicationAPI,
    LogAPI,
    SyncAPI,
    TransferAPI,
    TorrentsAPI,
    RSSAPI,
    SearchAPI,
):
    """
    Async binding for the qBittorrent WebUI API v2.

    Example:
        async with QBittorrentClient("http://localhost:8080") as qb:
            await qb.login("admin", "adminadmin")
            version = await qb.get_application_version()
            torrents = await qb.get_torrent_list({"filter": "downloading"})

    Login/logout change the session cookie used by every call on this
    instance. Each call reads the cookie once when it starts, but callers
    sharing one instance across tasks should still not log in or out while
    other calls are in flight.
    """
