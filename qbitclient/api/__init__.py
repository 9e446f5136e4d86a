# qbitclient/api/__init__.py
# One mixin per WebUI namespace; QBittorrentClient combines them all.
from .application import ApplicationAPI
from .auth import AuthAPI
from .log import LogAPI
from .rss import RSSAPI
from .search import SearchAPI
from .sync import SyncAPI
from .torrents import TorrentsAPI
from .transfer import TransferAPI

__all__ = [
    "ApplicationAPI",
    "AuthAPI",
    "LogAPI",
    "RSSAPI",
    "SearchAPI",
    "SyncAPI",
    "TorrentsAPI",
    "TransferAPI",
]
