# qbitclient/api/sync.py
from ..base import APINames, BaseClient
from ..types import MainData, TorrentPeersData


class SyncAPI(BaseClient):
    async def get_main_data(self, rid: int | None = None) -> MainData:
        """
        Returns changes since response `rid`.

        With no rid (server assumes 0) or a rid the server no longer knows,
        the reply is a full snapshot with `full_update` set.
        """
        envelope = await self.call_method(APINames.sync, "maindata", query={"rid": rid})
        return envelope.value

    async def get_torrent_peers_data(self, hash: str, rid: int | None = None) -> TorrentPeersData:
        envelope = await self.call_method(
            APINames.sync, "torrentPeers", query={"hash": hash, "rid": rid}
        )
        return envelope.value
