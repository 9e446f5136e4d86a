# qbitclient/api/log.py
from ..base import APINames, BaseClient
from ..types import GetLogOptions, LogEntry, PeerLogEntry


class LogAPI(BaseClient):
    async def get_log(self, options: GetLogOptions | None = None) -> list[LogEntry]:
        envelope = await self.call_method(APINames.log, "main", query=options)
        return envelope.value

    async def get_peer_log(self, last_known_id: int | None = None) -> list[PeerLogEntry]:
        """Returns peer log entries newer than `last_known_id` (all of them if omitted)."""
        envelope = await self.call_method(
            APINames.log, "peers", query={"last_known_id": last_known_id}
        )
        return envelope.value
