# qbitclient/api/transfer.py
from typing import Sequence

from ..base import APINames, BaseClient, join
from ..types import GlobalTransferInfo


class TransferAPI(BaseClient):
    async def get_global_transfer_info(self) -> GlobalTransferInfo:
        envelope = await self.call_method(APINames.transfer, "info")
        return envelope.value

    async def get_alternative_speed_limits_state(self) -> int:
        """1 if alternative speed limits are enabled, 0 otherwise."""
        envelope = await self.call_method(APINames.transfer, "speedLimitsMode")
        return int(envelope.text)

    async def toggle_alternative_speed_limits(self) -> None:
        await self.call_method(APINames.transfer, "toggleSpeedLimitsMode", method="POST")

    async def get_global_download_limit(self) -> int:
        """Bytes/s, 0 means unlimited."""
        envelope = await self.call_method(APINames.transfer, "downloadLimit")
        return int(envelope.text)

    async def set_global_download_limit(self, limit: int = 0) -> None:
        await self.call_method(
            APINames.transfer, "setDownloadLimit", method="POST", data={"limit": limit}
        )

    async def get_global_upload_limit(self) -> int:
        """Bytes/s, 0 means unlimited."""
        envelope = await self.call_method(APINames.transfer, "uploadLimit")
        return int(envelope.text)

    async def set_global_upload_limit(self, limit: int = 0) -> None:
        await self.call_method(
            APINames.transfer, "setUploadLimit", method="POST", data={"limit": limit}
        )

    async def ban_peers(self, peers: Sequence[str]) -> None:
        """Bans peers given as "host:port" strings."""
        await self.call_method(
            APINames.transfer, "banPeers", method="POST", data={"peers": join(peers, "|")}
        )
