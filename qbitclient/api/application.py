# qbitclient/api/application.py
import json

from ..base import APINames, BaseClient
from ..types import BuildInfo, Preferences


class ApplicationAPI(BaseClient):
    async def get_application_version(self) -> str:
        """Returns the qBittorrent version, e.g. "v4.6.5"."""
        envelope = await self.call_method(APINames.app, "version")
        return envelope.text

    async def get_api_version(self) -> str:
        """Returns the WebUI API version, e.g. "2.9.3"."""
        envelope = await self.call_method(APINames.app, "webapiVersion")
        return envelope.text

    async def get_build_info(self) -> BuildInfo:
        envelope = await self.call_method(APINames.app, "buildInfo")
        return envelope.value

    async def shutdown_application(self) -> None:
        await self.call_method(APINames.app, "shutdown", method="POST")

    async def get_application_preferences(self) -> Preferences:
        envelope = await self.call_method(APINames.app, "preferences")
        return envelope.value

    async def set_application_preferences(self, preferences: Preferences) -> None:
        """
        Changes only the preferences present in `preferences`.

        The whole mapping travels as one JSON object in the `json` form field,
        so strings stay quoted and numbers/booleans don't.
        """
        await self.call_method(
            APINames.app,
            "setPreferences",
            method="POST",
            data={"json": json.dumps(preferences)},
        )

    async def get_default_save_path(self) -> str:
        envelope = await self.call_method(APINames.app, "defaultSavePath")
        return envelope.text
