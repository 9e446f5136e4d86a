# qbitclient/api/search.py
from typing import Literal, Sequence, Union

from ..base import APINames, BaseClient, join
from ..types import SearchJob, SearchPlugin, SearchResult, SearchStatus

PluginSelection = Union[Sequence[str], Literal["all", "enabled"]]


class SearchAPI(BaseClient):
    async def start_search(
        self,
        pattern: str,
        plugins: PluginSelection = "all",
        category: str = "all",
    ) -> SearchJob:
        """
        Starts a search job.

        Args:
            pattern: Text to search for
            plugins: Plugin names, or "all" / "enabled"
            category: Category to restrict to; depends on the plugins, "all" for none

        Returns:
            {"id": <job id>}
        """
        plugins = plugins if isinstance(plugins, str) else join(plugins, "|")
        envelope = await self.call_method(
            APINames.search,
            "start",
            method="POST",
            data={"pattern": pattern, "plugins": plugins, "category": category},
        )
        return envelope.value

    async def stop_search(self, id: int) -> None:
        await self.call_method(APINames.search, "stop", method="POST", data={"id": id})

    async def get_search_status(self, id: int | None = None) -> list[SearchStatus]:
        """Status of one job, or of every job when `id` is omitted."""
        data = {"id": id} if id is not None else None
        envelope = await self.call_method(APINames.search, "status", method="POST", data=data)
        return envelope.value

    async def get_search_results(self, id: int, limit: int = 0, offset: int = 0) -> SearchResult:
        """
        Results of a job. `limit` <= 0 means no limit; a negative `offset`
        counts back from the newest result.
        """
        envelope = await self.call_method(
            APINames.search,
            "results",
            method="POST",
            data={"id": id, "limit": limit, "offset": offset},
        )
        return envelope.value

    async def delete_search(self, id: int) -> None:
        await self.call_method(APINames.search, "delete", method="POST", data={"id": id})

    async def get_search_plugins(self) -> list[SearchPlugin]:
        envelope = await self.call_method(APINames.search, "plugins")
        return envelope.value

    async def install_search_plugin(self, sources: Sequence[str]) -> None:
        """Installs plugins from URLs or server-side file paths."""
        await self.call_method(
            APINames.search, "installPlugin", method="POST", data={"sources": join(sources, "|")}
        )

    async def uninstall_search_plugin(self, names: Sequence[str]) -> None:
        await self.call_method(
            APINames.search, "uninstallPlugin", method="POST", data={"names": join(names, "|")}
        )

    async def enable_search_plugin(self, names: Sequence[str], enable: bool = True) -> None:
        await self.call_method(
            APINames.search,
            "enablePlugin",
            method="POST",
            data={"names": join(names, "|"), "enable": enable},
        )

    async def update_search_plugins(self) -> None:
        await self.call_method(APINames.search, "updatePlugins", method="POST")
