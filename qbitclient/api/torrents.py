# qbitclient/api/torrents.py
import logging
from typing import Any, Iterable, Sequence

from ..base import APINames, BaseClient, hashes_or_all, join
from ..types import (
    FILE_PRIORITIES,
    AddNewTorrentOptions,
    Categories,
    GetTorrentListOptions,
    HashesOrAll,
    SetTorrentShareLimitOptions,
    Torrent,
    TorrentFile,
    TorrentProperties,
    Tracker,
    WebSeed,
)
from ..uploads import UrlReference, classify, to_multipart_part

logger = logging.getLogger(__name__)


class TorrentsAPI(BaseClient):
    async def _post(self, method_name: str, data: dict) -> Any:
        envelope = await self.call_method(APINames.torrents, method_name, method="POST", data=data)
        return envelope.value

    async def _get(self, method_name: str, query: dict | None = None) -> Any:
        envelope = await self.call_method(APINames.torrents, method_name, query=query)
        return envelope.value

    # --- Reading ---

    async def get_torrent_list(self, options: GetTorrentListOptions | None = None) -> list[Torrent]:
        return await self._get("info", options)

    async def get_torrent_generic_properties(self, hash: str) -> TorrentProperties:
        return await self._get("properties", {"hash": hash})

    async def get_torrent_trackers(self, hash: str) -> list[Tracker]:
        return await self._get("trackers", {"hash": hash})

    async def get_torrent_web_seeds(self, hash: str) -> list[WebSeed]:
        return await self._get("webseeds", {"hash": hash})

    async def get_torrent_contents(self, hash: str, indexes: Sequence[int] | None = None) -> list[TorrentFile]:
        """Returns the torrent's files, optionally only those at `indexes`."""
        query = {"hash": hash, "indexes": join(indexes, "|") if indexes is not None else None}
        return await self._get("files", query)

    async def get_torrent_pieces_states(self, hash: str) -> list[int]:
        """One state per piece, in order: 0 not downloaded, 1 downloading, 2 downloaded."""
        return await self._get("pieceStates", {"hash": hash})

    async def get_torrent_pieces_hashes(self, hash: str) -> list[str]:
        return await self._get("pieceHashes", {"hash": hash})

    # --- Lifecycle ---

    async def pause_torrents(self, hashes: HashesOrAll) -> None:
        await self._post("pause", {"hashes": hashes_or_all(hashes)})

    async def resume_torrents(self, hashes: HashesOrAll) -> None:
        await self._post("resume", {"hashes": hashes_or_all(hashes)})

    async def delete_torrents(self, hashes: HashesOrAll, delete_files: bool = False) -> None:
        """Removes torrents; with `delete_files` the downloaded data goes too."""
        await self._post("delete", {"hashes": hashes_or_all(hashes), "deleteFiles": delete_files})

    async def recheck_torrents(self, hashes: HashesOrAll) -> None:
        await self._post("recheck", {"hashes": hashes_or_all(hashes)})

    async def reannounce_torrents(self, hashes: HashesOrAll) -> None:
        await self._post("reannounce", {"hashes": hashes_or_all(hashes)})

    async def add_new_torrent(self, torrents: Iterable[Any], options: AddNewTorrentOptions | None = None) -> None:
        """
        Adds torrents from any mix of links, local files and binary content.

        Args:
            torrents: Items accepted by uploads.classify: http(s)/magnet/bc://bt/
                links, paths to .torrent files, bytes, binary file objects,
                async byte iterables, or the upload variants themselves
            options: Extra form fields (savepath, category, tags, limits...)

        Links are sent newline-joined in the `urls` field; everything else is
        read into memory and attached as a repeated `torrents` multipart part.
        """
        items = [classify(item) for item in torrents]
        urls = [item.url for item in items if isinstance(item, UrlReference)]

        data = {key: value for key, value in (options or {}).items() if value is not None}
        if isinstance(data.get("tags"), (list, tuple)):
            data["tags"] = join(data["tags"], ",")
        data["urls"] = join(urls, "\n")

        files = []
        for item in items:
            if not isinstance(item, UrlReference):
                files.append(await to_multipart_part(item))

        logger.debug("Adding %d link(s) and %d file(s)", len(urls), len(files))
        await self.call_method(
            APINames.torrents, "add", method="POST", data=data, files=files or None
        )

    # --- Trackers / peers ---

    async def add_trackers_to_torrent(self, hash: str, urls: Sequence[str]) -> None:
        await self._post("addTrackers", {"hash": hash, "urls": join(urls, "\n")})

    async def edit_tracker(self, hash: str, orig_url: str, new_url: str) -> None:
        await self._post("editTracker", {"hash": hash, "origUrl": orig_url, "newUrl": new_url})

    async def remove_trackers(self, hash: str, urls: Sequence[str]) -> None:
        await self._post("removeTrackers", {"hash": hash, "urls": join(urls, "\n")})

    async def add_peers(self, hashes: Sequence[str], peers: Sequence[str]) -> None:
        """Adds "host:port" peers to every torrent in `hashes`."""
        await self._post("addPeers", {"hashes": join(hashes, "|"), "peers": join(peers, "|")})

    # --- Queue priority ---

    async def increase_torrent_priority(self, hashes: HashesOrAll) -> None:
        await self._post("increasePrio", {"hashes": hashes_or_all(hashes)})

    async def decrease_torrent_priority(self, hashes: HashesOrAll) -> None:
        await self._post("decreasePrio", {"hashes": hashes_or_all(hashes)})

    async def maximal_torrent_priority(self, hashes: HashesOrAll) -> None:
        await self._post("topPrio", {"hashes": hashes_or_all(hashes)})

    async def minimal_torrent_priority(self, hashes: HashesOrAll) -> None:
        await self._post("bottomPrio", {"hashes": hashes_or_all(hashes)})

    async def set_file_priority(self, hash: str, ids: Sequence[int], priority: int) -> None:
        """
        Sets the download priority of files inside one torrent.

        `ids` are the `index` values from get_torrent_contents. `priority` is
        0 (skip), 1 (normal), 6 (high) or 7 (maximal).

        Raises:
            ValueError: For any other priority
        """
        if priority not in FILE_PRIORITIES:
            raise ValueError(f"File priority must be one of {FILE_PRIORITIES}, got {priority!r}")
        await self._post("filePrio", {"hash": hash, "id": join(ids, "|"), "priority": priority})

    # --- Limits ---

    async def get_torrent_download_limit(self, hashes: HashesOrAll) -> dict[str, int]:
        """Maps each hash to its download limit in bytes/s."""
        return await self._post("downloadLimit", {"hashes": hashes_or_all(hashes)})

    async def set_torrent_download_limit(self, hashes: HashesOrAll, limit: int) -> None:
        await self._post("setDownloadLimit", {"hashes": hashes_or_all(hashes), "limit": limit})

    async def set_torrent_share_limit(self, hashes: HashesOrAll, options: SetTorrentShareLimitOptions) -> None:
        data = {"hashes": hashes_or_all(hashes)}
        for key in ("ratioLimit", "seedingTimeLimit", "inactiveSeedingTimeLimit"):
            if options.get(key) is not None:
                data[key] = options[key]
        await self._post("setShareLimits", data)

    async def get_torrent_upload_limit(self, hashes: HashesOrAll) -> dict[str, int]:
        """Maps each hash to its upload limit in bytes/s."""
        return await self._post("uploadLimit", {"hashes": hashes_or_all(hashes)})

    async def set_torrent_upload_limit(self, hashes: HashesOrAll, limit: int) -> None:
        await self._post("setUploadLimit", {"hashes": hashes_or_all(hashes), "limit": limit})

    # --- Location / naming ---

    async def set_torrent_location(self, hashes: HashesOrAll, location: str) -> None:
        await self._post("setLocation", {"hashes": hashes_or_all(hashes), "location": location})

    async def set_torrent_name(self, hash: str, name: str) -> None:
        await self._post("rename", {"hash": hash, "name": name})

    async def rename_file(self, hash: str, old_path: str, new_path: str) -> None:
        await self._post("renameFile", {"hash": hash, "oldPath": old_path, "newPath": new_path})

    async def rename_folder(self, hash: str, old_path: str, new_path: str) -> None:
        await self._post("renameFolder", {"hash": hash, "oldPath": old_path, "newPath": new_path})

    # --- Categories ---

    async def set_torrent_category(self, hashes: HashesOrAll, category: str) -> None:
        """Pass an empty `category` to unset it."""
        await self._post("setCategory", {"hashes": hashes_or_all(hashes), "category": category})

    async def get_all_categories(self) -> Categories:
        return await self._get("categories")

    async def add_new_category(self, category: str, save_path: str = "") -> None:
        await self._post("createCategory", {"category": category, "savePath": save_path})

    async def edit_category(self, category: str, save_path: str) -> None:
        await self._post("editCategory", {"category": category, "savePath": save_path})

    async def remove_categories(self, categories: Sequence[str]) -> None:
        await self._post("removeCategories", {"categories": join(categories, "|")})

    # --- Tags ---

    async def add_torrent_tags(self, hashes: HashesOrAll, tags: Sequence[str]) -> None:
        await self._post("addTags", {"hashes": hashes_or_all(hashes), "tags": join(tags, ",")})

    async def remove_torrent_tags(self, hashes: HashesOrAll, tags: Sequence[str] | None = None) -> None:
        """Removes `tags` from the torrents; with no tags, removes every tag."""
        data = {"hashes": hashes_or_all(hashes)}
        if tags is not None:
            data["tags"] = join(tags, ",")
        await self._post("removeTags", data)

    async def get_all_tags(self) -> list[str]:
        return await self._get("tags")

    async def create_tags(self, tags: Sequence[str]) -> None:
        await self._post("createTags", {"tags": join(tags, ",")})

    async def delete_tags(self, tags: Sequence[str]) -> None:
        await self._post("deleteTags", {"tags": join(tags, ",")})

    # --- Toggles ---

    async def set_automatic_torrent_management(self, hashes: HashesOrAll, enable: bool = False) -> None:
        await self._post("setAutoManagement", {"hashes": hashes_or_all(hashes), "enable": enable})

    async def toggle_sequential_download(self, hashes: HashesOrAll) -> None:
        await self._post("toggleSequentialDownload", {"hashes": hashes_or_all(hashes)})

    async def toggle_first_last_piece_priority(self, hashes: HashesOrAll) -> None:
        await self._post("toggleFirstLastPiecePrio", {"hashes": hashes_or_all(hashes)})

    async def set_force_start(self, hashes: HashesOrAll, value: bool = False) -> None:
        await self._post("setForceStart", {"hashes": hashes_or_all(hashes), "value": value})

    async def set_super_seeding(self, hashes: HashesOrAll, value: bool = False) -> None:
        await self._post("setSuperSeeding", {"hashes": hashes_or_all(hashes), "value": value})
