# qbitclient/api/rss.py
import json

from ..base import APINames, BaseClient
from ..types import AutoDownloadingRule, RSSItems


class RSSAPI(BaseClient):
    """
    RSS feeds and auto-downloading rules.

    Item paths use backslash as the folder separator, e.g. "The Pirate Bay\\Top100".
    """

    async def add_folder(self, path: str) -> None:
        await self.call_method(APINames.rss, "addFolder", method="POST", data={"path": path})

    async def add_feed(self, url: str, path: str = "") -> None:
        await self.call_method(APINames.rss, "addFeed", method="POST", data={"url": url, "path": path})

    async def remove_item(self, path: str) -> None:
        await self.call_method(APINames.rss, "removeItem", method="POST", data={"path": path})

    async def move_item(self, item_path: str, dest_path: str) -> None:
        await self.call_method(
            APINames.rss, "moveItem", method="POST", data={"itemPath": item_path, "destPath": dest_path}
        )

    async def get_all_items(self, with_data: bool = False) -> RSSItems:
        """Returns the feed tree; with `with_data` each feed carries its articles."""
        envelope = await self.call_method(APINames.rss, "items", query={"withData": with_data})
        return envelope.value

    async def mark_as_read(self, item_path: str, article_id: str | None = None) -> None:
        """Marks one article as read, or the whole feed when `article_id` is omitted."""
        data = {"itemPath": item_path}
        if article_id is not None:
            data["articleId"] = article_id
        await self.call_method(APINames.rss, "markAsRead", method="POST", data=data)

    async def refresh_item(self, item_path: str) -> None:
        await self.call_method(APINames.rss, "refreshItem", method="POST", data={"itemPath": item_path})

    async def set_auto_downloading_rule(self, rule_name: str, rule_def: AutoDownloadingRule) -> None:
        await self.call_method(
            APINames.rss,
            "setRule",
            method="POST",
            data={"ruleName": rule_name, "ruleDef": json.dumps(rule_def)},
        )

    async def rename_auto_downloading_rule(self, rule_name: str, new_rule_name: str) -> None:
        await self.call_method(
            APINames.rss,
            "renameRule",
            method="POST",
            data={"ruleName": rule_name, "newRuleName": new_rule_name},
        )

    async def remove_auto_downloading_rule(self, rule_name: str) -> None:
        await self.call_method(APINames.rss, "removeRule", method="POST", data={"ruleName": rule_name})

    async def get_all_auto_downloading_rules(self) -> dict[str, AutoDownloadingRule]:
        envelope = await self.call_method(APINames.rss, "rules")
        return envelope.value

    async def get_all_articles_matching_rule(self, rule_name: str) -> dict[str, list[str]]:
        """Maps feed names to the titles of their articles matching `rule_name`."""
        envelope = await self.call_method(
            APINames.rss, "matchingArticles", method="POST", data={"ruleName": rule_name}
        )
        return envelope.value
