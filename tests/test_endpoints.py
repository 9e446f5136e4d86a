import json
from urllib.parse import parse_qs

import httpx
import pytest
import respx

API_URL = "http://localhost:8080/api/v2"


def form(request: httpx.Request) -> dict:
    return {key: values[0] for key, values in parse_qs(request.content.decode(), keep_blank_values=True).items()}


# =============================================================================
# app
# =============================================================================


@pytest.mark.asyncio
async def test_text_endpoints_are_never_coerced_to_numbers(logged_in):
    with respx.mock(assert_all_called=True) as mock:
        mock.get(f"{API_URL}/app/version").mock(return_value=httpx.Response(200, text="5"))
        mock.get(f"{API_URL}/app/webapiVersion").mock(return_value=httpx.Response(200, text="2.9"))
        assert await logged_in.get_application_version() == "5"
        assert await logged_in.get_api_version() == "2.9"


@pytest.mark.asyncio
async def test_build_info_and_preferences(logged_in):
    build = {"bitness": 64, "boost": "1.83", "libtorrent": "2.0.9", "openssl": "3.1", "qt": "6.5", "zlib": "1.3"}
    with respx.mock(assert_all_called=True) as mock:
        mock.get(f"{API_URL}/app/buildInfo").mock(return_value=httpx.Response(200, json=build))
        mock.get(f"{API_URL}/app/preferences").mock(
            return_value=httpx.Response(200, json={"save_path": "/downloads", "dht": True})
        )
        assert await logged_in.get_build_info() == build
        assert await logged_in.get_application_preferences() == {"save_path": "/downloads", "dht": True}


@pytest.mark.asyncio
async def test_set_preferences_sends_one_json_field(logged_in):
    with respx.mock(assert_all_called=True) as mock:
        route = mock.post(f"{API_URL}/app/setPreferences").mock(return_value=httpx.Response(200))
        await logged_in.set_application_preferences({"save_path": "/data", "dl_limit": 0, "dht": False})

    sent = form(route.calls.last.request)
    assert list(sent) == ["json"]
    assert json.loads(sent["json"]) == {"save_path": "/data", "dl_limit": 0, "dht": False}


@pytest.mark.asyncio
async def test_shutdown_is_a_bodiless_post(logged_in):
    with respx.mock(assert_all_called=True) as mock:
        route = mock.post(f"{API_URL}/app/shutdown").mock(return_value=httpx.Response(200))
        assert await logged_in.shutdown_application() is None

    assert route.calls.last.request.content == b""


# =============================================================================
# log / sync
# =============================================================================


@pytest.mark.asyncio
async def test_get_log_passes_options_as_query(logged_in):
    entries = [{"id": 1, "message": "started", "timestamp": 1700000000, "type": 1}]
    with respx.mock(assert_all_called=True) as mock:
        route = mock.get(f"{API_URL}/log/main").mock(return_value=httpx.Response(200, json=entries))
        result = await logged_in.get_log({"normal": True, "warning": False, "last_known_id": 10})

    assert result == entries
    assert route.calls.last.request.url.query == b"normal=true&warning=false&last_known_id=10"


@pytest.mark.asyncio
async def test_peer_log_omits_missing_id(logged_in):
    with respx.mock(assert_all_called=True) as mock:
        route = mock.get(f"{API_URL}/log/peers").mock(return_value=httpx.Response(200, json=[]))
        await logged_in.get_peer_log()
        await logged_in.get_peer_log(42)

    assert route.calls[0].request.url.query == b""
    assert route.calls[1].request.url.params["last_known_id"] == "42"


@pytest.mark.asyncio
async def test_sync_endpoints(logged_in):
    with respx.mock(assert_all_called=True) as mock:
        main = mock.get(f"{API_URL}/sync/maindata").mock(
            return_value=httpx.Response(200, json={"rid": 3, "full_update": True})
        )
        peers = mock.get(f"{API_URL}/sync/torrentPeers").mock(
            return_value=httpx.Response(200, json={"rid": 1, "peers": {}})
        )
        assert (await logged_in.get_main_data(2))["rid"] == 3
        assert (await logged_in.get_torrent_peers_data("h1"))["rid"] == 1

    assert main.calls.last.request.url.params["rid"] == "2"
    assert peers.calls.last.request.url.query == b"hash=h1"


# =============================================================================
# transfer
# =============================================================================


@pytest.mark.asyncio
async def test_transfer_limits(logged_in):
    with respx.mock(assert_all_called=True) as mock:
        mock.get(f"{API_URL}/transfer/speedLimitsMode").mock(return_value=httpx.Response(200, text="1"))
        mock.get(f"{API_URL}/transfer/downloadLimit").mock(return_value=httpx.Response(200, text="0"))
        mock.get(f"{API_URL}/transfer/uploadLimit").mock(return_value=httpx.Response(200, text="2048"))
        set_dl = mock.post(f"{API_URL}/transfer/setDownloadLimit").mock(return_value=httpx.Response(200))
        set_ul = mock.post(f"{API_URL}/transfer/setUploadLimit").mock(return_value=httpx.Response(200))

        assert await logged_in.get_alternative_speed_limits_state() == 1
        assert await logged_in.get_global_download_limit() == 0
        assert await logged_in.get_global_upload_limit() == 2048
        await logged_in.set_global_download_limit()
        await logged_in.set_global_upload_limit(4096)

    assert form(set_dl.calls.last.request) == {"limit": "0"}
    assert form(set_ul.calls.last.request) == {"limit": "4096"}


@pytest.mark.asyncio
async def test_ban_peers_is_pipe_joined(logged_in):
    with respx.mock(assert_all_called=True) as mock:
        route = mock.post(f"{API_URL}/transfer/banPeers").mock(return_value=httpx.Response(200))
        await logged_in.ban_peers(["1.2.3.4:6881", "5.6.7.8:51413"])

    assert form(route.calls.last.request) == {"peers": "1.2.3.4:6881|5.6.7.8:51413"}


# =============================================================================
# rss
# =============================================================================


@pytest.mark.asyncio
async def test_set_rule_sends_json_definition(logged_in):
    rule = {"enabled": True, "mustContain": "Punisher", "affectedFeeds": ["http://feed/rss"], "ignoreDays": 0}
    with respx.mock(assert_all_called=True) as mock:
        route = mock.post(f"{API_URL}/rss/setRule").mock(return_value=httpx.Response(200))
        await logged_in.set_auto_downloading_rule("Punisher", rule)

    sent = form(route.calls.last.request)
    assert sent["ruleName"] == "Punisher"
    assert json.loads(sent["ruleDef"]) == rule


@pytest.mark.asyncio
async def test_rss_items_and_mark_as_read(logged_in):
    tree = {"Linux": {"Ubuntu": {"uid": "{abc}", "url": "http://feed/rss"}}}
    with respx.mock(assert_all_called=True) as mock:
        items = mock.get(f"{API_URL}/rss/items").mock(return_value=httpx.Response(200, json=tree))
        read = mock.post(f"{API_URL}/rss/markAsRead").mock(return_value=httpx.Response(200))

        assert await logged_in.get_all_items() == tree
        await logged_in.mark_as_read("Linux\\Ubuntu")
        await logged_in.mark_as_read("Linux\\Ubuntu", "article-1")

    assert items.calls.last.request.url.query == b"withData=false"
    assert form(read.calls[0].request) == {"itemPath": "Linux\\Ubuntu"}
    assert form(read.calls[1].request) == {"itemPath": "Linux\\Ubuntu", "articleId": "article-1"}


@pytest.mark.asyncio
async def test_rss_item_management(logged_in):
    with respx.mock(assert_all_called=True) as mock:
        feed = mock.post(f"{API_URL}/rss/addFeed").mock(return_value=httpx.Response(200))
        move = mock.post(f"{API_URL}/rss/moveItem").mock(return_value=httpx.Response(200))
        rename = mock.post(f"{API_URL}/rss/renameRule").mock(return_value=httpx.Response(200))
        matching = mock.post(f"{API_URL}/rss/matchingArticles").mock(
            return_value=httpx.Response(200, json={"Ubuntu": ["ubuntu-24.04"]})
        )

        await logged_in.add_feed("http://feed/rss", "Linux\\Ubuntu")
        await logged_in.move_item("Linux\\Ubuntu", "Ubuntu")
        await logged_in.rename_auto_downloading_rule("Linux", "Ubuntu")
        assert await logged_in.get_all_articles_matching_rule("Ubuntu") == {"Ubuntu": ["ubuntu-24.04"]}

    assert form(feed.calls.last.request) == {"url": "http://feed/rss", "path": "Linux\\Ubuntu"}
    assert form(move.calls.last.request) == {"itemPath": "Linux\\Ubuntu", "destPath": "Ubuntu"}
    assert form(rename.calls.last.request) == {"ruleName": "Linux", "newRuleName": "Ubuntu"}
    assert form(matching.calls.last.request) == {"ruleName": "Ubuntu"}


# =============================================================================
# search
# =============================================================================


@pytest.mark.asyncio
async def test_start_search_defaults_and_plugin_lists(logged_in):
    with respx.mock(assert_all_called=True) as mock:
        route = mock.post(f"{API_URL}/search/start").mock(return_value=httpx.Response(200, json={"id": 12}))
        assert await logged_in.start_search("ubuntu") == {"id": 12}
        await logged_in.start_search("ubuntu", ["legittorrents", "piratebay"], "software")

    assert form(route.calls[0].request) == {"pattern": "ubuntu", "plugins": "all", "category": "all"}
    assert form(route.calls[1].request) == {
        "pattern": "ubuntu",
        "plugins": "legittorrents|piratebay",
        "category": "software",
    }


@pytest.mark.asyncio
async def test_search_status_and_results(logged_in):
    status = [{"id": 12, "status": "Running", "total": 3}]
    results = {"results": [], "status": "Stopped", "total": 0}
    with respx.mock(assert_all_called=True) as mock:
        status_route = mock.post(f"{API_URL}/search/status").mock(return_value=httpx.Response(200, json=status))
        results_route = mock.post(f"{API_URL}/search/results").mock(
            return_value=httpx.Response(200, json=results)
        )

        assert await logged_in.get_search_status() == status
        await logged_in.get_search_status(12)
        assert await logged_in.get_search_results(12, limit=10, offset=-2) == results

    assert status_route.calls[0].request.content == b""
    assert form(status_route.calls[1].request) == {"id": "12"}
    assert form(results_route.calls.last.request) == {"id": "12", "limit": "10", "offset": "-2"}


@pytest.mark.asyncio
async def test_search_plugin_management(logged_in):
    with respx.mock(assert_all_called=True) as mock:
        install = mock.post(f"{API_URL}/search/installPlugin").mock(return_value=httpx.Response(200))
        uninstall = mock.post(f"{API_URL}/search/uninstallPlugin").mock(return_value=httpx.Response(200))
        enable = mock.post(f"{API_URL}/search/enablePlugin").mock(return_value=httpx.Response(200))
        update = mock.post(f"{API_URL}/search/updatePlugins").mock(return_value=httpx.Response(200))

        await logged_in.install_search_plugin(["https://x/a.py", "https://x/b.py"])
        await logged_in.uninstall_search_plugin(["a", "b"])
        await logged_in.enable_search_plugin(["a"], enable=False)
        await logged_in.update_search_plugins()

    assert form(install.calls.last.request) == {"sources": "https://x/a.py|https://x/b.py"}
    assert form(uninstall.calls.last.request) == {"names": "a|b"}
    assert form(enable.calls.last.request) == {"names": "a", "enable": "false"}
    assert update.called
