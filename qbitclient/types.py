# qbitclient/types.py
"""
Shapes of the JSON documents exchanged with the qBittorrent WebUI API (v2).

These are plain TypedDicts: the binding returns the decoded JSON untouched,
the types only document what the server sends. Units follow the server:
sizes in bytes, speeds in bytes/s, durations in seconds, timestamps in
seconds since epoch, progress as a fraction of 1.
"""

from typing import Literal, Sequence, TypedDict, Union

HashesOrAll = Union[Sequence[str], Literal["all"]]

# 0 = do not download, 1 = normal, 6 = high, 7 = maximal
FilePriority = Literal[0, 1, 6, 7]
FILE_PRIORITIES = (0, 1, 6, 7)

TorrentState = Literal[
    "error",
    "missingFiles",
    "uploading",
    "pausedUP",
    "stoppedUP",
    "queuedUP",
    "stalledUP",
    "checkingUP",
    "forcedUP",
    "allocating",
    "downloading",
    "metaDL",
    "forcedMetaDL",
    "pausedDL",
    "stoppedDL",
    "queuedDL",
    "stalledDL",
    "checkingDL",
    "forcedDL",
    "checkingResumeData",
    "moving",
    "unknown",
]

SearchStatusString = Literal["Running", "Stopped"]


# =============================================================================
# app
# =============================================================================


class BuildInfo(TypedDict):
    bitness: Literal[32, 64]
    boost: str
    libtorrent: str
    openssl: str
    qt: str
    zlib: str


class Preferences(TypedDict, total=False):
    """
    Application preferences. Only the commonly used keys are listed; the server
    returns (and accepts) many more, all of which pass through untouched.
    """

    locale: str
    create_subfolder_enabled: bool
    start_paused_enabled: bool
    auto_delete_mode: int
    preallocate_all: bool
    incomplete_files_ext: bool
    auto_tmm_enabled: bool
    torrent_changed_tmm_enabled: bool
    save_path_changed_tmm_enabled: bool
    category_changed_tmm_enabled: bool
    save_path: str
    temp_path_enabled: bool
    temp_path: str
    scan_dirs: dict[str, Union[str, int]]
    export_dir: str
    export_dir_fin: str
    mail_notification_enabled: bool
    autorun_enabled: bool
    autorun_program: str
    queueing_enabled: bool
    max_active_downloads: int
    max_active_torrents: int
    max_active_uploads: int
    dont_count_slow_torrents: bool
    slow_torrent_dl_rate_threshold: int
    slow_torrent_ul_rate_threshold: int
    slow_torrent_inactive_timer: int
    max_ratio_enabled: bool
    max_ratio: float
    # 0 = pause torrent, 1 = remove torrent
    max_ratio_act: Literal[0, 1]
    max_seeding_time_enabled: bool
    max_seeding_time: int
    listen_port: int
    upnp: bool
    random_port: bool
    dl_limit: int
    up_limit: int
    max_connec: int
    max_connec_per_torrent: int
    max_uploads: int
    max_uploads_per_torrent: int
    # 0 = TCP and uTP, 1 = TCP, 2 = uTP
    bittorrent_protocol: Literal[0, 1, 2]
    limit_utp_rate: bool
    limit_tcp_overhead: bool
    limit_lan_peers: bool
    alt_dl_limit: int
    alt_up_limit: int
    scheduler_enabled: bool
    schedule_from_hour: int
    schedule_from_min: int
    schedule_to_hour: int
    schedule_to_min: int
    scheduler_days: int
    dht: bool
    pex: bool
    lsd: bool
    # 0 = prefer, 1 = force on, 2 = force off
    encryption: Literal[0, 1, 2]
    anonymous_mode: bool
    proxy_type: int
    proxy_ip: str
    proxy_port: int
    proxy_peer_connections: bool
    proxy_auth_enabled: bool
    proxy_username: str
    proxy_password: str
    ip_filter_enabled: bool
    ip_filter_path: str
    ip_filter_trackers: bool
    web_ui_domain_list: str
    web_ui_address: str
    web_ui_port: int
    web_ui_username: str
    web_ui_password: str
    web_ui_csrf_protection_enabled: bool
    web_ui_session_timeout: int
    bypass_local_auth: bool
    bypass_auth_subnet_whitelist_enabled: bool
    bypass_auth_subnet_whitelist: str
    rss_refresh_interval: int
    rss_max_articles_per_feed: int
    rss_processing_enabled: bool
    rss_auto_downloading_enabled: bool
    add_trackers_enabled: bool
    add_trackers: str
    announce_ip: str
    banned_IPs: str


# =============================================================================
# log
# =============================================================================


class GetLogOptions(TypedDict, total=False):
    normal: bool
    info: bool
    warning: bool
    critical: bool
    # Exclude messages with id <= last_known_id (server default -1)
    last_known_id: int


class LogEntry(TypedDict):
    id: int
    message: str
    timestamp: int
    # 1 = normal, 2 = info, 4 = warning, 8 = critical
    type: int


class PeerLogEntry(TypedDict):
    id: int
    ip: str
    timestamp: int
    blocked: bool
    reason: str


# =============================================================================
# transfer / sync
# =============================================================================


class GlobalTransferInfo(TypedDict, total=False):
    dl_info_speed: int
    dl_info_data: int
    up_info_speed: int
    up_info_data: int
    dl_rate_limit: int
    up_rate_limit: int
    dht_nodes: int
    connection_status: Literal["connected", "firewalled", "disconnected"]


class Category(TypedDict):
    name: str
    savePath: str


Categories = dict[str, Category]


class MainData(TypedDict, total=False):
    rid: int
    full_update: bool
    # hash -> partial Torrent; only changed fields are present on incremental updates
    torrents: dict[str, dict]
    torrents_removed: list[str]
    categories: dict[str, Category]
    categories_removed: list[str]
    tags: list[str]
    tags_removed: list[str]
    server_state: GlobalTransferInfo


class PeerInfo(TypedDict, total=False):
    client: str
    connection: str
    country: str
    country_code: str
    dl_speed: int
    downloaded: int
    files: str
    flags: str
    flags_desc: str
    ip: str
    peer_id_client: str
    port: int
    progress: float
    relevance: float
    up_speed: int
    uploaded: int


class TorrentPeersData(TypedDict, total=False):
    rid: int
    full_update: bool
    # "ip:port" -> peer
    peers: dict[str, PeerInfo]
    peers_removed: list[str]
    show_flags: bool


# =============================================================================
# torrents
# =============================================================================


class GetTorrentListOptions(TypedDict, total=False):
    filter: Union[str, Sequence[str]]
    category: Union[str, Sequence[str]]
    tag: Union[str, Sequence[str]]
    sort: str
    reverse: bool
    limit: int
    offset: int
    # pipe-separated
    hashes: str


class Torrent(TypedDict, total=False):
    added_on: int
    amount_left: int
    auto_tmm: bool
    availability: float
    category: str
    completed: int
    completion_on: int
    content_path: str
    dl_limit: int
    dlspeed: int
    download_path: str
    downloaded: int
    downloaded_session: int
    eta: int
    f_l_piece_prio: bool
    force_start: bool
    hash: str
    infohash_v1: str
    infohash_v2: str
    last_activity: int
    magnet_uri: str
    max_ratio: float
    max_seeding_time: int
    name: str
    num_complete: int
    num_incomplete: int
    num_leechs: int
    num_seeds: int
    priority: int
    progress: float
    ratio: float
    ratio_limit: float
    save_path: str
    seeding_time: int
    seeding_time_limit: int
    seen_complete: int
    seq_dl: bool
    size: int
    state: TorrentState
    super_seeding: bool
    # comma-separated
    tags: str
    time_active: int
    total_size: int
    tracker: str
    up_limit: int
    uploaded: int
    uploaded_session: int
    upspeed: int


class TorrentProperties(TypedDict, total=False):
    save_path: str
    creation_date: int
    piece_size: int
    comment: str
    total_wasted: int
    total_uploaded: int
    total_uploaded_session: int
    total_downloaded: int
    total_downloaded_session: int
    up_limit: int
    dl_limit: int
    time_elapsed: int
    seeding_time: int
    nb_connections: int
    nb_connections_limit: int
    share_ratio: float
    addition_date: int
    completion_date: int
    created_by: str
    dl_speed_avg: int
    dl_speed: int
    eta: int
    last_seen: int
    peers: int
    peers_total: int
    pieces_have: int
    pieces_num: int
    reannounce: int
    seeds: int
    seeds_total: int
    total_size: int
    up_speed_avg: int
    up_speed: int


class Tracker(TypedDict):
    url: str
    # 0 disabled, 1 not contacted, 2 working, 3 updating, 4 not working
    status: int
    tier: int
    num_peers: int
    num_seeds: int
    num_leeches: int
    num_downloaded: int
    msg: str


class WebSeed(TypedDict):
    url: str


class TorrentFile(TypedDict, total=False):
    index: int
    name: str
    size: int
    progress: float
    priority: FilePriority
    is_seed: bool
    piece_range: list[int]
    availability: float


class AddNewTorrentOptions(TypedDict, total=False):
    savepath: str
    cookie: str
    category: str
    # comma-separated; a list is joined with ","
    tags: Union[str, Sequence[str]]
    skip_checking: bool
    paused: bool
    stopped: bool
    root_folder: bool
    contentLayout: str
    rename: str
    upLimit: int
    dlLimit: int
    ratioLimit: float
    seedingTimeLimit: int
    autoTMM: bool
    sequentialDownload: bool
    firstLastPiecePrio: bool


class SetTorrentShareLimitOptions(TypedDict, total=False):
    # -2 = global limit, -1 = no limit
    ratioLimit: float
    # minutes; -2 = global limit, -1 = no limit
    seedingTimeLimit: int
    inactiveSeedingTimeLimit: int


# =============================================================================
# rss
# =============================================================================


class RSSArticle(TypedDict, total=False):
    id: str
    date: str
    title: str
    author: str
    description: str
    link: str
    torrentURL: str
    isRead: bool


class RSSFeed(TypedDict, total=False):
    uid: str
    url: str
    # Only present when requested with data
    title: str
    lastBuildDate: str
    isLoading: bool
    hasError: bool
    articles: list[RSSArticle]


# Folders map names to nested dicts, leaves are feeds
RSSItems = dict[str, Union[RSSFeed, dict]]


class AutoDownloadingRule(TypedDict, total=False):
    enabled: bool
    mustContain: str
    mustNotContain: str
    useRegex: bool
    episodeFilter: str
    smartFilter: bool
    previouslyMatchedEpisodes: list[str]
    affectedFeeds: list[str]
    ignoreDays: int
    lastMatch: str
    addPaused: bool
    assignedCategory: str
    savePath: str


# =============================================================================
# search
# =============================================================================


class SearchJob(TypedDict):
    id: int


class SearchStatus(TypedDict):
    id: int
    status: SearchStatusString
    total: int


class SearchResultItem(TypedDict):
    descrLink: str
    fileName: str
    fileSize: int
    fileUrl: str
    nbLeechers: int
    nbSeeders: int
    siteUrl: str


class SearchResult(TypedDict):
    results: list[SearchResultItem]
    status: SearchStatusString
    total: int


class SearchCategory(TypedDict):
    id: str
    name: str


class SearchPlugin(TypedDict):
    enabled: bool
    fullName: str
    name: str
    supportedCategories: list[SearchCategory]
    url: str
    version: str
