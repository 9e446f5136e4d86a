# qbitclient/config.py
import logging
import os

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

# Define fallback values
FALLBACK_CONFIG = {
    "TORRENT_CLIENT_URL": "http://localhost:8080",
    "TORRENT_CLIENT_USERNAME": "admin",
    "TORRENT_CLIENT_PASSWORD": "",
    # Seconds; unset means requests never time out
    "TORRENT_CLIENT_TIMEOUT": None,
}


def load_config(env_file: str | os.PathLike | None = None) -> dict:
    """
    Builds the connection settings: fallbacks, overridden by the environment.

    A .env file (the one given, or the nearest one found by python-dotenv) is
    loaded first without overriding variables that are already set.
    """
    load_dotenv(env_file)
    config = FALLBACK_CONFIG.copy()
    env_config = {key: os.getenv(key) for key in config.keys() if os.getenv(key) is not None}
    config.update(env_config)
    config["TORRENT_CLIENT_TIMEOUT"] = parse_timeout(config.get("TORRENT_CLIENT_TIMEOUT"))
    return config


def parse_timeout(value) -> float | None:
    if value is None or str(value).strip() == "":
        return None
    try:
        return float(value)
    except ValueError:
        raise ValueError(f"TORRENT_CLIENT_TIMEOUT must be a number of seconds, got {value!r}") from None
