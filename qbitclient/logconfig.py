# qbitclient/logconfig.py
import logging
import sys

LOG_FORMAT = "[%(asctime)s] [%(name)s] [%(levelname)s] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

NOISY_LOGGERS = ("httpcore", "httpx", "hpack")


def setup_logging(level: int = logging.INFO) -> None:
    """Configures the root logger for scripts using the binding (library code never calls this)."""
    logging.basicConfig(level=level, format=LOG_FORMAT, datefmt=DATE_FORMAT, stream=sys.stderr)

    # Silence noisy libraries
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
