"""Loguru logging setup shared by the API server and the sync CLI.

Records go to stderr as readable text.  Records bound with
``json_output=True`` are emitted as JSON instead, for log shippers.
When ``log_dir`` is set, everything is also written to a daily-rotated
``hotel-api.log``.
"""

import logging
import sys
from pathlib import Path

from loguru import logger

_LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level:<8} | {name}:{function}:{line} | {message}"
_LOG_FILE = "hotel-api.log"

# Chatty per-request loggers from the HTTP and database client stacks.
_NOISY_LOGGERS = ("sqlalchemy.engine", "httpx", "httpcore", "openai")


def _is_json(record: dict) -> bool:
    return bool(record["extra"].get("json_output", False))


def _is_text(record: dict) -> bool:
    return not _is_json(record)


def setup_logging(log_level: str = "INFO", log_dir: str | None = None) -> None:
    """Replace all Loguru sinks with the hotel-api configuration.

    Safe to call more than once; each call starts from a clean slate.

    Args:
        log_level: Minimum level for every sink (case-insensitive).
        log_dir: Directory for the rotating file sink.  Created if missing.
    """
    level = log_level.upper()

    logger.remove()
    logger.add(sys.stderr, level=level, format=_LOG_FORMAT, filter=_is_text)
    logger.add(sys.stderr, level=level, serialize=True, filter=_is_json)

    if log_dir:
        directory = Path(log_dir)
        directory.mkdir(parents=True, exist_ok=True)
        logger.add(
            directory / _LOG_FILE,
            level=level,
            format=_LOG_FORMAT,
            rotation="24h",
            retention="7 days",
        )

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
