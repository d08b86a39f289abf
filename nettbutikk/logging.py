"""
Logging setup for the shop.

The root logger gets a single stdout handler the first time this module is
imported, unless the host application already installed handlers.

    from nettbutikk.logging import get_logger
    logger = get_logger(__name__)

Environment:
    LOG_LEVEL   DEBUG / INFO / WARNING / ... (default INFO)
    LOG_FORMAT  "simple" drops the timestamp (for hosts that add their own)
"""

import logging
import os
import sys
from functools import cache
from typing import IO, Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_FORMAT_SIMPLE = "%(levelname)s - %(name)s - %(message)s"

# Per-request chatter from the catalog HTTP client
QUIET_LOGGERS = ("httpx", "httpcore")

# CWE-117: control characters in user input must not start new log records
_LOG_ESCAPES = str.maketrans({"\n": "\\n", "\r": "\\r", "\t": "\\t", "\x00": None})


def resolve_level(name: Optional[str] = None) -> int:
    """Map a level name (default: LOG_LEVEL) to a logging level, falling back to INFO."""
    level_name = (name or os.environ.get("LOG_LEVEL") or "INFO").upper()
    level = logging.getLevelName(level_name)
    return level if isinstance(level, int) else logging.INFO


def configure_logging(
    level: Optional[str] = None,
    simple: Optional[bool] = None,
    stream: Optional[IO[str]] = None,
) -> bool:
    """
    Attach the shop handler to the root logger.

    Returns:
        False when the root logger already had handlers and was left alone
    """
    root = logging.getLogger()
    if root.handlers:
        return False

    if simple is None:
        simple = os.environ.get("LOG_FORMAT", "").lower() == "simple"

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT_SIMPLE if simple else LOG_FORMAT))
    root.addHandler(handler)
    root.setLevel(resolve_level(level))

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    return True


configure_logging()


@cache
def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def sanitize_string_for_logging(value: Optional[str], max_length: int = 50) -> str:
    """Escape control characters and cut user-supplied text to max_length ("N/A" if empty)."""
    if not value:
        return "N/A"
    safe_value = str(value).translate(_LOG_ESCAPES)
    if len(safe_value) > max_length:
        return safe_value[:max_length] + "..."
    return safe_value


__all__ = [
    "LOG_FORMAT",
    "LOG_FORMAT_SIMPLE",
    "configure_logging",
    "get_logger",
    "resolve_level",
    "sanitize_string_for_logging",
]
