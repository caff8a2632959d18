"""
Logging for the catalog service.

The root logger is configured once, on first import:
    from catalog.logging import get_logger
    logger = get_logger(__name__)
"""

import logging
import os
import sys
from functools import cache

# Control characters stripped from user-supplied values before they reach a log line
_UNSAFE_CHARS = str.maketrans({"\n": "\\n", "\r": "\\r", "\t": "\\t", "\x00": None})


def configure_logging(level: str | None = None) -> None:
    """Attach a stdout handler to the root logger unless one is already present."""
    root = logging.getLogger()
    if root.handlers:
        return

    level_name = (level or os.environ.get("LOG_LEVEL", "INFO")).upper()
    root.setLevel(getattr(logging, level_name, logging.INFO))

    handler = logging.StreamHandler(sys.stdout)
    if os.environ.get("ENVIRONMENT", "").lower() == "production":
        handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    else:
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)-8s %(name)s: %(message)s"))
    root.addHandler(handler)

    # supabase-py logs every PostgREST request at INFO through httpx
    for noisy in ("httpx", "httpcore"):
        logging.getLogger(noisy).setLevel(logging.WARNING)


configure_logging()


@cache
def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def sanitize_id_for_logging(id_value: object) -> str:
    """Short, single-line form of an id for log messages ("N/A" when empty)."""
    if not id_value:
        return "N/A"
    return str(id_value).translate(_UNSAFE_CHARS)[:8]


__all__ = ["configure_logging", "get_logger", "sanitize_id_for_logging"]
