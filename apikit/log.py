"""Logging setup.

Never logs response payloads; root causes go to the log only, not to clients.
"""
import logging
import sys
from typing import Optional

from .config import get_settings

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: Optional[str] = None) -> None:
    """Configure root logging to stdout.

    Args:
        level: Level name (DEBUG, INFO, WARNING, ERROR). Defaults to
            ``Settings.LOG_LEVEL``; unknown names fall back to INFO.
    """
    if level is None:
        level = get_settings().LOG_LEVEL
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        resolved = logging.INFO
    logging.basicConfig(
        level=resolved,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stdout,
        force=True,
    )
