"""
Logging helper.  Every module grabs ``logging.getLogger(__name__)``; main.py
calls setup_default_logging() once, before pygame starts.
"""
from __future__ import annotations

import logging

from config import LOG_FORMAT


def setup_default_logging(level: int | str = "INFO") -> None:
    """Configure the root logger unless something already did."""
    if logging.getLogger().handlers:
        return
    lvl = getattr(logging, level.upper(), logging.INFO) if isinstance(level, str) else int(level)
    logging.basicConfig(level=lvl, format=LOG_FORMAT)
