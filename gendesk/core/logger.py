"""Logging for gendesk. Records go to ~/.cache/gendesk/gendesk.log; stdout is left to the Reporter."""

from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler

from gendesk.core.config import CACHE_DIR

LOG_FILE = CACHE_DIR / "gendesk.log"
LOG_MAX_BYTES = 256 * 1024
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def _open_handler() -> logging.Handler:
    try:
        CACHE_DIR.mkdir(parents=True, exist_ok=True)
        return RotatingFileHandler(LOG_FILE, maxBytes=LOG_MAX_BYTES, backupCount=1, encoding="utf-8")
    except OSError:
        # Read-only home: only warnings, and only on stderr
        handler = logging.StreamHandler(sys.stderr)
        handler.setLevel(logging.WARNING)
        return handler


def setup_logging(level: int = logging.DEBUG) -> None:
    """Attach the gendesk log handler once per process."""
    root = logging.getLogger("gendesk")
    root.setLevel(level)
    if root.handlers:
        return
    handler = _open_handler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    root.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(f"gendesk.{name}")
