"""
Process-wide logging setup.

Modules log through `logging.getLogger(__name__)`; this only configures the
root logger once per process.
"""

from __future__ import annotations

import logging
import os
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_configured = False


def log_level() -> str:
    return os.environ.get("LOG_LEVEL", "INFO").strip().upper() or "INFO"


def configure_logging() -> None:
    global _configured
    if _configured:
        return None

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))

    root = logging.getLogger()
    root.addHandler(handler)
    try:
        root.setLevel(log_level())
    except ValueError:
        # Unknown level name in LOG_LEVEL.
        root.setLevel(logging.INFO)
    _configured = True
