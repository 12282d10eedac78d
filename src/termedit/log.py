"""Logging setup.

The terminal belongs to the editor while it runs, so log records only ever
go to a file.
"""

from __future__ import annotations

import logging

from termedit.config import Settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(settings: Settings) -> logging.Logger:
    """Attach a file handler to the ``termedit`` logger."""
    root = logging.getLogger("termedit")
    root.handlers = []
    root.propagate = False
    root.setLevel(getattr(logging, settings.log_level.upper(), logging.INFO))

    try:
        settings.log_file.parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(settings.log_file, encoding="utf-8")
    except OSError:
        handler = logging.NullHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
    return root
