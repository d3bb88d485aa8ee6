"""Logging setup shared by the app and the CLI entry point."""

from __future__ import annotations

import logging
from typing import Optional

from .config import LOG_LEVEL

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_handler: Optional[logging.Handler] = None


def configure_logging(level: str | None = None) -> None:
    """Install a single stream handler on the root logger."""

    global _handler

    root = logging.getLogger()
    root.setLevel(level or LOG_LEVEL)
    if _handler is not None and _handler in root.handlers:
        return

    _handler = logging.StreamHandler()
    _handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(_handler)


__all__ = ["LOG_FORMAT", "configure_logging"]
