"""Logging setup for the relab command line."""

from __future__ import annotations

import logging

from relab.config import RELAB_LOG_LEVEL

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str | int | None = None) -> None:
    """Install a root handler for command line use.

    Args:
        level: Level name or number. Defaults to ``RELAB_LOG_LEVEL``.
    """
    resolved = level if level is not None else RELAB_LOG_LEVEL
    if isinstance(resolved, str):
        resolved = resolved.upper()
    logging.basicConfig(level=resolved, format=_LOG_FORMAT, force=True)
