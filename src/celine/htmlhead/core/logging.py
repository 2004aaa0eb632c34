# celine/htmlhead/core/logging.py
"""JSON logging setup for processes that render head snippets."""
from __future__ import annotations

import logging
import sys
from typing import TextIO

from pythonjsonlogger import jsonlogger

from celine.htmlhead.core.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def configure_logging(level: str | None = None, stream: TextIO | None = None) -> None:
    """Install one JSON handler on the root logger.

    Args:
        level: Log level name; defaults to ``settings.log_level``.
        stream: Destination stream; defaults to ``sys.stdout``.
    """
    root = logging.getLogger()
    root.setLevel((level or settings.log_level).upper())

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(jsonlogger.JsonFormatter(LOG_FORMAT))

    # Replace rather than append so repeated calls stay idempotent
    root.handlers = [handler]
