"""Logging setup for the server entry points."""

from __future__ import annotations

import logging
import sys

from .config import LOG_LEVEL

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(level: str = LOG_LEVEL) -> None:
    """
    Send log records to stderr at ``level``.

    stdout is reserved for the protocol stream on the stdio transport.
    """
    logging.basicConfig(stream=sys.stderr, level=level.upper(), format=LOG_FORMAT)
    # Request lines from httpx would duplicate the client's own debug logging.
    logging.getLogger("httpx").setLevel(logging.WARNING)
