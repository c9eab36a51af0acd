"""Logging setup for the command-line entry point."""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str | int = logging.WARNING) -> logging.Logger:
    """Give the ``orderdesk`` logger exactly one handler on the current stderr.

    Safe to call repeatedly; earlier handlers are replaced, not stacked.
    """
    log = logging.getLogger("orderdesk")
    log.setLevel(level)
    for old in list(log.handlers):
        log.removeHandler(old)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler.setLevel(level)
    log.addHandler(handler)
    return log
