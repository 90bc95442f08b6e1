"""Root logger setup for the catalog CLI."""

from __future__ import annotations

import logging

LOG_FORMAT = "%(levelname)-7s %(name)s: %(message)s"


def configure_logging(*, level: int = logging.INFO, force: bool = False) -> None:
    """Send catalog logs to stderr.

    ``--verbose`` maps to ``DEBUG``, which also shows excluded facts the crawler
    skipped. ``force`` replaces handlers installed earlier.
    """

    logging.basicConfig(level=level, format=LOG_FORMAT, force=force)
