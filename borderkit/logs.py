"""Logging setup for hosts that embed borderkit."""

from __future__ import annotations

import logging

from borderkit.config import settings

LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


def configure_logging(level: str | None = None) -> int:
    """Apply ``logging.basicConfig`` at the configured level. Returns the numeric level."""
    name = (level or settings.borderkit_log_level).upper()
    numeric = getattr(logging, name, logging.INFO)
    logging.basicConfig(level=numeric, format=LOG_FORMAT)
    logging.getLogger("borderkit").setLevel(numeric)
    return numeric
