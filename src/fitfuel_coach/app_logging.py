"""Logging configuration helpers."""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Attach a stream handler to the package logger once and set its level.

    Unknown level names fall back to INFO.
    """
    logger = logging.getLogger("fitfuel_coach")
    resolved = logging.getLevelName(level.strip().upper())
    logger.setLevel(resolved if isinstance(resolved, int) else logging.INFO)
    if logger.handlers:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False
