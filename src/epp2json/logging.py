"""Logging set-up for the ``epp2json`` logger hierarchy."""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

LOGGER_NAME = "epp2json"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(
    log_file: Path | None = None, *, level: int = logging.INFO
) -> logging.Logger:
    """Attach a handler to the package logger and return it.

    With *log_file* the records go to a rotating file, otherwise to stderr.
    Calling it again only adjusts the level.
    """

    logger = logging.getLogger(LOGGER_NAME)
    if not logger.handlers:
        handler: logging.Handler
        if log_file is not None:
            log_file.parent.mkdir(parents=True, exist_ok=True)
            handler = RotatingFileHandler(
                log_file,
                maxBytes=1_000_000,
                backupCount=5,
                encoding="utf-8",
            )
        else:
            handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        logger.propagate = False

    logger.setLevel(level)
    logging.captureWarnings(True)
    return logger


__all__ = ["LOG_FORMAT", "LOGGER_NAME", "configure_logging"]
