"""Logging setup for the dirserve app.

The dirlisting modules only ever call ``logging.getLogger(__name__)``; the
hosting app decides where their records go. File output is opt-in through
LOG_DIR so that importing the package never touches the filesystem.
"""
from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

# Prevent duplicate handlers
_configured_loggers: set[str] = set()


def log_dir() -> Optional[Path]:
    """Directory for log files, or None for console-only logging."""
    value = os.getenv("LOG_DIR", "")
    return Path(value) if value else None


def setup_logger(name: str, filename: str) -> logging.Logger:
    """Attach a console handler, plus a file handler when LOG_DIR is set.

    Args:
        name: Logger name (e.g., 'dirlisting', 'dirserve')
        filename: Log file name inside LOG_DIR (e.g., 'listing.log')
    """
    if name in _configured_loggers:
        return logging.getLogger(name)

    logger = logging.getLogger(name)
    logger.setLevel(logging.INFO)
    logger.propagate = False

    sh = logging.StreamHandler()
    sh.setFormatter(logging.Formatter("%(asctime)s [%(name)s] %(message)s"))
    logger.addHandler(sh)

    directory = log_dir()
    if directory is not None:
        directory.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(directory / filename, encoding="utf-8")
        fh.setFormatter(logging.Formatter(
            "%(asctime)s [%(name)s] [%(levelname)s] %(message)s"
        ))
        logger.addHandler(fh)

    _configured_loggers.add(name)
    return logger


def get_listing_logger() -> logging.Logger:
    """Package logger for dirlisting; its module loggers propagate here."""
    return setup_logger("dirlisting", "listing.log")


def get_api_logger() -> logging.Logger:
    """Logger for the hosting app."""
    return setup_logger("dirserve", "api.log")
