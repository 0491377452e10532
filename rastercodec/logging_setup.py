"""Logging setup for the command-line tool."""

from __future__ import annotations

import logging
from pathlib import Path

from rastercodec.config import LoggingConfig

LOG_FILE_NAME = "rastercodec.log"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(config: LoggingConfig) -> Path:
    """Log to the console and to ``<log_dir>/rastercodec.log``; returns the log file path."""
    level = logging.getLevelName(str(config.level).upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level '{config.level}'")

    log_dir = Path(config.log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_path = log_dir / LOG_FILE_NAME

    formatter = logging.Formatter(LOG_FORMAT)
    console = logging.StreamHandler()
    console.setFormatter(formatter)
    file_handler = logging.FileHandler(log_path, encoding="utf-8")
    file_handler.setFormatter(formatter)

    root = logging.getLogger("rastercodec")
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()
    root.addHandler(console)
    root.addHandler(file_handler)
    root.setLevel(level)
    return log_path


__all__ = ["configure_logging"]
