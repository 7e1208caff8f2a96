"""
Task Tracker API - Logging Setup

Console logging always; a daily rolling log file when LOG_FILE is set.
"""

import logging
import sys
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    level: str = "INFO",
    log_file: Optional[str] = None,
    backup_count: int = 14,
) -> list[logging.Handler]:
    """
    Configure root logging. Call once, before the first log record.

    Returns the handlers that were installed.
    """
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]

    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        # Rolls over at midnight, keeps ``backup_count`` old files
        handlers.append(
            TimedRotatingFileHandler(
                str(path),
                when="midnight",
                backupCount=backup_count,
                encoding="utf-8",
                utc=True,
            )
        )

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt=LOG_DATEFMT,
        handlers=handlers,
    )
    return handlers
