"""Logging setup for the log analyzer.

Diagnostics go through the standard ``logging`` module and are rendered by
rich on stderr, so they never mix with report output on stdout. An optional
plain-text file handler can be attached as well.
"""

import logging
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from .config import LOG_SETTINGS


def setup_logger(
    name: str = 'logstats',
    log_file: Optional[str] = None,
    level: Optional[str] = None,
) -> logging.Logger:
    """Create and configure the package logger.

    Args:
        name: Logger name. Child loggers created with ``getLogger(__name__)``
            inside the package propagate to it.
        log_file: Optional path to a log file. Parent directories are created
            when missing.
        level: Level name (DEBUG, INFO, WARNING, ERROR, CRITICAL). Defaults to
            ``LOG_SETTINGS['level']``.

    Returns:
        The configured logger. Repeated calls reuse existing handlers and
        only apply the new level and any new log file.
    """
    logger = logging.getLogger(name)
    numeric_level = getattr(logging, (level or LOG_SETTINGS['level']).upper(), logging.WARNING)
    logger.setLevel(numeric_level)

    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        logger.addHandler(RichHandler(
            console=Console(stderr=True),
            show_path=False,
            log_time_format=LOG_SETTINGS['date_format'],
        ))

    if log_file:
        log_path = Path(log_file)
        keep_current = False
        # Only one file handler is attached; a new path replaces the old one
        for handler in [h for h in logger.handlers if isinstance(h, logging.FileHandler)]:
            if Path(handler.baseFilename) == log_path.absolute() and not keep_current:
                keep_current = True
                continue
            logger.removeHandler(handler)
            handler.close()
        if not keep_current:
            log_path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_path, encoding='utf-8')
            file_handler.setFormatter(logging.Formatter(
                fmt=LOG_SETTINGS['format'],
                datefmt=LOG_SETTINGS['date_format'],
            ))
            logger.addHandler(file_handler)

    for handler in logger.handlers:
        handler.setLevel(numeric_level)

    return logger
