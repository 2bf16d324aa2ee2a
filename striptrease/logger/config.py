"""
Logging configuration for the command-line tool.
"""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional, Union

from striptrease.config import Config

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(
    log_file: Optional[Union[str, Path]] = None, verbose: bool = False
) -> logging.Logger:
    """
    Attach console and (optionally) file handlers to the package logger.

    Handlers:
        - Console handler: bare messages at INFO, or DEBUG when verbose
        - File handler: rotating log file (1 MiB, 3 backups) at DEBUG

    Args:
        log_file: Optional path of the rotating log file.
        verbose: Lower the console level to DEBUG.

    Returns:
        The configured ``striptrease`` logger.
    """
    package_logger = logging.getLogger("striptrease")
    package_logger.setLevel(logging.DEBUG)
    package_logger.propagate = False

    # Avoid duplicate handlers when configured more than once
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.DEBUG if verbose else Config.LOG_LEVEL)
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    package_logger.addHandler(console_handler)

    if log_file is not None:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_path,
            maxBytes=Config.LOG_MAX_BYTES,
            backupCount=Config.LOG_BACKUP_COUNT,
            encoding="utf-8",
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT, "%Y-%m-%d %H:%M:%S"))
        package_logger.addHandler(file_handler)
        package_logger.debug(f"Logging configured. Log file: {log_path}")

    return package_logger
