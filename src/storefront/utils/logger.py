"""
Logger utilities for the storefront checkout service.

Usage:
    from storefront.utils.logger import setup_logger
    my_logger = setup_logger("storefront", logging.INFO, "storefront.log")
"""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional

LOG_DIR = os.getenv("LOG_DIR", "logs")

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
MAX_LOG_BYTES = 10 * 1024 * 1024
LOG_BACKUP_COUNT = 5


def setup_logger(
    name: str = "app_logger",
    log_level: int = logging.INFO,
    log_file: Optional[str] = None,
    log_dir: Optional[str] = None,
) -> logging.Logger:
    """
    Sets up a logger with both console and file handlers.

    Args:
        name (str): The name of the logger.
        log_level (int): The logging level (default: logging.INFO).
        log_file (str): Optional custom log filename (without path). If not provided, defaults to "{name}.log".
        log_dir (str): Optional directory for the log files. Defaults to LOG_DIR.

    Returns:
        logging.Logger: The configured logger instance.
    """
    logger = logging.getLogger(name)
    logger.setLevel(log_level)

    # Check if handlers are already added to avoid duplicate logs
    if not logger.handlers:
        if log_file is None:
            log_file = f"{name}.log"

        log_dir = log_dir or LOG_DIR
        os.makedirs(log_dir, exist_ok=True)

        app_log_file = os.path.join(log_dir, log_file)
        error_log_file = os.path.join(log_dir, f"{os.path.splitext(log_file)[0]}_error.log")

        formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

        # Console Handler
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

        # File Handler (Rotating) - App Log
        file_handler = RotatingFileHandler(
            app_log_file, maxBytes=MAX_LOG_BYTES, backupCount=LOG_BACKUP_COUNT, encoding="utf-8"
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

        # File Handler (Rotating) - Error Log
        error_file_handler = RotatingFileHandler(
            error_log_file, maxBytes=MAX_LOG_BYTES, backupCount=LOG_BACKUP_COUNT, encoding="utf-8"
        )
        error_file_handler.setFormatter(formatter)
        error_file_handler.setLevel(logging.ERROR)
        logger.addHandler(error_file_handler)

    return logger


def set_log_level(logger: logging.Logger, level_name: str) -> None:
    """Apply a level given by name (e.g. "DEBUG") to an already configured logger."""
    level = logging.getLevelName(level_name.upper())
    if not isinstance(level, int):
        logger.warning(f"Unknown LOG_LEVEL {level_name!r}, keeping {logging.getLevelName(logger.level)}")
        return
    logger.setLevel(level)
