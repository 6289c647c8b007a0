# -*- coding: utf-8 -*-
"""
Logging configuration for PropertyHub.

One application logger ("propertyhub") with a rotating file handler and a
console handler. Modules ask for child loggers through get_logger(__name__).
"""

import logging
import sys
from logging.handlers import RotatingFileHandler

APP_LOGGER_NAME = "propertyhub"


def setup_logger(console_level: int = logging.INFO,
                 log_to_file: bool = True) -> logging.Logger:
    """
    Setup application logger with file and console handlers.

    Args:
        console_level: Minimum level printed to stdout
        log_to_file: Write a rotating log file under Config.LOGS_DIR
    """
    # Import here to avoid circular imports
    from app.config import Config

    logger = logging.getLogger(APP_LOGGER_NAME)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False

    # Clear existing handlers (setup may be called again, e.g. from tests)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    if log_to_file:
        Config.LOGS_DIR.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            Config.LOG_PATH,
            maxBytes=Config.LOG_MAX_BYTES,
            backupCount=Config.LOG_BACKUP_COUNT,
            encoding="utf-8"
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(
            "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        ))
        logger.addHandler(file_handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(logging.Formatter("%(levelname)-8s | %(message)s"))
    logger.addHandler(console_handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a child logger for a module.

    Child loggers are created lazily; handlers are only installed by
    setup_logger(), so importing a module never touches the file system.
    """
    return logging.getLogger(APP_LOGGER_NAME).getChild(name)
