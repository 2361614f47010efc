# -*- coding: utf-8 -*-
"""
Logging configuration for the portal client.

All modules log under the ``atict`` logger:
- rotating file at Config.LOG_PATH, always DEBUG
- stdout at Config.LOG_LEVEL (LOG_LEVEL in .env, default INFO)
- Qt's own warnings under ``atict.qt`` once install_qt_message_handler() ran
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional, Union

from PyQt5.QtCore import (
    QtCriticalMsg,
    QtDebugMsg,
    QtFatalMsg,
    QtInfoMsg,
    QtWarningMsg,
    qInstallMessageHandler,
)

APP_LOGGER_NAME = "atict"

# Upload workers log from a QThread, so the thread is part of each line
FILE_FORMAT = "%(asctime)s | %(levelname)-8s | %(threadName)s | %(name)s | %(message)s"
CONSOLE_FORMAT = "%(levelname)-8s | %(name)s | %(message)s"

_QT_LEVELS = {
    QtDebugMsg: logging.DEBUG,
    QtInfoMsg: logging.INFO,
    QtWarningMsg: logging.WARNING,
    QtCriticalMsg: logging.ERROR,
    QtFatalMsg: logging.CRITICAL,
}

_logger: Optional[logging.Logger] = None


def _resolve_level(level: Union[str, int, None]) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level or "INFO").upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def setup_logger(console_level: Union[str, int, None] = None) -> logging.Logger:
    """
    Configure the application logger. Safe to call again; handlers are replaced.

    Args:
        console_level: stdout level, defaults to Config.LOG_LEVEL
    """
    global _logger

    # Import here to avoid circular imports
    from app.config import Config

    Config.LOGS_DIR.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger(APP_LOGGER_NAME)
    logger.setLevel(logging.DEBUG)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    file_handler = RotatingFileHandler(
        Config.LOG_PATH,
        maxBytes=Config.LOG_MAX_BYTES,
        backupCount=Config.LOG_BACKUP_COUNT,
        encoding="utf-8"
    )
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    logger.addHandler(file_handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(_resolve_level(console_level or Config.LOG_LEVEL))
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    logger.addHandler(console_handler)

    _logger = logger
    return logger


def get_logger(name: str) -> logging.Logger:
    """Child of the application logger, e.g. ``atict.services.api_client``."""
    global _logger

    if _logger is None:
        _logger = setup_logger()

    return _logger.getChild(name)


def qt_message_handler(msg_type, context, message):
    """Forward a Qt diagnostic message to the ``atict.qt`` logger."""
    location = ""
    if context is not None and getattr(context, "file", None):
        location = f" ({context.file}:{context.line})"
    get_logger("qt").log(_QT_LEVELS.get(msg_type, logging.WARNING), f"{message}{location}")


def install_qt_message_handler():
    qInstallMessageHandler(qt_message_handler)
