# -*- coding: utf-8 -*-
"""
Tests for logging setup and the Qt message bridge.
"""

import logging
import os
from logging.handlers import RotatingFileHandler

import pytest
from PyQt5.QtCore import QtCriticalMsg, QtWarningMsg

from app.config import Config
from utils.logger import APP_LOGGER_NAME, get_logger, qt_message_handler, setup_logger


@pytest.fixture
def app_logger():
    yield setup_logger("WARNING")
    setup_logger()


class TestSetupLogger:
    """Test handler configuration."""

    def test_file_and_console_levels(self, app_logger):
        file_handlers = [h for h in app_logger.handlers if isinstance(h, RotatingFileHandler)]
        console_handlers = [h for h in app_logger.handlers if not isinstance(h, RotatingFileHandler)]

        assert len(file_handlers) == 1
        assert file_handlers[0].level == logging.DEBUG
        assert file_handlers[0].baseFilename == os.path.abspath(Config.LOG_PATH)
        assert "%(threadName)s" in file_handlers[0].formatter._fmt
        assert len(console_handlers) == 1
        assert console_handlers[0].level == logging.WARNING

    def test_repeated_setup_does_not_stack_handlers(self, app_logger):
        setup_logger("WARNING")
        assert len(logging.getLogger(APP_LOGGER_NAME).handlers) == 2

    def test_unknown_level_falls_back_to_info(self):
        logger = setup_logger("chatty")
        console = [h for h in logger.handlers if not isinstance(h, RotatingFileHandler)][0]
        assert console.level == logging.INFO

    def test_module_loggers_are_children(self):
        assert get_logger("services.api_client").name == "atict.services.api_client"


class TestQtMessages:
    """Test forwarding of Qt diagnostics."""

    def test_warning_forwarded(self, caplog):
        caplog.set_level(logging.DEBUG, logger=APP_LOGGER_NAME)
        qt_message_handler(QtWarningMsg, None, "QPixmap: null pixmap")

        record = caplog.records[-1]
        assert record.name == "atict.qt"
        assert record.levelno == logging.WARNING
        assert record.getMessage() == "QPixmap: null pixmap"

    def test_critical_maps_to_error(self, caplog):
        caplog.set_level(logging.DEBUG, logger=APP_LOGGER_NAME)
        qt_message_handler(QtCriticalMsg, None, "cannot connect to X server")
        assert caplog.records[-1].levelno == logging.ERROR
