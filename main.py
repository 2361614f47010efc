#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
AT-ICT Portal - desktop client for the AT-ICT IGCSE ICT tutoring portal.
Main entry point for the application.
"""

import sys

from PyQt5.QtWidgets import QApplication
from PyQt5.QtCore import Qt

from app.api_config import ApiEndpoints
from app.config import Config
from app.main_window import MainWindow
from services.api_client import PortalApiClient
from services.session_store import FileSessionStore
from utils.logger import install_qt_message_handler, setup_logger


def main():
    """Main application entry point."""

    # Set Qt attributes BEFORE creating QApplication
    QApplication.setAttribute(Qt.AA_EnableHighDpiScaling, True)
    QApplication.setAttribute(Qt.AA_UseHighDpiPixmaps, True)

    logger = setup_logger()
    install_qt_message_handler()

    try:
        app = QApplication(sys.argv)
        app.setApplicationName(Config.APP_NAME)
        app.setApplicationVersion(Config.VERSION)
        app.setOrganizationName(Config.ORGANIZATION)

        logger.info("=" * 80)
        logger.info(f"Starting {Config.APP_NAME} {Config.VERSION}")
        logger.info(f"API: {Config.API_BASE_URL}")
        logger.info("=" * 80)

        session_store = FileSessionStore(Config.SESSION_PATH)
        session_store.load()
        client = PortalApiClient(ApiEndpoints.from_config(), session_store)

        window = MainWindow(client, session_store)
        window.show()
        logger.info(">> Main window created and displayed")

        exit_code = app.exec_()
        logger.info(f"Application closed with exit code: {exit_code}")
        sys.exit(exit_code)

    except Exception as e:
        error_msg = f"Fatal error during application startup: {e}"
        print(f"\n[ERROR] {error_msg}")
        print(f"\nPlease check {Config.LOG_PATH} for details")
        logger.exception(error_msg)
        sys.exit(1)


if __name__ == "__main__":
    main()
