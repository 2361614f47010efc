# -*- coding: utf-8 -*-
"""
Main application window with path-keyed QStackedWidget routing.
"""

from typing import Dict, Optional

from PyQt5.QtWidgets import QMainWindow, QStackedWidget, QWidget
from PyQt5.QtCore import pyqtSignal

from .config import Config
from models.user import DASHBOARD_URLS, PortalUser
from services.api_client import PortalApiClient
from services.attendance_service import AttendanceService
from services.auth_service import AuthService
from services.materials_service import MaterialsService
from services.registration_service import RegistrationService
from services.session_store import SessionStore
from services.translation_manager import get_layout_direction
from ui.components.toast import OperationToast
from ui.pages.home_page import HomePage
from ui.pages.login_page import LoginPage
from ui.pages.portal_page import PortalPage
from ui.wizards.registration import RegistrationWizard
from utils.logger import get_logger

logger = get_logger(__name__)


class Pages:
    HOME = "/"
    LOGIN = "/login"
    REGISTER = "/register"
    TEACHER_DASHBOARD = DASHBOARD_URLS["teacher"]
    STUDENT_DASHBOARD = DASHBOARD_URLS["student"]
    PARENT_DASHBOARD = DASHBOARD_URLS["parent"]


DASHBOARD_ROLES = {url: role for role, url in DASHBOARD_URLS.items()}


class MainWindow(QMainWindow):
    """Main application window."""

    page_changed = pyqtSignal(str)

    def __init__(self, client: PortalApiClient, session_store: SessionStore, parent=None):
        super().__init__(parent)
        self.client = client
        self.session_store = session_store
        self.current_path = Pages.HOME
        self.current_user: Optional[PortalUser] = None
        self.last_registration: Optional[dict] = None

        self.auth_service = AuthService(client, session_store)
        self.registration_service = RegistrationService(client)
        self.materials_service = MaterialsService(client)
        self.attendance_service = AttendanceService(client)
        self.toast = OperationToast()

        self._setup_window()
        self._create_widgets()
        self._connect_signals()

        self.navigate(Pages.HOME)

    def _setup_window(self):
        self.setWindowTitle(Config.APP_TITLE)
        self.setMinimumSize(Config.WINDOW_MIN_WIDTH, Config.WINDOW_MIN_HEIGHT)
        self.setLayoutDirection(get_layout_direction())

    def _create_widgets(self):
        self.stack = QStackedWidget()
        self.setCentralWidget(self.stack)
        self.toast.set_host(self.stack)

        self.pages: Dict[str, QWidget] = {
            Pages.HOME: HomePage(self.auth_service),
            Pages.LOGIN: LoginPage(self.auth_service, self.toast),
            Pages.REGISTER: RegistrationWizard(self.registration_service, self.toast),
        }
        for url, role in DASHBOARD_ROLES.items():
            self.pages[url] = PortalPage(
                role,
                self.auth_service,
                self.materials_service,
                self.attendance_service,
                self.registration_service,
                self.toast
            )

        for page in self.pages.values():
            self.stack.addWidget(page)

    def _connect_signals(self):
        for page in self.pages.values():
            page.navigate_requested.connect(self.navigate)
        self.pages[Pages.LOGIN].login_successful.connect(self._on_login_success)
        self.pages[Pages.REGISTER].wizard_completed.connect(self._on_registration_completed)
        for url in DASHBOARD_ROLES:
            self.pages[url].logged_out.connect(self._on_logout)

    # ==================== Navigation ====================

    def navigate(self, path: str, data=None):
        """Show the page for a path; unknown paths go home."""
        if path not in self.pages:
            logger.warning(f"Unknown route {path!r}, showing home")
            path = Pages.HOME

        if path in DASHBOARD_ROLES:
            path, data = self._resolve_dashboard(path)

        page = self.pages[path]
        self.current_path = path
        self.stack.setCurrentWidget(page)
        if hasattr(page, "refresh"):
            page.refresh(data)
        if self.current_path != path:
            # refresh() redirected elsewhere
            return
        logger.info(f"Navigated to {path}")
        self.page_changed.emit(path)

    def _resolve_dashboard(self, path: str):
        """Dashboards need a session; a user only sees their own role."""
        user = self.auth_service.restore_session()
        if user is None:
            return Pages.LOGIN, None
        self.current_user = user
        if DASHBOARD_ROLES[path] != user.role and user.dashboard_url in self.pages:
            return user.dashboard_url, user
        return path, user

    def _on_login_success(self, user: PortalUser):
        self.current_user = user

    def _on_registration_completed(self, snapshot: dict):
        self.last_registration = snapshot
        email = (snapshot.get("form") or {}).get("email", "")
        logger.info(f"Registration {snapshot.get('wizard_id')} submitted for {email}")

    def _on_logout(self):
        self.current_user = None
