# -*- coding: utf-8 -*-
"""
Portal Page - role dashboard shell.

Teacher: materials center and pending registrations. Student: attendance check-in and study
materials. Parent: progress summary.
"""

from typing import Optional

from PyQt5.QtWidgets import QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton, QTabWidget
from PyQt5.QtCore import Qt, pyqtSignal
from PyQt5.QtGui import QFont

from app.config import Config
from models.user import PortalUser
from services.attendance_service import AttendanceService
from services.auth_service import AuthService
from services.materials_service import MaterialsService
from services.registration_service import RegistrationService
from services.translation_manager import tr
from ui.components.toast import OperationToast
from ui.pages.attendance_page import AttendancePage
from ui.pages.materials_page import MaterialsPage
from ui.pages.pending_registrations_page import PendingRegistrationsPage
from utils.logger import get_logger

logger = get_logger(__name__)


class PortalPage(QWidget):
    """Dashboard for one role."""

    navigate_requested = pyqtSignal(str)
    logged_out = pyqtSignal()

    def __init__(self, role: str, auth_service: AuthService,
                 materials_service: MaterialsService, attendance_service: AttendanceService,
                 registration_service: RegistrationService, toast: OperationToast = None, parent=None):
        super().__init__(parent)
        self.role = role
        self.auth_service = auth_service
        self.materials_service = materials_service
        self.attendance_service = attendance_service
        self.registration_service = registration_service
        self.toast = toast or OperationToast()
        self.user: Optional[PortalUser] = None
        self.materials_page: Optional[MaterialsPage] = None
        self.attendance_page: Optional[AttendancePage] = None
        self.pending_page: Optional[PendingRegistrationsPage] = None
        self._setup_ui()

    def _setup_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        header = QHBoxLayout()
        header.setContentsMargins(24, 16, 24, 8)
        self.title_label = QLabel(tr(f"portal.role.{self.role}"))
        title_font = QFont()
        title_font.setPointSize(16)
        title_font.setBold(True)
        self.title_label.setFont(title_font)
        header.addWidget(self.title_label)
        header.addStretch()

        self.welcome_label = QLabel("")
        self.welcome_label.setStyleSheet(f"color: {Config.TEXT_MUTED};")
        header.addWidget(self.welcome_label)

        self.sign_out_btn = QPushButton(tr("button.sign_out"))
        self.sign_out_btn.setObjectName("btn_sign_out")
        self.sign_out_btn.clicked.connect(self.sign_out)
        header.addWidget(self.sign_out_btn)
        layout.addLayout(header)

        layout.addWidget(self._create_role_panel(), 1)

    def _create_role_panel(self) -> QWidget:
        if self.role == "teacher":
            tabs = QTabWidget()
            self.materials_page = MaterialsPage(self.materials_service, self.toast, MaterialsPage.TEACHER)
            self.pending_page = PendingRegistrationsPage(self.registration_service, self.toast)
            tabs.addTab(self.materials_page, tr("portal.tab.materials"))
            tabs.addTab(self.pending_page, tr("registration.pending.title"))
            return tabs

        if self.role == "student":
            tabs = QTabWidget()
            self.attendance_page = AttendancePage(self.attendance_service, self.toast)
            self.materials_page = MaterialsPage(self.materials_service, self.toast, MaterialsPage.STUDENT)
            tabs.addTab(self.attendance_page, tr("attendance.title"))
            tabs.addTab(self.materials_page, tr("materials.student_title"))
            return tabs

        summary = QLabel(tr("portal.parent_summary"))
        summary.setAlignment(Qt.AlignCenter)
        summary.setWordWrap(True)
        return summary

    def set_user(self, user: PortalUser):
        self.user = user
        self.welcome_label.setText(tr("portal.welcome", name=user.full_name))

    def refresh(self, data=None):
        if isinstance(data, PortalUser):
            self.set_user(data)
        if self.materials_page is not None:
            self.materials_page.refresh()
        if self.pending_page is not None:
            self.pending_page.refresh()

    def sign_out(self):
        self.auth_service.logout()
        self.user = None
        self.welcome_label.setText("")
        self.toast.logout_success()
        self.logged_out.emit()
        self.navigate_requested.emit("/")
