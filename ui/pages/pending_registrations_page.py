# -*- coding: utf-8 -*-
"""
Pending Registrations Page - teachers review new student registrations
and approve them one at a time.
"""

from typing import List, Optional

from PyQt5.QtWidgets import QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton, QListWidget, QListWidgetItem
from PyQt5.QtCore import Qt
from PyQt5.QtGui import QFont

from app.config import Config
from models.registration import PendingRegistration
from services.exceptions import ApiException, NetworkException
from services.registration_service import RegistrationService
from services.translation_manager import tr
from ui.components.toast import OperationToast
from utils.logger import get_logger

logger = get_logger(__name__)


class PendingRegistrationsPage(QWidget):
    """List of registrations awaiting approval."""

    def __init__(self, registration_service: RegistrationService, toast: OperationToast = None, parent=None):
        super().__init__(parent)
        self.registration_service = registration_service
        self.toast = toast or OperationToast()
        self.registrations: List[PendingRegistration] = []
        self.approving = False
        self._setup_ui()

    def _setup_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(24, 24, 24, 24)
        layout.setSpacing(12)

        header = QHBoxLayout()
        title = QLabel(tr("registration.pending.title"))
        title_font = QFont()
        title_font.setPointSize(16)
        title_font.setBold(True)
        title.setFont(title_font)
        header.addWidget(title)
        header.addStretch()

        self.count_label = QLabel(tr("registration.pending.count", count=0))
        self.count_label.setObjectName("pending_count")
        self.count_label.setStyleSheet(f"color: {Config.WARNING_COLOR};")
        header.addWidget(self.count_label)
        layout.addLayout(header)

        subtitle = QLabel(tr("registration.pending.subtitle"))
        subtitle.setStyleSheet(f"color: {Config.TEXT_MUTED};")
        layout.addWidget(subtitle)

        self.registration_list = QListWidget()
        self.registration_list.setObjectName("pending_list")
        self.registration_list.currentRowChanged.connect(self._show_details)
        layout.addWidget(self.registration_list, 1)

        self.empty_label = QLabel(tr("registration.pending.empty"))
        self.empty_label.setAlignment(Qt.AlignCenter)
        self.empty_label.setStyleSheet(f"color: {Config.TEXT_MUTED};")
        layout.addWidget(self.empty_label)

        self.details_label = QLabel("")
        self.details_label.setObjectName("pending_details")
        self.details_label.setWordWrap(True)
        self.details_label.hide()
        layout.addWidget(self.details_label)

        buttons = QHBoxLayout()
        self.refresh_btn = QPushButton(tr("button.refresh"))
        self.refresh_btn.clicked.connect(lambda: self.refresh())
        buttons.addWidget(self.refresh_btn)
        buttons.addStretch()
        self.approve_btn = QPushButton(tr("button.approve"))
        self.approve_btn.setObjectName("btn_approve")
        self.approve_btn.clicked.connect(self.approve_selected)
        buttons.addWidget(self.approve_btn)
        layout.addLayout(buttons)

    def refresh(self, data=None):
        try:
            self.registrations = self.registration_service.list_pending()
        except (ApiException, NetworkException) as e:
            logger.warning(f"Could not load pending registrations: {e}")
            self.toast.error(tr("error.registration.pending_failed"))
            self.registrations = []
        self._populate_list()

    def _populate_list(self):
        self.registration_list.clear()
        for registration in self.registrations:
            item = QListWidgetItem(tr(
                "registration.pending.item",
                name=registration.full_name,
                year=registration.year,
                city=registration.city,
                nationality=registration.nationality,
                school=registration.school,
                session=registration.session,
            ))
            item.setData(Qt.UserRole, registration.id)
            self.registration_list.addItem(item)
        self.count_label.setText(tr("registration.pending.count", count=len(self.registrations)))
        self.empty_label.setVisible(not self.registrations)
        self.approve_btn.setEnabled(bool(self.registrations) and not self.approving)
        self.details_label.hide()

    def _selected_registration(self) -> Optional[PendingRegistration]:
        row = self.registration_list.currentRow()
        if 0 <= row < len(self.registrations):
            return self.registrations[row]
        return None

    def _show_details(self, row: int):
        registration = self._selected_registration()
        if registration is None:
            self.details_label.hide()
            return
        self.details_label.setText(tr(
            "registration.pending.details",
            name=registration.full_name,
            email=registration.email,
            contact=registration.contact_number,
            school=registration.school,
            tech=registration.tech_knowledge,
            retaker=tr("common.yes") if registration.is_retaker else tr("common.no"),
        ))
        self.details_label.show()

    def approve_selected(self) -> bool:
        """Approve the selected registration and reload the list on success."""
        registration = self._selected_registration()
        if registration is None or self.approving:
            return False

        self._set_approving(True)
        try:
            result = self.registration_service.approve(registration.id)
        finally:
            self._set_approving(False)

        if not result.success:
            self.toast.error(result.message)
            return False

        self.toast.success(result.message)
        self.refresh()
        return True

    def _set_approving(self, approving: bool):
        self.approving = approving
        self.approve_btn.setEnabled(not approving)
        self.approve_btn.setText(tr("button.approving") if approving else tr("button.approve"))
