# -*- coding: utf-8 -*-
"""
Attendance Page - students submit the session token shown by the teacher.
"""

from PyQt5.QtWidgets import QWidget, QVBoxLayout, QLabel, QLineEdit, QPushButton
from PyQt5.QtGui import QFont

from app.config import Config
from services.attendance_service import AttendanceService
from services.translation_manager import tr
from ui.components.toast import OperationToast
from utils.logger import get_logger

logger = get_logger(__name__)


class AttendancePage(QWidget):
    """Token entry for attendance check-in."""

    def __init__(self, attendance_service: AttendanceService, toast: OperationToast = None, parent=None):
        super().__init__(parent)
        self.attendance_service = attendance_service
        self.toast = toast or OperationToast()
        self.submitting = False
        self._setup_ui()

    def _setup_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(24, 24, 24, 24)
        layout.setSpacing(12)

        title = QLabel(tr("attendance.title"))
        title_font = QFont()
        title_font.setPointSize(16)
        title_font.setBold(True)
        title.setFont(title_font)
        layout.addWidget(title)

        instructions = QLabel(tr("attendance.instructions"))
        instructions.setWordWrap(True)
        instructions.setStyleSheet(f"color: {Config.TEXT_MUTED};")
        layout.addWidget(instructions)

        layout.addWidget(QLabel(tr("field.attendance_token")))
        self.token_input = QLineEdit()
        self.token_input.setObjectName("input_token")
        self.token_input.returnPressed.connect(self.submit_token)
        layout.addWidget(self.token_input)

        self.status_label = QLabel("")
        self.status_label.setObjectName("attendance_status")
        self.status_label.setWordWrap(True)
        self.status_label.hide()
        layout.addWidget(self.status_label)

        self.submit_btn = QPushButton(tr("button.check_in"))
        self.submit_btn.setObjectName("btn_check_in")
        self.submit_btn.clicked.connect(self.submit_token)
        layout.addWidget(self.submit_btn)
        layout.addStretch()

    def submit_token(self):
        if self.submitting:
            return

        self._set_submitting(True)
        try:
            result = self.attendance_service.check_in(self.token_input.text())
        finally:
            self._set_submitting(False)

        if not result.submitted:
            return

        color = Config.SUCCESS_COLOR if result.success else Config.ERROR_COLOR
        self.status_label.setStyleSheet(f"color: {color};")
        self.status_label.setText(result.message)
        self.status_label.show()

        if result.success:
            self.toast.success(result.message)
            self.token_input.clear()
        else:
            self.toast.error(result.message)

    def _set_submitting(self, submitting: bool):
        self.submitting = submitting
        self.submit_btn.setEnabled(not submitting)
        self.submit_btn.setText(tr("button.checking_in") if submitting else tr("button.check_in"))
