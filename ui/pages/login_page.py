# -*- coding: utf-8 -*-
"""
Login Page - email/password sign in for students, teachers and parents.
"""

from PyQt5.QtWidgets import (
    QWidget, QVBoxLayout, QLabel, QLineEdit, QPushButton, QFrame, QHBoxLayout
)
from PyQt5.QtCore import Qt, pyqtSignal
from PyQt5.QtGui import QFont

from app.config import Config
from services.auth_service import AuthService, validate_credentials
from services.translation_manager import tr
from ui.components.toast import OperationToast
from utils.logger import get_logger

logger = get_logger(__name__)


class LoginPage(QWidget):
    """Sign-in card with inline field errors."""

    login_successful = pyqtSignal(object)
    navigate_requested = pyqtSignal(str)

    def __init__(self, auth_service: AuthService, toast: OperationToast = None, parent=None):
        super().__init__(parent)
        self.auth_service = auth_service
        self.toast = toast or OperationToast()
        self.loading = False
        self._setup_ui()

    def _setup_ui(self):
        main_layout = QVBoxLayout(self)
        main_layout.setAlignment(Qt.AlignCenter)
        main_layout.addWidget(self._create_login_card())

    def _create_login_card(self) -> QFrame:
        self.login_card = QFrame()
        self.login_card.setObjectName("login_card")
        self.login_card.setFixedWidth(420)
        self.login_card.setStyleSheet(f"""
            QFrame#login_card {{
                background-color: {Config.CARD_BACKGROUND};
                border: 1px solid {Config.BORDER_COLOR};
                border-radius: 12px;
            }}
        """)

        card_layout = QVBoxLayout(self.login_card)
        card_layout.setContentsMargins(32, 32, 32, 32)
        card_layout.setSpacing(10)

        title = QLabel(tr("login.title"))
        title_font = QFont()
        title_font.setPointSize(18)
        title_font.setBold(True)
        title.setFont(title_font)
        title.setAlignment(Qt.AlignCenter)
        card_layout.addWidget(title)

        subtitle = QLabel(tr("login.subtitle"))
        subtitle.setAlignment(Qt.AlignCenter)
        subtitle.setStyleSheet(f"color: {Config.TEXT_MUTED};")
        card_layout.addWidget(subtitle)

        card_layout.addWidget(QLabel(tr("field.email")))
        self.email_input = QLineEdit()
        self.email_input.setObjectName("input_email")
        self.email_input.setPlaceholderText("you@example.com")
        self.email_input.textChanged.connect(lambda: self._clear_field_error("email"))
        self.email_input.returnPressed.connect(self._on_login)
        card_layout.addWidget(self.email_input)
        self.email_error = self._error_label("error_email")
        card_layout.addWidget(self.email_error)

        card_layout.addWidget(QLabel(tr("field.password")))
        self.password_input = QLineEdit()
        self.password_input.setObjectName("input_password")
        self.password_input.setEchoMode(QLineEdit.Password)
        self.password_input.textChanged.connect(lambda: self._clear_field_error("password"))
        self.password_input.returnPressed.connect(self._on_login)
        card_layout.addWidget(self.password_input)
        self.password_error = self._error_label("error_password")
        card_layout.addWidget(self.password_error)

        self.error_label = self._error_label("error_general")
        self.error_label.setAlignment(Qt.AlignCenter)
        card_layout.addWidget(self.error_label)

        self.login_btn = QPushButton(tr("button.sign_in"))
        self.login_btn.setObjectName("btn_sign_in")
        self.login_btn.setMinimumHeight(42)
        self.login_btn.setCursor(Qt.PointingHandCursor)
        self.login_btn.setStyleSheet(f"""
            QPushButton {{
                background-color: {Config.PRIMARY_COLOR};
                color: white;
                border: none;
                border-radius: 8px;
                font-weight: bold;
            }}
            QPushButton:disabled {{
                background-color: {Config.BORDER_COLOR};
            }}
        """)
        self.login_btn.clicked.connect(self._on_login)
        card_layout.addWidget(self.login_btn)

        register_row = QHBoxLayout()
        register_row.addStretch()
        register_row.addWidget(QLabel(tr("login.no_account")))
        self.register_btn = QPushButton(tr("button.register"))
        self.register_btn.setObjectName("btn_register")
        self.register_btn.setFlat(True)
        self.register_btn.setCursor(Qt.PointingHandCursor)
        self.register_btn.clicked.connect(lambda: self.navigate_requested.emit("/register"))
        register_row.addWidget(self.register_btn)
        register_row.addStretch()
        card_layout.addLayout(register_row)

        return self.login_card

    def _error_label(self, name: str) -> QLabel:
        label = QLabel("")
        label.setObjectName(name)
        label.setStyleSheet(f"color: {Config.ERROR_COLOR}; font-size: 9pt;")
        label.setWordWrap(True)
        label.hide()
        return label

    # ==================== Actions ====================

    def _on_login(self):
        if self.loading:
            return

        email = self.email_input.text().strip()
        password = self.password_input.text()

        errors = validate_credentials(email, password)
        self._show_field_errors(errors)
        if errors:
            return

        self._hide_error()
        self._set_loading(True)
        try:
            outcome = self.auth_service.login(email, password)
        finally:
            self._set_loading(False)

        if outcome.success:
            logger.info(f"Login page: signed in as {outcome.user.email}")
            self.toast.login_success()
            self._clear_form()
            self.login_successful.emit(outcome.user)
            self.navigate_requested.emit(outcome.user.dashboard_url or "/")
            return

        self._show_error(outcome.error)
        if outcome.network_error:
            self.toast.network_error()
        else:
            self.toast.login_error(outcome.error)

    def _set_loading(self, loading: bool):
        self.loading = loading
        self.login_btn.setEnabled(not loading)
        self.login_btn.setText(tr("button.signing_in") if loading else tr("button.sign_in"))

    def _show_field_errors(self, errors):
        for key, label in (("email", self.email_error), ("password", self.password_error)):
            message = errors.get(key, "")
            label.setText(message)
            label.setVisible(bool(message))

    def _clear_field_error(self, key: str):
        label = self.email_error if key == "email" else self.password_error
        label.hide()
        self._hide_error()

    def _show_error(self, message: str):
        self.error_label.setText(message)
        self.error_label.show()

    def _hide_error(self):
        if not self.error_label.isHidden():
            self.error_label.hide()

    def _clear_form(self):
        self.email_input.clear()
        self.password_input.clear()
        self._show_field_errors({})
        self.error_label.hide()

    def refresh(self, data=None):
        """Skip the form when a stored session is still usable."""
        user = self.auth_service.restore_session()
        if user:
            logger.info(f"Restored session for {user.email}")
            self.login_successful.emit(user)
            self.navigate_requested.emit(user.dashboard_url or "/")
        else:
            self.email_input.setFocus()
