# -*- coding: utf-8 -*-
"""Home Page - public landing page with sign in / register entry points."""

from PyQt5.QtWidgets import QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton
from PyQt5.QtCore import Qt, pyqtSignal
from PyQt5.QtGui import QFont

from app.config import Config
from services.auth_service import AuthService
from services.translation_manager import tr


class HomePage(QWidget):
    """Landing page."""

    navigate_requested = pyqtSignal(str)

    def __init__(self, auth_service: AuthService, parent=None):
        super().__init__(parent)
        self.auth_service = auth_service
        self._setup_ui()

    def _setup_ui(self):
        layout = QVBoxLayout(self)
        layout.setAlignment(Qt.AlignCenter)
        layout.setSpacing(16)

        title = QLabel(tr("portal.home_title"))
        title_font = QFont()
        title_font.setPointSize(22)
        title_font.setBold(True)
        title.setFont(title_font)
        title.setAlignment(Qt.AlignCenter)
        title.setStyleSheet(f"color: {Config.PRIMARY_COLOR};")
        layout.addWidget(title)

        subtitle = QLabel(tr("portal.home_subtitle"))
        subtitle.setAlignment(Qt.AlignCenter)
        subtitle.setWordWrap(True)
        layout.addWidget(subtitle)

        buttons = QHBoxLayout()
        buttons.addStretch()
        self.sign_in_btn = QPushButton(tr("button.sign_in"))
        self.sign_in_btn.setObjectName("btn_home_sign_in")
        self.sign_in_btn.clicked.connect(lambda: self.navigate_requested.emit("/login"))
        buttons.addWidget(self.sign_in_btn)

        self.register_btn = QPushButton(tr("button.register"))
        self.register_btn.setObjectName("btn_home_register")
        self.register_btn.clicked.connect(lambda: self.navigate_requested.emit("/register"))
        buttons.addWidget(self.register_btn)

        self.dashboard_btn = QPushButton(tr("button.dashboard"))
        self.dashboard_btn.setObjectName("btn_home_dashboard")
        self.dashboard_btn.clicked.connect(self._open_dashboard)
        buttons.addWidget(self.dashboard_btn)
        buttons.addStretch()
        layout.addLayout(buttons)

    def _open_dashboard(self):
        user = self.auth_service.restore_session()
        self.navigate_requested.emit(user.dashboard_url if user else "/login")

    def refresh(self, data=None):
        signed_in = self.auth_service.restore_session() is not None
        self.sign_in_btn.setVisible(not signed_in)
        self.register_btn.setVisible(not signed_in)
        self.dashboard_btn.setVisible(signed_in)
