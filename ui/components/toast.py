# -*- coding: utf-8 -*-
"""
Toast notification component.
"""

from typing import Optional

from PyQt5.QtWidgets import QLabel, QWidget, QGraphicsOpacityEffect
from PyQt5.QtCore import Qt, QObject, QTimer, QPropertyAnimation, pyqtSignal

from app.config import Config
from services.translation_manager import tr
from utils.logger import get_logger

logger = get_logger(__name__)


class Toast(QLabel):
    """Toast notification popup."""

    SUCCESS = "success"
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"

    COLORS = {
        SUCCESS: Config.SUCCESS_COLOR,
        ERROR: Config.ERROR_COLOR,
        WARNING: Config.WARNING_COLOR,
        INFO: Config.INFO_COLOR,
    }

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setObjectName("toast")
        self._setup_ui()

    def _setup_ui(self):
        self.setAlignment(Qt.AlignCenter)
        self.setWordWrap(True)
        self.setMinimumWidth(300)
        self.setMaximumWidth(500)

        # Opacity effect for fade animation
        self.opacity_effect = QGraphicsOpacityEffect(self)
        self.setGraphicsEffect(self.opacity_effect)
        self.opacity_effect.setOpacity(0)

        self.hide()

    def show_message(self, message: str, toast_type: str = INFO, duration: int = None):
        """
        Show a toast message.

        Args:
            message: Message text
            toast_type: Type (success, error, warning, info)
            duration: Display duration in milliseconds
        """
        if duration is None:
            duration = Config.TOAST_DURATION_MS
        self.setText(message)
        self.setProperty("type", toast_type)

        color = self.COLORS.get(toast_type, "#333")
        text_color = "#333" if toast_type == self.WARNING else "white"
        self.setStyleSheet(f"""
            QLabel#toast {{
                background-color: {color};
                color: {text_color};
                padding: 12px 24px;
                border-radius: 6px;
                font-size: 11pt;
            }}
        """)

        # Top center of parent
        if self.parent():
            parent_rect = self.parent().rect()
            self.adjustSize()
            x = (parent_rect.width() - self.width()) // 2
            self.move(x, 24)

        self.show()
        self.raise_()

        self.fade_in = QPropertyAnimation(self.opacity_effect, b"opacity")
        self.fade_in.setDuration(200)
        self.fade_in.setStartValue(0)
        self.fade_in.setEndValue(1)
        self.fade_in.start()

        QTimer.singleShot(duration, self._fade_out)

    def _fade_out(self):
        self.fade_out = QPropertyAnimation(self.opacity_effect, b"opacity")
        self.fade_out.setDuration(300)
        self.fade_out.setStartValue(1)
        self.fade_out.setEndValue(0)
        self.fade_out.finished.connect(self.hide)
        self.fade_out.start()

    @classmethod
    def show_toast(cls, parent: QWidget, message: str, toast_type: str = "info",
                   duration: int = None) -> 'Toast':
        """Show a toast on a widget, reusing the one already attached to it."""
        toast = parent.findChild(Toast, "toast", Qt.FindDirectChildrenOnly)
        if not toast:
            toast = Toast(parent)

        toast.show_message(message, toast_type, duration)
        return toast


class OperationToast(QObject):
    """
    Named toasts for portal operations.

    Pages receive one instance and call the method matching what happened;
    ``shown`` is emitted with (toast_type, message) for every toast.
    """

    shown = pyqtSignal(str, str)

    def __init__(self, host: Optional[QWidget] = None):
        super().__init__()
        self.host = host

    def set_host(self, host: QWidget):
        self.host = host

    def _show(self, message: str, toast_type: str, duration: int = None):
        logger.debug(f"Toast [{toast_type}]: {message}")
        if self.host is not None:
            Toast.show_toast(self.host, message, toast_type, duration)
        self.shown.emit(toast_type, message)

    # Authentication
    def login_success(self):
        self._show(tr("toast.login_success"), Toast.SUCCESS)

    def login_error(self, message: str):
        self._show(tr("toast.login_error", message=message), Toast.ERROR, Config.TOAST_ERROR_DURATION_MS)

    def logout_success(self):
        self._show(tr("toast.logout_success"), Toast.SUCCESS)

    # Registration
    def registration_success(self):
        self._show(tr("toast.registration_success"), Toast.SUCCESS, Config.TOAST_ERROR_DURATION_MS)

    def registration_error(self, message: str):
        self._show(tr("toast.registration_error", message=message), Toast.ERROR, Config.TOAST_ERROR_DURATION_MS)

    # Files
    def upload_success(self, filename: str):
        self._show(tr("toast.upload_success", filename=filename), Toast.SUCCESS)

    def upload_error(self, message: str):
        self._show(tr("toast.upload_error", message=message), Toast.ERROR, Config.TOAST_ERROR_DURATION_MS)

    # Generic
    def network_error(self):
        self._show(tr("toast.network_error"), Toast.ERROR, Config.TOAST_ERROR_DURATION_MS)

    def validation_error(self, message: str):
        self._show(tr("toast.validation_error", message=message), Toast.WARNING)

    def success(self, message: str):
        self._show(message, Toast.SUCCESS)

    def error(self, message: str):
        self._show(message, Toast.ERROR, Config.TOAST_ERROR_DURATION_MS)

    def info(self, message: str):
        self._show(message, Toast.INFO)
