# -*- coding: utf-8 -*-
"""
Tests for toasts and the UI error handler.
"""

import pytest
from PyQt5.QtWidgets import QMessageBox, QWidget

from services.exceptions import ApiException, NetworkException
from ui.components.toast import OperationToast, Toast
from ui.error_handler import ErrorHandler


@pytest.fixture
def host(qtbot):
    widget = QWidget()
    widget.resize(800, 600)
    qtbot.addWidget(widget)
    widget.show()
    return widget


class TestToast:
    """Test the popup label."""

    def test_show_toast_reuses_label(self, host):
        first = Toast.show_toast(host, "Saved", Toast.SUCCESS, 50)
        second = Toast.show_toast(host, "Failed", Toast.ERROR, 50)
        assert first is second
        assert second.text() == "Failed"
        assert second.property("type") == Toast.ERROR
        assert second.isVisible()

    def test_hides_after_duration(self, host, qtbot):
        toast = Toast.show_toast(host, "Saved", Toast.SUCCESS, 10)
        qtbot.waitUntil(lambda: not toast.isVisible(), timeout=2000)


class TestOperationToast:
    """Test the named toasts."""

    @pytest.fixture
    def toast(self):
        toast = OperationToast()
        toast.seen = []
        toast.shown.connect(lambda kind, message: toast.seen.append((kind, message)))
        return toast

    @pytest.mark.parametrize("call, expected", [
        (lambda t: t.registration_success(),
         ("success", "Registration submitted! Check your WhatsApp for approval.")),
        (lambda t: t.registration_error("Closed"), ("error", "❌ Registration failed: Closed")),
        (lambda t: t.login_success(), ("success", "Login successful! Redirecting...")),
        (lambda t: t.logout_success(), ("success", "👋 Logged out successfully")),
        (lambda t: t.upload_error("Too big"), ("error", "❌ Upload failed: Too big")),
        (lambda t: t.validation_error("Check the form"), ("warning", "⚠️ Check the form")),
        (lambda t: t.info("Heads up"), ("info", "Heads up")),
    ])
    def test_messages(self, toast, call, expected):
        call(toast)
        assert toast.seen == [expected]

    def test_host_shows_popup(self, toast, host):
        toast.set_host(host)
        toast.upload_success("notes.pdf")
        popup = host.findChild(Toast)
        assert popup is not None
        assert popup.text() == "📁 notes.pdf uploaded successfully!"


class TestErrorHandler:
    """Test exception mapping through the UI handler."""

    def test_handle_without_dialog(self):
        message = ErrorHandler.handle(NetworkException("x", timed_out=True), show_dialog=False)
        assert message == "The server took too long to respond. Please try again."

    def test_handle_shows_dialog(self, host, monkeypatch):
        shown = []
        monkeypatch.setattr(QMessageBox, "critical", lambda parent, title, text: shown.append(text))
        message = ErrorHandler.handle(ApiException("boom", 400, {"message": "Bad input"}), host)
        assert message == "Bad input"
        assert shown == ["Bad input"]

    def test_confirm(self, host, monkeypatch):
        monkeypatch.setattr(QMessageBox, "question", lambda *args: QMessageBox.Yes)
        assert ErrorHandler.confirm(host, "Delete?")
        monkeypatch.setattr(QMessageBox, "question", lambda *args: QMessageBox.No)
        assert not ErrorHandler.confirm(host, "Delete?")
