# -*- coding: utf-8 -*-
"""
UI tests for the dashboard pages: materials, attendance, pending
registrations, portal and home.
"""

import pytest
from PyQt5.QtWidgets import QFileDialog

from models.material import Material
from services.attendance_service import AttendanceService
from services.auth_service import AuthService
from services.materials_service import MaterialsService
from services.registration_service import RegistrationService
from ui.components.toast import OperationToast
from ui.error_handler import ErrorHandler
from ui.pages.attendance_page import AttendancePage
from ui.pages.home_page import HomePage
from ui.pages.materials_page import MaterialsPage
from ui.pages.pending_registrations_page import PendingRegistrationsPage
from ui.pages.portal_page import PortalPage

MATERIAL = {
    "_id": "m1",
    "title": "Spreadsheets",
    "type": "practical",
    "originalName": "sheets.xlsx",
    "fileSize": 2048,
}


@pytest.fixture
def toast():
    return OperationToast()


@pytest.fixture
def shown(toast):
    seen = []
    toast.shown.connect(lambda kind, message: seen.append((kind, message)))
    return seen


@pytest.fixture
def teacher_page(qtbot, auth_client, toast):
    page = MaterialsPage(MaterialsService(auth_client), toast)
    qtbot.addWidget(page)
    return page


class TestMaterialsPage:
    """Test the teacher materials page."""

    def test_refresh_lists_materials(self, teacher_page, http):
        http.queue_response(200, {"data": {"materials": [MATERIAL]}})
        teacher_page.refresh()
        assert teacher_page.material_list.count() == 1
        assert "Spreadsheets" in teacher_page.material_list.item(0).text()
        assert "2 KB" in teacher_page.material_list.item(0).text()
        assert teacher_page.empty_label.isHidden()

    def test_refresh_failure(self, teacher_page, http, shown):
        http.queue_response(500, {})
        teacher_page.refresh()
        assert teacher_page.material_list.count() == 0
        assert shown == [("error", "Failed to fetch materials")]

    def test_rejects_large_file(self, teacher_page, tmp_path):
        path = tmp_path / "huge.pdf"
        with open(path, "wb") as f:
            f.truncate(100 * 1024 * 1024 + 1)
        assert not teacher_page.set_material_file(str(path))
        assert teacher_page.draft.file_path is None
        assert teacher_page.form_error.text() == "File size must be less than 100MB"

    def test_rejects_non_image_thumbnail(self, teacher_page, tmp_path):
        path = tmp_path / "thumb.pdf"
        path.write_bytes(b"%PDF")
        assert not teacher_page.set_thumbnail(str(path))
        assert teacher_page.form_error.text() == "Thumbnail must be an image file"

    def test_upload_without_file(self, teacher_page, http):
        assert not teacher_page.start_upload()
        assert teacher_page.form_error.text() == "Please select a file to upload"
        assert http.calls == []

    def test_upload_runs_in_background(self, teacher_page, http, toast, shown, qtbot, tmp_path):
        path = tmp_path / "notes.pdf"
        path.write_bytes(b"%PDF" + b"1" * 50000)
        assert teacher_page.set_material_file(str(path))
        teacher_page.title_input.setText("Notes")
        http.queue_response(201, {"data": {"material": dict(MATERIAL, _id="m2", title="Notes",
                                                            originalName="notes.pdf")}})
        http.queue_response(200, {"data": {"materials": [MATERIAL]}})

        with qtbot.waitSignal(toast.shown, timeout=5000):
            assert teacher_page.start_upload()

        teacher_page.upload_worker.wait(5000)
        assert shown[0] == ("success", "📁 notes.pdf uploaded successfully!")
        assert teacher_page.upload_btn.isEnabled()
        assert teacher_page.draft.file_path is None
        assert teacher_page.title_input.text() == ""
        assert teacher_page.material_list.count() == 1
        assert teacher_page.progress_bar.isHidden()
        assert http.calls[0]["method"] == "POST"

    def test_edit_then_upload_uses_put(self, teacher_page, http, toast, shown, qtbot):
        teacher_page.edit_material(Material.from_api(MATERIAL))
        assert teacher_page.title_input.text() == "Spreadsheets"
        assert teacher_page.type_combo.currentData() == "practical"
        http.queue_response(200, {"data": {"material": MATERIAL}})
        http.queue_response(200, {"data": {"materials": [MATERIAL]}})

        with qtbot.waitSignal(toast.shown, timeout=5000):
            teacher_page.start_upload()

        teacher_page.upload_worker.wait(5000)
        assert http.calls[0]["method"] == "PUT"
        assert http.calls[0]["url"].endswith("/api/teacher/materials/m1")
        assert shown[0] == ("success", "Material updated successfully!")
        assert teacher_page.editing_id is None

    def test_upload_failure_is_shown(self, teacher_page, http, toast, shown, qtbot, tmp_path):
        path = tmp_path / "notes.pdf"
        path.write_bytes(b"%PDF")
        teacher_page.set_material_file(str(path))
        http.queue_response(413, {"message": "Quota exceeded"})

        with qtbot.waitSignal(toast.shown, timeout=5000):
            teacher_page.start_upload()

        teacher_page.upload_worker.wait(5000)
        assert teacher_page.form_error.text() == "Quota exceeded"
        assert shown == [("error", "❌ Upload failed: Quota exceeded")]
        assert teacher_page.upload_btn.isEnabled()

    def test_delete_selected(self, teacher_page, http, shown, monkeypatch):
        monkeypatch.setattr(ErrorHandler, "confirm", staticmethod(lambda *args, **kwargs: True))
        http.queue_response(200, {"data": {"materials": [MATERIAL]}})
        teacher_page.refresh()
        teacher_page.material_list.setCurrentRow(0)
        http.queue_response(200, {"success": True})
        http.queue_response(200, {"data": {"materials": []}})

        teacher_page.delete_selected()

        assert http.calls[1]["method"] == "DELETE"
        assert shown == [("success", "Material deleted successfully!")]
        assert teacher_page.material_list.count() == 0

    def test_delete_cancelled(self, teacher_page, http, monkeypatch):
        monkeypatch.setattr(ErrorHandler, "confirm", staticmethod(lambda *args, **kwargs: False))
        http.queue_response(200, {"data": {"materials": [MATERIAL]}})
        teacher_page.refresh()
        teacher_page.material_list.setCurrentRow(0)
        teacher_page.delete_selected()
        assert len(http.calls) == 1


class TestStudentMaterials:
    def test_download_selected(self, qtbot, auth_client, toast, shown, http, tmp_path, monkeypatch):
        page = MaterialsPage(MaterialsService(auth_client), toast, MaterialsPage.STUDENT)
        qtbot.addWidget(page)
        http.queue_response(200, {"data": {"materials": [MATERIAL]}})
        page.refresh()
        page.material_list.setCurrentRow(0)
        target = tmp_path / "sheets.xlsx"
        monkeypatch.setattr(QFileDialog, "getSaveFileName", lambda *args, **kwargs: (str(target), ""))
        http.queue_response(200, text="cells")

        page.download_selected()

        assert target.read_text() == "cells"
        assert shown == [("success", "sheets.xlsx")]
        assert http.last_call["url"].endswith("/api/student/materials/m1/download")


class TestAttendancePage:
    """Test token submission from the page."""

    @pytest.fixture
    def page(self, qtbot, auth_client, toast):
        widget = AttendancePage(AttendanceService(auth_client), toast)
        qtbot.addWidget(widget)
        return widget

    def test_empty_token(self, page, http, shown):
        page.submit_token()
        assert http.calls == []
        assert shown == []
        assert page.status_label.isHidden()

    def test_success(self, page, http, shown):
        http.queue_response(200, {"message": "Attendance recorded"})
        page.token_input.setText("token-1")
        page.submit_token()
        assert page.status_label.text() == "Attendance recorded"
        assert page.token_input.text() == ""
        assert shown == [("success", "Attendance recorded")]
        assert page.submit_btn.isEnabled()

    def test_rejected_keeps_token(self, page, http, shown):
        http.queue_response(400, {"message": "Token expired"})
        page.token_input.setText("token-1")
        page.submit_token()
        assert page.token_input.text() == "token-1"
        assert shown == [("error", "Token expired")]


REGISTRATION = {
    "_id": "r7",
    "firstName": "Laila",
    "lastName": "Samir",
    "email": "laila@example.com",
    "year": "2",
    "session": "JUN 26",
    "school": "BISC",
    "city": "Giza",
    "nationality": "Egyptian",
    "contactNumber": "0100000000",
    "techKnowledge": 8,
    "isRetaker": False,
}


def pending_body(*registrations):
    return {"status": "success", "data": {"registrations": list(registrations)}}


class TestPendingRegistrationsPage:
    """Test reviewing and approving registrations."""

    @pytest.fixture
    def page(self, qtbot, auth_client, toast):
        widget = PendingRegistrationsPage(RegistrationService(auth_client), toast)
        qtbot.addWidget(widget)
        return widget

    def test_refresh_lists_pending(self, page, http):
        http.queue_response(200, pending_body(REGISTRATION))
        page.refresh()
        assert page.registration_list.count() == 1
        assert "Laila Samir" in page.registration_list.item(0).text()
        assert "Giza, Egyptian" in page.registration_list.item(0).text()
        assert page.count_label.text() == "1 Pending"
        assert page.empty_label.isHidden()
        assert page.approve_btn.isEnabled()

    def test_empty(self, page, http):
        http.queue_response(200, pending_body())
        page.refresh()
        assert page.count_label.text() == "0 Pending"
        assert not page.empty_label.isHidden()
        assert not page.approve_btn.isEnabled()

    def test_refresh_failure(self, page, http, shown):
        http.queue_response(403, {"message": "Teachers only"})
        page.refresh()
        assert page.registration_list.count() == 0
        assert shown == [("error", "Failed to fetch pending registrations")]

    def test_selection_shows_details(self, page, http):
        http.queue_response(200, pending_body(REGISTRATION))
        page.refresh()
        page.registration_list.setCurrentRow(0)
        details = page.details_label.text()
        assert not page.details_label.isHidden()
        assert "laila@example.com" in details
        assert "Tech level: 8/10" in details
        assert "Retaker: No" in details

    def test_approve_selected(self, page, http, shown):
        http.queue_response(200, pending_body(REGISTRATION))
        page.refresh()
        page.registration_list.setCurrentRow(0)
        http.queue_response(200, {"message": "Registration approved"})
        http.queue_response(200, pending_body())

        assert page.approve_selected()

        assert http.calls[1]["method"] == "PUT"
        assert http.calls[1]["url"].endswith("/api/registration/r7/approve")
        assert shown == [("success", "Registration approved")]
        assert page.registration_list.count() == 0
        assert page.approve_btn.text() == "Approve"

    def test_approve_failure_keeps_list(self, page, http, shown):
        http.queue_response(200, pending_body(REGISTRATION))
        page.refresh()
        page.registration_list.setCurrentRow(0)
        http.queue_response(400, {"message": "Registration already processed"})

        assert not page.approve_selected()

        assert shown == [("error", "Registration already processed")]
        assert page.registration_list.count() == 1
        assert len(http.calls) == 2

    def test_nothing_selected(self, page, http):
        http.queue_response(200, pending_body(REGISTRATION))
        page.refresh()
        page.registration_list.setCurrentRow(-1)
        assert not page.approve_selected()
        assert len(http.calls) == 1


class TestPortalPage:
    """Test the role dashboards."""

    def make(self, qtbot, role, client, store, toast):
        page = PortalPage(
            role,
            AuthService(client, store),
            MaterialsService(client),
            AttendanceService(client),
            RegistrationService(client),
            toast
        )
        qtbot.addWidget(page)
        return page

    def test_role_panels(self, qtbot, auth_client, signed_in_store, toast):
        teacher = self.make(qtbot, "teacher", auth_client, signed_in_store, toast)
        student = self.make(qtbot, "student", auth_client, signed_in_store, toast)
        parent = self.make(qtbot, "parent", auth_client, signed_in_store, toast)

        assert teacher.materials_page.is_teacher
        assert teacher.attendance_page is None
        assert teacher.pending_page is not None
        assert student.pending_page is None
        assert not student.materials_page.is_teacher
        assert student.attendance_page is not None
        assert parent.materials_page is None

    def test_sign_out(self, qtbot, auth_client, signed_in_store, toast, shown, http):
        page = self.make(qtbot, "parent", auth_client, signed_in_store, toast)
        http.queue_response(200, {})
        with qtbot.waitSignal(page.navigate_requested, timeout=1000) as blocker:
            page.sign_out()
        assert blocker.args == ["/"]
        assert shown == [("success", "👋 Logged out successfully")]
        assert signed_in_store.get("token") is None


class TestHomePage:
    def test_buttons_follow_session(self, qtbot, auth_client, signed_in_store):
        page = HomePage(AuthService(auth_client, signed_in_store))
        qtbot.addWidget(page)
        page.refresh()
        assert page.sign_in_btn.isHidden()
        assert not page.dashboard_btn.isHidden()

        with qtbot.waitSignal(page.navigate_requested, timeout=1000) as blocker:
            page.dashboard_btn.click()
        assert blocker.args == ["/teacher-dashboard"]

    def test_signed_out(self, qtbot, client, session_store):
        page = HomePage(AuthService(client, session_store))
        qtbot.addWidget(page)
        page.refresh()
        assert not page.sign_in_btn.isHidden()
        assert page.dashboard_btn.isHidden()
