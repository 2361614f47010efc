# -*- coding: utf-8 -*-
"""
Tests for MaterialsService.

Tests cover:
- Local file and thumbnail checks
- Upload create/replace requests and progress
- Error message mapping
- Listing, deleting and downloading
"""

import pytest
import requests

from models.material import MaterialDraft
from services.exceptions import ApiException, NetworkException, ValidationException
from services.materials_service import (
    MaterialsService,
    UploadProgress,
    format_file_size,
    validate_material_file,
    validate_thumbnail,
)
from services.session_store import TOKEN_KEY, USER_KEY


def sparse_file(path, size):
    """Create a file reporting ``size`` bytes without writing them."""
    with open(path, "wb") as f:
        f.truncate(size)
    return str(path)


@pytest.fixture
def service(auth_client):
    return MaterialsService(auth_client)


@pytest.fixture
def material_file(tmp_path):
    path = tmp_path / "week1.pdf"
    path.write_bytes(b"%PDF" + b"0" * 30000)
    return str(path)


def created(material_id="m1", title="Week 1"):
    return {"success": True, "data": {"material": {
        "_id": material_id,
        "title": title,
        "type": "theory",
        "originalName": "week1.pdf",
        "fileSize": 30004,
    }}}


class TestFormatFileSize:
    @pytest.mark.parametrize("size, expected", [
        (0, "0 Bytes"),
        (512, "512 Bytes"),
        (1024, "1 KB"),
        (1536, "1.5 KB"),
        (5 * 1024 * 1024, "5 MB"),
        (3 * 1024 ** 3, "3 GB"),
    ])
    def test_units(self, size, expected):
        assert format_file_size(size) == expected


class TestFileChecks:
    """Test local validation before upload."""

    def test_valid_file_returns_size(self, material_file):
        assert validate_material_file(material_file) == 30004

    def test_missing_file(self, tmp_path):
        with pytest.raises(ValidationException):
            validate_material_file(str(tmp_path / "nope.pdf"))

    def test_too_large(self, tmp_path):
        path = sparse_file(tmp_path / "huge.pdf", 100 * 1024 * 1024 + 1)
        with pytest.raises(ValidationException) as exc_info:
            validate_material_file(path)
        assert exc_info.value.message == "File size must be less than 100MB"

    def test_exactly_limit_is_allowed(self, tmp_path):
        path = sparse_file(tmp_path / "edge.zip", 100 * 1024 * 1024)
        assert validate_material_file(path) == 100 * 1024 * 1024

    def test_unsupported_extension(self, tmp_path):
        path = tmp_path / "run.exe"
        path.write_bytes(b"MZ")
        with pytest.raises(ValidationException) as exc_info:
            validate_material_file(str(path))
        assert ".exe" in exc_info.value.message

    def test_thumbnail_too_large(self, tmp_path):
        path = sparse_file(tmp_path / "cover.png", 2 * 1024 * 1024 + 1)
        with pytest.raises(ValidationException) as exc_info:
            validate_thumbnail(path)
        assert exc_info.value.message == "Thumbnail size must be less than 2MB"

    def test_thumbnail_not_image(self, tmp_path):
        path = tmp_path / "cover.txt"
        path.write_text("not an image")
        with pytest.raises(ValidationException) as exc_info:
            validate_thumbnail(str(path))
        assert exc_info.value.message == "Thumbnail must be an image file"

    def test_thumbnail_ok(self, tmp_path):
        path = tmp_path / "cover.jpg"
        path.write_bytes(b"\xff\xd8\xff")
        assert validate_thumbnail(str(path)) == 3


class TestUploadProgress:
    def test_emits_only_changes(self):
        seen = []
        progress = UploadProgress(seen.append)
        for sent in (0, 1, 2, 500, 501, 1000):
            progress(sent, 1000)
        progress(10, 0)
        assert seen == [0, 50, 100]


class TestUpload:
    """Test create and replace uploads."""

    def test_create_posts_multipart(self, service, http, material_file, tmp_path):
        thumb = tmp_path / "cover.png"
        thumb.write_bytes(b"\x89PNG")
        http.queue_response(201, created())
        percents = []

        material = service.upload(
            MaterialDraft(title="Week 1", type="theory", file_path=material_file,
                          thumbnail_path=str(thumb)),
            percents.append
        )

        assert material.id == "m1"
        assert material.file_name == "week1.pdf"
        call = http.last_call
        assert call["method"] == "POST"
        assert call["url"].endswith("/api/teacher/materials")
        assert call["headers"]["X-Requested-With"] == "XMLHttpRequest"
        assert call["headers"]["Authorization"].startswith("Bearer ")
        assert b'name="title"' in call["sent"]
        assert b'name="type"' in call["sent"]
        assert b'name="material"; filename="week1.pdf"' in call["sent"]
        assert b'name="thumbnail"; filename="cover.png"' in call["sent"]
        assert percents == sorted(set(percents))
        assert percents[-1] == 100

    def test_replace_puts_to_material_url(self, service, http):
        http.queue_response(200, created(title="Renamed"))
        material = service.upload(MaterialDraft(title="Renamed", type="practical"), material_id="m1")
        assert material.title == "Renamed"
        assert http.last_call["method"] == "PUT"
        assert http.last_call["url"].endswith("/api/teacher/materials/m1")

    def test_no_file_for_new_material(self, service, http):
        with pytest.raises(ValidationException) as exc_info:
            service.upload(MaterialDraft(title="Empty"))
        assert exc_info.value.message == "Please select a file to upload"
        assert http.calls == []

    def test_invalid_token_clears_session(self, client, session_store, http, material_file):
        session_store.set(TOKEN_KEY, "not-a-token")
        session_store.set(USER_KEY, {"role": "teacher"})

        with pytest.raises(ValidationException) as exc_info:
            MaterialsService(client).upload(MaterialDraft(title="W", file_path=material_file))

        assert "log in again" in exc_info.value.message
        assert session_store.get(TOKEN_KEY) is None
        assert session_store.get(USER_KEY) is None
        assert http.calls == []

    def test_server_message_is_surfaced(self, service, http, material_file):
        http.queue_response(413, {"message": "File too large for server"})
        with pytest.raises(ApiException) as exc_info:
            service.upload(MaterialDraft(title="W", file_path=material_file))
        assert exc_info.value.message == "File too large for server"

    def test_status_fallback(self, service, http, material_file):
        http.queue_response(500, text="oops")
        with pytest.raises(ApiException) as exc_info:
            service.upload(MaterialDraft(title="W", file_path=material_file))
        assert exc_info.value.message == "Upload failed with status 500"

    def test_timeout_message(self, service, http, material_file):
        http.queue_exception(requests.exceptions.ReadTimeout("timed out"))
        with pytest.raises(NetworkException) as exc_info:
            service.upload(MaterialDraft(title="W", file_path=material_file))
        assert exc_info.value.message.startswith("Upload timed out")

    def test_network_message(self, service, http, material_file):
        http.queue_exception(requests.exceptions.ConnectionError("reset"))
        with pytest.raises(NetworkException) as exc_info:
            service.upload(MaterialDraft(title="W", file_path=material_file))
        assert exc_info.value.message.startswith("Network error during upload")

    def test_unexpected_body(self, service, http, material_file):
        http.queue_response(201, {"success": True})
        with pytest.raises(ApiException) as exc_info:
            service.upload(MaterialDraft(title="W", file_path=material_file))
        assert exc_info.value.message == "Error processing response"


class TestListing:
    """Test list, delete and download."""

    def test_teacher_list(self, service, http):
        http.queue_response(200, {"data": {"materials": [created()["data"]["material"]]}})
        materials = service.list_teacher_materials()
        assert [m.id for m in materials] == ["m1"]
        assert http.last_call["method"] == "GET"

    def test_student_list_tolerates_odd_body(self, service, http):
        http.queue_response(200, {"data": []})
        assert service.list_student_materials() == []

    def test_delete(self, service, http):
        http.queue_response(200, {"success": True})
        service.delete("m7")
        assert http.last_call["method"] == "DELETE"
        assert http.last_call["url"].endswith("/api/teacher/materials/m7")

    def test_download(self, service, http, tmp_path):
        http.queue_response(200, text="slides")
        target = tmp_path / "slides.pptx"
        service.download("m2", str(target))
        assert http.last_call["url"].endswith("/api/student/materials/m2/download")
        assert target.read_text() == "slides"
