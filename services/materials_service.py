# -*- coding: utf-8 -*-
"""
Materials Service - teacher uploads and student listings.

Files are checked locally (size, extension, thumbnail MIME type) before any
request is made. Uploads report progress as a whole percentage.
"""

import math
import mimetypes
import os
from typing import Callable, List, Optional, Tuple

from app.api_config import build_api_url
from app.config import Config
from models.material import Material, MaterialDraft
from services.api_client import PortalApiClient
from services.error_mapper import server_message
from services.exceptions import ApiException, NetworkException, ValidationException
from services.session_store import clear_auth, get_valid_token
from services.translation_manager import tr
from utils.logger import get_logger

logger = get_logger(__name__)

PercentCallback = Callable[[int], None]


def format_file_size(size: int) -> str:
    """Human readable size: Bytes, KB, MB, GB with up to two decimals."""
    if not size:
        return "0 Bytes"
    units = ["Bytes", "KB", "MB", "GB"]
    k = 1024
    i = min(int(math.floor(math.log(size) / math.log(k))), len(units) - 1)
    value = round(size / math.pow(k, i), 2)
    return f"{value:g} {units[i]}"


def validate_material_file(file_path: str) -> int:
    """
    Check a material file before upload.

    Returns:
        File size in bytes

    Raises:
        ValidationException: missing file, too large, or unsupported type
    """
    if not file_path or not os.path.isfile(file_path):
        raise ValidationException(tr("error.materials.file_missing"), field="file")

    size = os.path.getsize(file_path)
    if size > Config.MAX_MATERIAL_SIZE:
        raise ValidationException(tr("error.materials.file_too_large"), field="file")

    extension = os.path.splitext(file_path)[1].lower()
    if extension not in Config.MATERIAL_EXTENSIONS:
        raise ValidationException(
            tr("error.materials.file_type", extension=extension or "(none)"),
            field="file"
        )
    return size


def validate_thumbnail(file_path: str) -> int:
    """Check a thumbnail image: at most 2MB and an image MIME type."""
    if not file_path or not os.path.isfile(file_path):
        raise ValidationException(tr("error.materials.file_missing"), field="thumbnail")

    size = os.path.getsize(file_path)
    if size > Config.MAX_THUMBNAIL_SIZE:
        raise ValidationException(tr("error.materials.thumbnail_too_large"), field="thumbnail")

    mime_type = mimetypes.guess_type(file_path)[0] or ""
    if not mime_type.startswith("image/"):
        raise ValidationException(tr("error.materials.thumbnail_not_image"), field="thumbnail")
    return size


class UploadProgress:
    """Turns byte counts into monotonic whole percentages."""

    def __init__(self, callback: Optional[PercentCallback]):
        self.callback = callback
        self.last_percent = -1

    def __call__(self, sent: int, total: int):
        if not total:
            return
        percent = round(sent / total * 100)
        if percent != self.last_percent:
            self.last_percent = percent
            if self.callback:
                self.callback(percent)


class MaterialsService:
    """Material management for teachers and read access for students."""

    def __init__(self, client: PortalApiClient):
        self.client = client

    @property
    def _teacher_url(self) -> str:
        return self.client.endpoints.TEACHER.MATERIALS

    @property
    def _student_url(self) -> str:
        return self.client.endpoints.STUDENT.MATERIALS

    def upload(self, draft: MaterialDraft, progress: Optional[PercentCallback] = None,
               material_id: Optional[str] = None) -> Material:
        """
        Create (POST) or replace (PUT) a material.

        Args:
            draft: Form state (title, type, file, thumbnail)
            progress: Called with 0-100 as the body is sent
            material_id: Edit an existing material

        Raises:
            ValidationException: local check failed or no valid token
            ApiException: server rejected the upload (message is user-facing)
            NetworkException: transport failure or timeout (message is user-facing)
        """
        if not draft.file_path and not material_id:
            raise ValidationException(tr("error.materials.no_file"), field="file")

        files: List[Tuple[str, str]] = []
        if draft.file_path:
            validate_material_file(draft.file_path)
            files.append(("material", draft.file_path))
        if draft.thumbnail_path:
            validate_thumbnail(draft.thumbnail_path)
            files.append(("thumbnail", draft.thumbnail_path))

        if not get_valid_token(self.client.session_store):
            clear_auth(self.client.session_store)
            raise ValidationException(tr("error.materials.no_token"), field="token")

        if material_id:
            method, url = "PUT", build_api_url(f"{self._teacher_url}/:id", id=material_id)
        else:
            method, url = "POST", self._teacher_url

        logger.info(f"Uploading material '{draft.title}' ({method} {url})")
        try:
            data = self.client.upload_multipart(
                method,
                url,
                fields={"title": draft.title, "type": draft.type},
                files=files,
                progress_callback=UploadProgress(progress),
                extra_headers={"X-Requested-With": "XMLHttpRequest"}
            )
        except ApiException as e:
            e.message = server_message(e, tr("error.materials.upload_status", status=e.status_code))
            raise
        except NetworkException as e:
            e.message = tr("error.materials.timeout") if e.is_timeout else tr("error.materials.network")
            raise

        try:
            material = Material.from_api(data["data"]["material"])
        except (TypeError, KeyError) as e:
            logger.error(f"Unexpected upload response: {e}")
            raise ApiException(tr("error.materials.bad_response"), response_data=data)

        logger.info(f"Material saved: {material.id}")
        return material

    def list_teacher_materials(self) -> List[Material]:
        data = self.client.get_json(self._teacher_url)
        return [Material.from_api(m) for m in _nested(data, "materials")]

    def list_student_materials(self) -> List[Material]:
        data = self.client.get_json(self._student_url)
        return [Material.from_api(m) for m in _nested(data, "materials")]

    def delete(self, material_id: str):
        self.client.delete(build_api_url(f"{self._teacher_url}/:id", id=material_id))
        logger.info(f"Material deleted: {material_id}")

    def download(self, material_id: str, destination: str) -> str:
        url = build_api_url(f"{self._student_url}/:id/download", id=material_id)
        return self.client.download(url, destination)


def _nested(data, key: str) -> list:
    if not isinstance(data, dict):
        return []
    inner = data.get("data") or {}
    items = inner.get(key) if isinstance(inner, dict) else None
    return items if isinstance(items, list) else []
