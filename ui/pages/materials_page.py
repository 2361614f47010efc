# -*- coding: utf-8 -*-
"""
Materials Page - teacher upload form and material list.

Uploads run in a background QThread so the progress bar keeps moving; only
one upload runs at a time. In student mode the page is a read-only list
with downloads.
"""

import os
from typing import List, Optional

from PyQt5.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel, QLineEdit, QPushButton,
    QComboBox, QProgressBar, QListWidget, QListWidgetItem, QFileDialog, QGroupBox
)
from PyQt5.QtCore import Qt, QThread, pyqtSignal
from PyQt5.QtGui import QFont

from app.config import Config
from models.material import Material, MaterialDraft
from services.exceptions import ApiException, NetworkException, ValidationException
from services.materials_service import (
    MaterialsService,
    format_file_size,
    validate_material_file,
    validate_thumbnail,
)
from services.translation_manager import tr
from ui.components.toast import OperationToast
from ui.error_handler import ErrorHandler
from utils.logger import get_logger

logger = get_logger(__name__)


class UploadWorker(QThread):
    """Background worker for a material upload."""

    progress = pyqtSignal(int)  # percent
    uploaded = pyqtSignal(object)  # Material
    failed = pyqtSignal(str)

    def __init__(self, materials_service: MaterialsService, draft: MaterialDraft,
                 material_id: Optional[str] = None):
        super().__init__()
        self.materials_service = materials_service
        self.draft = draft
        self.material_id = material_id

    def run(self):
        try:
            material = self.materials_service.upload(
                self.draft,
                self.progress.emit,
                material_id=self.material_id
            )
        except (ValidationException, ApiException, NetworkException) as e:
            self.failed.emit(e.message)
            return
        except Exception as e:
            self.failed.emit(ErrorHandler.handle(e, context="materials.upload", show_dialog=False))
            return
        self.uploaded.emit(material)


class MaterialsPage(QWidget):
    """Materials center for teachers (upload/delete) or students (download)."""

    TEACHER = "teacher"
    STUDENT = "student"

    def __init__(self, materials_service: MaterialsService, toast: OperationToast = None,
                 mode: str = TEACHER, parent=None):
        super().__init__(parent)
        self.materials_service = materials_service
        self.toast = toast or OperationToast()
        self.mode = mode
        self.draft = MaterialDraft()
        self.editing_id: Optional[str] = None
        self.materials: List[Material] = []
        self.upload_worker: Optional[UploadWorker] = None
        self._setup_ui()

    @property
    def is_teacher(self) -> bool:
        return self.mode == self.TEACHER

    @property
    def uploading(self) -> bool:
        return self.upload_worker is not None and self.upload_worker.isRunning()

    def _setup_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(24, 24, 24, 24)
        layout.setSpacing(12)

        title = QLabel(tr("materials.title") if self.is_teacher else tr("materials.student_title"))
        title_font = QFont()
        title_font.setPointSize(16)
        title_font.setBold(True)
        title.setFont(title_font)
        layout.addWidget(title)

        if self.is_teacher:
            layout.addWidget(self._create_upload_form())

        header_row = QHBoxLayout()
        header_row.addStretch()
        self.refresh_btn = QPushButton(tr("button.refresh"))
        self.refresh_btn.clicked.connect(self.refresh)
        header_row.addWidget(self.refresh_btn)
        layout.addLayout(header_row)

        self.material_list = QListWidget()
        self.material_list.setObjectName("material_list")
        layout.addWidget(self.material_list, 1)

        self.empty_label = QLabel(tr("materials.empty"))
        self.empty_label.setAlignment(Qt.AlignCenter)
        self.empty_label.setStyleSheet(f"color: {Config.TEXT_MUTED};")
        layout.addWidget(self.empty_label)

        action_row = QHBoxLayout()
        action_row.addStretch()
        if self.is_teacher:
            self.delete_btn = QPushButton(tr("button.delete"))
            self.delete_btn.clicked.connect(self.delete_selected)
            action_row.addWidget(self.delete_btn)
        else:
            self.download_btn = QPushButton(tr("button.download"))
            self.download_btn.clicked.connect(self.download_selected)
            action_row.addWidget(self.download_btn)
        layout.addLayout(action_row)

    def _create_upload_form(self) -> QGroupBox:
        box = QGroupBox(tr("button.upload"))
        form = QVBoxLayout(box)

        form.addWidget(QLabel(tr("field.title")))
        self.title_input = QLineEdit()
        self.title_input.setObjectName("input_title")
        form.addWidget(self.title_input)

        form.addWidget(QLabel(tr("field.material_type")))
        self.type_combo = QComboBox()
        for material_type in Config.MATERIAL_TYPES:
            self.type_combo.addItem(tr(f"materials.type.{material_type}"), material_type)
        form.addWidget(self.type_combo)

        file_row = QHBoxLayout()
        self.file_label = QLabel("")
        self.file_btn = QPushButton(f"{tr('field.material_file')}: {tr('button.browse')}")
        self.file_btn.clicked.connect(self._browse_file)
        file_row.addWidget(self.file_btn)
        file_row.addWidget(self.file_label, 1)
        form.addLayout(file_row)

        thumb_row = QHBoxLayout()
        self.thumbnail_label = QLabel("")
        self.thumbnail_btn = QPushButton(f"{tr('field.thumbnail')}: {tr('button.browse')}")
        self.thumbnail_btn.clicked.connect(self._browse_thumbnail)
        thumb_row.addWidget(self.thumbnail_btn)
        thumb_row.addWidget(self.thumbnail_label, 1)
        form.addLayout(thumb_row)

        self.form_error = QLabel("")
        self.form_error.setObjectName("error_upload")
        self.form_error.setStyleSheet(f"color: {Config.ERROR_COLOR};")
        self.form_error.setWordWrap(True)
        self.form_error.hide()
        form.addWidget(self.form_error)

        self.progress_bar = QProgressBar()
        self.progress_bar.setRange(0, 100)
        self.progress_bar.setValue(0)
        self.progress_bar.hide()
        form.addWidget(self.progress_bar)

        self.upload_btn = QPushButton(tr("button.upload"))
        self.upload_btn.setObjectName("btn_upload")
        self.upload_btn.clicked.connect(self.start_upload)
        form.addWidget(self.upload_btn)
        return box

    # ==================== File selection ====================

    def _browse_file(self):
        patterns = " ".join(f"*{ext}" for ext in Config.MATERIAL_EXTENSIONS)
        path, _ = QFileDialog.getOpenFileName(self, tr("field.material_file"), "", f"({patterns})")
        if path:
            self.set_material_file(path)

    def _browse_thumbnail(self):
        path, _ = QFileDialog.getOpenFileName(
            self, tr("field.thumbnail"), "", "(*.png *.jpg *.jpeg *.gif *.webp)"
        )
        if path:
            self.set_thumbnail(path)

    def set_material_file(self, path: str) -> bool:
        try:
            size = validate_material_file(path)
        except ValidationException as e:
            self._show_form_error(e.message)
            self.draft.file_path = None
            self.file_label.setText("")
            return False
        self.draft.file_path = path
        self.file_label.setText(f"{os.path.basename(path)} ({format_file_size(size)})")
        self._show_form_error("")
        return True

    def set_thumbnail(self, path: str) -> bool:
        try:
            validate_thumbnail(path)
        except ValidationException as e:
            self._show_form_error(e.message)
            self.draft.thumbnail_path = None
            self.thumbnail_label.setText("")
            return False
        self.draft.thumbnail_path = path
        self.thumbnail_label.setText(os.path.basename(path))
        self._show_form_error("")
        return True

    def edit_material(self, material: Material):
        """Load a material into the form; the next upload replaces it."""
        self.editing_id = material.id
        self.title_input.setText(material.title)
        index = self.type_combo.findData(material.type)
        self.type_combo.setCurrentIndex(max(index, 0))
        self.draft.file_path = None
        self.draft.thumbnail_path = None
        self.file_label.setText(material.file_name)

    # ==================== Upload ====================

    def start_upload(self) -> bool:
        if self.uploading:
            self.toast.info(tr("materials.upload_wait"))
            return False

        self.draft.title = self.title_input.text().strip()
        self.draft.type = self.type_combo.currentData() or "other"
        if not self.draft.file_path and not self.editing_id:
            self._show_form_error(tr("error.materials.no_file"))
            return False

        self._show_form_error("")
        self._set_uploading(True)

        self.upload_worker = UploadWorker(self.materials_service, self.draft, self.editing_id)
        self.upload_worker.progress.connect(self._on_upload_progress)
        self.upload_worker.uploaded.connect(self._on_upload_finished)
        self.upload_worker.failed.connect(self._on_upload_failed)
        self.upload_worker.start()
        return True

    def _set_uploading(self, uploading: bool):
        self.upload_btn.setEnabled(not uploading)
        self.upload_btn.setText(tr("button.uploading") if uploading else tr("button.upload"))
        self.progress_bar.setVisible(uploading)
        if uploading:
            self.progress_bar.setValue(0)

    def _on_upload_progress(self, percent: int):
        self.progress_bar.setValue(percent)

    def _on_upload_finished(self, material: Material):
        self._set_uploading(False)
        filename = material.file_name or os.path.basename(self.draft.file_path or "") or material.title
        if self.editing_id:
            self.toast.success(tr("success.materials.updated"))
        else:
            self.toast.upload_success(filename)
        self._reset_form()
        self.refresh()

    def _on_upload_failed(self, message: str):
        self._set_uploading(False)
        self._show_form_error(message)
        self.toast.upload_error(message)

    def _reset_form(self):
        self.draft = MaterialDraft()
        self.editing_id = None
        self.title_input.clear()
        self.type_combo.setCurrentIndex(0)
        self.file_label.setText("")
        self.thumbnail_label.setText("")

    def _show_form_error(self, message: str):
        if not self.is_teacher:
            return
        self.form_error.setText(message)
        self.form_error.setVisible(bool(message))

    # ==================== List ====================

    def refresh(self, data=None):
        try:
            if self.is_teacher:
                self.materials = self.materials_service.list_teacher_materials()
            else:
                self.materials = self.materials_service.list_student_materials()
        except (ApiException, NetworkException) as e:
            logger.warning(f"Could not load materials: {e}")
            self.toast.error(tr("error.materials.fetch_failed"))
            self.materials = []
        self._populate_list()

    def _populate_list(self):
        self.material_list.clear()
        for material in self.materials:
            text = f"{material.title}  ·  {tr(f'materials.type.{material.type}')}"
            if material.size:
                text += f"  ·  {format_file_size(material.size)}"
            item = QListWidgetItem(text)
            item.setData(Qt.UserRole, material.id)
            self.material_list.addItem(item)
        self.empty_label.setVisible(not self.materials)

    def _selected_material(self) -> Optional[Material]:
        item = self.material_list.currentItem()
        if item is None:
            return None
        material_id = item.data(Qt.UserRole)
        return next((m for m in self.materials if m.id == material_id), None)

    def delete_selected(self):
        material = self._selected_material()
        if material is None:
            return
        if not ErrorHandler.confirm(self, tr("materials.confirm_delete")):
            return
        try:
            self.materials_service.delete(material.id)
        except (ApiException, NetworkException) as e:
            logger.warning(f"Delete failed for {material.id}: {e}")
            self.toast.error(tr("error.materials.delete_failed"))
            return
        self.toast.success(tr("success.materials.deleted"))
        self.refresh()

    def download_selected(self):
        material = self._selected_material()
        if material is None:
            return
        suggested = material.file_name or material.title
        path, _ = QFileDialog.getSaveFileName(self, tr("button.download"), suggested)
        if not path:
            return
        try:
            self.materials_service.download(material.id, path)
        except (ApiException, NetworkException, OSError) as e:
            logger.warning(f"Download failed for {material.id}: {e}")
            self.toast.error(tr("error.materials.download_failed"))
            return
        self.toast.success(os.path.basename(path))
