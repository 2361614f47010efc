# -*- coding: utf-8 -*-
"""
Shared behaviour of the registration wizard steps.

Each step owns a set of form fields. Widgets report edits through
field_changed; the wizard writes them into the form. populate_data() copies
the form back into the widgets without re-emitting.
"""

from typing import Any, Dict, Tuple

from PyQt5.QtWidgets import QCheckBox, QComboBox, QLabel, QLineEdit, QWidget
from PyQt5.QtGui import QFont

from app.config import Config
from services.wizard.step_validator import RegistrationStepValidator
from ui.wizards.framework import BaseStep, StepValidationResult
from ui.wizards.registration.registration_context import RegistrationContext


class RegistrationStep(BaseStep):
    """Base class for the four registration steps."""

    STEP_NUMBER = 0
    FIELDS: Tuple[str, ...] = ()

    def __init__(self, context: RegistrationContext, parent=None):
        super().__init__(context, parent)
        self.inputs: Dict[str, QWidget] = {}

    @property
    def form(self):
        return self.context.form

    def get_step_title(self) -> str:
        return RegistrationStepValidator.get_step_name(self.STEP_NUMBER)

    def add_heading(self):
        """Step title and description at the top of the step."""
        title = QLabel(self.get_step_title())
        font = QFont()
        font.setPointSize(13)
        font.setBold(True)
        title.setFont(font)
        self.main_layout.addWidget(title)

        description = QLabel(self.get_step_description())
        description.setStyleSheet(f"color: {Config.TEXT_MUTED};")
        description.setWordWrap(True)
        self.main_layout.addWidget(description)

    # ==================== Inputs ====================

    def add_line_edit(self, key: str, label: str, placeholder: str = "",
                      password: bool = False, layout=None) -> QLineEdit:
        edit = QLineEdit()
        edit.setObjectName(f"input_{key}")
        edit.setPlaceholderText(placeholder or label)
        if password:
            edit.setEchoMode(QLineEdit.Password)
        edit.textChanged.connect(lambda text, k=key: self.emit_field_changed(k, text))
        self.inputs[key] = edit
        return self.add_field(key, label, edit, layout)

    def add_combo(self, key: str, label: str, options, placeholder: str = "",
                  layout=None) -> QComboBox:
        """
        Add a select box.

        Args:
            options: (value, display text) pairs
            placeholder: Text of the empty first entry
        """
        combo = QComboBox()
        combo.setObjectName(f"input_{key}")
        combo.addItem(placeholder or label, "")
        for value, text in options:
            combo.addItem(text, value)
        combo.currentIndexChanged.connect(
            lambda index, k=key, c=combo: self.emit_field_changed(k, c.itemData(index) or "")
        )
        self.inputs[key] = combo
        return self.add_field(key, label, combo, layout)

    def add_check_box(self, key: str, label: str) -> QCheckBox:
        check = QCheckBox(label)
        check.setObjectName(f"input_{key}")
        check.toggled.connect(lambda checked, k=key: self.emit_field_changed(k, checked))
        self.inputs[key] = check
        self.main_layout.addWidget(check)
        return check

    def set_input_value(self, key: str, value: Any):
        widget = self.inputs.get(key)
        if widget is None:
            return
        widget.blockSignals(True)
        try:
            if isinstance(widget, QLineEdit):
                if widget.text() != (value or ""):
                    widget.setText(value or "")
            elif isinstance(widget, QComboBox):
                index = widget.findData(value or "")
                widget.setCurrentIndex(index if index >= 0 else 0)
            elif isinstance(widget, QCheckBox):
                widget.setChecked(bool(value))
        finally:
            widget.blockSignals(False)

    # ==================== BaseStep ====================

    def validate(self) -> StepValidationResult:
        result = self.create_validation_result()
        errors = RegistrationStepValidator.validate_step(self.STEP_NUMBER, self.form)
        for key, message in errors.items():
            result.add_error(message, key)
        return result

    def collect_data(self) -> Dict[str, Any]:
        return {key: self.form.get_field(key) for key in self.FIELDS}

    def populate_data(self):
        for key in self.FIELDS:
            self.set_input_value(key, self.form.get_field(key))
        self.show_errors(self.context.errors)
