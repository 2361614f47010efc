# -*- coding: utf-8 -*-
"""
Registration Wizard - four step student registration.

Steps:
1. Personal Info
2. Academic Journey
3. Contact Info
4. Tech Knowledge & Summary

Positions are 1-based (current_step); the navigator underneath is 0-based.
Next validates the current step, Previous never does, and only step 4 can
submit. Earlier steps are not re-validated at submission.
"""

from typing import List, Optional

from PyQt5.QtCore import Qt, pyqtSignal
from PyQt5.QtWidgets import QApplication, QLabel, QPushButton, QVBoxLayout, QWidget

from app.config import Config
from models.registration import RegistrationForm
from services.registration_service import RegistrationService
from services.translation_manager import tr
from ui.components.toast import OperationToast
from ui.wizards.framework import BaseStep, BaseWizard, StepValidationResult
from ui.wizards.registration.registration_context import GENERAL_ERROR, RegistrationContext
from ui.wizards.registration.steps import (
    AcademicStep,
    ContactStep,
    PersonalInfoStep,
    TechKnowledgeStep,
)
from utils.logger import get_logger

logger = get_logger(__name__)


class RegistrationWizard(BaseWizard):
    """Registration form state machine and its UI."""

    navigate_requested = pyqtSignal(str)

    def __init__(self, registration_service: RegistrationService,
                 toast: Optional[OperationToast] = None, parent: Optional[QWidget] = None):
        self.registration_service = registration_service
        self.toast = toast or OperationToast()
        super().__init__(parent)

    # ==================== BaseWizard ====================

    def create_context(self) -> RegistrationContext:
        return RegistrationContext()

    def create_steps(self) -> List[BaseStep]:
        steps = [
            PersonalInfoStep(self.context),
            AcademicStep(self.context),
            ContactStep(self.context),
            TechKnowledgeStep(self.context),
        ]
        for step in steps:
            step.initialize()
            step.field_changed.connect(self.handle_input_change)
        return steps

    def get_submit_button_text(self) -> str:
        return tr("button.submit_registration")

    def setup_message_area(self, layout: QVBoxLayout):
        self.general_error_label = QLabel("")
        self.general_error_label.setObjectName("error_general")
        self.general_error_label.setWordWrap(True)
        self.general_error_label.setTextInteractionFlags(Qt.TextSelectableByMouse)
        self.general_error_label.setStyleSheet(
            f"color: {Config.ERROR_COLOR}; padding: 8px; "
            f"border: 1px solid {Config.ERROR_COLOR}; border-radius: 6px;"
        )
        self.general_error_label.setVisible(False)
        layout.addWidget(self.general_error_label)

        self.btn_go_to_sign_in = QPushButton(tr("button.go_to_sign_in"))
        self.btn_go_to_sign_in.setObjectName("btn_go_to_sign_in")
        self.btn_go_to_sign_in.setAutoDefault(False)
        self.btn_go_to_sign_in.setVisible(False)
        self.btn_go_to_sign_in.clicked.connect(lambda: self.navigate_requested.emit("/login"))
        layout.addWidget(self.btn_go_to_sign_in)

    def on_submit(self) -> bool:
        """Send the form once and branch on the outcome."""
        self._set_loading(True)
        self.context.errors = {}
        self.context.duplicate_account = False
        self._render_errors()

        try:
            outcome = self.registration_service.submit(self.form)
        finally:
            self._set_loading(False)

        if outcome.success:
            logger.info("Registration accepted, resetting wizard")
            self.toast.registration_success()
            self.context.reset()
            self.navigator.reset()
            self._render_errors()
            self.navigate_requested.emit("/")
            return True

        logger.info(f"Registration not accepted: {outcome.kind}")
        self.context.errors = {GENERAL_ERROR: outcome.message}
        self.context.duplicate_account = outcome.is_duplicate
        self._render_errors()
        return False

    # ==================== State ====================

    @property
    def form(self) -> RegistrationForm:
        return self.context.form

    @property
    def errors(self):
        return self.context.errors

    @property
    def loading(self) -> bool:
        return self.context.loading

    @property
    def current_step(self) -> int:
        return self.navigator.current_index + 1

    @property
    def total_steps(self) -> int:
        return len(self.steps)

    # ==================== Operations ====================

    def handle_input_change(self, field: str, value):
        """Write a field and clear its error, if it had one."""
        self.form.set_field(field, value)
        for step in self.steps:
            if field in step.FIELDS:
                step.set_input_value(field, value)
        if field in self.context.errors:
            self.context.clear_error(field)
            self._render_errors()

    def validate_step(self, step: int) -> bool:
        """
        Run the checks of one step (1-based).

        The error map is replaced by that step's errors.
        """
        if not 1 <= step <= self.total_steps:
            raise ValueError(f"No registration step {step}")
        result = self.steps[step - 1].validate()
        self.on_step_validated(result)
        return result.is_valid

    def on_step_validated(self, result: StepValidationResult):
        self.context.errors = dict(result.field_errors)
        self._render_errors()

    def handle_submit(self) -> bool:
        if self.current_step != self.total_steps:
            logger.warning(f"Submit ignored on step {self.current_step}")
            return False
        if self.context.loading:
            logger.warning("Submit ignored: registration already in progress")
            return False
        return super().handle_submit()

    def keyPressEvent(self, event):
        if event.key() in (Qt.Key_Return, Qt.Key_Enter):
            if self.current_step < self.total_steps:
                self.handle_next()
            else:
                self.handle_submit()
            event.accept()
            return
        super().keyPressEvent(event)

    # ==================== Rendering ====================

    def _render_errors(self):
        for step in self.steps:
            step.show_errors(self.context.errors)
        general = self.context.errors.get(GENERAL_ERROR, "")
        self.general_error_label.setText(general)
        self.general_error_label.setVisible(bool(general))
        self.btn_go_to_sign_in.setVisible(self.context.duplicate_account)

    def _set_loading(self, loading: bool):
        self.context.loading = loading
        self.context.status = "submitting" if loading else "draft"
        self.btn_submit.setEnabled(not loading)
        self.btn_submit.setText(
            tr("button.submitting") if loading else self.get_submit_button_text()
        )
        QApplication.processEvents()
