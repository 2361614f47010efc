# -*- coding: utf-8 -*-
"""
Personal Info Step - Step 1 of the Registration Wizard.

Name, email and account password.
"""

from PyQt5.QtWidgets import QHBoxLayout, QVBoxLayout

from services.translation_manager import tr
from ui.wizards.registration.steps.registration_step import RegistrationStep


class PersonalInfoStep(RegistrationStep):
    """Step 1: who the student is and how they sign in."""

    STEP_NUMBER = 1
    FIELDS = ("first_name", "last_name", "email", "password", "confirm_password")

    def get_step_description(self) -> str:
        return tr("wizard.step.personal.description")

    def setup_ui(self):
        self.add_heading()

        name_row = QHBoxLayout()
        first_column = QVBoxLayout()
        last_column = QVBoxLayout()
        self.add_line_edit("first_name", tr("field.first_name"), layout=first_column)
        self.add_line_edit("last_name", tr("field.last_name"), layout=last_column)
        name_row.addLayout(first_column)
        name_row.addLayout(last_column)
        self.main_layout.addLayout(name_row)

        self.add_line_edit("email", tr("field.email"), placeholder="you@example.com")
        self.add_line_edit("password", tr("field.password"), password=True)
        self.add_line_edit("confirm_password", tr("field.confirm_password"), password=True)
        self.main_layout.addStretch()
