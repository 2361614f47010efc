# -*- coding: utf-8 -*-
"""
Academic Journey Step - Step 2 of the Registration Wizard.

Year, exam session, nationality, school, retaker flag and other subjects.
"""

from app.config import Config
from services.translation_manager import tr
from ui.wizards.registration.steps.registration_step import RegistrationStep


class AcademicStep(RegistrationStep):
    """Step 2: where the student is in the IGCSE programme."""

    STEP_NUMBER = 2
    FIELDS = ("year", "session", "nationality", "school", "is_retaker", "other_subjects")

    def get_step_description(self) -> str:
        return tr("wizard.step.academic.description")

    def setup_ui(self):
        self.add_heading()

        year_options = [(year, tr("field.year_option", year=year)) for year in Config.YEAR_OPTIONS]
        self.add_combo("year", tr("field.year"), year_options)
        self.add_combo("session", tr("field.session"), Config.SESSION_OPTIONS)
        self.add_line_edit(
            "nationality",
            tr("field.nationality"),
            placeholder=tr("field.nationality_placeholder")
        )
        self.add_line_edit("school", tr("field.school"))
        self.add_check_box("is_retaker", tr("field.is_retaker"))
        self.add_line_edit("other_subjects", tr("field.other_subjects"))
        self.main_layout.addStretch()
