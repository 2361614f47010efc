# -*- coding: utf-8 -*-
"""
Contact Info Step - Step 3 of the Registration Wizard.
"""

from models.registration import ADDRESS_CITY, ADDRESS_COUNTRY
from services.translation_manager import tr
from ui.wizards.registration.steps.registration_step import RegistrationStep


class ContactStep(RegistrationStep):
    """Step 3: phone numbers and location."""

    STEP_NUMBER = 3
    FIELDS = (
        "contact_number",
        "parent_contact_number",
        "alternative_number",
        ADDRESS_CITY,
        ADDRESS_COUNTRY,
    )

    def get_step_description(self) -> str:
        return tr("wizard.step.contact.description")

    def setup_ui(self):
        self.add_heading()
        self.add_line_edit("contact_number", tr("field.contact_number"), placeholder="+20 ...")
        self.add_line_edit(
            "parent_contact_number",
            tr("field.parent_contact_number"),
            placeholder="+20 ..."
        )
        self.add_line_edit("alternative_number", tr("field.alternative_number"))
        self.add_line_edit(ADDRESS_CITY, tr("field.city"))
        self.add_line_edit(ADDRESS_COUNTRY, tr("field.country"))
        self.main_layout.addStretch()
