# -*- coding: utf-8 -*-
"""
Step validation service for the Registration Wizard.

Validates form data for each step without UI coupling.
"""

import re
from typing import Dict

from app.config import Config
from models.registration import ADDRESS_CITY, ADDRESS_COUNTRY, RegistrationForm
from services.translation_manager import tr

EMAIL_PATTERN = re.compile(r"\S+@\S+\.\S+")


def is_email(value: str) -> bool:
    return EMAIL_PATTERN.search(value or "") is not None


class RegistrationStepValidator:
    """Validates registration wizard steps (1-based)."""

    STEP_PERSONAL = 1
    STEP_ACADEMIC = 2
    STEP_CONTACT = 3
    STEP_TECH = 4

    @staticmethod
    def validate_step(step: int, form: RegistrationForm) -> Dict[str, str]:
        """
        Validate one step of the form.

        Args:
            step: Step number (1-4)
            form: Registration form

        Returns:
            Mapping of field key to error message; empty when valid
        """
        errors: Dict[str, str] = {}

        if step == RegistrationStepValidator.STEP_PERSONAL:
            if not form.first_name.strip():
                errors["first_name"] = tr("validation.first_name_required")
            if not form.last_name.strip():
                errors["last_name"] = tr("validation.last_name_required")
            if not form.email.strip():
                errors["email"] = tr("validation.email_required")
            elif not is_email(form.email):
                errors["email"] = tr("validation.email_invalid")
            if not form.password:
                errors["password"] = tr("validation.password_required")
            elif len(form.password) < Config.PASSWORD_MIN_LENGTH:
                errors["password"] = tr(
                    "validation.password_too_short",
                    min_length=Config.PASSWORD_MIN_LENGTH
                )
            if form.password != form.confirm_password:
                errors["confirm_password"] = tr("validation.passwords_mismatch")

        elif step == RegistrationStepValidator.STEP_ACADEMIC:
            if not form.year:
                errors["year"] = tr("validation.year_required")
            if not form.session:
                errors["session"] = tr("validation.session_required")
            if not form.nationality.strip():
                errors["nationality"] = tr("validation.nationality_required")
            if not form.school.strip():
                errors["school"] = tr("validation.school_required")

        elif step == RegistrationStepValidator.STEP_CONTACT:
            if not form.contact_number.strip():
                errors["contact_number"] = tr("validation.contact_number_required")
            if not form.parent_contact_number.strip():
                errors["parent_contact_number"] = tr("validation.parent_contact_required")
            if not form.address.city.strip():
                errors[ADDRESS_CITY] = tr("validation.city_required")
            if not form.address.country.strip():
                errors[ADDRESS_COUNTRY] = tr("validation.country_required")

        # Tech knowledge step has no required fields
        return errors

    @staticmethod
    def get_step_name(step: int) -> str:
        names = {
            1: tr("wizard.step.personal"),
            2: tr("wizard.step.academic"),
            3: tr("wizard.step.contact"),
            4: tr("wizard.step.tech"),
        }
        return names.get(step, "")
