# -*- coding: utf-8 -*-
"""
Registration wizard context - form, field errors and submission state.
"""

from typing import Any, Dict

from models.registration import RegistrationForm
from ui.wizards.framework.wizard_context import WizardContext

GENERAL_ERROR = "general"


class RegistrationContext(WizardContext):
    """Shared state of the registration wizard."""

    def __init__(self):
        super().__init__()
        self.form = RegistrationForm()
        self.errors: Dict[str, str] = {}
        self.loading = False
        self.duplicate_account = False

    def clear_error(self, key: str):
        self.errors.pop(key, None)

    def reset(self):
        """Back to an empty form on step one."""
        self.form.reset()
        self.errors = {}
        self.loading = False
        self.duplicate_account = False
        self.reset_progress()

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        form = self.form.to_payload()
        form.pop("password", None)
        data.update({
            "form": form,
            "errors": dict(self.errors),
        })
        return data

