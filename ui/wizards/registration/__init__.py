# -*- coding: utf-8 -*-
"""
Registration Wizard Package.

- RegistrationContext: form, errors and loading state
- RegistrationWizard: the four step wizard
"""

from .registration_context import RegistrationContext
from .registration_wizard import RegistrationWizard

__all__ = [
    'RegistrationContext',
    'RegistrationWizard'
]
