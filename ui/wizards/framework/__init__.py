# -*- coding: utf-8 -*-
"""
Wizard Framework - multi-step wizards with consistent navigation,
validation, and state management.
"""

from .base_wizard import BaseWizard
from .base_step import BaseStep, StepValidationResult
from .wizard_context import WizardContext
from .step_navigator import StepNavigator

__all__ = [
    'BaseWizard',
    'BaseStep',
    'StepValidationResult',
    'WizardContext',
    'StepNavigator'
]
