# -*- coding: utf-8 -*-
"""
Step Navigator - Manages navigation between wizard steps.

Handles:
- Step progression (next/previous), clamped to the step range
- Step validation before forward navigation
- Progress tracking
"""

from typing import List, Optional
from PyQt5.QtCore import QObject, pyqtSignal

from .base_step import BaseStep, StepValidationResult
from .wizard_context import WizardContext
from utils.logger import get_logger

logger = get_logger(__name__)


class StepNavigator(QObject):
    """
    Tracks the current step (0-based) and drives step lifecycle.

    Steps are shown/hidden through on_show()/on_hide(); listeners follow
    along through step_changed.
    """

    step_changed = pyqtSignal(int, int)  # old_index, new_index
    can_go_next_changed = pyqtSignal(bool)
    can_go_previous_changed = pyqtSignal(bool)
    step_validated = pyqtSignal(StepValidationResult)

    def __init__(self, context: WizardContext, steps: List[BaseStep]):
        super().__init__()
        self.context = context
        self.steps = steps
        self.current_index = 0

    def get_current_step(self) -> Optional[BaseStep]:
        if 0 <= self.current_index < len(self.steps):
            return self.steps[self.current_index]
        return None

    def get_step_count(self) -> int:
        return len(self.steps)

    def can_go_next(self) -> bool:
        return self.current_index < len(self.steps) - 1

    def can_go_previous(self) -> bool:
        return self.current_index > 0

    def is_last_step(self) -> bool:
        return self.current_index == len(self.steps) - 1

    def validate_current_step(self) -> bool:
        """Validate the current step and publish the result, valid or not."""
        current_step = self.get_current_step()
        if current_step is None:
            return True
        validation_result = current_step.validate()
        if not validation_result.is_valid:
            logger.info(
                f"Step {self.current_index} validation failed: {validation_result.errors}"
            )
        self.step_validated.emit(validation_result)
        return validation_result.is_valid

    def next_step(self, skip_validation: bool = False) -> bool:
        """
        Navigate to the next step.

        Args:
            skip_validation: Caller already validated the current step

        Returns:
            True if navigation happened
        """
        if not self.can_go_next():
            logger.debug(f"Cannot go next: already at last step ({self.current_index})")
            return False

        if not skip_validation and not self.validate_current_step():
            return False

        self.context.mark_step_completed(self.current_index)
        logger.info(f"Navigating: Step {self.current_index} → {self.current_index + 1}")
        return self._navigate_to(self.current_index + 1)

    def previous_step(self) -> bool:
        if not self.can_go_previous():
            logger.debug(f"Cannot go previous: already at first step ({self.current_index})")
            return False

        logger.info(f"Navigating back: Step {self.current_index} → {self.current_index - 1}")
        return self._navigate_to(self.current_index - 1)

    def goto_step(self, index: int, skip_validation: bool = False) -> bool:
        """
        Navigate to a specific step.

        Forward jumps validate the current step unless skip_validation is set.
        """
        if index < 0 or index >= len(self.steps):
            return False

        if index == self.current_index:
            self._navigate_to(index)
            return True

        if index > self.current_index and not skip_validation:
            if not self.validate_current_step():
                return False

        return self._navigate_to(index)

    def _navigate_to(self, new_index: int) -> bool:
        if new_index < 0 or new_index >= len(self.steps):
            logger.error(f"Invalid step index: {new_index} (valid range: 0-{len(self.steps)-1})")
            return False

        old_index = self.current_index

        current_step = self.get_current_step()
        if current_step and old_index != new_index:
            current_step.on_hide()

        self.current_index = new_index
        self.context.current_step_index = new_index

        new_step = self.get_current_step()
        if new_step:
            logger.debug(f"Showing step {new_index}: {new_step.get_step_title()}")
            new_step.on_show()

        self.step_changed.emit(old_index, new_index)
        self.can_go_next_changed.emit(self.can_go_next())
        self.can_go_previous_changed.emit(self.can_go_previous())
        return True

    def reset(self):
        """Reset navigator to first step."""
        self.context.reset_progress()
        self._navigate_to(0)

    def get_progress_percentage(self) -> float:
        """Progress from 0.0 (first step) to 100.0 (last step)."""
        if len(self.steps) <= 1:
            return 100.0 if self.steps else 0.0
        return (self.current_index / (len(self.steps) - 1)) * 100.0
