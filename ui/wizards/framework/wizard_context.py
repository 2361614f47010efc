# -*- coding: utf-8 -*-
"""
Wizard Context - Base class for managing wizard state and data.

Provides unified interface for:
- Step position and completion tracking
- Serialization of a submission snapshot
"""

from typing import Dict, Any
from datetime import datetime
import uuid


class WizardContext:
    """Base class for wizard context."""

    def __init__(self):
        self.wizard_id: str = str(uuid.uuid4())
        self.status: str = "draft"  # draft, submitting
        self.created_at: datetime = datetime.now()
        self.updated_at: datetime = datetime.now()
        self.current_step_index: int = 0
        self.completed_steps: set = set()

    def mark_step_completed(self, step_index: int):
        self.completed_steps.add(step_index)
        self.updated_at = datetime.now()

    def is_step_completed(self, step_index: int) -> bool:
        return step_index in self.completed_steps

    def reset_progress(self):
        """Back to the first step with nothing completed."""
        self.current_step_index = 0
        self.completed_steps = set()
        self.status = "draft"
        self.updated_at = datetime.now()

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize context to dictionary.

        Subclasses should call super().to_dict() and add their own fields.
        """
        return {
            "wizard_id": self.wizard_id,
            "status": self.status,
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
            "current_step_index": self.current_step_index,
            "completed_steps": sorted(self.completed_steps),
        }
