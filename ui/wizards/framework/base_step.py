# -*- coding: utf-8 -*-
"""
Base Step - Abstract base class for wizard steps.

All wizard steps should inherit from this class and implement:
- setup_ui(): Create the step's UI
- validate(): Validate step data
- collect_data(): Collect data from UI
- populate_data(): Populate UI with data

Steps built with add_field() get an inline error label per field key,
driven by show_errors().
"""

from typing import List, Dict, Any, Optional
from abc import ABCMeta, abstractmethod
from dataclasses import dataclass, field

from PyQt5.QtWidgets import QWidget, QVBoxLayout, QLabel
from PyQt5.QtCore import pyqtSignal

from app.config import Config


@dataclass
class StepValidationResult:
    """Result of step validation."""
    is_valid: bool
    errors: List[str] = field(default_factory=list)
    field_errors: Dict[str, str] = field(default_factory=dict)

    def add_error(self, message: str, field_key: str = None):
        """Add an error message, optionally tied to a field."""
        self.errors.append(message)
        if field_key:
            self.field_errors[field_key] = message
        self.is_valid = False

    def has_errors(self) -> bool:
        return len(self.errors) > 0


# Combine PyQt5 metaclass with ABC metaclass
class ABCQWidgetMeta(type(QWidget), ABCMeta):
    """Metaclass that combines PyQt5's metaclass with ABC."""
    pass


class BaseStep(QWidget, metaclass=ABCQWidgetMeta):
    """
    Abstract base class for wizard steps.

    Provides common functionality for:
    - UI setup and lifecycle
    - Data validation
    - Data collection
    - Inline field errors
    """

    # Signals
    step_data_changed = pyqtSignal(dict)
    field_changed = pyqtSignal(str, object)  # field key, new value

    def __init__(self, context: 'WizardContext', parent: Optional[QWidget] = None):
        """
        Initialize the step.

        Args:
            context: The wizard context for data sharing
            parent: Parent widget
        """
        super().__init__(parent)
        self.context = context
        self._is_initialized = False
        self.error_labels: Dict[str, QLabel] = {}

        self.main_layout = QVBoxLayout(self)
        self.main_layout.setContentsMargins(20, 20, 20, 20)
        self.main_layout.setSpacing(12)

    def initialize(self):
        """Build the UI the first time the step is needed."""
        if not self._is_initialized:
            self.setup_ui()
            self._is_initialized = True

    def on_show(self):
        """Called when the step becomes the current step."""
        if not self._is_initialized:
            self.initialize()
        self.populate_data()

    def on_hide(self):
        """Called when the step is hidden (moving to another step)."""
        pass

    # =========================================================================
    # Abstract Methods - Must be implemented by subclasses
    # =========================================================================

    @abstractmethod
    def setup_ui(self):
        """Create all widgets and layouts. Called once."""
        pass

    @abstractmethod
    def validate(self) -> StepValidationResult:
        pass

    @abstractmethod
    def collect_data(self) -> Dict[str, Any]:
        pass

    # =========================================================================
    # Optional Methods - Can be overridden by subclasses
    # =========================================================================

    def populate_data(self):
        """Restore widget values from the context when navigating back."""
        pass

    def get_step_title(self) -> str:
        return self.__class__.__name__

    def get_step_description(self) -> str:
        return ""

    # =========================================================================
    # Helper Methods
    # =========================================================================

    def add_field(self, key: str, label_text: str, widget: QWidget,
                  layout: Optional[QVBoxLayout] = None) -> QWidget:
        """
        Add a labelled input with an (initially hidden) error label.

        Args:
            key: Field key used in error maps
            label_text: Visible label
            widget: Input widget
            layout: Target layout (defaults to the step's main layout)
        """
        target = layout if layout is not None else self.main_layout

        label = QLabel(label_text)
        label.setObjectName(f"label_{key}")
        target.addWidget(label)
        target.addWidget(widget)

        error_label = QLabel("")
        error_label.setObjectName(f"error_{key}")
        error_label.setStyleSheet(f"color: {Config.ERROR_COLOR}; font-size: 9pt;")
        error_label.setWordWrap(True)
        error_label.setVisible(False)
        target.addWidget(error_label)

        self.error_labels[key] = error_label
        return widget

    def show_errors(self, errors: Dict[str, str]):
        """Show the messages for this step's fields; hide the rest."""
        for key, label in self.error_labels.items():
            message = errors.get(key, "")
            label.setText(message)
            label.setVisible(bool(message))

    def error_text(self, key: str) -> str:
        label = self.error_labels.get(key)
        return label.text() if label is not None and label.isVisibleTo(self) else ""

    def emit_field_changed(self, key: str, value: Any):
        self.field_changed.emit(key, value)
        self.step_data_changed.emit({key: value})

    def create_validation_result(self) -> StepValidationResult:
        return StepValidationResult(is_valid=True)
