# -*- coding: utf-8 -*-
"""
Base Wizard - Abstract base class for all wizards.

Provides unified wizard UI with:
- Header with title and progress
- Step container
- Message area for wizard-level feedback
- Navigation buttons (Previous, Next / Submit)
"""

from typing import List, Optional
from abc import abstractmethod

from PyQt5.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton,
    QFrame, QStackedWidget, QProgressBar
)
from PyQt5.QtCore import pyqtSignal
from PyQt5.QtGui import QFont

from .base_step import ABCQWidgetMeta, BaseStep, StepValidationResult
from .wizard_context import WizardContext
from .step_navigator import StepNavigator
from app.config import Config
from services.translation_manager import tr, get_layout_direction


class BaseWizard(QWidget, metaclass=ABCQWidgetMeta):
    """
    Abstract base class for wizards.

    Subclasses must implement:
    - create_steps(): Create and return list of wizard steps
    - create_context(): Create and return wizard context
    - on_step_validated(): Show or clear the errors of a validated step
    - on_submit(): Handle final submission

    wizard_completed carries the context snapshot taken just before a
    successful on_submit().
    """

    wizard_completed = pyqtSignal(dict)

    def __init__(self, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self.setLayoutDirection(get_layout_direction())

        self.context = self.create_context()
        self.steps = self.create_steps()

        self.navigator = StepNavigator(self.context, self.steps)
        self.navigator.step_changed.connect(self._on_step_changed)
        self.navigator.can_go_previous_changed.connect(lambda _: self._update_navigation_buttons())
        self.navigator.step_validated.connect(self.on_step_validated)

        self._setup_ui()

        self.navigator.goto_step(0, skip_validation=True)

    # =========================================================================
    # Abstract Methods - Must be implemented by subclasses
    # =========================================================================

    @abstractmethod
    def create_steps(self) -> List[BaseStep]:
        pass

    @abstractmethod
    def create_context(self) -> WizardContext:
        pass

    @abstractmethod
    def on_step_validated(self, result: StepValidationResult):
        pass

    @abstractmethod
    def on_submit(self) -> bool:
        """
        Handle wizard submission from the last step.

        Returns:
            True if submission was successful, False otherwise
        """
        pass

    # =========================================================================
    # Optional Methods - Can be overridden by subclasses
    # =========================================================================

    def get_wizard_title(self) -> str:
        return tr("wizard.title")

    def get_submit_button_text(self) -> str:
        return tr("button.submit")

    def setup_message_area(self, layout: QVBoxLayout):
        """Add wizard-level widgets between the steps and the footer."""
        pass

    # =========================================================================
    # UI Setup
    # =========================================================================

    def _setup_ui(self):
        main_layout = QVBoxLayout(self)
        main_layout.setContentsMargins(0, 0, 0, 0)
        main_layout.setSpacing(0)

        main_layout.addWidget(self._create_header())

        separator = QFrame()
        separator.setFrameShape(QFrame.HLine)
        separator.setStyleSheet(f"background-color: {Config.BORDER_COLOR};")
        separator.setFixedHeight(1)
        main_layout.addWidget(separator)

        self.step_container = QStackedWidget()
        for step in self.steps:
            self.step_container.addWidget(step)
        main_layout.addWidget(self.step_container, 1)

        message_area = QVBoxLayout()
        message_area.setContentsMargins(20, 0, 20, 0)
        self.setup_message_area(message_area)
        main_layout.addLayout(message_area)

        main_layout.addWidget(self._create_footer())

    def _create_header(self) -> QWidget:
        header = QWidget()
        layout = QVBoxLayout(header)
        layout.setContentsMargins(20, 16, 20, 16)
        layout.setSpacing(12)

        self.title_label = QLabel(self.get_wizard_title())
        title_font = QFont()
        title_font.setPointSize(14)
        title_font.setBold(True)
        self.title_label.setFont(title_font)
        layout.addWidget(self.title_label)

        self.step_title_label = QLabel("")
        layout.addWidget(self.step_title_label)

        progress_layout = QHBoxLayout()
        progress_layout.setSpacing(8)

        self.progress_label = QLabel(tr("wizard.progress", current=1, total=len(self.steps)))
        progress_layout.addWidget(self.progress_label)

        self.progress_bar = QProgressBar()
        self.progress_bar.setMaximum(100)
        self.progress_bar.setValue(0)
        self.progress_bar.setTextVisible(False)
        self.progress_bar.setFixedHeight(6)
        self.progress_bar.setStyleSheet(f"""
            QProgressBar {{
                border: none;
                background-color: {Config.BORDER_COLOR};
                border-radius: 3px;
            }}
            QProgressBar::chunk {{
                background-color: {Config.PRIMARY_COLOR};
                border-radius: 3px;
            }}
        """)
        progress_layout.addWidget(self.progress_bar, 1)

        layout.addLayout(progress_layout)
        return header

    def _create_footer(self) -> QWidget:
        footer = QWidget()
        layout = QHBoxLayout(footer)
        layout.setContentsMargins(20, 16, 20, 16)
        layout.setSpacing(12)

        self.btn_previous = QPushButton(tr("button.previous"))
        self.btn_previous.setObjectName("btn_previous")
        self.btn_previous.setMinimumSize(114, 40)
        self.btn_previous.setAutoDefault(False)
        self.btn_previous.clicked.connect(self.handle_previous)
        layout.addWidget(self.btn_previous)

        layout.addStretch()

        self.btn_next = QPushButton(tr("button.next"))
        self.btn_next.setObjectName("btn_next")
        self.btn_next.setMinimumSize(114, 40)
        self.btn_next.setAutoDefault(False)
        self.btn_next.clicked.connect(self.handle_next)
        layout.addWidget(self.btn_next)

        self.btn_submit = QPushButton(self.get_submit_button_text())
        self.btn_submit.setObjectName("btn_submit")
        self.btn_submit.setMinimumSize(160, 40)
        self.btn_submit.setAutoDefault(False)
        self.btn_submit.clicked.connect(self.handle_submit)
        layout.addWidget(self.btn_submit)

        return footer

    # =========================================================================
    # Navigation Handlers
    # =========================================================================

    def handle_previous(self) -> bool:
        return self.navigator.previous_step()

    def handle_next(self) -> bool:
        return self.navigator.next_step()

    def handle_submit(self) -> bool:
        """Validate the last step and hand over to on_submit()."""
        if not self.navigator.is_last_step():
            return False
        if not self.navigator.validate_current_step():
            return False

        snapshot = self.context.to_dict()
        if not self.on_submit():
            return False
        self.wizard_completed.emit(snapshot)
        return True

    # =========================================================================
    # Event Handlers
    # =========================================================================

    def _on_step_changed(self, old_index: int, new_index: int):
        self.step_container.setCurrentIndex(new_index)
        self._update_progress()
        self._update_navigation_buttons()

    def _update_progress(self):
        current = self.navigator.current_index + 1
        total = len(self.steps)
        self.progress_label.setText(tr("wizard.progress", current=current, total=total))
        self.progress_bar.setValue(int(self.navigator.get_progress_percentage()))
        step = self.navigator.get_current_step()
        if step:
            self.step_title_label.setText(step.get_step_title())

    def _update_navigation_buttons(self):
        last = self.navigator.is_last_step()
        self.btn_previous.setEnabled(self.navigator.can_go_previous())
        self.btn_next.setVisible(not last)
        self.btn_submit.setVisible(last)
