# -*- coding: utf-8 -*-
"""
Tech Knowledge Step - Step 4 of the Registration Wizard.

A 1-10 self assessment followed by a read-only summary of the form.
"""

from PyQt5.QtCore import Qt
from PyQt5.QtWidgets import QFormLayout, QGroupBox, QHBoxLayout, QLabel, QSlider

from services.translation_manager import tr
from ui.wizards.registration.steps.registration_step import RegistrationStep


class TechKnowledgeStep(RegistrationStep):
    """Step 4: tech knowledge rating and registration summary."""

    STEP_NUMBER = 4
    FIELDS = ("tech_knowledge",)

    def get_step_description(self) -> str:
        return tr("wizard.step.tech.description")

    def setup_ui(self):
        self.add_heading()

        slider_row = QHBoxLayout()
        self.slider = QSlider(Qt.Horizontal)
        self.slider.setObjectName("input_tech_knowledge")
        self.slider.setRange(1, 10)
        self.slider.setTickPosition(QSlider.TicksBelow)
        self.slider.setTickInterval(1)
        self.slider.valueChanged.connect(self._on_slider_changed)
        self.value_label = QLabel("")
        self.value_label.setMinimumWidth(48)
        slider_row.addWidget(self.slider, 1)
        slider_row.addWidget(self.value_label)
        self.main_layout.addWidget(QLabel(tr("field.tech_knowledge")))
        self.main_layout.addLayout(slider_row)

        summary_box = QGroupBox(tr("summary.title"))
        summary_layout = QFormLayout(summary_box)
        self.summary_labels = {}
        for key in ("name", "email", "year_session", "school", "tech_knowledge"):
            value = QLabel("")
            value.setObjectName(f"summary_{key}")
            summary_layout.addRow(tr(f"summary.{key}"), value)
            self.summary_labels[key] = value
        self.main_layout.addWidget(summary_box)
        self.main_layout.addStretch()

    def _on_slider_changed(self, value: int):
        self.value_label.setText(tr("summary.tech_knowledge_value", value=value))
        self.emit_field_changed("tech_knowledge", value)
        self._refresh_summary()

    def populate_data(self):
        self.slider.blockSignals(True)
        self.slider.setValue(int(self.form.tech_knowledge))
        self.slider.blockSignals(False)
        self.value_label.setText(tr("summary.tech_knowledge_value", value=self.slider.value()))
        self._refresh_summary()

    def _refresh_summary(self):
        form = self.form
        self.summary_labels["name"].setText(f"{form.first_name} {form.last_name}".strip())
        self.summary_labels["email"].setText(form.email)
        self.summary_labels["year_session"].setText(
            tr("summary.year_session_value", year=form.year, session=form.session)
        )
        self.summary_labels["school"].setText(form.school)
        self.summary_labels["tech_knowledge"].setText(
            tr("summary.tech_knowledge_value", value=self.slider.value())
        )
