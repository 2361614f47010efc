# -*- coding: utf-8 -*-
"""
Tests for the wizard framework: StepNavigator, BaseStep and contexts.
"""

import pytest
from PyQt5.QtWidgets import QLineEdit

from ui.wizards.framework import BaseStep, BaseWizard, StepNavigator, StepValidationResult, WizardContext
from ui.wizards.registration import RegistrationContext


class DummyContext(WizardContext):
    pass


class DummyStep(BaseStep):
    """Step whose validity is set by the test."""

    def __init__(self, context, name):
        super().__init__(context)
        self.name = name
        self.valid = True
        self.shown = 0
        self.hidden = 0

    def setup_ui(self):
        self.add_field("value", "Value", QLineEdit())

    def validate(self):
        result = self.create_validation_result()
        if not self.valid:
            result.add_error(f"{self.name} is invalid", "value")
        return result

    def collect_data(self):
        return {}

    def on_show(self):
        super().on_show()
        self.shown += 1

    def on_hide(self):
        self.hidden += 1

    def get_step_title(self):
        return self.name


@pytest.fixture
def context():
    return DummyContext()


@pytest.fixture
def steps(qtbot, context):
    created = [DummyStep(context, name) for name in ("One", "Two", "Three")]
    for step in created:
        qtbot.addWidget(step)
    return created


@pytest.fixture
def navigator(context, steps):
    return StepNavigator(context, steps)


class TestStepValidationResult:
    def test_add_error(self):
        result = StepValidationResult(is_valid=True)
        result.add_error("Bad", "field")
        result.add_error("Also bad")
        assert not result.is_valid
        assert result.has_errors()
        assert result.errors == ["Bad", "Also bad"]
        assert result.field_errors == {"field": "Bad"}


class TestStepNavigator:
    """Test forward/back navigation and clamping."""

    def test_next_and_previous(self, navigator, steps, context):
        assert navigator.next_step()
        assert navigator.current_index == 1
        assert context.current_step_index == 1
        assert context.is_step_completed(0)
        assert steps[0].hidden == 1
        assert steps[1].shown == 1

        assert navigator.previous_step()
        assert navigator.current_index == 0

    def test_clamped(self, navigator):
        assert not navigator.previous_step()
        navigator.next_step()
        navigator.next_step()
        assert navigator.is_last_step()
        assert not navigator.next_step()
        assert navigator.current_index == 2

    def test_validation_blocks_next(self, navigator, steps, qtbot):
        steps[0].valid = False
        with qtbot.waitSignal(navigator.step_validated, timeout=1000) as blocker:
            assert not navigator.next_step()
        assert blocker.args[0].field_errors == {"value": "One is invalid"}
        assert navigator.current_index == 0

    def test_valid_step_publishes_result(self, navigator, qtbot):
        with qtbot.waitSignal(navigator.step_validated, timeout=1000) as blocker:
            assert navigator.next_step()
        assert blocker.args[0].is_valid

    def test_skip_validation(self, navigator, steps):
        steps[0].valid = False
        assert navigator.next_step(skip_validation=True)
        assert navigator.current_index == 1

    def test_goto_forward_validates(self, navigator, steps):
        steps[0].valid = False
        assert not navigator.goto_step(2)
        assert navigator.goto_step(2, skip_validation=True)
        assert navigator.goto_step(0)
        assert not navigator.goto_step(7)

    def test_step_changed_signal(self, navigator, qtbot):
        with qtbot.waitSignal(navigator.step_changed, timeout=1000) as blocker:
            navigator.next_step()
        assert blocker.args == [0, 1]

    def test_progress_and_reset(self, navigator, context):
        assert navigator.get_progress_percentage() == 0.0
        navigator.next_step()
        assert navigator.get_progress_percentage() == 50.0
        navigator.next_step()
        assert navigator.get_progress_percentage() == 100.0

        navigator.reset()
        assert navigator.current_index == 0
        assert context.completed_steps == set()


class TestBaseStep:
    """Test inline error labels."""

    def test_show_errors(self, steps):
        step = steps[0]
        step.initialize()
        step.show_errors({"value": "Required", "other": "ignored"})
        assert step.error_text("value") == "Required"
        step.show_errors({})
        assert step.error_text("value") == ""
        assert step.error_text("missing") == ""

    def test_field_changed(self, steps, qtbot):
        with qtbot.waitSignal(steps[0].field_changed, timeout=1000) as blocker:
            steps[0].emit_field_changed("value", 3)
        assert blocker.args == ["value", 3]


class DummyWizard(BaseWizard):
    """Three dummy steps; on_submit answers with accept."""

    def __init__(self):
        self.accept = True
        self.submitted = 0
        self.validated = []
        super().__init__()

    def create_context(self):
        return DummyContext()

    def create_steps(self):
        created = [DummyStep(self.context, name) for name in ("One", "Two", "Three")]
        for step in created:
            step.initialize()
        return created

    def on_step_validated(self, result):
        self.validated.append(result.is_valid)

    def on_submit(self):
        self.submitted += 1
        return self.accept


@pytest.fixture
def wizard(qtbot):
    widget = DummyWizard()
    qtbot.addWidget(widget)
    return widget


class TestBaseWizard:
    """Test the shared next/submit path."""

    def test_next_reports_validation(self, wizard):
        wizard.steps[0].valid = False
        assert not wizard.handle_next()
        wizard.steps[0].valid = True
        assert wizard.handle_next()
        assert wizard.validated == [False, True]
        assert wizard.handle_previous()

    def test_submit_only_on_last_step(self, wizard):
        assert not wizard.handle_submit()
        assert wizard.submitted == 0

    def test_submit_emits_completed_snapshot(self, wizard, qtbot):
        wizard.handle_next()
        wizard.handle_next()
        with qtbot.waitSignal(wizard.wizard_completed, timeout=1000) as blocker:
            assert wizard.handle_submit()
        assert blocker.args[0]["wizard_id"] == wizard.context.wizard_id
        assert blocker.args[0]["completed_steps"] == [0, 1]

    def test_invalid_last_step_is_not_submitted(self, wizard, qtbot):
        wizard.handle_next()
        wizard.handle_next()
        wizard.steps[2].valid = False
        with qtbot.assertNotEmitted(wizard.wizard_completed):
            assert not wizard.handle_submit()
        assert wizard.submitted == 0

    def test_rejected_submit_does_not_complete(self, wizard, qtbot):
        wizard.handle_next()
        wizard.handle_next()
        wizard.accept = False
        with qtbot.assertNotEmitted(wizard.wizard_completed):
            assert not wizard.handle_submit()
        assert wizard.submitted == 1


class TestContexts:
    """Test context snapshots."""

    def test_snapshot(self, context):
        context.mark_step_completed(0)
        data = context.to_dict()
        assert data["wizard_id"] == context.wizard_id
        assert data["completed_steps"] == [0]
        assert data["status"] == "draft"

    def test_registration_context_drops_password(self):
        context = RegistrationContext()
        context.form.first_name = "Omar"
        context.form.password = "secret1"
        context.form.address.set_city("Cairo")
        context.errors = {"general": "Closed"}

        data = context.to_dict()
        assert "password" not in data["form"]
        assert data["form"]["firstName"] == "Omar"
        assert data["form"]["city"] == "Cairo"
        assert data["errors"] == {"general": "Closed"}

    def test_registration_context_reset(self):
        context = RegistrationContext()
        context.form.email = "omar@example.com"
        context.errors = {"email": "x"}
        context.duplicate_account = True
        context.current_step_index = 3
        context.reset()
        assert context.form.email == ""
        assert context.errors == {}
        assert not context.duplicate_account
        assert context.current_step_index == 0
