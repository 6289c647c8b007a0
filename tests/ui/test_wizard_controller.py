# -*- coding: utf-8 -*-
"""
Tests for WizardController.

Tests cover:
- Advancing with valid and invalid input
- Conditional steps and progress
- Back / jump navigation
- Submission success, failure and retry
- Submission on the worker thread
- Restoring a saved session
"""

import copy
import threading

import pytest

from services.exceptions import GatewayError, UnknownStepError
from services.validation import BooleanField, ChoiceField, StepSchema, TextField
from ui.wizards.framework import COMPLETE, REVIEW, WizardController, WizardStep
from ui.wizards.framework.wizard_context import WizardState
from ui.wizards.tenant_onboarding.schemas import create_tenant_steps

TENANT_KEYS = [step.key for step in create_tenant_steps()]


@pytest.fixture
def make_controller(qapp, make_gateway):
    """Factory for an inline-submitting controller over the tenant steps."""
    def _make(steps=None, gateway=None, **kwargs):
        kwargs.setdefault("run_in_background", False)
        return WizardController(
            steps if steps is not None else create_tenant_steps(),
            gateway if gateway is not None else make_gateway(),
            **kwargs
        )
    return _make


def complete_all(controller, tenant_results):
    """Advance through every visible step with valid input."""
    while controller.current_key not in (REVIEW, COMPLETE):
        result = controller.advance(tenant_results[controller.current_key])
        assert result.is_valid, result.field_errors


def short_wizard_steps():
    """Personal -> Employment (shown unless unemployed) -> Review."""
    return [
        WizardStep("personal", "Personal", StepSchema([
            TextField("firstName", min_length=2),
            ChoiceField("employmentStatus", ("employed", "unemployed")),
        ])),
        WizardStep(
            "employment", "Employment",
            StepSchema([TextField("employerName", min_length=2)]),
            predicate=lambda values: values.get("employmentStatus") != "unemployed",
        ),
    ]


class TestConstruction:
    """Test controller setup."""

    def test_starts_on_first_visible_step(self, make_controller):
        controller = make_controller()
        snapshot = controller.snapshot()

        assert controller.current_key == "personal"
        assert controller.visible_keys == [
            "personal", "employment", "references", "banking", "lease", "documents", "agreement"
        ]
        assert snapshot.progress.ordinal == 1
        assert snapshot.progress.total == 8
        assert snapshot.highest_reached == 0
        assert dict(snapshot.results) == {}

    def test_duplicate_keys_rejected(self, make_controller):
        steps = [WizardStep("a", "A"), WizardStep("a", "A again")]
        with pytest.raises(ValueError):
            make_controller(steps=steps)

    def test_reserved_keys_rejected(self, make_controller):
        with pytest.raises(ValueError):
            make_controller(steps=[WizardStep(REVIEW, "Review")])

    def test_get_step_unknown_key(self, make_controller):
        controller = make_controller()
        with pytest.raises(UnknownStepError):
            controller.get_step("payment")

    def test_initial_results_resume_at_first_missing_step(self, make_controller, tenant_results):
        initial = {key: tenant_results[key] for key in ("personal", "employment")}
        controller = make_controller(initial_results=initial)

        assert controller.current_key == "employer"
        assert controller.state.has_result("employment")
        assert "employer" in controller.visible_keys

    def test_invalid_initial_results_dropped(self, make_controller, tenant_results):
        initial = {
            "personal": dict(tenant_results["personal"], email="broken"),
            "payment": {"amount": 1},
        }
        controller = make_controller(initial_results=initial)

        assert controller.current_key == "personal"
        assert controller.state.has_result("personal") is False

    def test_context_values_feed_predicates(self, make_controller):
        steps = [
            WizardStep("a", "A"),
            WizardStep("b", "B", predicate=lambda values: values.get("propertyId") is not None),
        ]

        assert make_controller(steps=steps).visible_keys == ["a"]
        assert make_controller(steps=steps, context_values={"propertyId": 7}).visible_keys == ["a", "b"]


class TestAdvance:
    """Test validation-gated forward navigation."""

    def test_invalid_email_keeps_step(self, make_controller, tenant_results, qtbot):
        controller = make_controller()
        raw = dict(tenant_results["personal"], email="not-an-email")

        with qtbot.waitSignal(controller.validation_failed, timeout=1000) as blocker:
            result = controller.advance(raw)

        assert result.is_valid is False
        assert result.field_errors == {"email": "Invalid email address"}
        assert blocker.args[0] is result
        assert controller.current_key == "personal"
        assert controller.state.has_result("personal") is False

    @pytest.mark.parametrize("step_key", TENANT_KEYS)
    def test_failed_advance_changes_nothing(self, make_controller, tenant_results, step_key):
        position = TENANT_KEYS.index(step_key)
        initial = {key: tenant_results[key] for key in TENANT_KEYS[:position]}
        controller = make_controller(initial_results=initial)
        assert controller.current_key == step_key

        before = controller.to_dict()
        visible_before = controller.visible_keys
        result = controller.advance({})

        assert result.is_valid is False
        assert controller.to_dict() == before
        assert controller.visible_keys == visible_before

    def test_valid_advance_stores_result_and_moves_on(self, make_controller, tenant_results, qtbot):
        controller = make_controller()

        with qtbot.waitSignal(controller.step_changed, timeout=1000) as blocker:
            result = controller.advance(tenant_results["personal"])

        assert result.is_valid is True
        assert blocker.args == ["personal", "employment"]
        assert controller.state.get_result("personal")["firstName"] == "Anna"
        assert controller.state.highest_reached == 1

    def test_highest_reached_grows_with_each_advance(self, make_controller, tenant_results):
        controller = make_controller()
        markers = [controller.state.highest_reached]
        while controller.current_key != REVIEW:
            controller.advance(tenant_results[controller.current_key])
            markers.append(controller.state.highest_reached)

        assert markers == sorted(set(markers))
        assert controller.state.highest_reached == len(TENANT_KEYS)

    def test_advance_uses_pending_input_when_omitted(self, make_controller, tenant_results):
        controller = make_controller()
        controller.update_pending_input(tenant_results["personal"])

        assert controller.advance().is_valid is True
        assert controller.current_key == "employment"

    def test_advance_at_review_is_rejected(self, make_controller, tenant_results):
        controller = make_controller()
        complete_all(controller, tenant_results)
        result = controller.advance({})

        assert result.is_valid is False
        assert result.errors == ["There is no further step."]
        assert controller.current_key == REVIEW

    def test_skips_hidden_steps(self, make_controller, tenant_results):
        controller = make_controller()
        controller.advance(tenant_results["personal"])
        controller.advance({"employmentStatus": "student"})

        assert controller.current_key == "references"
        assert "employer" not in controller.visible_keys

    def test_current_step_hidden_by_its_own_input(self, make_controller):
        steps = [
            WizardStep("a", "A"),
            WizardStep("b", "B", StepSchema([TextField("name")]),
                       predicate=lambda values: not values.get("skipB")),
            WizardStep("c", "C"),
        ]
        controller = make_controller(steps=steps)
        controller.advance({})
        assert controller.current_key == "b"

        controller.update_pending_input({"skipB": True})
        assert controller.current_key == "b"
        assert controller.visible_keys == ["a", "c"]

        result = controller.advance({"skipB": True})
        assert result.is_valid is True
        assert controller.current_key == "c"
        assert controller.state.has_result("b") is False


class TestConditionalSteps:
    """Test visibility and the progress denominator."""

    def test_unemployed_skips_employment_step(self, make_controller):
        controller = make_controller(steps=short_wizard_steps())
        assert controller.progress().total == 3

        controller.update_pending_input({"firstName": "Anna", "employmentStatus": "unemployed"})
        assert controller.progress().total == 2

        controller.advance({"firstName": "Anna", "employmentStatus": "unemployed"})
        assert controller.current_key == REVIEW
        assert controller.progress().ordinal == 2

    def test_visibility_signal(self, make_controller, qtbot):
        controller = make_controller(steps=short_wizard_steps())

        with qtbot.waitSignal(controller.visibility_changed, timeout=1000) as blocker:
            controller.update_pending_input({"employmentStatus": "unemployed"})
        assert blocker.args == [["personal"]]

    def test_hidden_step_keeps_result_but_is_not_submitted(self, make_controller, make_gateway,
                                                           tenant_results):
        gateway = make_gateway()
        controller = make_controller(gateway=gateway)
        complete_all(controller, tenant_results)
        assert controller.state.has_result("employer")

        assert controller.jump_to("employment") is True
        controller.advance({"employmentStatus": "unemployed"})

        assert controller.state.has_result("employer") is True
        assert "employer" not in controller.visible_keys
        assert "employer" not in controller.build_submission().sections

        assert controller.jump_to(REVIEW) is True
        assert controller.submit() is True
        assert "employer" not in gateway.submissions[0].sections
        assert gateway.submissions[0].sections["employment"] == {"employmentStatus": "unemployed"}

    def test_progress_rounds_half_up(self, make_controller):
        steps = [WizardStep(f"s{index}", f"Step {index}") for index in range(7)]
        progress = make_controller(steps=steps).progress()

        assert progress.total == 8
        assert progress.ordinal == 1
        assert progress.percentage == 13

    def test_progress_at_review_is_full(self, make_controller, tenant_results):
        controller = make_controller()
        complete_all(controller, tenant_results)
        progress = controller.progress()

        assert progress.ordinal == progress.total == 10
        assert progress.percentage == 100


class TestBackAndJump:
    """Test backward navigation."""

    def test_retreat_without_validation(self, make_controller, tenant_results):
        controller = make_controller()
        controller.advance(tenant_results["personal"])
        controller.update_pending_input({"employmentStatus": "nonsense"})

        assert controller.retreat() is True
        assert controller.current_key == "personal"
        assert controller.state.has_result("employment") is False

    def test_retreat_on_first_step(self, make_controller):
        controller = make_controller()
        assert controller.retreat() is False
        assert controller.current_key == "personal"

    def test_retreat_skips_hidden_steps(self, make_controller, tenant_results):
        controller = make_controller()
        controller.advance(tenant_results["personal"])
        controller.advance({"employmentStatus": "retired"})

        controller.retreat()
        assert controller.current_key == "employment"

    def test_retreat_then_advance_is_idempotent(self, make_controller, tenant_results):
        controller = make_controller()
        controller.advance(tenant_results["personal"])
        controller.advance(tenant_results["employment"])
        before = copy.deepcopy(controller.state.results)

        controller.retreat()
        controller.advance(tenant_results["employment"])

        assert controller.current_key == "employer"
        assert controller.state.results == before

    def test_jump_to_reached_step(self, make_controller, tenant_results):
        controller = make_controller()
        complete_all(controller, tenant_results)

        assert controller.jump_to("banking") is True
        assert controller.current_key == "banking"
        # marker stays at review, so returning is allowed
        assert controller.jump_to(REVIEW) is True

    @pytest.mark.parametrize("target", ["references", "payment", COMPLETE])
    def test_jump_to_refused(self, make_controller, tenant_results, target):
        controller = make_controller()
        controller.advance(tenant_results["personal"])

        assert controller.jump_to(target) is False
        assert controller.current_key == "employment"

    def test_jump_to_hidden_step_refused(self, make_controller, tenant_results):
        controller = make_controller()
        complete_all(controller, tenant_results)
        controller.jump_to("employment")
        controller.advance({"employmentStatus": "unemployed"})

        assert controller.jump_to("employer") is False


class TestSubmission:
    """Test submitting from review."""

    def test_submit_only_from_review(self, make_controller, make_gateway):
        gateway = make_gateway()
        controller = make_controller(gateway=gateway)

        assert controller.submit() is False
        assert gateway.submissions == []

    def test_submit_refused_when_required_step_missing(self, make_controller, make_gateway,
                                                       tenant_results):
        steps = [
            WizardStep("a", "A", StepSchema([TextField("name")])),
            WizardStep("b", "B"),
        ]
        gateway = make_gateway()
        controller = make_controller(steps=steps, gateway=gateway,
                                     initial_results={"b": {}})
        # reach review without completing "a"
        controller.state.current_key = REVIEW
        controller.state.mark_reached(REVIEW)

        assert controller.missing_required_steps() == ["a"]
        assert controller.submit() is False
        assert gateway.submissions == []
        assert controller.state.last_error == "Please complete the following sections first: A"

    def test_successful_submission(self, make_controller, make_gateway, tenant_results, qtbot):
        gateway = make_gateway([{"id": 42}])
        controller = make_controller(gateway=gateway, context_values={"propertyId": 7})
        complete_all(controller, tenant_results)

        with qtbot.waitSignal(controller.submission_succeeded, timeout=1000) as blocker:
            assert controller.submit() is True

        assert blocker.args == [{"id": 42}]
        snapshot = controller.snapshot()
        assert snapshot.current_key == COMPLETE
        assert snapshot.status == WizardState.STATUS_COMPLETED
        assert snapshot.submission_id == 42
        assert dict(snapshot.results) == {}

        submission = gateway.submissions[0]
        assert submission.step_keys == TENANT_KEYS
        assert submission.context == {"propertyId": 7}
        assert submission.sections["lease"]["rentAmount"] == 950.0

    def test_no_navigation_after_completion(self, make_controller, tenant_results):
        controller = make_controller()
        complete_all(controller, tenant_results)
        controller.submit()

        assert controller.retreat() is False
        assert controller.jump_to("personal") is False
        assert controller.advance({}).is_valid is False
        assert controller.submit() is False

    def test_failure_stays_in_review_and_retry_resends(self, make_controller, make_gateway,
                                                       tenant_results, qtbot):
        gateway = make_gateway([GatewayError("DB unavailable", status_code=500), {"id": 5}])
        controller = make_controller(gateway=gateway)
        complete_all(controller, tenant_results)

        with qtbot.waitSignal(controller.submission_failed, timeout=1000) as blocker:
            controller.submit()

        assert blocker.args == ["DB unavailable"]
        assert controller.current_key == REVIEW
        assert controller.state.last_error == "DB unavailable"
        assert controller.state.status == WizardState.STATUS_IN_PROGRESS

        assert controller.submit() is True
        assert len(gateway.submissions) == 2
        assert gateway.submissions[0].to_payload() == gateway.submissions[1].to_payload()
        assert controller.current_key == COMPLETE
        assert controller.state.last_error is None

    def test_unexpected_gateway_error_is_mapped(self, make_controller, make_gateway, tenant_results):
        controller = make_controller(gateway=make_gateway([RuntimeError("boom")]))
        complete_all(controller, tenant_results)
        controller.submit()

        assert controller.state.last_error == "An unexpected error occurred."
        assert controller.current_key == REVIEW

    def test_cancel_discards_data(self, make_controller, tenant_results):
        controller = make_controller()
        controller.advance(tenant_results["personal"])

        assert controller.cancel() is True
        assert controller.state.status == WizardState.STATUS_CANCELLED
        assert controller.state.results == {}
        assert controller.advance(tenant_results["employment"]).is_valid is False


class BlockingGateway:
    """Gateway that holds the request until released."""

    def __init__(self):
        self.started = threading.Event()
        self.release = threading.Event()
        self.calls = 0

    def submit(self, submission):
        self.calls += 1
        self.started.set()
        self.release.wait(5)
        return {"id": 99}


class TestBackgroundSubmission:
    """Test submission on the worker thread."""

    def test_navigation_locked_while_in_flight(self, make_controller, tenant_results, qtbot):
        gateway = BlockingGateway()
        controller = make_controller(gateway=gateway, run_in_background=True)
        complete_all(controller, tenant_results)
        locks = []
        controller.navigation_locked_changed.connect(locks.append)

        assert controller.submit() is True
        assert gateway.started.wait(5)
        assert controller.is_submitting is True
        assert controller.snapshot().is_submitting is True

        assert controller.submit() is False
        assert controller.retreat() is False
        assert controller.jump_to("personal") is False
        assert controller.advance({}).errors == ["Please wait until the submission has finished."]
        assert controller.cancel() is False
        assert gateway.calls == 1

        with qtbot.waitSignal(controller.submission_succeeded, timeout=5000):
            gateway.release.set()

        assert controller.current_key == COMPLETE
        assert controller.is_submitting is False
        assert locks == [True, False]


class TestRestore:
    """Test resuming a serialized session."""

    def test_round_trip_through_dict(self, make_controller, tenant_results):
        controller = make_controller(context_values={"propertyId": 7})
        for key in ("personal", "employment", "employer"):
            controller.advance(tenant_results[key])
        controller.jump_to("employment")
        saved = controller.to_dict()

        restored = make_controller()
        restored.restore_from_dict(saved)

        assert restored.state.wizard_id == controller.state.wizard_id
        assert restored.current_key == "employment"
        assert restored.state.context_values == {"propertyId": 7}
        assert restored.state.get_result("employer") == controller.state.get_result("employer")

    def test_restore_drops_invalid_results(self, make_controller, tenant_results):
        controller = make_controller()
        saved = controller.to_dict()
        saved["results"] = {
            "personal": tenant_results["personal"],
            "employment": {"employmentStatus": "astronaut"},
        }
        saved["current_key"] = "references"
        saved["highest_reached"] = 3

        controller.restore_from_dict(saved)

        assert controller.state.has_result("personal") is True
        assert controller.state.has_result("employment") is False
        assert controller.current_key == "employment"

    def test_malformed_prior_data_is_dropped(self, make_controller, tenant_results):
        position = TENANT_KEYS.index("documents")
        initial = {key: tenant_results[key] for key in TENANT_KEYS[:position]}
        initial["documents"] = {"uploadedDocuments": 5}

        controller = make_controller(initial_results=initial)

        assert controller.state.has_result("documents") is False
        assert controller.current_key == "documents"

    def test_unvalidated_input_survives_round_trip(self, make_controller, tenant_results):
        controller = make_controller()
        controller.advance(tenant_results["personal"])
        controller.update_pending_input({"employmentStatus": "employed"})
        saved = controller.to_dict()

        assert saved["pending_input"] == {"employmentStatus": "employed"}

        restored = make_controller()
        restored.restore_from_dict(saved)

        assert restored.current_key == "employment"
        assert restored.state.pending_input == {"employmentStatus": "employed"}
        assert restored.state.has_result("employment") is False
        assert "employer" in restored.visible_keys

    def test_unvalidated_input_dropped_when_step_changes(self, make_controller, tenant_results):
        controller = make_controller()
        saved = controller.to_dict()
        saved["results"] = {"personal": tenant_results["personal"]}
        saved["current_key"] = "references"
        saved["pending_input"] = {"reference1Name": "Peter"}

        controller.restore_from_dict(saved)

        assert controller.current_key == "employment"
        assert controller.state.pending_input == {}


class TestStateNotifications:
    """Test that views are told about every visible change."""

    def test_failed_advance_reports_new_visibility(self, make_controller, qtbot):
        steps = [
            WizardStep("a", "A", StepSchema([TextField("name"), BooleanField("more")])),
            WizardStep("b", "B", predicate=lambda values: values.get("more")),
        ]
        controller = make_controller(steps=steps)
        assert controller.progress().total == 2

        with qtbot.waitSignal(controller.state_changed, timeout=1000) as blocker:
            result = controller.advance({"name": "", "more": True})

        assert result.is_valid is False
        assert blocker.args[0].progress.total == 3
        assert blocker.args[0].visible_keys == ("a", "b")
        assert controller.current_key == "a"

    def test_failed_advance_without_visibility_change_is_quiet(self, make_controller, qtbot):
        controller = make_controller()
        snapshots = []
        controller.state_changed.connect(snapshots.append)

        controller.advance({"firstName": "A"})

        assert snapshots == []
