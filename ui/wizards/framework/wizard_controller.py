# -*- coding: utf-8 -*-
"""
Wizard Controller - sequences the steps of a wizard.

Handles:
- Validation before advancing
- Step visibility (display predicates over accumulated values)
- Back / jump navigation
- Progress
- Single in-flight submission through a SubmissionGateway
"""

from typing import Any, Dict, List, Mapping, Optional, Sequence

from PyQt5.QtCore import QObject, pyqtSignal, pyqtSlot

from models.submission import CompositeSubmission
from services.exceptions import UnknownStepError
from services.submission_gateway import SubmissionGateway
from services.translation_manager import tr
from services.validation import StepSchemaSet, StepValidationResult
from utils.logger import get_logger
from .base_step import WizardStep
from .submission_worker import SubmissionWorker, perform_submission
from .wizard_context import COMPLETE, REVIEW, ProgressInfo, WizardSnapshot, WizardState

logger = get_logger(__name__)


class WizardController(QObject):
    """
    Owns the WizardState of one session.

    Views never touch the state; they call the navigation methods and render
    the WizardSnapshot carried by `state_changed`.
    """

    # Signals
    step_changed = pyqtSignal(str, str)  # old_key, new_key
    state_changed = pyqtSignal(object)  # WizardSnapshot
    validation_failed = pyqtSignal(object)  # StepValidationResult
    visibility_changed = pyqtSignal(list)  # visible step keys
    navigation_locked_changed = pyqtSignal(bool)
    submission_started = pyqtSignal()
    submission_succeeded = pyqtSignal(dict)
    submission_failed = pyqtSignal(str)

    def __init__(self, steps: Sequence[WizardStep], gateway: SubmissionGateway,
                 context_values: Optional[Mapping[str, Any]] = None,
                 initial_results: Optional[Mapping[str, Mapping[str, Any]]] = None,
                 run_in_background: bool = True, parent: Optional[QObject] = None):
        """
        Initialize the controller.

        Args:
            steps: Step declarations in display order
            gateway: Receives the CompositeSubmission on submit()
            context_values: Values fixed at wizard start (e.g. propertyId)
            initial_results: Partial prior data keyed by step; re-validated
            run_in_background: Submit on a QThread (False runs the gateway inline)
            parent: Parent QObject
        """
        super().__init__(parent)
        keys = [step.key for step in steps]
        if len(set(keys)) != len(keys):
            raise ValueError(f"Duplicate step keys: {keys}")
        for reserved in (REVIEW, COMPLETE):
            if reserved in keys:
                raise ValueError(f"'{reserved}' is reserved and cannot be a step key")

        self.steps: List[WizardStep] = list(steps)
        self._steps_by_key: Dict[str, WizardStep] = {step.key: step for step in self.steps}
        self.schemas = StepSchemaSet({step.key: step.schema for step in self.steps})
        self.gateway = gateway
        self.run_in_background = run_in_background

        self.state = WizardState(keys, context_values)
        self._visible_keys: List[str] = self._compute_visible()
        self._worker: Optional[SubmissionWorker] = None

        self._seed(initial_results or {})

    # =========================================================================
    # Queries
    # =========================================================================

    @property
    def current_key(self) -> str:
        return self.state.current_key

    @property
    def visible_keys(self) -> List[str]:
        return list(self._visible_keys)

    @property
    def is_submitting(self) -> bool:
        return self.state.status == WizardState.STATUS_SUBMITTING

    def get_step(self, key: str) -> WizardStep:
        if key not in self._steps_by_key:
            raise UnknownStepError(key)
        return self._steps_by_key[key]

    def is_visible(self, key: str) -> bool:
        return key in self._visible_keys

    def progress(self) -> ProgressInfo:
        """
        Ordinal of the current step among visible steps, total visible steps
        (review included) and the rounded-half-up percentage.
        """
        total = len(self._visible_keys) + 1
        key = self.state.current_key
        if key in (REVIEW, COMPLETE):
            ordinal = total
        elif key in self._visible_keys:
            ordinal = self._visible_keys.index(key) + 1
        else:
            # hidden current step: position it would take
            position = self.state.index_of(key)
            ordinal = min(total, 1 + sum(
                1 for visible in self._visible_keys if self.state.index_of(visible) < position
            ))
        percentage = (ordinal * 200 + total) // (2 * total)
        return ProgressInfo(ordinal=ordinal, total=total, percentage=percentage)

    def snapshot(self) -> WizardSnapshot:
        return self.state.snapshot(self._visible_keys, self.progress())

    def missing_required_steps(self) -> List[str]:
        """Visible required steps without a stored result."""
        return [
            step.key for step in self.steps
            if step.required and step.key in self._visible_keys
            and not self.state.has_result(step.key)
        ]

    def build_submission(self) -> CompositeSubmission:
        """Results of visible steps plus the context values."""
        sections = {
            key: self.state.get_result(key)
            for key in self.state.step_order
            if key in self._visible_keys and self.state.has_result(key)
        }
        return CompositeSubmission(
            sections=sections,
            context=dict(self.state.context_values),
            wizard_id=self.state.wizard_id,
        )

    # =========================================================================
    # Navigation
    # =========================================================================

    def update_pending_input(self, raw_input: Mapping[str, Any]):
        """
        Record unvalidated edits of the current step.

        Only visibility is recomputed; nothing is stored and the current step
        does not change even if it becomes hidden.
        """
        if not self._accepts_navigation("update_pending_input"):
            return
        if self.state.current_key not in self._steps_by_key:
            return
        self.state.pending_input = dict(raw_input or {})
        if self._refresh_visibility():
            self._emit_state()

    def advance(self, raw_input: Optional[Mapping[str, Any]] = None) -> StepValidationResult:
        """
        Validate the current step and move to the next visible step.

        Args:
            raw_input: Raw field values of the current step; the pending input
                       is used when omitted

        Returns:
            The validation result; on failure the wizard stays on the step
        """
        if self.is_submitting:
            logger.warning("advance() ignored: submission in progress")
            return StepValidationResult.rejected(tr("wizard.error.submission_in_flight"))
        if self.state.status != WizardState.STATUS_IN_PROGRESS:
            logger.warning(f"advance() ignored: wizard is {self.state.status}")
            return StepValidationResult.rejected(tr("wizard.error.nothing_to_advance"))

        key = self.state.current_key
        if key in (REVIEW, COMPLETE):
            logger.warning(f"advance() ignored at '{key}'")
            return StepValidationResult.rejected(tr("wizard.error.nothing_to_advance"))

        if raw_input is not None:
            self.state.pending_input = dict(raw_input)
            refreshed = self._refresh_visibility()
        else:
            refreshed = False

        if key not in self._visible_keys:
            logger.info(f"Step '{key}' is hidden, moving past it")
            self._move_to(self._next_visible_after(key))
            return StepValidationResult.success({})

        result = self.schemas.validate(key, self.state.pending_input)
        if not result.is_valid:
            logger.warning(f"Step '{key}' validation failed: {result.all_messages()}")
            self.validation_failed.emit(result)
            if refreshed:
                self._emit_state()
            return result

        self.state.store_result(key, result.data)
        self.state.pending_input = {}
        self._refresh_visibility()
        self._move_to(self._next_visible_after(key))
        return result

    def retreat(self) -> bool:
        """Go to the previous visible step without validating."""
        if not self._accepts_navigation("retreat"):
            return False

        key = self.state.current_key
        if key == COMPLETE:
            logger.warning("retreat() ignored: wizard is complete")
            return False

        target = self._previous_visible_before(key)
        if target is None:
            if key in self._visible_keys:
                logger.debug(f"retreat() ignored: '{key}' is the first step")
                return False
            target = self._next_visible_after(key)

        self._move_to(target)
        return True

    def jump_to(self, step_key: str) -> bool:
        """
        Go directly to a step already reached (review "Edit" links).

        Unknown, hidden or not-yet-reached steps are refused.
        """
        if not self._accepts_navigation("jump_to"):
            return False
        if not self.state.is_known(step_key) or step_key == COMPLETE:
            logger.warning(f"jump_to() ignored: unknown step '{step_key}'")
            return False
        if step_key != REVIEW and step_key not in self._visible_keys:
            logger.warning(f"jump_to() ignored: step '{step_key}' is hidden")
            return False
        if not self.state.is_reached(step_key):
            logger.warning(f"jump_to() ignored: step '{step_key}' not reached yet")
            return False
        if step_key != self.state.current_key:
            self._move_to(step_key)
        return True

    def submit(self) -> bool:
        """
        Send the CompositeSubmission through the gateway.

        Only allowed from review. The outcome arrives through
        `submission_succeeded` / `submission_failed`.

        Returns:
            True if a submission was started
        """
        if self.is_submitting:
            logger.warning("submit() ignored: submission already in flight")
            return False
        if self.state.current_key != REVIEW or self.state.status != WizardState.STATUS_IN_PROGRESS:
            logger.warning(f"submit() ignored at '{self.state.current_key}'")
            return False

        missing = self.missing_required_steps()
        if missing:
            logger.warning(f"submit() refused, missing steps: {missing}")
            labels = ", ".join(tr(self._steps_by_key[key].label) for key in missing)
            self.state.last_error = tr("wizard.error.incomplete_steps", steps=labels)
            self._emit_state()
            return False

        submission = self.build_submission()
        self.state.status = WizardState.STATUS_SUBMITTING
        self.state.last_error = None
        logger.info(f"Submitting wizard {self.state.reference_number}: {submission.step_keys}")

        self.navigation_locked_changed.emit(True)
        self.submission_started.emit()
        self._emit_state()

        if self.run_in_background:
            self._worker = SubmissionWorker(self.gateway, submission, self)
            self._worker.succeeded.connect(self._on_submission_succeeded)
            self._worker.failed.connect(self._on_submission_failed)
            self._worker.finished.connect(self._worker.deleteLater)
            self._worker.start()
        else:
            response, error = perform_submission(self.gateway, submission)
            if error is None:
                self._on_submission_succeeded(response)
            else:
                self._on_submission_failed(error)
        return True

    def cancel(self) -> bool:
        """Explicit exit: discard collected data."""
        if self.is_submitting:
            logger.warning("cancel() ignored: submission in progress")
            return False
        if self.state.status != WizardState.STATUS_IN_PROGRESS:
            return False
        self.state.status = WizardState.STATUS_CANCELLED
        self.state.discard()
        logger.info(f"Wizard {self.state.reference_number} cancelled")
        self._emit_state()
        return True

    def restore_from_dict(self, data: Mapping[str, Any]):
        """
        Resume a saved session (draft).

        Stored results are re-validated; invalid ones are dropped. The saved
        current step is kept when it is still reachable.
        """
        if self.is_submitting:
            logger.warning("restore_from_dict() ignored: submission in progress")
            return
        saved = WizardState.from_dict(dict(data))
        self.state.wizard_id = saved.wizard_id
        self.state.reference_number = saved.reference_number
        self.state.created_at = saved.created_at
        self.state.context_values.update(saved.context_values)
        self.state.results.clear()
        self.state.pending_input = {}
        self.state.highest_reached = 0
        self._seed(saved.results, preferred_key=saved.current_key)
        if saved.pending_input and self.state.current_key == saved.current_key \
                and saved.current_key in self._steps_by_key:
            # unvalidated input typed on the step the draft was saved at
            self.state.pending_input = dict(saved.pending_input)
            self._refresh_visibility()
        self._emit_state()

    def to_dict(self) -> Dict[str, Any]:
        """Serialized state for drafts."""
        return self.state.to_dict()

    # =========================================================================
    # Internals
    # =========================================================================

    def _accepts_navigation(self, action: str) -> bool:
        if self.is_submitting:
            logger.warning(f"{action}() ignored: submission in progress")
            return False
        if self.state.status != WizardState.STATUS_IN_PROGRESS:
            logger.warning(f"{action}() ignored: wizard is {self.state.status}")
            return False
        return True

    def _seed(self, initial_results: Mapping[str, Mapping[str, Any]],
              preferred_key: Optional[str] = None):
        for key in initial_results:
            if key not in self._steps_by_key:
                logger.warning(f"Ignoring prior data for unknown step '{key}'")

        for key in self.state.step_order:
            if key not in initial_results:
                continue
            result = self.schemas.validate(key, initial_results[key])
            if result.is_valid:
                self.state.results[key] = dict(result.data)
            else:
                logger.warning(f"Dropping invalid prior data for step '{key}': {result.field_errors}")

        self._refresh_visibility()

        resume_key = next(
            (key for key in self._visible_keys if not self.state.has_result(key)),
            REVIEW
        )
        self.state.current_key = resume_key
        self.state.mark_reached(resume_key)

        if (preferred_key and preferred_key != resume_key
                and (preferred_key == REVIEW or preferred_key in self._visible_keys)
                and self.state.is_known(preferred_key)
                and self.state.is_reached(preferred_key)):
            self.state.current_key = preferred_key

        if initial_results:
            logger.info(
                f"Wizard seeded with {len(self.state.results)} step results, "
                f"resuming at '{self.state.current_key}'"
            )

    def _compute_visible(self) -> List[str]:
        values = self.state.accumulated_values()
        return [step.key for step in self.steps if step.is_visible(values)]

    def _refresh_visibility(self) -> bool:
        visible = self._compute_visible()
        if visible == self._visible_keys:
            return False
        logger.debug(f"Visible steps changed: {self._visible_keys} -> {visible}")
        self._visible_keys = visible
        self.visibility_changed.emit(list(visible))
        return True

    def _next_visible_after(self, key: str) -> str:
        position = self.state.index_of(key)
        for candidate in self.state.step_order[position + 1:]:
            if candidate in self._visible_keys:
                return candidate
        return REVIEW

    def _previous_visible_before(self, key: str) -> Optional[str]:
        position = self.state.index_of(key)
        for candidate in reversed(self.state.step_order[:position]):
            if candidate in self._visible_keys:
                return candidate
        return None

    def _move_to(self, target: str):
        old_key = self.state.current_key
        self.state.current_key = target
        self.state.pending_input = {}
        self.state.mark_reached(target)
        self.state.touch()
        self._refresh_visibility()

        logger.info(f"Navigating: '{old_key}' -> '{target}'")
        self.step_changed.emit(old_key, target)
        self._emit_state()

    def _emit_state(self):
        self.state_changed.emit(self.snapshot())

    def _release_worker(self):
        if self._worker is not None:
            # the worker emits its result just before run() returns
            self._worker.wait()
            self._worker = None

    @pyqtSlot(dict)
    def _on_submission_succeeded(self, response: Dict[str, Any]):
        old_key = self.state.current_key
        self.state.submission_id = response.get("id")
        self.state.status = WizardState.STATUS_COMPLETED
        self.state.last_error = None
        self.state.discard()
        self.state.current_key = COMPLETE
        self.state.mark_reached(COMPLETE)
        self._release_worker()
        logger.info(f"Wizard {self.state.reference_number} submitted, id={self.state.submission_id}")

        self.navigation_locked_changed.emit(False)
        self.step_changed.emit(old_key, COMPLETE)
        self.submission_succeeded.emit(dict(response))
        self._emit_state()

    @pyqtSlot(str)
    def _on_submission_failed(self, message: str):
        self.state.status = WizardState.STATUS_IN_PROGRESS
        self.state.last_error = message
        self._release_worker()
        logger.error(f"Wizard {self.state.reference_number} submission failed: {message}")

        self.navigation_locked_changed.emit(False)
        self.submission_failed.emit(message)
        self._emit_state()
