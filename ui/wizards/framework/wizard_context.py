# -*- coding: utf-8 -*-
"""
Wizard State - the single mutable record of a wizard session.

Owned by WizardController; views only ever see a WizardSnapshot.

Provides:
- Step results keyed by step key
- Current step and highest-step-reached marker
- Serialization for drafts
- Reference number generation
"""

import copy
import uuid
from dataclasses import dataclass
from datetime import datetime
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

from models.submission import to_json_value
from services.exceptions import UnknownStepError

# Terminal states that follow the declared steps
REVIEW = "review"
COMPLETE = "complete"


@dataclass(frozen=True)
class ProgressInfo:
    """Derived progress values for display."""
    ordinal: int
    total: int
    percentage: int


@dataclass(frozen=True)
class WizardSnapshot:
    """Read-only view of the wizard state handed to views on each render."""
    current_key: str
    step_order: Tuple[str, ...]
    visible_keys: Tuple[str, ...]
    results: Mapping[str, Mapping[str, Any]]
    context: Mapping[str, Any]
    highest_reached: int
    progress: ProgressInfo
    status: str
    is_submitting: bool
    last_error: Optional[str]
    submission_id: Any = None

    @property
    def is_review(self) -> bool:
        return self.current_key == REVIEW

    @property
    def is_complete(self) -> bool:
        return self.current_key == COMPLETE

    def has_result(self, step_key: str) -> bool:
        return step_key in self.results


class WizardState:
    """State of one wizard session."""

    STATUS_IN_PROGRESS = "in_progress"
    STATUS_SUBMITTING = "submitting"
    STATUS_COMPLETED = "completed"
    STATUS_CANCELLED = "cancelled"

    def __init__(self, step_order: Sequence[str], context_values: Optional[Mapping[str, Any]] = None):
        self.wizard_id: str = str(uuid.uuid4())
        self.status: str = self.STATUS_IN_PROGRESS
        self.created_at: datetime = datetime.now()
        self.updated_at: datetime = datetime.now()
        self.reference_number: str = self._generate_reference_number()

        self.step_order: List[str] = list(step_order)
        self.current_key: str = self.step_order[0] if self.step_order else REVIEW
        self.highest_reached: int = 0

        # step key -> validated StepResult
        self.results: Dict[str, Dict[str, Any]] = {}
        # Unvalidated edits of the current step, used only for visibility
        self.pending_input: Dict[str, Any] = {}
        # Values fixed at wizard start (e.g. propertyId)
        self.context_values: Dict[str, Any] = dict(context_values or {})

        self.last_error: Optional[str] = None
        self.submission_id: Any = None

    def _generate_reference_number(self) -> str:
        """
        Generate a unique reference number for the wizard session.

        Format: ONB-{YYYYMMDDHHMMSS}-{SHORT_UUID}
        Example: ONB-20260118153045-A3F2
        """
        timestamp = datetime.now().strftime("%Y%m%d%H%M%S")
        short_id = self.wizard_id[:4].upper()
        return f"ONB-{timestamp}-{short_id}"

    def touch(self):
        self.updated_at = datetime.now()

    # =========================================================================
    # Step positions
    # =========================================================================

    def index_of(self, key: str) -> int:
        """Position of a step key; review and complete follow the declared steps."""
        if key == REVIEW:
            return len(self.step_order)
        if key == COMPLETE:
            return len(self.step_order) + 1
        try:
            return self.step_order.index(key)
        except ValueError:
            raise UnknownStepError(key)

    def is_known(self, key: str) -> bool:
        return key in (REVIEW, COMPLETE) or key in self.step_order

    def mark_reached(self, key: str):
        """Advance the highest-reached marker (never moves backwards)."""
        self.highest_reached = max(self.highest_reached, self.index_of(key))

    def is_reached(self, key: str) -> bool:
        return self.index_of(key) <= self.highest_reached

    # =========================================================================
    # Results
    # =========================================================================

    def store_result(self, key: str, data: Mapping[str, Any]):
        self.index_of(key)
        self.results[key] = dict(data)
        self.touch()

    def has_result(self, key: str) -> bool:
        return key in self.results

    def get_result(self, key: str) -> Optional[Dict[str, Any]]:
        result = self.results.get(key)
        return dict(result) if result is not None else None

    def accumulated_values(self, include_pending: bool = True) -> Dict[str, Any]:
        """
        Flat view used by display predicates.

        Context values first, then stored results in step order, then the
        current step's unvalidated edits. Later entries win on equal names.
        """
        values: Dict[str, Any] = dict(self.context_values)
        for key in self.step_order:
            if key in self.results:
                values.update(self.results[key])
        if include_pending:
            values.update(self.pending_input)
        return values

    def discard(self):
        """Drop collected data (after submission or explicit exit)."""
        self.results.clear()
        self.pending_input.clear()
        self.touch()

    # =========================================================================
    # Snapshot & serialization
    # =========================================================================

    def snapshot(self, visible_keys: Sequence[str], progress: ProgressInfo) -> WizardSnapshot:
        results = {
            key: MappingProxyType(copy.deepcopy(value)) for key, value in self.results.items()
        }
        return WizardSnapshot(
            current_key=self.current_key,
            step_order=tuple(self.step_order),
            visible_keys=tuple(visible_keys),
            results=MappingProxyType(results),
            context=MappingProxyType(dict(self.context_values)),
            highest_reached=self.highest_reached,
            progress=progress,
            status=self.status,
            is_submitting=self.status == self.STATUS_SUBMITTING,
            last_error=self.last_error,
            submission_id=self.submission_id,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize state to a JSON-friendly dictionary."""
        return {
            "wizard_id": self.wizard_id,
            "reference_number": self.reference_number,
            "status": self.status,
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
            "step_order": list(self.step_order),
            "current_key": self.current_key,
            "highest_reached": self.highest_reached,
            "results": to_json_value(self.results),
            "context_values": to_json_value(self.context_values),
            "pending_input": to_json_value(self.pending_input),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'WizardState':
        """
        Restore state from a dictionary.

        Results are restored as stored; WizardController re-validates them
        before they are trusted.
        """
        state = cls(data.get("step_order", []), data.get("context_values"))
        state.wizard_id = data.get("wizard_id", state.wizard_id)
        state.reference_number = data.get("reference_number", state.reference_number)
        state.status = data.get("status", cls.STATUS_IN_PROGRESS)
        state.current_key = data.get("current_key", state.current_key)
        state.highest_reached = data.get("highest_reached", 0)
        state.results = {key: dict(value) for key, value in data.get("results", {}).items()}
        state.pending_input = dict(data.get("pending_input") or {})

        # Parse datetime strings
        if "created_at" in data:
            state.created_at = datetime.fromisoformat(data["created_at"])
        if "updated_at" in data:
            state.updated_at = datetime.fromisoformat(data["updated_at"])
        return state
