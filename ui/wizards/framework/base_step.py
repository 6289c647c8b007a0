# -*- coding: utf-8 -*-
"""
Base Step - step definitions and the abstract step form.

WizardStep describes a step to the controller (key, label, schema, display
predicate). BaseStep is the widget that renders one step; subclasses implement:
- setup_ui(): Create the step's UI
- collect_data(): Collect raw data from UI
- populate_data(): Populate UI with stored data
"""

from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple
from abc import ABCMeta, abstractmethod
from dataclasses import dataclass

from PyQt5.QtWidgets import QWidget, QVBoxLayout, QLabel
from PyQt5.QtCore import pyqtSignal

from services.translation_manager import tr
from services.validation import StepValidationResult, ValidationStrategy

DisplayPredicate = Callable[[Mapping[str, Any]], bool]


@dataclass(frozen=True)
class WizardStep:
    """
    Declaration of one wizard step.

    Attributes:
        key: Unique step identifier (also the section key in the submission)
        label: Translation key of the human label
        schema: Validation strategy for the step's input (None = nothing to validate)
        predicate: Decides from accumulated values whether the step is shown
        required: Submission needs this step's result while it is visible
        description: Translation key of a short explanation
    """
    key: str
    label: str
    schema: Optional[ValidationStrategy] = None
    predicate: Optional[DisplayPredicate] = None
    required: bool = True
    description: str = ""

    def is_visible(self, values: Mapping[str, Any]) -> bool:
        if self.predicate is None:
            return True
        return bool(self.predicate(values))


# Combine PyQt5 metaclass with ABC metaclass
class ABCQWidgetMeta(type(QWidget), ABCMeta):
    """Metaclass that combines PyQt5's metaclass with ABC."""
    pass


class BaseStep(QWidget, metaclass=ABCQWidgetMeta):
    """
    Abstract base class for step forms.

    A step form never writes wizard state. It reports raw input through
    `input_changed` and `collect_data()`; the wizard hands that to the
    controller.
    """

    # Signals
    input_changed = pyqtSignal(dict)

    def __init__(self, definition: WizardStep, parent: Optional[QWidget] = None):
        """
        Initialize the step.

        Args:
            definition: The step declaration this form renders
            parent: Parent widget
        """
        super().__init__(parent)
        self.definition = definition
        self._is_initialized = False

        # Main layout
        self.main_layout = QVBoxLayout(self)
        self.main_layout.setContentsMargins(20, 20, 20, 20)
        self.main_layout.setSpacing(12)

    @property
    def key(self) -> str:
        return self.definition.key

    def initialize(self):
        """
        Initialize the step (called once).

        This method is called the first time the step is shown.
        """
        if not self._is_initialized:
            self._setup_header()
            self.setup_ui()
            self.main_layout.addStretch()
            self._is_initialized = True

    def _setup_header(self):
        description = self.get_step_description()
        if description:
            description_label = QLabel(description)
            description_label.setWordWrap(True)
            description_label.setObjectName("stepDescription")
            self.main_layout.addWidget(description_label)

    def on_show(self, values: Optional[Mapping[str, Any]] = None):
        """
        Called when the step is shown.

        Args:
            values: Stored result of this step, if any
        """
        if not self._is_initialized:
            self.initialize()
        self.clear_errors()
        if values:
            self.populate_data(values)

    def on_hide(self):
        """Called when the step is hidden (moving to another step)."""
        pass

    # =========================================================================
    # Abstract Methods - Must be implemented by subclasses
    # =========================================================================

    @abstractmethod
    def setup_ui(self):
        """
        Setup the step's UI.

        This method is called once during initialization.
        """

    @abstractmethod
    def collect_data(self) -> Dict[str, Any]:
        """
        Collect raw data from the step's UI.

        Returns:
            Dictionary of raw field values (unvalidated)
        """

    @abstractmethod
    def populate_data(self, values: Mapping[str, Any]):
        """Fill the UI with a previously stored result."""

    # =========================================================================
    # Optional Methods - Can be overridden by subclasses
    # =========================================================================

    def show_validation_result(self, result: StepValidationResult):
        """Display field errors next to their fields."""
        self.show_field_errors(result.field_errors)

    def show_field_errors(self, errors: Mapping[str, str]):
        pass

    def clear_errors(self):
        self.show_field_errors({})

    def format_summary(self, values: Mapping[str, Any]) -> List[Tuple[str, str]]:
        """(label, display value) rows for the review page."""
        return [(name, "" if value is None else str(value)) for name, value in values.items()]

    def get_step_title(self) -> str:
        return tr(self.definition.label)

    def get_step_description(self) -> str:
        return tr(self.definition.description) if self.definition.description else ""

    def emit_input_changed(self):
        self.input_changed.emit(self.collect_data())
