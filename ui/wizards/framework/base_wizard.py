# -*- coding: utf-8 -*-
"""
Base Wizard - Abstract base class for all wizards.

Provides unified wizard UI with:
- Header with title and progress
- Step container (step forms, review page, completion page)
- Navigation buttons (Cancel, Save draft, Back, Next/Submit)
- Draft persistence
"""

import sqlite3
from typing import Any, Dict, List, Mapping, Optional, Tuple
from abc import abstractmethod

from PyQt5.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel, QFrame, QStackedWidget, QProgressBar
)
from PyQt5.QtCore import pyqtSignal
from PyQt5.QtGui import QFont

from app.config import Config
from repositories.database import Database
from repositories.draft_repository import DraftRepository
from services.submission_gateway import SubmissionGateway
from services.translation_manager import tr
from services.validation import StepValidationResult
from ui.components.action_button import ActionButton
from ui.error_handler import ErrorHandler
from utils.logger import get_logger
from .base_step import ABCQWidgetMeta, BaseStep, WizardStep
from .review_step import CompletionPanel, ReviewPanel
from .wizard_context import COMPLETE, REVIEW, WizardSnapshot, WizardState
from .wizard_controller import WizardController

logger = get_logger(__name__)


class BaseWizard(QWidget, metaclass=ABCQWidgetMeta):
    """
    Abstract base class for wizards.

    Subclasses must implement:
    - create_steps(): step declarations paired with their forms
    - create_gateway(): where the finished wizard is submitted
    - get_wizard_title(): header title

    and set WIZARD_TYPE (used for drafts).
    """

    WIZARD_TYPE = ""

    # Signals
    wizard_completed = pyqtSignal(dict)  # gateway response
    wizard_cancelled = pyqtSignal()
    draft_saved = pyqtSignal(str)  # draft id

    def __init__(self, context_values: Optional[Mapping[str, Any]] = None,
                 initial_results: Optional[Mapping[str, Mapping[str, Any]]] = None,
                 draft_repository: Optional[DraftRepository] = None,
                 run_in_background: bool = True,
                 parent: Optional[QWidget] = None):
        """
        Initialize the wizard.

        Args:
            context_values: Values fixed at wizard start (e.g. propertyId)
            initial_results: Partial prior data keyed by step key
            draft_repository: Draft storage; a default SQLite one is created on first save
            run_in_background: Submit on a worker thread
            parent: Parent widget
        """
        super().__init__(parent)
        self.context_values: Dict[str, Any] = dict(context_values or {})
        self.draft_repository = draft_repository
        self.draft_id: Optional[str] = None
        self._shown_key: Optional[str] = None

        self.forms: Dict[str, BaseStep] = {}
        definitions: List[WizardStep] = []
        for definition, form in self.create_steps():
            definitions.append(definition)
            self.forms[definition.key] = form

        self.controller = WizardController(
            definitions,
            self.create_gateway(self.context_values),
            context_values=self.context_values,
            initial_results=initial_results,
            run_in_background=run_in_background,
            parent=self,
        )

        # Connect controller signals
        self.controller.state_changed.connect(self._render)
        self.controller.validation_failed.connect(self._on_validation_failed)
        self.controller.navigation_locked_changed.connect(self._on_navigation_locked)
        self.controller.submission_succeeded.connect(self._on_submission_succeeded)

        for key, form in self.forms.items():
            form.input_changed.connect(lambda data, k=key: self._on_form_input(k, data))

        # Setup UI
        self._setup_ui()
        self._render(self.controller.snapshot())

    # =========================================================================
    # Abstract Methods - Must be implemented by subclasses
    # =========================================================================

    @abstractmethod
    def create_steps(self) -> List[Tuple[WizardStep, BaseStep]]:
        """
        Create the steps in display order.

        Returns:
            List of (WizardStep declaration, step form) pairs
        """

    @abstractmethod
    def create_gateway(self, context_values: Mapping[str, Any]) -> SubmissionGateway:
        """Create the gateway that receives the finished wizard."""

    @abstractmethod
    def get_wizard_title(self) -> str:
        """Get wizard title."""

    # =========================================================================
    # Optional Methods - Can be overridden by subclasses
    # =========================================================================

    def get_submit_button_text(self) -> str:
        return tr("wizard.button.submit")

    def confirm_cancel(self) -> bool:
        """Ask before discarding entered data. Override to customize."""
        return ErrorHandler.confirm(self, tr("wizard.confirm_cancel"))

    # =========================================================================
    # Drafts
    # =========================================================================

    def _get_draft_repository(self) -> DraftRepository:
        if self.draft_repository is None:
            self.draft_repository = DraftRepository(Database())
        return self.draft_repository

    def save_draft(self) -> Optional[str]:
        """
        Store the current state as a draft.

        Returns:
            Draft ID if successful, None otherwise
        """
        form = self.current_form()
        if form is not None:
            self.controller.update_pending_input(form.collect_data())
        try:
            self.draft_id = self._get_draft_repository().save(
                self.WIZARD_TYPE, self.controller.to_dict(), self.draft_id
            )
        except sqlite3.Error as e:
            ErrorHandler.handle(e, self, context="draft")
            return None

        logger.info(f"Draft {self.draft_id} saved")
        self.status_label.setText(tr("wizard.draft_saved"))
        self.draft_saved.emit(self.draft_id)
        return self.draft_id

    @classmethod
    def load_from_draft(cls, draft_id: str,
                        draft_repository: Optional[DraftRepository] = None,
                        **kwargs) -> 'BaseWizard':
        """
        Rebuild a wizard from a saved draft.

        Raises:
            ValueError: if the draft does not exist
        """
        repository = draft_repository or DraftRepository(Database())
        data = repository.load(draft_id)
        if data is None:
            raise ValueError(f"Draft not found: {draft_id}")

        wizard = cls(
            context_values=data.get("context_values"),
            draft_repository=repository,
            **kwargs
        )
        wizard.draft_id = draft_id
        wizard._shown_key = None
        wizard.controller.restore_from_dict(data)
        form = wizard.current_form()
        pending = wizard.controller.state.pending_input
        if form is not None and pending:
            form.populate_data(dict(pending))
        logger.info(f"Wizard restored from draft {draft_id}")
        return wizard

    # =========================================================================
    # UI Setup
    # =========================================================================

    def _setup_ui(self):
        """Setup the wizard UI."""
        self.setMinimumSize(Config.WINDOW_MIN_WIDTH, Config.WINDOW_MIN_HEIGHT)
        self.setWindowTitle(self.get_wizard_title())

        main_layout = QVBoxLayout(self)
        main_layout.setContentsMargins(0, 0, 0, 0)
        main_layout.setSpacing(0)

        main_layout.addWidget(self._create_header())

        separator = QFrame()
        separator.setFrameShape(QFrame.HLine)
        separator.setStyleSheet(f"background-color: {Config.BORDER_COLOR};")
        separator.setFixedHeight(1)
        main_layout.addWidget(separator)

        # Step container
        self.step_container = QStackedWidget()
        for form in self.forms.values():
            self.step_container.addWidget(form)
        self.review_panel = ReviewPanel(self.forms)
        self.review_panel.edit_requested.connect(self.controller.jump_to)
        self.step_container.addWidget(self.review_panel)
        self.completion_panel = CompletionPanel()
        self.step_container.addWidget(self.completion_panel)
        main_layout.addWidget(self.step_container, 1)

        self.message_label = QLabel("")
        self.message_label.setWordWrap(True)
        self.message_label.setStyleSheet(f"color: {Config.ERROR_COLOR}; padding: 0 20px;")
        self.message_label.setVisible(False)
        main_layout.addWidget(self.message_label)

        main_layout.addWidget(self._create_footer())

    def _create_header(self) -> QWidget:
        """Create wizard header with title and progress."""
        header = QWidget()
        header.setStyleSheet(f"QWidget {{ background-color: {Config.HEADER_BG}; }}")

        layout = QVBoxLayout(header)
        layout.setContentsMargins(20, 16, 20, 16)
        layout.setSpacing(8)

        self.title_label = QLabel(self.get_wizard_title())
        title_font = QFont()
        title_font.setPointSize(14)
        title_font.setBold(True)
        self.title_label.setFont(title_font)
        layout.addWidget(self.title_label)

        self.step_title_label = QLabel("")
        self.step_title_label.setStyleSheet(f"color: {Config.TEXT_COLOR}; font-size: 13px;")
        layout.addWidget(self.step_title_label)

        progress_layout = QHBoxLayout()
        progress_layout.setSpacing(8)

        self.progress_label = QLabel("")
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
        """Create wizard footer with navigation buttons."""
        footer = QWidget()
        footer.setStyleSheet(f"QWidget {{ background-color: {Config.HEADER_BG}; }}")

        layout = QHBoxLayout(footer)
        layout.setContentsMargins(20, 16, 20, 16)
        layout.setSpacing(12)

        self.btn_cancel = ActionButton(tr("wizard.button.cancel"), variant="secondary")
        self.btn_cancel.clicked.connect(self._handle_cancel)
        layout.addWidget(self.btn_cancel)

        self.btn_save_draft = ActionButton(tr("wizard.button.save_draft"), variant="secondary", width=140)
        self.btn_save_draft.clicked.connect(self._handle_save_draft)
        layout.addWidget(self.btn_save_draft)

        self.status_label = QLabel("")
        self.status_label.setStyleSheet(f"color: {Config.TEXT_LIGHT};")
        layout.addWidget(self.status_label)

        layout.addStretch()

        self.btn_previous = ActionButton(tr("wizard.button.back"), variant="secondary")
        self.btn_previous.clicked.connect(self._handle_previous)
        layout.addWidget(self.btn_previous)

        self.btn_next = ActionButton(tr("wizard.button.next"), variant="primary", width=130)
        self.btn_next.clicked.connect(self._handle_next)
        layout.addWidget(self.btn_next)

        return footer

    # =========================================================================
    # Navigation Handlers
    # =========================================================================

    def current_form(self) -> Optional[BaseStep]:
        return self.forms.get(self.controller.current_key)

    def _on_form_input(self, key: str, data: Dict[str, Any]):
        if key == self.controller.current_key:
            self.controller.update_pending_input(data)

    def _handle_previous(self):
        self.controller.retreat()

    def _handle_next(self):
        key = self.controller.current_key
        if key == REVIEW:
            self.controller.submit()
        elif key != COMPLETE:
            self.message_label.setVisible(False)
            self.controller.advance(self.forms[key].collect_data())

    def _handle_cancel(self):
        if self.controller.is_submitting:
            return
        if self.controller.state.status == WizardState.STATUS_IN_PROGRESS:
            if not self.confirm_cancel():
                return
            self.controller.cancel()
            self.wizard_cancelled.emit()
        self.close()

    def _handle_save_draft(self):
        self.save_draft()

    # =========================================================================
    # Event Handlers
    # =========================================================================

    def _render(self, snapshot: WizardSnapshot):
        """Show the page of the current step and refresh header and footer."""
        key = snapshot.current_key
        if key == REVIEW:
            self.review_panel.render(snapshot)
            self._show_page(key, self.review_panel)
            step_title = tr("wizard.review.title")
        elif key == COMPLETE:
            self.completion_panel.render(snapshot)
            self._show_page(key, self.completion_panel)
            step_title = tr("wizard.complete.title")
        else:
            form = self.forms[key]
            if self._shown_key != key:
                form.on_show(snapshot.results.get(key))
                self._show_page(key, form)
            step_title = form.get_step_title()

        progress = snapshot.progress
        self.step_title_label.setText(step_title)
        self.progress_label.setText(tr("wizard.progress", current=progress.ordinal, total=progress.total))
        self.progress_bar.setValue(progress.percentage)
        self._update_navigation_buttons(snapshot)

    def _show_page(self, key: str, page: QWidget):
        previous = self.forms.get(self._shown_key)
        if previous is not None and previous is not page:
            previous.on_hide()
        self.step_container.setCurrentWidget(page)
        self._shown_key = key

    def _update_navigation_buttons(self, snapshot: WizardSnapshot):
        locked = snapshot.is_submitting
        active = snapshot.status == WizardState.STATUS_IN_PROGRESS
        first_visible = snapshot.visible_keys[0] if snapshot.visible_keys else None

        self.btn_previous.setEnabled(
            active and not locked and snapshot.current_key not in (first_visible, COMPLETE)
        )
        self.btn_next.setEnabled(active and not locked)
        self.btn_save_draft.setEnabled(active and not locked)
        self.btn_cancel.setEnabled(not locked)

        if snapshot.is_complete:
            self.btn_cancel.setText(tr("wizard.button.close"))
        if snapshot.is_review:
            self.btn_next.setText(
                tr("wizard.button.retry") if snapshot.last_error else self.get_submit_button_text()
            )
        else:
            self.btn_next.setText(tr("wizard.button.next"))

    def _on_navigation_locked(self, locked: bool):
        for button in (self.btn_cancel, self.btn_save_draft, self.btn_previous, self.btn_next):
            button.setEnabled(not locked)
        for button in self.review_panel.edit_buttons.values():
            button.setEnabled(not locked)

    def _on_validation_failed(self, result: StepValidationResult):
        """Show field errors on the form and general errors under it."""
        form = self.current_form()
        if form is not None:
            form.show_validation_result(result)
        if result.errors:
            self.message_label.setText("\n".join(f"• {error}" for error in result.errors))
            self.message_label.setVisible(True)

    def _on_submission_succeeded(self, response: Dict[str, Any]):
        if self.draft_id and self.draft_repository is not None:
            self.draft_repository.delete(self.draft_id)
            self.draft_id = None
        self.wizard_completed.emit(response)
