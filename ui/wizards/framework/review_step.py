# -*- coding: utf-8 -*-
"""
Review and completion pages shown after the declared steps.
"""

from typing import Dict, List, Mapping

from PyQt5.QtCore import Qt, pyqtSignal
from PyQt5.QtGui import QFont
from PyQt5.QtWidgets import (
    QFrame, QGridLayout, QHBoxLayout, QLabel, QScrollArea, QVBoxLayout, QWidget
)

from app.config import Config
from services.translation_manager import tr
from ui.components.action_button import ActionButton
from .base_step import BaseStep
from .wizard_context import WizardSnapshot


def _clear_layout(layout):
    while layout.count():
        item = layout.takeAt(0)
        widget = item.widget()
        if widget is not None:
            widget.deleteLater()


class ReviewPanel(QWidget):
    """
    Summary of every visible step with an "Edit" link per section.

    Rebuilt from the snapshot on each render.
    """

    edit_requested = pyqtSignal(str)  # step key

    def __init__(self, forms: Mapping[str, BaseStep], parent=None):
        super().__init__(parent)
        self.forms = forms
        self.edit_buttons: Dict[str, ActionButton] = {}
        self._section_keys: List[str] = []
        self._setup_ui()

    def _setup_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(20, 20, 20, 20)
        layout.setSpacing(12)

        intro = QLabel(tr("wizard.review.intro"))
        intro.setWordWrap(True)
        intro.setStyleSheet(f"color: {Config.TEXT_LIGHT};")
        layout.addWidget(intro)

        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setFrameShape(QFrame.NoFrame)
        content = QWidget()
        self.sections_layout = QVBoxLayout(content)
        self.sections_layout.setContentsMargins(0, 0, 0, 0)
        self.sections_layout.setSpacing(12)
        scroll.setWidget(content)
        layout.addWidget(scroll, 1)

        self.submitting_label = QLabel(tr("wizard.review.submitting"))
        self.submitting_label.setStyleSheet(f"color: {Config.PRIMARY_COLOR};")
        self.submitting_label.setVisible(False)
        layout.addWidget(self.submitting_label)

        self.error_label = QLabel("")
        self.error_label.setWordWrap(True)
        self.error_label.setStyleSheet(
            f"color: {Config.ERROR_COLOR}; background-color: #FEF2F2;"
            f"border: 1px solid {Config.ERROR_COLOR}; border-radius: 4px; padding: 8px;"
        )
        self.error_label.setVisible(False)
        layout.addWidget(self.error_label)

    def section_keys(self) -> List[str]:
        return list(self._section_keys)

    def render(self, snapshot: WizardSnapshot):
        _clear_layout(self.sections_layout)
        self.edit_buttons = {}
        self._section_keys = []

        for key in snapshot.visible_keys:
            form = self.forms[key]
            self.sections_layout.addWidget(self._create_section(key, form, snapshot))
            self._section_keys.append(key)
        self.sections_layout.addStretch()

        self.submitting_label.setVisible(snapshot.is_submitting)
        self.error_label.setText(snapshot.last_error or "")
        self.error_label.setVisible(bool(snapshot.last_error))

    def _create_section(self, key: str, form: BaseStep, snapshot: WizardSnapshot) -> QFrame:
        section = QFrame()
        section.setStyleSheet(
            f"QFrame {{ border: 1px solid {Config.BORDER_COLOR}; border-radius: 6px; }}"
            "QLabel { border: none; }"
        )
        layout = QVBoxLayout(section)
        layout.setContentsMargins(12, 10, 12, 10)

        header = QHBoxLayout()
        title = QLabel(form.get_step_title())
        font = QFont()
        font.setBold(True)
        title.setFont(font)
        header.addWidget(title)
        header.addStretch()

        edit_button = ActionButton(tr("wizard.button.edit"), variant="link", width=70, height=28)
        edit_button.setEnabled(not snapshot.is_submitting)
        edit_button.clicked.connect(lambda checked=False, k=key: self.edit_requested.emit(k))
        header.addWidget(edit_button)
        self.edit_buttons[key] = edit_button
        layout.addLayout(header)

        values = snapshot.results.get(key)
        if values is None:
            missing = QLabel(tr("wizard.review.not_completed"))
            missing.setStyleSheet(f"color: {Config.ERROR_COLOR};")
            layout.addWidget(missing)
            return section

        grid = QGridLayout()
        grid.setHorizontalSpacing(16)
        for row, (label, text) in enumerate(form.format_summary(values)):
            name_label = QLabel(label)
            name_label.setStyleSheet(f"color: {Config.TEXT_LIGHT};")
            value_label = QLabel(text)
            value_label.setWordWrap(True)
            value_label.setTextInteractionFlags(Qt.TextSelectableByMouse)
            grid.addWidget(name_label, row, 0)
            grid.addWidget(value_label, row, 1)
        layout.addLayout(grid)
        return section


class CompletionPanel(QWidget):
    """Confirmation page shown after a successful submission."""

    def __init__(self, parent=None):
        super().__init__(parent)
        layout = QVBoxLayout(self)
        layout.setContentsMargins(40, 40, 40, 40)
        layout.addStretch()

        self.title_label = QLabel(tr("wizard.complete.title"))
        font = QFont()
        font.setPointSize(16)
        font.setBold(True)
        self.title_label.setFont(font)
        self.title_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.title_label)

        self.message_label = QLabel("")
        self.message_label.setAlignment(Qt.AlignCenter)
        self.message_label.setWordWrap(True)
        layout.addWidget(self.message_label)
        layout.addStretch()

    def render(self, snapshot: WizardSnapshot):
        self.message_label.setText(tr("wizard.complete.message", id=snapshot.submission_id))
