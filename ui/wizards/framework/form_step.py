# -*- coding: utf-8 -*-
"""
Form Step - a step form built from field declarations.

Each FieldSpec maps one schema field to an input widget. The form reads raw
values from the widgets, writes stored values back into them and shows
field errors under each input.
"""

from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

from PyQt5.QtCore import QDate
from PyQt5.QtWidgets import (
    QCheckBox, QComboBox, QDateEdit, QHBoxLayout, QLabel, QLineEdit,
    QPlainTextEdit, QVBoxLayout, QWidget
)

from app.config import Config, Vocabularies
from services.translation_manager import get_language, tr
from .base_step import BaseStep, WizardStep

# QDateEdit cannot be empty; its minimum date stands for "no date"
_EMPTY_DATE = QDate(1900, 1, 1)

TEXT = "text"
TEXTAREA = "textarea"
NUMBER = "number"
DATE = "date"
CHOICE = "choice"
MULTI_CHOICE = "multi_choice"
CHECKBOX = "checkbox"


@dataclass(frozen=True)
class FieldSpec:
    """One input on a form step."""
    name: str
    label: str
    kind: str = TEXT
    choices: Optional[Sequence[Tuple[str, str, str]]] = None  # Vocabularies list
    placeholder: str = ""
    default: Any = None


def display_value(spec: FieldSpec, value: Any) -> str:
    """Human-readable rendering of a stored value (review page)."""
    if value is None or value == "" or value == []:
        return "—"
    german = get_language() == "de"
    if spec.kind == CHECKBOX:
        return tr("common.yes") if value else tr("common.no")
    if spec.kind == CHOICE and spec.choices:
        return Vocabularies.get_display_name(spec.choices, value, german)
    if spec.kind == MULTI_CHOICE and spec.choices:
        return ", ".join(Vocabularies.get_display_name(spec.choices, v, german) for v in value)
    if spec.kind == DATE:
        if isinstance(value, str):
            value = date.fromisoformat(value)
        return value.strftime(Config.DATE_FORMAT_DISPLAY)
    if spec.kind == NUMBER and isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


class FormStep(BaseStep):
    """Step form generated from a list of FieldSpec."""

    def __init__(self, definition: WizardStep, fields: Sequence[FieldSpec],
                 parent: Optional[QWidget] = None):
        super().__init__(definition, parent)
        self.fields: List[FieldSpec] = list(fields)
        self._inputs: Dict[str, Any] = {}
        self._error_labels: Dict[str, QLabel] = {}
        self._populating = False

    # =========================================================================
    # UI
    # =========================================================================

    def setup_ui(self):
        for spec in self.fields:
            container = QWidget()
            layout = QVBoxLayout(container)
            layout.setContentsMargins(0, 0, 0, 0)
            layout.setSpacing(4)

            if spec.kind != CHECKBOX:
                label = QLabel(tr(spec.label))
                label.setStyleSheet(f"color: {Config.TEXT_COLOR}; font-weight: 600;")
                layout.addWidget(label)

            widget = self._create_input(spec)
            if isinstance(widget, QWidget):
                layout.addWidget(widget)
            else:
                layout.addLayout(widget)

            error_label = QLabel("")
            error_label.setStyleSheet(f"color: {Config.ERROR_COLOR}; font-size: 11px;")
            error_label.setVisible(False)
            layout.addWidget(error_label)

            self._error_labels[spec.name] = error_label
            self.main_layout.addWidget(container)

        self._populating = True
        try:
            for spec in self.fields:
                if spec.default is not None:
                    self._set_value(spec, spec.default)
        finally:
            self._populating = False

    def _create_input(self, spec: FieldSpec):
        german = get_language() == "de"

        if spec.kind == TEXTAREA:
            widget = QPlainTextEdit()
            widget.setPlaceholderText(tr(spec.placeholder) if spec.placeholder else "")
            widget.setFixedHeight(80)
            widget.textChanged.connect(self._on_input_changed)
        elif spec.kind == DATE:
            widget = QDateEdit()
            widget.setCalendarPopup(True)
            widget.setDisplayFormat("dd/MM/yyyy")
            widget.setMinimumDate(_EMPTY_DATE)
            widget.setSpecialValueText(" ")
            widget.setDate(_EMPTY_DATE)
            widget.dateChanged.connect(self._on_input_changed)
        elif spec.kind == CHOICE:
            widget = QComboBox()
            widget.addItem(tr("common.select"), None)
            for code, name_en, name_de in spec.choices or ():
                widget.addItem(name_de if german else name_en, code)
            widget.currentIndexChanged.connect(self._on_input_changed)
        elif spec.kind == MULTI_CHOICE:
            widget = QHBoxLayout()
            boxes = []
            for code, name_en, name_de in spec.choices or ():
                box = QCheckBox(name_de if german else name_en)
                box.setProperty("code", code)
                box.toggled.connect(self._on_input_changed)
                widget.addWidget(box)
                boxes.append(box)
            widget.addStretch()
            self._inputs[spec.name] = boxes
            return widget
        elif spec.kind == CHECKBOX:
            widget = QCheckBox(tr(spec.label))
            widget.toggled.connect(self._on_input_changed)
        else:
            widget = QLineEdit()
            widget.setPlaceholderText(tr(spec.placeholder) if spec.placeholder else "")
            widget.textChanged.connect(self._on_input_changed)

        self._inputs[spec.name] = widget
        return widget

    def _on_input_changed(self, *_):
        if not self._populating:
            self.emit_input_changed()

    # =========================================================================
    # Data
    # =========================================================================

    def collect_data(self) -> Dict[str, Any]:
        if not self._is_initialized:
            self.initialize()
        data: Dict[str, Any] = {}
        for spec in self.fields:
            widget = self._inputs[spec.name]
            if spec.kind == TEXTAREA:
                data[spec.name] = widget.toPlainText()
            elif spec.kind == DATE:
                qdate = widget.date()
                data[spec.name] = None if qdate == _EMPTY_DATE else qdate.toString("yyyy-MM-dd")
            elif spec.kind == CHOICE:
                data[spec.name] = widget.currentData()
            elif spec.kind == MULTI_CHOICE:
                data[spec.name] = [box.property("code") for box in widget if box.isChecked()]
            elif spec.kind == CHECKBOX:
                data[spec.name] = widget.isChecked()
            else:
                data[spec.name] = widget.text()
        return data

    def populate_data(self, values: Mapping[str, Any]):
        if not self._is_initialized:
            self.initialize()
        self._populating = True
        try:
            for spec in self.fields:
                if spec.name in values:
                    self._set_value(spec, values[spec.name])
        finally:
            self._populating = False

    def _set_value(self, spec: FieldSpec, value: Any):
        widget = self._inputs[spec.name]
        if spec.kind == TEXTAREA:
            widget.setPlainText("" if value is None else str(value))
        elif spec.kind == DATE:
            if value is None:
                widget.setDate(_EMPTY_DATE)
            else:
                text = value.isoformat() if isinstance(value, date) else str(value)
                widget.setDate(QDate.fromString(text, "yyyy-MM-dd"))
        elif spec.kind == CHOICE:
            index = widget.findData(value)
            widget.setCurrentIndex(index if index >= 0 else 0)
        elif spec.kind == MULTI_CHOICE:
            selected = set(value or [])
            for box in widget:
                box.setChecked(box.property("code") in selected)
        elif spec.kind == CHECKBOX:
            widget.setChecked(bool(value))
        else:
            widget.setText(display_value(spec, value) if value not in (None, "") else "")

    # =========================================================================
    # Errors & summary
    # =========================================================================

    def show_field_errors(self, errors: Mapping[str, str]):
        for name, label in self._error_labels.items():
            message = errors.get(name)
            label.setText(message or "")
            label.setVisible(bool(message))

    def field_error(self, name: str) -> str:
        """Currently displayed error of a field ('' if none)."""
        label = self._error_labels.get(name)
        return label.text() if label is not None and not label.isHidden() else ""

    def format_summary(self, values: Mapping[str, Any]) -> List[Tuple[str, str]]:
        return [
            (tr(spec.label), display_value(spec, values.get(spec.name)))
            for spec in self.fields
            if spec.name in values
        ]
