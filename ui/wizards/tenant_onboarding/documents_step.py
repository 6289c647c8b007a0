# -*- coding: utf-8 -*-
"""
Tenant onboarding - verification documents step.

Each document type is uploaded as soon as a file is picked; the step result
lists the types uploaded successfully, next to the consent checkboxes.
"""

from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Tuple

from PyQt5.QtWidgets import QFileDialog, QHBoxLayout, QLabel, QVBoxLayout, QWidget

from app.config import Config, Vocabularies
from services.error_mapper import map_exception
from services.exceptions import ApiException, NetworkException
from services.translation_manager import get_language, tr
from ui.components.action_button import ActionButton
from ui.wizards.framework.base_step import WizardStep
from ui.wizards.framework.form_step import MULTI_CHOICE, FieldSpec, FormStep, display_value
from utils.logger import get_logger

logger = get_logger(__name__)

UPLOADED_DOCUMENTS = "uploadedDocuments"

STATUS_UPLOADING = "uploading"
STATUS_SUCCESS = "success"
STATUS_ERROR = "error"

# (document_type, file_path) -> server response
DocumentUploader = Callable[[str, str], Dict[str, Any]]


class DocumentsStep(FormStep):
    """Upload rows for each document type followed by the consent fields."""

    def __init__(self, definition: WizardStep, fields: Sequence[FieldSpec],
                 uploader: DocumentUploader, parent: Optional[QWidget] = None):
        super().__init__(definition, fields, parent)
        self.uploader = uploader
        self.document_spec = FieldSpec(
            UPLOADED_DOCUMENTS, "tenant.field.uploaded_documents",
            MULTI_CHOICE, Vocabularies.DOCUMENT_TYPES
        )
        self._statuses: Dict[str, str] = {}
        self._status_labels: Dict[str, QLabel] = {}
        self.upload_buttons: Dict[str, ActionButton] = {}
        self.last_upload_error = ""

    # =========================================================================
    # UI
    # =========================================================================

    def setup_ui(self):
        german = get_language() == "de"

        for code, name_en, name_de in Vocabularies.DOCUMENT_TYPES:
            row = QWidget()
            row.setObjectName("documentRow")
            row.setStyleSheet(
                f"#documentRow {{ border: 1px solid {Config.BORDER_COLOR}; border-radius: 6px; }}"
            )
            layout = QHBoxLayout(row)
            layout.setContentsMargins(12, 8, 12, 8)

            label = QLabel(name_de if german else name_en)
            label.setStyleSheet(f"color: {Config.TEXT_COLOR}; font-weight: 600;")
            layout.addWidget(label, 1)

            status_label = QLabel("")
            layout.addWidget(status_label)
            self._status_labels[code] = status_label

            button = ActionButton(tr("tenant.documents.choose_file"), variant="secondary", width=130)
            button.clicked.connect(lambda _=False, c=code: self._browse_file(c))
            layout.addWidget(button)
            self.upload_buttons[code] = button

            self.main_layout.addWidget(row)

        error_container = QWidget()
        error_layout = QVBoxLayout(error_container)
        error_layout.setContentsMargins(0, 0, 0, 0)
        error_label = QLabel("")
        error_label.setStyleSheet(f"color: {Config.ERROR_COLOR}; font-size: 11px;")
        error_label.setVisible(False)
        error_layout.addWidget(error_label)
        self._error_labels[UPLOADED_DOCUMENTS] = error_label
        self.main_layout.addWidget(error_container)

        # Consent checkboxes
        super().setup_ui()

    def _browse_file(self, document_type: str):
        file_path, _ = QFileDialog.getOpenFileName(
            self, tr("tenant.documents.dialog_title"), "", Config.DOCUMENT_FILE_FILTER
        )
        if file_path:
            self.upload_document(document_type, file_path)

    def _set_status(self, document_type: str, status: Optional[str]):
        if status is None:
            self._statuses.pop(document_type, None)
        else:
            self._statuses[document_type] = status

        label = self._status_labels.get(document_type)
        if label is not None:
            if status == STATUS_SUCCESS:
                label.setStyleSheet(f"color: {Config.SUCCESS_COLOR};")
            elif status == STATUS_ERROR:
                label.setStyleSheet(f"color: {Config.ERROR_COLOR};")
            else:
                label.setStyleSheet(f"color: {Config.TEXT_LIGHT};")
            label.setText(tr(f"tenant.documents.status.{status}") if status else "")

        uploading = STATUS_UPLOADING in self._statuses.values()
        for code, button in self.upload_buttons.items():
            button.setEnabled(not uploading and self._statuses.get(code) != STATUS_SUCCESS)

    # =========================================================================
    # Upload
    # =========================================================================

    def upload_document(self, document_type: str, file_path: str) -> bool:
        """
        Upload one document and record its status.

        Returns:
            True when the server accepted the file
        """
        if not self._is_initialized:
            self.initialize()

        self._set_status(document_type, STATUS_UPLOADING)
        try:
            self.uploader(document_type, file_path)
        except (ApiException, NetworkException, ValueError) as e:
            logger.error(f"Upload of {document_type} failed: {e}")
            self.last_upload_error = map_exception(e, context="document upload")
            self._set_status(document_type, STATUS_ERROR)
            return False

        logger.info(f"Document {document_type} uploaded")
        self.last_upload_error = ""
        self._set_status(document_type, STATUS_SUCCESS)
        self._error_labels[UPLOADED_DOCUMENTS].setVisible(False)
        self._on_input_changed()
        return True

    def status_of(self, document_type: str) -> Optional[str]:
        return self._statuses.get(document_type)

    # =========================================================================
    # Data
    # =========================================================================

    def collect_data(self) -> Dict[str, Any]:
        data = super().collect_data()
        data[UPLOADED_DOCUMENTS] = [
            code for code, _, _ in Vocabularies.DOCUMENT_TYPES
            if self._statuses.get(code) == STATUS_SUCCESS
        ]
        return data

    def populate_data(self, values: Mapping[str, Any]):
        super().populate_data(values)
        if UPLOADED_DOCUMENTS in values:
            stored = values[UPLOADED_DOCUMENTS]
            uploaded = set()
            if isinstance(stored, (list, tuple)):
                uploaded = {item for item in stored if isinstance(item, str)}
            for code, _, _ in Vocabularies.DOCUMENT_TYPES:
                self._set_status(code, STATUS_SUCCESS if code in uploaded else None)

    def format_summary(self, values: Mapping[str, Any]) -> List[Tuple[str, str]]:
        uploaded = display_value(self.document_spec, values.get(UPLOADED_DOCUMENTS))
        return [(tr(self.document_spec.label), uploaded)] + super().format_summary(values)
