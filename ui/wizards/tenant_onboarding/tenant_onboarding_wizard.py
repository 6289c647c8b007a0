# -*- coding: utf-8 -*-
"""
Tenant Onboarding Wizard.

Steps:
1. Personal information
2. Employment status
3. Employer details (employed or self-employed only)
4. References
5. Banking
6. Lease terms
7. Pet details (only when the tenant has pets)
8. Verification documents (uploaded immediately)
9. Agreement
10. Review & Submit

Context values: `propertyId`, and `tenantId` when completing onboarding of an
existing tenant record (the submission then updates that record).
"""

from typing import Any, Dict, List, Mapping, Tuple

from app.config import WizardTypes
from services.api_client import get_api_client
from services.submission_gateway import HttpSubmissionGateway, SubmissionGateway
from services.translation_manager import tr
from ui.wizards.framework import BaseStep, BaseWizard, FormStep, WizardStep
from .documents_step import DocumentsStep
from .schemas import DOCUMENTS, create_tenant_steps
from .steps import TENANT_FIELDS


class TenantOnboardingWizard(BaseWizard):
    """Collects a new tenant's data and submits it as one onboarding record."""

    WIZARD_TYPE = WizardTypes.TENANT_ONBOARDING

    def create_steps(self) -> List[Tuple[WizardStep, BaseStep]]:
        steps: List[Tuple[WizardStep, BaseStep]] = []
        for definition in create_tenant_steps():
            fields = TENANT_FIELDS[definition.key]
            if definition.key == DOCUMENTS:
                form = DocumentsStep(definition, fields, self.upload_document)
            else:
                form = FormStep(definition, fields)
            steps.append((definition, form))
        return steps

    def create_gateway(self, context_values: Mapping[str, Any]) -> SubmissionGateway:
        client = get_api_client()
        return HttpSubmissionGateway(
            create=client.create_tenant_onboarding,
            update=client.update_tenant_onboarding,
            record_id=context_values.get("tenantId"),
        )

    def upload_document(self, document_type: str, file_path: str) -> Dict[str, Any]:
        """Send one verification document for this tenant and property."""
        return get_api_client().upload_tenant_document(
            file_path,
            document_type,
            tenant_id=self.context_values.get("tenantId"),
            property_id=self.context_values.get("propertyId"),
        )

    def get_wizard_title(self) -> str:
        return tr("tenant.wizard.title")

    def get_submit_button_text(self) -> str:
        return tr("tenant.wizard.submit")
