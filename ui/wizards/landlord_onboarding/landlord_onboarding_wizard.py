# -*- coding: utf-8 -*-
"""
Landlord Onboarding Wizard.

Steps:
1. Personal information
2. Property portfolio
3. Financial details
4. Communication preferences
5. Review & Submit

The backend expects one flat record, so step sections are merged before
posting.
"""

from typing import Any, List, Mapping, Tuple

from app.config import Vocabularies, WizardTypes
from services.api_client import get_api_client
from services.submission_gateway import HttpSubmissionGateway, SubmissionGateway
from services.translation_manager import tr
from ui.wizards.framework import BaseStep, BaseWizard, FieldSpec, FormStep, WizardStep
from ui.wizards.framework.form_step import CHECKBOX, CHOICE, MULTI_CHOICE, NUMBER, TEXTAREA
from .schemas import FINANCIAL, PERSONAL, PREFERENCES, PROPERTIES, create_landlord_steps

LANDLORD_FIELDS = {
    PERSONAL: [
        FieldSpec("firstName", "landlord.field.first_name"),
        FieldSpec("lastName", "landlord.field.last_name"),
        FieldSpec("email", "landlord.field.email", placeholder="placeholder.email"),
        FieldSpec("phone", "landlord.field.phone", placeholder="placeholder.phone"),
    ],
    PROPERTIES: [
        FieldSpec("numberOfProperties", "landlord.field.number_of_properties", NUMBER),
        FieldSpec("propertyTypes", "landlord.field.property_types", MULTI_CHOICE,
                  Vocabularies.PROPERTY_TYPES),
        FieldSpec("mainPropertyAddress", "landlord.field.main_address"),
    ],
    FINANCIAL: [
        FieldSpec("bankName", "landlord.field.bank_name"),
        FieldSpec("iban", "landlord.field.iban", placeholder="placeholder.iban"),
        FieldSpec("taxId", "landlord.field.tax_id"),
        FieldSpec("monthlyRentCollection", "landlord.field.monthly_rent", NUMBER),
    ],
    PREFERENCES: [
        FieldSpec("preferredCommunication", "landlord.field.communication", CHOICE,
                  Vocabularies.COMMUNICATION_CHANNELS),
        FieldSpec("receiveReports", "landlord.field.receive_reports", CHECKBOX, default=True),
        FieldSpec("automaticReminders", "landlord.field.automatic_reminders", CHECKBOX, default=True),
        FieldSpec("additionalNotes", "landlord.field.notes", TEXTAREA),
    ],
}


class LandlordOnboardingWizard(BaseWizard):
    """Registers a landlord and their portfolio."""

    WIZARD_TYPE = WizardTypes.LANDLORD_ONBOARDING

    def create_steps(self) -> List[Tuple[WizardStep, BaseStep]]:
        return [
            (definition, FormStep(definition, LANDLORD_FIELDS[definition.key]))
            for definition in create_landlord_steps()
        ]

    def create_gateway(self, context_values: Mapping[str, Any]) -> SubmissionGateway:
        return HttpSubmissionGateway(
            create=get_api_client().submit_landlord_onboarding,
            flatten=True,
        )

    def get_wizard_title(self) -> str:
        return tr("landlord.wizard.title")
